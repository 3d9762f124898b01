"""Command entrypoint for the linenet_explorer package."""

from __future__ import annotations

import argparse
import logging

from linenet_explorer.app import main as ui_main


def main() -> None:
    parser = argparse.ArgumentParser(description="Line detector neural network explorer")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (DEBUG shows phase changes and computed layers).",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ui_main()


if __name__ == "__main__":
    main()

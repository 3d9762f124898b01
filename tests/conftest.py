"""Test configuration shared across this project's pytest suite."""

from __future__ import annotations

import sys
from pathlib import Path


# Make `linenet_explorer` importable from src/ when the package is not installed.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

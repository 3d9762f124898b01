"""Phases of the two-click reveal."""

from __future__ import annotations

from enum import Enum


class Phase(Enum):
    """Where the session is in the reveal.

    IDLE: nothing painted, main action disabled.
    ARMED: something painted, nothing computed yet.
    HIDDEN_COMPUTED: hidden sums shown, next click computes the output.
    COMPLETED: output and label shown, action disabled until the pattern changes.
    """

    IDLE = "idle"
    ARMED = "armed"
    HIDDEN_COMPUTED = "hidden_computed"
    COMPLETED = "completed"

    @property
    def hidden_visible(self) -> bool:
        return self in (Phase.HIDDEN_COMPUTED, Phase.COMPLETED)

    @property
    def output_visible(self) -> bool:
        return self is Phase.COMPLETED

    @property
    def action_enabled(self) -> bool:
        return self in (Phase.ARMED, Phase.HIDDEN_COMPUTED)

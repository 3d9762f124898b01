"""Interaction state machine for one painting session.

The session is the single owner of the pattern, the computed layers and
the phase. Views never mutate any of it directly: they call one of the
actions below and re-render from the snapshot handed to their listener.

Two clicks, two layers:
- first `activate()` computes the hidden layer,
- second `activate()` computes the output layer and the label.
This split is the whole point of the page and must not be merged into
a single forward pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from linenet_explorer.errors import InvalidActionError
from linenet_explorer.model.engine import classify, compute_hidden, compute_output
from linenet_explorer.model.network import HIDDEN_TO_OUTPUT, INPUT_TO_HIDDEN
from linenet_explorer.session.pattern import PatternState
from linenet_explorer.session.phase import Phase
from linenet_explorer.session.projection import HighlightDescriptor, project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of one session state, emitted after every action.

    `hidden` and `output` are empty tuples until their layer has been
    computed; `classification` is None until the session is completed.
    """

    pattern: tuple[int, ...]
    phase: Phase
    hidden: tuple[int, ...]
    output: tuple[int, ...]
    classification: str | None
    highlights: HighlightDescriptor

    @property
    def has_input(self) -> bool:
        return any(bit == 1 for bit in self.pattern)

    @property
    def action_enabled(self) -> bool:
        return self.phase.action_enabled


StateListener = Callable[[SessionSnapshot], None]


class InteractionSession:
    """Owns one session's state and gates which inference step runs next."""

    def __init__(
        self,
        weights: np.ndarray = INPUT_TO_HIDDEN,
        mask: np.ndarray = HIDDEN_TO_OUTPUT,
    ) -> None:
        self.weights = weights
        self.mask = mask
        self._pattern = PatternState()
        self._phase = Phase.IDLE
        self._hidden: tuple[int, ...] = ()
        self._output: tuple[int, ...] = ()
        self._classification: str | None = None
        self._listeners: list[StateListener] = []

    @property
    def phase(self) -> Phase:
        return self._phase

    # ------------------------------
    # Listeners
    # ------------------------------
    def add_listener(self, listener: StateListener) -> None:
        """Register a callback that receives a snapshot after each action."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> SessionSnapshot:
        """Build a snapshot of the current state, highlights included."""
        pattern = self._pattern.snapshot()
        return SessionSnapshot(
            pattern=pattern,
            phase=self._phase,
            hidden=self._hidden,
            output=self._output,
            classification=self._classification,
            highlights=project(
                pattern,
                self._phase,
                self._hidden,
                self._output,
                weights=self.weights,
                mask=self.mask,
            ),
        )

    def _emit(self) -> SessionSnapshot:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap

    def _set_phase(self, phase: Phase) -> None:
        if phase is not self._phase:
            logger.debug("phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase

    # ------------------------------
    # Actions
    # ------------------------------
    def toggle_cell(self, index: int) -> SessionSnapshot:
        """Flip one grid cell and drop anything computed from the old pattern."""
        self._pattern.toggle(index)
        self._after_pattern_change()
        return self._emit()

    def fill_cell(self, index: int) -> SessionSnapshot | None:
        """Paint one cell during a drag stroke.

        Returns None (and notifies nobody) when the cell was already filled.
        """
        if not self._pattern.fill(index):
            return None
        self._after_pattern_change()
        return self._emit()

    def activate(self) -> SessionSnapshot:
        """Advance the reveal by one layer.

        Raises InvalidActionError in IDLE and COMPLETED; nothing is mutated
        in that case.
        """
        if self._phase is Phase.IDLE:
            raise InvalidActionError("Paint at least one cell before calculating.")
        if self._phase is Phase.COMPLETED:
            raise InvalidActionError("Already complete. Change the pattern or clear to run again.")

        if self._phase is Phase.ARMED:
            hidden = compute_hidden(self._pattern.snapshot(), self.weights)
            self._hidden = tuple(int(v) for v in hidden)
            self._set_phase(Phase.HIDDEN_COMPUTED)
        elif self._phase is Phase.HIDDEN_COMPUTED:
            output = compute_output(self._hidden, self.mask)
            self._output = tuple(int(v) for v in output)
            self._classification = classify(output)
            self._set_phase(Phase.COMPLETED)
            logger.debug("classified %s as %r", self._pattern.snapshot(), self._classification)
        else:
            raise InvalidActionError(f"Unhandled phase {self._phase!r}")
        return self._emit()

    def clear(self) -> SessionSnapshot:
        """Reset the grid and everything computed from it. Always allowed."""
        self._pattern.clear()
        self._discard_computed()
        self._set_phase(Phase.IDLE)
        return self._emit()

    # ------------------------------
    # Internal transitions
    # ------------------------------
    def _discard_computed(self) -> None:
        self._hidden = ()
        self._output = ()
        self._classification = None

    def _after_pattern_change(self) -> None:
        # Whatever was computed belongs to the old pattern.
        self._discard_computed()
        self._set_phase(Phase.ARMED if self._pattern.has_input else Phase.IDLE)

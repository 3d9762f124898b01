"""Mutable 2x2 input pattern owned by one interaction session."""

from __future__ import annotations

import numpy as np

from linenet_explorer.errors import OutOfRangeError
from linenet_explorer.model.network import INPUT_SIZE


class PatternState:
    """Holds the 4 grid bits and the only operations allowed on them."""

    def __init__(self) -> None:
        self._bits = np.zeros((INPUT_SIZE,), dtype=np.int64)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < INPUT_SIZE:
            raise OutOfRangeError(index, INPUT_SIZE)

    def toggle(self, index: int) -> int:
        """Flip one cell and return its new value."""
        self._check_index(index)
        self._bits[index] = 1 - self._bits[index]
        return int(self._bits[index])

    def fill(self, index: int) -> bool:
        """Set one cell to 1. Returns False when it was already filled.

        Drag painting uses this so sweeping across a filled cell never
        erases it.
        """
        self._check_index(index)
        if self._bits[index] == 1:
            return False
        self._bits[index] = 1
        return True

    def clear(self) -> None:
        self._bits.fill(0)

    def snapshot(self) -> tuple[int, ...]:
        """Return an immutable copy of the current bits."""
        return tuple(int(b) for b in self._bits)

    @property
    def has_input(self) -> bool:
        return bool(np.any(self._bits == 1))

"""Error kinds raised by the linenet explorer core.

Every error here means the caller broke a local contract (bad index,
malformed vector, action not allowed in the current phase). None of them
are transient, so nothing in the core retries or swallows them.
"""

from __future__ import annotations


class LineNetError(Exception):
    """Base class so the view can catch every core error in one place."""


class OutOfRangeError(LineNetError, IndexError):
    """A grid cell index outside [0, 4) was given."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Cell index {index} out of range. Use 0 to {size - 1}.")
        self.index = index
        self.size = size


class ShapeMismatchError(LineNetError, ValueError):
    """A vector or matrix does not have the fixed shape the network expects."""


class InvalidActionError(LineNetError, RuntimeError):
    """An action was invoked in a phase that does not allow it."""

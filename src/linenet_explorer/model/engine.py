"""Forward-inference helpers for the fixed line-detector network.

These are pure functions: they never touch session or UI state, so the
same pattern always gives the same result. The session calls them one
layer at a time to drive the two-click reveal; `forward` exists for
tests and quick checks where both layers are wanted at once.
"""

from __future__ import annotations

import logging

import numpy as np

from linenet_explorer.errors import ShapeMismatchError
from linenet_explorer.model.network import (
    CLASS_AMBIGUOUS,
    CLASS_HORIZONTAL,
    CLASS_VERTICAL,
    HIDDEN_TO_OUTPUT,
    INPUT_TO_HIDDEN,
    OUTPUT_SIZE,
    OUTPUT_THRESHOLD,
)

logger = logging.getLogger(__name__)


def _as_vector(
    values: np.ndarray | list[int] | tuple[int, ...],
    size: int,
    name: str,
    binary: bool = False,
) -> np.ndarray:
    """Return `values` as a 1-D int64 array of length `size`.

    Non-integral values are rejected rather than truncated, so 1.5 never
    quietly becomes 1. With `binary=True` every value must be 0 or 1.
    """
    try:
        raw = np.asarray(values)
        vec = raw.astype(np.int64)
    except (TypeError, ValueError) as exc:
        raise ShapeMismatchError(f"{name} must be a vector of integers") from exc
    if vec.ndim != 1 or vec.shape[0] != size:
        raise ShapeMismatchError(f"{name} must have shape ({size},), got {vec.shape}")
    if not np.array_equal(vec, raw):
        raise ShapeMismatchError(f"{name} must hold integers, got {raw.tolist()}")
    if binary and not np.isin(vec, (0, 1)).all():
        raise ShapeMismatchError(f"{name} values must be 0 or 1, got {vec.tolist()}")
    return vec


def _as_matrix(values: np.ndarray, name: str) -> np.ndarray:
    matrix = np.asarray(values)
    if matrix.ndim != 2:
        raise ShapeMismatchError(f"{name} must be 2-D, got shape {matrix.shape}")
    return matrix


def compute_hidden(
    pattern: np.ndarray | list[int] | tuple[int, ...],
    weights: np.ndarray = INPUT_TO_HIDDEN,
) -> np.ndarray:
    """Compute raw hidden-layer sums for one pattern.

    hidden[h] = sum_i pattern[i] * weights[i][h]

    No bias and no squashing: the literal weighted sum is what the page
    shows and what the output threshold is applied to.
    """
    weights = _as_matrix(weights, "weights")
    x = _as_vector(pattern, weights.shape[0], "pattern", binary=True)
    hidden = x @ weights.astype(np.int64)
    logger.debug("hidden sums for pattern %s: %s", x.tolist(), hidden.tolist())
    return hidden


def compute_output(
    hidden: np.ndarray | list[int] | tuple[int, ...],
    mask: np.ndarray = HIDDEN_TO_OUTPUT,
) -> np.ndarray:
    """Compute output bits from hidden sums.

    output[o] is 1 when at least one hidden unit wired to `o` has a sum
    strictly greater than OUTPUT_THRESHOLD. A sum of exactly 1 does not
    fire. Any boolean mask works, rows do not have to be one-hot.
    """
    mask = _as_matrix(mask, "mask").astype(bool)
    h = _as_vector(hidden, mask.shape[0], "hidden")
    above = h > OUTPUT_THRESHOLD
    # (hidden, 1) & (hidden, outputs) -> any over hidden units per output.
    output = np.any(mask & above[:, np.newaxis], axis=0).astype(np.int64)
    logger.debug("output bits for hidden %s: %s", h.tolist(), output.tolist())
    return output


def classify(output: np.ndarray | list[int] | tuple[int, ...]) -> str:
    """Map the two output bits to a class label.

    Both "neither fires" and "both fire" fall back to the ambiguous label.
    """
    bits = _as_vector(output, OUTPUT_SIZE, "output", binary=True)

    out0, out1 = int(bits[0]), int(bits[1])
    if out0 == 1 and out1 == 0:
        return CLASS_HORIZONTAL
    if out0 == 0 and out1 == 1:
        return CLASS_VERTICAL
    if out0 == 1 and out1 == 1:
        return CLASS_AMBIGUOUS
    # Neither output fired.
    return CLASS_AMBIGUOUS


def forward(
    pattern: np.ndarray | list[int] | tuple[int, ...],
    weights: np.ndarray = INPUT_TO_HIDDEN,
    mask: np.ndarray = HIDDEN_TO_OUTPUT,
) -> tuple[np.ndarray, np.ndarray, str]:
    """Run both layers and classify. Returns (hidden, output, label)."""
    hidden = compute_hidden(pattern, weights)
    output = compute_output(hidden, mask)
    return hidden, output, classify(output)

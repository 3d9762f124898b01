"""Fixed 4-4-2 line-detector network.

Grid cell order used everywhere in this project:

    +---+---+
    | 0 | 1 |
    +---+---+
    | 2 | 3 |
    +---+---+

Each hidden unit sums the two cells of one line (a column or a row), so
it reaches 2 only when that whole line is painted. Column detectors feed
output 1 ("1", vertical); row detectors feed output 0 ("一", horizontal).
"""

from __future__ import annotations

import numpy as np


GRID_ROWS = 2
GRID_COLS = 2
INPUT_SIZE = GRID_ROWS * GRID_COLS
HIDDEN_SIZE = 4
OUTPUT_SIZE = 2

# Rows are inputs, columns are hidden units: W[i][h].
INPUT_TO_HIDDEN = np.array(
    [
        [1, 0, 1, 0],  # top-left
        [0, 1, 1, 0],  # top-right
        [1, 0, 0, 1],  # bottom-left
        [0, 1, 0, 1],  # bottom-right
    ],
    dtype=np.int64,
)
INPUT_TO_HIDDEN.setflags(write=False)

# Rows are hidden units, columns are outputs. No weights, only wiring.
HIDDEN_TO_OUTPUT = np.array(
    [
        [False, True],
        [False, True],
        [True, False],
        [True, False],
    ],
    dtype=bool,
)
HIDDEN_TO_OUTPUT.setflags(write=False)

# Hidden units fire once their sum is strictly above this value.
OUTPUT_THRESHOLD = 1

INPUT_NAMES = ("top-left", "top-right", "bottom-left", "bottom-right")
HIDDEN_NAMES = ("left-vertical", "right-vertical", "top-horizontal", "bottom-horizontal")

CLASS_HORIZONTAL = "一"
CLASS_VERTICAL = "1"
CLASS_AMBIGUOUS = "一 or 1"

OUTPUT_LABELS = (f'"{CLASS_HORIZONTAL}"', f'"{CLASS_VERTICAL}"')

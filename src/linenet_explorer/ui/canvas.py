"""Canvas helpers for the 2x2 paint grid."""

from __future__ import annotations

import tkinter as tk
from typing import Sequence

import numpy as np

from linenet_explorer.model.network import GRID_COLS, GRID_ROWS
from linenet_explorer.ui.constants import COLOR_CELL_EMPTY, COLOR_CELL_FILLED, COLOR_CELL_OUTLINE


def cell_index_at(x: float, y: float, margin: int, size: int) -> int | None:
    """Map a canvas point to a grid cell index, or None outside the grid."""
    if x < margin or y < margin or x >= margin + size or y >= margin + size:
        return None
    col = int((x - margin) / (size / GRID_COLS))
    row = int((y - margin) / (size / GRID_ROWS))
    return row * GRID_COLS + col


def draw_pixel_grid(
    canvas: tk.Canvas,
    pattern: Sequence[int],
    margin: int,
    size: int,
) -> None:
    """Draw the binary pattern as a 2x2 grid of filled/empty cells.

    Rectangle items are created once and cached on the canvas; later calls
    only reconfigure cells whose value changed since the last draw.
    """
    bits = np.asarray(pattern, dtype=np.int16).reshape(GRID_ROWS, GRID_COLS)
    key = (GRID_ROWS, GRID_COLS, margin, size)
    cache = getattr(canvas, "_pixel_grid_cache", None)

    if cache is None or cache.get("key") != key:
        canvas.delete("all")
        cell_h = size / GRID_ROWS
        cell_w = size / GRID_COLS

        ids: list[list[int]] = []
        for r in range(GRID_ROWS):
            row_ids: list[int] = []
            for c in range(GRID_COLS):
                x0 = margin + c * cell_w
                y0 = margin + r * cell_h
                item_id = canvas.create_rectangle(
                    x0,
                    y0,
                    x0 + cell_w,
                    y0 + cell_h,
                    fill=COLOR_CELL_EMPTY,
                    outline=COLOR_CELL_OUTLINE,
                    width=2,
                )
                row_ids.append(item_id)
            ids.append(row_ids)

        cache = {
            "key": key,
            "ids": ids,
            # -1 never matches a bit, so the first draw paints every cell.
            "last_bits": np.full((GRID_ROWS, GRID_COLS), -1, dtype=np.int16),
        }
        setattr(canvas, "_pixel_grid_cache", cache)

    changed = np.where(bits != cache["last_bits"])
    ids = cache["ids"]

    for r, c in zip(changed[0], changed[1]):
        color = COLOR_CELL_FILLED if bits[r, c] == 1 else COLOR_CELL_EMPTY
        canvas.itemconfigure(ids[r][c], fill=color)

    cache["last_bits"][changed] = bits[changed]

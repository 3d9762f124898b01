"""Unit tests for paint-grid canvas helpers."""

from __future__ import annotations

from linenet_explorer.ui.canvas import cell_index_at, draw_pixel_grid
from linenet_explorer.ui.constants import COLOR_CELL_EMPTY, COLOR_CELL_FILLED


class _FakeCanvas:
    def __init__(self) -> None:
        self.created = 0
        self.configured: list[tuple[int, str]] = []
        self.deleted = 0
        self._next_id = 1

    def delete(self, _what: str) -> None:
        self.deleted += 1

    def create_rectangle(self, *_args, **_kwargs) -> int:
        item = self._next_id
        self._next_id += 1
        self.created += 1
        return item

    def itemconfigure(self, item: int, **kwargs) -> None:
        self.configured.append((item, kwargs["fill"]))


def test_draw_pixel_grid_reuses_canvas_items_between_calls() -> None:
    canvas = _FakeCanvas()

    draw_pixel_grid(canvas=canvas, pattern=(0, 0, 0, 0), margin=0, size=20)
    assert canvas.created == 4
    # First draw paints every cell once.
    assert len(canvas.configured) == 4

    draw_pixel_grid(canvas=canvas, pattern=(0, 0, 0, 0), margin=0, size=20)
    assert canvas.created == 4
    assert len(canvas.configured) == 4

    draw_pixel_grid(canvas=canvas, pattern=(0, 0, 1, 0), margin=0, size=20)
    assert canvas.created == 4
    assert canvas.configured[-1] == (3, COLOR_CELL_FILLED)
    assert len(canvas.configured) == 5

    draw_pixel_grid(canvas=canvas, pattern=(0, 0, 0, 0), margin=0, size=20)
    assert canvas.configured[-1] == (3, COLOR_CELL_EMPTY)


def test_draw_pixel_grid_rebuilds_cache_when_geometry_changes() -> None:
    canvas = _FakeCanvas()

    draw_pixel_grid(canvas=canvas, pattern=(1, 0, 0, 0), margin=0, size=20)
    draw_pixel_grid(canvas=canvas, pattern=(1, 0, 0, 0), margin=1, size=20)

    assert canvas.deleted == 2
    assert canvas.created == 8


def test_cell_index_at_maps_quadrants_and_rejects_outside_points() -> None:
    # Grid spans [10, 110) on both axes.
    assert cell_index_at(15, 15, margin=10, size=100) == 0
    assert cell_index_at(100, 15, margin=10, size=100) == 1
    assert cell_index_at(15, 100, margin=10, size=100) == 2
    assert cell_index_at(109, 109, margin=10, size=100) == 3
    assert cell_index_at(5, 50, margin=10, size=100) is None
    assert cell_index_at(50, 110, margin=10, size=100) is None

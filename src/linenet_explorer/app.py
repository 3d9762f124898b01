from __future__ import annotations

"""Interactive line-detector UI with a two-click layer-by-layer reveal.

The window is a thin view over one InteractionSession:
- mouse/keyboard events become session actions,
- every snapshot the session emits is rendered in full,
- errors from the core are shown in the status banner.
"""

import logging
import sys
import tkinter as tk
from tkinter import ttk
from pathlib import Path
from typing import Callable

# Allow running this file directly (e.g. `python src/linenet_explorer/app.py`)
# by ensuring `src/` is on sys.path for absolute package imports.
if __package__ in (None, ""):
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from linenet_explorer.errors import LineNetError
from linenet_explorer.session.phase import Phase
from linenet_explorer.session.state_machine import InteractionSession, SessionSnapshot
from linenet_explorer.ui.canvas import cell_index_at, draw_pixel_grid
from linenet_explorer.ui.constants import (
    COLOR_BG,
    COLOR_STATUS_INFO_BG,
    COLOR_STATUS_INFO_FG,
    COLOR_STATUS_WARN_BG,
    COLOR_STATUS_WARN_FG,
    GRID_CANVAS_SIZE,
    GRID_MARGIN,
    STATUS_ARMED,
    STATUS_CLEARED,
    STATUS_COMPLETED,
    STATUS_HIDDEN,
    STATUS_READY,
    WINDOW_MIN_SIZE,
    WINDOW_SIZE,
)
from linenet_explorer.ui.layout import bind_shortcuts, build_layout, configure_styles
from linenet_explorer.ui.network_panel import build_calculation_text, render_network
from linenet_explorer.ui.render import action_button_text

logger = logging.getLogger(__name__)


class LineNetExplorerUI:
    """Main application class: controller and view for one session.

    The session owns all state. This class only keeps what a view needs
    between events: the last snapshot it rendered and the drag stroke.
    """

    def __init__(self, root: tk.Tk, session: InteractionSession | None = None) -> None:
        self.root = root
        self.root.title("Line Detector Neural Network")
        self.root.geometry(WINDOW_SIZE)
        self.root.minsize(*WINDOW_MIN_SIZE)
        self.root.configure(bg=COLOR_BG)

        self.session = session if session is not None else InteractionSession()
        self._snapshot = self.session.snapshot()
        # True between a press on the grid and its release.
        self._drawing = False
        # Last cell touched by the current stroke, so motion inside one cell
        # does not fire repeated actions.
        self._last_draw_cell: int | None = None

        self.status_var = tk.StringVar(value=STATUS_READY)
        self.prediction_var = tk.StringVar(value="Prediction: ?")

        configure_styles(self.root)
        build_layout(self)
        bind_shortcuts(self)

        self.session.add_listener(self._on_state_changed)
        self.render()

    def _set_status(self, message: str, level: str = "info") -> None:
        """Update bottom status banner text + color based on severity."""
        self.status_var.set(message)
        if level == "warn":
            self.status_label.configure(bg=COLOR_STATUS_WARN_BG, fg=COLOR_STATUS_WARN_FG)
        else:
            self.status_label.configure(bg=COLOR_STATUS_INFO_BG, fg=COLOR_STATUS_INFO_FG)

    # ------------------------------
    # Actions forwarded to the session
    # ------------------------------
    def _run_action(self, action: Callable[[], object]) -> bool:
        """Run one session action; report core errors instead of raising."""
        try:
            action()
        except LineNetError as exc:
            logger.warning("rejected action: %s", exc)
            self._set_status(str(exc), level="warn")
            return False
        return True

    def toggle_cell(self, index: int) -> bool:
        return self._run_action(lambda: self.session.toggle_cell(index))

    def fill_cell(self, index: int) -> bool:
        return self._run_action(lambda: self.session.fill_cell(index))

    def activate(self) -> bool:
        """Main button: compute the next layer."""
        return self._run_action(self.session.activate)

    def _on_space_key(self, event: tk.Event) -> bool:
        """Space calculates, unless a button has focus.

        ttk.Button already invokes itself on Space, so handling it here too
        would run that button's command plus a second action.
        """
        if isinstance(getattr(event, "widget", None), ttk.Button):
            return False
        return self.activate()

    def clear_grid(self) -> bool:
        """Clear the grid and reset every computed value."""
        self._drawing = False
        self._last_draw_cell = None
        ok = self._run_action(self.session.clear)
        if ok:
            self._set_status(STATUS_CLEARED, level="info")
        return ok

    # ------------------------------
    # Grid mouse handling
    # ------------------------------
    def _on_press(self, event: tk.Event) -> None:
        """Start a stroke: the pressed cell toggles."""
        index = cell_index_at(event.x, event.y, GRID_MARGIN, GRID_CANVAS_SIZE)
        if index is None:
            return
        self._drawing = True
        self._last_draw_cell = index
        self.toggle_cell(index)

    def _on_drag(self, event: tk.Event) -> None:
        """Continue a stroke: newly entered empty cells get filled."""
        if not self._drawing:
            return
        index = cell_index_at(event.x, event.y, GRID_MARGIN, GRID_CANVAS_SIZE)
        if index is None or index == self._last_draw_cell:
            return
        self._last_draw_cell = index
        self.fill_cell(index)

    def _on_release(self, _event: tk.Event) -> None:
        self._drawing = False
        self._last_draw_cell = None

    # ------------------------------
    # Rendering
    # ------------------------------
    def _on_state_changed(self, snapshot: SessionSnapshot) -> None:
        """Session listener: store the snapshot and redraw everything."""
        self._snapshot = snapshot
        self.prediction_var.set(
            f"Prediction: {snapshot.classification}"
            if snapshot.classification is not None
            else "Prediction: ?"
        )
        self._set_status(self._status_for(snapshot), level="info")
        self.render()

    @staticmethod
    def _status_for(snapshot: SessionSnapshot) -> str:
        if snapshot.phase is Phase.IDLE:
            return STATUS_READY
        if snapshot.phase is Phase.ARMED:
            return STATUS_ARMED
        if snapshot.phase is Phase.HIDDEN_COMPUTED:
            return STATUS_HIDDEN
        return STATUS_COMPLETED.format(label=snapshot.classification)

    def render(self) -> None:
        """Redraw every panel from the last snapshot."""
        snap = self._snapshot
        self._draw_grid(snap)
        self._draw_network(snap)
        self._set_calc_text(build_calculation_text(snap, self.session.weights, self.session.mask))
        self._update_action_button(snap)

    def _draw_grid(self, snapshot: SessionSnapshot) -> None:
        draw_pixel_grid(self.grid_canvas, snapshot.pattern, margin=GRID_MARGIN, size=GRID_CANVAS_SIZE)

    def _draw_network(self, snapshot: SessionSnapshot) -> None:
        render_network(self.network_canvas, snapshot, self.session.weights, self.session.mask)

    def _set_calc_text(self, text: str) -> None:
        """Replace contents of the read-only calculation text box."""
        self.calc_text.configure(state="normal")
        self.calc_text.delete("1.0", "end")
        self.calc_text.insert("1.0", text)
        self.calc_text.configure(state="disabled")

    def _update_action_button(self, snapshot: SessionSnapshot) -> None:
        self.action_button.configure(
            text=action_button_text(snapshot.phase),
            state="normal" if snapshot.action_enabled else "disabled",
        )


def main() -> None:
    root = tk.Tk()
    LineNetExplorerUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()

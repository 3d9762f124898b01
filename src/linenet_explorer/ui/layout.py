"""Layout, style, and key-binding helpers for the line-detector explorer UI."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from linenet_explorer.ui.constants import (
    BUTTON_TEXT_READY,
    COLOR_BG,
    COLOR_CARD,
    COLOR_EDGE,
    COLOR_INK,
    COLOR_NEUTRAL_BTN,
    COLOR_NEUTRAL_BTN_HOVER,
    COLOR_NEUTRAL_BTN_PRESS,
    COLOR_STATUS_INFO_BG,
    COLOR_STATUS_INFO_FG,
    COLOR_SUB,
    GRID_CANVAS_SIZE,
    GRID_MARGIN,
    NETWORK_CANVAS_HEIGHT,
    NETWORK_CANVAS_WIDTH,
)


def configure_styles(root: tk.Tk) -> None:
    """Define ttk style rules so widgets share one visual language."""
    style = ttk.Style(root)
    style.theme_use("clam")

    style.configure("App.TFrame", background=COLOR_BG)

    style.configure(
        "Title.TLabel",
        background=COLOR_BG,
        foreground=COLOR_INK,
        font=("Avenir Next", 20, "bold"),
    )
    style.configure(
        "Subtitle.TLabel",
        background=COLOR_BG,
        foreground=COLOR_SUB,
        font=("Avenir Next", 11),
    )
    style.configure(
        "Section.TLabel",
        background=COLOR_CARD,
        foreground=COLOR_INK,
        font=("Avenir Next", 11, "bold"),
    )
    style.configure(
        "Body.TLabel",
        background=COLOR_CARD,
        foreground=COLOR_SUB,
        font=("Avenir Next", 10),
    )

    style.configure(
        "Card.TLabelframe",
        background=COLOR_CARD,
        foreground=COLOR_INK,
        borderwidth=1,
        relief="solid",
    )
    style.configure(
        "Card.TLabelframe.Label",
        background=COLOR_CARD,
        foreground=COLOR_INK,
        font=("Avenir Next", 10, "bold"),
    )

    style.configure(
        "Neutral.TButton",
        background=COLOR_NEUTRAL_BTN,
        foreground="#1f2937",
        borderwidth=1,
        font=("Avenir Next", 10, "bold"),
        padding=(12, 8),
    )
    style.map(
        "Neutral.TButton",
        background=[("active", COLOR_NEUTRAL_BTN_HOVER), ("pressed", COLOR_NEUTRAL_BTN_PRESS)],
        foreground=[("disabled", "#9ca3af"), ("!disabled", "#111827")],
    )


def bind_shortcuts(ui: object) -> None:
    """Register keyboard shortcuts for fast interaction."""
    for index in range(4):
        ui.root.bind(str(index + 1), lambda _e, i=index: ui.toggle_cell(i))
    ui.root.bind("<Return>", lambda _e: ui.activate())
    ui.root.bind("<KP_Enter>", lambda _e: ui.activate())
    ui.root.bind("<space>", ui._on_space_key)
    ui.root.bind("c", lambda _e: ui.clear_grid())
    ui.root.bind("C", lambda _e: ui.clear_grid())
    ui.root.bind("<Escape>", lambda _e: ui.clear_grid())


def build_layout(ui: object) -> None:
    """Create top-level layout containers and major UI sections."""
    outer = ttk.Frame(ui.root, padding=14, style="App.TFrame")
    outer.pack(fill="both", expand=True)

    _build_header(outer)
    _build_main_area(ui, outer)
    _build_status(ui, outer)


def _build_header(parent: ttk.Frame) -> None:
    header = ttk.Frame(parent, style="App.TFrame")
    header.pack(fill="x", pady=(0, 10))

    ttk.Label(
        header,
        text='Line Detector: "一" or "1"?',
        style="Title.TLabel",
    ).pack(anchor="w")
    ttk.Label(
        header,
        text=(
            "Paint a 2x2 pattern and step through a fixed 4-4-2 network one layer "
            "at a time to see which line detectors fire."
        ),
        style="Subtitle.TLabel",
    ).pack(anchor="w", pady=(2, 0))


def _build_main_area(ui: object, parent: ttk.Frame) -> None:
    results = ttk.Frame(parent, style="App.TFrame")
    results.pack(fill="both", expand=True)

    left = ttk.LabelFrame(results, text="Input Grid", padding=10, style="Card.TLabelframe")
    left.pack(side="left", fill="y", padx=(0, 10))
    _build_left_panel(ui, left)

    right = ttk.Frame(results, style="App.TFrame")
    right.pack(side="left", fill="both", expand=True)

    network_frame = ttk.LabelFrame(
        right,
        text="Network",
        padding=10,
        style="Card.TLabelframe",
    )
    network_frame.pack(fill="both", expand=True)

    ui.network_canvas = tk.Canvas(
        network_frame,
        width=NETWORK_CANVAS_WIDTH,
        height=NETWORK_CANVAS_HEIGHT,
        bg="#f4f8ff",
        highlightthickness=1,
        highlightbackground=COLOR_EDGE,
    )
    ui.network_canvas.pack(fill="both", expand=True)
    ui.network_canvas.bind("<Configure>", lambda _e: ui.render())

    calc_frame = ttk.LabelFrame(
        right,
        text="Calculation (input x weight)",
        padding=8,
        style="Card.TLabelframe",
    )
    calc_frame.pack(fill="both", expand=False, pady=(8, 0))

    ui.calc_text = tk.Text(
        calc_frame,
        width=102,
        height=11,
        wrap="word",
        bg="#fcfdff",
        fg=COLOR_INK,
        font=("Menlo", 11),
        highlightthickness=1,
        highlightbackground=COLOR_EDGE,
        relief="flat",
        padx=10,
        pady=10,
    )
    calc_scroll = ttk.Scrollbar(calc_frame, orient="vertical", command=ui.calc_text.yview)
    ui.calc_text.configure(yscrollcommand=calc_scroll.set)
    ui.calc_text.pack(side="left", fill="both", expand=True)
    calc_scroll.pack(side="right", fill="y")
    ui.calc_text.configure(state="disabled")


def _build_status(ui: object, parent: ttk.Frame) -> None:
    status_frame = ttk.Frame(parent, style="App.TFrame")
    status_frame.pack(fill="x", pady=(8, 0))

    ui.status_label = tk.Label(
        status_frame,
        textvariable=ui.status_var,
        bg=COLOR_STATUS_INFO_BG,
        fg=COLOR_STATUS_INFO_FG,
        font=("Avenir Next", 10, "bold"),
        padx=10,
        pady=8,
        anchor="w",
        relief="flat",
    )
    ui.status_label.pack(fill="x", anchor="w")


def _build_left_panel(ui: object, container: ttk.LabelFrame) -> None:
    ui.grid_canvas = tk.Canvas(
        container,
        width=GRID_CANVAS_SIZE + 2 * GRID_MARGIN,
        height=GRID_CANVAS_SIZE + 2 * GRID_MARGIN,
        bg=COLOR_CARD,
        highlightthickness=1,
        highlightbackground=COLOR_EDGE,
        cursor="crosshair",
        takefocus=1,
    )
    ui.grid_canvas.pack()
    ui.grid_canvas.bind("<ButtonPress-1>", ui._on_press)
    ui.grid_canvas.bind("<B1-Motion>", ui._on_drag)
    ui.grid_canvas.bind("<ButtonRelease-1>", ui._on_release)

    ttk.Label(
        container,
        text=(
            "Click a cell to toggle it. Hold and drag to fill\n"
            "more cells. Keys 1-4 toggle cells too."
        ),
        style="Body.TLabel",
    ).pack(anchor="w", pady=(8, 0))

    buttons = ttk.Frame(container, style="App.TFrame")
    buttons.pack(fill="x", pady=(12, 0))

    ui.action_button = ttk.Button(
        buttons,
        text=BUTTON_TEXT_READY,
        command=ui.activate,
        style="Neutral.TButton",
    )
    ui.action_button.pack(side="left", padx=(0, 8))

    ttk.Button(
        buttons,
        text="Clear",
        command=ui.clear_grid,
        style="Neutral.TButton",
    ).pack(side="left")

    ttk.Label(container, textvariable=ui.prediction_var, style="Section.TLabel").pack(
        anchor="w", pady=(14, 0)
    )
    ttk.Label(
        container,
        text="Shortcuts: Enter/Space=calculate, C/Esc=clear.",
        style="Body.TLabel",
    ).pack(anchor="w", pady=(6, 0))

"""Rendering and explanation helpers for the network panel."""

from __future__ import annotations

import tkinter as tk

import numpy as np

from linenet_explorer.model.network import (
    HIDDEN_NAMES,
    INPUT_NAMES,
    OUTPUT_LABELS,
    OUTPUT_THRESHOLD,
)
from linenet_explorer.session.projection import ActivationLevel
from linenet_explorer.session.state_machine import SessionSnapshot
from linenet_explorer.ui.constants import (
    COLOR_CARD,
    COLOR_EDGE,
    COLOR_HIDDEN,
    COLOR_IDLE_LINE,
    COLOR_IDLE_NODE,
    COLOR_INK,
    COLOR_INPUT,
    COLOR_OUTPUT,
    COLOR_SUB,
    LINE_WIDTH_ACTIVE,
    LINE_WIDTH_IDLE,
    NETWORK_MIN_HEIGHT,
    NETWORK_MIN_WIDTH,
    NODE_RADIUS,
    PREDICTION_PLACEHOLDER,
)
from linenet_explorer.ui.render import (
    edge_label_fraction,
    format_activation,
    layer_y_positions,
    level_fill,
    level_line_color,
    point_along,
)


def _unit_name(names: tuple[str, ...], index: int, prefix: str) -> str:
    return names[index] if index < len(names) else f"{prefix}{index}"


def _line_width(active: bool) -> int:
    return LINE_WIDTH_ACTIVE if active else LINE_WIDTH_IDLE


def _draw_node(
    canvas: tk.Canvas,
    x: float,
    y: float,
    fill: str,
    outline: str,
    title: str,
    value: str,
) -> None:
    r = NODE_RADIUS
    canvas.create_oval(x - r, y - r, x + r, y + r, fill=fill, outline=outline, width=2)
    canvas.create_text(x, y - 6, text=value, font=("Helvetica", 11, "bold"), fill=COLOR_INK)
    canvas.create_text(x, y + r + 10, text=title, font=("Helvetica", 9), fill=COLOR_SUB)


def _draw_edge_label(
    canvas: tk.Canvas,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    src: int,
    dst: int,
    text: str,
    color: str,
) -> None:
    lx, ly = point_along(x1, y1, x2, y2, edge_label_fraction(src, dst))
    canvas.create_rectangle(lx - 7, ly - 8, lx + 7, ly + 8, fill=COLOR_CARD, outline="")
    canvas.create_text(lx, ly, text=text, font=("Helvetica", 9, "bold"), fill=color)


def render_network(
    canvas: tk.Canvas,
    snapshot: SessionSnapshot,
    weights: np.ndarray,
    mask: np.ndarray,
) -> None:
    """Draw every node and connection, highlighted from the snapshot."""
    canvas.delete("all")

    width = max(canvas.winfo_width(), NETWORK_MIN_WIDTH)
    height = max(canvas.winfo_height(), NETWORK_MIN_HEIGHT)
    hl = snapshot.highlights
    n_inputs, n_hidden = weights.shape
    n_outputs = mask.shape[1]

    canvas.create_rectangle(0, 0, width, height, fill="#f8fafc", outline="")
    canvas.create_rectangle(0, 0, width, 44, fill="#eef2ff", outline="")
    canvas.create_text(
        14,
        12,
        text="Grid -> Input(4) -> Hidden(4, weighted sum) -> Output(2, sum > 1) -> Prediction",
        anchor="nw",
        font=("Helvetica", 11, "bold"),
        fill=COLOR_INK,
    )

    top = 96
    bottom = height - 60
    x_grid = 0.0
    x_in = width * 0.12
    x_hid = width * 0.40
    x_out = width * 0.66
    x_pred = width * 0.88
    ys_in = layer_y_positions(top, bottom, n_inputs)
    ys_hid = layer_y_positions(top, bottom, n_hidden)
    ys_out = layer_y_positions(top + 60, bottom - 60, n_outputs)
    y_pred = (top + bottom) / 2.0
    r = NODE_RADIUS

    # Grid -> input connectors.
    for i in range(n_inputs):
        active = i in hl.input_nodes
        canvas.create_line(
            x_grid,
            float(ys_in[i]),
            x_in - r,
            float(ys_in[i]),
            fill=COLOR_INPUT if active else COLOR_IDLE_LINE,
            width=_line_width(active),
        )

    # Input -> hidden connections with their weights.
    for i in range(n_inputs):
        for h in range(n_hidden):
            level = hl.input_hidden_edges[i][h]
            active = level is not ActivationLevel.NONE
            color = level_line_color(level, COLOR_HIDDEN)
            x1, y1, x2, y2 = x_in + r, float(ys_in[i]), x_hid - r, float(ys_hid[h])
            canvas.create_line(x1, y1, x2, y2, fill=color, width=_line_width(active))
            _draw_edge_label(
                canvas, x1, y1, x2, y2, i, h, str(int(weights[i][h])), color if active else COLOR_SUB
            )

    # Hidden -> output connections, only where wired.
    for h in range(n_hidden):
        for o in range(n_outputs):
            if not mask[h][o]:
                continue
            active = hl.hidden_output_edges[h][o]
            color = COLOR_OUTPUT if active else COLOR_IDLE_LINE
            x1, y1, x2, y2 = x_hid + r, float(ys_hid[h]), x_out - r, float(ys_out[o])
            canvas.create_line(x1, y1, x2, y2, fill=color, width=_line_width(active))
            _draw_edge_label(canvas, x1, y1, x2, y2, h, o, "f", color if active else COLOR_SUB)

    # Output -> prediction connectors.
    for o in range(n_outputs):
        active = o in hl.output_nodes
        canvas.create_line(
            x_out + r,
            float(ys_out[o]),
            x_pred - 50,
            y_pred,
            fill=COLOR_OUTPUT if active else COLOR_IDLE_LINE,
            width=_line_width(active),
        )

    for i in range(n_inputs):
        on = i in hl.input_nodes
        _draw_node(
            canvas,
            x_in,
            float(ys_in[i]),
            fill=COLOR_INPUT if on else COLOR_IDLE_NODE,
            outline=COLOR_INPUT,
            title=_unit_name(INPUT_NAMES, i, "x"),
            value=str(snapshot.pattern[i]),
        )

    for h in range(n_hidden):
        value = snapshot.hidden[h] if snapshot.hidden else None
        _draw_node(
            canvas,
            x_hid,
            float(ys_hid[h]),
            fill=level_fill(hl.hidden_levels[h], COLOR_HIDDEN),
            outline=COLOR_HIDDEN,
            title=_unit_name(HIDDEN_NAMES, h, "h"),
            value=format_activation(value),
        )

    for o in range(n_outputs):
        on = o in hl.output_nodes
        value = str(snapshot.output[o]) if snapshot.output else format_activation(None)
        _draw_node(
            canvas,
            x_out,
            float(ys_out[o]),
            fill=COLOR_OUTPUT if on else COLOR_IDLE_NODE,
            outline=COLOR_OUTPUT,
            title=_unit_name(OUTPUT_LABELS, o, "y"),
            value=value,
        )

    label = snapshot.classification if snapshot.classification is not None else PREDICTION_PLACEHOLDER
    canvas.create_rectangle(
        x_pred - 50,
        y_pred - 36,
        x_pred + 60,
        y_pred + 36,
        fill="#dcfce7" if hl.label_active else COLOR_CARD,
        outline=COLOR_OUTPUT if hl.label_active else COLOR_EDGE,
        width=2,
    )
    canvas.create_text(x_pred + 5, y_pred - 50, text="Prediction", font=("Helvetica", 10, "bold"), fill=COLOR_INK)
    canvas.create_text(x_pred + 5, y_pred, text=label, font=("Helvetica", 18, "bold"), fill=COLOR_INK)


def build_calculation_text(
    snapshot: SessionSnapshot,
    weights: np.ndarray,
    mask: np.ndarray,
) -> str:
    """Explain how each shown value was computed, layer by layer."""
    if not snapshot.hidden:
        return "Press Calculate to compute the hidden layer.\n  hidden[h] = sum_i input[i] * W[i, h]"

    n_inputs, n_hidden = weights.shape
    blocks = ["A) Hidden layer: hidden[h] = sum_i input[i] * W[i, h]"]
    for h in range(n_hidden):
        terms = " + ".join(f"{snapshot.pattern[i]}x{int(weights[i][h])}" for i in range(n_inputs))
        name = _unit_name(HIDDEN_NAMES, h, "h")
        blocks.append(f"  {name:<18} = {terms} = {snapshot.hidden[h]}")

    blocks.append("")
    if not snapshot.output:
        blocks.append("Press Calculate again to compute the output layer.")
        return "\n".join(blocks)

    blocks.append(f"B) Output layer: output[o] = 1 if any connected hidden sum > {OUTPUT_THRESHOLD}")
    for o in range(mask.shape[1]):
        sources = ", ".join(
            f"{_unit_name(HIDDEN_NAMES, h, 'h')}({snapshot.hidden[h]})"
            for h in range(n_hidden)
            if mask[h][o]
        )
        label = _unit_name(OUTPUT_LABELS, o, "y")
        blocks.append(f"  {label:<5} <- {sources or 'no connections'} -> {snapshot.output[o]}")

    blocks.append("")
    blocks.append(f"Prediction: {snapshot.classification}")
    return "\n".join(blocks)

"""Reusable math/color helpers for visualization rendering.

These helpers are pure functions (no UI state), which makes them easy
to test and easy to reuse in other visualization modules.
"""

from __future__ import annotations

import numpy as np

from linenet_explorer.session.phase import Phase
from linenet_explorer.session.projection import ActivationLevel
from linenet_explorer.ui.constants import (
    BUTTON_TEXT_CALCULATE,
    BUTTON_TEXT_COMPLETE,
    BUTTON_TEXT_READY,
    COLOR_IDLE_LINE,
    COLOR_IDLE_NODE,
    EDGE_LABEL_FAR,
    EDGE_LABEL_NEAR,
    PARTIAL_INTENSITY,
)


def mix_with_white(hex_color: str, intensity: float) -> str:
    """Blend a color with white based on intensity in [0,1].

    intensity=0 -> white
    intensity=1 -> original color
    """
    # Clamp value so invalid inputs still produce valid color output.
    intensity = float(np.clip(intensity, 0.0, 1.0))
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    rr = int((255 * (1.0 - intensity)) + (r * intensity))
    gg = int((255 * (1.0 - intensity)) + (g * intensity))
    bb = int((255 * (1.0 - intensity)) + (b * intensity))
    return f"#{rr:02x}{gg:02x}{bb:02x}"


def layer_y_positions(top: float, bottom: float, count: int) -> np.ndarray:
    """Return evenly spaced y positions between top and bottom."""
    if count <= 1:
        # If only one node, center it vertically.
        return np.array([(top + bottom) / 2.0], dtype=np.float32)
    return np.linspace(top, bottom, num=count, dtype=np.float32)


def level_fill(level: ActivationLevel, base_color: str) -> str:
    """Node fill color for an activation tier."""
    if level is ActivationLevel.FULL:
        return base_color
    if level is ActivationLevel.PARTIAL:
        return mix_with_white(base_color, PARTIAL_INTENSITY)
    return COLOR_IDLE_NODE


def level_line_color(level: ActivationLevel, base_color: str) -> str:
    """Connection color for an activation tier."""
    if level is ActivationLevel.FULL:
        return base_color
    if level is ActivationLevel.PARTIAL:
        return mix_with_white(base_color, PARTIAL_INTENSITY)
    return COLOR_IDLE_LINE


def format_activation(value: int | None) -> str:
    """Format a hidden sum the way the node shows it ("2.0"; "0.0" if unknown)."""
    if value is None:
        return "0.0"
    return f"{float(value):.1f}"


def action_button_text(phase: Phase) -> str:
    """Label of the main action button for a phase."""
    if phase is Phase.IDLE:
        return BUTTON_TEXT_READY
    if phase is Phase.COMPLETED:
        return BUTTON_TEXT_COMPLETE
    return BUTTON_TEXT_CALCULATE


def edge_label_fraction(src: int, dst: int) -> float:
    """How far along an edge its label sits; alternates to avoid overlaps."""
    return EDGE_LABEL_NEAR if (src + dst) % 2 == 0 else EDGE_LABEL_FAR


def point_along(x1: float, y1: float, x2: float, y2: float, fraction: float) -> tuple[float, float]:
    """Linear interpolation between two points."""
    return x1 + (x2 - x1) * fraction, y1 + (y2 - y1) * fraction

"""Unit tests for visualization utility helpers."""

from __future__ import annotations

import numpy as np

from linenet_explorer.session.phase import Phase
from linenet_explorer.session.projection import ActivationLevel
from linenet_explorer.ui.constants import COLOR_IDLE_LINE, COLOR_IDLE_NODE, PARTIAL_INTENSITY
from linenet_explorer.ui.render import (
    action_button_text,
    edge_label_fraction,
    format_activation,
    layer_y_positions,
    level_fill,
    level_line_color,
    mix_with_white,
    point_along,
)


def test_mix_with_white_respects_bounds() -> None:
    # Intensity 0 means full white, intensity 1 means original color.
    assert mix_with_white("#123456", 0.0) == "#ffffff"
    assert mix_with_white("#123456", 1.0) == "#123456"
    # Values above 1.0 are clamped.
    assert mix_with_white("#123456", 2.0) == "#123456"


def test_mix_with_white_half_intensity_matches_expected_blend() -> None:
    assert mix_with_white("#ff0000", 0.5) == "#ff7f7f"


def test_layer_y_positions_handles_single_and_multi_counts() -> None:
    single = layer_y_positions(10.0, 30.0, 1)
    assert np.allclose(single, np.array([20.0], dtype=np.float32))

    multi = layer_y_positions(10.0, 30.0, 3)
    assert np.allclose(multi, np.array([10.0, 20.0, 30.0], dtype=np.float32))
    assert multi.dtype == np.float32


def test_level_colors_follow_tiers() -> None:
    base = "#d97706"
    assert level_fill(ActivationLevel.FULL, base) == base
    assert level_fill(ActivationLevel.PARTIAL, base) == mix_with_white(base, PARTIAL_INTENSITY)
    assert level_fill(ActivationLevel.NONE, base) == COLOR_IDLE_NODE
    assert level_line_color(ActivationLevel.FULL, base) == base
    assert level_line_color(ActivationLevel.NONE, base) == COLOR_IDLE_LINE


def test_format_activation_uses_one_decimal() -> None:
    assert format_activation(None) == "0.0"
    assert format_activation(0) == "0.0"
    assert format_activation(2) == "2.0"


def test_action_button_text_by_phase() -> None:
    assert action_button_text(Phase.IDLE) == "Ready"
    assert action_button_text(Phase.ARMED) == "Calculate"
    assert action_button_text(Phase.HIDDEN_COMPUTED) == "Calculate"
    assert action_button_text(Phase.COMPLETED) == "Complete"


def test_edge_labels_alternate_along_connections() -> None:
    assert edge_label_fraction(0, 0) == 0.2
    assert edge_label_fraction(0, 1) == 0.8
    assert point_along(0.0, 0.0, 10.0, 20.0, 0.2) == (2.0, 4.0)

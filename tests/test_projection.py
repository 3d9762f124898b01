"""Tests for the highlight projection."""

from __future__ import annotations

import pytest

from linenet_explorer.errors import ShapeMismatchError
from linenet_explorer.session.phase import Phase
from linenet_explorer.session.projection import ActivationLevel, activation_level, project

NONE = ActivationLevel.NONE
PARTIAL = ActivationLevel.PARTIAL
FULL = ActivationLevel.FULL


def test_activation_level_tiers() -> None:
    assert activation_level(0) is NONE
    assert activation_level(1) is PARTIAL
    assert activation_level(2) is FULL
    assert activation_level(5) is FULL


def test_armed_phase_only_highlights_inputs() -> None:
    hl = project((1, 0, 0, 1), Phase.ARMED)
    assert hl.input_nodes == frozenset({0, 3})
    assert hl.hidden_levels == (NONE,) * 4
    assert all(level is NONE for row in hl.input_hidden_edges for level in row)
    assert not any(flag for row in hl.hidden_output_edges for flag in row)
    assert hl.output_nodes == frozenset()
    assert not hl.label_active


def test_hidden_phase_highlights_edges_with_target_tier() -> None:
    pattern = (1, 1, 0, 0)
    hl = project(pattern, Phase.HIDDEN_COMPUTED, hidden=(1, 1, 2, 0))

    assert hl.hidden_levels == (PARTIAL, PARTIAL, FULL, NONE)
    # Top-left feeds left-vertical (partial) and top-horizontal (full).
    assert hl.input_hidden_edges[0] == (PARTIAL, NONE, FULL, NONE)
    # Top-right feeds right-vertical (partial) and top-horizontal (full).
    assert hl.input_hidden_edges[1] == (NONE, PARTIAL, FULL, NONE)
    # Unpainted inputs never light their edges.
    assert hl.input_hidden_edges[2] == (NONE,) * 4
    assert hl.input_hidden_edges[3] == (NONE,) * 4
    # Output side stays dark until the second click.
    assert hl.output_nodes == frozenset()
    assert not any(flag for row in hl.hidden_output_edges for flag in row)


def test_completed_phase_lights_connected_paths_to_fired_outputs() -> None:
    hl = project((1, 1, 0, 0), Phase.COMPLETED, hidden=(1, 1, 2, 0), output=(1, 0))

    assert hl.output_nodes == frozenset({0})
    assert hl.label_active
    # Output 0 is fed by hidden 2 (sum 2) and hidden 3 (sum 0).
    assert hl.hidden_output_edges[2] == (True, False)
    assert hl.hidden_output_edges[3] == (False, False)
    # Hidden 0 and 1 feed output 1, which did not fire.
    assert hl.hidden_output_edges[0] == (False, False)
    assert hl.hidden_output_edges[1] == (False, False)


def test_edges_into_unfired_output_stay_dark() -> None:
    # Left column: hidden 2 and 3 are 1 each, output 0 does not fire,
    # hidden 0 is 2 so output 1 fires.
    hl = project((1, 0, 1, 0), Phase.COMPLETED, hidden=(2, 0, 1, 1), output=(0, 1))
    assert hl.hidden_output_edges[0] == (False, True)
    assert hl.hidden_output_edges[1] == (False, False)
    assert hl.hidden_output_edges[2] == (False, False)
    assert hl.hidden_output_edges[3] == (False, False)


def test_partial_hidden_unit_lights_edge_into_fired_output() -> None:
    # Three cells: both outputs fire, and the units at exactly 1
    # (right-vertical, bottom-horizontal) still light their edges.
    hl = project((1, 1, 1, 0), Phase.COMPLETED, hidden=(2, 1, 2, 1), output=(1, 1))
    assert hl.hidden_levels == (FULL, PARTIAL, FULL, PARTIAL)
    assert hl.hidden_output_edges[0] == (False, True)
    assert hl.hidden_output_edges[1] == (False, True)
    assert hl.hidden_output_edges[2] == (True, False)
    assert hl.hidden_output_edges[3] == (True, False)


def test_dark_hidden_unit_never_lights_edge_into_fired_output() -> None:
    # Top row: output 0 fires through hidden 2, hidden 3 sums to 0.
    hl = project((1, 1, 0, 0), Phase.COMPLETED, hidden=(1, 1, 2, 0), output=(1, 0))
    assert hl.hidden_output_edges[3] == (False, False)


def test_both_outputs_fired_light_every_wired_edge() -> None:
    hl = project((1, 1, 1, 1), Phase.COMPLETED, hidden=(2, 2, 2, 2), output=(1, 1))
    assert hl.output_nodes == frozenset({0, 1})
    assert [row.count(True) for row in hl.hidden_output_edges] == [1, 1, 1, 1]


def test_projection_rejects_malformed_inputs() -> None:
    with pytest.raises(ShapeMismatchError):
        project((1, 0, 0), Phase.ARMED)
    with pytest.raises(ShapeMismatchError):
        project((1, 0, 0, 0), Phase.HIDDEN_COMPUTED, hidden=(1, 0))
    with pytest.raises(ShapeMismatchError):
        project((1, 0, 0, 0), Phase.COMPLETED, hidden=(1, 0, 1, 0), output=())

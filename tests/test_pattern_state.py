"""Tests for the 4-bit pattern holder."""

from __future__ import annotations

import pytest

from linenet_explorer.errors import OutOfRangeError
from linenet_explorer.session.pattern import PatternState


def test_new_pattern_is_empty() -> None:
    pattern = PatternState()
    assert pattern.snapshot() == (0, 0, 0, 0)
    assert not pattern.has_input


def test_toggle_flips_only_the_given_cell() -> None:
    pattern = PatternState()
    assert pattern.toggle(2) == 1
    assert pattern.snapshot() == (0, 0, 1, 0)
    assert pattern.has_input
    assert pattern.toggle(2) == 0
    assert pattern.snapshot() == (0, 0, 0, 0)


def test_fill_never_erases() -> None:
    pattern = PatternState()
    assert pattern.fill(1) is True
    assert pattern.fill(1) is False
    assert pattern.snapshot() == (0, 1, 0, 0)


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_out_of_range_index_is_rejected_without_mutation(index: int) -> None:
    pattern = PatternState()
    pattern.toggle(0)
    with pytest.raises(OutOfRangeError):
        pattern.toggle(index)
    with pytest.raises(OutOfRangeError):
        pattern.fill(index)
    assert pattern.snapshot() == (1, 0, 0, 0)


def test_clear_is_idempotent() -> None:
    pattern = PatternState()
    pattern.toggle(0)
    pattern.toggle(3)
    pattern.clear()
    once = pattern.snapshot()
    pattern.clear()
    assert pattern.snapshot() == once == (0, 0, 0, 0)


def test_snapshot_is_an_immutable_copy() -> None:
    pattern = PatternState()
    snap = pattern.snapshot()
    pattern.toggle(0)
    assert snap == (0, 0, 0, 0)
    assert isinstance(snap, tuple)

"""Derive what the view should highlight from the current session state.

This is a pure function of (pattern, phase, hidden, output) plus the
network wiring. It keeps no state of its own and is recomputed in full
after every action, so the view never has to diff anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from linenet_explorer.errors import ShapeMismatchError
from linenet_explorer.model.network import HIDDEN_TO_OUTPUT, INPUT_TO_HIDDEN
from linenet_explorer.session.phase import Phase


class ActivationLevel(Enum):
    """Display tier for nodes and connections. Not used in the numeric path."""

    NONE = "none"
    PARTIAL = "partial"
    FULL = "full"


@dataclass(frozen=True)
class HighlightDescriptor:
    """Everything a view needs to decide which elements light up.

    Edge matrices are indexed the same way as the network matrices:
    `input_hidden_edges[i][h]` and `hidden_output_edges[h][o]`.
    """

    input_nodes: frozenset[int]
    hidden_levels: tuple[ActivationLevel, ...]
    input_hidden_edges: tuple[tuple[ActivationLevel, ...], ...]
    hidden_output_edges: tuple[tuple[bool, ...], ...]
    output_nodes: frozenset[int]
    label_active: bool


def activation_level(value: int) -> ActivationLevel:
    """Full from 2 up, partial at exactly 1, none otherwise."""
    if value >= 2:
        return ActivationLevel.FULL
    if value == 1:
        return ActivationLevel.PARTIAL
    return ActivationLevel.NONE


def project(
    pattern: Sequence[int],
    phase: Phase,
    hidden: Sequence[int] = (),
    output: Sequence[int] = (),
    weights: np.ndarray = INPUT_TO_HIDDEN,
    mask: np.ndarray = HIDDEN_TO_OUTPUT,
) -> HighlightDescriptor:
    """Build the highlight descriptor for one state.

    `hidden` is only read once the phase shows the hidden layer, and
    `output` only once the session is completed; before that they may
    be empty.
    """
    n_inputs, n_hidden = weights.shape
    n_outputs = mask.shape[1]
    if len(pattern) != n_inputs:
        raise ShapeMismatchError(f"pattern must have {n_inputs} bits, got {len(pattern)}")

    input_nodes = frozenset(i for i, bit in enumerate(pattern) if bit == 1)

    hidden_levels = tuple(ActivationLevel.NONE for _ in range(n_hidden))
    input_hidden_edges = tuple(
        tuple(ActivationLevel.NONE for _ in range(n_hidden)) for _ in range(n_inputs)
    )
    if phase.hidden_visible:
        if len(hidden) != n_hidden:
            raise ShapeMismatchError(f"hidden must have {n_hidden} values, got {len(hidden)}")
        hidden_levels = tuple(activation_level(int(v)) for v in hidden)
        # An edge lights up with its target's tier when its input is on and
        # carries a positive weight into a unit that is not dark.
        input_hidden_edges = tuple(
            tuple(
                hidden_levels[h]
                if pattern[i] == 1 and weights[i][h] > 0 and hidden_levels[h] is not ActivationLevel.NONE
                else ActivationLevel.NONE
                for h in range(n_hidden)
            )
            for i in range(n_inputs)
        )

    hidden_output_edges = tuple(tuple(False for _ in range(n_outputs)) for _ in range(n_hidden))
    output_nodes: frozenset[int] = frozenset()
    if phase.output_visible:
        if len(output) != n_outputs:
            raise ShapeMismatchError(f"output must have {n_outputs} bits, got {len(output)}")
        hidden_output_edges = tuple(
            tuple(
                bool(mask[h][o] and hidden[h] >= 1 and output[o] == 1)
                for o in range(n_outputs)
            )
            for h in range(n_hidden)
        )
        output_nodes = frozenset(o for o, bit in enumerate(output) if bit == 1)

    return HighlightDescriptor(
        input_nodes=input_nodes,
        hidden_levels=hidden_levels,
        input_hidden_edges=input_hidden_edges,
        hidden_output_edges=hidden_output_edges,
        output_nodes=output_nodes,
        label_active=phase is Phase.COMPLETED,
    )

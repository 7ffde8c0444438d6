"""
Default placement for new nodes.

Where a node first appears is a presentation choice; the engine asks a
placement policy for a position and the caller may supply its own.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from chuk_mcp_dissonance.core.pitch import PitchClass
from chuk_mcp_dissonance.graph.geometry import Point
from chuk_mcp_dissonance.models.config import LayoutConfig

# (pitch class, lowest layout slot not held by a live node) -> position
PlacementPolicy = Callable[[PitchClass, int], Point]


def ring_slot(pitch_class: PitchClass, config: LayoutConfig) -> Point:
    """Clock-face slot: C at twelve o'clock, semitones running clockwise."""
    angle = 2 * math.pi * pitch_class.scale_position / 12
    return Point(
        x=config.center_x + config.radius * math.sin(angle),
        y=config.center_y - config.radius * math.cos(angle),
    )


def row_slot(index: int, config: LayoutConfig) -> Point:
    """Grid slot `index`, counted left to right and wrapping after `columns` slots."""
    column = index % config.columns
    row = index // config.columns
    return Point(
        x=config.origin_x + column * config.spacing_x,
        y=config.origin_y + row * config.spacing_y,
    )


def make_placement(config: LayoutConfig) -> PlacementPolicy:
    """Build the placement policy named by config.mode."""
    if config.mode == "ring":
        return lambda pitch_class, _slot: ring_slot(pitch_class, config)
    return lambda _pitch_class, slot: row_slot(slot, config)

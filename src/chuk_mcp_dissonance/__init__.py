"""
CHUK Dissonance - a pitch-class graph coloured by interval dissonance.

Select keys to add pitch-class nodes; every pair of nodes is joined by an
edge tagged with the dissonance level of its interval; drag nodes and the
edges follow.
"""

from chuk_mcp_dissonance.core import DissonanceLevel, MultiplicityTracker, PitchClass, classify
from chuk_mcp_dissonance.errors import (
    ContractViolationError,
    DissonanceGraphError,
    EdgeNotFoundError,
    NodeNotFoundError,
    UnknownKeyError,
)
from chuk_mcp_dissonance.graph import GeometryController, GraphModel, PitchGraphEngine, Point
from chuk_mcp_dissonance.models import EngineConfig, GraphSnapshot, load_config

__all__ = [
    "PitchClass",
    "DissonanceLevel",
    "classify",
    "MultiplicityTracker",
    "GraphModel",
    "GeometryController",
    "Point",
    "PitchGraphEngine",
    "EngineConfig",
    "GraphSnapshot",
    "load_config",
    "DissonanceGraphError",
    "ContractViolationError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "UnknownKeyError",
]

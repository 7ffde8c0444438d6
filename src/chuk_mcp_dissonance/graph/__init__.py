"""
The pitch-class graph - model, geometry, placement and the engine facade.
"""

from chuk_mcp_dissonance.graph.engine import PitchGraphEngine
from chuk_mcp_dissonance.graph.geometry import DragSession, EdgeEndpoints, GeometryController, Point
from chuk_mcp_dissonance.graph.layout import PlacementPolicy, make_placement, ring_slot, row_slot
from chuk_mcp_dissonance.graph.model import Edge, GraphModel, Node

__all__ = [
    # Model
    "Node",
    "Edge",
    "GraphModel",
    # Geometry
    "Point",
    "EdgeEndpoints",
    "DragSession",
    "GeometryController",
    # Placement
    "PlacementPolicy",
    "make_placement",
    "ring_slot",
    "row_slot",
    # Engine
    "PitchGraphEngine",
]

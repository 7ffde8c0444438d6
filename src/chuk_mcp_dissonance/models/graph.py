"""
Read models for renderers.

Snapshots of the engine state as frozen pydantic models. Nothing here is
consulted by the core; these exist to be serialized and drawn.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class NodeView(BaseModel):
    """A node as a renderer sees it."""

    id: int = Field(..., description="Node id")
    pitch_class: str = Field(..., description="Pitch class name, e.g. 'C#'")
    x: float = Field(..., description="Position x")
    y: float = Field(..., description="Position y")

    model_config = {"frozen": True}


class EdgeView(BaseModel):
    """An edge as a renderer sees it."""

    id: int = Field(..., description="Edge id")
    source: int = Field(..., description="Node id of the start endpoint")
    target: int = Field(..., description="Node id of the end endpoint")
    interval: int = Field(..., ge=1, le=11, description="Semitone distance")
    level: int = Field(..., ge=1, le=6, description="Dissonance level")
    colour: str = Field(..., description="Colour for the level")
    x1: float
    y1: float
    x2: float
    y2: float

    model_config = {"frozen": True}

    @property
    def path(self) -> str:
        """SVG path data for the segment."""
        return f"M {self.x1} {self.y1} L {self.x2} {self.y2}"


class GraphSnapshot(BaseModel):
    """Full engine state at one moment."""

    nodes: list[NodeView] = Field(default_factory=list)
    edges: list[EdgeView] = Field(default_factory=list)
    counts: dict[str, int] = Field(
        default_factory=dict, description="Engaged keys per active pitch class"
    )
    engaged_keys: list[str] = Field(default_factory=list, description="Selected key ids")
    dragging: int | None = Field(None, description="Node id being dragged")

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, edges with their path strings."""
        data = self.model_dump(mode="json")
        for edge_data, edge in zip(data["edges"], self.edges, strict=True):
            edge_data["path"] = edge.path
        return data

"""
Engine configuration.

Every field has a default, so an empty YAML file (or none at all) gives a
working engine. Example `dissonance.yaml`:

    layout:
      mode: ring
      radius: 220
    tone:
      octave: 3
      velocity: 90
    palette:
      colours:
        6: "#ff0000"
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_mcp_dissonance.constants import (
    CANVAS_OFFSET_X,
    CANVAS_OFFSET_Y,
    DEFAULT_COLOUR_MAP,
    LayoutMode,
)


# "#abc" or "#aabbcc"
_HEX_COLOUR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class LayoutConfig(BaseModel):
    """Where new nodes appear and how edges attach to them."""

    mode: LayoutMode = Field("ring", description="Placement policy: 'ring' or 'row'")

    # Ring placement (one slot per pitch class)
    center_x: float = Field(720.0, description="Ring centre x")
    center_y: float = Field(350.0, description="Ring centre y")
    radius: float = Field(250.0, gt=0, description="Ring radius")

    # Row placement (one slot per node, in arrival order)
    origin_x: float = Field(96.0, description="First slot x")
    origin_y: float = Field(64.0, description="First slot y")
    spacing_x: float = Field(96.0, description="Horizontal distance between slots")
    spacing_y: float = Field(96.0, description="Vertical distance between rows")
    columns: int = Field(6, gt=0, description="Slots per row")

    # Node box and the canvas links are drawn on
    node_width: float = Field(48.0, ge=0, description="Rendered node width")
    node_height: float = Field(48.0, ge=0, description="Rendered node height")
    canvas_offset_x: float = Field(CANVAS_OFFSET_X, description="Canvas left offset")
    canvas_offset_y: float = Field(CANVAS_OFFSET_Y, description="Canvas top offset")

    model_config = {"frozen": True}

    def anchor_offset(self) -> tuple[float, float]:
        """Offset from a node's position to its centre in canvas coordinates."""
        return (
            self.node_width / 2 - self.canvas_offset_x,
            self.node_height / 2 - self.canvas_offset_y,
        )


class ToneConfig(BaseModel):
    """How pitch classes are sounded and recorded."""

    octave: int = Field(4, ge=-1, le=8, description="MIDI octave for pitch-class tones")
    velocity: int = Field(64, ge=1, le=127, description="Note-on velocity")
    channel: int = Field(0, ge=0, le=15, description="MIDI channel")
    tempo: int = Field(120, ge=20, le=300, description="Tempo for exported recordings")

    model_config = {"frozen": True}


class PaletteConfig(BaseModel):
    """Dissonance level -> colour. Presentation only."""

    colours: dict[int, str] = Field(
        default_factory=lambda: dict(DEFAULT_COLOUR_MAP),
        description="Colour hex string per dissonance level 1-6",
    )

    model_config = {"frozen": True}

    @field_validator("colours")
    @classmethod
    def validate_colours(cls, v: dict[int, str]) -> dict[int, str]:
        """Fill unspecified levels from the defaults and reject unknown levels."""
        unknown = set(v) - set(DEFAULT_COLOUR_MAP)
        if unknown:
            raise ValueError(f"Unknown dissonance levels: {sorted(unknown)}")
        for level, colour in v.items():
            if not _HEX_COLOUR.fullmatch(colour):
                raise ValueError(f"Invalid colour for level {level}: {colour}")
        return {**DEFAULT_COLOUR_MAP, **v}

    def colour_for(self, level: int) -> str:
        """Colour for a dissonance level."""
        return self.colours[level]


class EngineConfig(BaseModel):
    """Top-level configuration for a graph engine."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    tone: ToneConfig = Field(default_factory=ToneConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)

    model_config = {"frozen": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for YAML output."""
        return self.model_dump(mode="json")

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any] | None) -> EngineConfig:
        """Create from a YAML-parsed dict (None for an empty file)."""
        return cls.model_validate(data or {})


def load_config(path: Path | None = None) -> EngineConfig:
    """
    Load engine configuration from a YAML file.

    Args:
        path: Config file. None gives the defaults.

    Returns:
        The validated EngineConfig

    Raises:
        FileNotFoundError: If an explicit path does not exist
        pydantic.ValidationError: If the file holds invalid values
    """
    if path is None:
        return EngineConfig()

    with open(path) as f:
        data = yaml.safe_load(f)

    return EngineConfig.from_yaml_dict(data)

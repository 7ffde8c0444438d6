"""
Data models - configuration and renderer-facing snapshots.
"""

from chuk_mcp_dissonance.models.config import (
    EngineConfig,
    LayoutConfig,
    PaletteConfig,
    ToneConfig,
    load_config,
)
from chuk_mcp_dissonance.models.graph import EdgeView, GraphSnapshot, NodeView

__all__ = [
    # Config
    "EngineConfig",
    "LayoutConfig",
    "PaletteConfig",
    "ToneConfig",
    "load_config",
    # Snapshots
    "NodeView",
    "EdgeView",
    "GraphSnapshot",
]

#!/usr/bin/env python3
"""
Async Dissonance MCP Server using chuk-mcp-server

This server drives a pitch-class dissonance graph: selecting keys adds
pitch-class nodes, every pair of nodes is linked by an edge coloured by
how dissonant their interval is, and nodes can be dragged around.

The server provides tools for:
- Creating and managing visualizer sessions
- Selecting, releasing and toggling keyboard keys
- Reading the graph and classifying intervals
- Dragging nodes
- Exporting the tones a session played as MIDI
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_dissonance.models import load_config
from chuk_mcp_dissonance.session import SessionManager
from chuk_mcp_dissonance.tools import (
    register_graph_tools,
    register_keyboard_tools,
    register_session_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-dissonance")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"
_config_env = os.environ.get("DISSONANCE_CONFIG")
CONFIG_PATH = Path(_config_env) if _config_env else None

# Create managers
config = load_config(CONFIG_PATH)
session_manager = SessionManager(config=config, output_dir=OUTPUT_DIR)

# Register all tools
session_tools = register_session_tools(mcp, session_manager)
keyboard_tools = register_keyboard_tools(mcp, session_manager)
graph_tools = register_graph_tools(mcp, session_manager)

# Export tool functions for direct access
dissonance_create_session = session_tools["dissonance_create_session"]
dissonance_list_sessions = session_tools["dissonance_list_sessions"]
dissonance_delete_session = session_tools["dissonance_delete_session"]
dissonance_reset_session = session_tools["dissonance_reset_session"]
dissonance_export_midi = session_tools["dissonance_export_midi"]

dissonance_list_keys = keyboard_tools["dissonance_list_keys"]
dissonance_select_key = keyboard_tools["dissonance_select_key"]
dissonance_deselect_key = keyboard_tools["dissonance_deselect_key"]
dissonance_toggle_key = keyboard_tools["dissonance_toggle_key"]

dissonance_get_graph = graph_tools["dissonance_get_graph"]
dissonance_classify_interval = graph_tools["dissonance_classify_interval"]
dissonance_drag_start = graph_tools["dissonance_drag_start"]
dissonance_drag_move = graph_tools["dissonance_drag_move"]
dissonance_drag_end = graph_tools["dissonance_drag_end"]

logger.info("CHUK Dissonance MCP Server initialized")
logger.info(f"  Config: {CONFIG_PATH or 'defaults'}")
logger.info(f"  Output dir: {OUTPUT_DIR}")

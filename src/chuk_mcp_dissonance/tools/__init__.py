"""
MCP tool implementations.

Tools are organized by domain:
- session - Session lifecycle and MIDI export
- keyboard - Key selection
- graph - Graph reads, interval classification and dragging
"""

from chuk_mcp_dissonance.tools.graph import register_graph_tools
from chuk_mcp_dissonance.tools.keyboard import register_keyboard_tools
from chuk_mcp_dissonance.tools.session import register_session_tools

__all__ = [
    "register_graph_tools",
    "register_keyboard_tools",
    "register_session_tools",
]

"""
Keyboard tools - MCP tools for selecting and releasing keys.

Each tool returns the graph after the gesture so a client can redraw
without a second call.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_dissonance.session import SessionManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_keyboard_tools(
    mcp: ChukMCPServer,
    manager: SessionManager,
) -> dict[str, Any]:
    """
    Register keyboard tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The session manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_list_keys(session: str) -> str:
        """
        List the keyboard's keys and which are selected.

        Args:
            session: Session name

        Returns:
            JSON string with one entry per key, lowest first

        Example:
            dissonance_list_keys(session="triads")
        """
        try:
            engine = manager.require(session).engine
            return json.dumps(
                {
                    "status": "success",
                    "keys": [
                        {
                            "id": key.id,
                            "pitch_class": key.pitch_class.spell(),
                            "octave": key.octave,
                            "frequency": round(key.frequency, 4),
                            "black": key.is_black,
                            "selected": engine.is_selected(key.id),
                        }
                        for key in engine.keyboard.keys()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list keys")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_list_keys"] = dissonance_list_keys

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_select_key(session: str, key: str) -> str:
        """
        Select a keyboard key.

        Adds a node for the key's pitch class (unless another key of the
        same pitch class is already held) and links it to every other node.

        Args:
            session: Session name
            key: Key id (e.g., 'c3', 'f#4', 'c5')

        Returns:
            JSON string with the new node id (or null) and the graph

        Example:
            dissonance_select_key(session="triads", key="e3")
        """
        try:
            engine = manager.require(session).engine
            physical = engine.keyboard.key(key)
            node_id = engine.on_key_selected(physical.pitch_class, physical.id)
            return json.dumps(
                {
                    "status": "success",
                    "node_id": node_id,
                    "graph": engine.snapshot().to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to select key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_select_key"] = dissonance_select_key

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_deselect_key(session: str, key: str) -> str:
        """
        Release a selected keyboard key.

        The node stays while another key of the same pitch class is held.

        Args:
            session: Session name
            key: Key id

        Returns:
            JSON string with whether the node was removed and the graph

        Example:
            dissonance_deselect_key(session="triads", key="e3")
        """
        try:
            engine = manager.require(session).engine
            physical = engine.keyboard.key(key)
            removed = engine.on_key_deselected(physical.pitch_class, physical.id)
            return json.dumps(
                {
                    "status": "success",
                    "removed": removed,
                    "graph": engine.snapshot().to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to deselect key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_deselect_key"] = dissonance_deselect_key

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_toggle_key(session: str, key: str) -> str:
        """
        Click a keyboard key: select it if released, release it if selected.

        Args:
            session: Session name
            key: Key id

        Returns:
            JSON string with the key's new state and the graph

        Example:
            dissonance_toggle_key(session="triads", key="g3")
        """
        try:
            engine = manager.require(session).engine
            selected = engine.toggle_key(key)
            return json.dumps(
                {
                    "status": "success",
                    "selected": selected,
                    "graph": engine.snapshot().to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to toggle key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_toggle_key"] = dissonance_toggle_key

    return tools

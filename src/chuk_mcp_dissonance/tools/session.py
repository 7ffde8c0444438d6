"""
Session tools - MCP tools for session lifecycle.

Tools for creating, listing, resetting and deleting visualizer sessions,
and for exporting what a session has played.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_dissonance.constants import ErrorMessages, SuccessMessages
from chuk_mcp_dissonance.session import SessionManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_session_tools(
    mcp: ChukMCPServer,
    manager: SessionManager,
) -> dict[str, Any]:
    """
    Register session lifecycle tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The session manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_create_session(name: str) -> str:
        """
        Create a new visualizer session.

        A session holds one keyboard, its pitch-class graph and a MIDI
        tone recording. Sessions live in memory only.

        Args:
            name: Unique name for the session

        Returns:
            JSON string with session details

        Example:
            dissonance_create_session(name="triads")
        """
        try:
            session = manager.create(name)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SESSION_CREATED.format(name=name),
                    "session": {
                        "name": session.name,
                        "keys": len(session.engine.keyboard),
                        "created": session.created.isoformat(),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to create session")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_create_session"] = dissonance_create_session

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_list_sessions() -> str:
        """
        List all sessions.

        Returns:
            JSON string with list of session summaries

        Example:
            dissonance_list_sessions()
        """
        try:
            sessions = manager.list_sessions()
            return json.dumps(
                {
                    "status": "success",
                    "sessions": [
                        {
                            "name": s.name,
                            "nodes": s.node_count,
                            "edges": s.edge_count,
                            "engaged_keys": s.engaged_keys,
                            "created": s.created.isoformat(),
                        }
                        for s in sessions
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list sessions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_list_sessions"] = dissonance_list_sessions

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_delete_session(name: str) -> str:
        """
        Delete a session, silencing any tones it holds.

        Args:
            name: Session name

        Returns:
            JSON string with delete result

        Example:
            dissonance_delete_session(name="triads")
        """
        try:
            if manager.delete(name):
                return json.dumps(
                    {
                        "status": "success",
                        "message": SuccessMessages.SESSION_DELETED.format(name=name),
                    }
                )
            return json.dumps(
                {"status": "error", "message": ErrorMessages.NO_SESSION.format(name=name)}
            )
        except Exception as e:
            logger.exception("Failed to delete session")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_delete_session"] = dissonance_delete_session

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_reset_session(name: str) -> str:
        """
        Release every selected key and clear the graph.

        Args:
            name: Session name

        Returns:
            JSON string with the (empty) graph

        Example:
            dissonance_reset_session(name="triads")
        """
        try:
            session = manager.reset(name)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SESSION_RESET.format(name=name),
                    "graph": session.engine.snapshot().to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to reset session")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_reset_session"] = dissonance_reset_session

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_export_midi(name: str, output_name: str | None = None) -> str:
        """
        Export the tones a session has played as a MIDI file.

        Every pitch-class on/off is recorded with its timing, so the file
        replays the session's harmonic changes.

        Args:
            name: Session name
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path

        Example:
            dissonance_export_midi(name="triads")
        """
        try:
            path = manager.export_midi(name, output_name)
            session = manager.require(name)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MIDI_EXPORTED.format(name=name, path=path),
                    "path": str(path),
                    "messages": len(session.tone_player.recording),
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_export_midi"] = dissonance_export_midi

    return tools

"""
Graph tools - MCP tools for reading the graph and dragging nodes.

Drags follow the pointer lifecycle: start with the press position, move
with each new cursor sample, end on release.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_dissonance.core import PitchClass, classify, fold_interval
from chuk_mcp_dissonance.graph import Point
from chuk_mcp_dissonance.session import SessionManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_graph_tools(
    mcp: ChukMCPServer,
    manager: SessionManager,
) -> dict[str, Any]:
    """
    Register graph and drag tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The session manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_get_graph(session: str) -> str:
        """
        Get the current graph.

        Nodes carry their pitch class and position; edges carry their
        endpoints, interval, dissonance level and colour.

        Args:
            session: Session name

        Returns:
            JSON string with nodes, edges and engaged keys

        Example:
            dissonance_get_graph(session="triads")
        """
        try:
            engine = manager.require(session).engine
            return json.dumps({"status": "success", "graph": engine.snapshot().to_dict()})
        except Exception as e:
            logger.exception("Failed to get graph")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_get_graph"] = dissonance_get_graph

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_classify_interval(first: str, second: str) -> str:
        """
        Classify the interval between two pitch classes.

        Args:
            first: Pitch class name (e.g., 'C', 'F#', 'Bb')
            second: Pitch class name

        Returns:
            JSON string with the semitone distance and dissonance level

        Example:
            dissonance_classify_interval(first="C", second="G")
        """
        try:
            a = PitchClass.parse(first)
            b = PitchClass.parse(second)
            interval = a.distance_to(b)
            level = classify(interval)
            return json.dumps(
                {
                    "status": "success",
                    "interval": interval,
                    "folded": fold_interval(interval),
                    "level": int(level),
                    "name": level.name.lower(),
                }
            )
        except Exception as e:
            logger.exception("Failed to classify interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_classify_interval"] = dissonance_classify_interval

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_drag_start(session: str, node_id: int, x: float, y: float) -> str:
        """
        Press on a node to start dragging it.

        Args:
            session: Session name
            node_id: Node to drag
            x: Cursor x at the press
            y: Cursor y at the press

        Returns:
            JSON string with the drag state

        Example:
            dissonance_drag_start(session="triads", node_id=1, x=100, y=40)
        """
        try:
            engine = manager.require(session).engine
            engine.on_drag_start(node_id, Point(x, y))
            return json.dumps({"status": "success", "dragging": node_id})
        except Exception as e:
            logger.exception("Failed to start drag")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_drag_start"] = dissonance_drag_start

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_drag_move(session: str, node_id: int, x: float, y: float) -> str:
        """
        Move the cursor while dragging.

        The node moves by the offset from the previous cursor sample.
        Moves outside a drag are ignored.

        Args:
            session: Session name
            node_id: Node being dragged
            x: New cursor x
            y: New cursor y

        Returns:
            JSON string with the applied delta (null if ignored) and the graph

        Example:
            dissonance_drag_move(session="triads", node_id=1, x=130, y=55)
        """
        try:
            engine = manager.require(session).engine
            delta = engine.on_drag_move(node_id, Point(x, y))
            return json.dumps(
                {
                    "status": "success",
                    "delta": {"x": delta.x, "y": delta.y} if delta is not None else None,
                    "graph": engine.snapshot().to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to move drag")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_drag_move"] = dissonance_drag_move

    @mcp.tool  # type: ignore[arg-type]
    async def dissonance_drag_end(session: str, node_id: int) -> str:
        """
        Release the dragged node.

        Args:
            session: Session name
            node_id: Node being dragged

        Returns:
            JSON string with the drag state

        Example:
            dissonance_drag_end(session="triads", node_id=1)
        """
        try:
            engine = manager.require(session).engine
            engine.on_drag_end(node_id)
            return json.dumps({"status": "success", "dragging": None})
        except Exception as e:
            logger.exception("Failed to end drag")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dissonance_drag_end"] = dissonance_drag_end

    return tools

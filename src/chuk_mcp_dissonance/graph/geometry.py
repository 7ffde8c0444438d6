"""
Geometry and drag control.

Positions are kept per node id, endpoint coordinates per edge id. Both are
dependents of the GraphModel, never copies of it.

Endpoint coordinates are computed from node positions once, when the edge
is created. After that a move shifts only the endpoint that belongs to the
moved node, by the same delta - endpoints are never recomputed from
absolute positions, so any drift between the two is preserved as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chuk_mcp_dissonance.constants import ErrorMessages
from chuk_mcp_dissonance.errors import ContractViolationError, EdgeNotFoundError, NodeNotFoundError
from chuk_mcp_dissonance.graph.model import Edge, GraphModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A 2D coordinate or offset."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass
class EdgeEndpoints:
    """Cached anchor coordinates of an edge's visual segment."""

    start: Point  # anchored to edge.source
    end: Point  # anchored to edge.target


@dataclass
class DragSession:
    """An in-progress drag: which node, and the last cursor sample."""

    node_id: int
    last_cursor: Point


class GeometryController:
    """
    Node positions, edge endpoints and the drag session.

    Args:
        graph: The graph whose node/edge ids this controller follows
        anchor_offset: Offset from a node's position to the point its
            edges attach to
    """

    def __init__(self, graph: GraphModel, anchor_offset: Point | None = None) -> None:
        self.graph = graph
        self.anchor_offset = anchor_offset or Point()
        self._positions: dict[int, Point] = {}
        self._endpoints: dict[int, EdgeEndpoints] = {}
        self._drag: DragSession | None = None

    def place_node(self, node_id: int, position: Point) -> None:
        """Record the position of a node."""
        if not self.graph.has_node(node_id):
            raise NodeNotFoundError(node_id)
        self._positions[node_id] = position

    def anchor(self, node_id: int) -> Point:
        """Point at which edges attach to a node, from its current position."""
        return self.position(node_id) + self.anchor_offset

    def compute_edge_endpoints(self, edge: Edge) -> EdgeEndpoints:
        """
        Derive and store the endpoints of an edge from its nodes' positions.

        Raises:
            EdgeNotFoundError: If the edge is not part of this graph
            NodeNotFoundError: If either endpoint node has no position
        """
        if self.graph.edge(edge.id) != edge:
            raise EdgeNotFoundError(edge.id)

        start = self.anchor(edge.source)
        end = self.anchor(edge.target)
        endpoints = EdgeEndpoints(start=start, end=end)
        self._endpoints[edge.id] = endpoints
        return endpoints

    def move_node(self, node_id: int, delta: Point) -> Point:
        """
        Shift a node and the matching endpoint of each incident edge by delta.

        Nothing is mutated unless the node and all its edge endpoints are known.

        Returns:
            The node's new position
        """
        if node_id not in self._positions:
            raise NodeNotFoundError(node_id)

        edges = self.graph.edges_of(node_id)
        for edge in edges:
            if edge.id not in self._endpoints:
                raise EdgeNotFoundError(edge.id)

        position = self._positions[node_id] + delta
        self._positions[node_id] = position

        for edge in edges:
            endpoints = self._endpoints[edge.id]
            if edge.source == node_id:
                endpoints.start = endpoints.start + delta
            else:
                endpoints.end = endpoints.end + delta

        return position

    def discard_node(self, node_id: int, edge_ids: list[int]) -> None:
        """Forget the geometry of a removed node and its removed edges."""
        self._positions.pop(node_id, None)
        for edge_id in edge_ids:
            self._endpoints.pop(edge_id, None)

        if self._drag is not None and self._drag.node_id == node_id:
            logger.debug(f"Node {node_id} removed mid-drag, ending drag session")
            self._drag = None

    # Read access

    def position(self, node_id: int) -> Point:
        """Current position of a node."""
        try:
            return self._positions[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def endpoints(self, edge_id: int) -> EdgeEndpoints:
        """Current endpoint coordinates of an edge."""
        try:
            return self._endpoints[edge_id]
        except KeyError:
            raise EdgeNotFoundError(edge_id) from None

    # Drag session lifecycle

    @property
    def drag(self) -> DragSession | None:
        """The active drag session, if any."""
        return self._drag

    def begin_drag(self, node_id: int, cursor: Point) -> DragSession:
        """Start dragging a node from a cursor position. Replaces any stale session."""
        if node_id not in self._positions:
            raise NodeNotFoundError(node_id)
        self._drag = DragSession(node_id=node_id, last_cursor=cursor)
        return self._drag

    def drag_to(self, node_id: int, cursor: Point) -> Point | None:
        """
        Move the dragged node by the cursor's offset from the previous sample.

        Returns:
            The delta applied, or None if no drag is in progress

        Raises:
            ContractViolationError: If a different node is being dragged
        """
        if self._drag is None:
            return None
        if self._drag.node_id != node_id:
            raise ContractViolationError(
                ErrorMessages.DRAG_NODE_MISMATCH.format(active=self._drag.node_id, node_id=node_id)
            )

        delta = cursor - self._drag.last_cursor
        self.move_node(node_id, delta)
        self._drag.last_cursor = cursor
        return delta

    def end_drag(self, node_id: int) -> None:
        """Release the drag. Releasing when nothing is dragged is a no-op."""
        if self._drag is None:
            return
        if self._drag.node_id != node_id:
            raise ContractViolationError(
                ErrorMessages.DRAG_NODE_MISMATCH.format(active=self._drag.node_id, node_id=node_id)
            )
        self._drag = None

    def clear(self) -> None:
        """Forget all geometry and any drag in progress."""
        self._positions.clear()
        self._endpoints.clear()
        self._drag = None

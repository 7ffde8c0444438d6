"""
Graph model - one node per active pitch class, one edge per node pair.

The model owns the authoritative node and edge collections. After every
call the edge set is exactly the complete graph over the node set: no
self edges, no duplicates, nothing dangling.

Edges are oriented by creation order: the source is the node that was
already present, the target is the node being added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations

from chuk_mcp_dissonance.constants import ErrorMessages
from chuk_mcp_dissonance.core.dissonance import DissonanceLevel, classify
from chuk_mcp_dissonance.core.pitch import PitchClass
from chuk_mcp_dissonance.errors import ContractViolationError, EdgeNotFoundError, NodeNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """A graph vertex for one active pitch class."""

    id: int
    pitch_class: PitchClass


@dataclass(frozen=True)
class Edge:
    """A connection between two distinct nodes, tagged with its dissonance."""

    id: int
    source: int  # node that was already present
    target: int  # node whose arrival created the edge
    interval: int  # semitone distance between scale positions (1-11)
    level: DissonanceLevel

    def touches(self, node_id: int) -> bool:
        """True if node_id is either endpoint."""
        return node_id in (self.source, self.target)

    def other(self, node_id: int) -> int:
        """The endpoint opposite node_id."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        raise NodeNotFoundError(node_id)


class GraphModel:
    """
    Complete graph over the active pitch classes.

    Node and edge ids come from independent counters starting at 1 and are
    never reused, so a renderer can key on them safely.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._edges: dict[int, Edge] = {}
        self._by_pitch: dict[PitchClass, int] = {}
        self._incident: dict[int, list[int]] = {}
        self._next_node_id = 1
        self._next_edge_id = 1

    def add_node(self, pitch_class: PitchClass) -> int:
        """
        Add a node for a newly active pitch class and link it to every other node.

        Args:
            pitch_class: Pitch class that just transitioned to active

        Returns:
            The new node's id

        Raises:
            ContractViolationError: If the pitch class already has a node
        """
        if pitch_class in self._by_pitch:
            message = ErrorMessages.PITCH_CLASS_ACTIVE.format(pitch_class=pitch_class.spell())
            logger.error(message)
            raise ContractViolationError(message)

        node = Node(id=self._next_node_id, pitch_class=pitch_class)
        self._next_node_id += 1

        existing = list(self._nodes.values())
        self._nodes[node.id] = node
        self._by_pitch[pitch_class] = node.id
        self._incident[node.id] = []

        for other in existing:
            interval = pitch_class.distance_to(other.pitch_class)
            edge = Edge(
                id=self._next_edge_id,
                source=other.id,
                target=node.id,
                interval=interval,
                level=classify(interval),
            )
            self._next_edge_id += 1
            self._edges[edge.id] = edge
            self._incident[other.id].append(edge.id)
            self._incident[node.id].append(edge.id)

        logger.debug(
            f"Added node {node.id} ({pitch_class.spell()}) with {len(existing)} edges"
        )
        return node.id

    def remove_node(self, pitch_class: PitchClass) -> None:
        """
        Remove the node for a pitch class, its incident edges first.

        Raises:
            ContractViolationError: If the pitch class has no node
        """
        node_id = self._by_pitch.get(pitch_class)
        if node_id is None:
            message = ErrorMessages.PITCH_CLASS_INACTIVE.format(pitch_class=pitch_class.spell())
            logger.error(message)
            raise ContractViolationError(message)

        edge_ids = self._incident.pop(node_id)
        for edge_id in edge_ids:
            edge = self._edges.pop(edge_id)
            self._incident[edge.other(node_id)].remove(edge_id)

        del self._nodes[node_id]
        del self._by_pitch[pitch_class]

        logger.debug(f"Removed node {node_id} ({pitch_class.spell()}) and {len(edge_ids)} edges")

    # Read access

    def node(self, node_id: int) -> Node:
        """Get a node by id."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def edge(self, edge_id: int) -> Edge:
        """Get an edge by id."""
        try:
            return self._edges[edge_id]
        except KeyError:
            raise EdgeNotFoundError(edge_id) from None

    def node_for(self, pitch_class: PitchClass) -> Node | None:
        """The node for a pitch class, or None if it is inactive."""
        node_id = self._by_pitch.get(pitch_class)
        return self._nodes[node_id] if node_id is not None else None

    def has_node(self, node_id: int) -> bool:
        """True if node_id is a current node."""
        return node_id in self._nodes

    def edges_of(self, node_id: int) -> list[Edge]:
        """Edges incident to a node, oldest first."""
        if node_id not in self._nodes:
            raise NodeNotFoundError(node_id)
        return [self._edges[edge_id] for edge_id in self._incident[node_id]]

    def nodes(self) -> list[Node]:
        """All nodes in creation order."""
        return list(self._nodes.values())

    def edges(self) -> list[Edge]:
        """All edges in creation order."""
        return list(self._edges.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def is_complete(self) -> bool:
        """
        Check the complete-graph invariant.

        Every unordered pair of nodes has exactly one edge and no edge
        touches a missing node or loops back to its own source.
        """
        pairs: set[frozenset[int]] = set()
        for edge in self._edges.values():
            if edge.source == edge.target:
                return False
            if edge.source not in self._nodes or edge.target not in self._nodes:
                return False
            pair = frozenset((edge.source, edge.target))
            if pair in pairs:
                return False
            pairs.add(pair)

        expected = {frozenset(pair) for pair in combinations(self._nodes, 2)}
        return pairs == expected

    def clear(self) -> None:
        """Drop every node and edge. Id counters keep counting."""
        self._nodes.clear()
        self._edges.clear()
        self._by_pitch.clear()
        self._incident.clear()

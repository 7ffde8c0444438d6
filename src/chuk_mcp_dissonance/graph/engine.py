"""
PitchGraphEngine - the surface a presentation layer drives.

Key gestures flow through the MultiplicityTracker; only pitch-class
transitions reach the GraphModel, the GeometryController and the tone
player. Drag gestures go straight to the GeometryController.

    engine = PitchGraphEngine()
    engine.on_key_selected(PitchClass.C, "c3")
    engine.on_key_selected(PitchClass.G, "g3")
    engine.snapshot().edges[0].level  # 1, a perfect fifth
"""

from __future__ import annotations

import logging

from chuk_mcp_dissonance.audio.tone import NullTonePlayer, TonePlayer
from chuk_mcp_dissonance.constants import ErrorMessages
from chuk_mcp_dissonance.core.multiplicity import MultiplicityTracker
from chuk_mcp_dissonance.core.pitch import PitchClass
from chuk_mcp_dissonance.errors import ContractViolationError
from chuk_mcp_dissonance.graph.geometry import GeometryController, Point
from chuk_mcp_dissonance.graph.layout import PlacementPolicy, make_placement
from chuk_mcp_dissonance.graph.model import GraphModel
from chuk_mcp_dissonance.keyboard.layout import Keyboard
from chuk_mcp_dissonance.models.config import EngineConfig
from chuk_mcp_dissonance.models.graph import EdgeView, GraphSnapshot, NodeView

logger = logging.getLogger(__name__)


class PitchGraphEngine:
    """
    Keeps the pitch-class graph in step with key selection and drags.

    Args:
        tone_player: Called with (pitch_class, on) on every transition
        config: Layout, tone and palette settings
        placement: Override for where new nodes appear
        keyboard: Keyboard used by toggle_key
    """

    def __init__(
        self,
        tone_player: TonePlayer | None = None,
        config: EngineConfig | None = None,
        placement: PlacementPolicy | None = None,
        keyboard: Keyboard | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.tone_player: TonePlayer = tone_player or NullTonePlayer()
        self.keyboard = keyboard or Keyboard()
        self.placement = placement or make_placement(self.config.layout)

        self.tracker = MultiplicityTracker()
        self.graph = GraphModel()
        self.geometry = GeometryController(
            self.graph, anchor_offset=Point(*self.config.layout.anchor_offset())
        )
        self._engaged: dict[str, PitchClass] = {}
        self._slots: dict[int, int] = {}

    # Key gestures

    def on_key_selected(self, pitch_class: PitchClass, key_id: str) -> int | None:
        """
        A physical key was selected.

        Returns:
            The new node id if the pitch class just became active, else None

        Raises:
            ContractViolationError: If the key is already selected
        """
        if key_id in self._engaged:
            message = ErrorMessages.KEY_ALREADY_SELECTED.format(key_id=key_id)
            logger.error(message)
            raise ContractViolationError(message)

        if self.tracker.is_active(pitch_class):
            self._engaged[key_id] = pitch_class
            self.tracker.activate(pitch_class)
            logger.debug(f"Key {key_id} doubles active {pitch_class.spell()}")
            return None

        # Position before any mutation, a failing placement leaves no trace
        slot = self._free_slot()
        position = self.placement(pitch_class, slot)

        node_id = self.graph.add_node(pitch_class)
        self._engaged[key_id] = pitch_class
        self.tracker.activate(pitch_class)
        self._slots[node_id] = slot
        self.geometry.place_node(node_id, position)
        for edge in self.graph.edges_of(node_id):
            self.geometry.compute_edge_endpoints(edge)

        self.tone_player.set_active(pitch_class, True)
        return node_id

    def on_key_deselected(self, pitch_class: PitchClass, key_id: str) -> bool:
        """
        A physical key was released.

        Returns:
            True if the pitch class just became inactive and its node was removed

        Raises:
            ContractViolationError: If the key is not selected, or was
                selected with a different pitch class
        """
        engaged = self._engaged.get(key_id)
        if engaged is None:
            message = ErrorMessages.KEY_NOT_SELECTED.format(key_id=key_id)
            logger.error(message)
            raise ContractViolationError(message)
        if engaged != pitch_class:
            message = ErrorMessages.KEY_PITCH_MISMATCH.format(
                key_id=key_id, expected=engaged.spell(), actual=pitch_class.spell()
            )
            logger.error(message)
            raise ContractViolationError(message)

        del self._engaged[key_id]
        if not self.tracker.deactivate(pitch_class):
            logger.debug(f"{pitch_class.spell()} still held after releasing {key_id}")
            return False

        node = self.graph.node_for(pitch_class)
        if node is None:
            message = ErrorMessages.PITCH_CLASS_INACTIVE.format(pitch_class=pitch_class.spell())
            logger.error(message)
            raise ContractViolationError(message)

        edge_ids = [edge.id for edge in self.graph.edges_of(node.id)]
        self.graph.remove_node(pitch_class)
        self.geometry.discard_node(node.id, edge_ids)
        self._slots.pop(node.id, None)

        self.tone_player.set_active(pitch_class, False)
        return True

    def toggle_key(self, key_id: str) -> bool:
        """
        Select a keyboard key if it is released, release it if selected.

        Returns:
            True if the key is now selected
        """
        key = self.keyboard.key(key_id)
        if key.id in self._engaged:
            self.on_key_deselected(key.pitch_class, key.id)
            return False
        self.on_key_selected(key.pitch_class, key.id)
        return True

    def _free_slot(self) -> int:
        """Lowest layout slot not held by a live node."""
        taken = set(self._slots.values())
        slot = 0
        while slot in taken:
            slot += 1
        return slot

    def is_selected(self, key_id: str) -> bool:
        """True if a key is currently selected."""
        return key_id in self._engaged

    # Drag gestures

    def on_drag_start(self, node_id: int, cursor: Point) -> None:
        """Press on a node."""
        self.geometry.begin_drag(node_id, cursor)

    def on_drag_move(self, node_id: int, cursor: Point) -> Point | None:
        """Cursor moved while pressed. Returns the applied delta, None outside a drag."""
        return self.geometry.drag_to(node_id, cursor)

    def on_drag_end(self, node_id: int) -> None:
        """Release the node."""
        self.geometry.end_drag(node_id)

    # Read access

    def nodes(self) -> list[NodeView]:
        """Current nodes with their positions."""
        views = []
        for node in self.graph.nodes():
            position = self.geometry.position(node.id)
            views.append(
                NodeView(
                    id=node.id,
                    pitch_class=node.pitch_class.spell(),
                    x=position.x,
                    y=position.y,
                )
            )
        return views

    def edges(self) -> list[EdgeView]:
        """Current edges with their cached endpoint coordinates."""
        views = []
        for edge in self.graph.edges():
            endpoints = self.geometry.endpoints(edge.id)
            views.append(
                EdgeView(
                    id=edge.id,
                    source=edge.source,
                    target=edge.target,
                    interval=edge.interval,
                    level=int(edge.level),
                    colour=self.config.palette.colour_for(edge.level),
                    x1=endpoints.start.x,
                    y1=endpoints.start.y,
                    x2=endpoints.end.x,
                    y2=endpoints.end.y,
                )
            )
        return views

    def snapshot(self) -> GraphSnapshot:
        """Everything a renderer needs, in one immutable object."""
        drag = self.geometry.drag
        return GraphSnapshot(
            nodes=self.nodes(),
            edges=self.edges(),
            counts={pc.spell(): self.tracker.count(pc) for pc in self.tracker.active()},
            engaged_keys=list(self._engaged),
            dragging=drag.node_id if drag is not None else None,
        )

    def reset(self) -> None:
        """Release every key, silencing tones, and clear the graph."""
        for key_id, pitch_class in list(self._engaged.items()):
            self.on_key_deselected(pitch_class, key_id)
        self.geometry.clear()

"""
Error taxonomy.

The core is a closed, synchronous state machine, so every failure is
caller misuse:
- ContractViolationError: pairing discipline broken (fatal to the operation)
- NodeNotFoundError / EdgeNotFoundError: unknown identifier, nothing mutated
- UnknownKeyError: key id not on the keyboard
"""

from __future__ import annotations

from chuk_mcp_dissonance.constants import ErrorMessages


class DissonanceGraphError(Exception):
    """Base class for all errors raised by the graph engine."""


class ContractViolationError(DissonanceGraphError):
    """Raised when a caller breaks activate/deactivate or add/remove pairing."""


class _NotFoundError(DissonanceGraphError, KeyError):
    """KeyError flavour that keeps a readable message."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class NodeNotFoundError(_NotFoundError):
    """Raised when a node identifier is not known."""

    def __init__(self, node_id: int) -> None:
        super().__init__(ErrorMessages.NODE_NOT_FOUND.format(node_id=node_id))
        self.node_id = node_id


class EdgeNotFoundError(_NotFoundError):
    """Raised when an edge identifier is not known."""

    def __init__(self, edge_id: int) -> None:
        super().__init__(ErrorMessages.EDGE_NOT_FOUND.format(edge_id=edge_id))
        self.edge_id = edge_id


class UnknownKeyError(_NotFoundError):
    """Raised when a physical key id is not on the keyboard."""

    def __init__(self, key_id: str) -> None:
        super().__init__(ErrorMessages.UNKNOWN_KEY.format(key_id=key_id))
        self.key_id = key_id

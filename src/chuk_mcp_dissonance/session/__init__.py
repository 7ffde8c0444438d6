"""
Session management - named graph engines held in memory.
"""

from chuk_mcp_dissonance.session.manager import Session, SessionManager, SessionMetadata

__all__ = ["Session", "SessionManager", "SessionMetadata"]

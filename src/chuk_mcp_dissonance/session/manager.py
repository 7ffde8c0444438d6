"""
Session Manager - named, in-memory graph engines.

Each session is an independent PitchGraphEngine with its own MIDI tone
player, so several visualizers can be driven side by side. Sessions are
not persisted; a recording can be exported as a MIDI file.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from chuk_mcp_dissonance.audio.tone import MidiTonePlayer
from chuk_mcp_dissonance.constants import ErrorMessages
from chuk_mcp_dissonance.graph.engine import PitchGraphEngine
from chuk_mcp_dissonance.models.config import EngineConfig

logger = logging.getLogger(__name__)


class SessionMetadata:
    """Lightweight metadata for listing sessions."""

    def __init__(
        self,
        name: str,
        node_count: int,
        edge_count: int,
        engaged_keys: int,
        created: datetime,
    ):
        self.name = name
        self.node_count = node_count
        self.edge_count = edge_count
        self.engaged_keys = engaged_keys
        self.created = created

    def __repr__(self) -> str:
        return f"SessionMetadata({self.name!r}, {self.node_count} nodes)"


class Session:
    """An engine together with the tone player it drives."""

    def __init__(self, name: str, engine: PitchGraphEngine, tone_player: MidiTonePlayer):
        self.name = name
        self.engine = engine
        self.tone_player = tone_player
        self.created = datetime.now(UTC)

    def metadata(self) -> SessionMetadata:
        """Summary of the session for listings."""
        return SessionMetadata(
            name=self.name,
            node_count=len(self.engine.graph.nodes()),
            edge_count=len(self.engine.graph.edges()),
            engaged_keys=len(self.engine.snapshot().engaged_keys),
            created=self.created,
        )


class SessionManager:
    """
    Manages session lifecycle.

    Provides methods to create, look up, reset and delete sessions, and to
    export a session's tone recording.
    """

    def __init__(self, config: EngineConfig | None = None, output_dir: Path | None = None):
        """
        Initialize the manager.

        Args:
            config: Configuration used for every new session
            output_dir: Directory for exported MIDI files
        """
        self.config = config or EngineConfig()
        self.output_dir = output_dir or Path.cwd() / "output"
        self._sessions: dict[str, Session] = {}

    def create(self, name: str) -> Session:
        """
        Create a new session.

        Raises:
            ValueError: If a session with this name exists
        """
        if name in self._sessions:
            raise ValueError(ErrorMessages.SESSION_EXISTS.format(name=name))

        tone_player = MidiTonePlayer(self.config.tone)
        engine = PitchGraphEngine(tone_player=tone_player, config=self.config)
        session = Session(name, engine, tone_player)
        self._sessions[name] = session
        logger.info(f"Created session '{name}'")
        return session

    def get(self, name: str) -> Session | None:
        """Get a session by name, or None."""
        return self._sessions.get(name)

    def require(self, name: str) -> Session:
        """
        Get a session by name.

        Raises:
            ValueError: If the session does not exist
        """
        session = self._sessions.get(name)
        if session is None:
            raise ValueError(ErrorMessages.NO_SESSION.format(name=name))
        return session

    def list_sessions(self) -> list[SessionMetadata]:
        """Metadata for every session, newest first."""
        result = [session.metadata() for session in self._sessions.values()]
        return sorted(result, key=lambda m: m.created, reverse=True)

    def delete(self, name: str) -> bool:
        """
        Delete a session, silencing its tones.

        Returns:
            True if deleted, False if not found
        """
        session = self._sessions.pop(name, None)
        if session is None:
            return False
        session.tone_player.all_notes_off()
        logger.info(f"Deleted session '{name}'")
        return True

    def reset(self, name: str) -> Session:
        """Release every key of a session and clear its graph."""
        session = self.require(name)
        session.engine.reset()
        return session

    def export_midi(self, name: str, output_name: str | None = None) -> Path:
        """
        Write a session's tone recording to a MIDI file.

        Args:
            name: Session name
            output_name: Optional output filename (without .mid extension)

        Returns:
            Path to the written file
        """
        session = self.require(name)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Sanitize name for filename
        safe_name = (output_name or name).replace(" ", "_").replace("/", "_")
        path = self.output_dir / f"{safe_name}.mid"

        session.tone_player.to_midi_file().save(str(path))
        return path

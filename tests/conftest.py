"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_dissonance.audio import MidiTonePlayer
from chuk_mcp_dissonance.graph import PitchGraphEngine, Point


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def tone_player(clock: FakeClock) -> MidiTonePlayer:
    """MIDI tone player on a fake clock."""
    return MidiTonePlayer(clock=clock)


@pytest.fixture
def engine(tone_player: MidiTonePlayer) -> PitchGraphEngine:
    """Engine placing every node at the origin."""
    return PitchGraphEngine(tone_player=tone_player, placement=lambda _pc, _count: Point(0, 0))

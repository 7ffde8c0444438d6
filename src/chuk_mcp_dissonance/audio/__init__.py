"""
Tone players invoked by the engine on pitch-class transitions.
"""

from chuk_mcp_dissonance.audio.tone import (
    MidiTonePlayer,
    NullTonePlayer,
    RecordedMessage,
    TonePlayer,
)

__all__ = ["TonePlayer", "NullTonePlayer", "MidiTonePlayer", "RecordedMessage"]

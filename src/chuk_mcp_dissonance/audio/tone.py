"""
Tone players - what the engine calls when a pitch class starts or stops.

The engine only says "this pitch class is now on/off"; it never looks at
a return value. MidiTonePlayer turns that into MIDI messages with mido,
sends them to an optional output port and keeps a timestamped recording
that can be written out as a MIDI file.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from mido import Message, MetaMessage, MidiFile, MidiTrack, bpm2tempo, second2tick

from chuk_mcp_dissonance.core.pitch import PitchClass
from chuk_mcp_dissonance.models.config import ToneConfig

logger = logging.getLogger(__name__)

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480


class TonePlayer(Protocol):
    """Anything that can switch a pitch-class tone on and off."""

    def set_active(self, pitch_class: PitchClass, on: bool) -> None: ...


class NullTonePlayer:
    """Silent player for headless use and tests."""

    def set_active(self, pitch_class: PitchClass, on: bool) -> None:
        return None


@dataclass(frozen=True)
class RecordedMessage:
    """A MIDI message and the clock time it was emitted at (seconds)."""

    at: float
    message: Message


class MidiTonePlayer:
    """
    Plays pitch classes as MIDI notes.

    Args:
        config: Octave, velocity and channel for the notes
        port: Optional mido output port (anything with `send(msg)`)
        clock: Time source in seconds, injectable for tests
    """

    def __init__(
        self,
        config: ToneConfig | None = None,
        port: Any | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or ToneConfig()
        self.port = port
        self._clock = clock
        self._active: set[PitchClass] = set()
        self._recording: list[RecordedMessage] = []

    def note_for(self, pitch_class: PitchClass) -> int:
        """MIDI note number used for a pitch class."""
        return pitch_class.to_midi(self.config.octave)

    def set_active(self, pitch_class: PitchClass, on: bool) -> None:
        """Start or stop the tone for a pitch class. Repeated calls are ignored."""
        if on == (pitch_class in self._active):
            return

        if on:
            self._active.add(pitch_class)
            msg = Message(
                "note_on",
                channel=self.config.channel,
                note=self.note_for(pitch_class),
                velocity=self.config.velocity,
            )
        else:
            self._active.discard(pitch_class)
            msg = Message(
                "note_off",
                channel=self.config.channel,
                note=self.note_for(pitch_class),
                velocity=0,
            )

        self._recording.append(RecordedMessage(at=self._clock(), message=msg))
        if self.port is not None:
            self.port.send(msg)
        logger.debug(f"Tone {pitch_class.spell()} {'on' if on else 'off'}")

    @property
    def active(self) -> set[PitchClass]:
        """Pitch classes currently sounding."""
        return set(self._active)

    @property
    def recording(self) -> list[RecordedMessage]:
        """Every message emitted so far, oldest first."""
        return list(self._recording)

    def all_notes_off(self) -> None:
        """Stop every sounding tone."""
        for pitch_class in sorted(self._active):
            self.set_active(pitch_class, False)

    def clear_recording(self) -> None:
        """Drop the recording. Sounding tones are left alone."""
        self._recording.clear()

    def to_midi_file(self, ticks_per_beat: int = TICKS_PER_BEAT) -> MidiFile:
        """
        Render the recording as a single-track MIDI file.

        Times are measured from the first recorded message. Tones still
        sounding are closed at the time of the last message.
        """
        tempo = bpm2tempo(self.config.tempo)
        mid = MidiFile(ticks_per_beat=ticks_per_beat)
        track = MidiTrack()
        mid.tracks.append(track)
        track.append(MetaMessage("set_tempo", tempo=tempo, time=0))

        messages = list(self._recording)
        if messages:
            start = messages[0].at
            end = messages[-1].at
            for pitch_class in sorted(self._active):
                messages.append(
                    RecordedMessage(
                        at=end,
                        message=Message(
                            "note_off",
                            channel=self.config.channel,
                            note=self.note_for(pitch_class),
                            velocity=0,
                        ),
                    )
                )

            # Convert to delta times
            current_ticks = 0
            for recorded in messages:
                abs_ticks = int(round(second2tick(recorded.at - start, ticks_per_beat, tempo)))
                track.append(recorded.message.copy(time=abs_ticks - current_ticks))
                current_ticks = abs_ticks

        track.append(MetaMessage("end_of_track", time=0))
        return mid

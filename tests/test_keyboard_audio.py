"""
Tests for the physical keyboard and the MIDI tone player.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_dissonance.audio import MidiTonePlayer, NullTonePlayer
from chuk_mcp_dissonance.core import PitchClass
from chuk_mcp_dissonance.errors import UnknownKeyError
from chuk_mcp_dissonance.keyboard import Keyboard, PhysicalKey
from chuk_mcp_dissonance.models import ToneConfig


class FakePort:
    """Output port that stores what it is sent."""

    def __init__(self) -> None:
        self.sent: list = []

    def send(self, msg) -> None:
        self.sent.append(msg)


class TestKeyboard:
    """Tests for Keyboard and PhysicalKey."""

    def test_twenty_five_keys(self) -> None:
        """C3 to C5 inclusive."""
        keyboard = Keyboard()
        keys = keyboard.keys()
        assert len(keyboard) == 25
        assert keys[0].id == "c3"
        assert keys[-1].id == "c5"

    def test_key_pitch_and_octave(self) -> None:
        """Key ids resolve to pitch class and octave."""
        key = Keyboard().key("f#4")
        assert key.pitch_class == PitchClass.Fs
        assert key.octave == 4
        assert key.index == 18
        assert key.is_black

    def test_lookup_case_insensitive(self) -> None:
        """Lookups ignore case and surrounding whitespace."""
        assert Keyboard().key(" A#3 ").id == "a#3"
        assert "C4" in Keyboard()

    def test_unknown_key(self) -> None:
        """Keys off the keyboard raise."""
        with pytest.raises(UnknownKeyError):
            Keyboard().key("d6")

    def test_keys_for_pitch_class(self) -> None:
        """Three Cs, two of everything else."""
        keyboard = Keyboard()
        assert [k.id for k in keyboard.keys_for(PitchClass.C)] == ["c3", "c4", "c5"]
        assert len(keyboard.keys_for(PitchClass.E)) == 2

    def test_frequencies(self) -> None:
        """Each key is a half step above the last; an octave doubles."""
        keyboard = Keyboard()
        c3 = keyboard.key("c3").frequency
        assert c3 == pytest.approx(261.6256)
        assert keyboard.key("c4").frequency == pytest.approx(2 * c3, rel=1e-6)
        assert keyboard.key("c#3").frequency / c3 == pytest.approx(1.05946309436)

    def test_from_id(self) -> None:
        """Keys build from their id."""
        key = PhysicalKey.from_id("g#3", 8)
        assert key.pitch_class == PitchClass.Gs
        assert key.octave == 3


class TestNullTonePlayer:
    """Tests for NullTonePlayer."""

    def test_silent(self) -> None:
        """Calls are accepted and ignored."""
        assert NullTonePlayer().set_active(PitchClass.C, True) is None


class TestMidiTonePlayer:
    """Tests for MidiTonePlayer."""

    def test_note_on_off(self, tone_player: MidiTonePlayer) -> None:
        """On and off emit note_on and note_off for the configured octave."""
        tone_player.set_active(PitchClass.A, True)
        tone_player.set_active(PitchClass.A, False)

        messages = [r.message for r in tone_player.recording]
        assert [m.type for m in messages] == ["note_on", "note_off"]
        assert messages[0].note == 69
        assert messages[0].velocity == 64

    def test_repeated_calls_ignored(self, tone_player: MidiTonePlayer) -> None:
        """Turning on a sounding tone does nothing."""
        tone_player.set_active(PitchClass.C, True)
        tone_player.set_active(PitchClass.C, True)
        tone_player.set_active(PitchClass.D, False)
        assert len(tone_player.recording) == 1
        assert tone_player.active == {PitchClass.C}

    def test_port_receives_messages(self) -> None:
        """Messages go to the output port."""
        port = FakePort()
        player = MidiTonePlayer(ToneConfig(octave=3, channel=2), port=port)
        player.set_active(PitchClass.E, True)
        assert port.sent[0].note == 52
        assert port.sent[0].channel == 2

    def test_all_notes_off(self, tone_player: MidiTonePlayer) -> None:
        """all_notes_off silences every tone."""
        tone_player.set_active(PitchClass.C, True)
        tone_player.set_active(PitchClass.G, True)
        tone_player.all_notes_off()
        assert tone_player.active == set()
        assert [r.message.type for r in tone_player.recording][-2:] == ["note_off", "note_off"]

    def test_midi_file_timing(self, tone_player: MidiTonePlayer, clock) -> None:
        """At 120 bpm, half a second is one beat."""
        tone_player.set_active(PitchClass.C, True)
        clock.advance(0.5)
        tone_player.set_active(PitchClass.C, False)

        mid = tone_player.to_midi_file()
        notes = [m for m in mid.tracks[0] if m.type in ("note_on", "note_off")]
        assert [m.time for m in notes] == [0, 480]

    def test_midi_file_closes_open_notes(self, tone_player: MidiTonePlayer, clock) -> None:
        """Tones still sounding are closed at the end."""
        tone_player.set_active(PitchClass.C, True)
        clock.advance(1.0)
        tone_player.set_active(PitchClass.E, True)

        mid = tone_player.to_midi_file()
        types = [m.type for m in mid.tracks[0] if m.type in ("note_on", "note_off")]
        assert types == ["note_on", "note_on", "note_off", "note_off"]

    def test_empty_recording(self, tone_player: MidiTonePlayer) -> None:
        """An empty recording is still a valid file."""
        mid = tone_player.to_midi_file()
        assert [m.type for m in mid.tracks[0]] == ["set_tempo", "end_of_track"]

    def test_saved_file_loads(self, tone_player: MidiTonePlayer, temp_dir: Path) -> None:
        """Exported files read back with mido."""
        tone_player.set_active(PitchClass.B, True)
        path = temp_dir / "out.mid"
        tone_player.to_midi_file().save(str(path))
        loaded = MidiFile(str(path))
        assert any(m.type == "note_on" and m.note == 71 for m in loaded.tracks[0])

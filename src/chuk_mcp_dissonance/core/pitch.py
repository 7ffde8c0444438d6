"""
Pitch primitives - PitchClass.

A pitch class is a pitch under octave identification: every C on the
keyboard is PitchClass.C. The integer value is the scale position (0-11)
used to measure the distance between two pitch classes.
"""

from __future__ import annotations

from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C3 and C4 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Internally, we use sharp names (Cs, Ds, etc.); `spell()` gives the
    display name ("C#").
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @property
    def scale_position(self) -> int:
        """Position within the octave, 0 (C) to 11 (B)."""
        return int(self.value)

    def distance_to(self, other: PitchClass) -> int:
        """
        Absolute semitone distance between two scale positions (0-11).

        Not folded: C -> G is 7, G -> C is also 7.
        """
        return abs(self.scale_position - other.scale_position)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db' or 'Cs'."""
        name = name.strip()

        # Keyboard ids are lower case ("c#"), display names upper case
        if name[:1].islower():
            name = name[:1].upper() + name[1:]

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")

"""
The physical keyboard - 25 keys from C3 to C5.

The keyboard spans more than an octave, so several keys share a pitch
class (c3, c4 and c5 are all C). The graph only ever sees pitch classes;
key ids exist so selection and release can be paired per physical key.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_dissonance.constants import C3_FREQUENCY, HALF_STEP_RATIO, KEYBOARD_KEY_IDS
from chuk_mcp_dissonance.core.pitch import PitchClass
from chuk_mcp_dissonance.errors import UnknownKeyError


@dataclass(frozen=True)
class PhysicalKey:
    """One key on the keyboard."""

    id: str  # e.g. "c#3"
    index: int  # 0 (c3) to 24 (c5)
    pitch_class: PitchClass
    octave: int

    @property
    def frequency(self) -> float:
        """Oscillator frequency in Hz."""
        return C3_FREQUENCY * (HALF_STEP_RATIO**self.index) * 2

    @property
    def is_black(self) -> bool:
        """True for sharps."""
        return "#" in self.id

    @classmethod
    def from_id(cls, key_id: str, index: int) -> PhysicalKey:
        """Build a key from an id like 'c#3' and its keyboard index."""
        letter = key_id.rstrip("0123456789")
        octave = int(key_id[len(letter) :])
        return cls(id=key_id, index=index, pitch_class=PitchClass.parse(letter), octave=octave)


class Keyboard:
    """Ordered collection of physical keys with lookup by id."""

    def __init__(self, key_ids: tuple[str, ...] = KEYBOARD_KEY_IDS) -> None:
        self._keys: dict[str, PhysicalKey] = {
            key_id: PhysicalKey.from_id(key_id, index) for index, key_id in enumerate(key_ids)
        }

    def key(self, key_id: str) -> PhysicalKey:
        """Get a key by id (case-insensitive)."""
        try:
            return self._keys[key_id.strip().lower()]
        except KeyError:
            raise UnknownKeyError(key_id) from None

    def keys(self) -> list[PhysicalKey]:
        """All keys, lowest first."""
        return list(self._keys.values())

    def keys_for(self, pitch_class: PitchClass) -> list[PhysicalKey]:
        """Every key sharing a pitch class."""
        return [key for key in self._keys.values() if key.pitch_class == pitch_class]

    def __contains__(self, key_id: object) -> bool:
        return isinstance(key_id, str) and key_id.strip().lower() in self._keys

    def __len__(self) -> int:
        return len(self._keys)

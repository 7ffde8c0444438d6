"""
Pitch-class multiplicity - how many physical keys hold each pitch class.

Two Cs on the keyboard are one pitch class. The tracker turns "a key was
pressed" into "this pitch class just became active" by reporting only the
0 -> 1 and 1 -> 0 transitions.
"""

from __future__ import annotations

import logging

from chuk_mcp_dissonance.constants import ErrorMessages
from chuk_mcp_dissonance.core.pitch import PitchClass
from chuk_mcp_dissonance.errors import ContractViolationError

logger = logging.getLogger(__name__)


class MultiplicityTracker:
    """Per-pitch-class count of engaged physical keys."""

    def __init__(self) -> None:
        self._counts: dict[PitchClass, int] = {pc: 0 for pc in PitchClass}

    def activate(self, pitch_class: PitchClass) -> bool:
        """Count one more engaged key. True if the pitch class just became active."""
        self._counts[pitch_class] += 1
        return self._counts[pitch_class] == 1

    def deactivate(self, pitch_class: PitchClass) -> bool:
        """
        Count one key released. True if the pitch class just became inactive.

        Raises:
            ContractViolationError: If no key of this pitch class is engaged
        """
        if self._counts[pitch_class] == 0:
            message = ErrorMessages.COUNT_UNDERFLOW.format(pitch_class=pitch_class.spell())
            logger.error(message)
            raise ContractViolationError(message)
        self._counts[pitch_class] -= 1
        return self._counts[pitch_class] == 0

    def count(self, pitch_class: PitchClass) -> int:
        """Number of engaged keys for a pitch class."""
        return self._counts[pitch_class]

    def is_active(self, pitch_class: PitchClass) -> bool:
        """True if at least one key of this pitch class is engaged."""
        return self._counts[pitch_class] > 0

    def active(self) -> list[PitchClass]:
        """Active pitch classes in scale order."""
        return [pc for pc in PitchClass if self._counts[pc] > 0]

    def counts(self) -> dict[PitchClass, int]:
        """Copy of the full count table."""
        return dict(self._counts)

    def reset(self) -> None:
        """Release every key."""
        for pc in self._counts:
            self._counts[pc] = 0

"""
Dissonance classification.

Maps the semitone distance between two pitch classes to one of six
ordered levels. An interval and its octave complement are heard as
related (a fifth inverts to a fourth), so the distance is first folded
onto 0..6 with `6 - |6 - interval|` and then looked up.
"""

from __future__ import annotations

from enum import IntEnum


class DissonanceLevel(IntEnum):
    """
    Ordinal dissonance of an interval, 1 (consonant) to 6 (dissonant).

    Names follow the folded interval that produces the level.
    """

    PERFECT = 1  # P4 / P5
    MAJOR_THIRD = 2  # M3 / m6
    MINOR_THIRD = 3  # m3 / M6
    WHOLE_TONE = 4  # M2 / m7
    SEMITONE = 5  # m2 / M7
    TRITONE = 6  # TT


# Folded interval (0-6) -> level
_FOLDED_LEVELS: dict[int, DissonanceLevel] = {
    0: DissonanceLevel.PERFECT,  # unison, only reachable by calling classify(0) directly
    1: DissonanceLevel.SEMITONE,
    2: DissonanceLevel.WHOLE_TONE,
    3: DissonanceLevel.MINOR_THIRD,
    4: DissonanceLevel.MAJOR_THIRD,
    5: DissonanceLevel.PERFECT,
    6: DissonanceLevel.TRITONE,
}


def fold_interval(interval: int) -> int:
    """Fold a 0-11 semitone distance onto 0-6 (7 -> 5, 11 -> 1)."""
    return 6 - abs(6 - interval)


def classify(interval: int) -> DissonanceLevel:
    """
    Classify a semitone distance (0-11) into a dissonance level.

    Args:
        interval: Absolute distance between two scale positions

    Returns:
        The DissonanceLevel of the folded interval

    Raises:
        ValueError: If interval is outside 0-11

    Example:
        classify(7)  # C -> G, folds to 5 -> DissonanceLevel.PERFECT
        classify(6)  # C -> F#, DissonanceLevel.TRITONE
    """
    if not 0 <= interval <= 11:
        raise ValueError(f"Interval must be 0-11 semitones, got {interval}")
    return _FOLDED_LEVELS[fold_interval(interval)]

"""
Core primitives - pitch classes, dissonance and key multiplicity.

- PitchClass: The 12 chromatic pitch classes (0-11)
- DissonanceLevel / classify: Interval size to dissonance level
- MultiplicityTracker: Engaged-key counts per pitch class
"""

from chuk_mcp_dissonance.core.dissonance import DissonanceLevel, classify, fold_interval
from chuk_mcp_dissonance.core.multiplicity import MultiplicityTracker
from chuk_mcp_dissonance.core.pitch import PitchClass

__all__ = [
    "PitchClass",
    "DissonanceLevel",
    "classify",
    "fold_interval",
    "MultiplicityTracker",
]

"""
Constants for the dissonance visualizer.

No magic strings - keyboard names, colours and messages live here.
"""

from typing import Literal

# Ratio between neighbouring semitones: 2^(1/12)
HALF_STEP_RATIO = 1.05946309436

# Base frequency of the lowest key (C3) in Hz
C3_FREQUENCY = 130.8128

# Physical keyboard: two octaves plus the closing C
KEYBOARD_KEY_IDS: tuple[str, ...] = (
    "c3",
    "c#3",
    "d3",
    "d#3",
    "e3",
    "f3",
    "f#3",
    "g3",
    "g#3",
    "a3",
    "a#3",
    "b3",
    "c4",
    "c#4",
    "d4",
    "d#4",
    "e4",
    "f4",
    "f#4",
    "g4",
    "g#4",
    "a4",
    "a#4",
    "b4",
    "c5",
)

# Link colours by dissonance level (1 = most consonant, 6 = most dissonant)
DEFAULT_COLOUR_MAP: dict[int, str] = {
    1: "#61abf5",
    2: "#75d2ee",
    3: "#d1ebe3",
    4: "#f6e885",
    5: "#f19641",
    6: "#e30808",
}

# Offset between a node's box and the canvas the links are drawn on
CANVAS_OFFSET_X = 48.0
CANVAS_OFFSET_Y = 16.0

LayoutMode = Literal["ring", "row"]


class ErrorMessages:
    """Standardized error messages."""

    NO_SESSION = "Session '{name}' not found."
    SESSION_EXISTS = "Session '{name}' already exists."
    UNKNOWN_KEY = "Unknown keyboard key: '{key_id}'."
    NODE_NOT_FOUND = "Node {node_id} not found."
    EDGE_NOT_FOUND = "Edge {edge_id} not found."
    PITCH_CLASS_ACTIVE = "Pitch class {pitch_class} already has a node."
    PITCH_CLASS_INACTIVE = "Pitch class {pitch_class} has no active node."
    COUNT_UNDERFLOW = "Pitch class {pitch_class} has no engaged keys to release."
    KEY_ALREADY_SELECTED = "Key '{key_id}' is already selected."
    KEY_NOT_SELECTED = "Key '{key_id}' is not selected."
    KEY_PITCH_MISMATCH = "Key '{key_id}' was selected as {expected}, not {actual}."
    DRAG_NODE_MISMATCH = "Drag session holds node {active}, not node {node_id}."


class SuccessMessages:
    """Standardized success messages."""

    SESSION_CREATED = "Created session '{name}'."
    SESSION_DELETED = "Session '{name}' deleted."
    SESSION_RESET = "Session '{name}' reset."
    MIDI_EXPORTED = "Exported session '{name}' to {path}."

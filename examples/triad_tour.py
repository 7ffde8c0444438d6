#!/usr/bin/env python3
"""
Example: Walk through a few chords and watch the dissonance graph.

This demonstrates the engine end to end - key selection, octave doubling,
dragging, and exporting what was played as MIDI.

Usage:
    python examples/triad_tour.py
    # Creates: examples/output/triad_tour.mid
"""

import time
from pathlib import Path

from chuk_mcp_dissonance.audio import MidiTonePlayer
from chuk_mcp_dissonance.graph import PitchGraphEngine, Point


def print_graph(engine: PitchGraphEngine, title: str) -> None:
    """Print nodes and edges of the current graph."""
    snapshot = engine.snapshot()
    print(f"\n{title}")
    print(f"  Nodes: {', '.join(n.pitch_class for n in snapshot.nodes) or '-'}")
    names = {n.id: n.pitch_class for n in snapshot.nodes}
    for edge in snapshot.edges:
        print(
            f"  {names[edge.source]:>2} - {names[edge.target]:<2}"
            f" interval {edge.interval:>2}  level {edge.level}  {edge.colour}"
        )


def main() -> None:
    """Play C major, turn it into C diminished-ish, and drag a node."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    player = MidiTonePlayer()
    engine = PitchGraphEngine(tone_player=player)

    # C major triad
    for key in ("c3", "e3", "g3"):
        engine.toggle_key(key)
    print_graph(engine, "C major")

    # Doubling C an octave up adds no node
    time.sleep(0.25)
    engine.toggle_key("c4")
    print_graph(engine, "C major, doubled root")

    # Swap G for F# - the tritone lights up
    time.sleep(0.25)
    engine.toggle_key("g3")
    engine.toggle_key("f#3")
    print_graph(engine, "C, E, F#")

    # Drag C to the right; its edge endpoints follow
    c_node = engine.nodes()[0]
    engine.on_drag_start(c_node.id, Point(0, 0))
    for step in range(1, 6):
        engine.on_drag_move(c_node.id, Point(step * 8, step * 2))
    engine.on_drag_end(c_node.id)
    moved = engine.nodes()[0]
    print(f"\nDragged C from ({c_node.x:.1f}, {c_node.y:.1f}) to ({moved.x:.1f}, {moved.y:.1f})")

    time.sleep(0.25)
    engine.reset()

    path = output_dir / "triad_tour.mid"
    player.to_midi_file().save(str(path))
    print(f"\nCreated: {path}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Example: Edit a tab section and render it.

This demonstrates the editing workflow an editor UI drives:
each edit returns a new Section, so every step is a snapshot
that can be kept for undo.

Usage:
    python examples/edit_section.py
"""

from chuk_tab import Section, TuningLoader
from chuk_tab.serialization import dumps, loads


def main() -> None:
    """Build a short riff step by step."""
    tuning = TuningLoader().get_notes("standard")

    history = [Section.create(tuning)]
    history.append(history[-1].update_name("Intro Riff").set_bpm(96))

    # Three more columns, then fill in a few frets
    for _ in range(3):
        history.append(history[-1].add_column(len(history[-1].columns) - 1))
    history.append(history[-1].set_fret(0, 6, "0").set_fret(1, 6, "3").set_fret(2, 5, "12"))
    history.append(history[-1].set_fret(3, 4, "x"))

    section = history[-1]
    print(section.to_text())

    # Undo is just picking an earlier snapshot
    print("Before the last edit:")
    print(history[-2].to_text())

    # JSON round trip - the tuning travels separately
    text = dumps(section, indent=2)
    print(text)
    assert loads(text, tuning).to_json() == section.to_json()

    # Re-tune to bass: strings 5 and 6 (A2, E2) are dropped
    bass = section.set_tuning(TuningLoader().get_notes("bass"))
    print(bass.to_text())


if __name__ == "__main__":
    main()

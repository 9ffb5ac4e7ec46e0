#!/usr/bin/env python3
"""
Example: Generate chord progression MIDI files.

Run this script to create playable MIDI files you can open in any DAW.

Usage:
    python examples/generate_progression.py
    # Creates: examples/output/C_major_chords.mid, ...
"""

from pathlib import Path

from chuk_mcp_chords import generate
from chuk_mcp_chords.compiler import progression_to_midi
from chuk_mcp_chords.models import progression_filename

EXAMPLES = [
    ("C major", 4),
    ("A minor", 3),
    ("F# major", 2),
    ("Bbm", 6),
    ("Eb major", 5),
]


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    for key, num_chords in EXAMPLES:
        result = generate(key, num_chords)
        path = output_dir / progression_filename(key)
        progression_to_midi(result).save(str(path))

        print(f"{key} ({result.label}):")
        for chord in result:
            print(f"  {chord.numeral:>4}  {chord.symbol:<4} {' '.join(chord.note_names)}")
        print(f"  Created: {path}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()

"""
Core music primitives.

The pieces the engine composes:
- Pitch table: note names <-> pitch classes and MIDI numbers
- Key parsing: free-form key strings -> Key
- Scale: degree offsets and key-signature spelling
- Chord: diatonic triads on scale degrees
- Progression: chord count -> degree template
"""

from chuk_mcp_chords.core.chord import (
    Chord,
    ChordQuality,
    build_chord,
    chord_quality_for,
    diatonic_chords,
)
from chuk_mcp_chords.core.key_parser import parse_key
from chuk_mcp_chords.core.pitch import (
    NOTE_TO_MIDI,
    SHARP_NAMES,
    PitchClass,
    format_note,
    midi_to_note,
    note_to_midi,
    pitch_class_of,
)
from chuk_mcp_chords.core.progression import (
    PROGRESSION_TEMPLATES,
    ProgressionTemplate,
    degrees_for,
    template_for,
)
from chuk_mcp_chords.core.scale import (
    Key,
    chromatic_degree_name,
    degree_index,
    degree_offset,
    preferred_spelling,
    scale_notes,
    spelled_degree_note,
)

__all__ = [
    # Pitch
    "NOTE_TO_MIDI",
    "SHARP_NAMES",
    "PitchClass",
    "format_note",
    "midi_to_note",
    "note_to_midi",
    "pitch_class_of",
    # Key parsing
    "parse_key",
    # Scale
    "Key",
    "chromatic_degree_name",
    "degree_index",
    "degree_offset",
    "preferred_spelling",
    "scale_notes",
    "spelled_degree_note",
    # Chord
    "Chord",
    "ChordQuality",
    "build_chord",
    "chord_quality_for",
    "diatonic_chords",
    # Progression
    "PROGRESSION_TEMPLATES",
    "ProgressionTemplate",
    "degrees_for",
    "template_for",
]

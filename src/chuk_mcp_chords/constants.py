"""
Constants for the chord progression engine.

No magic strings - use enums and named constants for constrained values.
"""

from enum import Enum

# Progression length bounds (inclusive)
MIN_CHORDS = 2
MAX_CHORDS = 6
DEFAULT_NUM_CHORDS = 4

# Octave the chord roots are placed in (C4 = 60)
DEFAULT_OCTAVE = 4

# Every chord is a whole note at a fixed velocity
CHORD_BEATS = 4
CHORD_VELOCITY = 100

MIDI_MIME_TYPE = "audio/midi"


class Mode(str, Enum):
    """Scale mode of a key."""

    MAJOR = "major"
    MINOR = "minor"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_KEY_FORMAT = (
        "Invalid key format: '{key}'. Expected format like 'C major', 'A minor', "
        "'F#' or 'Bbm'."
    )
    INVALID_NOTE = (
        "Invalid root note: '{note}'. Valid notes: C, C#, D, D#, E, F, F#, G, G#, "
        "A, A#, B (or enharmonic equivalents like Db, Eb, Gb, Ab, Bb)."
    )
    INVALID_CHORD_COUNT = (
        "Invalid num_chords: {num_chords}. Must be between "
        f"{MIN_CHORDS} and {MAX_CHORDS} (inclusive)."
    )


class SuccessMessages:
    """Standardized success messages."""

    PROGRESSION_GENERATED = "Generated MIDI file with {label} chord progression in {key}."
    PROGRESSION_SAVED = "Saved {label} chord progression in {key} to {path}."

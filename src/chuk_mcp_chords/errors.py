"""
Engine errors.

All of these are caller input errors. They subclass ValueError so callers
that only care about "bad input" can catch that.
"""

from __future__ import annotations

from chuk_mcp_chords.constants import ErrorMessages


class ChordProgressionError(ValueError):
    """Base class for invalid input to the chord progression engine."""


class InvalidKeyFormatError(ChordProgressionError):
    """The key string cannot be reduced to a root note."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(ErrorMessages.INVALID_KEY_FORMAT.format(key=key))


class InvalidNoteError(ChordProgressionError):
    """A note name is not in the pitch table."""

    def __init__(self, note: object) -> None:
        self.note = note
        super().__init__(ErrorMessages.INVALID_NOTE.format(note=note))


class InvalidChordCountError(ChordProgressionError):
    """Requested chord count is outside the supported range."""

    def __init__(self, num_chords: object) -> None:
        self.num_chords = num_chords
        super().__init__(ErrorMessages.INVALID_CHORD_COUNT.format(num_chords=num_chords))

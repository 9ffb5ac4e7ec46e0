"""
Pitch primitives - PitchClass and the note-name table.

PitchClass represents the 12 chromatic pitches (octave-independent).
The note table maps every accepted spelling to its octave-4 MIDI value,
which is where chord roots are anchored.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType

from chuk_mcp_chords.errors import InvalidNoteError

# Canonical (sharp) names, indexed by pitch class. Used as the fallback spelling.
SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Note name -> MIDI note number in octave 4 (C4 = 60).
# The last four spellings only appear in key signatures (F# major, Gb major...).
# They stay inside the C4-B4 band so every spelling of a class gives one pitch.
NOTE_TO_MIDI: MappingProxyType[str, int] = MappingProxyType(
    {
        "C": 60,
        "C#": 61,
        "Db": 61,
        "D": 62,
        "D#": 63,
        "Eb": 63,
        "E": 64,
        "F": 65,
        "F#": 66,
        "Gb": 66,
        "G": 67,
        "G#": 68,
        "Ab": 68,
        "A": 69,
        "A#": 70,
        "Bb": 70,
        "B": 71,
        "E#": 65,
        "Cb": 71,
        "B#": 60,
        "Fb": 64,
    }
)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self) -> str:
        """Canonical sharp name."""
        return SHARP_NAMES[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a note name like 'C', 'C#', 'Db'."""
        return pitch_class_of(name)


def is_note_name(name: object) -> bool:
    """True if `name` is a spelling in the note table."""
    return isinstance(name, str) and name in NOTE_TO_MIDI


def pitch_class_of(name: str) -> PitchClass:
    """
    Look up the pitch class for a note name.

    Names are case-sensitive: a letter A-G optionally followed by '#' or 'b'.

    Raises:
        InvalidNoteError: if the name is not a known spelling
    """
    if not is_note_name(name):
        raise InvalidNoteError(name)
    return PitchClass.from_midi(NOTE_TO_MIDI[name])


def note_to_midi(name: str, octave: int = 4) -> int:
    """Convert a note name and octave to a MIDI note number. C4 = 60."""
    if not is_note_name(name):
        raise InvalidNoteError(name)
    return NOTE_TO_MIDI[name] + (octave - 4) * 12


def midi_to_note(midi_note: int) -> tuple[str, int]:
    """
    Split a MIDI note number into (canonical name, octave).

    Works for any integer: 60 -> ('C', 4), 0 -> ('C', -1), -1 -> ('B', -2).
    """
    return SHARP_NAMES[midi_note % 12], midi_note // 12 - 1


def format_note(midi_note: int) -> str:
    """Display form of a MIDI note, e.g. 'C#4'."""
    name, octave = midi_to_note(midi_note)
    return f"{name}{octave}"

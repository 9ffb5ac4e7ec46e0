"""
Scale primitives - Key, degree offsets and degree spelling.

Keys are a root spelling plus a mode. Scale degrees are positions (1-7)
within the mode's scale; any integer is accepted and wrapped modulo 7.

Spelling a degree happens in two explicit stages:
1. chromatic_degree_name - the canonical sharp name of the computed pitch class
2. preferred_spelling - the key-signature spelling for the root, if known

Minor keys reuse the major table for the same root spelling. That is a
simplification (A minor spells like A major), so a preferred name is only
taken when it names the same pitch class as the computed degree.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from chuk_mcp_chords.constants import Mode
from chuk_mcp_chords.core.pitch import NOTE_TO_MIDI, SHARP_NAMES, PitchClass, pitch_class_of

# Chromatic offsets from the root for degrees 1-7
MAJOR_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
MINOR_OFFSETS: tuple[int, ...] = (0, 2, 3, 5, 7, 8, 10)  # natural minor

SCALE_OFFSETS: MappingProxyType[Mode, tuple[int, ...]] = MappingProxyType(
    {
        Mode.MAJOR: MAJOR_OFFSETS,
        Mode.MINOR: MINOR_OFFSETS,
    }
)

# Degree names for each major key signature, keyed by root spelling
SPELLING_PREFERENCES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "C": ("C", "D", "E", "F", "G", "A", "B"),
        "Db": ("Db", "Eb", "F", "Gb", "Ab", "Bb", "C"),
        "D": ("D", "E", "F#", "G", "A", "B", "C#"),
        "Eb": ("Eb", "F", "G", "Ab", "Bb", "C", "D"),
        "E": ("E", "F#", "G#", "A", "B", "C#", "D#"),
        "F": ("F", "G", "A", "Bb", "C", "D", "E"),
        "F#": ("F#", "G#", "A#", "B", "C#", "D#", "E#"),
        "Gb": ("Gb", "Ab", "Bb", "Cb", "Db", "Eb", "F"),
        "G": ("G", "A", "B", "C", "D", "E", "F#"),
        "Ab": ("Ab", "Bb", "C", "Db", "Eb", "F", "G"),
        "A": ("A", "B", "C#", "D", "E", "F#", "G#"),
        "Bb": ("Bb", "C", "D", "Eb", "F", "G", "A"),
        "B": ("B", "C#", "D#", "E", "F#", "G#", "A#"),
    }
)


@dataclass(frozen=True)
class Key:
    """
    A key is a root note spelling plus a mode.

    The root keeps the spelling it was written with ('Db', not 'C#'),
    since that spelling selects the key signature.

    Examples:
        Key("C", Mode.MAJOR) = C major
        Key("Bb", Mode.MINOR) = Bb minor
    """

    root: str
    mode: Mode = Mode.MAJOR

    def __post_init__(self) -> None:
        # Raises InvalidNoteError for unknown spellings
        pitch_class_of(self.root)

    @property
    def pitch_class(self) -> PitchClass:
        """Pitch class of the root."""
        return pitch_class_of(self.root)

    @property
    def is_minor(self) -> bool:
        return self.mode == Mode.MINOR

    @property
    def offsets(self) -> tuple[int, ...]:
        """Chromatic offsets of the seven degrees."""
        return SCALE_OFFSETS[self.mode]

    def __str__(self) -> str:
        return f"{self.root} {self.mode.value}"


def degree_index(degree: int) -> int:
    """
    Zero-based position of a degree within the 7-note scale.

    Total over all integers: 8 -> 0, 0 -> 6, -1 -> 5.
    """
    return ((degree - 1) % 7 + 7) % 7


def degree_offset(mode: Mode, degree: int) -> int:
    """Semitones from the root to a scale degree."""
    return SCALE_OFFSETS[mode][degree_index(degree)]


def degree_pitch_class(key: Key, degree: int) -> PitchClass:
    """Resolve a scale degree to its (unspelled) pitch class."""
    return key.pitch_class.transpose(degree_offset(key.mode, degree))


def chromatic_degree_name(key: Key, degree: int) -> str:
    """Canonical sharp name of a scale degree (the fallback spelling)."""
    return SHARP_NAMES[degree_pitch_class(key, degree)]


def preferred_spelling(root: str, index: int) -> str | None:
    """
    Key-signature spelling of a degree, by root spelling and 0-based index.

    Returns None for roots without a table entry (C#, D#, G#, A#...).
    """
    names = SPELLING_PREFERENCES.get(root)
    if names is None:
        return None
    return names[index % 7]


def spelled_degree_note(key: Key, degree: int) -> str:
    """
    Note name of a scale degree, spelled for the key signature.

    Examples:
        spelled_degree_note(Key("F#"), 7) == "E#"
        spelled_degree_note(Key("Db"), 5) == "Ab"
        spelled_degree_note(Key("C#"), 3) == "F"  # no table entry, sharp fallback
    """
    canonical = chromatic_degree_name(key, degree)
    preferred = preferred_spelling(key.root, degree_index(degree))
    if preferred is None:
        return canonical
    # Minor keys borrow the major table; only keep names that sound the same
    if NOTE_TO_MIDI[preferred] % 12 != NOTE_TO_MIDI[canonical] % 12:
        return canonical
    return preferred


def scale_notes(key: Key) -> list[str]:
    """The seven spelled degree names of a key."""
    return [spelled_degree_note(key, degree) for degree in range(1, 8)]

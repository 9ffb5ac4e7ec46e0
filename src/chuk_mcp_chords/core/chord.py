"""
Chord primitives - ChordQuality and Chord.

Chords are interval stacks on a spelled root. Only plain major and minor
triads exist here: degree 7 in major and degrees 2, 3, 6, 7 in minor are
built as major or minor triads, never diminished.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from chuk_mcp_chords.constants import DEFAULT_OCTAVE, Mode
from chuk_mcp_chords.core.pitch import format_note, note_to_midi
from chuk_mcp_chords.core.scale import Key, degree_index, spelled_degree_note

# Degrees (1-7) that carry a minor triad, per key mode
MINOR_CHORD_DEGREES: MappingProxyType[Mode, frozenset[int]] = MappingProxyType(
    {
        Mode.MAJOR: frozenset({2, 3, 6}),
        Mode.MINOR: frozenset({1, 4, 5}),
    }
)

_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")


@dataclass(frozen=True)
class ChordQuality:
    """
    A triad quality defined by its intervals from the root.

    Intervals are in semitones, ordered root, third, fifth.
    """

    intervals: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]

    @property
    def is_minor(self) -> bool:
        return self.intervals[1] == 3

    @property
    def suffix(self) -> str:
        """Chord-symbol suffix ('' for major, 'm' for minor)."""
        return "m" if self.is_minor else ""

    def get_midi_notes(self, root_midi: int) -> list[int]:
        """MIDI note numbers for this quality on a root."""
        return [root_midi + interval for interval in self.intervals]

    def __str__(self) -> str:
        return self.name or f"ChordQuality({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ChordQuality.{self.name.upper()}"
        return f"ChordQuality({self.intervals!r})"


ChordQuality.MAJOR = ChordQuality((0, 4, 7), "major")
ChordQuality.MINOR = ChordQuality((0, 3, 7), "minor")


@dataclass(frozen=True)
class Chord:
    """
    A built triad: spelled root, quality and absolute pitches.

    Pitches are MIDI note numbers ordered root, third, fifth.
    """

    degree: int
    root_name: str
    quality: ChordQuality
    pitches: tuple[int, int, int]

    @property
    def root(self) -> int:
        return self.pitches[0]

    @property
    def third(self) -> int:
        return self.pitches[1]

    @property
    def fifth(self) -> int:
        return self.pitches[2]

    @property
    def is_minor(self) -> bool:
        return self.quality.is_minor

    @property
    def symbol(self) -> str:
        """Chord symbol, e.g. 'C', 'Am', 'F#'."""
        return f"{self.root_name}{self.quality.suffix}"

    @property
    def numeral(self) -> str:
        """Roman numeral, lower case for minor chords."""
        numeral = _NUMERALS[degree_index(self.degree)]
        return numeral.lower() if self.is_minor else numeral

    @property
    def note_names(self) -> list[str]:
        """Display names with octave, e.g. ['C4', 'E4', 'G4']."""
        return [format_note(pitch) for pitch in self.pitches]

    def __str__(self) -> str:
        return self.symbol


def chord_quality_for(mode: Mode, degree: int) -> ChordQuality:
    """Diatonic triad quality of a scale degree (wrapped into 1-7)."""
    if degree_index(degree) + 1 in MINOR_CHORD_DEGREES[mode]:
        return ChordQuality.MINOR
    return ChordQuality.MAJOR


def build_chord(key: Key, degree: int, octave: int = DEFAULT_OCTAVE) -> Chord:
    """
    Build the diatonic triad on a scale degree.

    Args:
        key: The key context
        degree: Scale degree (1-7; other integers wrap)
        octave: Octave of the chord root (default 4, where C4 = 60)

    Returns:
        The built Chord

    Example:
        build_chord(Key("C"), 4).note_names == ["F4", "A4", "C5"]
    """
    root_name = spelled_degree_note(key, degree)
    quality = chord_quality_for(key.mode, degree)
    root_midi = note_to_midi(root_name, octave)
    root, third, fifth = quality.get_midi_notes(root_midi)
    return Chord(degree, root_name, quality, (root, third, fifth))


def diatonic_chords(key: Key, octave: int = DEFAULT_OCTAVE) -> list[Chord]:
    """All seven diatonic triads of a key."""
    return [build_chord(key, degree, octave) for degree in range(1, 8)]

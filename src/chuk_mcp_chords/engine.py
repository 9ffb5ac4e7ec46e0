"""
Chord progression engine - key text and chord count to built chords.

The pipeline:
    key string → Key (parse_key)
    → degree template (template_for)
    → one Chord per degree at octave 4 (build_chord)
    → ProgressionResult

Deterministic and side-effect free: same input → same chords.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from chuk_mcp_chords.constants import DEFAULT_NUM_CHORDS, DEFAULT_OCTAVE
from chuk_mcp_chords.core.chord import Chord, build_chord
from chuk_mcp_chords.core.key_parser import parse_key
from chuk_mcp_chords.core.pitch import is_note_name
from chuk_mcp_chords.core.progression import (
    ProgressionTemplate,
    template_for,
    validate_chord_count,
)
from chuk_mcp_chords.core.scale import Key
from chuk_mcp_chords.errors import InvalidNoteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressionResult:
    """
    The built progression: one chord per template degree, in order.

    Behaves as a read-only sequence of Chord.
    """

    key: Key
    template: ProgressionTemplate
    chords: tuple[Chord, ...]

    @property
    def label(self) -> str:
        return self.template.label

    @property
    def degrees(self) -> tuple[int, ...]:
        return self.template.degrees

    def __iter__(self) -> Iterator[Chord]:
        return iter(self.chords)

    def __len__(self) -> int:
        return len(self.chords)

    def __getitem__(self, index: int) -> Chord:
        return self.chords[index]


def generate(key_string: str, num_chords: int = DEFAULT_NUM_CHORDS) -> ProgressionResult:
    """
    Build a chord progression in a key.

    Args:
        key_string: The musical key (e.g., "C major", "A minor", "F# major", "Bbm")
        num_chords: Number of chords in the progression (2-6, default 4)

    Returns:
        ProgressionResult with the chords in progression order

    Raises:
        InvalidChordCountError: num_chords outside 2-6
        InvalidKeyFormatError: no root note in key_string
        InvalidNoteError: root is not a known note name

    Example:
        result = generate("C major")
        [c.symbol for c in result] == ["C", "F", "G", "C"]
    """
    validate_chord_count(num_chords)

    key = parse_key(key_string)

    # The parser already checks this; the engine does not rely on it
    if not is_note_name(key.root):
        raise InvalidNoteError(key.root)

    template = template_for(num_chords)
    chords = tuple(build_chord(key, degree, DEFAULT_OCTAVE) for degree in template.degrees)

    logger.debug(
        f"Generated {template.label} in {key}: {' '.join(chord.symbol for chord in chords)}"
    )
    return ProgressionResult(key=key, template=template, chords=chords)

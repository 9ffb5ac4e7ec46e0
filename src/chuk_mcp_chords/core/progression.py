"""
Progression templates - chord count to scale degrees.

One fixed template per supported length. Labels use Roman numerals as
they read in a major key.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from chuk_mcp_chords.constants import MAX_CHORDS, MIN_CHORDS
from chuk_mcp_chords.errors import InvalidChordCountError


@dataclass(frozen=True)
class ProgressionTemplate:
    """An ordered sequence of scale degrees with its conventional label."""

    degrees: tuple[int, ...]
    label: str

    def __len__(self) -> int:
        return len(self.degrees)

    def __str__(self) -> str:
        return self.label


PROGRESSION_TEMPLATES: MappingProxyType[int, ProgressionTemplate] = MappingProxyType(
    {
        2: ProgressionTemplate((1, 5), "I-V"),
        3: ProgressionTemplate((1, 4, 5), "I-IV-V"),
        4: ProgressionTemplate((1, 4, 5, 1), "I-IV-V-I"),
        5: ProgressionTemplate((1, 6, 4, 5, 1), "I-vi-IV-V-I"),
        6: ProgressionTemplate((1, 6, 4, 5, 1, 4), "I-vi-IV-V-I-IV"),
    }
)


def validate_chord_count(num_chords: object) -> int:
    """
    Check a requested chord count.

    Raises:
        InvalidChordCountError: unless num_chords is an int in [2, 6]
    """
    # bool is an int subclass, but True is not a chord count
    if isinstance(num_chords, bool) or not isinstance(num_chords, int):
        raise InvalidChordCountError(num_chords)
    if not MIN_CHORDS <= num_chords <= MAX_CHORDS:
        raise InvalidChordCountError(num_chords)
    return num_chords


def template_for(num_chords: int) -> ProgressionTemplate:
    """Progression template for a chord count (2-6)."""
    return PROGRESSION_TEMPLATES[validate_chord_count(num_chords)]


def degrees_for(num_chords: int) -> tuple[int, ...]:
    """
    Scale degrees for a progression of `num_chords` chords.

    Example:
        degrees_for(4) == (1, 4, 5, 1)
    """
    return template_for(num_chords).degrees

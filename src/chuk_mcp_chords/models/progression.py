"""
Progression response models.

Pydantic views of engine results, shaped for the MCP tool responses.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.progression import ProgressionTemplate
from chuk_mcp_chords.core.scale import Key, scale_notes
from chuk_mcp_chords.engine import ProgressionResult

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_#]")


def progression_filename(key: str) -> str:
    """
    File name for a progression MIDI file.

    "F# major" -> "F#_major_chords.mid"
    """
    key_name = _UNSAFE_FILENAME_CHARS.sub("", _WHITESPACE.sub("_", key))
    return f"{key_name}_chords.mid"


class ChordSummary(BaseModel):
    """One chord of a progression."""

    degree: int = Field(..., ge=1, le=7, description="Scale degree (1-7)")
    numeral: str = Field(..., description="Roman numeral (lower case = minor)")
    symbol: str = Field(..., description="Chord symbol (e.g., 'C', 'Am')")
    quality: str = Field(..., description="Triad quality ('major' or 'minor')")
    notes: list[str] = Field(..., description="Note names with octave, root first")
    pitches: list[int] = Field(..., description="MIDI note numbers, root first")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordSummary:
        return cls(
            degree=chord.degree,
            numeral=chord.numeral,
            symbol=chord.symbol,
            quality=chord.quality.name,
            notes=chord.note_names,
            pitches=list(chord.pitches),
        )


class KeySummary(BaseModel):
    """A parsed key."""

    root: str = Field(..., description="Root note spelling (e.g., 'Bb')")
    mode: str = Field(..., description="'major' or 'minor'")
    name: str = Field(..., description="Display name (e.g., 'Bb minor')")

    model_config = {"frozen": True}

    @classmethod
    def from_key(cls, key: Key) -> KeySummary:
        return cls(root=key.root, mode=key.mode.value, name=str(key))


class TemplateSummary(BaseModel):
    """A progression template."""

    num_chords: int = Field(..., description="Number of chords")
    label: str = Field(..., description="Roman numeral label (e.g., 'I-IV-V-I')")
    degrees: list[int] = Field(..., description="Scale degrees in order")

    @classmethod
    def from_template(cls, template: ProgressionTemplate) -> TemplateSummary:
        return cls(
            num_chords=len(template),
            label=template.label,
            degrees=list(template.degrees),
        )


class ProgressionResponse(BaseModel):
    """Successful result of a chord progression tool call."""

    status: str = Field("success", description="Call status")
    key: str = Field(..., description="Key as requested")
    parsed_key: KeySummary = Field(..., description="Key as parsed")
    progression: str = Field(..., description="Progression label")
    chords: list[ChordSummary] = Field(..., description="Chords in order")
    filename: str = Field(..., description="Suggested MIDI file name")
    message: str = Field("", description="Human-readable summary")
    mime_type: str | None = Field(None, description="MIME type of midi_base64")
    midi_base64: str | None = Field(None, description="Base64-encoded MIDI file")
    path: str | None = Field(None, description="Where the MIDI file was written")

    @classmethod
    def from_result(
        cls, key: str, result: ProgressionResult, **extra: object
    ) -> ProgressionResponse:
        return cls(
            key=key,
            parsed_key=KeySummary.from_key(result.key),
            progression=result.label,
            chords=[ChordSummary.from_chord(chord) for chord in result],
            filename=progression_filename(key),
            **extra,
        )


class KeyDescription(BaseModel):
    """Scale and diatonic chords of a key."""

    status: str = Field("success", description="Call status")
    key: KeySummary = Field(..., description="Key as parsed")
    scale: list[str] = Field(..., description="Spelled scale degrees 1-7")
    chords: list[ChordSummary] = Field(..., description="Diatonic triads on degrees 1-7")

    @classmethod
    def from_key(cls, key: Key, chords: list[Chord]) -> KeyDescription:
        return cls(
            key=KeySummary.from_key(key),
            scale=scale_notes(key),
            chords=[ChordSummary.from_chord(chord) for chord in chords],
        )

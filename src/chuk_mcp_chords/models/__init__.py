"""
Pydantic models for tool responses.

This module provides:
- ProgressionResponse: A generated progression (with optional MIDI payload)
- KeyDescription: Scale and diatonic chords of a key
- ChordSummary, KeySummary, TemplateSummary: Building blocks
"""

from chuk_mcp_chords.models.progression import (
    ChordSummary,
    KeyDescription,
    KeySummary,
    ProgressionResponse,
    TemplateSummary,
    progression_filename,
)

__all__ = [
    "ChordSummary",
    "KeyDescription",
    "KeySummary",
    "ProgressionResponse",
    "TemplateSummary",
    "progression_filename",
]

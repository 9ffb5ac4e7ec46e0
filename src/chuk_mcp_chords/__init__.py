"""
Chord progression engine and MCP server.

Turns a key like "C major" or "Bbm" into a diatonic triad progression
and exports it as MIDI.
"""

from chuk_mcp_chords.engine import ProgressionResult, generate
from chuk_mcp_chords.errors import (
    ChordProgressionError,
    InvalidChordCountError,
    InvalidKeyFormatError,
    InvalidNoteError,
)

__version__ = "0.1.0"

__all__ = [
    "ChordProgressionError",
    "InvalidChordCountError",
    "InvalidKeyFormatError",
    "InvalidNoteError",
    "ProgressionResult",
    "generate",
]

"""
MCP tool implementations.

- progression - Chord progression generation, MIDI export and key lookup
"""

from chuk_mcp_chords.tools.progression import register_progression_tools

__all__ = [
    "register_progression_tools",
]

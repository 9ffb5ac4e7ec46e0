#!/usr/bin/env python3
"""
Async Chord Progression MCP Server using chuk-mcp-server

This server provides MCP tools for turning a musical key into a chord
progression MIDI file.

The server provides tools for:
- Generating I-IV-V style progressions of 2-6 diatonic triads
- Returning the progression as base64 MIDI or saving it to disk
- Listing progression templates
- Describing the scale and diatonic chords of a key
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.tools import register_progression_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"

# Register all tools
progression_tools = register_progression_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
music_get_chord_progression = progression_tools["music_get_chord_progression"]
music_save_chord_progression = progression_tools["music_save_chord_progression"]
music_list_progressions = progression_tools["music_list_progressions"]
music_describe_key = progression_tools["music_describe_key"]

logger.info("Chord Progression MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")

"""
Progression tools - MCP tools for chord progressions.

Tools for generating progressions in a key, exporting them as MIDI,
and exploring keys and templates.
"""

from __future__ import annotations

import base64
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.compiler import midi_to_bytes, progression_to_midi
from chuk_mcp_chords.constants import DEFAULT_NUM_CHORDS, MIDI_MIME_TYPE, SuccessMessages
from chuk_mcp_chords.core import PROGRESSION_TEMPLATES, diatonic_chords, parse_key
from chuk_mcp_chords.engine import generate
from chuk_mcp_chords.errors import ChordProgressionError
from chuk_mcp_chords.models import KeyDescription, ProgressionResponse, TemplateSummary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def register_progression_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register chord progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for saved MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_chord_progression(
        key: str,
        num_chords: int = DEFAULT_NUM_CHORDS,
    ) -> str:
        """
        Generate a chord progression MIDI file for a given musical key.

        Chords are diatonic triads, one whole note each, at velocity 100.
        The progression depends on the number of chords:
        2 = I-V, 3 = I-IV-V, 4 = I-IV-V-I, 5 = I-vi-IV-V-I, 6 = I-vi-IV-V-I-IV.

        Args:
            key: The musical key (e.g., "C major", "A minor", "F# major", "Bb minor", "Bbm")
            num_chords: Number of chords in the progression (2-6, default 4)

        Returns:
            JSON string with the chords and the base64-encoded MIDI file

        Example:
            music_get_chord_progression(key="A minor", num_chords=3)
        """
        try:
            result = generate(key, num_chords)
            midi_bytes = midi_to_bytes(progression_to_midi(result))

            response = ProgressionResponse.from_result(
                key,
                result,
                mime_type=MIDI_MIME_TYPE,
                midi_base64=base64.b64encode(midi_bytes).decode("ascii"),
                message=SuccessMessages.PROGRESSION_GENERATED.format(label=result.label, key=key),
            )
            return response.model_dump_json(exclude_none=True)
        except ChordProgressionError as e:
            return _error(f"Error generating chord progression: {e}")
        except Exception as e:
            logger.exception("Failed to generate chord progression")
            return _error(f"Error generating chord progression: {e}")

    tools["music_get_chord_progression"] = music_get_chord_progression

    @mcp.tool  # type: ignore[arg-type]
    async def music_save_chord_progression(
        key: str,
        num_chords: int = DEFAULT_NUM_CHORDS,
        output_name: str | None = None,
    ) -> str:
        """
        Generate a chord progression and save it as a MIDI file.

        Args:
            key: The musical key (e.g., "C major", "A minor", "Bbm")
            num_chords: Number of chords in the progression (2-6, default 4)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the chords and the file path

        Example:
            music_save_chord_progression(key="D major", num_chords=5)
        """
        try:
            result = generate(key, num_chords)

            response = ProgressionResponse.from_result(key, result)
            filename = f"{output_name}.mid" if output_name else response.filename
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)

            progression_to_midi(result).save(str(output_path))

            response = response.model_copy(
                update={
                    "filename": filename,
                    "path": str(output_path),
                    "message": SuccessMessages.PROGRESSION_SAVED.format(
                        label=result.label, key=key, path=output_path
                    ),
                }
            )
            return response.model_dump_json(exclude_none=True)
        except ChordProgressionError as e:
            return _error(f"Error generating chord progression: {e}")
        except Exception as e:
            logger.exception("Failed to save chord progression")
            return _error(f"Error saving chord progression: {e}")

    tools["music_save_chord_progression"] = music_save_chord_progression

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_progressions() -> str:
        """
        List the available progression templates.

        Returns:
            JSON string with one template per supported chord count

        Example:
            music_list_progressions()
        """
        templates = [
            TemplateSummary.from_template(template).model_dump()
            for template in PROGRESSION_TEMPLATES.values()
        ]
        return json.dumps({"status": "success", "progressions": templates})

    tools["music_list_progressions"] = music_list_progressions

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_key(key: str) -> str:
        """
        Describe a key: its spelled scale and diatonic triads.

        Args:
            key: The musical key (e.g., "Eb major", "F# minor")

        Returns:
            JSON string with the scale notes and the chord on each degree

        Example:
            music_describe_key(key="Eb major")
        """
        try:
            parsed = parse_key(key)
            description = KeyDescription.from_key(parsed, diatonic_chords(parsed))
            return description.model_dump_json()
        except ChordProgressionError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to describe key")
            return _error(str(e))

    tools["music_describe_key"] = music_describe_key

    return tools

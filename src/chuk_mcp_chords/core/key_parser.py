"""
Key parsing - free-form key strings to Key objects.

Accepts the ways people actually type keys:
    "C major", "a minor", "F# maj", "Bb min", "Am", "Bbm", "F#"

The rules are applied in a fixed order:
1. minor detection on the trimmed text
2. strip every mode word (and any bare m/M) to get the root
3. only if nothing is left, read the text as a compact token like "Am"
"""

from __future__ import annotations

import logging
import re

from chuk_mcp_chords.constants import Mode
from chuk_mcp_chords.core.pitch import is_note_name
from chuk_mcp_chords.core.scale import Key
from chuk_mcp_chords.errors import InvalidKeyFormatError, InvalidNoteError

logger = logging.getLogger(__name__)

_MINOR_WORD = re.compile(r"min", re.IGNORECASE)  # also covers "minor"
_TRAILING_MINOR_M = re.compile(r"m$")
# Strips a bare m/M anywhere, not only at the end of the root
_MODE_WORDS = re.compile(r"minor|min|major|maj|m", re.IGNORECASE)
_COMPACT_KEY = re.compile(r"^([A-Ga-g][#b]?)([mM])?$")


def _is_minor(text: str) -> bool:
    return bool(_MINOR_WORD.search(text) or _TRAILING_MINOR_M.search(text))


def _normalize_root(root: str) -> str:
    """Upper-case the letter, keep the accidental as written."""
    return root[0].upper() + root[1:]


def parse_key(raw: str) -> Key:
    """
    Parse a key string into a Key.

    Args:
        raw: Key text, e.g. "C major", "A minor", "Bbm"

    Returns:
        Parsed Key

    Raises:
        InvalidKeyFormatError: if no root note can be extracted
        InvalidNoteError: if the extracted root is not a known note name
    """
    if not isinstance(raw, str):
        raise InvalidKeyFormatError(raw)

    text = raw.strip()
    mode = Mode.MINOR if _is_minor(text) else Mode.MAJOR
    root = _MODE_WORDS.sub("", text).strip()

    if not root:
        match = _COMPACT_KEY.match(text)
        if match is None:
            raise InvalidKeyFormatError(raw)
        root = match.group(1)
        mode = Mode.MINOR if match.group(2) == "m" else Mode.MAJOR

    root = _normalize_root(root)
    if not is_note_name(root):
        raise InvalidNoteError(root)

    key = Key(root, mode)
    logger.debug(f"Parsed key {raw!r} as {key}")
    return key

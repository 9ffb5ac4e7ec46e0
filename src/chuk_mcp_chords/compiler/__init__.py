"""
Compilation pipeline - transforms built chords to MIDI.

The pipeline:
    ProgressionResult
    → MidiEvent list (one event per chord tone)
    → MidiFile
    → bytes
"""

from chuk_mcp_chords.compiler.midi import (
    DEFAULT_TEMPO_BPM,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    chords_to_events,
    events_to_midi,
    midi_to_bytes,
    progression_to_midi,
)

__all__ = [
    "DEFAULT_TEMPO_BPM",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "chords_to_events",
    "events_to_midi",
    "midi_to_bytes",
    "progression_to_midi",
]

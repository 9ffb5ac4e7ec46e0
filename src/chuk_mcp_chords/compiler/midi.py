"""
MIDI export - the end of the pipeline.

This module handles conversion from built chords to MIDI files using mido.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_chords.constants import CHORD_BEATS, CHORD_VELOCITY

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from chuk_mcp_chords.core.chord import Chord
    from chuk_mcp_chords.engine import ProgressionResult


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_TEMPO_BPM = 120


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []

    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,  # Will be converted to delta
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,  # Will be converted to delta
                ),
            )
        )

    # note_off before note_on at the same tick, so back-to-back chords don't overlap.
    # sort() is stable, which keeps chord tones in root-third-fifth order.
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def chords_to_events(
    chords: Iterable[Chord],
    beats_per_chord: int = CHORD_BEATS,
    velocity: int = CHORD_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay chords out back to back, each as simultaneous notes.

    Args:
        chords: Chords in playing order
        beats_per_chord: Length of each chord (default 4 = whole note)
        velocity: Note velocity (0-127)
        channel: MIDI channel (0-15)
        ticks_per_beat: Resolution (default 480)

    Returns:
        MidiEvents ordered by chord, then root-third-fifth
    """
    duration_ticks = beats_to_ticks(beats_per_chord, ticks_per_beat)
    events: list[MidiEvent] = []
    for index, chord in enumerate(chords):
        start_ticks = index * duration_ticks
        for pitch in chord.pitches:
            events.append(
                MidiEvent(
                    pitch=pitch,
                    start_ticks=start_ticks,
                    duration_ticks=duration_ticks,
                    velocity=velocity,
                    channel=channel,
                )
            )
    return events


def progression_to_midi(
    progression: ProgressionResult,
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
) -> MidiFile:
    """
    Convert a built progression to a MidiFile.

    Each chord is a whole note at velocity 100 on a single track.
    """
    return events_to_midi(chords_to_events(progression), tempo_bpm=tempo_bpm)


def midi_to_bytes(mid: MidiFile) -> bytes:
    """Serialize a MidiFile to Standard MIDI File bytes."""
    buffer = io.BytesIO()
    mid.save(file=buffer)
    return buffer.getvalue()


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)

"""
MIDI export - turning spelled notes into playable files.

This module handles conversion from Notes to MIDI files using mido.
Spelling is lost on the way out (MIDI only knows key numbers), so
reading a file back yields sharp spellings.
All operations are deterministic: same input -> same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_theory.constants import (
    DEFAULT_NOTE_BEATS,
    DEFAULT_TEMPO_BPM,
    DEFAULT_VELOCITY,
    TICKS_PER_BEAT,
)
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.note import Note

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_theory.core.scale import RootedScale


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
    track_name: str | None = None,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        track_name: Optional track name meta message

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    if track_name:
        track.append(MetaMessage("track_name", name=track_name, time=0))

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
                    time=0,
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
                    time=0,
                ),
            )
        )

    # note_off before note_on at the same tick so repeated keys retrigger cleanly
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    # Convert to delta times
    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def notes_to_events(
    notes: Sequence[Note],
    note_beats: float = DEFAULT_NOTE_BEATS,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay notes out one after another, each lasting note_beats.

    Raises:
        ValueError: If a note has no MIDI number (outside 0-127)
    """
    step = beats_to_ticks(note_beats, ticks_per_beat)
    events: list[MidiEvent] = []
    for i, note in enumerate(notes):
        midi_note = note.to_midi()
        if midi_note is None:
            raise ValueError(f"Note {note} is outside the MIDI range 0-127")
        events.append(
            MidiEvent(
                pitch=midi_note,
                start_ticks=i * step,
                duration_ticks=step,
                velocity=velocity,
                channel=channel,
            )
        )
    return events


def notes_to_midi(
    notes: Sequence[Note],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    note_beats: float = DEFAULT_NOTE_BEATS,
    velocity: int = DEFAULT_VELOCITY,
    track_name: str | None = None,
) -> MidiFile:
    """Render a melody of notes to a single-track MIDI file."""
    events = notes_to_events(notes, note_beats=note_beats, velocity=velocity)
    return events_to_midi(events, tempo_bpm=tempo_bpm, track_name=track_name)


def scale_to_midi(
    scale: RootedScale,
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    note_beats: float = DEFAULT_NOTE_BEATS,
) -> MidiFile:
    """
    Render a rooted scale ascending, ending on the octave above the root.

    The scale must be rooted on a Note so the octave is known.
    """
    if not isinstance(scale.root, Note):
        raise ValueError("Scale must be rooted on a Note to export MIDI")
    notes = list(scale.build_from())
    notes.append(scale.root + Interval.OCTAVE)
    return notes_to_midi(notes, tempo_bpm=tempo_bpm, note_beats=note_beats, track_name=str(scale))


def midi_to_notes(mid: MidiFile) -> list[Note]:
    """
    Read note-on events back as Notes, in time order.

    MIDI carries no spelling, so every note comes back sharp-spelled.
    """
    notes: list[Note] = []
    for track in mid.tracks:
        for msg in track:
            if msg.type == "note_on" and msg.velocity > 0:
                note = Note.from_midi(msg.note)
                if note is not None:
                    notes.append(note)
    return notes

"""
Export pipeline - spelled notes to MIDI.

The pipeline:
    RootedScale / list[Note]
    -> MidiEvent (absolute ticks, validated ranges)
    -> MIDI File
"""

from chuk_mcp_theory.export.midi import (
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    midi_to_notes,
    notes_to_events,
    notes_to_midi,
    scale_to_midi,
)

__all__ = [
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "midi_to_notes",
    "notes_to_events",
    "notes_to_midi",
    "scale_to_midi",
]

"""
MIDI export tests - spelled notes out to playable files and back.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_theory.constants import DEFAULT_VELOCITY, TICKS_PER_BEAT
from chuk_mcp_theory.core import DIATONIC, FixedScale, Note, Pitch, RootedScale
from chuk_mcp_theory.export import (
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    midi_to_notes,
    notes_to_events,
    notes_to_midi,
    scale_to_midi,
)


def _note_ons(mid: MidiFile) -> list:
    return [msg for msg in mid.tracks[0] if msg.type == "note_on"]


class TestMidiEvent:
    """Range validation on MidiEvent."""

    def test_valid_event(self) -> None:
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)
        assert event.channel == 0

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"pitch": 128}, "Pitch must be 0-127"),
            ({"velocity": -1}, "Velocity must be 0-127"),
            ({"channel": 16}, "Channel must be 0-15"),
            ({"start_ticks": -1}, "Start ticks must be >= 0"),
            ({"duration_ticks": -5}, "Duration ticks must be >= 0"),
        ],
    )
    def test_out_of_range(self, kwargs: dict, message: str) -> None:
        fields = {"pitch": 60, "start_ticks": 0, "duration_ticks": 480, "velocity": 100}
        fields.update(kwargs)
        with pytest.raises(ValueError, match=message):
            MidiEvent(**fields)


class TestEventsToMidi:
    """Writing events into a track."""

    def test_empty_events(self) -> None:
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_tempo(self) -> None:
        mid = events_to_midi([], tempo_bpm=90)
        tempo = next(msg for msg in mid.tracks[0] if msg.type == "set_tempo")
        assert tempo.tempo == int(60_000_000 / 90)

    def test_track_name(self) -> None:
        mid = events_to_midi([], track_name="D dorian")
        names = [msg.name for msg in mid.tracks[0] if msg.type == "track_name"]
        assert names == ["D dorian"]

    def test_events_sorted_by_time(self) -> None:
        events = [
            MidiEvent(pitch=64, start_ticks=480, duration_ticks=480, velocity=100),
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100),
        ]
        assert [msg.note for msg in _note_ons(events_to_midi(events))] == [60, 64]

    def test_repeated_key_releases_first(self) -> None:
        """A note ending where the same key starts is released before it retriggers."""
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100),
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=480, velocity=100),
        ]
        types = [
            msg.type for msg in events_to_midi(events).tracks[0] if msg.type.startswith("note")
        ]
        assert types == ["note_on", "note_off", "note_on", "note_off"]


class TestNotesToMidi:
    """Notes laid out as a melody."""

    def test_beats_to_ticks(self) -> None:
        assert beats_to_ticks(1) == TICKS_PER_BEAT
        assert beats_to_ticks(0.5) == TICKS_PER_BEAT // 2

    def test_notes_to_events(self) -> None:
        notes = [Note.parse("C4"), Note.parse("E4"), Note.parse("G4")]
        events = notes_to_events(notes, note_beats=0.5)
        assert [e.pitch for e in events] == [60, 64, 67]
        assert [e.start_ticks for e in events] == [0, 240, 480]
        assert all(e.velocity == DEFAULT_VELOCITY for e in events)

    def test_spelling_does_not_change_key_number(self) -> None:
        events = notes_to_events([Note.parse("B#3"), Note.parse("Dbb4")])
        assert [e.pitch for e in events] == [60, 60]

    def test_out_of_range_note(self) -> None:
        with pytest.raises(ValueError, match="outside the MIDI range"):
            notes_to_events([Note.parse("C10")])

    def test_notes_to_midi(self) -> None:
        mid = notes_to_midi([Note.A4], tempo_bpm=100)
        assert [msg.note for msg in _note_ons(mid)] == [69]


class TestScaleToMidi:
    """Exporting rooted scales."""

    def test_scale_ends_on_octave(self) -> None:
        mid = scale_to_midi(RootedScale(Note.parse("D4"), DIATONIC.mode("dorian")))
        assert [msg.note for msg in _note_ons(mid)] == [62, 64, 65, 67, 69, 71, 72, 74]

    def test_requires_note_root(self) -> None:
        with pytest.raises(ValueError, match="rooted on a Note"):
            scale_to_midi(RootedScale(Pitch.D, FixedScale.MAJOR))

    def test_save_and_read_back(self, temp_midi_path: Path) -> None:
        """Reading back gives sharp spellings of the same keys."""
        scale = RootedScale(Note.parse("Eb4"), FixedScale.MAJOR)
        scale_to_midi(scale).save(str(temp_midi_path))

        notes = midi_to_notes(MidiFile(str(temp_midi_path)))
        assert [str(n) for n in notes] == ["D#4", "F4", "G4", "G#4", "A#4", "C5", "D5", "D#5"]
        for written, read in zip(scale.build_from(), notes):
            assert written.eq_enharmonic(read)

    def test_deterministic(self, temp_dir: Path) -> None:
        scale = RootedScale(Note.MIDDLE_C, FixedScale.HARMONIC_MINOR)
        path1 = temp_dir / "a.mid"
        path2 = temp_dir / "b.mid"
        scale_to_midi(scale).save(str(path1))
        scale_to_midi(scale).save(str(path2))
        assert path1.read_bytes() == path2.read_bytes()

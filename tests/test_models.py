"""
Tests for pydantic models: scale definitions and tool response views.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_theory.core import DIATONIC, FixedScale, Interval, Key, Note, Pitch, RootedScale
from chuk_mcp_theory.models import (
    IntervalInfo,
    KeySignature,
    NoteInfo,
    ScaleDefinition,
    ScaleInfo,
    ScaleMetadata,
)


class TestScaleDefinition:
    """Tests for ScaleDefinition validation and conversion."""

    def test_valid_definition(self) -> None:
        definition = ScaleDefinition(
            name="Blues Scale",
            steps=["m3", "M2", "m2", "A1", "m3", "M2"],
        )
        assert definition.name == "blues_scale"
        assert definition.schema_version == "scale/v1"
        assert definition.intervals[0] == Interval.m3

    def test_schema_alias(self) -> None:
        definition = ScaleDefinition.model_validate(
            {"schema": "scale/v1", "name": "tones", "steps": ["M2"] * 6}
        )
        assert definition.to_yaml_dict()["schema"] == "scale/v1"

    def test_invalid_interval(self) -> None:
        with pytest.raises(ValidationError):
            ScaleDefinition(name="bad", steps=["M2", "P3"])

    def test_must_close_octave(self) -> None:
        with pytest.raises(ValidationError, match="not 12"):
            ScaleDefinition(name="bad", steps=["M2", "M2"])

    def test_too_many_modes(self) -> None:
        with pytest.raises(ValidationError, match="more modes"):
            ScaleDefinition(name="bad", steps=["P8"], modes=["a", "b"])

    def test_alias_range(self) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            ScaleDefinition(name="bad", steps=["M2"] * 6, aliases={"x": 7})

    def test_invalid_name(self) -> None:
        with pytest.raises(ValidationError):
            ScaleDefinition(name="bad/name", steps=["P8"])

    def test_names_normalized(self) -> None:
        definition = ScaleDefinition(
            name="tones",
            steps=["M2"] * 6,
            modes=["Whole Tone"],
            aliases={"Six-Tone": 1},
        )
        assert definition.modes == ["whole_tone"]
        assert definition.aliases == {"six_tone": 1}

    def test_family_round_trip(self) -> None:
        """Converting the diatonic family out and back keeps it intact."""
        definition = ScaleDefinition.from_family(DIATONIC)
        assert definition.to_family() == DIATONIC

    def test_to_yaml_dict_omits_empty(self) -> None:
        data = ScaleDefinition(name="tones", steps=["M2"] * 6).to_yaml_dict()
        assert "modes" not in data
        assert "aliases" not in data
        assert data["steps"] == ["M2"] * 6


class TestScaleMetadata:
    """Tests for ScaleMetadata."""

    def test_from_family(self) -> None:
        metadata = ScaleMetadata.from_family(DIATONIC)
        assert metadata.name == "diatonic"
        assert metadata.size == 7
        assert metadata.modes[1] == "dorian"


class TestResponseModels:
    """Tests for the tool response views."""

    def test_note_info(self) -> None:
        info = NoteInfo.from_note(Note.A4)
        assert info.note == "A4"
        assert info.pitch == "A"
        assert info.midi == 69
        assert info.frequency_hz == 440.0
        assert info.pitch_class == 9

    def test_note_info_outside_midi(self) -> None:
        info = NoteInfo.from_note(Note.parse("Cb-1"))
        assert info.midi is None
        assert info.simplified == "B-2"

    def test_interval_info(self) -> None:
        info = IntervalInfo.from_interval(Interval.d1)
        assert info.semitones == -1
        assert info.subzero
        assert info.expanded == "d8"
        assert info.stability == "dissonance"

    def test_interval_info_fourth(self) -> None:
        info = IntervalInfo.from_interval(Interval.P4)
        assert info.stability is None
        assert info.inverted == "P5"

    def test_key_signature(self) -> None:
        signature = KeySignature.from_key(Key.major(Pitch.E))
        assert signature.key == "E major"
        assert signature.mode == "ionian"
        assert signature.sharps == 4
        assert signature.alterations == ["F#", "C#", "G#", "D#"]
        assert signature.accidentals["F"] == "#"
        assert signature.accidentals["A"] == ""
        assert signature.relative == "C# minor"
        assert signature.model_dump(by_alias=True)["schema"] == "key-signature/v1"

    def test_key_signature_without_relative(self) -> None:
        signature = KeySignature.from_key(Key.parse("D_dorian"))
        assert signature.relative is None
        assert signature.sharps == 0

    def test_scale_info(self) -> None:
        info = ScaleInfo.from_rooted(RootedScale(Pitch.D, FixedScale.MAJOR))
        assert info.scale == "major"
        assert info.root == "D"
        assert info.members == ["D", "E", "F#", "G", "A", "B", "C#"]
        assert info.intervals[2] == "m2"

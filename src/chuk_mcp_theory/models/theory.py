"""
Theory response models - serializable views of core values.

Core types stay plain dataclasses; these models are what tools hand back
to clients as JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.key import Key
from chuk_mcp_theory.core.letter import Letter
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.scale import RootedScale


class NoteInfo(BaseModel):
    """Everything derivable from a single note."""

    note: str = Field(..., description="Spelled note, e.g. 'C#4'")
    pitch: str = Field(..., description="Spelled pitch without octave")
    octave: int
    pitch_class: int = Field(..., ge=0, le=11)
    midi: int | None = Field(None, description="MIDI number, None outside 0-127")
    frequency_hz: float
    simplified: str = Field(..., description="Fewest-accidental spelling")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteInfo:
        return cls(
            note=str(note),
            pitch=str(note.pitch),
            octave=note.octave,
            pitch_class=int(note.pitch_class()),
            midi=note.to_midi(),
            frequency_hz=round(note.frequency(), 4),
            simplified=str(note.simplified()),
        )


class IntervalInfo(BaseModel):
    """Derived quantities of an interval."""

    interval: str
    quality: str
    number: int
    semitones: int
    diatonic_steps: int
    simple: str
    inverted: str
    subzero: bool
    expanded: str
    stability: str | None = Field(None, description="None for ambiguous fourths")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        stability = interval.stability()
        return cls(
            interval=str(interval),
            quality=str(interval.quality),
            number=interval.number,
            semitones=interval.semitones(),
            diatonic_steps=interval.diatonic_steps(),
            simple=str(interval.as_simple()),
            inverted=str(interval.inverted()),
            subzero=interval.is_subzero(),
            expanded=str(interval.expand_subzero()),
            stability=stability.value if stability else None,
        )


class KeySignature(BaseModel):
    """A key's signature, as a renderer needs it."""

    schema_version: str = Field("key-signature/v1", alias="schema")
    key: str
    tonic: str
    mode: str
    sharps: int = Field(..., description="Positive for sharps, negative for flats")
    alterations: list[str] = Field(default_factory=list, description="In written order")
    accidentals: dict[str, str] = Field(
        default_factory=dict,
        description="Accidental symbol per letter ('' for natural)",
    )
    pitches: list[str] = Field(default_factory=list)
    relative: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_key(cls, key: Key) -> KeySignature:
        relative = key.relative()
        return cls(
            key=str(key),
            tonic=str(key.tonic),
            mode=key.mode.name.lower(),
            sharps=key.sharps(),
            alterations=[str(p) for p in key.alterations()],
            accidentals={letter.name: str(key.accidental_of(letter)) for letter in Letter},
            pitches=[str(p) for p in key.pitches()],
            relative=str(relative) if relative else None,
        )


class ScaleInfo(BaseModel):
    """A rooted scale and the notes it produces."""

    scale: str
    root: str
    intervals: list[str]
    members: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_rooted(cls, rooted: RootedScale, members: list[str] | None = None) -> ScaleInfo:
        return cls(
            scale=rooted.scale.name,
            root=str(rooted.root),
            intervals=[str(i) for i in rooted.scale.intervals],
            members=members if members is not None else [str(m) for m in rooted.build_from()],
        )

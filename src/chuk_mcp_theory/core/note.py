"""
Note - a spelled pitch in a specific octave.

The octave is attached to the letter (scientific pitch notation), so Cb4
sits one semitone below C4 and B#4 coincides with C5. Absolute positions
are counted in semitones from C0.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_theory.constants import (
    A4_MIDI,
    CONCERT_PITCH_HZ,
    MIDI_MAX,
    MIDI_MIN,
    MIDI_OCTAVE_OFFSET,
)

from .interval import Interval
from .letter import Accidental, Letter
from .pitch import Pitch, PitchClass

_NOTE_RE = re.compile(r"^(.+?)(-?\d+)$")


@total_ordering
@dataclass(frozen=True, eq=True)
class Note:
    """
    A pitch plus a signed octave number.

    Equality is spelling-sensitive. The plain order compares octave,
    then letter, then accidental; use cmp_enharmonic for sounding order.

    Examples:
        Note(Pitch.C, 4) = middle C (MIDI 60)
        Note(Pitch.A, 4) = A440
    """

    pitch: Pitch
    octave: int

    MIDDLE_C: ClassVar[Note]
    A4: ClassVar[Note]

    @classmethod
    def from_semitones(cls, semitones: int, prefer_flats: bool = False) -> Note:
        """Spell an absolute semitone position (C0 = 0) with sharps or flats."""
        octave, pitch_class = divmod(semitones, 12)
        return cls(PitchClass(pitch_class).spell(prefer_flats), octave)

    @classmethod
    def from_midi(cls, midi_note: int) -> Note | None:
        """
        Spell a MIDI note number with sharps.

        Returns None outside the MIDI range 0-127.
        """
        if not MIDI_MIN <= midi_note <= MIDI_MAX:
            return None
        return cls.from_semitones(midi_note - MIDI_OCTAVE_OFFSET)

    @classmethod
    def from_frequency(cls, hz: float, concert_pitch: float = CONCERT_PITCH_HZ) -> Note | None:
        """
        Find the nearest equal-tempered note to a frequency.

        Returns None for non-positive or non-finite input, or when the
        nearest note falls outside the MIDI range.
        """
        if not math.isfinite(hz) or hz <= 0:
            return None
        midi_note = round(A4_MIDI + 12 * math.log2(hz / concert_pitch))
        return cls.from_midi(midi_note)

    @classmethod
    def parse(cls, name: str) -> Note:
        """
        Parse a note like 'C4', 'F#3', 'Bb-1' or 'E(5#)2'.

        Raises:
            ValueError: If the octave number is missing or the pitch is invalid
        """
        match = _NOTE_RE.match(name.strip())
        if not match:
            raise ValueError(f"Invalid note: {name!r}. Expected pitch plus octave like 'C#4'")
        return cls(Pitch.parse(match.group(1)), int(match.group(2)))

    @property
    def letter(self) -> Letter:
        return self.pitch.letter

    @property
    def accidental(self) -> Accidental:
        return self.pitch.accidental

    def semitones(self) -> int:
        """Absolute position in semitones above C0."""
        return self.pitch.semitones_from_c() + 12 * self.octave

    def pitch_class(self) -> PitchClass:
        return self.pitch.pitch_class()

    def to_midi(self) -> int | None:
        """MIDI note number (C4 = 60), or None outside 0-127."""
        midi_note = self.semitones() + MIDI_OCTAVE_OFFSET
        if not MIDI_MIN <= midi_note <= MIDI_MAX:
            return None
        return midi_note

    def frequency(self, concert_pitch: float = CONCERT_PITCH_HZ) -> float:
        """Equal-tempered frequency in Hz, with A4 at concert pitch."""
        a4 = A4_MIDI - MIDI_OCTAVE_OFFSET
        return concert_pitch * 2 ** ((self.semitones() - a4) / 12)

    def transpose(self, interval: Interval) -> Note:
        """
        Transpose by a spelled interval, carrying octaves across letter wraps.

        B3 + m2 = C4, C4 - M3 = Ab3.
        """
        letter, octaves = self.letter.step(interval.diatonic_steps())
        target = self.semitones() + interval.semitones()
        octave = self.octave + octaves
        offset = target - letter.natural_semitones - 12 * octave
        return Note(Pitch(letter, Accidental(offset)), octave)

    def distance_to(self, other: Note) -> Interval:
        """
        Signed interval from this note to another.

        Descending when the other note's letter position is lower.
        The inverse of transpose: n.transpose(n.distance_to(m)) == m.
        """
        steps = (other.letter + 7 * other.octave) - (self.letter + 7 * self.octave)
        return Interval.from_steps_and_semitones(steps, other.semitones() - self.semitones())

    def _respell(self, pitch: Pitch) -> Note:
        # Keep the sounding position fixed while the letter changes
        octave = (self.semitones() - pitch.semitones_from_c()) // 12
        return Note(pitch, octave)

    def bias(self, sharp: bool) -> Note:
        return self._respell(self.pitch.bias(sharp))

    def simplified(self) -> Note:
        """Re-spell with the fewest accidentals, fixing the octave: B#3 -> C4."""
        return self._respell(self.pitch.simplified())

    def enharmonic(self) -> Note:
        return self._respell(self.pitch.enharmonic())

    def eq_enharmonic(self, other: Note) -> bool:
        return self.semitones() == other.semitones()

    def cmp_enharmonic(self, other: Note) -> int:
        """Compare sounding positions: -1, 0 or 1."""
        a, b = self.semitones(), other.semitones()
        return (a > b) - (a < b)

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return (self.octave, self.pitch) < (other.octave, other.pitch)

    def __add__(self, interval: Interval) -> Note:
        if not isinstance(interval, Interval):
            return NotImplemented
        return self.transpose(interval)

    def __sub__(self, interval: Interval) -> Note:
        if not isinstance(interval, Interval):
            return NotImplemented
        return self.transpose(-interval)

    def __str__(self) -> str:
        return f"{self.pitch}{self.octave}"

    def __repr__(self) -> str:
        return f"Note({str(self)!r})"


Note.MIDDLE_C = Note(Pitch.C, 4)
Note.A4 = Note(Pitch.A, 4)

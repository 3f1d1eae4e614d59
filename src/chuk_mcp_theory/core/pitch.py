"""
Pitch primitives - PitchClass and Pitch.

PitchClass represents the 12 chromatic pitches (octave- and spelling-independent).
Pitch is a spelled pitch: a letter plus an accidental, with no octave.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .interval import Interval
from .letter import Accidental, Letter

# Spellings for each pitch class (module level to avoid IntEnum member issues)
_SHARP_SPELLINGS: tuple[tuple[Letter, int], ...] = (
    (Letter.C, 0),
    (Letter.C, 1),
    (Letter.D, 0),
    (Letter.D, 1),
    (Letter.E, 0),
    (Letter.F, 0),
    (Letter.F, 1),
    (Letter.G, 0),
    (Letter.G, 1),
    (Letter.A, 0),
    (Letter.A, 1),
    (Letter.B, 0),
)
_FLAT_SPELLINGS: tuple[tuple[Letter, int], ...] = (
    (Letter.C, 0),
    (Letter.D, -1),
    (Letter.D, 0),
    (Letter.E, -1),
    (Letter.E, 0),
    (Letter.F, 0),
    (Letter.G, -1),
    (Letter.G, 0),
    (Letter.A, -1),
    (Letter.A, 0),
    (Letter.B, -1),
    (Letter.B, 0),
)

_PITCH_RE = re.compile(r"^([A-Ga-g])(.*)$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic spellings share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self, prefer_flats: bool = False) -> Pitch:
        """Spell as a Pitch using sharps (default) or flats."""
        spellings = _FLAT_SPELLINGS if prefer_flats else _SHARP_SPELLINGS
        letter, offset = spellings[self.value]
        return Pitch(letter, Accidental(offset))

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from any spelling like 'C', 'C#', 'Db', 'B#'."""
        return Pitch.parse(name).pitch_class()


@dataclass(frozen=True, order=True)
class Pitch:
    """
    A spelled pitch: letter plus accidental.

    Equality and ordering are spelling-sensitive: C# != Db, and the plain
    order compares letter first, then accidental. Enharmonic comparison
    lives in eq_enharmonic / cmp_enharmonic.

    Examples:
        Pitch(Letter.C) = C
        Pitch(Letter.F, Accidental.SHARP) = F#
        Pitch.parse("Bbb") = B double flat
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL

    # Common pitches (defined after class)
    C: ClassVar[Pitch]
    D: ClassVar[Pitch]
    E: ClassVar[Pitch]
    F: ClassVar[Pitch]
    G: ClassVar[Pitch]
    A: ClassVar[Pitch]
    B: ClassVar[Pitch]
    C_SHARP: ClassVar[Pitch]
    D_SHARP: ClassVar[Pitch]
    E_SHARP: ClassVar[Pitch]
    F_SHARP: ClassVar[Pitch]
    G_SHARP: ClassVar[Pitch]
    A_SHARP: ClassVar[Pitch]
    B_SHARP: ClassVar[Pitch]
    C_FLAT: ClassVar[Pitch]
    D_FLAT: ClassVar[Pitch]
    E_FLAT: ClassVar[Pitch]
    F_FLAT: ClassVar[Pitch]
    G_FLAT: ClassVar[Pitch]
    A_FLAT: ClassVar[Pitch]
    B_FLAT: ClassVar[Pitch]

    @classmethod
    def from_fifths_from_c(cls, fifths: int) -> Pitch:
        """
        Get the pitch at a signed position on the circle of fifths.

        0 = C, 1 = G, -1 = F, 6 = F#, -6 = Gb, 13 = F##.
        """
        offset = (fifths + 1) // 7
        return cls(Letter.from_fifths(fifths), Accidental(offset))

    @classmethod
    def from_pitch_class(cls, pitch_class: int, prefer_flats: bool = False) -> Pitch:
        return PitchClass(pitch_class % 12).spell(prefer_flats)

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """
        Parse a pitch from a string like 'C', 'F#', 'Bbb', 'Gx' or 'E(5#)'.

        Raises:
            ValueError: If the text is not a letter followed by accidentals
        """
        match = _PITCH_RE.match(name.strip())
        if not match:
            raise ValueError(f"Invalid pitch: {name!r}")
        return cls(Letter.parse(match.group(1)), Accidental.parse(match.group(2)))

    def semitones_from_c(self) -> int:
        """
        Exact semitone offset above natural C, without wrapping.

        Cb is -1 and B# is 12.
        """
        return self.letter.natural_semitones + self.accidental.offset

    def pitch_class(self) -> PitchClass:
        return PitchClass(self.semitones_from_c() % 12)

    def fifths_from_c(self) -> int:
        """Signed position on the circle of fifths (each sharp adds 7)."""
        return self.letter.fifths_from_c + 7 * self.accidental.offset

    def transpose_fifths(self, fifths: int) -> Pitch:
        return Pitch.from_fifths_from_c(self.fifths_from_c() + fifths)

    def transpose(self, interval: Interval) -> Pitch:
        """
        Transpose by a spelled interval.

        The letter moves by the interval's diatonic steps and the accidental
        absorbs whatever is left, so C + A4 is F# and C + d5 is Gb.
        """
        letter, octaves = self.letter.step(interval.diatonic_steps())
        target = self.semitones_from_c() + interval.semitones()
        offset = target - letter.natural_semitones - 12 * octaves
        return Pitch(letter, Accidental(offset))

    def distance_to(self, other: Pitch) -> Interval:
        """
        Ascending interval from this pitch up to another.

        The inverse of transpose: p.transpose(p.distance_to(q)) == q.
        """
        steps = self.letter.steps_to(other.letter)
        wrap = 12 if other.letter < self.letter else 0
        semitones = other.semitones_from_c() + wrap - self.semitones_from_c()
        return Interval.from_steps_and_semitones(steps, semitones)

    def bias(self, sharp: bool) -> Pitch:
        """Re-spell with at most one accidental, using sharps or flats only."""
        return self.pitch_class().spell(prefer_flats=not sharp)

    def simplified(self) -> Pitch:
        """
        Re-spell with the fewest accidentals.

        Black keys keep the direction of the original accidental, so
        E## becomes F# and Fbb becomes Eb.
        """
        return self.bias(self.accidental.offset > 0)

    def enharmonic(self) -> Pitch:
        """Flip the spelling direction: C# -> Db, Db -> C#."""
        return self.bias(self.accidental.offset < 0)

    def eq_enharmonic(self, other: Pitch) -> bool:
        return self.pitch_class() == other.pitch_class()

    def cmp_enharmonic(self, other: Pitch) -> int:
        """Compare by pitch class only: -1, 0 or 1."""
        a, b = self.pitch_class(), other.pitch_class()
        return (a > b) - (a < b)

    def __add__(self, interval: Interval) -> Pitch:
        if not isinstance(interval, Interval):
            return NotImplemented
        return self.transpose(interval)

    def __sub__(self, interval: Interval) -> Pitch:
        if not isinstance(interval, Interval):
            return NotImplemented
        return self.transpose(-interval)

    def __str__(self) -> str:
        return f"{self.letter}{self.accidental}"

    def __repr__(self) -> str:
        return f"Pitch({str(self)!r})"


for _letter in Letter:
    setattr(Pitch, _letter.name, Pitch(_letter))
    setattr(Pitch, f"{_letter.name}_SHARP", Pitch(_letter, Accidental.SHARP))
    setattr(Pitch, f"{_letter.name}_FLAT", Pitch(_letter, Accidental.FLAT))
del _letter

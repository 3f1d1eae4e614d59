"""
Letter and accidental primitives.

Letter is the seven-name diatonic cycle (C D E F G A B).
Accidental is a signed semitone offset from a letter's natural pitch.
Neither carries any notion of octave.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

# Semitones above C for each natural letter
_NATURAL_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Position of each natural letter on the circle of fifths, C = 0
_FIFTHS_FROM_C: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

_SHARP_SYMBOLS = {"#": 1, "x": 2, "♯": 1, "\U0001d12a": 2}
_FLAT_SYMBOLS = {"b": -1, "♭": -1, "\U0001d12b": -2}


class Letter(IntEnum):
    """
    The seven letter names in their fixed linear order.

    Arithmetic on letters wraps modulo 7. Comparison uses the linear
    order C < D < ... < B.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def natural_semitones(self) -> int:
        """Semitones above C of the natural (unaltered) letter."""
        return _NATURAL_SEMITONES[self.value]

    @property
    def fifths_from_c(self) -> int:
        """Signed distance from C on the circle of fifths (F = -1, B = 5)."""
        return _FIFTHS_FROM_C[self.value]

    def step(self, steps: int) -> tuple[Letter, int]:
        """
        Advance by a signed number of diatonic steps.

        Returns:
            The new letter and the number of octaves crossed (negative when
            moving down past C).
        """
        octaves, index = divmod(self.value + steps, 7)
        return Letter(index), octaves

    def steps_to(self, other: Letter) -> int:
        """Ascending letter distance to another letter (0-6)."""
        return (other.value - self.value) % 7

    @classmethod
    def from_fifths(cls, fifths: int) -> Letter:
        """Get the natural letter at a circle-of-fifths position (wrapping)."""
        return cls(_FIFTHS_FROM_C.index((fifths + 1) % 7 - 1))

    @classmethod
    def parse(cls, name: str) -> Letter:
        """Parse a single letter name, case-insensitive."""
        name = name.strip().upper()
        if name not in cls.__members__:
            raise ValueError(f"Unknown letter: {name!r}")
        return cls[name]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Accidental:
    """
    A signed accidental offset in semitones.

    0 = natural, +1 = sharp, -1 = flat, +2 = double sharp, and so on.
    The magnitude is never clamped.
    """

    offset: int = 0

    NATURAL: ClassVar[Accidental]
    SHARP: ClassVar[Accidental]
    FLAT: ClassVar[Accidental]
    DOUBLE_SHARP: ClassVar[Accidental]
    DOUBLE_FLAT: ClassVar[Accidental]

    @property
    def is_natural(self) -> bool:
        return self.offset == 0

    @property
    def symbol(self) -> str:
        """
        Text form of the accidental.

        Up to three sharps or flats are written out ('#', 'bb'); larger
        magnitudes use the count notation '(5#)' / '(5b)'.
        """
        count = abs(self.offset)
        sign = "#" if self.offset > 0 else "b"
        if count <= 3:
            return sign * count
        return f"({count}{sign})"

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """
        Parse accidental symbols.

        Accepts repeated '#', 'x' and 'b' (and their Unicode signs), or the
        count notation '(n#)' / '(nb)'. An empty string is natural.
        """
        text = text.strip()
        if text.startswith("(") and text.endswith(")"):
            body = text[1:-1]
            if len(body) >= 2 and body[:-1].isdigit() and body[-1] in "#b":
                count = int(body[:-1])
                return cls(count if body[-1] == "#" else -count)
            raise ValueError(f"Invalid accidental count notation: {text!r}")

        if all(c in _SHARP_SYMBOLS for c in text):
            return cls(sum(_SHARP_SYMBOLS[c] for c in text))
        if all(c in _FLAT_SYMBOLS for c in text):
            return cls(sum(_FLAT_SYMBOLS[c] for c in text))
        raise ValueError(f"Invalid accidental: {text!r}")

    def __neg__(self) -> Accidental:
        return Accidental(-self.offset)

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Accidental({self.offset})"


Accidental.NATURAL = Accidental(0)
Accidental.SHARP = Accidental(1)
Accidental.FLAT = Accidental(-1)
Accidental.DOUBLE_SHARP = Accidental(2)
Accidental.DOUBLE_FLAT = Accidental(-2)

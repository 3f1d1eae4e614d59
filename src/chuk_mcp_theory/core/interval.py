"""
Interval primitives - IntervalQuality and Interval.

An interval is a quality (perfect, major, minor, diminished, augmented)
paired with a signed interval number. The number is the diatonic step
count plus one; its sign gives the direction. Semitone spans are derived
from the pair, never stored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

# Semitones of the major/perfect interval for each simple class (unison..7th)
_BASE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Simple classes (number - 1) mod 7 that take perfect qualities
_PERFECT_CLASSES = frozenset({0, 3, 4})

_INTERVAL_RE = re.compile(r"^(-?)(P|M|m|d+|A+)(-?)(\d+)$")


class QualityKind(str, Enum):
    """The five families of interval quality."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    DIMINISHED = "d"
    AUGMENTED = "A"


class Stability(str, Enum):
    """Harmonic stability of an interval."""

    PERFECT_CONSONANCE = "perfect_consonance"
    IMPERFECT_CONSONANCE = "imperfect_consonance"
    DISSONANCE = "dissonance"

    @property
    def is_consonant(self) -> bool:
        return self is not Stability.DISSONANCE


@dataclass(frozen=True)
class IntervalQuality:
    """
    Quality of an interval.

    Diminished and augmented qualities carry a degree: 1 for a single
    diminution/augmentation, 2 for doubly, and so on without limit.

    Examples:
        IntervalQuality.MAJOR
        IntervalQuality.diminished(2) = doubly diminished
    """

    kind: QualityKind
    degree: int = 1

    PERFECT: ClassVar[IntervalQuality]
    MAJOR: ClassVar[IntervalQuality]
    MINOR: ClassVar[IntervalQuality]
    DIMINISHED: ClassVar[IntervalQuality]
    AUGMENTED: ClassVar[IntervalQuality]

    def __post_init__(self) -> None:
        if self.degree < 1:
            raise ValueError(f"Quality degree must be >= 1, got {self.degree}")
        if self.kind in (QualityKind.PERFECT, QualityKind.MAJOR, QualityKind.MINOR):
            if self.degree != 1:
                raise ValueError(f"Only diminished/augmented qualities take a degree: {self}")

    @classmethod
    def diminished(cls, degree: int = 1) -> IntervalQuality:
        return cls(QualityKind.DIMINISHED, degree)

    @classmethod
    def augmented(cls, degree: int = 1) -> IntervalQuality:
        return cls(QualityKind.AUGMENTED, degree)

    @classmethod
    def parse(cls, text: str) -> IntervalQuality:
        """Parse quality letters: 'P', 'M', 'm', 'd'*n or 'A'*n."""
        if text in ("P", "M", "m"):
            return cls(QualityKind(text))
        if text and set(text) == {"d"}:
            return cls.diminished(len(text))
        if text and set(text) == {"A"}:
            return cls.augmented(len(text))
        raise ValueError(f"Invalid interval quality: {text!r}")

    @property
    def is_perfect_family(self) -> bool:
        """Whether this quality only fits unison/4th/5th-class numbers."""
        return self.kind is QualityKind.PERFECT

    def inverted(self) -> IntervalQuality:
        """Mirror the quality: M <-> m, d(n) <-> A(n), P unchanged."""
        mirror = {
            QualityKind.PERFECT: QualityKind.PERFECT,
            QualityKind.MAJOR: QualityKind.MINOR,
            QualityKind.MINOR: QualityKind.MAJOR,
            QualityKind.DIMINISHED: QualityKind.AUGMENTED,
            QualityKind.AUGMENTED: QualityKind.DIMINISHED,
        }
        return IntervalQuality(mirror[self.kind], self.degree)

    def __str__(self) -> str:
        return self.kind.value * self.degree


IntervalQuality.PERFECT = IntervalQuality(QualityKind.PERFECT)
IntervalQuality.MAJOR = IntervalQuality(QualityKind.MAJOR)
IntervalQuality.MINOR = IntervalQuality(QualityKind.MINOR)
IntervalQuality.DIMINISHED = IntervalQuality(QualityKind.DIMINISHED)
IntervalQuality.AUGMENTED = IntervalQuality(QualityKind.AUGMENTED)


def _is_perfect_class(number: int) -> bool:
    return (abs(number) - 1) % 7 in _PERFECT_CLASSES


def _base_semitones(number: int) -> int:
    """Unsigned semitones of the perfect/major interval with this number."""
    octaves, simple = divmod(abs(number) - 1, 7)
    return _BASE_SEMITONES[simple] + 12 * octaves


@dataclass(frozen=True)
class Interval:
    """
    A spelled interval: quality plus signed number.

    Equality is spelling-sensitive (an augmented 4th is not a diminished
    5th). Use eq_enharmonic to compare semitone spans.

    Immutable and hashable.
    """

    quality: IntervalQuality
    number: int

    # Named intervals (class constants)
    PERFECT_UNISON: ClassVar[Interval]
    AUGMENTED_UNISON: ClassVar[Interval]
    DIMINISHED_UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    AUGMENTED_SECOND: ClassVar[Interval]
    DIMINISHED_THIRD: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    A1: ClassVar[Interval]
    d1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    A2: ClassVar[Interval]
    d3: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __post_init__(self) -> None:
        if self.number == 0:
            raise ValueError("Interval number cannot be zero")
        kind = self.quality.kind
        if _is_perfect_class(self.number):
            if kind in (QualityKind.MAJOR, QualityKind.MINOR):
                raise ValueError(f"{self.number} takes perfect qualities, not {kind.name.lower()}")
        elif kind is QualityKind.PERFECT:
            raise ValueError(f"{self.number} cannot be perfect")

    @classmethod
    def new(cls, quality: IntervalQuality, number: int) -> Interval | None:
        """
        Build an interval, or None if the quality does not fit the number.

        A perfect third or a major fifth has no meaning, so those pairs
        come back as None instead of raising.
        """
        try:
            return cls(quality, number)
        except ValueError:
            return None

    @classmethod
    def strict_non_subzero(cls, quality: IntervalQuality, number: int) -> Interval | None:
        """
        Build an interval, or None if the pair is invalid or subzero.

        d1 and dd2 fall in pitch while rising by number, so both give None.
        """
        interval = cls.new(quality, number)
        if interval is None or interval.is_subzero():
            return None
        return interval

    @classmethod
    def from_steps_and_semitones(cls, steps: int, semitones: int) -> Interval:
        """
        Derive the interval spanning a signed step count and semitone count.

        Total for every pair: any semitone surplus or shortfall becomes
        augmentation or diminution. Zero steps are an ascending unison.
        """
        sign = -1 if steps < 0 else 1
        number = sign * (abs(steps) + 1)
        diff = semitones * sign - _base_semitones(number)

        if _is_perfect_class(number):
            if diff == 0:
                quality = IntervalQuality.PERFECT
            elif diff > 0:
                quality = IntervalQuality.augmented(diff)
            else:
                quality = IntervalQuality.diminished(-diff)
        elif diff == 0:
            quality = IntervalQuality.MAJOR
        elif diff == -1:
            quality = IntervalQuality.MINOR
        elif diff > 0:
            quality = IntervalQuality.augmented(diff)
        else:
            quality = IntervalQuality.diminished(-diff - 1)

        return cls(quality, number)

    @classmethod
    def from_semitones_preferred(cls, semitones: int) -> Interval:
        """
        Spell a semitone count with its most common interval name.

        Six semitones are spelled as a diminished fifth; whole octaves as
        perfect octaves (or a unison for zero).
        """
        if semitones == 0:
            return cls.PERFECT_UNISON
        preferred = (
            (IntervalQuality.MINOR, 2),
            (IntervalQuality.MAJOR, 2),
            (IntervalQuality.MINOR, 3),
            (IntervalQuality.MAJOR, 3),
            (IntervalQuality.PERFECT, 4),
            (IntervalQuality.DIMINISHED, 5),
            (IntervalQuality.PERFECT, 5),
            (IntervalQuality.MINOR, 6),
            (IntervalQuality.MAJOR, 6),
            (IntervalQuality.MINOR, 7),
            (IntervalQuality.MAJOR, 7),
            (IntervalQuality.PERFECT, 8),
        )
        octaves, index = divmod(abs(semitones) - 1, 12)
        quality, number = preferred[index]
        number += 7 * octaves
        return cls(quality, number if semitones > 0 else -number)

    @classmethod
    def parse(cls, text: str) -> Interval:
        """
        Parse an interval from shorthand like 'M3', 'P5', 'dd7', 'm-3' or '-m3'.

        Raises:
            ValueError: On malformed text or an impossible quality/number pair
        """
        match = _INTERVAL_RE.match(text.strip())
        if not match or (match.group(1) and match.group(3)):
            raise ValueError(f"Invalid interval: {text!r}")
        quality = IntervalQuality.parse(match.group(2))
        number = int(match.group(4))
        if match.group(1) or match.group(3):
            number = -number
        return cls(quality, number)

    @property
    def is_ascending(self) -> bool:
        return self.number > 0

    def with_direction(self, ascending: bool) -> Interval:
        """Same quality and size, pointing up or down."""
        size = abs(self.number)
        return Interval(self.quality, size if ascending else -size)

    def abs(self) -> Interval:
        """The ascending form of this interval."""
        return self.with_direction(True)

    def semitones(self) -> int:
        """Signed semitone span of this interval."""
        kind = self.quality.kind
        if kind is QualityKind.MINOR:
            adjust = -1
        elif kind is QualityKind.AUGMENTED:
            adjust = self.quality.degree
        elif kind is QualityKind.DIMINISHED:
            # Diminishing a major-class interval passes through minor first
            adjust = -self.quality.degree
            if not _is_perfect_class(self.number):
                adjust -= 1
        else:
            adjust = 0

        unsigned = _base_semitones(self.number) + adjust
        return unsigned if self.number > 0 else -unsigned

    def diatonic_steps(self) -> int:
        """Signed number of letter steps spanned (a third spans 2)."""
        steps = abs(self.number) - 1
        return steps if self.number > 0 else -steps

    def as_simple(self) -> Interval:
        """
        Reduce a compound interval to within one octave.

        Whole multiples of an octave reduce to an octave rather than a
        unison, so P15 becomes P8 while P1 stays P1.
        """
        size = abs(self.number)
        if size != 1 and (size - 1) % 7 == 0:
            simple = 8
        else:
            simple = (size - 1) % 7 + 1
        return Interval(self.quality, simple if self.number > 0 else -simple)

    def inverted(self) -> Interval:
        """
        Invert the interval.

        Simple numbers map n -> 9 - n with unison and octave fixed;
        compound intervals keep their octave count.

        M3 -> m6
        P5 -> P4
        A1 -> d1
        M10 -> m13
        """
        size = abs(self.number)
        simple = abs(self.as_simple().number)
        octaves = (size - 1) // 7

        if simple == 8:
            inverted_size = 7 * (octaves - 1) + 8
        elif simple == 1:
            inverted_size = 7 * octaves + 1
        else:
            inverted_size = 7 * octaves + 9 - simple

        number = inverted_size if self.number > 0 else -inverted_size
        return Interval(self.quality.inverted(), number)

    def inverted_strict_non_subzero(self) -> Interval | None:
        """
        Invert, or None when the inversion is subzero.

        AA7 inverts to dd2, which spans -1 semitone.
        """
        inverted = self.inverted()
        return None if inverted.is_subzero() else inverted

    def is_subzero(self) -> bool:
        """
        Whether the semitone direction contradicts the number's direction.

        A diminished unison is ascending by number but spans -1 semitone.
        """
        semitones = self.semitones()
        return semitones != 0 and (semitones > 0) != (self.number > 0)

    def expand_subzero(self) -> Interval:
        """
        Add octaves (in the number's direction) until no longer subzero.

        d1 -> d8
        """
        if not self.is_subzero():
            return self
        shortfall = -self.semitones() if self.number > 0 else self.semitones()
        octaves = (shortfall + 11) // 12
        size = abs(self.number) + 7 * octaves
        return Interval(self.quality, size if self.number > 0 else -size)

    def stability(self) -> Stability | None:
        """
        Classify consonance.

        Fourths are ambiguous (consonant melodically, dissonant against
        the bass), so they return None.
        """
        if self.quality.kind in (QualityKind.DIMINISHED, QualityKind.AUGMENTED):
            return Stability.DISSONANCE
        simple = abs(self.as_simple().number)
        if simple in (1, 5, 8):
            return Stability.PERFECT_CONSONANCE
        if simple in (3, 6):
            return Stability.IMPERFECT_CONSONANCE
        if simple in (2, 7):
            return Stability.DISSONANCE
        return None

    def eq_enharmonic(self, other: Interval) -> bool:
        """Compare semitone spans, ignoring spelling."""
        return self.semitones() == other.semitones()

    def cmp_enharmonic(self, other: Interval) -> int:
        """Compare semitone spans: -1, 0 or 1."""
        a, b = self.semitones(), other.semitones()
        return (a > b) - (a < b)

    def __add__(self, other: Interval) -> Interval:
        """Compose two intervals (apply one after the other)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_steps_and_semitones(
            self.diatonic_steps() + other.diatonic_steps(),
            self.semitones() + other.semitones(),
        )

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> Interval:
        """Same magnitude, opposite direction."""
        return Interval(self.quality, -self.number)

    def __str__(self) -> str:
        return f"{self.quality}{self.number}"

    def __repr__(self) -> str:
        return f"Interval({str(self)!r})"


# Initialize class constants after class is defined
Interval.PERFECT_UNISON = Interval(IntervalQuality.PERFECT, 1)
Interval.AUGMENTED_UNISON = Interval(IntervalQuality.AUGMENTED, 1)
Interval.DIMINISHED_UNISON = Interval(IntervalQuality.DIMINISHED, 1)
Interval.MINOR_SECOND = Interval(IntervalQuality.MINOR, 2)
Interval.MAJOR_SECOND = Interval(IntervalQuality.MAJOR, 2)
Interval.AUGMENTED_SECOND = Interval(IntervalQuality.AUGMENTED, 2)
Interval.DIMINISHED_THIRD = Interval(IntervalQuality.DIMINISHED, 3)
Interval.MINOR_THIRD = Interval(IntervalQuality.MINOR, 3)
Interval.MAJOR_THIRD = Interval(IntervalQuality.MAJOR, 3)
Interval.PERFECT_FOURTH = Interval(IntervalQuality.PERFECT, 4)
Interval.AUGMENTED_FOURTH = Interval(IntervalQuality.AUGMENTED, 4)
Interval.DIMINISHED_FIFTH = Interval(IntervalQuality.DIMINISHED, 5)
Interval.PERFECT_FIFTH = Interval(IntervalQuality.PERFECT, 5)
Interval.MINOR_SIXTH = Interval(IntervalQuality.MINOR, 6)
Interval.MAJOR_SIXTH = Interval(IntervalQuality.MAJOR, 6)
Interval.MINOR_SEVENTH = Interval(IntervalQuality.MINOR, 7)
Interval.MAJOR_SEVENTH = Interval(IntervalQuality.MAJOR, 7)
Interval.OCTAVE = Interval(IntervalQuality.PERFECT, 8)

# Short aliases
Interval.P1 = Interval.PERFECT_UNISON
Interval.A1 = Interval.AUGMENTED_UNISON
Interval.d1 = Interval.DIMINISHED_UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.A2 = Interval.AUGMENTED_SECOND
Interval.d3 = Interval.DIMINISHED_THIRD
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.A4 = Interval.AUGMENTED_FOURTH
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE

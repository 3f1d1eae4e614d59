"""
Key - a tonic pitch plus a diatonic mode.

Keys are placed on the circle of fifths by their signature: a signed
count of sharps (positive) or flats (negative). Everything else here
(the accidental table, the signature order, relative keys) is fifths
arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_theory.constants import Spelling

from .interval import Interval
from .letter import Accidental, Letter
from .pitch import Pitch
from .scale import DIATONIC, ModalScale, RootedScale, ScaleDegree

# Letters in the order sharps / flats are added to a key signature
_SHARP_ORDER: tuple[Letter, ...] = (
    Letter.F,
    Letter.C,
    Letter.G,
    Letter.D,
    Letter.A,
    Letter.E,
    Letter.B,
)
_FLAT_ORDER: tuple[Letter, ...] = tuple(reversed(_SHARP_ORDER))


class DiatonicMode(IntEnum):
    """
    The seven rotations of the diatonic pattern.

    The value is the degree of the major scale the mode starts on,
    so each mode's all-natural tonic is Letter(mode - 1).
    """

    IONIAN = 1
    DORIAN = 2
    PHRYGIAN = 3
    LYDIAN = 4
    MIXOLYDIAN = 5
    AEOLIAN = 6
    LOCRIAN = 7

    # Aliases
    MAJOR = 1
    NATURAL_MINOR = 6

    @property
    def natural_tonic(self) -> Letter:
        """The tonic letter of this mode with no sharps or flats."""
        return Letter(self.value - 1)

    @property
    def label(self) -> str:
        if self is DiatonicMode.IONIAN:
            return "major"
        if self is DiatonicMode.AEOLIAN:
            return "minor"
        return self.name.lower()

    @classmethod
    def parse(cls, name: str) -> DiatonicMode:
        """Parse a mode name such as 'dorian', 'major' or 'natural minor'."""
        number = DIATONIC.mode_number(name)
        if number is None:
            raise ValueError(f"Unknown diatonic mode: {name!r}")
        return cls(number)


@dataclass(frozen=True)
class Key:
    """
    A key is a tonic pitch plus a diatonic mode.

    Any pitch is a valid tonic, however many accidentals it carries.

    Examples:
        Key.major(Pitch.E).sharps() = 4
        Key(Pitch.D, DiatonicMode.DORIAN).sharps() = 0
    """

    tonic: Pitch
    mode: DiatonicMode = DiatonicMode.IONIAN

    def __post_init__(self) -> None:
        if not 1 <= int(self.mode) <= 7:
            raise ValueError(f"Mode must be 1-7, got {self.mode}")
        object.__setattr__(self, "mode", DiatonicMode(self.mode))

    @classmethod
    def major(cls, tonic: Pitch) -> Key:
        return cls(tonic, DiatonicMode.IONIAN)

    @classmethod
    def minor(cls, tonic: Pitch) -> Key:
        return cls(tonic, DiatonicMode.AEOLIAN)

    @classmethod
    def from_sharps(cls, sharps: int, mode: DiatonicMode = DiatonicMode.IONIAN) -> Key:
        """
        The key with a given signature in a given mode.

        Total over all integers: 8 sharps in major is G# major, with an F##.
        """
        tonic = Pitch.from_fifths_from_c(sharps + mode.natural_tonic.fifths_from_c)
        return cls(tonic, mode)

    @classmethod
    def try_from_sharps_tonic(cls, sharps: int, tonic: Pitch) -> Key | None:
        """
        Find the mode in which a tonic carries a given signature.

        Returns None when the tonic is not diatonic to that signature
        (C# with no sharps, for example).
        """
        position = tonic.fifths_from_c() - sharps
        if not -1 <= position <= 5:
            return None
        letter = Letter.from_fifths(position)
        return cls(tonic, DiatonicMode(letter.value + 1))

    @classmethod
    def from_pitch_degree(cls, degree: ScaleDegree, pitch: Pitch, mode: DiatonicMode) -> Key:
        """
        The key in which a pitch sits at a given degree.

        Examples:
            from_pitch_degree(ScaleDegree(5), Pitch.D, DiatonicMode.IONIAN) = G major
        """
        letter, _ = pitch.letter.step(-degree.index)
        expected = cls(Pitch(letter), mode).scale().get(degree)
        offset = pitch.accidental.offset - expected.accidental.offset
        return cls(Pitch(letter, Accidental(offset)), mode)

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'F#_dorian' or 'Bb minor'.

        Raises:
            ValueError: If the tonic or mode cannot be parsed
        """
        parts = name.replace("_", " ").split()
        if len(parts) < 2:
            raise ValueError(f"Invalid key format: {name}. Expected 'tonic_mode' like 'C_major'")
        return cls(Pitch.parse(parts[0]), DiatonicMode.parse("_".join(parts[1:])))

    def with_tonic(self, tonic: Pitch) -> Key:
        return Key(tonic, self.mode)

    def parallel(self, mode: DiatonicMode) -> Key:
        """Same tonic, different mode: C major -> C minor."""
        return Key(self.tonic, mode)

    def transpose(self, interval: Interval) -> Key:
        return Key(self.tonic.transpose(interval), self.mode)

    def sharps(self) -> int:
        """
        Signed key signature: sharps positive, flats negative.

        The tonic's place on the circle of fifths, measured from the
        mode's all-natural tonic (C for Ionian, D for Dorian, ...).
        """
        return self.tonic.fifths_from_c() - self.mode.natural_tonic.fifths_from_c

    def spelling(self) -> Spelling | None:
        """Whether the signature uses sharps or flats (None for no accidentals)."""
        sharps = self.sharps()
        if sharps > 0:
            return Spelling.SHARPS
        if sharps < 0:
            return Spelling.FLATS
        return None

    def accidental_of(self, letter: Letter) -> Accidental:
        """
        The accidental a letter carries in this key.

        A key's seven pitches occupy seven consecutive fifths starting one
        fifth below its signature position; the letter's pitch is the one
        inside that window.
        """
        lowest = self.sharps() - 1
        return Accidental(-((letter.fifths_from_c - lowest) // 7))

    def alterations(self) -> list[Pitch]:
        """
        The altered pitches of the signature, in the order they are written.

        Sharps go F C G D A E B, flats B E A D G C F. Each letter appears
        once with its full accidental, so beyond seven sharps the F is
        already an F## and the offsets always sum to sharps().
        """
        sharps = self.sharps()
        if sharps == 0:
            return []
        order = _SHARP_ORDER if sharps > 0 else _FLAT_ORDER
        altered = (Pitch(letter, self.accidental_of(letter)) for letter in order)
        return [pitch for pitch in altered if not pitch.accidental.is_natural]

    def relative_to(self, mode: DiatonicMode) -> Key:
        """The key in another mode sharing this signature."""
        shift = mode.natural_tonic.fifths_from_c - self.mode.natural_tonic.fifths_from_c
        return Key(self.tonic.transpose_fifths(shift), mode)

    def relative(self) -> Key | None:
        """
        Relative minor of a major key, or relative major of a minor key.

        Other modes have no conventional relative and return None.
        """
        if self.mode is DiatonicMode.IONIAN:
            return self.relative_to(DiatonicMode.AEOLIAN)
        if self.mode is DiatonicMode.AEOLIAN:
            return self.relative_to(DiatonicMode.IONIAN)
        return None

    def scale(self) -> RootedScale:
        """The key's diatonic scale rooted on the tonic."""
        return RootedScale(self.tonic, ModalScale(DIATONIC, int(self.mode)))

    def pitches(self) -> list[Pitch]:
        return self.scale().pitches()

    def __str__(self) -> str:
        return f"{self.tonic} {self.mode.label}"

    def __repr__(self) -> str:
        return f"Key({self.tonic!r}, DiatonicMode.{self.mode.name})"

"""
Tests for interval qualities and spelled intervals.
"""

import pytest

from chuk_mcp_theory.core import (
    Accidental,
    Interval,
    IntervalQuality,
    Letter,
    Note,
    Pitch,
    QualityKind,
    Stability,
)


def _interval_grid() -> list[Interval]:
    """Every valid interval for a spread of qualities and numbers -16..16."""
    intervals = []
    for text in ("P", "M", "m", "d", "ddd", "A", "AA"):
        quality = IntervalQuality.parse(text)
        for number in range(-16, 17):
            interval = Interval.new(quality, number) if number else None
            if interval is not None:
                intervals.append(interval)
    return intervals


INTERVALS = _interval_grid()

SECOND_INTERVALS = [
    Interval.parse(text)
    for text in ("P1", "d1", "M3", "m-3", "A4", "d-5", "P8", "dd2", "AA-7", "m-10", "ddd12", "P-15")
]

PITCHES = [Pitch(letter, Accidental(offset)) for letter in Letter for offset in range(-3, 3)]


class TestIntervalQuality:
    """Tests for IntervalQuality."""

    def test_degrees(self) -> None:
        """Diminished and augmented stack; the others do not."""
        assert str(IntervalQuality.diminished(2)) == "dd"
        assert str(IntervalQuality.augmented(3)) == "AAA"
        with pytest.raises(ValueError):
            IntervalQuality(QualityKind.MAJOR, 2)
        with pytest.raises(ValueError):
            IntervalQuality(QualityKind.DIMINISHED, 0)

    def test_parse(self) -> None:
        assert IntervalQuality.parse("P") == IntervalQuality.PERFECT
        assert IntervalQuality.parse("m") == IntervalQuality.MINOR
        assert IntervalQuality.parse("ddd") == IntervalQuality.diminished(3)
        with pytest.raises(ValueError):
            IntervalQuality.parse("dA")

    def test_inverted(self) -> None:
        assert IntervalQuality.MAJOR.inverted() == IntervalQuality.MINOR
        assert IntervalQuality.PERFECT.inverted() == IntervalQuality.PERFECT
        assert IntervalQuality.diminished(2).inverted() == IntervalQuality.augmented(2)


class TestIntervalConstruction:
    """Building and parsing intervals."""

    def test_quality_must_fit_number(self) -> None:
        """Perfect thirds and major fifths do not exist."""
        with pytest.raises(ValueError):
            Interval(IntervalQuality.PERFECT, 3)
        with pytest.raises(ValueError):
            Interval(IntervalQuality.MAJOR, 5)
        with pytest.raises(ValueError):
            Interval(IntervalQuality.PERFECT, 0)

    def test_new_returns_none(self) -> None:
        assert Interval.new(IntervalQuality.PERFECT, 3) is None
        assert Interval.new(IntervalQuality.MINOR, 12) is None
        assert Interval.new(IntervalQuality.MINOR, 10) == Interval.parse("m10")

    def test_parse(self) -> None:
        assert Interval.parse("M3") == Interval.MAJOR_THIRD
        assert Interval.parse("P8") == Interval.OCTAVE
        assert Interval.parse("m-3") == Interval(IntervalQuality.MINOR, -3)
        assert Interval.parse("-m3") == Interval.parse("m-3")
        assert Interval.parse("dd7") == Interval(IntervalQuality.diminished(2), 7)

    def test_parse_invalid(self) -> None:
        for text in ("P3", "M5", "-m-3", "X3", "M", "3"):
            with pytest.raises(ValueError):
                Interval.parse(text)

    def test_str(self) -> None:
        assert str(Interval.parse("-m3")) == "m-3"
        assert str(Interval.parse("AA11")) == "AA11"

    def test_named_aliases(self) -> None:
        assert Interval.A4 is Interval.AUGMENTED_FOURTH
        assert Interval.P1 == Interval(IntervalQuality.PERFECT, 1)


class TestIntervalSemitones:
    """Semitone spans derived from quality and number."""

    @pytest.mark.parametrize(
        ("text", "semitones"),
        [
            ("P1", 0),
            ("A1", 1),
            ("d1", -1),
            ("m2", 1),
            ("dd2", -1),
            ("A4", 6),
            ("d5", 6),
            ("d7", 9),
            ("P8", 12),
            ("M10", 16),
            ("P-5", -7),
            ("m-9", -13),
        ],
    )
    def test_semitones(self, text: str, semitones: int) -> None:
        assert Interval.parse(text).semitones() == semitones

    def test_diatonic_steps(self) -> None:
        assert Interval.M3.diatonic_steps() == 2
        assert Interval.parse("P-8").diatonic_steps() == -7
        assert Interval.P1.diatonic_steps() == 0

    def test_from_steps_and_semitones(self) -> None:
        assert Interval.from_steps_and_semitones(2, 4) == Interval.M3
        assert Interval.from_steps_and_semitones(3, 6) == Interval.A4
        assert Interval.from_steps_and_semitones(4, 6) == Interval.d5
        assert Interval.from_steps_and_semitones(0, 0) == Interval.P1
        assert Interval.from_steps_and_semitones(0, -1) == Interval.d1
        assert Interval.from_steps_and_semitones(-2, -3) == Interval.parse("m-3")
        assert Interval.from_steps_and_semitones(7, 12) == Interval.OCTAVE
        assert Interval.from_steps_and_semitones(1, 4) == Interval.parse("AA2")

    def test_from_semitones_preferred(self) -> None:
        """Tritones come out as diminished fifths."""
        assert Interval.from_semitones_preferred(0) == Interval.P1
        assert Interval.from_semitones_preferred(6) == Interval.d5
        assert Interval.from_semitones_preferred(12) == Interval.OCTAVE
        assert Interval.from_semitones_preferred(13) == Interval.parse("m9")
        assert Interval.from_semitones_preferred(24) == Interval.parse("P15")
        assert Interval.from_semitones_preferred(-3) == Interval.parse("m-3")


class TestIntervalDerived:
    """Simple form, inversion, subzero handling and stability."""

    def test_as_simple(self) -> None:
        """Whole octaves reduce to an octave, never a unison."""
        assert Interval.parse("M10").as_simple() == Interval.M3
        assert Interval.parse("P15").as_simple() == Interval.OCTAVE
        assert Interval.OCTAVE.as_simple() == Interval.OCTAVE
        assert Interval.P1.as_simple() == Interval.P1
        assert Interval.parse("m-9").as_simple() == Interval.parse("m-2")

    @pytest.mark.parametrize(
        ("text", "inverted"),
        [
            ("M3", "m6"),
            ("P5", "P4"),
            ("A4", "d5"),
            ("A1", "d1"),
            ("P8", "P8"),
            ("M10", "m13"),
            ("m-3", "M-6"),
        ],
    )
    def test_inverted(self, text: str, inverted: str) -> None:
        assert Interval.parse(text).inverted() == Interval.parse(inverted)

    def test_subzero(self) -> None:
        """A diminished unison rises by number but falls in pitch."""
        assert Interval.d1.is_subzero()
        assert Interval.d1.expand_subzero() == Interval.parse("d8")
        assert Interval.parse("d-1").is_subzero()
        assert Interval.parse("d-1").expand_subzero() == Interval.parse("d-8")
        assert not Interval.P1.is_subzero()
        assert not Interval.parse("A-1").is_subzero()
        assert Interval.M3.expand_subzero() == Interval.M3

    def test_expanded_is_never_subzero(self) -> None:
        for text in ("d1", "dd2", "ddd3", "dddd2", "d-1"):
            assert not Interval.parse(text).expand_subzero().is_subzero()

    def test_stability(self) -> None:
        assert Interval.P5.stability() == Stability.PERFECT_CONSONANCE
        assert Interval.OCTAVE.stability() == Stability.PERFECT_CONSONANCE
        assert Interval.M3.stability() == Stability.IMPERFECT_CONSONANCE
        assert Interval.parse("M10").stability() == Stability.IMPERFECT_CONSONANCE
        assert Interval.m7.stability() == Stability.DISSONANCE
        assert Interval.A4.stability() == Stability.DISSONANCE
        assert Interval.P4.stability() is None
        assert Stability.IMPERFECT_CONSONANCE.is_consonant
        assert not Stability.DISSONANCE.is_consonant


class TestIntervalArithmetic:
    """Composition and enharmonic comparison."""

    def test_addition(self) -> None:
        assert Interval.M3 + Interval.m3 == Interval.P5
        assert Interval.M3 + Interval.P5 == Interval.M7
        assert Interval.OCTAVE + Interval.parse("M-3") == Interval.m6
        assert Interval.P5 + Interval.P5 == Interval.parse("M9")

    def test_subtraction(self) -> None:
        assert Interval.M2 - Interval.M2 == Interval.P1
        assert Interval.P5 - Interval.M3 == Interval.m3

    def test_negation(self) -> None:
        assert -Interval.M3 == Interval.parse("M-3")
        assert not (-Interval.M3).is_ascending

    def test_enharmonic_comparison(self) -> None:
        """Spelling-sensitive equality, sound-based comparison."""
        assert Interval.A4 != Interval.d5
        assert Interval.A4.eq_enharmonic(Interval.d5)
        assert Interval.M3.cmp_enharmonic(Interval.P4) == -1
        assert Interval.A4.cmp_enharmonic(Interval.d5) == 0

    def test_hashable(self) -> None:
        assert len({Interval.M3, Interval.parse("M3"), Interval.parse("d4")}) == 2


class TestIntervalDirection:
    """Direction helpers and subzero-safe construction."""

    def test_with_direction(self) -> None:
        assert Interval.M3.with_direction(True) == Interval.M3
        assert Interval.M3.with_direction(False) == -Interval.M3
        assert Interval.parse("m-6").with_direction(False) == Interval.parse("m-6")

    def test_abs(self) -> None:
        assert Interval.M3.abs() == Interval.M3
        assert (-Interval.M3).abs() == Interval.M3
        assert Interval.parse("dd-9").abs() == Interval.parse("dd9")

    def test_strict_non_subzero(self) -> None:
        assert Interval.strict_non_subzero(IntervalQuality.PERFECT, 5) == Interval.P5
        assert Interval.strict_non_subzero(IntervalQuality.DIMINISHED, 1) is None
        assert Interval.strict_non_subzero(IntervalQuality.PERFECT, 3) is None

    def test_single_diminution(self) -> None:
        """Only the diminished unison falls below zero."""
        assert Interval.d1.inverted().inverted_strict_non_subzero() is None
        for number in range(2, 15):
            interval = Interval.strict_non_subzero(IntervalQuality.DIMINISHED, number)
            assert interval is not None
            assert interval.inverted_strict_non_subzero() is not None

    def test_double_diminution(self) -> None:
        """dd1 and dd2 fall below zero; from the third up they do not."""
        dd = IntervalQuality.diminished(2)
        for number in (1, 2):
            assert Interval.strict_non_subzero(dd, number) is None
            assert Interval(dd, number).inverted().inverted_strict_non_subzero() is None
        for number in range(3, 15):
            interval = Interval.strict_non_subzero(dd, number)
            assert interval is not None
            assert interval.inverted_strict_non_subzero() is not None

    def test_doubly_augmented_seventh(self) -> None:
        """AA7 inverts to dd2."""
        assert Interval.parse("AA7").inverted() == Interval.parse("dd2")
        assert Interval.parse("AA7").inverted_strict_non_subzero() is None
        assert Interval.M3.inverted_strict_non_subzero() == Interval.m6

    def test_subzero_flags(self) -> None:
        assert Interval.d1.is_subzero()
        assert not Interval.parse("d2").is_subzero()


class TestIntervalLaws:
    """Inversion and subzero laws across the interval grid."""

    @pytest.mark.parametrize("interval", INTERVALS, ids=str)
    def test_inversion_is_involution(self, interval: Interval) -> None:
        assert interval.inverted().inverted() == interval

    @pytest.mark.parametrize("interval", INTERVALS, ids=str)
    def test_simple_inversion_completes_octave(self, interval: Interval) -> None:
        simple = interval.as_simple()
        assert (simple.semitones() + simple.inverted().semitones()) % 12 == 0

    @pytest.mark.parametrize("interval", INTERVALS, ids=str)
    def test_expanded_is_not_subzero(self, interval: Interval) -> None:
        expanded = interval.expand_subzero()
        assert not expanded.is_subzero()
        assert expanded.is_ascending == interval.is_ascending

    @pytest.mark.parametrize("interval", INTERVALS, ids=str)
    def test_negation_round_trip(self, interval: Interval) -> None:
        assert -(-interval) == interval
        assert (-interval).semitones() == -interval.semitones()


class TestTranspositionLaws:
    """Transposing by a sum equals transposing by each part, for pitches and notes."""

    @pytest.mark.parametrize("first", INTERVALS, ids=str)
    def test_pitch_composition(self, first: Interval) -> None:
        for second in SECOND_INTERVALS:
            combined = first + second
            for pitch in PITCHES:
                assert pitch.transpose(first).transpose(second) == pitch.transpose(combined)

    @pytest.mark.parametrize("first", INTERVALS, ids=str)
    def test_note_composition(self, first: Interval) -> None:
        for second in SECOND_INTERVALS:
            combined = first + second
            for pitch in PITCHES:
                note = Note(pitch, 4)
                assert note.transpose(first).transpose(second) == note.transpose(combined)

    @pytest.mark.parametrize("interval", INTERVALS, ids=str)
    def test_transpose_keeps_semitones(self, interval: Interval) -> None:
        for pitch in PITCHES:
            note = Note(pitch, 4)
            assert note.transpose(interval).semitones() == note.semitones() + interval.semitones()

    def test_pitch_distance_round_trip(self) -> None:
        for start in PITCHES:
            for end in PITCHES:
                assert start.transpose(start.distance_to(end)) == end

    def test_note_distance_round_trip(self) -> None:
        notes = [Note(pitch, octave) for pitch in PITCHES for octave in (2, 4, 5)]
        for start in notes:
            for end in notes:
                assert start.transpose(start.distance_to(end)) == end

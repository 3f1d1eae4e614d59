"""
Tests for the plain and enharmonic comparison strategies.
"""

from chuk_mcp_theory.core import (
    Interval,
    Note,
    Pitch,
    cmp_enharmonic,
    cmp_plain,
    enharmonic_key,
    eq_enharmonic,
    sorted_enharmonic,
    sorted_plain,
)
from chuk_mcp_theory.core.enharmonic import Spelled


class TestPlainOrder:
    """Spelling order: letter, then accidental (octave first for notes)."""

    def test_letters_before_accidentals(self) -> None:
        assert cmp_plain(Pitch.parse("E##"), Pitch.parse("Fbb")) == -1
        assert cmp_plain(Pitch.B_SHARP, Pitch.C) == 1
        assert cmp_plain(Pitch.C, Pitch.C) == 0

    def test_notes_compare_octave_first(self) -> None:
        assert cmp_plain(Note.parse("B#4"), Note.parse("C5")) == -1
        assert cmp_plain(Note.parse("Cb5"), Note.parse("B4")) == 1


class TestEnharmonicOrder:
    """Sounding order, which can disagree with spelling order."""

    def test_orders_diverge(self) -> None:
        """E## is written before Fbb but sounds after it (F# vs Eb)."""
        e_double_sharp = Pitch.parse("E##")
        f_double_flat = Pitch.parse("Fbb")
        assert cmp_plain(e_double_sharp, f_double_flat) == -1
        assert cmp_enharmonic(f_double_flat, e_double_sharp) == -1

    def test_equal_sounds(self) -> None:
        assert eq_enharmonic(Pitch.C_SHARP, Pitch.D_FLAT)
        assert eq_enharmonic(Note.parse("B#3"), Note.MIDDLE_C)
        assert eq_enharmonic(Interval.A4, Interval.d5)
        assert cmp_enharmonic(Note.parse("Cb5"), Note.parse("B4")) == 0
        assert not eq_enharmonic(Note.parse("C4"), Note.parse("C5"))

    def test_key_breaks_ties_by_spelling(self) -> None:
        assert enharmonic_key(Interval.A4) < enharmonic_key(Interval.d5)
        assert enharmonic_key(Note.parse("B#3")) < enharmonic_key(Note.MIDDLE_C)


class TestSorting:
    """Sorting helpers."""

    def test_sorted_enharmonic_is_deterministic(self) -> None:
        pitches = [Pitch.B_SHARP, Pitch.parse("Dbb"), Pitch.C]
        assert sorted_enharmonic(pitches) == [Pitch.C, Pitch.parse("Dbb"), Pitch.B_SHARP]

    def test_sorted_notes_by_sound(self) -> None:
        notes = [Note.parse(n) for n in ("E##4", "Fbb4", "D4")]
        assert [str(n) for n in sorted_enharmonic(notes)] == ["D4", "Fbb4", "E##4"]
        assert [str(n) for n in sorted_plain(notes)] == ["D4", "E##4", "Fbb4"]


class TestSpelledValues:
    """Both strategies accept pitches and notes."""

    def test_spelled_union(self) -> None:
        assert isinstance(Pitch.C, Spelled)
        assert isinstance(Note.MIDDLE_C, Spelled)
        assert not isinstance(Interval.M3, Spelled)

"""
Comparison strategies - plain (spelling) order versus enharmonic (sounding) order.

The two orders are deliberately separate and can disagree. Under plain
order E## < Fbb because E comes before F; enharmonically Fbb (Eb) sounds
lower than E## (F#). Sorting a collection by one does not sort it by the
other.
"""

from __future__ import annotations

from .interval import Interval
from .note import Note
from .pitch import Pitch

Spelled = Pitch | Note


def plain_key(value: Spelled) -> tuple[int, ...]:
    """Sort key for the spelling order (octave, letter, accidental)."""
    if isinstance(value, Note):
        return (value.octave, value.letter.value, value.accidental.offset)
    return (value.letter.value, value.accidental.offset)


def enharmonic_key(value: Spelled | Interval) -> tuple[int, ...]:
    """
    Sort key for the sounding order.

    Ties between spellings of the same sound fall back to the plain
    order, so sorting stays deterministic.
    """
    if isinstance(value, Interval):
        return (value.semitones(), value.number)
    if isinstance(value, Note):
        return (value.semitones(), *plain_key(value))
    return (int(value.pitch_class()), *plain_key(value))


def cmp_plain(a: Spelled, b: Spelled) -> int:
    """Compare by spelling: -1, 0 or 1."""
    ka, kb = plain_key(a), plain_key(b)
    return (ka > kb) - (ka < kb)


def cmp_enharmonic(a: Spelled | Interval, b: Spelled | Interval) -> int:
    """Compare by sound only; different spellings of one sound are equal."""
    return a.cmp_enharmonic(b)  # type: ignore[arg-type]


def eq_enharmonic(a: Spelled | Interval, b: Spelled | Interval) -> bool:
    return a.eq_enharmonic(b)  # type: ignore[arg-type]


def sorted_enharmonic(values: list[Spelled]) -> list[Spelled]:
    return sorted(values, key=enharmonic_key)


def sorted_plain(values: list[Spelled]) -> list[Spelled]:
    return sorted(values, key=plain_key)

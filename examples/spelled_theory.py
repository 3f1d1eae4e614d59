#!/usr/bin/env python3
"""
Example: Spelled pitches, intervals and keys.

Walks through the arithmetic layer: transposition that keeps spelling,
intervals that know a tritone's two names, and key signatures from the
circle of fifths.

Usage:
    python examples/spelled_theory.py
"""

from chuk_mcp_theory.core import DiatonicMode, Interval, Key, Note, Pitch


def main() -> None:
    """Print a tour of the theory primitives."""
    print("Transposition keeps spelling:")
    for interval in (Interval.A4, Interval.d5):
        print(f"  C + {interval} = {Pitch.C + interval}")

    middle_c = Note.MIDDLE_C
    print(f"\n{middle_c} is MIDI {middle_c.to_midi()} at {middle_c.frequency():.2f} Hz")
    b_sharp = middle_c + Interval.parse("A7")
    print(f"  {middle_c} + A7 = {b_sharp} (sounds as {b_sharp.simplified()})")

    print("\nInterval composition:")
    total = Interval.M3 + Interval.P5
    print(f"  M3 + P5 = {total}, {total.semitones()} semitones, inverts to {total.inverted()}")
    print(f"  d1 is subzero: {Interval.d1.is_subzero()}, expands to {Interval.d1.expand_subzero()}")

    print("\nKey signatures:")
    for sharps in range(-7, 8):
        major = Key.from_sharps(sharps)
        minor = Key.from_sharps(sharps, DiatonicMode.AEOLIAN)
        alterations = " ".join(str(p) for p in major.alterations()) or "-"
        print(f"  {sharps:+d}: {str(major):<10} {str(minor):<10} {alterations}")


if __name__ == "__main__":
    main()

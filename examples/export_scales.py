#!/usr/bin/env python3
"""
Example: Build scales from the library and export them to MIDI.

Usage:
    python examples/export_scales.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_theory.core import Note, RootedScale
from chuk_mcp_theory.export import scale_to_midi
from chuk_mcp_theory.scales import ScaleLoader

SCALES = [
    ("dorian", "D4"),
    ("pentatonic:minor", "A3"),
    ("phrygian_dominant", "E4"),
    ("altered", "G3"),
    ("hirajoshi", "C4"),
]


def main() -> None:
    """Export a handful of library scales."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    loader = ScaleLoader()
    print(f"{len(loader.list_scales())} scale families available\n")

    for name, root in SCALES:
        scale = loader.resolve(name)
        if scale is None:
            print(f"  {name}: not found")
            continue
        rooted = RootedScale(Note.parse(root), scale)
        members = " ".join(str(n) for n in rooted.build_from())
        print(f"{rooted}: {members}")

        path = output_dir / f"{name.replace(':', '_')}.mid"
        scale_to_midi(rooted).save(str(path))
        print(f"  Created: {path}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()

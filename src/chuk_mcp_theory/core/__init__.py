"""
Core theory primitives - the arithmetic layer.

These are the exact, spelling-aware types everything else composes on:
- Letter: The seven letter names (C-B)
- Accidental: Signed semitone offset from a letter
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: Letter + accidental (spelled, octave-free)
- Interval: Quality + signed number
- Note: Pitch + octave, with MIDI and frequency conversion
- DiatonicMode / Key: Tonic + mode, key signatures
- ScaleDegree: Range-checked position in a scale
- FixedScale / ModalScale / DynamicScale: Interval cycles closing on an octave
- RootedScale: A scale pinned to a root pitch or note
"""

from chuk_mcp_theory.core.enharmonic import (
    cmp_enharmonic,
    cmp_plain,
    enharmonic_key,
    eq_enharmonic,
    plain_key,
    sorted_enharmonic,
    sorted_plain,
)
from chuk_mcp_theory.core.interval import Interval, IntervalQuality, QualityKind, Stability
from chuk_mcp_theory.core.key import DiatonicMode, Key
from chuk_mcp_theory.core.letter import Accidental, Letter
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.pitch import Pitch, PitchClass
from chuk_mcp_theory.core.scale import (
    DIATONIC,
    DynamicScale,
    FixedScale,
    ModalScale,
    RootedScale,
    Scale,
    ScaleDegree,
    ScaleFamily,
)

__all__ = [
    # Letter
    "Letter",
    "Accidental",
    # Pitch
    "PitchClass",
    "Pitch",
    "Note",
    # Interval
    "QualityKind",
    "IntervalQuality",
    "Interval",
    "Stability",
    # Comparison
    "cmp_plain",
    "cmp_enharmonic",
    "eq_enharmonic",
    "plain_key",
    "enharmonic_key",
    "sorted_plain",
    "sorted_enharmonic",
    # Key
    "DiatonicMode",
    "Key",
    # Scale
    "ScaleDegree",
    "ScaleFamily",
    "FixedScale",
    "ModalScale",
    "DynamicScale",
    "Scale",
    "RootedScale",
    "DIATONIC",
]

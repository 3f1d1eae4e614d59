"""
Constants and enums for the theory system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Spelling(str, Enum):
    """Which accidental family a key signature or re-spelling uses."""

    SHARPS = "sharps"
    FLATS = "flats"


class RespellMode(str, Enum):
    """Ways to re-spell a pitch or note enharmonically."""

    SHARPS = "sharps"  # Only sharps (or natural)
    FLATS = "flats"  # Only flats (or natural)
    SIMPLIFIED = "simplified"  # Fewest accidentals
    ENHARMONIC = "enharmonic"  # Flip sharp <-> flat


# Tuning reference
CONCERT_PITCH_HZ = 440.0
A4_MIDI = 69

# MIDI note range, and the offset from absolute semitones (C0 = 0) to MIDI (C-1 = 0)
MIDI_MIN = 0
MIDI_MAX = 127
MIDI_OCTAVE_OFFSET = 12

# Default octave for pitches that need one (middle C octave)
DEFAULT_OCTAVE = 4

# MIDI export defaults
TICKS_PER_BEAT = 480
DEFAULT_TEMPO_BPM = 120
DEFAULT_VELOCITY = 96
DEFAULT_NOTE_BEATS = 1.0

# Schema versions - frozen for v1
SchemaVersion = Literal[
    "scale/v1",
    "key-signature/v1",
]

# Separator between a scale family and one of its modes, e.g. "pentatonic:minor"
MODE_SEPARATOR = ":"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected a letter and accidentals like 'F#' or 'Bb'."
    INVALID_NOTE = "Invalid note: '{note}'. Expected a pitch plus octave like 'C#4'."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Expected shorthand like 'M3' or 'P-5'."
    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'D_dorian'."
    SCALE_NOT_FOUND = "Scale '{name}' not found."
    NO_MIDI = "Note '{note}' is outside the MIDI range 0-127."
    NO_NOTE_FOR_FREQUENCY = "No MIDI-range note near {hz} Hz."
    NO_MODE_FOR_TONIC = "{tonic} is not diatonic to a signature of {sharps} sharps."
    NO_RELATIVE = "{key} has no relative major/minor."
    LETTER_NOT_IN_SCALE = "No degree of {scale} uses the letter of {target}."
    INCOMPLETE_RANGE = "A range needs both start and end, got only {given}."


class SuccessMessages:
    """Standardized success messages."""

    SCALE_BUILT = "Built {count} notes of {scale}."
    SCALE_EXPORTED = "Exported {scale} to {path}."
    SCALE_COPIED = "Copied {name} to the project; edit the YAML file to customize it."

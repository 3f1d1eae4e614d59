"""
Scale primitives - ScaleDegree, scale variants and RootedScale.

A scale is an ordered cycle of intervals that closes on exactly one
octave. It comes in three shapes sharing one set of operations:

- FixedScale: a named pattern with a declared number of degrees
- ModalScale: a rotation of a ScaleFamily picked by mode number
- DynamicScale: any interval list supplied at runtime

RootedScale pins a scale to a starting Pitch or Note.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import reduce
from typing import ClassVar, TypeVar

from .enharmonic import enharmonic_key
from .interval import Interval
from .letter import Accidental
from .note import Note
from .pitch import Pitch

Root = TypeVar("Root", Pitch, Note)


@dataclass(frozen=True)
class ScaleDegree:
    """
    A 1-based position in a scale of a given size.

    Range-checked on construction, so a ScaleDegree that exists is always
    a valid index into any scale of the same size.

    Examples:
        ScaleDegree(1) = tonic of a seven-note scale
        ScaleDegree(5, size=5) = last degree of a pentatonic scale
    """

    degree: int
    size: int = 7

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Scale size must be >= 1, got {self.size}")
        if not 1 <= self.degree <= self.size:
            raise ValueError(f"Degree must be 1-{self.size}, got {self.degree}")

    @classmethod
    def from_num(cls, degree: int, size: int = 7) -> ScaleDegree | None:
        """Build a degree, or None if it is out of range."""
        if size < 1 or not 1 <= degree <= size:
            return None
        return cls(degree, size)

    @property
    def index(self) -> int:
        """Zero-based position."""
        return self.degree - 1

    def __int__(self) -> int:
        return self.degree

    def __str__(self) -> str:
        return str(self.degree)


def _octave_closure(steps: tuple[Interval, ...]) -> int:
    return sum(step.semitones() for step in steps)


def _check_steps(steps: tuple[Interval, ...]) -> None:
    if not steps:
        raise ValueError("A scale needs at least one interval")
    total = _octave_closure(steps)
    if total != 12:
        raise ValueError(f"Scale intervals must sum to 12 semitones, got {total}")


class _IntervalCycle:
    """Operations shared by every scale shape."""

    name: str

    @property
    def intervals(self) -> tuple[Interval, ...]:
        raise NotImplementedError

    @property
    def size(self) -> int:
        """Number of degrees (one per interval)."""
        return len(self.intervals)

    def __len__(self) -> int:
        return self.size

    def degree(self, degree: int) -> ScaleDegree:
        """Build a degree checked against this scale's size."""
        return ScaleDegree(degree, self.size)

    def build_from(self, root: Root) -> list[Root]:
        """
        Apply the intervals cumulatively from a root.

        Returns one entry per degree; the closing octave is not included.
        Works for Pitch roots (no octave) and Note roots alike.
        """
        members = [root]
        current = root
        for step in self.intervals[:-1]:
            current = current + step
            members.append(current)
        return members

    def interval_between_degrees(self, start: ScaleDegree, end: ScaleDegree) -> Interval:
        """
        Interval spanned from one degree to another, independent of root.

        Descending (negative) when end comes before start.
        """
        self._check_degree(start)
        self._check_degree(end)
        low, high = sorted((start.index, end.index))
        span = reduce(lambda a, b: a + b, self.intervals[low:high], Interval.PERFECT_UNISON)
        return span if start.index <= end.index else -span

    def to_dynamic(self) -> DynamicScale:
        """Forget the shape, keep the intervals."""
        return DynamicScale(self.intervals, self.name)

    def rooted(self, root: Pitch | Note) -> RootedScale:
        return RootedScale(root, self)  # type: ignore[arg-type]

    def _check_degree(self, degree: ScaleDegree) -> None:
        if degree.size != self.size:
            raise ValueError(
                f"Degree {degree} belongs to a {degree.size}-note scale, not {self.size}"
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FixedScale(_IntervalCycle):
    """
    A named interval pattern with a declared number of degrees.

    The step count must match the declared size and the steps must close
    on one octave.
    """

    name: str
    degree_count: int
    steps: tuple[Interval, ...]

    # Common fixed scales (defined after class)
    MAJOR: ClassVar[FixedScale]
    NATURAL_MINOR: ClassVar[FixedScale]
    HARMONIC_MINOR: ClassVar[FixedScale]
    MELODIC_MINOR: ClassVar[FixedScale]
    CHROMATIC: ClassVar[FixedScale]

    def __post_init__(self) -> None:
        if len(self.steps) != self.degree_count:
            raise ValueError(
                f"Scale '{self.name}' declares {self.degree_count} degrees "
                f"but has {len(self.steps)} intervals"
            )
        _check_steps(self.steps)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self.steps


@dataclass(frozen=True)
class ScaleFamily:
    """
    A base interval pattern whose rotations are its modes.

    Examples:
        DIATONIC.mode_number("dorian") = 2
    """

    name: str
    steps: tuple[Interval, ...]
    modes: tuple[str, ...] = ()
    aliases: tuple[tuple[str, int], ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        _check_steps(self.steps)
        if len(self.modes) > len(self.steps):
            raise ValueError(f"Family '{self.name}' names more modes than it has degrees")
        for alias, mode in self.aliases:
            if not 1 <= mode <= len(self.steps):
                raise ValueError(f"Alias '{alias}' points at mode {mode}, out of range")

    @property
    def size(self) -> int:
        return len(self.steps)

    def mode_name(self, mode: int) -> str:
        if mode <= len(self.modes):
            return self.modes[mode - 1]
        return f"{self.name} mode {mode}"

    def mode_number(self, name: str) -> int | None:
        """Look up a mode by name or alias (case-insensitive)."""
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        for i, mode in enumerate(self.modes):
            if mode == key:
                return i + 1
        for alias, mode_num in self.aliases:
            if alias == key:
                return mode_num
        return None

    def mode(self, mode: int | str) -> ModalScale:
        """Select a mode by number or name."""
        if isinstance(mode, str):
            number = self.mode_number(mode)
            if number is None:
                raise ValueError(f"Unknown mode '{mode}' for {self.name}")
            mode = number
        return ModalScale(self, mode)


@dataclass(frozen=True)
class ModalScale(_IntervalCycle):
    """
    One mode of a scale family, selected at runtime.

    Mode 1 is the family pattern itself; mode n starts on its nth degree.
    """

    family: ScaleFamily
    mode: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.mode <= self.family.size:
            raise ValueError(f"Mode must be 1-{self.family.size}, got {self.mode}")

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.family.mode_name(self.mode)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        start = self.mode - 1
        return self.family.steps[start:] + self.family.steps[:start]


@dataclass(frozen=True)
class DynamicScale(_IntervalCycle):
    """
    A scale from an arbitrary runtime list of intervals.

    Use DynamicScale.new to get None instead of an exception when the
    intervals do not close on an octave.
    """

    steps: tuple[Interval, ...]
    name: str = "custom"

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        _check_steps(self.steps)

    @classmethod
    def new(
        cls, steps: list[Interval] | tuple[Interval, ...], name: str = "custom"
    ) -> DynamicScale | None:
        """Build a scale, or None unless the steps sum to exactly 12 semitones."""
        steps = tuple(steps)
        if not steps or _octave_closure(steps) != 12:
            return None
        return cls(steps, name)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self.steps

    def to_dynamic(self) -> DynamicScale:
        return self


Scale = FixedScale | ModalScale | DynamicScale


@dataclass(frozen=True)
class RootedScale:
    """
    A scale pinned to a root Pitch or Note.

    With a Note root every result carries octaves; with a Pitch root,
    results are octave-free pitches (except build, which always yields
    notes).

    Examples:
        RootedScale(Pitch.D, FixedScale.MAJOR).build_from()
            = [D, E, F#, G, A, B, C#]
    """

    root: Pitch | Note
    scale: Scale

    @property
    def size(self) -> int:
        return self.scale.size

    def build_from(self) -> list[Pitch] | list[Note]:
        return self.scale.build_from(self.root)  # type: ignore[type-var]

    def pitches(self) -> list[Pitch]:
        return [m.pitch if isinstance(m, Note) else m for m in self.build_from()]

    def get(self, degree: ScaleDegree) -> Pitch | Note:
        """Member at a degree (degree size must match the scale)."""
        self.scale._check_degree(degree)
        return self.build_from()[degree.index]

    def interval_between_degrees(self, start: ScaleDegree, end: ScaleDegree) -> Interval:
        return self.scale.interval_between_degrees(start, end)

    def transpose(self, interval: Interval) -> RootedScale:
        """Move the root; the interval pattern is unchanged."""
        return RootedScale(self.root.transpose(interval), self.scale)

    def _anchored(self, octave: int) -> list[Note]:
        root = self.root if isinstance(self.root, Note) else Note(self.root, octave)
        return self.scale.build_from(root)

    def build(self, start: Note, end: Note) -> list[Note]:
        """
        Every scale member from start to end inclusive, ascending by pitch.

        Spans as many octaves as needed. Empty if end is below start.
        """
        low, high = start.semitones(), end.semitones()
        notes: list[Note] = []
        for member in self._anchored(start.octave):
            pos = member.semitones()
            first = -((pos - low) // 12)
            last = (high - pos) // 12
            for shift in range(first, last + 1):
                notes.append(Note(member.pitch, member.octave + shift))
        return sorted(notes, key=enharmonic_key)

    def get_scale_degree_and_accidental(
        self, target: Pitch | Note
    ) -> tuple[ScaleDegree, Accidental] | None:
        """
        Find the degree sharing the target's letter.

        Returns the degree and how far the target's accidental departs
        from the scale's, or None if no degree uses that letter.
        Octaves are ignored.
        """
        pitch = target.pitch if isinstance(target, Note) else target
        for i, member in enumerate(self.pitches()):
            if member.letter == pitch.letter:
                delta = pitch.accidental.offset - member.accidental.offset
                return ScaleDegree(i + 1, self.size), Accidental(delta)
        return None

    def get_scale_degree(self, target: Pitch | Note) -> ScaleDegree | None:
        """Degree of the target if it is an unaltered scale member."""
        found = self.get_scale_degree_and_accidental(target)
        if found is None or not found[1].is_natural:
            return None
        return found[0]

    def next_in_scale_after(self, target: Pitch | Note) -> Pitch | Note:
        """
        Lowest scale member sounding strictly above the target.

        For a Note target the search wraps into higher octaves. For a Pitch
        target it wraps around the pitch-class circle.
        """
        if isinstance(target, Note):
            pos = target.semitones()
            candidates = []
            for member in self._anchored(target.octave):
                shift = (pos - member.semitones()) // 12 + 1
                candidates.append(Note(member.pitch, member.octave + shift))
            return min(candidates, key=enharmonic_key)

        pitch_class = int(target.pitch_class())
        return min(
            self.pitches(),
            key=lambda p: ((int(p.pitch_class()) - pitch_class - 1) % 12, *enharmonic_key(p)),
        )

    def __iter__(self) -> Iterator[Pitch | Note]:
        return iter(self.build_from())

    def __str__(self) -> str:
        return f"{self.root} {self.scale.name}"


# Define scale patterns using interval shorthand
_TONE = Interval.MAJOR_SECOND
_SEMI = Interval.MINOR_SECOND
_A2 = Interval.AUGMENTED_SECOND
_A1 = Interval.AUGMENTED_UNISON

DIATONIC = ScaleFamily(
    "diatonic",
    (_TONE, _TONE, _SEMI, _TONE, _TONE, _TONE, _SEMI),
    modes=("ionian", "dorian", "phrygian", "lydian", "mixolydian", "aeolian", "locrian"),
    aliases=(("major", 1), ("natural_minor", 6), ("minor", 6)),
    description="The seven church modes",
)

FixedScale.MAJOR = FixedScale("major", 7, (_TONE, _TONE, _SEMI, _TONE, _TONE, _TONE, _SEMI))
FixedScale.NATURAL_MINOR = FixedScale(
    "natural minor", 7, (_TONE, _SEMI, _TONE, _TONE, _SEMI, _TONE, _TONE)
)
FixedScale.HARMONIC_MINOR = FixedScale(
    "harmonic minor", 7, (_TONE, _SEMI, _TONE, _TONE, _SEMI, _A2, _SEMI)
)
FixedScale.MELODIC_MINOR = FixedScale(
    "melodic minor", 7, (_TONE, _SEMI, _TONE, _TONE, _TONE, _TONE, _SEMI)
)
FixedScale.CHROMATIC = FixedScale(
    "chromatic", 12, (_A1, _SEMI, _A1, _SEMI, _SEMI, _A1, _SEMI, _A1, _SEMI, _A1, _SEMI, _SEMI)
)

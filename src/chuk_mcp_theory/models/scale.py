"""
Scale library models - YAML-backed scale family definitions.

A definition names a base interval pattern and, optionally, its modes.
Validation happens here so a loaded definition always converts cleanly
to a core ScaleFamily.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.scale import ScaleFamily


def _normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class ScaleDefinition(BaseModel):
    """
    A scale family as written in a library file.

    Example YAML:
        name: pentatonic
        steps: [M2, M2, m3, M2, m3]
        modes: [major, suspended, blues_minor, blues_major, minor]
        aliases: {ryo: 1, minyo: 3}
    """

    schema_version: str = Field("scale/v1", alias="schema")
    name: str = Field(..., description="Family name")
    description: str = Field("", description="What the scale is")
    steps: list[str] = Field(..., min_length=1, description="Interval shorthand per degree")
    modes: list[str] = Field(default_factory=list, description="Mode names in rotation order")
    aliases: dict[str, int] = Field(
        default_factory=dict,
        description="Extra names mapped to mode numbers",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure scale name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").replace(" ", "").isalnum():
            raise ValueError(f"Invalid scale name: {v}")
        return _normalize(v)

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v: list[str]) -> list[str]:
        """Every step must parse as an interval."""
        for step in v:
            Interval.parse(step)
        return v

    @field_validator("modes")
    @classmethod
    def validate_modes(cls, v: list[str]) -> list[str]:
        return [_normalize(mode) for mode in v]

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, v: dict[str, int]) -> dict[str, int]:
        return {_normalize(alias): mode for alias, mode in v.items()}

    @model_validator(mode="after")
    def validate_closure(self) -> ScaleDefinition:
        """Steps must close on one octave; modes and aliases must fit the size."""
        total = sum(Interval.parse(step).semitones() for step in self.steps)
        if total != 12:
            raise ValueError(f"Scale '{self.name}' steps sum to {total} semitones, not 12")
        if len(self.modes) > len(self.steps):
            raise ValueError(f"Scale '{self.name}' names more modes than degrees")
        for alias, mode in self.aliases.items():
            if not 1 <= mode <= len(self.steps):
                raise ValueError(f"Alias '{alias}' points at mode {mode}, out of range")
        return self

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return tuple(Interval.parse(step) for step in self.steps)

    def to_family(self) -> ScaleFamily:
        """Convert to the core type."""
        return ScaleFamily(
            name=self.name,
            steps=self.intervals,
            modes=tuple(self.modes),
            aliases=tuple(self.aliases.items()),
            description=self.description,
        )

    @classmethod
    def from_family(cls, family: ScaleFamily) -> ScaleDefinition:
        return cls(
            name=family.name,
            description=family.description,
            steps=[str(step) for step in family.steps],
            modes=list(family.modes),
            aliases=dict(family.aliases),
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "steps": list(self.steps),
        }
        if self.modes:
            data["modes"] = list(self.modes)
        if self.aliases:
            data["aliases"] = dict(self.aliases)
        return data


class ScaleMetadata(BaseModel):
    """Lightweight metadata for listing scales."""

    name: str
    description: str
    size: int
    modes: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_family(cls, family: ScaleFamily) -> ScaleMetadata:
        """Create metadata from a family."""
        return cls(
            name=family.name,
            description=family.description,
            size=family.size,
            modes=list(family.modes),
        )

"""
Pydantic models for the theory system.

This module provides:
- ScaleDefinition: Scale family as stored in the YAML library
- ScaleMetadata: Lightweight listing entry
- NoteInfo, IntervalInfo, KeySignature, ScaleInfo: Tool response views
"""

from chuk_mcp_theory.models.scale import ScaleDefinition, ScaleMetadata
from chuk_mcp_theory.models.theory import IntervalInfo, KeySignature, NoteInfo, ScaleInfo

__all__ = [
    "IntervalInfo",
    "KeySignature",
    "NoteInfo",
    "ScaleDefinition",
    "ScaleInfo",
    "ScaleMetadata",
]

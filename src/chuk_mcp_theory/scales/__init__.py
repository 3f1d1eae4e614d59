"""
Scale library - named scale families beyond the diatonic modes.

Families are YAML files: a step pattern plus optional mode names.
Project files override the shipped library.
"""

from chuk_mcp_theory.scales.loader import ScaleLoader

__all__ = [
    "ScaleLoader",
]

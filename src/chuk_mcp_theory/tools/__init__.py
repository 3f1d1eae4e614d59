"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Transposition, distance, re-spelling, MIDI and frequency
- interval - Interval description and composition
- key - Key signatures and relative keys
- scale - Scale building, degrees, export and definition
"""

from chuk_mcp_theory.tools.interval import register_interval_tools
from chuk_mcp_theory.tools.key import register_key_tools
from chuk_mcp_theory.tools.pitch import register_pitch_tools
from chuk_mcp_theory.tools.scale import register_scale_tools

__all__ = [
    "register_interval_tools",
    "register_key_tools",
    "register_pitch_tools",
    "register_scale_tools",
]

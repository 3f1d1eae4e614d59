#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools for spelled music theory: pitches that
know whether they are F# or Gb, intervals that know a diminished fifth
from an augmented fourth, key signatures and scales of every mode.

The server provides tools for:
- Transposing and measuring pitches and notes with exact spelling
- Converting notes to and from MIDI numbers and frequencies
- Describing and composing intervals
- Reading key signatures and finding relative keys
- Building scales from a library of families and modes
- Exporting scales to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.scales import ScaleLoader
from chuk_mcp_theory.tools import (
    register_interval_tools,
    register_key_tools,
    register_pitch_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SCALES_DIR = BASE_PATH / "scales"
OUTPUT_DIR = BASE_PATH / "output"
SCALES_LIBRARY_PATH = Path(__file__).parent / "scales" / "library"

scale_loader = ScaleLoader(
    library_path=SCALES_LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
pitch_tools = register_pitch_tools(mcp)
interval_tools = register_interval_tools(mcp)
key_tools = register_key_tools(mcp)
scale_tools = register_scale_tools(mcp, scale_loader, OUTPUT_DIR)

# Export tool functions for direct access
theory_transpose = pitch_tools["theory_transpose"]
theory_distance = pitch_tools["theory_distance"]
theory_respell = pitch_tools["theory_respell"]
theory_note_info = pitch_tools["theory_note_info"]
theory_note_from_midi = pitch_tools["theory_note_from_midi"]
theory_note_from_frequency = pitch_tools["theory_note_from_frequency"]

theory_describe_interval = interval_tools["theory_describe_interval"]
theory_add_intervals = interval_tools["theory_add_intervals"]

theory_key_signature = key_tools["theory_key_signature"]
theory_key_from_sharps = key_tools["theory_key_from_sharps"]
theory_key_from_tonic = key_tools["theory_key_from_tonic"]
theory_relative_key = key_tools["theory_relative_key"]

theory_list_scales = scale_tools["theory_list_scales"]
theory_build_scale = scale_tools["theory_build_scale"]
theory_scale_degree = scale_tools["theory_scale_degree"]
theory_next_in_scale = scale_tools["theory_next_in_scale"]
theory_export_scale_midi = scale_tools["theory_export_scale_midi"]
theory_define_scale = scale_tools["theory_define_scale"]
theory_copy_scale = scale_tools["theory_copy_scale"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Scale library: {SCALES_LIBRARY_PATH}")
logger.info(f"  Project scales dir: {SCALES_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")

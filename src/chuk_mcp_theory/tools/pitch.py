"""
Pitch tools - MCP tools for pitches and notes.

Tools for transposing, measuring, re-spelling and converting
spelled pitches and notes.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages, RespellMode
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.models.theory import IntervalInfo, NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_spelled(text: str) -> Pitch | Note:
    """Parse 'C#4' as a Note and 'C#' as a Pitch."""
    text = text.strip()
    if text and text[-1].isdigit():
        return Note.parse(text)
    return Pitch.parse(text)


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch and note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(subject: str, interval: str) -> str:
        """
        Transpose a pitch or note by a spelled interval.

        Spelling is exact: C transposed by an augmented fourth is F#,
        by a diminished fifth it is Gb.

        Args:
            subject: Pitch ('F#') or note with octave ('F#3')
            interval: Interval shorthand ('M3', 'd5', 'P-8')

        Returns:
            JSON string with the transposed pitch or note

        Example:
            theory_transpose(subject="C4", interval="M7")
        """
        try:
            start = parse_spelled(subject)
            step = Interval.parse(interval)
            result = start.transpose(step)
            return json.dumps(
                {
                    "status": "success",
                    "subject": str(start),
                    "interval": str(step),
                    "result": str(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose"] = theory_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def theory_distance(start: str, end: str) -> str:
        """
        Measure the spelled interval between two pitches or two notes.

        For pitches the interval is always ascending; for notes it is
        descending when the end note is lower.

        Args:
            start: Starting pitch or note
            end: Target pitch or note (same kind as start)

        Returns:
            JSON string with the interval and its derived quantities

        Example:
            theory_distance(start="E4", end="C5")
        """
        try:
            a = parse_spelled(start)
            b = parse_spelled(end)
            if type(a) is not type(b):
                return json.dumps(
                    {
                        "status": "error",
                        "message": "Compare two pitches or two notes, not one of each",
                    }
                )
            interval = a.distance_to(b)  # type: ignore[arg-type]
            return json.dumps(
                {
                    "status": "success",
                    "start": str(a),
                    "end": str(b),
                    "interval": IntervalInfo.from_interval(interval).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to measure distance")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_distance"] = theory_distance

    @mcp.tool  # type: ignore[arg-type]
    async def theory_respell(subject: str, spelling: str = "simplified") -> str:
        """
        Re-spell a pitch or note enharmonically.

        Args:
            subject: Pitch or note to re-spell
            spelling: 'sharps', 'flats', 'simplified' or 'enharmonic'

        Returns:
            JSON string with the new spelling

        Example:
            theory_respell(subject="Fbb", spelling="simplified")
        """
        try:
            value = parse_spelled(subject)
            mode = RespellMode(spelling)
            if mode is RespellMode.SHARPS:
                result = value.bias(True)
            elif mode is RespellMode.FLATS:
                result = value.bias(False)
            elif mode is RespellMode.SIMPLIFIED:
                result = value.simplified()
            else:
                result = value.enharmonic()
            return json.dumps(
                {
                    "status": "success",
                    "subject": str(value),
                    "spelling": mode.value,
                    "result": str(result),
                    "enharmonic_equal": value.eq_enharmonic(result),  # type: ignore[arg-type]
                }
            )
        except Exception as e:
            logger.exception("Failed to respell")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_respell"] = theory_respell

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_info(note: str) -> str:
        """
        Describe a note: pitch class, MIDI number and frequency.

        Args:
            note: Note with octave ('A4', 'Cb-1')

        Returns:
            JSON string with the note's derived values

        Example:
            theory_note_info(note="A4")
        """
        try:
            parsed = Note.parse(note)
        except ValueError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
            )
        return json.dumps({"status": "success", "note": NoteInfo.from_note(parsed).model_dump()})

    tools["theory_note_info"] = theory_note_info

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_from_midi(midi: int) -> str:
        """
        Spell a MIDI note number (sharps are used for black keys).

        Args:
            midi: MIDI note number (0-127)

        Returns:
            JSON string with the note

        Example:
            theory_note_from_midi(midi=61)
        """
        note = Note.from_midi(midi)
        if note is None:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.NO_MIDI.format(note=midi)}
            )
        return json.dumps({"status": "success", "note": NoteInfo.from_note(note).model_dump()})

    tools["theory_note_from_midi"] = theory_note_from_midi

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_from_frequency(hz: float) -> str:
        """
        Find the nearest equal-tempered note to a frequency (A4 = 440 Hz).

        Args:
            hz: Frequency in Hz

        Returns:
            JSON string with the nearest note and the cents deviation

        Example:
            theory_note_from_frequency(hz=261.63)
        """
        note = Note.from_frequency(hz)
        if note is None:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.NO_NOTE_FOR_FREQUENCY.format(hz=hz)}
            )
        cents = 1200 * math.log2(hz / note.frequency())
        return json.dumps(
            {
                "status": "success",
                "note": NoteInfo.from_note(note).model_dump(),
                "cents": round(cents, 2),
            }
        )

    tools["theory_note_from_frequency"] = theory_note_from_frequency

    return tools

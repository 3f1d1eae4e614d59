"""
Interval tools - MCP tools for spelled intervals.
"""

from __future__ import annotations

import json
import logging
from functools import reduce
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.models.theory import IntervalInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_interval(interval: str) -> str:
        """
        Describe an interval: semitones, steps, inversion, simple form, stability.

        Args:
            interval: Interval shorthand ('M3', 'A4', 'dd-9')

        Returns:
            JSON string with the interval's derived quantities

        Example:
            theory_describe_interval(interval="M10")
        """
        try:
            parsed = Interval.parse(interval)
        except ValueError:
            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.INVALID_INTERVAL.format(interval=interval),
                }
            )
        return json.dumps(
            {"status": "success", "interval": IntervalInfo.from_interval(parsed).model_dump()}
        )

    tools["theory_describe_interval"] = theory_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def theory_add_intervals(intervals: list[str]) -> str:
        """
        Compose intervals, as if transposing by each in turn.

        Descending intervals subtract: ['P8', 'M-3'] gives a minor sixth.

        Args:
            intervals: Interval shorthands to add, in order

        Returns:
            JSON string with the combined interval

        Example:
            theory_add_intervals(intervals=["M3", "m3"])
        """
        try:
            parsed = [Interval.parse(i) for i in intervals]
            total = reduce(lambda a, b: a + b, parsed, Interval.PERFECT_UNISON)
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [str(i) for i in parsed],
                    "result": IntervalInfo.from_interval(total).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_add_intervals"] = theory_add_intervals

    return tools

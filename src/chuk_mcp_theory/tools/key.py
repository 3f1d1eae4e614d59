"""
Key tools - MCP tools for keys and key signatures.

Tools for reading signatures, finding keys from signatures and
moving between relative modes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.key import DiatonicMode, Key
from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.models.theory import KeySignature

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_key_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register key tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_key_signature(key: str) -> str:
        """
        Get a key's signature: sharps/flats count, altered pitches, scale.

        Args:
            key: Key name like 'E_major', 'F#_dorian' or 'Bb minor'

        Returns:
            JSON string with the key signature

        Example:
            theory_key_signature(key="E_major")
        """
        try:
            parsed = Key.parse(key)
        except ValueError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_KEY.format(key=key)}
            )
        return json.dumps(
            {"status": "success", "signature": KeySignature.from_key(parsed).model_dump()}
        )

    tools["theory_key_signature"] = theory_key_signature

    @mcp.tool  # type: ignore[arg-type]
    async def theory_key_from_sharps(sharps: int, mode: str = "major") -> str:
        """
        Find the key with a given signature in a given mode.

        Args:
            sharps: Number of sharps (negative for flats)
            mode: Diatonic mode name ('major', 'minor', 'dorian', ...)

        Returns:
            JSON string with the key signature

        Example:
            theory_key_from_sharps(sharps=-3, mode="minor")
        """
        try:
            key = Key.from_sharps(sharps, DiatonicMode.parse(mode))
            return json.dumps(
                {"status": "success", "signature": KeySignature.from_key(key).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to find key from sharps")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_key_from_sharps"] = theory_key_from_sharps

    @mcp.tool  # type: ignore[arg-type]
    async def theory_key_from_tonic(sharps: int, tonic: str) -> str:
        """
        Find the mode in which a tonic carries a given signature.

        Args:
            sharps: Number of sharps (negative for flats)
            tonic: Tonic pitch ('E', 'Bb')

        Returns:
            JSON string with the key signature, or an error if no mode fits

        Example:
            theory_key_from_tonic(sharps=0, tonic="D")
        """
        try:
            pitch = Pitch.parse(tonic)
        except ValueError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=tonic)}
            )
        key = Key.try_from_sharps_tonic(sharps, pitch)
        if key is None:
            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.NO_MODE_FOR_TONIC.format(tonic=pitch, sharps=sharps),
                }
            )
        return json.dumps(
            {"status": "success", "signature": KeySignature.from_key(key).model_dump()}
        )

    tools["theory_key_from_tonic"] = theory_key_from_tonic

    @mcp.tool  # type: ignore[arg-type]
    async def theory_relative_key(key: str, mode: str | None = None) -> str:
        """
        Get the relative key sharing this key's signature.

        Without a mode, major and minor keys swap (E major <-> C# minor);
        other modes have no default relative. With a mode, any target
        mode works.

        Args:
            key: Key name like 'E_major'
            mode: Optional target mode ('dorian', 'minor', ...)

        Returns:
            JSON string with the relative key's signature

        Example:
            theory_relative_key(key="E_major")
        """
        try:
            parsed = Key.parse(key)
            relative = (
                parsed.relative_to(DiatonicMode.parse(mode)) if mode else parsed.relative()
            )
            if relative is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.NO_RELATIVE.format(key=parsed)}
                )
            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed),
                    "signature": KeySignature.from_key(relative).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to find relative key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_relative_key"] = theory_relative_key

    return tools

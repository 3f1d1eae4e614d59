"""
Scale tools - MCP tools for building and querying scales.

Scales are referenced by name through the ScaleLoader ('major',
'pentatonic:minor', 'harmonic_minor:5') or given inline as a
comma-separated interval list ('M2,M2,m2,M2,M2,M2,m2').
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import DEFAULT_OCTAVE, ErrorMessages, SuccessMessages
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.note import Note
from chuk_mcp_theory.core.scale import DynamicScale, RootedScale, Scale
from chuk_mcp_theory.export.midi import scale_to_midi
from chuk_mcp_theory.models.scale import ScaleDefinition
from chuk_mcp_theory.models.theory import ScaleInfo
from chuk_mcp_theory.tools.pitch import parse_spelled

if TYPE_CHECKING:
    from pathlib import Path

    from chuk_mcp_server import ChukMCPServer

    from chuk_mcp_theory.scales.loader import ScaleLoader

logger = logging.getLogger(__name__)


def resolve_scale(loader: ScaleLoader, scale: str) -> Scale | None:
    """Look a scale up by name, or build one from inline intervals."""
    if "," in scale:
        steps = [Interval.parse(step) for step in scale.split(",") if step.strip()]
        return DynamicScale.new(steps)
    return loader.resolve(scale)


def register_scale_tools(
    mcp: ChukMCPServer,
    loader: ScaleLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: Scale loader for named scales
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _rooted(scale: str, root: str) -> RootedScale | str:
        """Resolve and root a scale, or return an error message."""
        resolved = resolve_scale(loader, scale)
        if resolved is None:
            return ErrorMessages.SCALE_NOT_FOUND.format(name=scale)
        return RootedScale(parse_spelled(root), resolved)

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_scales() -> str:
        """
        List available scale families and their modes.

        Any mode name listed can be passed directly as a scale,
        or as 'family:mode'.

        Returns:
            JSON string with list of scales

        Example:
            theory_list_scales()
        """
        try:
            scales = loader.list_scales()
            return json.dumps(
                {
                    "status": "success",
                    "scales": [s.model_dump() for s in scales],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_scales"] = theory_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_scale(
        scale: str,
        root: str,
        start: str | None = None,
        end: str | None = None,
    ) -> str:
        """
        Build a scale from a root.

        Without start/end, returns one octave of members from the root.
        With both, returns every member between the two notes, inclusive.
        Giving only one of them is an error.

        Args:
            scale: Scale name ('dorian', 'pentatonic:minor') or intervals
            root: Root pitch ('D') or note ('D4')
            start: Optional lowest note of the range
            end: Optional highest note of the range

        Returns:
            JSON string with the scale's members

        Example:
            theory_build_scale(scale="major", root="D")
        """
        try:
            rooted = _rooted(scale, root)
            if isinstance(rooted, str):
                return json.dumps({"status": "error", "message": rooted})

            if (start is None) != (end is None):
                given = "start" if start is not None else "end"
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INCOMPLETE_RANGE.format(given=given),
                    }
                )

            if start is not None and end is not None:
                members = [str(n) for n in rooted.build(Note.parse(start), Note.parse(end))]
            else:
                members = [str(m) for m in rooted.build_from()]

            info = ScaleInfo.from_rooted(rooted, members)
            return json.dumps(
                {
                    "status": "success",
                    "scale": info.model_dump(),
                    "message": SuccessMessages.SCALE_BUILT.format(
                        count=len(members), scale=rooted
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_scale"] = theory_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale_degree(scale: str, root: str, target: str) -> str:
        """
        Find which degree of a scale a pitch or note falls on.

        The degree is the one sharing the target's letter; the accidental
        says how far the target departs from the scale's own spelling.

        Args:
            scale: Scale name or intervals
            root: Root pitch or note
            target: Pitch or note to locate

        Returns:
            JSON string with degree, accidental and whether it is in the scale

        Example:
            theory_scale_degree(scale="major", root="C", target="F#")
        """
        try:
            rooted = _rooted(scale, root)
            if isinstance(rooted, str):
                return json.dumps({"status": "error", "message": rooted})

            subject = parse_spelled(target)
            found = rooted.get_scale_degree_and_accidental(subject)
            if found is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.LETTER_NOT_IN_SCALE.format(
                            scale=rooted, target=subject
                        ),
                    }
                )
            degree, accidental = found
            return json.dumps(
                {
                    "status": "success",
                    "target": str(subject),
                    "degree": degree.degree,
                    "accidental": accidental.offset,
                    "in_scale": accidental.is_natural,
                    "scale_member": str(rooted.pitches()[degree.index]),
                }
            )
        except Exception as e:
            logger.exception("Failed to find scale degree")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_scale_degree"] = theory_scale_degree

    @mcp.tool  # type: ignore[arg-type]
    async def theory_next_in_scale(scale: str, root: str, target: str) -> str:
        """
        Find the next scale member strictly above a pitch or note.

        Args:
            scale: Scale name or intervals
            root: Root pitch or note
            target: Pitch or note to step up from

        Returns:
            JSON string with the next member

        Example:
            theory_next_in_scale(scale="major", root="C", target="E4")
        """
        try:
            rooted = _rooted(scale, root)
            if isinstance(rooted, str):
                return json.dumps({"status": "error", "message": rooted})

            subject = parse_spelled(target)
            return json.dumps(
                {
                    "status": "success",
                    "target": str(subject),
                    "next": str(rooted.next_in_scale_after(subject)),
                }
            )
        except Exception as e:
            logger.exception("Failed to find next scale member")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_next_in_scale"] = theory_next_in_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_scale_midi(
        scale: str,
        root: str,
        output_name: str | None = None,
        tempo: int = 120,
    ) -> str:
        """
        Export one ascending octave of a scale as a MIDI file.

        A root without an octave is placed in octave 4.

        Args:
            scale: Scale name or intervals
            root: Root pitch or note
            output_name: Optional output filename (without .mid extension)
            tempo: Tempo in BPM

        Returns:
            JSON string with the file path

        Example:
            theory_export_scale_midi(scale="dorian", root="D4")
        """
        try:
            rooted = _rooted(scale, root)
            if isinstance(rooted, str):
                return json.dumps({"status": "error", "message": rooted})
            if not isinstance(rooted.root, Note):
                rooted = RootedScale(Note(rooted.root, DEFAULT_OCTAVE), rooted.scale)

            midi_file = scale_to_midi(rooted, tempo_bpm=tempo)

            default_name = f"{rooted.root}_{rooted.scale.name}".replace(" ", "_").replace("#", "s")
            filename = f"{output_name or default_name}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            midi_file.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "message": SuccessMessages.SCALE_EXPORTED.format(
                        scale=rooted, path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_scale_midi"] = theory_export_scale_midi

    @mcp.tool  # type: ignore[arg-type]
    async def theory_define_scale(
        name: str,
        steps: list[str],
        modes: list[str] | None = None,
        description: str = "",
    ) -> str:
        """
        Save a new scale family to the project scales directory.

        Args:
            name: Family name
            steps: Interval shorthand per degree, summing to one octave
            modes: Optional mode names in rotation order
            description: What the scale is

        Returns:
            JSON string with the saved file path

        Example:
            theory_define_scale(name="my_scale", steps=["M2", "m3", "M2", "M2", "m3"])
        """
        try:
            definition = ScaleDefinition(
                name=name,
                steps=steps,
                modes=modes or [],
                description=description,
            )
            path = loader.save_to_project(definition)
            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "scale": definition.to_yaml_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to define scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_define_scale"] = theory_define_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_copy_scale(name: str) -> str:
        """
        Copy a scale family into the project scales directory for editing.

        The project copy overrides the library version from then on.

        Args:
            name: Scale family name

        Returns:
            JSON string with path to the copied scale

        Example:
            theory_copy_scale(name="hirajoshi")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_COPIED.format(name=name),
                    "path": str(path),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_copy_scale"] = theory_copy_scale

    return tools

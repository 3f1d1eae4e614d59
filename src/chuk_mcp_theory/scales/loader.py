"""
Scale loader - discovers and loads scale family definitions.

Scales can come from:
1. Built-in families defined in code (diatonic, chromatic)
2. Built-in library (YAML shipped with package)
3. Project scales (user's project/scales directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_theory.constants import MODE_SEPARATOR
from chuk_mcp_theory.core.scale import (
    DIATONIC,
    FixedScale,
    ModalScale,
    Scale,
    ScaleFamily,
)
from chuk_mcp_theory.models.scale import ScaleDefinition, ScaleMetadata

logger = logging.getLogger(__name__)

_BUILTIN_FAMILIES: dict[str, ScaleFamily] = {DIATONIC.name: DIATONIC}
_BUILTIN_FIXED: dict[str, FixedScale] = {
    "chromatic": FixedScale.CHROMATIC,
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class ScaleLoader:
    """
    Discovers and loads scale definitions.

    Scales are loaded from YAML files in the library and project directories.
    Project scales override library scales with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the scale loader.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScaleFamily] = {}

    def list_scales(self) -> list[ScaleMetadata]:
        """
        List all available scale families.

        Returns built-in, library and project families, with project
        families taking precedence.
        """
        return [ScaleMetadata.from_family(family) for family in self._all_families().values()]

    def get_family(self, name: str) -> ScaleFamily | None:
        """
        Get a scale family by name.

        Project scales take precedence over library scales, which take
        precedence over built-in ones.

        Args:
            name: Family name

        Returns:
            ScaleFamily if found, None otherwise
        """
        name = _normalize(name)

        # Check cache
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None or not directory.exists():
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                definition = self._load_scale_file(path)
                if definition:
                    family = definition.to_family()
                    self._cache[name] = family
                    logger.debug(f"Loaded scale family '{name}' from {path}")
                    return family

        return _BUILTIN_FAMILIES.get(name)

    def resolve(self, name: str) -> Scale | None:
        """
        Resolve a scale reference to a usable scale.

        Accepts:
            'pentatonic' - a family (its first mode)
            'pentatonic:minor' or 'pentatonic:5' - a family mode
            'dorian', 'ryo' - a mode or alias name from any family
            'chromatic' - a built-in fixed scale

        Returns:
            The scale, or None if nothing matches
        """
        if MODE_SEPARATOR in name:
            family_name, mode = name.split(MODE_SEPARATOR, 1)
            family = self.get_family(family_name)
            if family is None:
                return None
            mode = mode.strip()
            number = int(mode) if mode.isdigit() else family.mode_number(mode)
            if number is None or not 1 <= number <= family.size:
                return None
            return ModalScale(family, number)

        family = self.get_family(name)
        if family is not None:
            return ModalScale(family)

        fixed = _BUILTIN_FIXED.get(_normalize(name))
        if fixed is not None:
            return fixed

        for family in self._all_families().values():
            number = family.mode_number(name)
            if number is not None:
                return ModalScale(family, number)

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a scale family into the project so it can be edited.

        Library files and the built-in diatonic family can both be copied;
        the copy is written from the validated definition.

        Args:
            name: Scale family name

        Returns:
            Path to the project file, or None if no such family exists

        Raises:
            ValueError: Without a project path, or if the project already has it
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        dest_file = self.project_path / f"{_normalize(name)}.yaml"
        if dest_file.exists():
            raise ValueError(f"Scale already exists in project: {name}")

        family = self.get_family(name)
        if family is None:
            return None
        return self.save_to_project(ScaleDefinition.from_family(family))

    def save_to_project(self, definition: ScaleDefinition) -> Path:
        """
        Write a scale definition into the project directory.

        Overwrites an existing project file of the same name.
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{definition.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(definition.to_yaml_dict(), f, sort_keys=False)

        self._cache.pop(definition.name, None)
        logger.info(f"Saved scale '{definition.name}' to {path}")
        return path

    def _all_families(self) -> dict[str, ScaleFamily]:
        families: dict[str, ScaleFamily] = dict(_BUILTIN_FAMILIES)

        # Library first, then project (override library)
        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_scale_file(path)
                if definition:
                    families[definition.name] = definition.to_family()

        return families

    def _load_scale_file(self, path: Path) -> ScaleDefinition | None:
        """Load a scale definition from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return ScaleDefinition.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Skipping invalid scale file {path}: {e}")
            return None

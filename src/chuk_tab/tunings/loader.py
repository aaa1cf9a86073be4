"""
Tuning loader - discovers built-in and project tunings.

Tunings can come from:
1. Built-in presets (shipped with package)
2. Project tunings (YAML files in a user directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_tab.constants import ErrorMessages
from chuk_tab.core.pitch import Note
from chuk_tab.models.tuning import TuningPreset
from chuk_tab.tunings.presets import BUILTIN_TUNINGS

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning presets.

    Project tunings are YAML files of the form:

        name: open-d
        description: Open D guitar
        notes: [D4, A3, F#3, D3, A2, D2]

    Project tunings override built-in tunings with the same name.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the tuning loader.

        Args:
            project_path: Directory holding project tuning YAML files
        """
        self.project_path = project_path
        self._cache: dict[str, TuningPreset] = {}

    def list_tunings(self) -> list[TuningPreset]:
        """List all available tunings, project tunings taking precedence."""
        tunings: dict[str, TuningPreset] = dict(BUILTIN_TUNINGS)

        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                tuning = self._load_tuning_file(path)
                if tuning:
                    tunings[tuning.name] = tuning

        return list(tunings.values())

    def get_tuning(self, name: str) -> TuningPreset | None:
        """
        Get a tuning by name.

        Args:
            name: Tuning name

        Returns:
            TuningPreset if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        # Try project first
        if self.project_path:
            project_file = self.project_path / f"{name}.yaml"
            if project_file.exists():
                tuning = self._load_tuning_file(project_file)
                if tuning:
                    self._cache[name] = tuning
                    return tuning

        # Fall back to built-ins
        builtin = BUILTIN_TUNINGS.get(name)
        if builtin:
            self._cache[name] = builtin
        return builtin

    def get_notes(self, name: str) -> tuple[Note, ...]:
        """
        Get the notes of a tuning, string 1 first.

        Raises:
            LookupError: if no tuning has that name
        """
        tuning = self.get_tuning(name)
        if tuning is None:
            raise LookupError(ErrorMessages.TUNING_NOT_FOUND.format(name=name))
        return tuning.to_notes()

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()

    def _load_tuning_file(self, path: Path) -> TuningPreset | None:
        """Load a tuning from a YAML file, skipping files that do not parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_tuning(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning("Skipping tuning file %s: %s", path, e)
            return None

    def _parse_tuning(self, data: dict[str, Any], default_name: str) -> TuningPreset:
        """Parse a tuning from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")

        return TuningPreset(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            notes=tuple(data.get("notes", [])),
        )

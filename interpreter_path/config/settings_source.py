"""YAML settings files for the interpreter path service."""

from pathlib import Path
from typing import Any

import yaml

from interpreter_path.exceptions import SettingsFileError


class YAMLSettingsSource:
    """Load and save a settings layer stored as YAML.

    Settings are a mapping of dotted keys, either flat
    (``python.defaultInterpreterPath: /usr/bin/python3``) or nested
    (``python: {defaultInterpreterPath: ...}``).

    Attributes:
        path: Path to the YAML settings file
    """

    def __init__(self, path: Path, *, must_exist: bool = True) -> None:
        """Initialize the YAML settings source.

        Args:
            path: Path to the YAML settings file
            must_exist: Reject a missing file instead of treating it as empty

        Raises:
            SettingsFileError: If the file is required and missing, or is a directory
        """
        self.path = path
        if path.exists() and not path.is_file():
            raise SettingsFileError(f"Settings path is not a file: {path}", path=path)
        if must_exist and not path.exists():
            raise SettingsFileError(f"Settings file not found: {path}", path=path)

    @property
    def source_description(self) -> str:
        """Human-readable description of the settings source."""
        return f"YAML file: {self.path}"

    def load(self) -> dict[str, Any]:
        """Load and parse the settings file.

        Returns:
            Settings mapping. A missing or empty file yields an empty mapping.

        Raises:
            SettingsFileError: If YAML parsing fails or the root is not a mapping
        """
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML settings: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise SettingsFileError(error_msg, path=self.path) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise SettingsFileError(
                f"Settings must be a YAML mapping, got {type(data).__name__}",
                path=self.path,
            )
        return data

    def save(self, settings: dict[str, Any]) -> None:
        """Write ``settings`` back to the file, creating parent directories.

        Raises:
            SettingsFileError: If the file or its directory cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=True)
        except OSError as e:
            raise SettingsFileError(f"Cannot write settings file {self.path}: {e}", path=self.path) from e

"""Expansion of ``${...}`` variables in setting values."""

import logging
import os
import re
from pathlib import Path
from typing import Any

from interpreter_path.config.protocols import WorkspaceService

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\$\{([^}]+)\}")


class SystemVariables:
    """Resolve workspace, file, environment and configuration variables.

    Supported variables:
    - ``${workspaceFolder}`` / ``${workspaceRoot}``: the resource's folder
    - ``${workspaceFolderBasename}``: name of that folder
    - ``${cwd}``: current working directory
    - ``${file}``, ``${fileBasename}``, ``${fileDirname}``: the active file
    - ``${env:NAME}``: environment variable, empty string when unset
    - ``${config:section.key}``: effective configuration value

    Unknown variables, and variables whose value is unavailable, are left as
    written.
    """

    def __init__(
            self,
            file: Path | None = None,
            root_folder: Path | None = None,
            workspace: WorkspaceService | None = None,
            cwd: Path | None = None,
    ) -> None:
        self._file = file
        self._root_folder = root_folder
        self._workspace = workspace
        self._cwd = cwd or root_folder

        self._values: dict[str, str | None] = {
            "workspaceFolder": str(root_folder) if root_folder else None,
            "workspaceRoot": str(root_folder) if root_folder else None,
            "workspaceFolderBasename": root_folder.name if root_folder else None,
            "cwd": str(self._cwd) if self._cwd else os.getcwd(),
            "file": str(file) if file else None,
            "fileBasename": file.name if file else None,
            "fileDirname": str(file.parent) if file else None,
        }

    def resolve(self, value: str) -> str:
        """Expand every variable in ``value``."""
        return VARIABLE_PATTERN.sub(self._replace, value)

    def resolve_any(self, value: Any) -> Any:
        """Expand variables in strings, lists and mappings; other values pass through."""
        if isinstance(value, str):
            return self.resolve(value)
        if isinstance(value, list):
            return [self.resolve_any(item) for item in value]
        if isinstance(value, dict):
            return {key: self.resolve_any(item) for key, item in value.items()}
        return value

    def _replace(self, match: re.Match[str]) -> str:
        name = match.group(1)
        if name.startswith("env:"):
            return os.environ.get(name[len("env:"):], "")
        if name.startswith("config:"):
            return self._config_value(name[len("config:"):], match.group(0))

        value = self._values.get(name)
        if value is None:
            logger.debug(f"Leaving unresolved variable {match.group(0)}")
            return match.group(0)
        return value

    def _config_value(self, key: str, original: str) -> str:
        if self._workspace is None or "." not in key:
            return original
        section, _, setting = key.rpartition(".")
        value = self._workspace.get_configuration(section, self._root_folder).get(setting)
        if value is None or isinstance(value, (dict, list)):
            return original
        return str(value)

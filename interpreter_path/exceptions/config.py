"""Settings-related exceptions."""

from pathlib import Path

from interpreter_path.exceptions.base import ConfigError


class SettingsFileError(ConfigError):
    """Raised for settings file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - A root value that is not a mapping
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class WorkspaceError(ConfigError):
    """Raised when the workspace layout is invalid.

    For example a folder that does not exist on disk, or a settings update
    aimed at a folder that is not part of the workspace.
    """

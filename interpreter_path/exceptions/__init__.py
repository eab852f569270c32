"""Exception hierarchy for the interpreter path service."""
from interpreter_path.exceptions.base import ConfigError
from interpreter_path.exceptions.config import SettingsFileError, WorkspaceError
from interpreter_path.exceptions.state import StateStoreError

__all__ = [
    "ConfigError",
    "SettingsFileError",
    "WorkspaceError",
    "StateStoreError",
]

"""Persistent state exceptions."""

from pathlib import Path

from interpreter_path.exceptions.base import ConfigError


class StateStoreError(ConfigError):
    """Raised when the persisted key-value store cannot be read or written."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

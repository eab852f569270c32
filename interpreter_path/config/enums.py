"""Configuration enums for the interpreter path service."""

from enum import Enum


class ConfigurationTarget(str, Enum):
    """Scope at which a setting is defined, from lowest to highest precedence."""

    GLOBAL = "global"
    WORKSPACE = "workspace"
    WORKSPACE_FOLDER = "workspaceFolder"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value

    @property
    def is_workspace_scoped(self) -> bool:
        """Return True for scopes persisted in the key-value store."""
        return self is not ConfigurationTarget.GLOBAL

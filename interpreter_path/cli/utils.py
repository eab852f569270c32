"""CLI utility functions for the interpreter path service."""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from interpreter_path.config.workspace import Workspace
from interpreter_path.service import InterpreterPathService
from interpreter_path.state import JsonStateStore, StateFactory

DEFAULT_STATE_FILE = Path("~/.interpreter_path/state.json")


class CLIOptions(BaseModel):
    """Options shared by every command, collected by the app callback."""

    folders: list[Path] = Field(default_factory=list)
    workspace_file: Path | None = None
    user_settings: Path | None = None
    state_file: Path = DEFAULT_STATE_FILE


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _optional_path(path: Path | None) -> Path | None:
    """Sanitize ``path`` when given."""

    return _sanitize_path(path) if path else None


def _build_service(options: CLIOptions) -> InterpreterPathService:
    """Open the workspace described by ``options`` and wire up the service."""

    workspace = Workspace.from_paths(
        [_sanitize_path(folder) for folder in options.folders],
        workspace_file=_optional_path(options.workspace_file),
        user_settings_file=_optional_path(options.user_settings),
    )
    store = JsonStateStore(_sanitize_path(options.state_file))
    return InterpreterPathService(StateFactory(store), workspace)

"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on in-memory stores and fast execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from interpreter_path.config.workspace import SettingsLayer, Workspace
from interpreter_path.events import DisposableRegistry
from interpreter_path.service import InterpreterPathService
from interpreter_path.state import MemoryStateStore, StateFactory


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Workspace Factories
# =============================================================================

@pytest.fixture
def settings_factory():
    """Factory fixture for settings mappings holding an interpreter path.

    Example:
        >>> settings_factory("/usr/bin/python3")
        {'python': {'defaultInterpreterPath': '/usr/bin/python3'}}
    """
    def _create(interpreter: str | None = None, **extra: Any) -> dict[str, Any]:
        data: dict[str, Any] = dict(extra)
        if interpreter is not None:
            data["python"] = {"defaultInterpreterPath": interpreter}
        return data

    return _create


@pytest.fixture
def workspace_factory(settings_factory):
    """Factory fixture for in-memory workspaces.

    Returns:
        Callable building a Workspace with optional interpreter paths per scope.
    """
    def _create(
        folders: list[Path] | tuple[Path, ...] = (),
        *,
        workspace_file: Path | None = None,
        global_value: str | None = None,
        workspace_value: str | None = None,
        folder_values: dict[Path, str] | None = None,
    ) -> Workspace:
        workspace_settings = None
        if workspace_file is not None:
            workspace_settings = SettingsLayer(settings_factory(workspace_value))
        folder_settings = {
            path: SettingsLayer(settings_factory(value)) for path, value in (folder_values or {}).items()
        }
        return Workspace(
            folders,
            workspace_file=workspace_file,
            user_settings=SettingsLayer(settings_factory(global_value)),
            workspace_settings=workspace_settings,
            folder_settings=folder_settings,
        )

    return _create


@pytest.fixture
def memory_store() -> MemoryStateStore:
    """Empty in-memory key-value store."""
    return MemoryStateStore()


@pytest.fixture
def service_factory(memory_store: MemoryStateStore):
    """Factory fixture wiring an InterpreterPathService over a workspace.

    The service persists into the shared ``memory_store`` fixture.
    """
    def _create(workspace: Workspace, **kwargs: Any) -> InterpreterPathService:
        return InterpreterPathService(StateFactory(memory_store), workspace, DisposableRegistry(), **kwargs)

    return _create

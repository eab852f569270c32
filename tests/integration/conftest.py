"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from interpreter_path.cli.app import app


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def user_settings_file(tmp_path: Path) -> Path:
    """User settings file with a global interpreter."""
    path = tmp_path / "user-settings.yaml"
    path.write_text("python:\n  defaultInterpreterPath: /usr/bin/python3\n")
    return path


@pytest.fixture
def workspace_file(tmp_path: Path, project_dir: Path, second_project_dir: Path) -> Path:
    """Multi-root workspace file opening both project folders."""
    path = tmp_path / "team.workspace.yaml"
    path.write_text(
        "folders:\n"
        f"  - path: {project_dir.name}\n"
        f"  - path: {second_project_dir.name}\n"
        "settings: {}\n"
    )
    return path


@pytest.fixture
def cli(runner: CliRunner, state_file: Path, user_settings_file: Path):
    """Invoke the CLI with an isolated state file and user settings.

    Returns:
        Callable taking the workspace options and the command arguments.
    """
    def _invoke(*args: str, workspace: list[str] | None = None):
        options = ["--state-file", str(state_file), "--user-settings", str(user_settings_file)]
        return runner.invoke(app, [*options, *(workspace or []), *args])

    return _invoke

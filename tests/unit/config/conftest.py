"""Config module test fixtures.

Provides fixtures specific to testing settings files, models and the
workspace configuration API.
"""

from __future__ import annotations

from pathlib import Path

import pytest


# =============================================================================
# Settings File Fixtures
# =============================================================================

@pytest.fixture
def write_settings(tmp_path: Path):
    """Factory fixture writing YAML text to a file.

    Returns:
        Callable taking the YAML text and an optional relative file name.
    """
    def _write(content: str, name: str = "settings.yaml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def folder_settings_file(project_dir: Path) -> Path:
    """Create ``.interpreter/settings.yaml`` inside the project folder."""
    settings_path = project_dir / ".interpreter" / "settings.yaml"
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("python:\n  defaultInterpreterPath: ${workspaceFolder}/.venv/bin/python\n")
    return settings_path

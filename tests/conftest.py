"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or cheap to build
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_interpreter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change the default interpreter."""
    monkeypatch.delenv("CI_PYTHON_PATH", raising=False)
    monkeypatch.delenv("INTERPRETER_PATH_TEST", raising=False)


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a workspace folder for a single-folder workspace.

    Returns:
        Path to a clean temporary folder named ``project``.
    """
    folder = tmp_path / "project"
    folder.mkdir(parents=True, exist_ok=True)
    return folder


@pytest.fixture
def second_project_dir(tmp_path: Path) -> Path:
    """Create a second workspace folder for multi-root workspaces.

    Returns:
        Path to a clean temporary folder named ``library``.
    """
    folder = tmp_path / "library"
    folder.mkdir(parents=True, exist_ok=True)
    return folder


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    """Location of a JSON state file that does not exist yet."""
    return tmp_path / "state" / "state.json"


# =============================================================================
# Mock Console Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status"])


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock object implementing OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    handler.print_inspection = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")

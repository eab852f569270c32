"""Platform and environment helpers."""

import os
import sys
from pathlib import Path

from interpreter_path.constants import CI_PYTHON_PATH_ENV, DEFAULT_INTERPRETER, TEST_EXECUTION_ENV


def is_windows() -> bool:
    return sys.platform == "win32"


def norm_case(path: str | Path) -> str:
    """Normalize case for comparisons: upper-cased on Windows, unchanged elsewhere."""
    normalized = os.path.normpath(str(path))
    return normalized.upper() if is_windows() else normalized


def is_test_execution() -> bool:
    """Return True when running under the test harness."""
    return os.environ.get(TEST_EXECUTION_ENV, "").strip().lower() in {"1", "true"}


def get_ci_python_path() -> str:
    """Return the CI interpreter if ``CI_PYTHON_PATH`` names an existing path."""
    ci_path = os.environ.get(CI_PYTHON_PATH_ENV)
    if ci_path and Path(ci_path).exists():
        return ci_path
    return DEFAULT_INTERPRETER

"""Constants for the interpreter path service."""

VERSION = "0.3.0"

# Configuration section and key holding the interpreter path
PYTHON_SECTION = "python"
DEFAULT_INTERPRETER_PATH_SETTING = "defaultInterpreterPath"
DEFAULT_INTERPRETER_PATH_KEY = f"{PYTHON_SECTION}.{DEFAULT_INTERPRETER_PATH_SETTING}"

# Value returned when no scope defines an interpreter
DEFAULT_INTERPRETER = "python"

# Prefixes for keys in the persisted key-value store
WORKSPACE_FOLDER_KEY_PREFIX = "WORKSPACE_FOLDER_INTERPRETER_PATH_"
WORKSPACE_KEY_PREFIX = "WORKSPACE_INTERPRETER_PATH_"

# Environment variables
CI_PYTHON_PATH_ENV = "CI_PYTHON_PATH"
TEST_EXECUTION_ENV = "INTERPRETER_PATH_TEST"

# Per-folder settings file, relative to the folder root
FOLDER_SETTINGS_DIR = ".interpreter"
FOLDER_SETTINGS_NAMES = [
    "settings.yaml",
    "settings.yml",
]

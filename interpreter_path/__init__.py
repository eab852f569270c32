"""Interpreter path resolution across global, workspace and folder scopes."""

from interpreter_path.constants import VERSION

__version__ = VERSION

"""Entry point for the interpreter path CLI.

This module exposes a Typer-powered command-line interface over the
interpreter path service: resolve, inspect and select the interpreter for a
workspace resource across global, workspace and folder scopes.
"""

from interpreter_path.cli.app import app


if __name__ == "__main__":
    app()

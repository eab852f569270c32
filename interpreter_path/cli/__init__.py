"""Command-line interface for the interpreter path service."""

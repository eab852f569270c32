"""Output handling package for the interpreter path CLI."""
from interpreter_path.output.protocols import OutputHandler
from interpreter_path.output.console import ConsoleOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
]

"""Output handler protocols for the interpreter path CLI."""

from typing import Protocol, runtime_checkable

from interpreter_path.config.models import InspectResult


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol for output handling (console, logging, etc.)."""

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message (alias for print)."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def print_inspection(self, result: InspectResult, resolved: str) -> None:
        """Print per-scope values and the resolved interpreter path."""
        ...

"""Console-based output handler for the interpreter path CLI."""

from rich.console import Console
from rich.table import Table

from interpreter_path.config.enums import ConfigurationTarget
from interpreter_path.config.models import InspectResult


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {message}")

    def print_inspection(self, result: InspectResult, resolved: str) -> None:
        """Print a table of scope values, highest precedence first."""
        winner = next(
            (
                target
                for target in (
                    ConfigurationTarget.WORKSPACE_FOLDER,
                    ConfigurationTarget.WORKSPACE,
                    ConfigurationTarget.GLOBAL,
                )
                if result.value_for(target)
            ),
            None,
        )

        table = Table(title="Interpreter path")
        table.add_column("Scope", style="cyan")
        table.add_column("Value")
        for target in (ConfigurationTarget.WORKSPACE_FOLDER, ConfigurationTarget.WORKSPACE, ConfigurationTarget.GLOBAL):
            value = result.value_for(target)
            marker = " [green](active)[/green]" if target is winner else ""
            table.add_row(target.value, f"{value}{marker}" if value else "[dim]-[/dim]")
        table.add_row("resolved", f"[bold]{resolved}[/bold]")
        self.console.print(table)

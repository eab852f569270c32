"""CLI command implementations for the interpreter path service."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from interpreter_path.constants import VERSION
from interpreter_path.config.enums import ConfigurationTarget
from interpreter_path.exceptions import ConfigError
from interpreter_path.output import ConsoleOutputHandler
from interpreter_path.service import get_settings_uri_and_target
from interpreter_path.cli.utils import CLIOptions, DEFAULT_STATE_FILE, _build_service, _sanitize_path

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Interpreter Path v{VERSION}")
        raise typer.Exit()


def main(
        ctx: typer.Context,
        folder: list[Path] | None = typer.Option(
            None, "--folder", "-f",
            file_okay=False, dir_okay=True,
            help="Workspace folder (repeat for a multi-root workspace)",
        ),
        workspace_file: Path | None = typer.Option(
            None, "--workspace-file", "-w", dir_okay=False,
            help="Multi-root workspace file (YAML with 'folders' and 'settings')",
        ),
        user_settings: Path | None = typer.Option(
            None, "--user-settings", "-u", dir_okay=False,
            help="YAML file holding global (user) settings",
        ),
        state_file: Path = typer.Option(
            DEFAULT_STATE_FILE, "--state-file", dir_okay=False,
            help="JSON file persisting workspace interpreter selections",
        ),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Resolve and select interpreter paths for a workspace."""

    # Configure logging level based on verbose flag
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)

    ctx.obj = CLIOptions(
        folders=list(folder or []),
        workspace_file=workspace_file,
        user_settings=user_settings,
        state_file=state_file,
    )


def _resource(resource: Path | None) -> Path | None:
    return _sanitize_path(resource) if resource else None


def get(
        ctx: typer.Context,
        resource: Path | None = typer.Argument(None, help="File or folder inside the workspace"),
) -> None:
    """Print the interpreter path that applies to RESOURCE."""

    output = ConsoleOutputHandler(Console())
    try:
        service = _build_service(ctx.obj)
        typer.echo(service.get(_resource(resource)))
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(code=1)


def inspect_path(
        ctx: typer.Context,
        resource: Path | None = typer.Argument(None, help="File or folder inside the workspace"),
) -> None:
    """Show the interpreter path at every scope."""

    output = ConsoleOutputHandler(Console())
    try:
        service = _build_service(ctx.obj)
        target = _resource(resource)
        output.print_inspection(service.inspect(target), service.get(target))
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(code=1)


def _update(ctx: typer.Context, resource: Path | None, scope: ConfigurationTarget, value: str | None) -> None:
    output = ConsoleOutputHandler(Console())
    options: CLIOptions = ctx.obj
    try:
        service = _build_service(options)
        target = _resource(resource)
        if scope is ConfigurationTarget.GLOBAL and options.user_settings is None:
            output.warning("No --user-settings file given; the global value will not be saved")

        service.update(target, scope, value)

        if scope.is_workspace_scoped and not service.workspace_service.workspace_folders:
            output.error("Cannot update workspace settings as no workspace is opened")
            raise typer.Exit(code=1)
        output.info(f"[green]{scope.value}[/green] interpreter: {service.get(target)}")
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(code=1)


def set_path(
        ctx: typer.Context,
        value: str = typer.Argument(..., help="Interpreter path (may contain ${workspaceFolder} etc.)"),
        resource: Path | None = typer.Argument(None, help="File or folder inside the workspace"),
        scope: ConfigurationTarget = typer.Option(
            ConfigurationTarget.WORKSPACE_FOLDER, "--scope", "-s", help="Scope to write"
        ),
) -> None:
    """Select the interpreter path at a scope."""

    _update(ctx, resource, scope, value)


def unset_path(
        ctx: typer.Context,
        resource: Path | None = typer.Argument(None, help="File or folder inside the workspace"),
        scope: ConfigurationTarget = typer.Option(
            ConfigurationTarget.WORKSPACE_FOLDER, "--scope", "-s", help="Scope to clear"
        ),
) -> None:
    """Clear the interpreter path at a scope."""

    _update(ctx, resource, scope, None)


def key(
        ctx: typer.Context,
        resource: Path | None = typer.Argument(None, help="File or folder inside the workspace"),
        scope: ConfigurationTarget = typer.Option(
            ConfigurationTarget.WORKSPACE_FOLDER, "--scope", "-s", help="Workspace or folder scope"
        ),
) -> None:
    """Print the key-value store key used for RESOURCE at a scope."""

    output = ConsoleOutputHandler(Console())
    if scope is ConfigurationTarget.GLOBAL:
        output.error("Global interpreter paths are stored in user settings, not the key-value store")
        raise typer.Exit(code=1)
    try:
        service = _build_service(ctx.obj)
        folder_uri, _ = get_settings_uri_and_target(_resource(resource), service.workspace_service)
        if folder_uri is None:
            output.error("No workspace is opened")
            raise typer.Exit(code=1)
        typer.echo(service.get_setting_key(folder_uri, scope))
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

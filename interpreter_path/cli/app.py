"""CLI application definition for the interpreter path service."""

import typer

from interpreter_path.cli.commands import main, get, inspect_path, set_path, unset_path, key

app = typer.Typer(
    add_completion=False,
    help="Resolve which interpreter applies across global, workspace and folder scopes.",
    no_args_is_help=True,
)

# Register shared options and commands
app.callback()(main)
app.command(name="get", help="Print the resolved interpreter path")(get)
app.command(name="inspect", help="Show the interpreter path at every scope")(inspect_path)
app.command(name="set", help="Select an interpreter path at a scope")(set_path)
app.command(name="unset", help="Clear the interpreter path at a scope")(unset_path)
app.command(name="key", help="Print the persisted-state key for a scope")(key)

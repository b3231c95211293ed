"""CLI entry point for difftour.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from difftour.cli.config import config_app
from difftour.cli.hunks import hunks_command
from difftour.cli.main import main_command
from difftour.cli.prompt import prompt_command
from difftour.cli.resolve import resolve_command

# Main application
app = typer.Typer(
    name="difftour",
    help="difftour: split a diff into hunks and assemble guided review tours",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("hunks")(hunks_command)
app.command("prompt")(prompt_command)
app.command("resolve")(resolve_command)

app.callback()(main_command)


__all__ = [
    "app",
    "config_app",
    "hunks_command",
    "prompt_command",
    "resolve_command",
    "main_command",
]

"""Top-level callback for the difftour CLI."""

from typing import Optional

import typer

from difftour import __version__
from difftour.cli.utils import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"difftour {__version__}")
        raise typer.Exit(0)


def main_command(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the difftour version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Print debug logging (skipped files, dropped hunk ids) to stderr",
    ),
) -> None:
    """difftour: split a diff into hunks and assemble guided review tours."""
    configure_logging(debug)

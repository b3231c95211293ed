"""CLI command for listing the hunks of a diff."""

from pathlib import Path
from typing import Optional

import typer

from difftour.tour import format_hunks_for_llm, parse_diff
from difftour.cli.utils import hunks_to_json, read_text_input


def hunks_command(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="Diff file to read (default: stdin)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print hunks as JSON instead of the numbered inventory",
    ),
) -> None:
    """Parse a unified diff and list its hunks."""
    hunks = parse_diff(read_text_input(diff_file))

    if as_json:
        typer.echo(hunks_to_json(hunks))
        return

    if not hunks:
        typer.echo("No hunks found.", err=True)
        return

    typer.echo(format_hunks_for_llm(hunks))
    files = {hunk.file for hunk in hunks}
    typer.echo(f"\n{len(hunks)} hunk(s) in {len(files)} file(s)", err=True)

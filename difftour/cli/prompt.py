"""CLI command for printing the tour prompt of a diff."""

from pathlib import Path
from typing import Optional

import typer

from difftour import global_config
from difftour.tour import DiffTooLargeError, TOUR_SYSTEM_PROMPT, build_tour_prompt, parse_diff
from difftour.cli.utils import read_text_input


def prompt_command(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="Diff file to read (default: stdin)",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Exact title the tour should use",
    ),
    system: bool = typer.Option(
        False,
        "--system",
        help="Also print the system prompt",
    ),
) -> None:
    """Print the prompt that asks a model to group the hunks of a diff."""
    hunks = parse_diff(read_text_input(diff_file))
    if not hunks:
        typer.echo("Error: No hunks found in the diff.", err=True)
        raise typer.Exit(1)

    try:
        max_chars = global_config.get_max_diff_chars()
        prompt = build_tour_prompt(hunks, title=title, max_chars=max_chars)
    except (DiffTooLargeError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if system:
        typer.echo(TOUR_SYSTEM_PROMPT)
        typer.echo()
    typer.echo(prompt)

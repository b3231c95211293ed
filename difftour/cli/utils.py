"""Shared utility functions for CLI commands."""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer

from difftour.tour import Hunk


def configure_logging(debug: bool) -> None:
    """Send debug logging to stderr when --debug is given."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def read_text_input(path: Optional[Path]) -> str:
    """Read text from a file, or from stdin when no path (or "-") is given.

    Args:
        path: File to read, or None for stdin.

    Returns:
        The text content.
    """
    if path is None or str(path) == "-":
        return sys.stdin.read()

    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Cannot read {path}: {e}", err=True)
        raise typer.Exit(1)


def hunks_to_json(hunks: list[Hunk]) -> str:
    """Serialise hunks as an indented JSON list, each tagged with its index."""
    return json.dumps(
        [{"id": index, **asdict(hunk)} for index, hunk in enumerate(hunks)],
        indent=2,
    )

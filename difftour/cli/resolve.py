"""CLI command for resolving a model response against a diff."""

from pathlib import Path

import typer

from difftour.llm import JSONParseError, parse_json_response, validate_tour_plan_json
from difftour.tour import SchemaViolationError, parse_diff, resolve_plan
from difftour.cli.utils import read_text_input


def resolve_command(
    diff_file: Path = typer.Argument(
        ...,
        help="Diff file the response refers to",
    ),
    response_file: Path = typer.Argument(
        ...,
        help="File holding the raw model response (use - for stdin)",
    ),
) -> None:
    """Map the hunk ids of a model response back onto the hunks of a diff.

    Prints the resolved tour plan as JSON.
    """
    hunks = parse_diff(read_text_input(diff_file))
    raw_response = read_text_input(response_file)

    try:
        plan_ref = validate_tour_plan_json(parse_json_response(raw_response))
        plan = resolve_plan(hunks, plan_ref)
    except JSONParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except SchemaViolationError as e:
        typer.echo("Error: Response does not match the tour plan schema.", err=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo(plan.model_dump_json(by_alias=True, indent=2))

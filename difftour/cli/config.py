"""CLI commands for global configuration management."""

import typer

from difftour import global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global difftour configuration in ~/.difftour/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo("No configuration found; using defaults.")
        else:
            typer.echo("Current difftour configuration (~/.difftour/config.yaml):")
        typer.echo()
        typer.echo(f"  Max Diff Chars: {global_config.get_max_diff_chars()}")
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-max-diff-chars")
def config_set_max_diff_chars(
    max_chars: int = typer.Argument(..., help="Maximum size of the hunk inventory"),
) -> None:
    """Set the maximum size of the hunk inventory sent to a model."""
    try:
        global_config.set_max_diff_chars(max_chars)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Max diff chars set to {max_chars}")

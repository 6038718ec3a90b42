"""Config commands.

Create the default config file, show the configured profiles, and
print where the config file lives.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from artifact_cleaner.cli.types import get_config_path
from artifact_cleaner.config.loader import (
    ConfigError,
    create_default_config,
    load_config_or_default,
    resolve_profile,
)
from artifact_cleaner.core.paths import get_config_path as get_default_config_path
from artifact_cleaner.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Manage the artifact-cleaner config file.",
    no_args_is_help=True,
)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the default config file."""
    path = get_config_path(ctx)
    try:
        written = create_default_config(path, overwrite=force)
    except ConfigError as e:
        print_error(str(e))
        if not force:
            console.print("[dim]Use --force to overwrite it.[/dim]")
        raise typer.Exit(code=1) from e

    print_success(f"Created default config at {written}")


@app.command()
def show(ctx: typer.Context) -> None:
    """Show every profile with its merged name sets."""
    try:
        config = load_config_or_default(get_config_path(ctx))
        resolved = [resolve_profile(config, name) for name in config.profile_names]
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Profiles",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Profile", style="bold")
    table.add_column("Artifact directories", style="artifact")
    table.add_column("Ignored directories", style="ignored")

    for profile in resolved:
        table.add_row(
            profile.name,
            escape(", ".join(profile.artifact_names)) or "-",
            escape(", ".join(profile.ignore_names)) or "-",
        )

    console.print(table)
    console.print(f"\n[dim]Max depth: {config.max_depth}[/dim]")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the config file location."""
    config_path = get_config_path(ctx) or get_default_config_path()
    typer.echo(str(config_path))

"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from artifact_cleaner import __version__
from artifact_cleaner.cli.commands import clean, config, scan
from artifact_cleaner.core.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="artifact-cleaner",
    help="Find and remove build and cache artifact directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"artifact-cleaner version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every found, ignored and deleted directory.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of the default location.",
        ),
    ] = None,
) -> None:
    """artifact-cleaner - find and remove build and cache artifact directories.

    Profiles in the config file name the directories that count as
    artifacts (e.g. __pycache__) and the ones never to descend into.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="scan")(scan.scan_artifacts)
app.command(name="clean")(clean.clean_artifacts)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

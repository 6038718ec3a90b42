"""CLI package for artifact-cleaner.

This package contains the Typer application and all subcommands.
"""

from artifact_cleaner.cli.main import app

__all__ = ["app"]

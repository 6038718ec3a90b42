"""CLI commands for artifact-cleaner.

This package contains all subcommand implementations.
"""

from artifact_cleaner.cli.commands import clean, config, scan

__all__ = ["clean", "config", "scan"]

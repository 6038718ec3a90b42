"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from artifact_cleaner.cleaning.scanner import ArtifactScanner, EnumerationError
from artifact_cleaner.config.loader import ConfigError, load_config_or_default, resolve_profile
from artifact_cleaner.config.models import ResolvedProfile
from artifact_cleaner.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Get the config path given via the global --config option.

    Args:
        ctx: Typer context of the running command.

    Returns:
        Config path override, or None to use the default location.
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return obj.get("config_path")
    return None


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether the global --quiet option was given."""
    obj = ctx.find_root().obj
    return bool(isinstance(obj, dict) and obj.get("quiet"))


def require_profile(ctx: typer.Context, profile: str, max_depth: int | None) -> ResolvedProfile:
    """Load the config and resolve a profile, exiting on failure.

    Args:
        ctx: Typer context of the running command.
        profile: Profile name given on the command line.
        max_depth: Optional depth override from the command line.

    Returns:
        ResolvedProfile for the scan.

    Raises:
        typer.Exit: With code 1 if the config is invalid or the profile unknown.
    """
    try:
        config = load_config_or_default(get_config_path(ctx))
        return resolve_profile(config, profile, max_depth=max_depth)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def require_directory(root: Path) -> Path:
    """Validate that the scan root is an existing directory.

    Args:
        root: Root path given on the command line.

    Returns:
        Absolute root path.

    Raises:
        typer.Exit: With code 1 if root is not a directory or cannot be probed.
    """
    try:
        is_dir = root.is_dir()
    except OSError as e:
        print_error(f"Cannot access {root}: {e.strerror or e}")
        raise typer.Exit(code=1) from e
    if not is_dir:
        print_error(f"Not a directory: {root}")
        raise typer.Exit(code=1)
    return root.absolute()


def run_scan(root: Path, resolved: ResolvedProfile) -> list[Path]:
    """Scan root with a resolved profile, exiting on enumeration errors.

    Args:
        root: Directory to scan.
        resolved: Scan parameters.

    Returns:
        Found artifact directories.

    Raises:
        typer.Exit: With code 1 if a directory could not be listed.
    """
    scanner = ArtifactScanner(
        resolved.artifact_names,
        resolved.ignore_names,
        max_depth=resolved.max_depth,
    )
    try:
        return scanner.scan(root)
    except EnumerationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

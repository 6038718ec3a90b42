"""Clean command implementation.

Scans a root for artifact directories and deletes them after
confirmation. Dry-run stops after showing what would be deleted.
"""

from pathlib import Path
from typing import Annotated

import typer

from artifact_cleaner.cleaning.operator import ArtifactOperator
from artifact_cleaner.cli.display import (
    create_findings_table,
    create_outcomes_table,
    print_outcomes_summary,
    print_profile_summary,
)
from artifact_cleaner.cli.types import is_quiet, require_directory, require_profile, run_scan
from artifact_cleaner.config.defaults import DEFAULT_PROFILE
from artifact_cleaner.utils.formatting import console, print_info, print_success


def clean_artifacts(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Directory to clean."),
    ],
    profile: Annotated[
        str,
        typer.Option(
            "--profile",
            "-p",
            help="Profile whose artifact and ignore names are used.",
        ),
    ] = DEFAULT_PROFILE,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            "-d",
            min=0,
            help="Maximum directory depth to descend (overrides config).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete artifact directories below ROOT.

    Deletion is permanent. Each directory is removed independently; a
    failure on one does not stop the others. Exits with code 1 if any
    deletion failed.

    Examples:
        artifact-cleaner clean . --dry-run           # Show what would go
        artifact-cleaner clean ~/src -p node -y      # Remove node_modules
    """
    resolved = require_profile(ctx, profile, max_depth)
    root = require_directory(root)

    if not is_quiet(ctx):
        print_profile_summary(resolved, root)

    findings = run_scan(root, resolved)
    if not findings:
        print_success("Nothing to clean. No artifact directories found.")
        return

    title = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
    console.print(create_findings_table(findings, root, title=title))

    if dry_run:
        print_info(f"Dry-run: {len(findings)} director(ies) would be deleted.")
        return

    if not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {len(findings)} director(ies)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    outcomes = ArtifactOperator().delete(findings)

    console.print(create_outcomes_table(outcomes, root))
    print_outcomes_summary(outcomes)

    if any(o.failed for o in outcomes):
        raise typer.Exit(code=1)

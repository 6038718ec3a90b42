"""Scan command implementation.

Lists artifact directories below a root without deleting anything.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from artifact_cleaner.cli.display import (
    create_findings_table,
    measure_sizes,
    print_findings_summary,
    print_profile_summary,
)
from artifact_cleaner.cli.types import (
    OutputFormat,
    is_quiet,
    require_directory,
    require_profile,
    run_scan,
)
from artifact_cleaner.config.defaults import DEFAULT_PROFILE
from artifact_cleaner.utils.formatting import console, print_success


def scan_artifacts(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Directory to scan."),
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
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    sizes: Annotated[
        bool,
        typer.Option(
            "--sizes",
            "-s",
            help="Measure the size of each artifact directory.",
        ),
    ] = False,
) -> None:
    """List artifact directories below ROOT.

    Examples:
        artifact-cleaner scan .                      # Python caches below cwd
        artifact-cleaner scan ~/src -p rust          # Rust target directories
        artifact-cleaner scan ~/src -d 3 --sizes     # Shallow scan with sizes
        artifact-cleaner scan . --format json        # Machine-readable output
    """
    resolved = require_profile(ctx, profile, max_depth)
    root = require_directory(root)

    if output_format == OutputFormat.TABLE and not is_quiet(ctx):
        print_profile_summary(resolved, root)

    findings = run_scan(root, resolved)
    measured = measure_sizes(findings) if sizes else None

    if output_format == OutputFormat.JSON:
        _print_json(findings, measured)
        return

    if not findings:
        print_success("No artifact directories found.")
        return

    console.print(create_findings_table(findings, root, sizes=measured))
    print_findings_summary(findings, measured)


def _print_json(findings: list[Path], sizes: dict[Path, int | None] | None) -> None:
    """Display findings as JSON."""
    data: list[dict[str, object]] = []
    for path in findings:
        item: dict[str, object] = {"path": str(path), "name": path.name}
        if sizes is not None:
            item["size_bytes"] = sizes.get(path)
        data.append(item)
    console.print_json(json.dumps(data))

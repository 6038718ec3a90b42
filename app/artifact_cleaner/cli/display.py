"""Shared Rich display functions for findings and deletion outcomes.

Provides reusable table builders and summary printers used by the
scan and clean commands.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from artifact_cleaner.cleaning.models import DeletionOutcome
from artifact_cleaner.cleaning.scanner import directory_size
from artifact_cleaner.config.models import ResolvedProfile
from artifact_cleaner.utils.formatting import (
    console,
    format_size,
    print_info,
    print_success,
    print_warning,
)


def _relative(path: Path, root: Path) -> str:
    """Format path relative to root when possible, escaped for Rich markup."""
    try:
        return escape(str(path.relative_to(root)))
    except ValueError:
        return escape(str(path))


def create_findings_table(
    findings: list[Path],
    root: Path,
    title: str = "Artifact Directories",
    sizes: dict[Path, int | None] | None = None,
) -> Table:
    """Create a Rich table listing found artifact directories.

    Args:
        findings: Artifact directories in scan order.
        root: Scan root, used to shorten displayed paths.
        title: Table title.
        sizes: Optional per-path sizes; adds a Size column when given.

    Returns:
        Rich Table configured for findings display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Directory", style="artifact", no_wrap=True)
    table.add_column("Name", style="muted")
    if sizes is not None:
        table.add_column("Size", style="info", justify="right")

    for path in findings:
        row = [_relative(path, root), escape(path.name)]
        if sizes is not None:
            size = sizes.get(path)
            row.append(format_size(size) if size is not None else "-")
        table.add_row(*row)

    return table


def create_outcomes_table(outcomes: list[DeletionOutcome], root: Path) -> Table:
    """Create a Rich table displaying deletion outcomes.

    Args:
        outcomes: Per-path deletion outcomes.
        root: Scan root, used to shorten displayed paths.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Directory", no_wrap=True)
    table.add_column("Details", style="muted")

    for outcome in outcomes:
        if outcome.success:
            status = "[success]deleted[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = escape(outcome.error or "Unknown error")
        table.add_row(status, _relative(outcome.path, root), detail)

    return table


def measure_sizes(findings: list[Path]) -> dict[Path, int | None]:
    """Measure the size of each found directory."""
    return {path: directory_size(path) for path in findings}


def print_profile_summary(resolved: ResolvedProfile, root: Path) -> None:
    """Print the parameters a scan runs with."""
    console.print(
        f"[muted]Scanning {escape(str(root))} with profile '{resolved.name}' "
        f"(max depth {resolved.max_depth})[/]"
    )


def print_findings_summary(findings: list[Path], sizes: dict[Path, int | None] | None) -> None:
    """Print the number of findings and their total size if measured."""
    summary = f"Found {len(findings)} artifact director{'y' if len(findings) == 1 else 'ies'}"
    if sizes is not None:
        total = sum(size or 0 for size in sizes.values())
        summary += f" ({format_size(total)} total)"
    console.print(f"\n[dim]{summary}[/dim]")


def print_outcomes_summary(outcomes: list[DeletionOutcome]) -> None:
    """Print a summary of deletion outcomes.

    Shows a success message when all deletions succeed, or a count of
    succeeded/failed deletions when there are failures.

    Args:
        outcomes: Per-path deletion outcomes.
    """
    success_count = sum(1 for o in outcomes if o.success)
    fail_count = sum(1 for o in outcomes if o.failed)

    if not outcomes:
        print_info("Nothing was deleted.")
    elif fail_count == 0:
        print_success(f"All {success_count} director(ies) deleted.")
    else:
        print_warning(f"{success_count} deleted, {fail_count} failed")

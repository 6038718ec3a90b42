"""Artifact directory deletion operator.

Removes found artifact directories with failures isolated per path:
one directory that cannot be removed never stops the rest of the batch.
"""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from artifact_cleaner.cleaning.models import DeletionOutcome, DeletionStatus
from artifact_cleaner.cleaning.reporter import CleanReporter, LoggingReporter

logger = logging.getLogger(__name__)


class ArtifactOperator:
    """Handles deletion of artifact directory trees.

    Paths are processed in the order given, without reordering or
    deduplication. There is no rollback; partial completion is a valid
    final state and is visible in the returned outcomes.
    """

    def __init__(self, reporter: CleanReporter | None = None) -> None:
        """Initialize the ArtifactOperator.

        Args:
            reporter: Receives deleted/failed notifications.
                Defaults to a LoggingReporter.
        """
        self._reporter = reporter or LoggingReporter()

    def delete(self, paths: Iterable[Path | str]) -> list[DeletionOutcome]:
        """Delete multiple directory trees and return one outcome per path.

        Args:
            paths: Directories to remove recursively.

        Returns:
            List of DeletionOutcome, one per input path, in input order.
        """
        targets = [Path(p) for p in paths]
        logger.info("Starting deletion of %d director(ies)", len(targets))

        outcomes = [self._delete_single(path) for path in targets]

        failed = sum(1 for o in outcomes if o.failed)
        if failed:
            logger.warning("%d of %d deletion(s) failed", failed, len(outcomes))
        return outcomes

    def _delete_single(self, path: Path) -> DeletionOutcome:
        """Remove a single directory tree.

        Symlinks are refused by shutil.rmtree, so a path that was
        replaced by a link after scanning fails instead of deleting the
        link target. A tree too deep for the interpreter to walk is
        recorded as a failure like any I/O error.

        Args:
            path: Directory to remove.

        Returns:
            DeletionOutcome indicating success or failure.
        """
        try:
            shutil.rmtree(path)
        except (OSError, RecursionError) as e:
            error = str(e) or type(e).__name__
            self._reporter.on_delete_failed(path, error)
            return DeletionOutcome(path=path, status=DeletionStatus.FAILED, error=error)

        self._reporter.on_deleted(path)
        return DeletionOutcome(path=path, status=DeletionStatus.DELETED)


def delete_all_artifacts(
    paths: Iterable[Path | str],
    reporter: CleanReporter | None = None,
) -> list[DeletionOutcome]:
    """Delete all given artifact directories.

    Convenience wrapper around ArtifactOperator. Never raises for a
    single failing path; inspect the outcomes instead.

    Args:
        paths: Directories to remove recursively.
        reporter: Optional observer for deletion events.

    Returns:
        List of DeletionOutcome, one per input path.
    """
    return ArtifactOperator(reporter=reporter).delete(paths)

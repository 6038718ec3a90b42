"""Observer hooks for the scanner and the deletion operator.

The cleaning core never prints or configures logging itself. It calls a
reporter at well-defined points and leaves presentation to the caller.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class CleanReporter:
    """Receives notifications from the scanner and the operator.

    All hooks are no-ops; subclasses override the ones they need.

    Example:
        >>> class Collector(CleanReporter):
        ...     def __init__(self) -> None:
        ...         self.found: list[Path] = []
        ...     def on_found(self, path: Path) -> None:
        ...         self.found.append(path)
    """

    def on_found(self, path: Path) -> None:
        """Called when a directory matched an artifact name."""

    def on_ignored(self, path: Path) -> None:
        """Called when a directory matched an ignore name and was skipped."""

    def on_max_depth(self, path: Path) -> None:
        """Called when the depth budget ran out at a directory."""

    def on_deleted(self, path: Path) -> None:
        """Called after a directory tree was removed."""

    def on_delete_failed(self, path: Path, error: str) -> None:
        """Called when removing a directory tree failed."""


class LoggingReporter(CleanReporter):
    """Reporter that writes every notification to a logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        """Initialize the LoggingReporter.

        Args:
            log: Logger to write to. Defaults to this module's logger.
        """
        self._log = log or logger

    def on_found(self, path: Path) -> None:
        self._log.debug("Found %s", path)

    def on_ignored(self, path: Path) -> None:
        self._log.debug("Ignoring %s", path)

    def on_max_depth(self, path: Path) -> None:
        self._log.debug("Hit max depth in %s", path)

    def on_deleted(self, path: Path) -> None:
        self._log.debug("Deleted %s", path)

    def on_delete_failed(self, path: Path, error: str) -> None:
        self._log.error("Deleting %s failed: %s", path, error)

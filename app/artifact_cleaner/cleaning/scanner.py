"""Artifact directory scanner.

Walks a directory tree depth-first and collects every directory whose
basename is a configured artifact name. Directories whose basename is
an ignore name are skipped along with everything below them. Symbolic
links are never followed, and the walk stops descending once the depth
budget is used up.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from artifact_cleaner.cleaning.models import NameSet, as_name_set
from artifact_cleaner.cleaning.reporter import CleanReporter, LoggingReporter

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


class EnumerationError(OSError):
    """Raised when the entries of a directory cannot be listed.

    Attributes:
        path: Directory whose listing failed.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Cannot list directory {path}: {cause.strerror or cause}")
        self.errno = cause.errno
        self.path = path


def dir_name_in_collection(path: Path, names: Iterable[str]) -> bool:
    """Check whether the final component of path is one of names.

    Matching is exact and case-sensitive; there is no globbing or
    prefix matching.

    Args:
        path: Path whose basename is tested.
        names: Directory basenames to compare against.

    Returns:
        True if the basename equals one of the names.
    """
    name = path.name
    if not name:
        return False
    return name in names


class ArtifactScanner:
    """Finds artifact directories below a root directory.

    For every directory entry that is a real directory (not a symlink),
    classification happens in this order:
    1. Basename is an artifact name: record it, do not descend.
    2. Basename is an ignore name: skip it, do not descend.
    3. Otherwise: descend with one less level of depth budget.

    Example:
        >>> scanner = ArtifactScanner(["__pycache__"], [".git"], max_depth=10)
        >>> for path in scanner.scan(Path("~/projects").expanduser()):
        ...     print(path)
    """

    def __init__(
        self,
        artifact_names: Iterable[str],
        ignore_names: Iterable[str] = (),
        max_depth: int = DEFAULT_MAX_DEPTH,
        reporter: CleanReporter | None = None,
    ) -> None:
        """Initialize the ArtifactScanner.

        Args:
            artifact_names: Basenames of directories to collect.
            ignore_names: Basenames of directories never to enter.
            max_depth: Number of directory levels below the root that are
                examined. Zero or negative values scan nothing.
            reporter: Receives found/ignored/max-depth notifications.
                Defaults to a LoggingReporter.
        """
        self._artifact_names: NameSet = as_name_set(artifact_names)
        self._ignore_names: NameSet = as_name_set(ignore_names)
        self._max_depth = max_depth
        self._reporter = reporter or LoggingReporter()

    @property
    def artifact_names(self) -> NameSet:
        """Basenames that mark a directory as an artifact."""
        return self._artifact_names

    @property
    def ignore_names(self) -> NameSet:
        """Basenames of directories that are skipped entirely."""
        return self._ignore_names

    @property
    def max_depth(self) -> int:
        """Depth budget each scan starts with."""
        return self._max_depth

    def scan(self, root: Path | str) -> list[Path]:
        """Scan root and return all artifact directories found.

        The root is made absolute (without resolving symlinks) so that
        all returned paths are absolute. Results are in depth-first,
        directory-enumeration order.

        Args:
            root: Directory to start from. A non-directory yields no results.

        Returns:
            List of artifact directory paths.

        Raises:
            EnumerationError: If any directory on the walk cannot be listed.
        """
        findings: list[Path] = []
        self._walk(findings, Path(root).absolute(), self._max_depth)
        logger.debug("Scan of %s found %d artifact director(ies)", root, len(findings))
        return findings

    def _walk(self, findings: list[Path], root: Path, depth: int) -> None:
        """Collect artifacts below root into findings, depth-first.

        Uses an explicit stack of directory iterators so that tree depth
        is bounded only by the depth budget, not by the interpreter's
        recursion limit. The innermost directory is always finished
        before its later siblings are examined.
        """
        if depth <= 0:
            self._reporter.on_max_depth(root)
            return

        stack = [(iter(self._list_entries(root)), depth)]
        while stack:
            entries, budget = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            if not self._is_real_directory(entry):
                continue

            if dir_name_in_collection(entry, self._artifact_names):
                findings.append(entry)
                self._reporter.on_found(entry)
            elif dir_name_in_collection(entry, self._ignore_names):
                self._reporter.on_ignored(entry)
            elif budget - 1 <= 0:
                self._reporter.on_max_depth(entry)
            else:
                stack.append((iter(self._list_entries(entry)), budget - 1))

    @staticmethod
    def _list_entries(directory: Path) -> list[Path]:
        """List the children of directory; a non-directory has none.

        Raises:
            EnumerationError: If directory cannot be probed or listed.
        """
        try:
            if not directory.is_dir():
                return []
            return list(directory.iterdir())
        except OSError as e:
            raise EnumerationError(directory, e) from e

    @staticmethod
    def _is_real_directory(path: Path) -> bool:
        """Check if path is a directory and not a symlink.

        Entries that disappear or become unreadable between listing and
        probing count as "not a directory".

        Args:
            path: Directory entry to probe.

        Returns:
            True only for real (non-symlink) directories.
        """
        try:
            return not path.is_symlink() and path.is_dir()
        except OSError as e:
            logger.debug("Cannot determine type of %s: %s", path, e)
            return False


def find_artifact_dirs(
    root: Path | str,
    artifact_names: Iterable[str],
    ignore_names: Iterable[str] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
    reporter: CleanReporter | None = None,
) -> list[Path]:
    """Find artifact directories below root.

    Convenience wrapper around ArtifactScanner for one-off scans.

    Args:
        root: Directory to start from.
        artifact_names: Basenames of directories to collect.
        ignore_names: Basenames of directories never to enter.
        max_depth: Number of directory levels below root that are examined.
        reporter: Optional observer for scan events.

    Returns:
        List of artifact directory paths in depth-first order.

    Raises:
        EnumerationError: If any directory on the walk cannot be listed.
    """
    scanner = ArtifactScanner(
        artifact_names,
        ignore_names,
        max_depth=max_depth,
        reporter=reporter,
    )
    return scanner.scan(root)


def directory_size(path: Path) -> int | None:
    """Get the total size in bytes of all files below path.

    Symlinks are counted by their own size and never followed. Entries
    that cannot be read are skipped.

    Args:
        path: Directory to measure.

    Returns:
        Size in bytes, or None if path itself cannot be read.
    """
    try:
        if path.is_symlink() or not path.is_dir():
            return path.lstat().st_size
    except OSError:
        return None

    total = 0
    stack = [path]
    while stack:
        current = stack.pop()
        try:
            entries = list(current.iterdir())
        except OSError:
            if current == path:
                return None
            continue
        for entry in entries:
            try:
                if entry.is_symlink():
                    total += entry.lstat().st_size
                elif entry.is_dir():
                    stack.append(entry)
                else:
                    total += entry.stat().st_size
            except OSError:
                continue
    return total

"""Cleaning domain models.

This module defines the data structures shared by the artifact scanner
and the deletion operator: the name set type used for classification
and the per-path outcome of a deletion.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Ordered collection of directory basenames; matched by exact equality.
NameSet = tuple[str, ...]


class DeletionStatus(str, Enum):
    """Outcome of removing a single artifact directory.

    Attributes:
        DELETED: The directory tree was removed.
        FAILED: Removal raised an error; the directory may be partially removed.
    """

    DELETED = "deleted"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of deleting a single artifact directory.

    Attributes:
        path: Directory that was operated on.
        status: Whether the removal succeeded.
        error: Error message if the removal failed, None otherwise.
    """

    path: Path
    status: DeletionStatus
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate outcome data after initialization."""
        if self.status == DeletionStatus.FAILED and not self.error:
            msg = "Failed outcomes must carry an error message"
            raise ValueError(msg)

    @property
    def success(self) -> bool:
        """Check if the directory was deleted."""
        return self.status == DeletionStatus.DELETED

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return self.status == DeletionStatus.FAILED


def as_name_set(names: Iterable[str]) -> NameSet:
    """Normalize an iterable of basenames into a NameSet.

    A bare string is rejected because iterating it would yield single
    characters instead of names.

    Args:
        names: Iterable of directory basenames.

    Returns:
        Tuple of names in their original order.

    Raises:
        TypeError: If names is a single string.
    """
    if isinstance(names, str | bytes):
        msg = "Name sets must be a sequence of names, not a single string"
        raise TypeError(msg)
    return tuple(names)

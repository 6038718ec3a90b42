"""Artifact scanning and cleanup module.

This module provides the depth-bounded artifact directory scanner,
the deletion operator, and the reporter hooks both of them call.
"""

from artifact_cleaner.cleaning.models import DeletionOutcome, DeletionStatus, NameSet
from artifact_cleaner.cleaning.operator import ArtifactOperator, delete_all_artifacts
from artifact_cleaner.cleaning.reporter import CleanReporter, LoggingReporter
from artifact_cleaner.cleaning.scanner import (
    DEFAULT_MAX_DEPTH,
    ArtifactScanner,
    EnumerationError,
    find_artifact_dirs,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ArtifactOperator",
    "ArtifactScanner",
    "CleanReporter",
    "DeletionOutcome",
    "DeletionStatus",
    "EnumerationError",
    "LoggingReporter",
    "NameSet",
    "delete_all_artifacts",
    "find_artifact_dirs",
]

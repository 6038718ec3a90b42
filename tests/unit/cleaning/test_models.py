"""Unit tests for cleaning models."""

from pathlib import Path

import pytest
from artifact_cleaner.cleaning.models import DeletionOutcome, DeletionStatus, as_name_set


class TestDeletionOutcome:
    """Tests for DeletionOutcome."""

    def test_deleted(self) -> None:
        """A deleted outcome is a success without error."""
        outcome = DeletionOutcome(path=Path("/x"), status=DeletionStatus.DELETED)

        assert outcome.success is True
        assert outcome.failed is False
        assert outcome.error is None

    def test_failed(self) -> None:
        """A failed outcome carries its error message."""
        outcome = DeletionOutcome(path=Path("/x"), status=DeletionStatus.FAILED, error="boom")

        assert outcome.success is False
        assert outcome.failed is True
        assert outcome.error == "boom"

    def test_failed_requires_error(self) -> None:
        """A failed outcome without an error message is rejected."""
        with pytest.raises(ValueError, match="error message"):
            DeletionOutcome(path=Path("/x"), status=DeletionStatus.FAILED)

    def test_frozen(self) -> None:
        """DeletionOutcome is immutable."""
        outcome = DeletionOutcome(path=Path("/x"), status=DeletionStatus.DELETED)
        with pytest.raises(AttributeError):
            outcome.status = DeletionStatus.FAILED  # type: ignore[misc]

    def test_status_values(self) -> None:
        """Status values serialize to plain strings."""
        assert DeletionStatus.DELETED.value == "deleted"
        assert DeletionStatus.FAILED.value == "failed"


class TestAsNameSet:
    """Tests for as_name_set."""

    def test_keeps_order(self) -> None:
        """Names keep their original order."""
        assert as_name_set(["b", "a", "c"]) == ("b", "a", "c")

    def test_accepts_any_iterable(self) -> None:
        """Generators and tuples are accepted."""
        assert as_name_set(name for name in ("x", "y")) == ("x", "y")
        assert as_name_set(()) == ()

    def test_rejects_single_string(self) -> None:
        """A bare string would be split into characters and is rejected."""
        with pytest.raises(TypeError, match="single string"):
            as_name_set("target")

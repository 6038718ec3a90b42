"""Unit tests for reporter hooks."""

import logging
from pathlib import Path

import pytest
from artifact_cleaner.cleaning.reporter import CleanReporter, LoggingReporter


class TestCleanReporter:
    """Tests for the no-op base reporter."""

    def test_hooks_are_no_ops(self) -> None:
        """Every hook can be called without side effects."""
        reporter = CleanReporter()
        path = Path("/x")

        assert reporter.on_found(path) is None
        assert reporter.on_ignored(path) is None
        assert reporter.on_max_depth(path) is None
        assert reporter.on_deleted(path) is None
        assert reporter.on_delete_failed(path, "boom") is None


class TestLoggingReporter:
    """Tests for LoggingReporter."""

    def test_found_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Found directories are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="artifact_cleaner.cleaning.reporter"):
            LoggingReporter().on_found(Path("/x/__pycache__"))

        assert caplog.records[0].levelno == logging.DEBUG
        assert "Found /x/__pycache__" in caplog.text

    def test_ignored_and_max_depth_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Ignored directories and depth exhaustion are logged."""
        with caplog.at_level(logging.DEBUG, logger="artifact_cleaner.cleaning.reporter"):
            reporter = LoggingReporter()
            reporter.on_ignored(Path("/x/.git"))
            reporter.on_max_depth(Path("/x/deep"))

        assert "Ignoring /x/.git" in caplog.text
        assert "Hit max depth in /x/deep" in caplog.text

    def test_failure_logged_at_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Deletion failures are logged at ERROR with the reason."""
        with caplog.at_level(logging.DEBUG, logger="artifact_cleaner.cleaning.reporter"):
            LoggingReporter().on_delete_failed(Path("/x/target"), "Permission denied")

        assert caplog.records[0].levelno == logging.ERROR
        assert "Permission denied" in caplog.text

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """A custom logger receives the messages."""
        custom = logging.getLogger("tests.custom_reporter")
        with caplog.at_level(logging.DEBUG, logger="tests.custom_reporter"):
            LoggingReporter(custom).on_deleted(Path("/x/target"))

        assert caplog.records[0].name == "tests.custom_reporter"
        assert "Deleted /x/target" in caplog.text

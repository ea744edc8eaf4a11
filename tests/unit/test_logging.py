"""Unit tests for logging utilities."""

import logging
from unittest.mock import Mock

import pytest

from textmesh.exceptions import FontParseError
from textmesh.utils import LayoutLogger, LayoutStats, configure_logging


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestLayoutStats:
    """Tests for LayoutStats."""

    def test_defaults(self):
        """Test LayoutStats defaults."""
        stats = LayoutStats()
        assert stats.computed_count == 0
        assert stats.errors == []
        assert stats.duration_seconds == 0.0

    def test_duration(self):
        """Test duration from start and end times."""
        stats = LayoutStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == pytest.approx(2.5)


class TestLayoutLogger:
    """Tests for LayoutLogger."""

    def test_source_computed(self):
        """Test computed sources are counted and logged."""
        logger = Mock()
        layout_logger = LayoutLogger(logger)

        layout_logger.log_source_computed(3, triangles=12, placements=0, duration_ms=1.234)
        layout_logger.log_source_computed(4, triangles=8, placements=2, duration_ms=0.5)

        stats = layout_logger.stats
        assert stats.computed_count == 2
        assert stats.triangles_emitted == 20
        assert stats.placements_emitted == 2
        logger.info.assert_any_call(
            "Text layout computed", source=3, triangles=12, placements=0, duration_ms=1.23
        )

    def test_source_not_ready_logged_at_debug(self):
        """Test sources waiting on a font log at debug level."""
        logger = Mock()
        layout_logger = LayoutLogger(logger)

        layout_logger.log_source_not_ready(1)

        assert layout_logger.stats.skipped_count == 1
        logger.debug.assert_called_once()
        logger.warning.assert_not_called()

    def test_font_error(self):
        """Test font errors are recorded and logged as warnings."""
        logger = Mock()
        layout_logger = LayoutLogger(logger)
        error = FontParseError("fira", "bad sfntVersion")

        layout_logger.log_font_error(2, error)

        stats = layout_logger.stats
        assert stats.error_count == 1
        assert stats.errors == [("2", str(error))]
        _, kwargs = logger.warning.call_args
        assert kwargs["error_type"] == "FontParseError"

    def test_reset(self):
        """Test reset starts fresh stats."""
        layout_logger = LayoutLogger(Mock())
        layout_logger.log_source_not_ready(1)

        stats = layout_logger.reset()

        assert stats is layout_logger.stats
        assert stats.skipped_count == 0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_handler(self, tmp_path, restore_root_handlers):
        """Test a log file adds a file handler."""
        log_file = tmp_path / "textmesh.log"

        configure_logging(log_file=log_file, quiet=True)

        handlers = logging.getLogger().handlers
        assert any(
            isinstance(h, logging.FileHandler) and h.baseFilename == str(log_file)
            for h in handlers
        )

    def test_console_only(self, restore_root_handlers):
        """Test console logging adds a single handler."""
        before = len(logging.getLogger().handlers)
        configure_logging(console_level="ERROR")
        assert len(logging.getLogger().handlers) == before + 1

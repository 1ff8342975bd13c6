"""Tests for DEBUG driven logging configuration."""

import logging
from unittest.mock import Mock, patch

import pytest

from lokalise_mcp.core.logging_setup import DebugPatternFilter, configure_logging


def make_record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


@pytest.fixture
def root_logger():
    """Restore the root logger level and handler filters after a test."""
    root = logging.getLogger()
    level = root.level
    filters = {handler: list(handler.filters) for handler in root.handlers}
    yield root
    root.setLevel(level)
    for handler, original in filters.items():
        handler.filters = original


class TestDebugPatternFilter:
    """Test the DebugPatternFilter class."""

    def test_matching_debug_records_pass(self):
        log_filter = DebugPatternFilter("lokalise_mcp.domains.keys*")

        assert log_filter.filter(make_record("lokalise_mcp.domains.keys.service", logging.DEBUG)) is True
        assert log_filter.filter(make_record("lokalise_mcp.domains.tasks.service", logging.DEBUG)) is False

    def test_several_patterns(self):
        log_filter = DebugPatternFilter("lokalise_mcp.config*, lokalise_mcp.server.*")

        assert log_filter.filter(make_record("lokalise_mcp.config.loader", logging.DEBUG)) is True
        assert log_filter.filter(make_record("lokalise_mcp.server.transports", logging.DEBUG)) is True
        assert log_filter.filter(make_record("lokalise_mcp.core.api", logging.DEBUG)) is False

    def test_higher_levels_always_pass(self):
        log_filter = DebugPatternFilter("nothing.matches")

        assert log_filter.filter(make_record("lokalise_mcp.core.api", logging.WARNING)) is True


class TestConfigureLogging:
    """Test configure_logging."""

    def test_debug_off(self, root_logger):
        loader = Mock()
        loader.get_debug_pattern.return_value = None

        with patch("lokalise_mcp.core.logging_setup.logging.basicConfig"):
            assert configure_logging(loader) is None

        assert root_logger.level == logging.WARNING

    def test_debug_everything(self, root_logger):
        loader = Mock()
        loader.get_debug_pattern.return_value = "*"

        with patch("lokalise_mcp.core.logging_setup.logging.basicConfig"):
            assert configure_logging(loader) == "*"

        assert root_logger.level == logging.DEBUG
        assert not any(
            isinstance(f, DebugPatternFilter) for handler in root_logger.handlers for f in handler.filters
        )

    def test_debug_pattern_filters_handlers(self, root_logger):
        """Test that a pattern installs a filter on the root handlers."""
        handler = logging.NullHandler()
        root_logger.addHandler(handler)
        loader = Mock()
        loader.get_debug_pattern.return_value = "lokalise_mcp.domains.*"

        try:
            with patch("lokalise_mcp.core.logging_setup.logging.basicConfig"):
                configure_logging(loader)
        finally:
            root_logger.removeHandler(handler)

        assert root_logger.level == logging.DEBUG
        assert [f.patterns for f in handler.filters] == [["lokalise_mcp.domains.*"]]

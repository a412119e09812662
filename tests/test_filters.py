"""Tests for severity filtering"""

import pytest

from rotating_logger import InvalidSeverityError, LogEntry, LogLevel
from rotating_logger.filters import BaseFilter, SeverityFilter, should_log


class TestShouldLog:
    """Test the level comparison."""

    def test_every_level_pair(self):
        for level in LogLevel:
            for minimum in LogLevel:
                assert should_log(level, minimum) == (level.value >= minimum.value)

    def test_accepts_names_and_ranks(self):
        assert should_log("error", LogLevel.WARNING)
        assert not should_log(0, "info")

    def test_invalid_level(self):
        with pytest.raises(InvalidSeverityError):
            should_log(5, LogLevel.TRACE)
        with pytest.raises(InvalidSeverityError):
            should_log(LogLevel.INFO, -1)


class TestSeverityFilter:
    """Test the filter object used by the logger."""

    def test_default_allows_everything(self):
        log_filter = SeverityFilter()
        for level in LogLevel:
            assert log_filter.should_log(LogEntry(level=level, message="m"))

    def test_minimum_is_inclusive(self):
        log_filter = SeverityFilter(LogLevel.WARNING)

        assert not log_filter(LogEntry(level=LogLevel.INFO, message="m"))
        assert log_filter(LogEntry(level=LogLevel.WARNING, message="m"))
        assert log_filter(LogEntry(level=LogLevel.FATAL, message="m"))

    def test_invalid_minimum(self):
        with pytest.raises(InvalidSeverityError):
            SeverityFilter(42)

    def test_is_base_filter(self):
        assert isinstance(SeverityFilter(), BaseFilter)

    def test_repr(self):
        assert repr(SeverityFilter(LogLevel.ERROR)) == "SeverityFilter(min=ERROR)"

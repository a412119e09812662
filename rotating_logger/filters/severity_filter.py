"""
Severity filter

Drops entries ranked below a configured minimum level
"""

from typing import Union

from rotating_logger.core.log_entry import LogEntry
from rotating_logger.core.log_level import LogLevel
from rotating_logger.filters.base_filter import BaseFilter


def should_log(level: Union[LogLevel, int, str], min_level: Union[LogLevel, int, str]) -> bool:
    """
    Check a level against a minimum.

    Raises:
        InvalidSeverityError: If either value is not one of the five levels
    """
    return LogLevel.coerce(level) >= LogLevel.coerce(min_level)


class SeverityFilter(BaseFilter):
    """
    Filter log entries below a minimum level.

    Example:
        # Only log WARNING and above
        filter = SeverityFilter(LogLevel.WARNING)
    """

    def __init__(self, min_level: LogLevel = LogLevel.TRACE):
        """
        Initialize severity filter.

        Args:
            min_level: Lowest level that is written (inclusive)

        Raises:
            InvalidSeverityError: If min_level is not a valid level
        """
        self.min_level = LogLevel.coerce(min_level)

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry's level reaches the minimum.

        Args:
            entry: Log entry to check

        Returns:
            True if entry level >= min_level
        """
        return entry.level >= self.min_level

    def __repr__(self) -> str:
        """String representation."""
        return f"SeverityFilter(min={self.min_level.name})"

"""
Log level enumeration

Five ranked severities used for filtering and as line prefixes.
"""

from enum import IntEnum
from typing import Dict, Union

from rotating_logger.core.exceptions import InvalidSeverityError


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are ranks: a message is kept when its level is greater than
    or equal to the configured minimum.
    """

    TRACE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def label(self) -> str:
        """Name written at the start of every log line."""
        return LEVEL_LABELS[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            InvalidSeverityError: If level_str is not valid
        """
        name = level_str.strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise InvalidSeverityError(f"Invalid log level: {level_str!r}")

    @classmethod
    def coerce(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        """
        Turn a level, rank or name into a LogLevel.

        Raises:
            InvalidSeverityError: If value is not one of the five levels
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidSeverityError(f"Invalid log level: {value!r}")


LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "trace",
    LogLevel.INFO: "info",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}

LEVEL_FROM_LABEL: Dict[str, LogLevel] = {v: k for k, v in LEVEL_LABELS.items()}

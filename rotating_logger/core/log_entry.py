"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from rotating_logger.core.log_level import LogLevel
from rotating_logger.utils.caller import UNKNOWN_FILE, UNKNOWN_LINE
from rotating_logger.utils.timestamp import format_day_key, format_timestamp


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. The timestamp
    is read once and both the display time and the day key come from it.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    file_name: str = UNKNOWN_FILE
    line_number: int = UNKNOWN_LINE

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def caller_location(self) -> str:
        """``file:line`` of the logging call."""
        return f"{self.file_name}:{self.line_number}"

    @property
    def formatted_time(self) -> str:
        return format_timestamp(self.timestamp)

    @property
    def day_key(self) -> str:
        return format_day_key(self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "file_name": self.file_name,
            "line_number": self.line_number,
        }

"""
Utility helpers

Stateless helpers used by the logger core:
- Timestamp and day-key formatting
- Call-site lookup
- Directory validation
"""

from rotating_logger.utils.caller import caller_location
from rotating_logger.utils.path_validation import ensure_writable_directory
from rotating_logger.utils.timestamp import (
    format_day_key,
    format_timestamp,
    parse_timestamp,
)

__all__ = [
    "caller_location",
    "ensure_writable_directory",
    "format_day_key",
    "format_timestamp",
    "parse_timestamp",
]

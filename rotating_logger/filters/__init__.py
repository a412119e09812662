"""
Log filters module

Provides the severity filter applied before every write.
"""

from rotating_logger.filters.base_filter import BaseFilter
from rotating_logger.filters.severity_filter import SeverityFilter, should_log

__all__ = [
    "BaseFilter",
    "SeverityFilter",
    "should_log",
]

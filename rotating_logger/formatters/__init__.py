"""
Log formatters module

Turns log entries into the line format written to the active file.
"""

from rotating_logger.formatters.base_formatter import BaseFormatter
from rotating_logger.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
]

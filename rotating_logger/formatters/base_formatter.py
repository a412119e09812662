"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from rotating_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for line formatters.

    A formatter turns a LogEntry into one line of text and reads such a
    line back, so files written by the logger can be inspected.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """Format an entry as a single line without the line terminator."""

    @abstractmethod
    def parse(self, line: str) -> LogEntry:
        """
        Recover an entry from a formatted line.

        Raises:
            ValueError: If the line was not produced by this formatter
        """

    def parse_lines(self, text: str):
        """Yield entries for every non-empty line of text."""
        for line in text.split("\n"):
            if line:
                yield self.parse(line)

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)

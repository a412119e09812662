"""
Text formatter for the log file line format

Line layout:
    <level>  <year> <Month> <day> <h>:<m>:<s> - <file>:<line>:  <message>
"""

import re

from rotating_logger.core.log_entry import LogEntry
from rotating_logger.core.log_level import LEVEL_FROM_LABEL
from rotating_logger.formatters.base_formatter import BaseFormatter
from rotating_logger.utils.timestamp import parse_timestamp

LINE_PATTERN = re.compile(
    r"^(?P<level>trace|info|warning|error|fatal)  "
    r"(?P<timestamp>\d+ [A-Za-z]+ \d+ \d+:\d+:\d+) - "
    r"(?P<file>.*?):(?P<line>\d+):  "
    r"(?P<message>.*)$"
)

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}
_ESCAPED = re.compile(r"\\(\\|n|r)")


def escape_message(message: str) -> str:
    """Keep a message on one line: backslash, CR and LF become escapes."""
    return "".join(_ESCAPES.get(char, char) for char in message)


def unescape_message(text: str) -> str:
    """Reverse escape_message."""
    return _ESCAPED.sub(lambda m: _UNESCAPES[m.group(1)], text)


class TextFormatter(BaseFormatter):
    """
    Format log entries as single text lines, and parse them back.

    The layout is fixed. Line breaks and backslashes in the message are
    escaped so every entry is exactly one line. The trailing newline is
    added by the writer, not by format().
    """

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as one line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string without line terminator
        """
        return (
            f"{entry.level.label}  {entry.formatted_time} - "
            f"{entry.caller_location}:  {escape_message(entry.message)}"
        )

    def parse(self, line: str) -> LogEntry:
        """
        Parse a line produced by format().

        Args:
            line: Line text, with or without the trailing newline

        Returns:
            Recovered LogEntry (timestamp has second precision)

        Raises:
            ValueError: If the line does not match the layout
        """
        if line.endswith("\n"):
            line = line[:-1]
        match = LINE_PATTERN.match(line)
        if match is None:
            raise ValueError(f"Malformed log line: {line!r}")

        return LogEntry(
            level=LEVEL_FROM_LABEL[match.group("level")],
            message=unescape_message(match.group("message")),
            timestamp=parse_timestamp(match.group("timestamp")),
            file_name=match.group("file"),
            line_number=int(match.group("line")),
        )

    def __repr__(self) -> str:
        """String representation."""
        return "TextFormatter()"

"""
Logger exceptions

Every failure the logger surfaces derives from LoggerError. I/O errors
are chained to the OSError that caused them.
"""


class LoggerError(Exception):
    """Base class for logger failures."""


class InvalidSeverityError(LoggerError, ValueError):
    """Level is not one of the five defined severities."""


class InvalidPathError(LoggerError, ValueError):
    """Directory is missing, not a directory, or not writable."""


class OpenFailedError(LoggerError):
    """Active log file could not be opened or created."""


class WriteFailedError(LoggerError):
    """Writing or flushing the active log file failed."""


class RotationFailedError(LoggerError):
    """Active log file could not be moved to the rotation directory."""


class LoggerStateError(LoggerError):
    """Operation is not allowed in the logger's current state."""

"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Rotating Logger - A thread-safe single-file logger with size and
calendar-day rotation
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from rotating_logger.core.logger import Logger, WriteOutcome
from rotating_logger.core.logger_builder import LoggerBuilder
from rotating_logger.core.log_entry import LogEntry
from rotating_logger.core.log_level import LogLevel
from rotating_logger.core.logger_config import LoggerConfig, RotationConfig, WriteMode
from rotating_logger.core.exceptions import (
    LoggerError,
    InvalidSeverityError,
    InvalidPathError,
    OpenFailedError,
    WriteFailedError,
    RotationFailedError,
    LoggerStateError,
)
from rotating_logger.rotation.rotation_policy import RotationKind, RotationPolicy

# Import submodules (not all classes by default)
from rotating_logger import filters
from rotating_logger import formatters
from rotating_logger import rotation

__all__ = [
    "Logger",
    "WriteOutcome",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "RotationConfig",
    "WriteMode",
    "RotationKind",
    "RotationPolicy",
    "LoggerError",
    "InvalidSeverityError",
    "InvalidPathError",
    "OpenFailedError",
    "WriteFailedError",
    "RotationFailedError",
    "LoggerStateError",
    "filters",
    "formatters",
    "rotation",
]

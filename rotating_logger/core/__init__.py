"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from rotating_logger.core.logger import Logger, WriteOutcome
from rotating_logger.core.logger_builder import LoggerBuilder
from rotating_logger.core.log_entry import LogEntry
from rotating_logger.core.log_level import LogLevel
from rotating_logger.core.logger_config import LoggerConfig, RotationConfig, WriteMode

__all__ = [
    "Logger",
    "WriteOutcome",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "RotationConfig",
    "WriteMode",
]

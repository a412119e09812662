"""Logger builder pattern"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from rotating_logger.core.logger import Logger
from rotating_logger.core.logger_config import LoggerConfig, RotationConfig, WriteMode
from rotating_logger.core.log_level import LogLevel
from rotating_logger.rotation.rotation_policy import DEFAULT_ROTATION_SIZE, RotationKind
from rotating_logger.utils.path_validation import ensure_writable_directory


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._clock: Optional[Callable[[], datetime]] = None

    def with_directory(self, directory: Union[str, Path]) -> "LoggerBuilder":
        """
        Set the directory for the active log file.

        The directory is created if missing and checked right away.

        Raises:
            InvalidPathError: If the directory is not usable
        """
        self._config.log_directory = ensure_writable_directory(directory)
        return self

    def with_filename(self, filename: str) -> "LoggerBuilder":
        """Set the active log file name (default: data.log)."""
        if not filename or Path(filename).name != filename:
            raise ValueError("filename must be a plain file name")
        self._config.log_filename = filename
        return self

    def with_level(self, level: Union[LogLevel, int, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.min_level = LogLevel.coerce(level)
        return self

    def with_mode(self, mode: WriteMode) -> "LoggerBuilder":
        """Set buffered or unbuffered writing."""
        if not isinstance(mode, WriteMode):
            raise TypeError("mode must be WriteMode enum")
        self._config.mode = mode
        return self

    def with_buffered(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable buffered mode."""
        self._config.mode = WriteMode.BUFFERED if enabled else WriteMode.UNBUFFERED
        return self

    def with_buffer_size(self, size: int) -> "LoggerBuilder":
        """Set buffer size in bytes."""
        if size <= 0:
            raise ValueError("buffer_size must be positive")
        self._config.buffer_size = size
        return self

    def with_rotation(
        self,
        directory: Union[str, Path],
        kind: RotationKind = RotationKind.BY_SIZE,
        max_bytes: int = DEFAULT_ROTATION_SIZE,
    ) -> "LoggerBuilder":
        """
        Enable rotation.

        Args:
            directory: Where rotated files are moved (created if missing)
            kind: BY_SIZE or BY_DAY
            max_bytes: Size threshold for BY_SIZE rotation

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_directory("logs")
                .with_rotation("logs/archive", RotationKind.BY_DAY)
                .build())
        """
        self._config.rotation = RotationConfig(
            kind=kind,
            directory=ensure_writable_directory(directory),
            max_bytes=max_bytes,
        )
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Use a custom time source (mainly for tests)."""
        self._clock = clock
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self._config, clock=self._clock)

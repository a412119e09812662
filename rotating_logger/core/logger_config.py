"""
Logger configuration management
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from rotating_logger.core.log_level import LogLevel
from rotating_logger.rotation.rotation_policy import DEFAULT_ROTATION_SIZE, RotationKind

DEFAULT_LOG_FILENAME = "data.log"
DEFAULT_BUFFER_SIZE = 4096 * 2


class WriteMode(Enum):
    """
    How lines reach the active file.

    UNBUFFERED writes every line straight to the file, so it can be
    followed in real time (development). BUFFERED collects lines in
    memory and writes them in chunks (production); buffered lines reach
    the disk on flush, rotation or release.
    """

    UNBUFFERED = "unbuffered"
    BUFFERED = "buffered"


@dataclass
class RotationConfig:
    """
    Rotation configuration.

    Attributes:
        kind: Rotate on size or on calendar-day change
        directory: Where rotated files are moved
        max_bytes: Size threshold for BY_SIZE rotation
    """

    kind: RotationKind
    directory: Path
    max_bytes: int = DEFAULT_ROTATION_SIZE

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.kind, RotationKind):
            raise TypeError("kind must be RotationKind enum")
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if isinstance(self.directory, str):
            self.directory = Path(self.directory)


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Fields are read when the first line is written and must not change
    afterwards.
    """

    # File settings
    log_directory: Optional[Path] = None
    log_filename: str = DEFAULT_LOG_FILENAME

    # Filtering
    min_level: LogLevel = LogLevel.TRACE

    # Write settings
    mode: WriteMode = WriteMode.UNBUFFERED
    buffer_size: int = DEFAULT_BUFFER_SIZE

    # Rotation (None disables rotation)
    rotation: Optional[RotationConfig] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.min_level = LogLevel.coerce(self.min_level)
        if not isinstance(self.mode, WriteMode):
            raise TypeError("mode must be WriteMode enum")
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if not self.log_filename or Path(self.log_filename).name != self.log_filename:
            raise ValueError("log_filename must be a plain file name")

        # Convert log_directory to Path if it's a string
        if isinstance(self.log_directory, str):
            self.log_directory = Path(self.log_directory)

    @property
    def active_path(self) -> Path:
        """Path of the file receiving writes."""
        if self.log_directory is None:
            return Path(self.log_filename)
        return self.log_directory / self.log_filename

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for development: every level, written immediately."""
        return cls(
            min_level=LogLevel.TRACE,
            mode=WriteMode.UNBUFFERED,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARNING,
            mode=WriteMode.BUFFERED,
        )

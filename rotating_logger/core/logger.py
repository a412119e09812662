"""
Main Logger class - Single-file logger with rotation

Owns the active log file, serializes writers with one lock and rotates
the file by size or calendar day.
"""

from __future__ import annotations

import atexit
import copy
import shutil
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from rotating_logger.core.exceptions import (
    LoggerStateError,
    OpenFailedError,
    RotationFailedError,
    WriteFailedError,
)
from rotating_logger.core.log_entry import LogEntry
from rotating_logger.core.log_level import LogLevel
from rotating_logger.core.logger_config import LoggerConfig, RotationConfig, WriteMode
from rotating_logger.filters.severity_filter import SeverityFilter
from rotating_logger.formatters.text_formatter import TextFormatter
from rotating_logger.rotation.rotation_policy import (
    DEFAULT_ROTATION_SIZE,
    RotationKind,
    RotationPolicy,
)
from rotating_logger.utils.caller import caller_location
from rotating_logger.utils.path_validation import ensure_writable_directory
from rotating_logger.writers.file_writer import FileWriter

ENCODING = "utf-8"


class WriteOutcome(Enum):
    """Result of a successful write() call."""

    WRITTEN = "written"
    FILTERED = "filtered"


class Logger:
    """
    Logger writing severity-tagged lines to one active file.

    Configuration (directory, level, mode, rotation) is applied before the
    first write and is frozen afterwards. The file is opened lazily by the
    first write. Every write, including any rotation it triggers, runs
    under a single lock, so concurrent callers produce whole lines in a
    total order.

    I/O failures are fatal: the failing call raises and every later
    write raises LoggerStateError.

    Example:
        logger = Logger()
        logger.set_directory("logs").set_level(LogLevel.INFO)
        logger.set_rotation("logs/archive", RotationKind.BY_DAY)
        logger.info("Application started")
        logger.release()
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize logger. Nothing is opened until the first write.

        Args:
            config: Logger configuration (default: LoggerConfig.default())
            clock: Returns the current time (default: datetime.now)

        Raises:
            InvalidPathError: If a configured directory is not usable
        """
        # own copy; setters never touch the caller's config
        self._config = copy.deepcopy(config) if config is not None else LoggerConfig.default()
        self._clock = clock or datetime.now
        self._formatter = TextFormatter()
        self._lock = threading.Lock()

        self._filter: Optional[SeverityFilter] = None
        self._rotation: Optional[RotationPolicy] = None
        self._writer: Optional[FileWriter] = None
        self._started = False
        self._released = False
        self._fatal_error: Optional[Exception] = None
        self._metrics = {"written": 0, "filtered": 0, "rotations": 0, "bytes_written": 0}

        if self._config.log_directory is not None:
            self._config.log_directory = ensure_writable_directory(self._config.log_directory)
        if self._config.rotation is not None:
            self._config.rotation.directory = ensure_writable_directory(
                self._config.rotation.directory
            )

        atexit.register(self.release)

    # ------------------------------------------------------------------
    # Configuration (before the first write only)
    # ------------------------------------------------------------------

    def set_directory(self, directory: Union[str, Path]) -> "Logger":
        """
        Set the directory holding the active log file.

        Raises:
            InvalidPathError: If the directory cannot be created or written
            LoggerStateError: If logging has already started
        """
        self._check_configurable()
        self._config.log_directory = ensure_writable_directory(directory)
        return self

    def set_level(self, level: Union[LogLevel, int, str]) -> "Logger":
        """Set minimum log level; lower levels are filtered out."""
        self._check_configurable()
        self._config.min_level = LogLevel.coerce(level)
        return self

    def set_mode(self, mode: WriteMode) -> "Logger":
        """Set buffered or unbuffered writing."""
        self._check_configurable()
        if not isinstance(mode, WriteMode):
            raise TypeError("mode must be WriteMode enum")
        self._config.mode = mode
        return self

    def set_rotation(
        self,
        directory: Union[str, Path],
        kind: RotationKind,
        max_bytes: int = DEFAULT_ROTATION_SIZE,
    ) -> "Logger":
        """
        Enable rotation into a directory.

        Args:
            directory: Where rotated files are moved (created if missing)
            kind: BY_SIZE or BY_DAY
            max_bytes: Size threshold for BY_SIZE

        Raises:
            InvalidPathError: If the directory cannot be created or written
            LoggerStateError: If logging has already started
        """
        self._check_configurable()
        rotation = RotationConfig(kind=kind, directory=Path(directory), max_bytes=max_bytes)
        rotation.directory = ensure_writable_directory(rotation.directory)
        self._config.rotation = rotation
        return self

    def configure(
        self,
        directory: Union[str, Path],
        min_level: Union[LogLevel, int, str],
        mode: WriteMode,
        rotation: Optional[RotationConfig] = None,
    ) -> "Logger":
        """Apply all settings at once. Same rules as the individual setters."""
        self.set_directory(directory)
        self.set_level(min_level)
        self.set_mode(mode)
        if rotation is not None:
            self.set_rotation(rotation.directory, rotation.kind, rotation.max_bytes)
        return self

    def _check_configurable(self) -> None:
        if self._started:
            raise LoggerStateError("Configuration cannot change after the first write")
        if self._released:
            raise LoggerStateError("Logger has been released")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(
        self,
        level: Union[LogLevel, int, str],
        message: str,
        *,
        stacklevel: int = 1,
    ) -> WriteOutcome:
        """
        Write one log line.

        Args:
            level: Message severity
            message: Message text
            stacklevel: Frames to skip when looking up the call site
                (1 is the caller of write)

        Returns:
            WriteOutcome.WRITTEN, or WriteOutcome.FILTERED when level is
            below the configured minimum

        Raises:
            InvalidSeverityError: If level is not a valid severity
            OpenFailedError: If the active file cannot be opened
            WriteFailedError: If writing to the active file fails
            RotationFailedError: If the active file cannot be rotated
            LoggerStateError: If the logger was released or has failed
        """
        level = LogLevel.coerce(level)
        file_name, line_number = caller_location(stacklevel)
        entry = LogEntry(
            level=level,
            message=message,
            timestamp=self._clock(),
            file_name=file_name,
            line_number=line_number,
        )
        data = (self._formatter.format(entry) + "\n").encode(ENCODING)

        with self._lock:
            self._check_writable()
            try:
                if not self._started:
                    self._start()
                if self._writer is None:
                    self._open(entry)

                # filter runs after the lazy open
                if not self._filter.should_log(entry):
                    self._metrics["filtered"] += 1
                    return WriteOutcome.FILTERED

                written = self._writer.write(data)
                self._metrics["written"] += 1
                self._metrics["bytes_written"] += written

                if self._rotation is not None:
                    self._rotation.record_write(written)
                    if self._rotation.should_rotate(entry.day_key):
                        self._rotate(entry)
            except (OpenFailedError, WriteFailedError, RotationFailedError) as e:
                self._fatal_error = e
                raise

        return WriteOutcome.WRITTEN

    def trace(self, message: str) -> WriteOutcome:
        """Log trace message."""
        return self.write(LogLevel.TRACE, message, stacklevel=2)

    def info(self, message: str) -> WriteOutcome:
        """Log info message."""
        return self.write(LogLevel.INFO, message, stacklevel=2)

    def warning(self, message: str) -> WriteOutcome:
        """Log warning message."""
        return self.write(LogLevel.WARNING, message, stacklevel=2)

    def error(self, message: str) -> WriteOutcome:
        """Log error message."""
        return self.write(LogLevel.ERROR, message, stacklevel=2)

    def fatal(self, message: str) -> WriteOutcome:
        """Log fatal message. Does not stop the process."""
        return self.write(LogLevel.FATAL, message, stacklevel=2)

    def _check_writable(self) -> None:
        if self._released:
            raise LoggerStateError("Logger has been released")
        if self._fatal_error is not None:
            raise LoggerStateError(
                "Logging disabled after an unrecoverable I/O failure"
            ) from self._fatal_error

    def _start(self) -> None:
        """Freeze configuration into the filter and rotation state."""
        self._filter = SeverityFilter(self._config.min_level)
        if self._config.rotation is not None:
            self._rotation = RotationPolicy.from_config(self._config.rotation)
        self._started = True

    def _open(self, entry: LogEntry) -> None:
        """Open the active file and resync rotation counters from its size."""
        writer = FileWriter(
            str(self._config.active_path),
            buffered=self._config.mode is WriteMode.BUFFERED,
            buffer_size=self._config.buffer_size,
        )
        writer.open()
        self._writer = writer
        if self._rotation is not None:
            self._rotation.reset(writer.size(), entry.day_key)

    def _rotate(self, entry: LogEntry) -> None:
        """Retire the active file and open a fresh one in its place."""
        self._writer.close()

        source = self._writer.filepath
        target = self._rotation.rotated_path(entry.timestamp, self._config.log_filename)
        try:
            shutil.move(str(source), str(target))
        except OSError as e:
            raise RotationFailedError(f"Cannot move {source} to {target}: {e}") from e

        self._open(entry)
        self._metrics["rotations"] += 1

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """
        Push buffered lines to the active file.

        Raises:
            WriteFailedError: If the flush fails; the logger is disabled
        """
        with self._lock:
            if self._writer is None:
                return
            try:
                self._writer.flush()
            except WriteFailedError as e:
                self._fatal_error = e
                raise

    def release(self) -> None:
        """
        Flush and close the active file.

        Must be called before the process exits so buffered lines reach
        the disk (it is also registered with atexit). Safe to call when
        nothing was ever written; later calls do nothing.
        """
        with self._lock:
            if self._released:
                return
            self._released = True
            atexit.unregister(self.release)

            if self._writer is not None:
                writer, self._writer = self._writer, None
                writer.close()

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.release()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def active_path(self) -> Path:
        return self._config.active_path

    @property
    def is_released(self) -> bool:
        return self._released

    def get_metrics(self) -> Dict[str, int]:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

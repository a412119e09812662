"""
Rotation policy

Decides after each write whether the active file must be retired to
the rotation directory, and names the retired file.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from rotating_logger.utils.timestamp import format_timestamp

if TYPE_CHECKING:
    from rotating_logger.core.logger_config import RotationConfig

# 1 MiB
DEFAULT_ROTATION_SIZE = 1024 * 1024


class RotationKind(Enum):
    """What triggers a rotation."""

    BY_SIZE = "size"
    BY_DAY = "day"


class RotationPolicy:
    """
    Rotation state for the currently open log file.

    Tracks bytes written since the file was opened (BY_SIZE) and the
    calendar day the file was opened on (BY_DAY).

    Thread Safety:
        Not thread-safe. The owning Logger calls it under its write lock.
    """

    def __init__(
        self,
        kind: RotationKind,
        target_dir: Union[str, Path],
        size_threshold: int = DEFAULT_ROTATION_SIZE,
    ):
        """
        Initialize rotation policy.

        Args:
            kind: Rotation trigger
            target_dir: Already validated directory for rotated files
            size_threshold: Byte count that triggers BY_SIZE rotation
        """
        if not isinstance(kind, RotationKind):
            raise TypeError("kind must be RotationKind enum")
        if size_threshold <= 0:
            raise ValueError("size_threshold must be positive")

        self.kind = kind
        self.target_dir = Path(target_dir)
        self.size_threshold = size_threshold
        self.bytes_written = 0
        self.open_day_key: Optional[str] = None

    @classmethod
    def from_config(cls, config: "RotationConfig") -> "RotationPolicy":
        """Create a fresh policy from rotation configuration."""
        return cls(config.kind, config.directory, config.max_bytes)

    def reset(self, current_size: int, day_key: str) -> None:
        """
        Start tracking a newly opened file.

        Args:
            current_size: Size of the file on open (non-zero when appending
                to a file left by an earlier run)
            day_key: Day key of the write that opened the file
        """
        self.bytes_written = current_size
        self.open_day_key = day_key

    def record_write(self, byte_count: int) -> None:
        """Add bytes committed to the open file."""
        self.bytes_written += byte_count

    def should_rotate(self, day_key: str) -> bool:
        """
        Check whether the open file must be rotated now.

        Args:
            day_key: Day key of the write that was just committed

        Returns:
            True if rotation is due
        """
        if self.kind is RotationKind.BY_SIZE:
            return self.bytes_written >= self.size_threshold
        if self.kind is RotationKind.BY_DAY:
            return day_key != self.open_day_key
        raise AssertionError(f"Unhandled rotation kind: {self.kind!r}")

    def rotated_path(self, moment: datetime, log_filename: str) -> Path:
        """
        Pick the destination of a rotated file.

        The name is ``<timestamp>-<log_filename>``. If that file already
        exists (two rotations within one second) a counter is inserted
        before the extension so nothing is overwritten.

        Args:
            moment: Timestamp of the write that triggered rotation
            log_filename: Name of the active file

        Returns:
            Path inside target_dir that does not exist yet
        """
        prefix = format_timestamp(moment)
        candidate = self.target_dir / f"{prefix}-{log_filename}"
        stem, suffix = Path(log_filename).stem, Path(log_filename).suffix
        counter = 1
        while candidate.exists():
            candidate = self.target_dir / f"{prefix}-{stem}.{counter}{suffix}"
            counter += 1
        return candidate

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"RotationPolicy(kind={self.kind.value}, "
            f"target_dir={str(self.target_dir)!r}, "
            f"size_threshold={self.size_threshold})"
        )

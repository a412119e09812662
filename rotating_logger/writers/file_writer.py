"""File writer"""

import os
from pathlib import Path
from typing import BinaryIO, Optional

from rotating_logger.core.exceptions import OpenFailedError, WriteFailedError


class FileWriter:
    """
    Own one append-mode handle on the active log file.

    In buffered mode the handle is an io.BufferedWriter of buffer_size
    bytes; otherwise it is a raw, unbuffered file.

    Thread Safety:
        Not thread-safe. The owning Logger serializes access.
    """

    def __init__(self, filepath: str, buffered: bool = False, buffer_size: int = 8192):
        """
        Initialize file writer. The file is not opened until open().

        Args:
            filepath: Path to log file
            buffered: Collect writes in memory before hitting the file
            buffer_size: Buffer size in bytes (buffered mode only)
        """
        self.filepath = Path(filepath)
        self.buffered = buffered
        self.buffer_size = buffer_size
        self._file: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        """
        Open the log file for appending, creating it if missing.

        Raises:
            OpenFailedError: If the file cannot be opened
        """
        buffering = self.buffer_size if self.buffered else 0
        try:
            self._file = open(self.filepath, "ab", buffering=buffering)
        except OSError as e:
            raise OpenFailedError(f"Cannot open log file {self.filepath}: {e}") from e

    def size(self) -> int:
        """Size of the file on disk (excludes bytes still in the buffer)."""
        if not self._file:
            return 0
        return os.fstat(self._file.fileno()).st_size

    def write(self, data: bytes) -> int:
        """
        Write bytes to the file or its buffer.

        Returns:
            Number of bytes written

        Raises:
            WriteFailedError: If the file is closed or the write fails
        """
        if not self._file:
            raise WriteFailedError(f"Log file is not open: {self.filepath}")

        view = memoryview(data)
        written = 0
        try:
            # raw files may accept only part of the data per call
            while written < len(view):
                count = self._file.write(view[written:])
                if count is None:
                    raise BlockingIOError(f"Write would block: {self.filepath}")
                written += count
        except OSError as e:
            raise WriteFailedError(f"Cannot write log file {self.filepath}: {e}") from e
        return written

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            try:
                self._file.flush()
            except OSError as e:
                raise WriteFailedError(f"Cannot flush log file {self.filepath}: {e}") from e

    def close(self) -> None:
        """Flush and close file. Closing a closed writer does nothing."""
        if self._file:
            file, self._file = self._file, None
            try:
                file.close()
            except OSError as e:
                raise WriteFailedError(f"Cannot close log file {self.filepath}: {e}") from e

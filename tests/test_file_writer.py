"""Tests for the active file writer"""

import os
import tempfile
from pathlib import Path

import pytest

from rotating_logger import OpenFailedError, WriteFailedError
from rotating_logger.writers import FileWriter


class TestFileWriter:
    """Test FileWriter handle ownership."""

    def test_not_opened_on_init(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "data.log")
            writer = FileWriter(path)

            assert not writer.is_open
            assert not os.path.exists(path)
            assert writer.size() == 0

    def test_unbuffered_write(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "data.log")
            writer = FileWriter(path)
            writer.open()

            assert writer.write(b"hello\n") == 6
            assert Path(path).read_bytes() == b"hello\n"
            assert writer.size() == 6
            writer.close()

    def test_buffered_write_needs_flush(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "data.log")
            writer = FileWriter(path, buffered=True, buffer_size=1024)
            writer.open()

            assert writer.write(b"buffered\n") == 9
            assert Path(path).read_bytes() == b""

            writer.flush()
            assert Path(path).read_bytes() == b"buffered\n"
            writer.close()

    def test_close_flushes_buffer(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "data.log")
            writer = FileWriter(path, buffered=True)
            writer.open()
            writer.write(b"pending\n")
            writer.close()

            assert Path(path).read_bytes() == b"pending\n"
            assert not writer.is_open

    def test_appends(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "data.log")
            Path(path).write_bytes(b"old\n")

            writer = FileWriter(path)
            writer.open()
            assert writer.size() == 4
            writer.write(b"new\n")
            writer.close()

            assert Path(path).read_bytes() == b"old\nnew\n"

    def test_close_twice(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            writer = FileWriter(os.path.join(tmpdir, "data.log"))
            writer.open()
            writer.close()
            writer.close()
            writer.flush()

    def test_open_failure(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            writer = FileWriter(os.path.join(tmpdir, "missing", "data.log"))

            with pytest.raises(OpenFailedError):
                writer.open()
            assert not writer.is_open

    def test_write_when_closed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            writer = FileWriter(os.path.join(tmpdir, "data.log"))

            with pytest.raises(WriteFailedError):
                writer.write(b"nowhere\n")

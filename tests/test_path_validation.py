"""Tests for directory validation"""

import os
import stat
import tempfile
from pathlib import Path

import pytest

from rotating_logger import InvalidPathError
from rotating_logger.utils.path_validation import CHECK_FILENAME, ensure_writable_directory


class TestEnsureWritableDirectory:
    """Test directory checks used at configuration time."""

    def test_existing_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            result = ensure_writable_directory(tmpdir)

            assert result == Path(tmpdir)
            assert not (Path(tmpdir) / CHECK_FILENAME).exists()

    def test_creates_missing_directories(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            target = os.path.join(tmpdir, "a", "b", "c")
            result = ensure_writable_directory(target)

            assert result.is_dir()

    def test_trailing_slash(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            result = ensure_writable_directory(tmpdir + "/")
            assert result == Path(tmpdir)

    def test_file_is_not_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "plain.txt")
            Path(path).write_text("x")

            with pytest.raises(InvalidPathError):
                ensure_writable_directory(path)

    def test_parent_is_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "plain.txt")
            Path(path).write_text("x")

            with pytest.raises(InvalidPathError):
                ensure_writable_directory(os.path.join(path, "child"))

    def test_empty_path(self):
        with pytest.raises(InvalidPathError):
            ensure_writable_directory("")

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission bits are not enforced for root",
    )
    def test_read_only_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            locked = Path(tmpdir) / "locked"
            locked.mkdir()
            locked.chmod(stat.S_IRUSR | stat.S_IXUSR)
            try:
                with pytest.raises(InvalidPathError):
                    ensure_writable_directory(locked)
            finally:
                locked.chmod(stat.S_IRWXU)

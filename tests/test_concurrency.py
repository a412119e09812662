"""Tests for concurrent writers"""

import os
import tempfile
import threading
from pathlib import Path

from rotating_logger import LoggerBuilder, RotationKind, WriteMode, WriteOutcome
from rotating_logger.formatters import TextFormatter


def collect_lines(tmpdir):
    """All lines from the rotated files and the active file."""
    files = list((Path(tmpdir) / "rotated").iterdir()) + [Path(tmpdir) / "data.log"]
    lines = []
    for path in files:
        lines.extend(path.read_text(encoding="utf-8").splitlines())
    return files, lines


class TestConcurrentWrites:
    """Test that concurrent callers never lose or interleave lines."""

    THREADS = 8
    MESSAGES = 250

    def _run(self, logger):
        outcomes = []
        outcomes_lock = threading.Lock()

        def write_messages(thread_index):
            for i in range(self.MESSAGES):
                outcome = logger.info(f"thread-{thread_index} message-{i} " + "x" * 40)
                with outcomes_lock:
                    outcomes.append(outcome)

        threads = [
            threading.Thread(target=write_messages, args=(n,))
            for n in range(self.THREADS)
        ]

        for t in threads:
            t.start()
        for t in threads:
            t.join()

        logger.release()
        return outcomes

    def _check(self, tmpdir, outcomes):
        assert len(outcomes) == self.THREADS * self.MESSAGES
        assert all(outcome is WriteOutcome.WRITTEN for outcome in outcomes)

        files, lines = collect_lines(tmpdir)
        assert len(lines) == self.THREADS * self.MESSAGES

        formatter = TextFormatter()
        seen = set()
        for line in lines:
            entry = formatter.parse(line)
            thread_part, message_part, padding = entry.message.split(" ")
            assert padding == "x" * 40
            seen.add((thread_part, message_part))
        assert len(seen) == self.THREADS * self.MESSAGES
        return files

    def test_unbuffered_with_size_rotation(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = (LoggerBuilder()
                .with_directory(tmpdir)
                .with_rotation(os.path.join(tmpdir, "rotated"), RotationKind.BY_SIZE, 16 * 1024)
                .build())

            outcomes = self._run(logger)
            files = self._check(tmpdir, outcomes)

            assert len(files) > 2
            assert logger.get_metrics()["rotations"] == len(files) - 1

    def test_buffered_with_size_rotation(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = (LoggerBuilder()
                .with_directory(tmpdir)
                .with_mode(WriteMode.BUFFERED)
                .with_buffer_size(4096)
                .with_rotation(os.path.join(tmpdir, "rotated"), RotationKind.BY_SIZE, 16 * 1024)
                .build())

            outcomes = self._run(logger)
            self._check(tmpdir, outcomes)

    def test_without_rotation(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            os.mkdir(os.path.join(tmpdir, "rotated"))
            logger = LoggerBuilder().with_directory(tmpdir).build()

            outcomes = self._run(logger)
            files = self._check(tmpdir, outcomes)

            assert files == [Path(tmpdir) / "data.log"]
            assert logger.get_metrics()["bytes_written"] == (Path(tmpdir) / "data.log").stat().st_size

"""Directory validation for log and rotation targets"""

from pathlib import Path
from typing import Union

from rotating_logger.core.exceptions import InvalidPathError

CHECK_FILENAME = ".touch"


def ensure_writable_directory(path: Union[str, Path]) -> Path:
    """
    Make sure a directory exists and can be written to.

    Missing directories (and parents) are created first. Writability is
    checked by creating and removing an empty marker file.

    Args:
        path: Directory path

    Returns:
        The directory as a Path

    Raises:
        InvalidPathError: If the path is empty, is not a directory, or
            is not writable
    """
    if not str(path).strip():
        raise InvalidPathError("Directory path must not be empty")

    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except FileExistsError as e:
        raise InvalidPathError(f"Not a directory: {directory}") from e
    except OSError as e:
        raise InvalidPathError(f"Cannot create directory {directory}: {e}") from e

    if not directory.is_dir():
        raise InvalidPathError(f"Not a directory: {directory}")

    marker = directory / CHECK_FILENAME
    try:
        marker.write_bytes(b"")
        marker.unlink()
    except OSError as e:
        raise InvalidPathError(f"Directory is not writable: {directory}") from e

    return directory

"""Call-site lookup for log lines"""

import os
import sys
from typing import Tuple

UNKNOWN_FILE = "???"
UNKNOWN_LINE = 0


def caller_location(depth: int = 1) -> Tuple[str, int]:
    """
    Find the file name and line of a frame above the caller.

    Args:
        depth: 0 is the function calling caller_location, 1 its caller, ...

    Returns:
        (base file name, line number), or ("???", 0) if the stack is
        not deep enough
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_FILE, UNKNOWN_LINE
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno

"""
Rotation module

Size- and day-based rotation of the active log file.
"""

from rotating_logger.rotation.rotation_policy import (
    DEFAULT_ROTATION_SIZE,
    RotationKind,
    RotationPolicy,
)

__all__ = [
    "DEFAULT_ROTATION_SIZE",
    "RotationKind",
    "RotationPolicy",
]

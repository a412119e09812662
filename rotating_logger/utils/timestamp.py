"""
Timestamp strings for log lines and rotation

Both strings are derived from one datetime so the line prefix, the
rotated file name and the day key never disagree at midnight.
"""

from datetime import datetime

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_MONTH_NUMBERS = {name: number for number, name in enumerate(MONTH_NAMES, start=1)}


def format_timestamp(moment: datetime) -> str:
    """Return ``"<year> <Month> <day> <hour>:<minute>:<second>"``, unpadded."""
    return (
        f"{format_day_key(moment)} "
        f"{moment.hour}:{moment.minute}:{moment.second}"
    )


def format_day_key(moment: datetime) -> str:
    """Return ``"<year> <Month> <day>"``, used to detect a day change."""
    return f"{moment.year} {MONTH_NAMES[moment.month - 1]} {moment.day}"


def parse_timestamp(text: str) -> datetime:
    """
    Parse a string produced by format_timestamp.

    Args:
        text: Timestamp text

    Returns:
        Naive datetime with second precision

    Raises:
        ValueError: If text is not a formatted timestamp
    """
    try:
        year, month_name, day, clock = text.split(" ")
        hour, minute, second = clock.split(":")
        return datetime(
            int(year), _MONTH_NUMBERS[month_name], int(day),
            int(hour), int(minute), int(second),
        )
    except (KeyError, ValueError) as e:
        raise ValueError(f"Invalid timestamp: {text!r}") from e

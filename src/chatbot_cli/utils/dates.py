"""Date/time helpers for task input and display.

Input uses ``d/M/yyyy HHmm`` (e.g. ``2/12/2025 1800``); display and storage
use ``MMM d yyyy, HH:mm`` (e.g. ``Dec 2 2025, 18:00``).
"""

from __future__ import annotations

import re
from datetime import datetime

from chatbot_cli.exceptions import InvalidDateTime

INPUT_FORMAT = "%d/%m/%Y %H%M"
# English month abbreviations for display, independent of LC_TIME.
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_DISPLAY_RE = re.compile(
    r"^([A-Za-z]{3}) (\d{1,2}) (\d{4}), (\d{2}):(\d{2})$", re.ASCII
)


def parse_input(text: str) -> datetime:
    """Parse user-entered date/time text.

    Args:
        text: Date in ``day/month/year hourminute`` form, 24-hour clock.

    Returns:
        The parsed naive local datetime.

    Raises:
        InvalidDateTime: If the text does not follow the input format.
    """
    value = text.strip()
    # strptime tolerates a missing leading zero in %H%M ("800"); the clock
    # part must be exactly four digits.
    clock = value.rsplit(" ", 1)[-1]
    if len(clock) != 4 or not clock.isdigit():
        raise InvalidDateTime(
            f"'{text}' is not a valid date. Use d/M/yyyy HHmm, e.g. 2/12/2025 1800."
        )
    try:
        return datetime.strptime(value, INPUT_FORMAT)
    except ValueError as e:
        raise InvalidDateTime(
            f"'{text}' is not a valid date. Use d/M/yyyy HHmm, e.g. 2/12/2025 1800."
        ) from e


def parse_display(text: str) -> datetime:
    """Parse a date rendered by :func:`format_display`.

    Raises:
        ValueError: If the text is not in display format.
    """
    match = _DISPLAY_RE.match(text.strip())
    if match is None or match.group(1) not in MONTHS:
        raise ValueError(f"not a display date: {text!r}")
    month, day, year, hour, minute = match.groups()
    return datetime(
        int(year), MONTHS.index(month) + 1, int(day), int(hour), int(minute)
    )


def format_display(value: datetime) -> str:
    """Render a datetime as ``Dec 2 2025, 18:00`` (day unpadded, year four digits)."""
    month = MONTHS[value.month - 1]
    return f"{month} {value.day} {value.year:04d}, {value.hour:02d}:{value.minute:02d}"


def truncate_to_minute(value: datetime) -> datetime:
    """Drop seconds and microseconds."""
    return value.replace(second=0, microsecond=0)


def now_minute() -> datetime:
    """Current local time truncated to the minute."""
    return truncate_to_minute(datetime.now())

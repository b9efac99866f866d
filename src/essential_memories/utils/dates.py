"""Calendar helpers for yearless month/day values.

Memories carry a month and a day but no year, so validity is judged
against a leap year: Feb 29 is accepted, Apr 31 is not.
"""

import calendar
import re

__all__ = [
    "days_in_month",
    "format_month_day",
    "is_valid_month_day",
    "parse_month_day",
]

# Any leap year works here
_LEAP_YEAR = 2000

_MONTH_DAY_RE = re.compile(r"^\s*(\d{1,2})\s*/\s*(\d{1,2})\s*$")


def days_in_month(month: int) -> int:
    """Return the largest valid day for a month, with Feb counted as 29."""
    return calendar.monthrange(_LEAP_YEAR, month)[1]


def is_valid_month_day(month: int, day: int) -> bool:
    """Check whether a yearless (month, day) pair can exist on a calendar."""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(month)


def format_month_day(month: int, day: int) -> str:
    """Format a month/day pair as zero-padded ``MM/DD``."""
    return f"{month:02d}/{day:02d}"


def parse_month_day(text: str) -> tuple[int, int] | None:
    """Parse ``MM/DD`` (or ``M/D``) into a (month, day) tuple.

    Args:
        text: User supplied answer

    Returns:
        (month, day) if the text is a valid yearless date, None otherwise
    """
    match = _MONTH_DAY_RE.match(text or "")
    if not match:
        return None
    month, day = int(match.group(1)), int(match.group(2))
    if not is_valid_month_day(month, day):
        return None
    return month, day

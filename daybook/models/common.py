# File: daybook/models/common.py
"""
Text <-> date/time helpers shared by the store and the presentation layer.

Every parser here returns None for malformed text instead of raising, so
callers can treat bad user input as an ordinary outcome.
"""

from datetime import date, datetime, time
from typing import Optional, Union

DATE_FORMAT = "%m/%d/%Y"                  # 07/04/2025
TIME_FORMAT = "%H:%M"                     # 14:30
TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M"       # 07/04/2025 14:30 (canonical)
TIMESTAMP_FORMAT_12H = "%m/%d/%Y %I:%M %p"  # 07/04/2025 2:30 PM (input only)


def truncate_to_minute(value: datetime) -> datetime:
    """Drop seconds and microseconds."""
    return value.replace(second=0, microsecond=0)


def format_date(value: Union[date, datetime]) -> str:
    """Format a date in the canonical MM/DD/YYYY form."""
    return value.strftime(DATE_FORMAT)


def format_timestamp(value: datetime) -> str:
    """Format a timestamp in the canonical MM/DD/YYYY HH:MM form."""
    return value.strftime(TIMESTAMP_FORMAT)


def parse_date(text: Optional[str]) -> Optional[date]:
    """Parse MM/DD/YYYY text into a date."""
    if not text:
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def parse_time_of_day(text: Optional[str]) -> Optional[time]:
    """Parse HH:MM (24-hour) or h:mm AM/PM text into a time."""
    if not text:
        return None
    clean = text.strip()
    for fmt in (TIME_FORMAT, "%I:%M %p"):
        try:
            return datetime.strptime(clean, fmt).time()
        except ValueError:
            continue
    return None


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a timestamp typed by the user.

    The canonical 24-hour form is tried first; the 12-hour AM/PM form is
    accepted as an alternative input. Output elsewhere is always canonical.
    """
    if not text:
        return None
    clean = " ".join(text.split())
    for fmt in (TIMESTAMP_FORMAT, TIMESTAMP_FORMAT_12H):
        try:
            return datetime.strptime(clean, fmt)
        except ValueError:
            continue
    return None


def combine(date_text: Optional[str], time_text: Optional[str]) -> Optional[datetime]:
    """Build a timestamp from a form's separate date and time fields."""
    day = parse_date(date_text)
    clock = parse_time_of_day(time_text)
    if day is None or clock is None:
        return None
    return datetime.combine(day, clock)


def timestamp_key(value: Union[str, datetime]) -> Optional[str]:
    """
    Normalize a start timestamp (datetime or text) to its store key.

    Returns None if text cannot be parsed.
    """
    if isinstance(value, datetime):
        return format_timestamp(truncate_to_minute(value))
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    return format_timestamp(parsed)

"""Render stored DATE & TIMESTAMP values as canonical text."""

from __future__ import annotations

# Local Imports
from .constants import (
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
)
from .julian import decodeDate
from .stardate import CalendarDate, DayCount, MicrosecondCount
from .timestamp import dateFromTimestamp


def _formatYear(year: int) -> str:
    """Zero pad to four digits, keeping the sign in front of the padding."""
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def formatCalendarDate(calendar_date: CalendarDate) -> str:
    """Render a :class:`.CalendarDate` as ``YYYY-MM-DD``."""
    year, month, day = calendar_date
    return f"{_formatYear(year)}-{month:02d}-{day:02d}"


def formatTimeOfDay(microseconds: int) -> str:
    """Render microseconds since midnight as ``HH:MM:SS.ffffff``."""
    hour, remainder = divmod(microseconds, MICROSECONDS_PER_HOUR)
    minute, remainder = divmod(remainder, MICROSECONDS_PER_MINUTE)
    second, microsecond = divmod(remainder, MICROSECONDS_PER_SECOND)
    return f"{hour:02d}:{minute:02d}:{second:02d}.{microsecond:06d}"


def formatDate(day_count: DayCount | int) -> str:
    """Return `day_count` formatted as ``YYYY-MM-DD``.

    Negative years are rendered with a leading minus sign (``-0044-03-15``), and years
    past 9999 are printed in full.
    """
    return formatCalendarDate(decodeDate(DayCount(day_count)))


def formatIsoTimestamp(timestamp: MicrosecondCount | int, sep: str = "T") -> str:
    """Return `timestamp` formatted with `sep` between the date and the time of day.

    Args:
        timestamp (:class:`.MicrosecondCount`): stored TIMESTAMP value
        sep (``str``, optional): separator between date & time. Defaults to ``"T"``.

    Returns:
        ``str``: ``YYYY-MM-DD<sep>HH:MM:SS.ffffff``, without any zone suffix
    """
    timestamp = MicrosecondCount(timestamp)
    julian_date = dateFromTimestamp(timestamp)
    remaining_us = int(timestamp) - int(julian_date) * MICROSECONDS_PER_DAY
    return f"{formatDate(julian_date)}{sep}{formatTimeOfDay(remaining_us)}"


def formatTimestamp(timestamp: MicrosecondCount | int) -> str:
    """Return `timestamp` formatted as ``YYYY-MM-DD HH:MM:SS.ffffff``.

    Values are zone-naive, so no offset is printed. The fraction always has six digits.
    """
    return formatIsoTimestamp(timestamp, sep=" ")

"""Julian timestamp codec, built on top of the Julian day codec.

A stored TIMESTAMP is ``day_count * MICROSECONDS_PER_DAY + microseconds_since_midnight``.
"""

from __future__ import annotations

# Local Imports
from .constants import (
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
)
from .julian import decodeDate, postgresDate2J
from .stardate import CalendarTime, DayCount, MicrosecondCount


def timestampFromDate(day_count: DayCount | int) -> MicrosecondCount:
    """Return the timestamp of midnight on `day_count`."""
    return MicrosecondCount(int(DayCount(day_count)) * MICROSECONDS_PER_DAY)


def dateFromTimestamp(timestamp: MicrosecondCount | int) -> DayCount:
    """Return the Julian day that `timestamp` falls on."""
    return DayCount(int(MicrosecondCount(timestamp)) // MICROSECONDS_PER_DAY)


def extractJulianMicroseconds(timestamp: MicrosecondCount | int) -> int:
    """Extract the number of microseconds with respect to Julian time from `timestamp`."""
    return int(MicrosecondCount(timestamp))


def timeOfDayMicroseconds(timestamp: MicrosecondCount | int) -> int:
    """Return the microseconds elapsed since midnight of the day `timestamp` falls on."""
    timestamp = MicrosecondCount(timestamp)
    return int(timestamp) - int(dateFromTimestamp(timestamp)) * MICROSECONDS_PER_DAY


def timestampFromHMSu(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: int,
) -> MicrosecondCount:
    """Instantiate a timestamp with the given parameters.

    The time-of-day fields are not bounds checked: out-of-range values simply shift the
    result, e.g. ``hour=24`` lands on midnight of the next day.

    Args:
        year (``int``): calendar year
        month (``int``): month of the year (1-12)
        day (``int``): day of the month (1-31)
        hour (``int``): hour of the day (0-23)
        minute (``int``): minute of the hour (0-59)
        second (``int``): second of the minute (0-59)
        microsecond (``int``): microsecond of the second (0-999999)

    Returns:
        :class:`.MicrosecondCount`: Julian microsecond count
    """
    ts_val = postgresDate2J(year, month, day) * MICROSECONDS_PER_DAY
    ts_val += hour * MICROSECONDS_PER_HOUR
    ts_val += minute * MICROSECONDS_PER_MINUTE
    ts_val += second * MICROSECONDS_PER_SECOND
    ts_val += microsecond
    return MicrosecondCount(ts_val)


def encodeTimestamp(calendar_time: CalendarTime) -> MicrosecondCount:
    """Convert a :class:`.CalendarTime` into the stored TIMESTAMP representation."""
    return timestampFromHMSu(*calendar_time)


def decodeTimestamp(timestamp: MicrosecondCount | int) -> CalendarTime:
    """Convert a stored TIMESTAMP value into a :class:`.CalendarTime`."""
    remainder = timeOfDayMicroseconds(timestamp)
    hour, remainder = divmod(remainder, MICROSECONDS_PER_HOUR)
    minute, remainder = divmod(remainder, MICROSECONDS_PER_MINUTE)
    second, microsecond = divmod(remainder, MICROSECONDS_PER_SECOND)

    year, month, day = decodeDate(dateFromTimestamp(timestamp))
    return CalendarTime(year, month, day, hour, minute, second, microsecond)

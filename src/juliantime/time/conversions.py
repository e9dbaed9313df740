"""Helper functions that convert between the stored encodings and the standard ``datetime`` types."""

from __future__ import annotations

# Standard Library Imports
import datetime

# Local Imports
from ..common.logger import juliantimeLogError
from .julian import decodeDate, postgresDate2J
from .stardate import DayCount, MicrosecondCount
from .timestamp import decodeTimestamp, timestampFromHMSu


def dateToDayCount(date):
    """Convert a ``date`` (or the date part of a ``datetime``) to a :class:`.DayCount`.

    Args:
        date (``datetime.date``): date to be converted

    Returns:
        :class:`.DayCount`: Julian day count of `date`
    """
    if not isinstance(date, datetime.date):
        juliantimeLogError("Error: `date` must be a `datetime.date` object.")
        raise TypeError(type(date))

    return DayCount(postgresDate2J(date.year, date.month, date.day))


def dayCountToDate(day_count):
    """Convert a :class:`.DayCount` to a ``date`` object.

    Raises:
        ValueError: if the decoded year is outside the range ``datetime.date`` supports
    """
    year, month, day = decodeDate(DayCount(day_count))
    try:
        return datetime.date(year, month, day)
    except ValueError:
        juliantimeLogError(f"Day count {int(day_count)} has no `datetime.date` equivalent")
        raise


def datetimeToTimestamp(date_time):
    """Convert a ``datetime`` object to a :class:`.MicrosecondCount`.

    Aware datetimes are normalized to UTC first and their offset is discarded, the same way
    the text parser treats a numeric offset.

    Args:
        date_time (``datetime.datetime``): ``datetime`` object to be converted

    Raises:
        OverflowError: if shifting an aware `date_time` to UTC leaves the ``datetime`` range

    Returns:
        :class:`.MicrosecondCount`: Julian microsecond count of `date_time`
    """
    if not isinstance(date_time, datetime.datetime):
        juliantimeLogError("Error: `date_time` must be a `datetime.datetime` object.")
        raise TypeError(type(date_time))

    if date_time.utcoffset() is not None:
        try:
            date_time = date_time.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        except OverflowError:
            juliantimeLogError(f"Datetime {date_time.isoformat()} has no UTC `datetime.datetime` equivalent")
            raise

    return timestampFromHMSu(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        date_time.second,
        date_time.microsecond,
    )


def timestampToDatetime(timestamp):
    """Convert a :class:`.MicrosecondCount` to a naive ``datetime`` object.

    Raises:
        ValueError: if the decoded year is outside the range ``datetime.datetime`` supports
    """
    try:
        return datetime.datetime(*decodeTimestamp(MicrosecondCount(timestamp)))
    except ValueError:
        juliantimeLogError(f"Timestamp {int(timestamp)} has no `datetime.datetime` equivalent")
        raise

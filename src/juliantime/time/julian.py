"""Julian day codec: converts calendar dates to and from the stored 4-byte DATE value.

The arithmetic is PostgreSQL's ``date2j()``/``j2date()`` from ``backend/utils/adt/datetime.c``,
reproduced with C integer semantics so that stored values stay bit-compatible:

- the year is a signed 32-bit integer and divides by truncating toward zero
- month, day, century and the running Julian value are unsigned 32-bit integers that wrap

The grouping of every expression matters because of the truncating divisions. Do not
simplify these functions into a "natural" calendar computation.

References:
    PostgreSQL ``backend/utils/adt/datetime.c``
    Portions Copyright (c) 1996-2020, PostgreSQL Global Development Group
    Portions Copyright (c) 1994, Regents of the University of California
"""

from __future__ import annotations

# Standard Library Imports
from calendar import isleap, mdays
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import CalendarRangeError
from ..common.logger import juliantimeLogError
from .constants import UINT32_MASK
from .stardate import CalendarDate, DayCount

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable


def _truncDiv(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero, like C."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _int32(value: int) -> int:
    """Reinterpret the low 32 bits of `value` as a signed integer."""
    value &= UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def postgresDate2J(year: int, month: int, day: int) -> int:
    """Serialize a calendar date to an unsigned 32-bit Julian day count.

    Months are shifted so that March is month 1 and January/February belong to the previous
    year, which keeps every later subtraction in unsigned range. Nothing is validated, so an
    out-of-range month or day produces a well-defined but meaningless result.

    Args:
        year (``int``): calendar year, as a signed 32-bit integer
        month (``int``): month of the year (1-12)
        day (``int``): day of the month (1-31)

    Returns:
        ``int``: Julian day count in ``[0, 2**32)``
    """
    year = _int32(year)
    month &= UINT32_MASK
    day &= UINT32_MASK

    if month > 2:
        month += 1
        year = _int32(year + 4800)
    else:
        month += 13
        year = _int32(year + 4799)

    century = _truncDiv(year, 100) & UINT32_MASK
    julian = (year * 365 - 32167) & UINT32_MASK
    julian = (julian + ((_truncDiv(year, 4) - century) & UINT32_MASK) + century // 4) & UINT32_MASK
    julian = (julian + ((7834 * month) & UINT32_MASK) // 256 + day) & UINT32_MASK
    return julian


def postgresJ2Date(julian_days: int) -> CalendarDate:
    """De-serialize an unsigned 32-bit Julian day count to a calendar date.

    Args:
        julian_days (``int``): Julian day count, reduced to unsigned 32 bits

    Returns:
        :class:`.CalendarDate`: the decoded year, month & day
    """
    julian = (int(julian_days) + 32044) & UINT32_MASK

    quad = julian // 146097
    extra = ((julian - quad * 146097) * 4 + 3) & UINT32_MASK

    julian = (julian + 60 + quad * 3 + extra // 146097) & UINT32_MASK
    quad = julian // 1461
    julian = (julian - quad * 1461) & UINT32_MASK
    y = _int32(((julian * 4) & UINT32_MASK) // 1461)
    julian = ((julian + 305) % 365 if y != 0 else (julian + 306) % 366) + 123
    y = _int32(y + quad * 4)
    quad = julian * 2141 // 65536

    year = _int32(y - 4800)
    month = (quad + 10) % 12 + 1
    day = (julian - 7834 * quad // 256) & UINT32_MASK
    return CalendarDate(year, month, day)


def encodeDate(calendar_date: CalendarDate | Iterable[int]) -> DayCount:
    """Convert a calendar date into the stored DATE representation.

    Args:
        calendar_date (:class:`.CalendarDate`): date to encode, or any ``(year, month, day)`` triple

    Returns:
        :class:`.DayCount`: Julian day count of `calendar_date`
    """
    year, month, day = calendar_date
    return DayCount(postgresDate2J(year, month, day))


def decodeDate(day_count: DayCount | int) -> CalendarDate:
    """Convert a stored DATE value into a calendar date."""
    return postgresJ2Date(int(day_count))


def daysInMonth(year: int, month: int) -> int:
    """Return the length of `month` in the proleptic Gregorian calendar."""
    if month == 2 and isleap(year):
        return 29
    return mdays[month]


def isValidCalendarDate(year: int, month: int, day: int) -> bool:
    """Check that `month` and `day` name a real day of the proleptic Gregorian calendar."""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= daysInMonth(year, month)


def encodeDateChecked(year: int, month: int, day: int) -> DayCount:
    """Validate a calendar date, then encode it.

    This is a strict alternative to :func:`.encodeDate`, which accepts anything.

    Raises:
        CalendarRangeError: if `month` or `day` is out of range

    Returns:
        :class:`.DayCount`: Julian day count of the date
    """
    if not isValidCalendarDate(year, month, day):
        msg = f"Invalid calendar date: year={year}, month={month}, day={day}"
        juliantimeLogError(msg)
        raise CalendarRangeError(msg)

    return DayCount(postgresDate2J(year, month, day))

from __future__ import annotations

# Third Party Imports
import pytest

# Juliantime Imports
from juliantime.time.constants import (
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    UINT64_MASK,
)
from juliantime.time.stardate import CalendarTime, DayCount, MicrosecondCount
from juliantime.time.timestamp import (
    dateFromTimestamp,
    decodeTimestamp,
    encodeTimestamp,
    extractJulianMicroseconds,
    timeOfDayMicroseconds,
    timestampFromDate,
    timestampFromHMSu,
)

# Local Imports
from .. import J2000_JULIAN_DATE, J2000_JULIAN_TIMESTAMP, TEST_JULIAN_DATE


def testConstants():
    """Microsecond constants match their definitions."""
    assert MICROSECONDS_PER_SECOND == 1_000_000
    assert MICROSECONDS_PER_MINUTE == 60_000_000
    assert MICROSECONDS_PER_HOUR == 3_600_000_000
    assert MICROSECONDS_PER_DAY == 86_400_000_000


def testTimestampFromDate():
    """Midnight of a day is the day count scaled by microseconds per day."""
    timestamp = timestampFromDate(DayCount(J2000_JULIAN_DATE))
    assert isinstance(timestamp, MicrosecondCount)
    assert timestamp == J2000_JULIAN_TIMESTAMP


def testDateFromTimestampTruncates():
    """Any time during a day maps back to that day."""
    midnight = J2000_JULIAN_TIMESTAMP
    assert dateFromTimestamp(midnight) == J2000_JULIAN_DATE
    assert dateFromTimestamp(midnight + MICROSECONDS_PER_DAY - 1) == J2000_JULIAN_DATE
    assert dateFromTimestamp(midnight + MICROSECONDS_PER_DAY) == J2000_JULIAN_DATE + 1
    assert isinstance(dateFromTimestamp(midnight), DayCount)


def testTimestampRoundTrip():
    """Converting a day to a timestamp and back is lossless."""
    for julian_date in range(0, 6_000_000, 7919):
        assert dateFromTimestamp(timestampFromDate(julian_date)) == julian_date
    last_whole_day = UINT64_MASK // MICROSECONDS_PER_DAY
    assert last_whole_day == 213_503_982
    assert dateFromTimestamp(timestampFromDate(last_whole_day)) == last_whole_day


def testTimestampFromDateWraps():
    """Days past the last whole day in 64 bits wrap around, like unsigned arithmetic."""
    first_wrapped_day = UINT64_MASK // MICROSECONDS_PER_DAY + 1
    wrapped = timestampFromDate(first_wrapped_day)
    assert wrapped == (first_wrapped_day * MICROSECONDS_PER_DAY) % 2**64
    assert dateFromTimestamp(wrapped) != first_wrapped_day
    assert dateFromTimestamp(timestampFromDate(2**32 - 1)) == 24_887_648


def testExtractJulianMicroseconds():
    """The raw microsecond count is returned as a plain integer."""
    timestamp = MicrosecondCount(J2000_JULIAN_TIMESTAMP + 42)
    extracted = extractJulianMicroseconds(timestamp)
    assert extracted == J2000_JULIAN_TIMESTAMP + 42
    assert type(extracted) is int


def testTimestampFromHMSu():
    """Each time-of-day field adds its scaled contribution."""
    timestamp = timestampFromHMSu(2020, 1, 1, 11, 11, 11, 123000)
    expected = TEST_JULIAN_DATE * MICROSECONDS_PER_DAY
    expected += 11 * MICROSECONDS_PER_HOUR + 11 * MICROSECONDS_PER_MINUTE + 11 * MICROSECONDS_PER_SECOND
    expected += 123000
    assert timestamp == expected
    assert timestampFromHMSu(2000, 1, 1, 0, 0, 0, 0) == J2000_JULIAN_TIMESTAMP


def testUncheckedTimeOfDay():
    """Out-of-range time fields simply shift the result."""
    assert timestampFromHMSu(2000, 1, 1, 24, 0, 0, 0) == timestampFromDate(J2000_JULIAN_DATE + 1)
    assert timestampFromHMSu(2000, 1, 1, 0, 90, 0, 0) == timestampFromHMSu(2000, 1, 1, 1, 30, 0, 0)
    assert timestampFromHMSu(2000, 1, 1, 0, 0, 0, MICROSECONDS_PER_SECOND) == timestampFromHMSu(
        2000, 1, 1, 0, 0, 1, 0
    )


def testTimeOfDayMicroseconds():
    """The remainder since midnight is recovered exactly."""
    timestamp = timestampFromHMSu(2020, 1, 1, 23, 59, 59, 999999)
    assert timeOfDayMicroseconds(timestamp) == MICROSECONDS_PER_DAY - 1
    assert timeOfDayMicroseconds(J2000_JULIAN_TIMESTAMP) == 0


@pytest.mark.parametrize(
    "calendar_time",
    [
        CalendarTime(2020, 1, 1, 11, 11, 11, 123000),
        CalendarTime(2000, 2, 29, 23, 59, 59, 999999),
        CalendarTime(1970, 1, 1),
        CalendarTime(-44, 3, 15, 12, 0, 0, 1),
    ],
)
def testCalendarTimeRoundTrip(calendar_time: CalendarTime):
    """Encoding a calendar time and decoding it gives back every field."""
    timestamp = encodeTimestamp(calendar_time)
    assert decodeTimestamp(timestamp) == calendar_time
    assert decodeTimestamp(timestamp).date == calendar_time.date


def testMixedTypesRejected():
    """Passing a timestamp where a day count belongs is a type error, and vice versa."""
    with pytest.raises(TypeError):
        timestampFromDate(MicrosecondCount(J2000_JULIAN_TIMESTAMP))
    with pytest.raises(TypeError):
        dateFromTimestamp(DayCount(J2000_JULIAN_DATE))

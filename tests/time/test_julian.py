from __future__ import annotations

# Standard Library Imports
from datetime import date, timedelta

# Third Party Imports
import pytest

# Juliantime Imports
from juliantime.common.exceptions import CalendarRangeError
from juliantime.time.julian import (
    daysInMonth,
    decodeDate,
    encodeDate,
    encodeDateChecked,
    isValidCalendarDate,
    postgresDate2J,
    postgresJ2Date,
)
from juliantime.time.stardate import CalendarDate, DayCount

# Local Imports
from .. import J2000_JULIAN_DATE, ORDINAL_TO_JULIAN_DATE, TEST_JULIAN_DATE, UNIX_EPOCH_JULIAN_DATE

KNOWN_DATES: list[tuple[tuple[int, int, int], int]] = [
    ((2000, 1, 1), J2000_JULIAN_DATE),
    ((1970, 1, 1), UNIX_EPOCH_JULIAN_DATE),
    ((2020, 1, 1), TEST_JULIAN_DATE),
    ((2000, 2, 29), 2451604),
    ((1900, 1, 1), 2415021),
    ((1900, 3, 1), 2415080),
    ((1858, 11, 17), 2400001),
    ((-4713, 11, 24), 0),
]


@pytest.mark.parametrize(("ymd", "julian_date"), KNOWN_DATES)
def testKnownValues(ymd: tuple[int, int, int], julian_date: int):
    """Check reference Julian day counts in both directions."""
    assert postgresDate2J(*ymd) == julian_date
    assert postgresJ2Date(julian_date) == CalendarDate(*ymd)
    assert encodeDate(ymd) == julian_date
    assert decodeDate(DayCount(julian_date)) == ymd


def testEncodeReturnsDayCount():
    """Encoding produces the nominal DATE type."""
    julian_date = encodeDate(CalendarDate(2000, 1, 1))
    assert isinstance(julian_date, DayCount)
    assert julian_date == J2000_JULIAN_DATE


def testMatchesProlepticGregorian():
    """Consecutive calendar days map to consecutive day counts across leap & century years."""
    start = date(1, 1, 1)
    for offset in range(0, 3_652_059, 173):
        day = start + timedelta(days=offset)
        expected = day.toordinal() + ORDINAL_TO_JULIAN_DATE
        assert postgresDate2J(day.year, day.month, day.day) == expected


@pytest.mark.parametrize("year", [1600, 1700, 1899, 1900, 1999, 2000, 2024, 2100, 2400])
def testRoundTripCalendarDates(year: int):
    """Every day of years near leap & century boundaries survives encoding and decoding."""
    for month in range(1, 13):
        for day in range(1, daysInMonth(year, month) + 1):
            calendar_date = CalendarDate(year, month, day)
            assert decodeDate(encodeDate(calendar_date)) == calendar_date


def testRoundTripDayCounts():
    """Decoding then encoding any day count gives back the same day count."""
    for julian_date in range(0, 6_000_000, 997):
        assert encodeDate(decodeDate(julian_date)) == julian_date

    for julian_date in range(J2000_JULIAN_DATE - 800, J2000_JULIAN_DATE + 800):
        assert encodeDate(decodeDate(julian_date)) == julian_date


def testNegativeYears():
    """Years before the common era still round trip."""
    for calendar_date in (CalendarDate(-44, 3, 15), CalendarDate(0, 2, 29), CalendarDate(-4000, 12, 31)):
        assert decodeDate(encodeDate(calendar_date)) == calendar_date


def testUnsignedWrapAround():
    """The day before Julian day zero wraps to the top of the unsigned 32-bit range."""
    assert postgresDate2J(-4713, 11, 23) == 2**32 - 1
    assert postgresJ2Date(2**32) == postgresJ2Date(0)


def testUncheckedComponents():
    """Out-of-range components are accepted and shift the result arithmetically."""
    assert postgresDate2J(2000, 13, 1) == postgresDate2J(2001, 1, 1)
    assert postgresDate2J(2000, 3, 0) == postgresDate2J(2000, 2, 29)
    assert postgresDate2J(2019, 2, 29) == postgresDate2J(2019, 3, 1)


class TestCheckedEncoding:
    """Test cases for the validating wrapper around the day codec."""

    def testDaysInMonth(self):
        """Month lengths follow the Gregorian leap rule."""
        assert daysInMonth(2000, 2) == 29
        assert daysInMonth(1900, 2) == 28
        assert daysInMonth(2024, 2) == 29
        assert daysInMonth(2023, 4) == 30
        assert daysInMonth(2023, 12) == 31

    def testValidDates(self):
        """Real dates are accepted and encode like the unchecked path."""
        assert isValidCalendarDate(2020, 2, 29)
        assert encodeDateChecked(2020, 2, 29) == encodeDate((2020, 2, 29))

    @pytest.mark.parametrize(
        "ymd",
        [(2000, 13, 1), (2000, 0, 1), (2000, 1, 0), (2019, 2, 29), (2023, 4, 31), (1900, 2, 29)],
    )
    def testInvalidDates(self, ymd: tuple[int, int, int], caplog: pytest.LogCaptureFixture):
        """Impossible dates raise after logging an error."""
        assert not isValidCalendarDate(*ymd)
        with pytest.raises(CalendarRangeError, match="Invalid calendar date"):
            encodeDateChecked(*ymd)
        assert caplog.records[-1].levelname == "ERROR"

    def testRangeErrorIsValueError(self):
        """Callers catching `ValueError` also catch range errors."""
        with pytest.raises(ValueError, match="month=13"):
            encodeDateChecked(2000, 13, 1)

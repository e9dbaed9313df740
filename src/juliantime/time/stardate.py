"""Defines :class:`.DayCount` & :class:`.MicrosecondCount` classes and the calendar value types.

The classes defined in this module rigidly differentiate between the stored DATE and
TIMESTAMP encodings. Both are plain unsigned integers, and a day count can easily be
mistaken for a microsecond count (or for any other integer) at a call site.

Subclassing `int` keeps them usable anywhere an integer is expected, while mixing the two
types in arithmetic or comparisons raises a `TypeError`:

.. code-block:: python

    day = DayCount(2451545)
    stamp = MicrosecondCount(211813488000000000)

    day + 1  # DayCount(2451546)
    day < stamp  # throws exception

Values are reduced to their unsigned width on construction, exactly like the fixed-width
fields they are stored in.
"""

from __future__ import annotations

# Standard Library Imports
from typing import NamedTuple

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.logger import juliantimeLogError
from .constants import (
    DATE_WIDTH,
    MICROSECONDS_PER_DAY,
    TIMESTAMP_WIDTH,
    UINT32_MASK,
    UINT64_MASK,
)


class CalendarDate(NamedTuple):
    """Unvalidated (year, month, day) triple."""

    year: int
    month: int
    day: int


class CalendarTime(NamedTuple):
    """Unvalidated calendar date and time of day, down to the microsecond."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0

    @property
    def date(self) -> CalendarDate:
        """:class:`.CalendarDate`: the date part of this calendar time."""
        return CalendarDate(self.year, self.month, self.day)


class _JulianInteger(int):
    """Fixed-width unsigned integer that refuses to mix with its sibling encodings."""

    WIDTH: int = 0
    MASK: int = 0

    def __new__(cls, value=0):
        """Reduce `value` to the unsigned width of this encoding."""
        cls._checkForeign(value)
        return super().__new__(cls, int(value) & cls.MASK)

    @classmethod
    def _checkForeign(cls, other):
        if isinstance(other, _JulianInteger) and not isinstance(other, cls):
            raise TypeError(
                f"{cls.__name__}: Cannot perform operations between {cls.__name__}/"
                f"{type(other).__name__} objects, use conversion methods.",
            )

    def __add__(self, other):
        """Offset this value by a plain integer, keeping the nominal type."""
        self._checkForeign(other)
        if not isinstance(other, int):
            return NotImplemented
        return type(self)(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        """Difference of two values of this type, or an offset by a plain integer."""
        self._checkForeign(other)
        if isinstance(other, type(self)):
            return int(self) - int(other)
        if not isinstance(other, int):
            return NotImplemented
        return type(self)(int(self) - int(other))

    def __rsub__(self, other):
        """."""
        self._checkForeign(other)
        if not isinstance(other, int):
            return NotImplemented
        return int(other) - int(self)

    def __eq__(self, other):
        """."""
        self._checkForeign(other)
        return int.__eq__(self, other)

    def __ne__(self, other):
        """."""
        self._checkForeign(other)
        return int.__ne__(self, other)

    def __lt__(self, other):
        """."""
        self._checkForeign(other)
        return int.__lt__(self, other)

    def __le__(self, other):
        """."""
        self._checkForeign(other)
        return int.__le__(self, other)

    def __gt__(self, other):
        """."""
        self._checkForeign(other)
        return int.__gt__(self, other)

    def __ge__(self, other):
        """."""
        self._checkForeign(other)
        return int.__ge__(self, other)

    def __hash__(self):
        """Override hash to return just the integer representation of the class."""
        return hash(int(self))

    def __str__(self):
        """Return the plain integer digits, so formatting behaves like `int`."""
        return str(int(self))

    def toBytes(self, byteorder: str | None = None) -> bytes:
        """Serialize into exactly :attr:`WIDTH` unsigned bytes.

        Args:
            byteorder (``str``, optional): ``"little"`` or ``"big"``. Defaults to the
                ``encoding.ByteOrder`` config value.

        Returns:
            ``bytes``: fixed-width serialization of this value
        """
        if byteorder is None:
            byteorder = BehavioralConfig.getConfig().encoding.ByteOrder
        return int(self).to_bytes(self.WIDTH, byteorder, signed=False)

    @classmethod
    def fromBytes(cls, data: bytes, byteorder: str | None = None):
        """Deserialize exactly :attr:`WIDTH` unsigned bytes.

        Args:
            data (``bytes``): fixed-width serialization
            byteorder (``str``, optional): ``"little"`` or ``"big"``. Defaults to the
                ``encoding.ByteOrder`` config value.

        Raises:
            ValueError: if `data` is not exactly :attr:`WIDTH` bytes long
        """
        if len(data) != cls.WIDTH:
            msg = f"{cls.__name__} requires exactly {cls.WIDTH} bytes, got {len(data)}"
            juliantimeLogError(msg)
            raise ValueError(msg)
        if byteorder is None:
            byteorder = BehavioralConfig.getConfig().encoding.ByteOrder
        return cls(int.from_bytes(data, byteorder, signed=False))


class DayCount(_JulianInteger):
    """Stored DATE value: unsigned 32-bit count of Julian days."""

    WIDTH = DATE_WIDTH
    MASK = UINT32_MASK

    @property
    def calendar_date(self) -> CalendarDate:
        """:class:`.CalendarDate`: decoded calendar date of this day count."""
        # Local Imports
        from .julian import decodeDate

        return decodeDate(self)

    @property
    def iso(self) -> str:
        """``str``: canonical ``YYYY-MM-DD`` text of this day count."""
        # Local Imports
        from .format import formatDate

        return formatDate(self)

    def __repr__(self):
        """Return a string representation of this :class:`.DayCount`."""
        return f"DayCount({int(self)}, ISO={self.iso})"


class MicrosecondCount(_JulianInteger):
    """Stored TIMESTAMP value: unsigned 64-bit count of Julian microseconds."""

    WIDTH = TIMESTAMP_WIDTH
    MASK = UINT64_MASK

    @property
    def day_count(self) -> DayCount:
        """:class:`.DayCount`: Julian day this timestamp falls on."""
        return DayCount(int(self) // MICROSECONDS_PER_DAY)

    @property
    def time_of_day_microseconds(self) -> int:
        """``int``: microseconds elapsed since midnight of :attr:`day_count`."""
        return int(self) % MICROSECONDS_PER_DAY

    @property
    def calendar_time(self) -> CalendarTime:
        """:class:`.CalendarTime`: decoded calendar date & time of this timestamp."""
        # Local Imports
        from .timestamp import decodeTimestamp

        return decodeTimestamp(self)

    @property
    def iso(self) -> str:
        """``str``: canonical ``YYYY-MM-DD HH:MM:SS.ffffff`` text of this timestamp."""
        # Local Imports
        from .format import formatTimestamp

        return formatTimestamp(self)

    def __repr__(self):
        """Return a string representation of this :class:`.MicrosecondCount`."""
        return f"MicrosecondCount({int(self)}, ISO={self.iso})"

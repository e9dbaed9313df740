"""Parse text into the stored DATE & TIMESTAMP representations.

Each entry point holds an ordered tuple of :class:`.Grammar` objects and tries them in turn,
stopping at the first match. A grammar only needs to match a prefix of the text, so
the order is a correctness contract: it must go from most restrictive to least restrictive.
Otherwise ``%F`` would happily consume the date part of ``2020-01-01T11:11:11-0500`` and drop
the rest.

Templates use the conversion specifiers of the reference calendar library:

==== =========================================================================
``%F`` ``%Y-%m-%d``: optionally signed 1-4 digit year, 1-2 digit month and day
``%T`` ``%H:%M:%S``: 1-2 digit fields, seconds take an optional 1-6 digit fraction
``%z`` ``+HH`` or ``-HH``, optionally followed by ``MM``
==== =========================================================================
"""

from __future__ import annotations

# Standard Library Imports
import re
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import TimeParseError
from ..common.logger import juliantimeLogDebug, juliantimeLogError
from .constants import (
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    UINT64_MASK,
)
from .julian import decodeDate, encodeDate, isValidCalendarDate, postgresDate2J
from .stardate import DayCount, MicrosecondCount

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Sequence
    from typing import Final


_SPECIFIERS: Final[dict[str, str]] = {
    "%F": r"(?P<year>[+-]?\d{1,4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})",
    "%T": r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})(?:\.(?P<fraction>\d{1,6}))?",
    "%z": r"(?P<sign>[+-])(?P<offset_hours>\d{2})(?P<offset_minutes>\d{2})?",
}


def _compileTemplate(template: str) -> re.Pattern:
    """Translate a grammar template into a compiled regular expression."""
    pieces = []
    for token in re.split(r"(%[A-Za-z])", template):
        if token in _SPECIFIERS:
            pieces.append(_SPECIFIERS[token])
        elif token.startswith("%"):
            raise ValueError(f"Unsupported conversion specifier {token!r} in {template!r}")
        else:
            pieces.append(re.escape(token))
    return re.compile("".join(pieces), re.ASCII)


class Grammar:
    """One textual date/time pattern attempted by the parser."""

    def __init__(self, template: str):
        """Compile the grammar for `template`.

        Args:
            template (``str``): format template built from ``%F``, ``%T``, ``%z`` and literals
        """
        self.template = template
        self.pattern = _compileTemplate(template)

    def match(self, text: str) -> int | None:
        """Attempt to read an instant from the start of `text`.

        Args:
            text (``str``): text to parse

        Returns:
            ``int | None``: the instant as zero-offset Julian microseconds, or ``None`` if this
            grammar does not match or the matched fields are not a valid date & time
        """
        found = self.pattern.match(text)
        if found is None:
            return None

        fields = found.groupdict()
        year, month, day = int(fields["year"]), int(fields["month"]), int(fields["day"])
        if not isValidCalendarDate(year, month, day):
            return None

        hour = int(fields.get("hour") or 0)
        minute = int(fields.get("minute") or 0)
        second = int(fields.get("second") or 0)
        if hour > 23 or minute > 59 or second > 59:
            return None
        microsecond = int((fields.get("fraction") or "").ljust(6, "0"))

        offset = 0
        if fields.get("sign"):
            offset_minutes = int(fields["offset_minutes"] or 0)
            if offset_minutes > 59:
                return None
            offset = int(fields["offset_hours"]) * MICROSECONDS_PER_HOUR
            offset += offset_minutes * MICROSECONDS_PER_MINUTE
            if fields["sign"] == "-":
                offset = -offset

        instant = postgresDate2J(year, month, day) * MICROSECONDS_PER_DAY
        instant += hour * MICROSECONDS_PER_HOUR + minute * MICROSECONDS_PER_MINUTE
        instant += second * MICROSECONDS_PER_SECOND + microsecond
        # Normalize to a zero offset, the offset itself is not retained
        instant -= offset
        if not 0 <= instant <= UINT64_MASK:
            return None

        return instant

    def __repr__(self):
        """Return a string representation of this :class:`.Grammar`."""
        return f"Grammar({self.template!r})"


DATE_GRAMMARS: Final[tuple[Grammar, ...]] = (
    Grammar("%F"),  # 2020-01-01
)
"""``tuple``: grammars tried by :func:`.parseDate`, in order."""

# WARNING: Must go from most restrictive to least restrictive!
TIMESTAMP_GRAMMARS: Final[tuple[Grammar, ...]] = (
    Grammar("%F %T%z"),  # 2020-01-01 11:11:11.123-0500
    Grammar("%F %TZ"),  # 2020-01-01 11:11:11.123Z
    Grammar("%F %T"),  # 2020-01-01 11:11:11.123
    Grammar("%FT%T%z"),  # 2020-01-01T11:11:11.123-0500
    Grammar("%FT%TZ"),  # 2020-01-01T11:11:11.123Z
    Grammar("%FT%T"),  # 2020-01-01T11:11:11.123
    Grammar("%F"),  # 2020-01-01
)
"""``tuple``: grammars tried by :func:`.parseTimestamp`, in order."""


def _firstMatch(grammars: Sequence[Grammar], text: str) -> tuple[Grammar, int] | None:
    """Return the first grammar that matches `text` along with the instant it read."""
    if not isinstance(text, str):
        return None

    for grammar in grammars:
        instant = grammar.match(text)
        if instant is not None:
            return grammar, instant

    return None


def findTimestampGrammar(text: str) -> Grammar | None:
    """Return the timestamp grammar that :func:`.parseTimestamp` would use for `text`."""
    matched = _firstMatch(TIMESTAMP_GRAMMARS, text)
    return None if matched is None else matched[0]


def parseDate(text: str) -> tuple[bool, DayCount]:
    """Attempt to parse `text` into the stored DATE representation.

    Args:
        text (``str``): the text to be parsed

    Returns:
        ``tuple``: ``(True, result)`` if the parse succeeded, ``(False, DayCount(0))`` otherwise
    """
    matched = _firstMatch(DATE_GRAMMARS, text)
    if matched is None:
        juliantimeLogDebug(f"Unable to parse date from {text!r}")
        return False, DayCount(0)

    _, instant = matched
    julian_date = encodeDate(decodeDate(instant // MICROSECONDS_PER_DAY))
    return True, julian_date


def parseTimestamp(text: str) -> tuple[bool, MicrosecondCount]:
    """Attempt to parse `text` into the stored TIMESTAMP representation.

    The matched instant is floored to a whole day, which is decoded and re-encoded through the
    day codec. The time of day is then added back on as microseconds since midnight.

    Args:
        text (``str``): the text to be parsed

    Returns:
        ``tuple``: ``(True, result)`` if the parse succeeded, ``(False, MicrosecondCount(0))`` otherwise
    """
    matched = _firstMatch(TIMESTAMP_GRAMMARS, text)
    if matched is None:
        juliantimeLogDebug(f"Unable to parse timestamp from {text!r}")
        return False, MicrosecondCount(0)

    _, instant = matched
    days, remaining_us = divmod(instant, MICROSECONDS_PER_DAY)
    julian_date = encodeDate(decodeDate(days))
    day_us = int(julian_date) * MICROSECONDS_PER_DAY
    return True, MicrosecondCount(day_us + remaining_us)


def parseDateOrRaise(text: str) -> DayCount:
    """Parse `text` like :func:`.parseDate`, raising instead of returning a flag.

    Raises:
        TimeParseError: if `text` does not match the date grammar
    """
    parse_ok, julian_date = parseDate(text)
    if not parse_ok:
        msg = f"Invalid date text: {text!r}"
        juliantimeLogError(msg)
        raise TimeParseError(msg)

    return julian_date


def parseTimestampOrRaise(text: str) -> MicrosecondCount:
    """Parse `text` like :func:`.parseTimestamp`, raising instead of returning a flag.

    Raises:
        TimeParseError: if `text` does not match any timestamp grammar
    """
    parse_ok, julian_timestamp = parseTimestamp(text)
    if not parse_ok:
        msg = f"Invalid timestamp text: {text!r}"
        juliantimeLogError(msg)
        raise TimeParseError(msg)

    return julian_timestamp

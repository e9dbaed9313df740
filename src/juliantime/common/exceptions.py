"""Contains all the custom-defined exceptions used in juliantime."""

from __future__ import annotations


class JuliantimeError(Exception):
    """Base exception for errors raised by juliantime."""


class CalendarRangeError(JuliantimeError, ValueError):
    """Exception indicating a calendar component is outside of its valid range."""


class TimeParseError(JuliantimeError, ValueError):
    """Exception indicating text did not match any of the accepted date/time grammars."""

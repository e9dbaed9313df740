"""Fixed constants shared by the Julian date & timestamp codecs."""

from __future__ import annotations

# Time-of-day conversion constants
MICROSECONDS_PER_SECOND: int = 1000 * 1000
MICROSECONDS_PER_MINUTE: int = 60 * MICROSECONDS_PER_SECOND
MICROSECONDS_PER_HOUR: int = 60 * MICROSECONDS_PER_MINUTE
MICROSECONDS_PER_DAY: int = 24 * MICROSECONDS_PER_HOUR

# Fixed widths of the stored encodings, in bytes
DATE_WIDTH: int = 4
TIMESTAMP_WIDTH: int = 8

UINT32_MASK: int = (1 << 32) - 1
"""``int``: mask reducing an integer to its unsigned 32-bit value."""

UINT64_MASK: int = (1 << 64) - 1
"""``int``: mask reducing an integer to its unsigned 64-bit value."""

JULIAN_DAY_J2000: int = 2451545
"""``int``: Julian day count of 2000-01-01."""

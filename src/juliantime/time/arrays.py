"""Vectorized versions of the Julian day & timestamp codecs.

These operate element-wise on array-likes and always agree with the scalar functions in
:mod:`.julian` and :mod:`.timestamp`. Intermediate values are held as ``int64`` and reduced
with explicit masks, so the unsigned 32-bit wrap-around of the scalar codec is preserved.
"""

from __future__ import annotations

# Third Party Imports
import numpy as np

# Local Imports
from .constants import MICROSECONDS_PER_DAY, UINT32_MASK


def _truncDiv(numerator: np.ndarray, denominator: int) -> np.ndarray:
    """Element-wise integer division that truncates toward zero."""
    return np.sign(numerator) * (np.abs(numerator) // denominator)


def _int32(values: np.ndarray) -> np.ndarray:
    """Reinterpret the low 32 bits of each element as a signed integer, kept as ``int64``."""
    values = values & UINT32_MASK
    return np.where(values >= 1 << 31, values - (1 << 32), values)


def encodeDates(years, months, days) -> np.ndarray:
    """Serialize calendar dates to Julian day counts.

    Args:
        years (``array_like``): calendar years
        months (``array_like``): months of the year (1-12)
        days (``array_like``): days of the month (1-31)

    Returns:
        ``ndarray``: ``uint32`` Julian day counts, broadcast to a common shape
    """
    year = _int32(np.asarray(years, dtype=np.int64))
    month = np.asarray(months, dtype=np.int64) & UINT32_MASK
    day = np.asarray(days, dtype=np.int64) & UINT32_MASK

    late = month > 2
    month = np.where(late, month + 1, month + 13)
    year = _int32(np.where(late, year + 4800, year + 4799))

    century = _truncDiv(year, 100) & UINT32_MASK
    julian = (year * 365 - 32167) & UINT32_MASK
    julian = (julian + ((_truncDiv(year, 4) - century) & UINT32_MASK) + century // 4) & UINT32_MASK
    julian = (julian + ((7834 * month) & UINT32_MASK) // 256 + day) & UINT32_MASK
    return julian.astype(np.uint32)


def decodeDates(day_counts) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """De-serialize Julian day counts to calendar dates.

    Args:
        day_counts (``array_like``): Julian day counts

    Returns:
        ``tuple``: ``int32`` years, ``uint32`` months and ``uint32`` days
    """
    julian = ((np.asarray(day_counts, dtype=np.int64) & UINT32_MASK) + 32044) & UINT32_MASK

    quad = julian // 146097
    extra = ((julian - quad * 146097) * 4 + 3) & UINT32_MASK

    julian = (julian + 60 + quad * 3 + extra // 146097) & UINT32_MASK
    quad = julian // 1461
    julian = (julian - quad * 1461) & UINT32_MASK
    y = _int32(((julian * 4) & UINT32_MASK) // 1461)
    julian = np.where(y != 0, (julian + 305) % 365, (julian + 306) % 366) + 123
    y = _int32(y + quad * 4)
    quad = julian * 2141 // 65536

    year = _int32(y - 4800).astype(np.int32)
    month = ((quad + 10) % 12 + 1).astype(np.uint32)
    day = ((julian - 7834 * quad // 256) & UINT32_MASK).astype(np.uint32)
    return year, month, day


def timestampsFromDates(day_counts) -> np.ndarray:
    """Return the ``uint64`` timestamps of midnight on each Julian day."""
    days = np.asarray(day_counts, dtype=np.uint64) & np.uint64(UINT32_MASK)
    return days * np.uint64(MICROSECONDS_PER_DAY)


def datesFromTimestamps(timestamps) -> np.ndarray:
    """Return the ``uint32`` Julian day that each timestamp falls on."""
    return (np.asarray(timestamps, dtype=np.uint64) // np.uint64(MICROSECONDS_PER_DAY)).astype(np.uint32)

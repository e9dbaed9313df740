"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_PATH = Path("behavior/custom_behavior.config")
BAD_BYTE_ORDER_CONFIG_PATH = Path("behavior/bad_byte_order.config")

# Reference Julian day counts
J2000_JULIAN_DATE: int = 2451545
UNIX_EPOCH_JULIAN_DATE: int = 2440588
TEST_JULIAN_DATE: int = 2458850
"""``int``: Julian day count of 2020-01-01."""

ORDINAL_TO_JULIAN_DATE: int = 1721425
"""``int``: difference between a Julian day count and ``datetime.date.toordinal()``."""

J2000_JULIAN_TIMESTAMP: int = 211813488000000000

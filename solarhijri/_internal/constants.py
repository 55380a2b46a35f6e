"""Internal constants for solarhijri.

The astronomical constants and tables below anchor the conversion
arithmetic to 1 Farvardin 1348 (1969-03-21). Changing any of them shifts
every converted date. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Mean tropical year in days, valid from 1380 AP (2000 AD)
YEAR_LENGTH: float = 365.24218956

# Secular shortening of the year, applied per elapsed day
YEAR_LENGTH_CORRECTION: float = 0.00000006152

# Day 0 of the internal day count is 287 days before the Unix epoch
EPOCH_DAY_OFFSET: int = 287

# Internal year 0 is 1348 AP
EPOCH_YEAR: int = 1348

# Offset from a Persian year to the observation-year numbering of the cycles
REFERENCE_YEAR_OFFSET: int = 2346

GRAND_CYCLE_YEARS: int = 2820
SUB_CYCLE_YEARS: int = 128

# Leap positions within a 128-year sub-cycle; the trailing 0 is the last slot
LEAP_MARKERS: tuple[int, ...] = (
    5, 9, 13, 17, 21, 25, 29,
    34, 38, 42, 46, 50, 54, 58, 62,
    67, 71, 75, 79, 83, 87, 91, 95,
    100, 104, 108, 112, 116, 120, 124, 0,
)

# Days elapsed before each month (index 0 = Farvardin)
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,    # Farvardin
    31,   # Ordibehesht
    62,   # Khordad
    93,   # Tir
    124,  # Mordad
    155,  # Shahrivar
    186,  # Mehr
    216,  # Aban
    246,  # Azar
    276,  # Dey
    306,  # Bahman
    336,  # Esfand
)

# Legacy short-year affordance: 83 -> 1383
SHORT_YEAR_LIMIT: int = 1300
SHORT_YEAR_BASE: int = 1300

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "YEAR_LENGTH",
    "YEAR_LENGTH_CORRECTION",
    "EPOCH_DAY_OFFSET",
    "EPOCH_YEAR",
    "REFERENCE_YEAR_OFFSET",
    "GRAND_CYCLE_YEARS",
    "SUB_CYCLE_YEARS",
    "LEAP_MARKERS",
    "DAYS_BEFORE_MONTH",
    "SHORT_YEAR_LIMIT",
    "SHORT_YEAR_BASE",
    "MAX_UTC_OFFSET_SECONDS",
]

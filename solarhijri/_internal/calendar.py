"""Calendar arithmetic for solarhijri.

This module converts between local epoch seconds (epoch seconds already
shifted by the zone's UTC offset) and Solar Hijri date components.

Internal day 0 is 287 days before 1970-01-01 and internal year 0 is
1348 AP. Year ``k`` starts after internal day ``round(k * YEAR_LENGTH)``,
so its length is 365 or 366 days depending on how the fractional part
of the accumulated year length rounds.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import math

from solarhijri._internal.constants import (
    DAYS_BEFORE_MONTH,
    EPOCH_DAY_OFFSET,
    EPOCH_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SHORT_YEAR_BASE,
    SHORT_YEAR_LIMIT,
    YEAR_LENGTH,
    YEAR_LENGTH_CORRECTION,
)

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() rounds halves to even, which would move year
    boundaries that fall exactly on a half day.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-365.5)
        -366
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def year_start(internal_year: int) -> int:
    """Return the internal day number preceding the first day of a year."""
    return round_half_away(internal_year * YEAR_LENGTH)


def _internal_year_length(internal_year: int) -> int:
    return year_start(internal_year + 1) - year_start(internal_year)


def days_in_year(year: int) -> int:
    """Return the number of days in a Persian year.

    Args:
        year: The Persian year.

    Returns:
        366 for long years, 365 otherwise.

    Examples:
        >>> days_in_year(1403)
        366
        >>> days_in_year(1404)
        365
    """
    return _internal_year_length(year - EPOCH_YEAR)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Months 1-6 have 31 days, months 7-11 have 30, and Esfand takes the
    rest of the year (29 or 30 days).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 12:
        return days_in_year(year) - DAYS_BEFORE_MONTH[11]
    return DAYS_BEFORE_MONTH[month] - DAYS_BEFORE_MONTH[month - 1]


def day_of_year_to_month_day(day_of_year: int) -> tuple[int, int]:
    """Convert a 1-based day of the year to (month, day).

    Examples:
        >>> day_of_year_to_month_day(1)
        (1, 1)
        >>> day_of_year_to_month_day(287)
        (10, 11)
        >>> day_of_year_to_month_day(366)
        (12, 30)
    """
    month = 1
    while month < 12 and day_of_year > DAYS_BEFORE_MONTH[month]:
        month += 1
    return (month, day_of_year - DAYS_BEFORE_MONTH[month - 1])


def month_day_to_day_of_year(month: int, day: int) -> int:
    """Convert (month, day) to a 1-based day of the year."""
    return day + DAYS_BEFORE_MONTH[month - 1]


def local_seconds_to_fields(
    local_seconds: int,
) -> tuple[int, int, int, int, int, int, int]:
    """Convert local epoch seconds to Solar Hijri components.

    Args:
        local_seconds: Epoch seconds plus the zone's UTC offset.

    Returns:
        Tuple of (year, month, day, hour, minute, second, day_of_year).

    Examples:
        >>> local_seconds_to_fields(0)
        (1348, 10, 11, 0, 0, 0, 287)
    """
    second = local_seconds % SECONDS_PER_MINUTE
    minute = local_seconds % SECONDS_PER_HOUR // SECONDS_PER_MINUTE
    hour = local_seconds % SECONDS_PER_DAY // SECONDS_PER_HOUR

    days = local_seconds // SECONDS_PER_DAY + EPOCH_DAY_OFFSET
    years = math.floor(days / YEAR_LENGTH - days * YEAR_LENGTH_CORRECTION)
    day_of_year = days - year_start(years)

    # Day 0 is the last day of the preceding year
    while day_of_year < 1:
        years -= 1
        day_of_year = days - year_start(years)
        logger.debug("day %d moved back to internal year %d", days, years)
    while day_of_year > _internal_year_length(years):
        day_of_year -= _internal_year_length(years)
        years += 1
        logger.debug("day %d moved forward to internal year %d", days, years)

    month, day = day_of_year_to_month_day(day_of_year)
    return (years + EPOCH_YEAR, month, day, hour, minute, second, day_of_year)


def expand_short_year(year: int) -> int:
    """Expand a truncated year such as 83 to 1383.

    Examples:
        >>> expand_short_year(83)
        1383
        >>> expand_short_year(1383)
        1383
    """
    if year < SHORT_YEAR_LIMIT:
        return year + SHORT_YEAR_BASE
    return year


def fields_to_local_seconds(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Convert Solar Hijri components to local epoch seconds.

    Components are not validated here; see
    solarhijri._internal.validation.validate_components.

    Examples:
        >>> fields_to_local_seconds(1348, 10, 11)
        0
    """
    seconds = second + minute * SECONDS_PER_MINUTE + hour * SECONDS_PER_HOUR
    day_of_year = month_day_to_day_of_year(month, day)
    total_days = day_of_year + year_start(year - EPOCH_YEAR) - EPOCH_DAY_OFFSET
    return seconds + total_days * SECONDS_PER_DAY


__all__ = [
    "round_half_away",
    "year_start",
    "days_in_year",
    "days_in_month",
    "day_of_year_to_month_day",
    "month_day_to_day_of_year",
    "local_seconds_to_fields",
    "expand_short_year",
    "fields_to_local_seconds",
]

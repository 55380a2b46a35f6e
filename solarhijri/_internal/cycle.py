"""Leap-year cycle arithmetic for the Solar Hijri calendar.

The leap rule is a 2820-year grand cycle made of 128-year sub-cycles.
Within each sub-cycle, the positions listed in LEAP_MARKERS are leap
years. Years are first translated into the observation-year numbering
(``year + 2346``) on which the cycle tables are defined.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from solarhijri._internal.constants import (
    GRAND_CYCLE_YEARS,
    LEAP_MARKERS,
    REFERENCE_YEAR_OFFSET,
    SUB_CYCLE_YEARS,
)

# Ascending part of the marker table, without the trailing last-slot marker
_ASCENDING_MARKERS = LEAP_MARKERS[:-1]


def reference_offset(year: int) -> int:
    """Translate a Persian year into observation-year numbering.

    Examples:
        >>> reference_offset(1403)
        3749
    """
    return year + REFERENCE_YEAR_OFFSET


def leap_slot(year: int) -> int | None:
    """Return which leap slot of its sub-cycle a year occupies.

    Args:
        year: The Persian year.

    Returns:
        The 1-based slot number (1-31) for leap years, or None for
        common years. Slot 1 is a leap year like any other.

    Examples:
        >>> leap_slot(1399)
        7
        >>> leap_slot(1375)
        1
        >>> leap_slot(1403) is None
        True
    """
    position = reference_offset(year) % GRAND_CYCLE_YEARS % SUB_CYCLE_YEARS
    try:
        return LEAP_MARKERS.index(position) + 1
    except ValueError:
        return None


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year under the 2820-year cycle.

    Examples:
        >>> is_leap_year(1399)
        True
        >>> is_leap_year(1402)
        False
    """
    return leap_slot(year) is not None


def _leaps_before(position: int) -> int:
    """Index of the first ascending marker at or after a sub-cycle position.

    Positions past the last ascending marker (125-127) are preceded by
    all of them.
    """
    for index, marker in enumerate(_ASCENDING_MARKERS):
        if marker >= position:
            return index
    return len(_ASCENDING_MARKERS)


def day_of_week(year: int, day_of_year: int = 0) -> int:
    """Return the weekday of a day of the year.

    Args:
        year: The Persian year.
        day_of_year: 1-based day of the year. 0 is treated like 1.

    Returns:
        Weekday index 0-6, where 0 is Saturday (Shanbeh).

    Examples:
        >>> day_of_week(1403, 1)  # 1403-01-01 was a Wednesday
        4
    """
    rasad = reference_offset(year)
    grand_cycles, in_grand = divmod(rasad, GRAND_CYCLE_YEARS)
    sub_cycles, in_sub = divmod(in_grand, SUB_CYCLE_YEARS)

    year_start = (
        (grand_cycles + 1) * 3
        + sub_cycles * 5
        + in_sub
        + _leaps_before(in_sub)
    )
    offset = day_of_year - 1 if day_of_year > 0 else 0
    return (year_start + offset) % 7


def week_of_year(year: int, day_of_year: int) -> int:
    """Return the week number of a day of the year.

    Weeks start on Saturday. The distance from the first Saturday is
    taken in absolute value before rounding up, so days preceding the
    first Saturday count forward from it.

    Examples:
        >>> week_of_year(1403, 4)  # first Saturday of 1403
        1
        >>> week_of_year(1403, 11)
        2
    """
    days_before_saturday = (7 - day_of_week(year, 1)) % 7
    distance = day_of_year - days_before_saturday
    return math.ceil(abs(distance) / 7)


__all__ = [
    "reference_offset",
    "leap_slot",
    "is_leap_year",
    "day_of_week",
    "week_of_year",
]

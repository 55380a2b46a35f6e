"""Conversion between instants and Solar Hijri dates.

Examples:
    >>> from solarhijri.convert import to_calendar_date, to_instant
    >>> from solarhijri.units import ZoneContext

    >>> date = to_calendar_date(1710892800, ZoneContext.utc())
    >>> date
    CalendarDate(1403, 1, 1, 0, 0, 0)
    >>> to_instant(date, ZoneContext.utc())
    1710892800
"""

from __future__ import annotations

from solarhijri.convert.epoch import (
    components_to_instant,
    to_calendar_date,
    to_instant,
    to_local_seconds,
)

__all__ = [
    "to_local_seconds",
    "to_calendar_date",
    "components_to_instant",
    "to_instant",
]

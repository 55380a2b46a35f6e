"""Epoch conversion for Solar Hijri dates.

This module provides the public entry points of the conversion core:

Functions:
    to_local_seconds: Shift an instant by its zone offset.
    to_calendar_date: Convert an instant to a CalendarDate.
    to_instant: Convert a CalendarDate back to an instant.
    components_to_instant: Convert raw components to an instant.

The Unix epoch (instant 0) is 1348-10-11 00:00:00 in UTC.

Examples:
    >>> from solarhijri.units import ZoneContext
    >>> to_calendar_date(0, ZoneContext.utc())
    CalendarDate(1348, 10, 11, 0, 0, 0)

    >>> to_instant(CalendarDate(1348, 10, 11), ZoneContext.utc())
    0
"""

from __future__ import annotations

import logging

from solarhijri._internal.calendar import expand_short_year as _expand
from solarhijri._internal.calendar import fields_to_local_seconds
from solarhijri._internal.validation import validate_components
from solarhijri.core.date import CalendarDate
from solarhijri.units.zone import ZoneContext, ZoneLike, resolve_zone_provider

logger = logging.getLogger(__name__)


def _context_at(zone: ZoneLike, instant: int) -> ZoneContext:
    if isinstance(zone, ZoneContext):
        return zone
    return resolve_zone_provider(zone).lookup(instant)


def to_local_seconds(instant: int, zone: ZoneLike = None) -> int:
    """Shift an instant into local seconds.

    Args:
        instant: Seconds since the Unix epoch (UTC).
        zone: A ZoneContext, ZoneProvider, zone name, or None for the
            configured default zone.

    Returns:
        The instant plus the UTC offset in effect at that instant.
    """
    return instant + _context_at(zone, instant).offset_seconds


def to_calendar_date(instant: int, zone: ZoneLike = None) -> CalendarDate:
    """Convert an instant to a CalendarDate.

    Args:
        instant: Seconds since the Unix epoch (UTC).
        zone: A ZoneContext, ZoneProvider, zone name, or None for the
            configured default zone.

    Returns:
        The Solar Hijri date and time at the instant.

    Raises:
        ZoneUnavailableError: If the zone service cannot answer.

    Examples:
        >>> from solarhijri.units import ZoneContext
        >>> to_calendar_date(1742515200, ZoneContext.utc())
        CalendarDate(1404, 1, 1, 0, 0, 0)
    """
    return CalendarDate.from_local_seconds(to_local_seconds(instant, zone))


def components_to_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    zone: ZoneLike = None,
    *,
    expand_short_year: bool | None = None,
) -> int:
    """Convert Solar Hijri components to an instant.

    The zone is first looked up at the local seconds read as UTC, then
    again at the instant that offset gives. When the two answers differ
    (near a DST transition) the second offset is used.

    Args:
        year: The Persian year.
        month: The month (1-12).
        day: The day of the month.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        zone: A ZoneContext, ZoneProvider, zone name, or None for the
            configured default zone.
        expand_short_year: Read years below 1300 as truncated (83 ->
            1383). None uses the configured default.

    Returns:
        Seconds since the Unix epoch (UTC).

    Raises:
        InvalidDateError: If any component is out of range.
        ZoneUnavailableError: If the zone service cannot answer.

    Examples:
        >>> from solarhijri.units import ZoneContext
        >>> components_to_instant(1383, 12, 30, 13, 45, 25, ZoneContext.utc())
        1111326325
    """
    if expand_short_year is None:
        from solarhijri.config import settings

        expand_short_year = settings.EXPAND_SHORT_YEARS
    if expand_short_year:
        expanded = _expand(year)
        if expanded != year:
            logger.debug("short year %d read as %d", year, expanded)
        year = expanded

    validate_components(year, month, day, hour, minute, second)

    local_seconds = fields_to_local_seconds(year, month, day, hour, minute, second)
    provider = zone if isinstance(zone, ZoneContext) else resolve_zone_provider(zone)
    context = _context_at(provider, local_seconds)
    instant = local_seconds - context.offset_seconds
    corrected = _context_at(provider, instant)
    if corrected.offset_seconds != context.offset_seconds:
        logger.debug(
            "offset at %d changed from %d to %d",
            instant, context.offset_seconds, corrected.offset_seconds,
        )
        instant = local_seconds - corrected.offset_seconds
    return instant


def to_instant(
    date: CalendarDate,
    zone: ZoneLike = None,
    *,
    expand_short_year: bool | None = None,
) -> int:
    """Convert a CalendarDate to an instant.

    See components_to_instant for the meaning of the arguments.

    Examples:
        >>> from solarhijri.units import ZoneContext
        >>> to_instant(CalendarDate(1404, 1, 1), ZoneContext.from_string("+03:30"))
        1742502600
    """
    return components_to_instant(
        *date.as_tuple(), zone, expand_short_year=expand_short_year
    )


__all__ = [
    "to_local_seconds",
    "to_calendar_date",
    "components_to_instant",
    "to_instant",
]

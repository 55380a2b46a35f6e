"""Calendar facade binding an instant to its zone and Solar Hijri date.

The instant is the single source of truth: the zone context and the
calendar date are derived from it on first access and cached for the
lifetime of the (immutable) Calendar.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from solarhijri.core.date import CalendarDate
from solarhijri.format.locale import PERSIAN, Locale
from solarhijri.units.zone import (
    ZoneContext,
    ZoneLike,
    ZoneProvider,
    resolve_zone_provider,
)

logger = logging.getLogger(__name__)


class Calendar:
    """An instant seen through the Solar Hijri calendar.

    A Calendar owns one instant (seconds since the Unix epoch) and a
    zone provider. The ZoneContext for the instant and the CalendarDate
    are computed lazily and cached.

    Examples:
        >>> cal = Calendar(0, "UTC")
        >>> cal.date
        CalendarDate(1348, 10, 11, 0, 0, 0)
        >>> cal.format("l j F Y")
        'پنج شنبه 11 دی 1348'

        >>> cal = Calendar.from_components(1383, 12, 30, 13, 45, 25, "UTC")
        >>> cal.instant
        1111326325
    """

    __slots__ = ("_instant", "_provider", "_zone", "_date")

    def __init__(self, instant: int, zone: ZoneLike = None) -> None:
        """Create a Calendar for an explicit instant.

        Args:
            instant: Seconds since the Unix epoch (UTC).
            zone: A ZoneContext, ZoneProvider, zone name, or None for the
                configured default zone.

        Raises:
            TypeError: If instant is not an integer.
            ZoneUnavailableError: If a zone name cannot be resolved.
        """
        if not isinstance(instant, int) or isinstance(instant, bool):
            raise TypeError(f"instant must be an integer, got {type(instant).__name__}")

        self._instant: int = instant
        self._provider: ZoneProvider = resolve_zone_provider(zone)
        self._zone: ZoneContext | None = None
        self._date: CalendarDate | None = None

    @classmethod
    def now(
        cls,
        zone: ZoneLike = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> Calendar:
        """Return a Calendar for the current instant.

        Args:
            zone: A ZoneContext, ZoneProvider, zone name, or None for the
                configured default zone.
            clock: Source of the current epoch time in seconds.
        """
        return cls(int(clock()), zone)

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        zone: ZoneLike = None,
        *,
        expand_short_year: bool | None = None,
    ) -> Calendar:
        """Create a Calendar from Solar Hijri components.

        Raises:
            InvalidDateError: If any component is out of range.
            ZoneUnavailableError: If the zone service cannot answer.

        Examples:
            >>> Calendar.from_components(1403, 1, 1, zone="+03:30").instant
            1710880200
        """
        from solarhijri.convert.epoch import components_to_instant

        provider = resolve_zone_provider(zone)
        instant = components_to_instant(
            year,
            month,
            day,
            hour,
            minute,
            second,
            provider,
            expand_short_year=expand_short_year,
        )
        logger.debug(
            "components %d-%d-%d %d:%d:%d resolved to instant %d",
            year, month, day, hour, minute, second, instant,
        )
        return cls(instant, provider)

    @classmethod
    def from_date(
        cls,
        date: CalendarDate,
        zone: ZoneLike = None,
        *,
        expand_short_year: bool | None = None,
    ) -> Calendar:
        """Create a Calendar from a CalendarDate."""
        return cls.from_components(
            *date.as_tuple(), zone, expand_short_year=expand_short_year
        )

    @property
    def instant(self) -> int:
        """Return the instant in seconds since the Unix epoch."""
        return self._instant

    @property
    def timestamp(self) -> int:
        """Alias of instant."""
        return self._instant

    @property
    def provider(self) -> ZoneProvider:
        return self._provider

    @property
    def zone(self) -> ZoneContext:
        """Return the zone context in effect at the instant.

        Raises:
            ZoneUnavailableError: If the zone service cannot answer.
        """
        if self._zone is None:
            self._zone = self._provider.lookup(self._instant)
        return self._zone

    @property
    def local_seconds(self) -> int:
        """Return the instant shifted by the zone's UTC offset."""
        return self._instant + self.zone.offset_seconds

    @property
    def date(self) -> CalendarDate:
        """Return the Solar Hijri date and time at the instant."""
        if self._date is None:
            self._date = CalendarDate.from_local_seconds(self.local_seconds)
        return self._date

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.date.hour

    @property
    def minute(self) -> int:
        return self.date.minute

    @property
    def second(self) -> int:
        return self.date.second

    @property
    def day_of_year(self) -> int:
        return self.date.day_of_year

    @property
    def weekday(self) -> int:
        """Return the weekday (0=Saturday, 6=Friday)."""
        return self.date.weekday

    @property
    def week_of_year(self) -> int:
        return self.date.week_of_year

    @property
    def is_leap_year(self) -> bool:
        return self.date.is_leap_year

    def replace_instant(self, instant: int) -> Calendar:
        """Return a Calendar for another instant with the same zone provider."""
        return Calendar(instant, self._provider)

    def format(
        self,
        template: str,
        *,
        decorate: bool | None = None,
        locale: Locale = PERSIAN,
    ) -> str:
        """Render this Calendar through a date()-style template.

        Args:
            template: See solarhijri.format.template for the directives.
            decorate: Replace ASCII digits with the locale's digits. None
                uses the configured default.
            locale: Names and digit glyphs.

        Examples:
            >>> Calendar(0, "+03:30").format("Y/m/d H:i:s P")
            '1348/10/11 03:30:00 +03:30'
        """
        from solarhijri.format.template import render

        if decorate is None:
            from solarhijri.config import settings

            decorate = settings.DECORATE
        return render(
            template,
            self.date,
            zone=self.zone,
            instant=self._instant,
            locale=locale,
            decorate=decorate,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self._instant == other._instant and self.zone == other.zone

    def __hash__(self) -> int:
        return hash((self._instant, self.zone))

    def __repr__(self) -> str:
        return f"Calendar({self._instant}, {self._provider!r})"

    def __str__(self) -> str:
        return self.format("c")


__all__ = ["Calendar"]

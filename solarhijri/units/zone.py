"""Time-zone context and the providers that produce it.

A ZoneContext is the answer of the time-zone service for one instant:
the UTC offset, the DST flag, the abbreviation and the zone identifier.
Providers turn an instant into a ZoneContext. FixedZoneProvider always
answers with the same context; IanaZoneProvider consults the IANA
database through zoneinfo.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import ClassVar, Protocol, Union, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from solarhijri._internal.constants import MAX_UTC_OFFSET_SECONDS
from solarhijri.errors import TimezoneError, ZoneUnavailableError

logger = logging.getLogger(__name__)


class ZoneContext:
    """UTC offset, DST flag, abbreviation and identifier for an instant.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC.

    Attributes:
        offset_seconds: The UTC offset in seconds.
        is_dst: Whether daylight saving time is in effect.
        abbreviation: Short zone name such as "IRST" or "+0330".
        identifier: Zone identifier such as "Asia/Tehran".

    Examples:
        >>> ZoneContext.utc().gmt_offset
        '+0000'

        >>> tz = ZoneContext.from_string("+03:30")
        >>> tz.offset_seconds
        12600
        >>> tz.gmt_offset_colon
        '+03:30'
    """

    __slots__ = ("_offset_seconds", "_is_dst", "_abbreviation", "_identifier")

    _utc_instance: ClassVar[ZoneContext | None] = None

    def __init__(
        self,
        offset_seconds: int,
        is_dst: bool = False,
        abbreviation: str | None = None,
        identifier: str | None = None,
    ) -> None:
        """Create a ZoneContext.

        Args:
            offset_seconds: UTC offset in seconds.
            is_dst: Whether daylight saving time is in effect.
            abbreviation: Short zone name. Defaults to the numeric offset.
            identifier: Zone identifier. Defaults to the abbreviation.

        Raises:
            TimezoneError: If offset_seconds is outside valid range.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._is_dst: bool = bool(is_dst)
        self._abbreviation: str = (
            abbreviation if abbreviation is not None else _format_offset(offset_seconds, "")
        )
        self._identifier: str = identifier if identifier is not None else self._abbreviation

    @classmethod
    def utc(cls) -> ZoneContext:
        """Return the UTC zone context.

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, False, "UTC", "UTC")
        return cls._utc_instance

    @classmethod
    def from_string(cls, s: str) -> ZoneContext:
        """Parse a fixed offset into a ZoneContext.

        Supported formats:
            - "Z" or "UTC": UTC
            - "+HH:MM" or "-HH:MM"
            - "+HHMM" or "-HHMM"
            - "+HH" or "-HH"

        Raises:
            TimezoneError: If the string cannot be parsed.

        Examples:
            >>> ZoneContext.from_string("-0500").offset_seconds
            -18000
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()

        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = re.match(r"^([+-])(\d{1,2})(?::?(\d{2}))?$", s)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0

        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * 3600 + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds (date directive Z)."""
        return self._offset_seconds

    @property
    def is_dst(self) -> bool:
        """Return True if daylight saving time is in effect (directive I)."""
        return self._is_dst

    @property
    def abbreviation(self) -> str:
        """Return the zone abbreviation (directive T)."""
        return self._abbreviation

    @property
    def identifier(self) -> str:
        """Return the zone identifier (directive e)."""
        return self._identifier

    @property
    def gmt_offset(self) -> str:
        """Return the offset as +HHMM (directive O)."""
        return _format_offset(self._offset_seconds, "")

    @property
    def gmt_offset_colon(self) -> str:
        """Return the offset as +HH:MM (directive P)."""
        return _format_offset(self._offset_seconds, ":")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneContext):
            return NotImplemented
        return (
            self._offset_seconds == other._offset_seconds
            and self._is_dst == other._is_dst
            and self._abbreviation == other._abbreviation
            and self._identifier == other._identifier
        )

    def __hash__(self) -> int:
        return hash(
            (self._offset_seconds, self._is_dst, self._abbreviation, self._identifier)
        )

    def __repr__(self) -> str:
        return (
            f"ZoneContext(offset_seconds={self._offset_seconds}, "
            f"is_dst={self._is_dst}, abbreviation={self._abbreviation!r}, "
            f"identifier={self._identifier!r})"
        )

    def __str__(self) -> str:
        return self._identifier


def _format_offset(offset_seconds: int, separator: str) -> str:
    sign = "+" if offset_seconds >= 0 else "-"
    total_minutes = abs(offset_seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


@runtime_checkable
class ZoneProvider(Protocol):
    """The time-zone service: answers a ZoneContext for an instant."""

    def lookup(self, instant: int) -> ZoneContext:
        ...


class FixedZoneProvider:
    """A provider that answers the same context for every instant."""

    __slots__ = ("_context",)

    def __init__(self, context: ZoneContext) -> None:
        self._context = context

    @property
    def context(self) -> ZoneContext:
        return self._context

    def lookup(self, instant: int) -> ZoneContext:
        return self._context

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedZoneProvider):
            return NotImplemented
        return self._context == other._context

    def __hash__(self) -> int:
        return hash(self._context)

    def __repr__(self) -> str:
        return f"FixedZoneProvider({self._context!r})"


class IanaZoneProvider:
    """A provider backed by the IANA time-zone database.

    Examples:
        >>> tehran = IanaZoneProvider("Asia/Tehran")
        >>> tehran.lookup(0).offset_seconds
        12600
    """

    __slots__ = ("_name", "_zone")

    def __init__(self, name: str) -> None:
        """Create a provider for an IANA zone key.

        Raises:
            ZoneUnavailableError: If the zone key is unknown or malformed.
        """
        try:
            self._zone = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ZoneUnavailableError(f"unknown time zone {name!r}") from e
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def lookup(self, instant: int) -> ZoneContext:
        """Return the zone context in effect at an instant.

        Raises:
            ZoneUnavailableError: If the instant cannot be resolved.
        """
        try:
            local = datetime.fromtimestamp(instant, tz=self._zone)
        except (OverflowError, OSError, ValueError) as e:
            raise ZoneUnavailableError(
                f"cannot resolve {self._name} at instant {instant}"
            ) from e

        offset = local.utcoffset()
        dst = local.dst()
        context = ZoneContext(
            int(offset.total_seconds()) if offset is not None else 0,
            is_dst=bool(dst),
            abbreviation=local.tzname(),
            identifier=self._name,
        )
        logger.debug("zone %s at %d: %r", self._name, instant, context)
        return context

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IanaZoneProvider):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"IanaZoneProvider({self._name!r})"


ZoneLike = Union[ZoneContext, ZoneProvider, str, None]


def resolve_zone_provider(zone: ZoneLike = None) -> ZoneProvider:
    """Turn any accepted zone argument into a ZoneProvider.

    Args:
        zone: A ZoneContext (fixed answer), a ZoneProvider, an IANA key
            or fixed offset string, or None for the configured default
            zone.

    Raises:
        ZoneUnavailableError: If a zone name cannot be resolved.
        TypeError: If zone is of an unsupported type.
    """
    if zone is None:
        from solarhijri.config import settings

        zone = settings.TIMEZONE

    if isinstance(zone, ZoneContext):
        return FixedZoneProvider(zone)
    if isinstance(zone, str):
        if zone.strip()[:1] in ("+", "-"):
            return FixedZoneProvider(ZoneContext.from_string(zone))
        return IanaZoneProvider(zone)
    if isinstance(zone, ZoneProvider):
        return zone
    raise TypeError(f"unsupported zone type: {type(zone).__name__}")


__all__ = [
    "ZoneContext",
    "ZoneProvider",
    "FixedZoneProvider",
    "IanaZoneProvider",
    "ZoneLike",
    "resolve_zone_provider",
]

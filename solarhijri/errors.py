"""Solar Hijri exception hierarchy.

All library-specific exceptions inherit from SolarHijriError.
"""

from __future__ import annotations


class SolarHijriError(Exception):
    """Base exception for all solarhijri errors."""

    pass


class InvalidDateError(SolarHijriError, ValueError):
    """Invalid calendar component.

    Raised when a date or time component is out of range.

    Examples:
        - Month value outside 1-12
        - Day 30 of Esfand in a 365-day year
        - Hour value outside 0-23
    """

    pass


class ZoneUnavailableError(SolarHijriError):
    """The time-zone service could not answer.

    Raised instead of guessing an offset.

    Examples:
        - Unknown IANA zone key
        - Instant outside the range the zone database can represent
    """

    pass


class TimezoneError(SolarHijriError, ValueError):
    """Malformed zone context.

    Examples:
        - Invalid UTC offset string
        - Offset outside valid range (-14h to +14h)
    """

    pass


__all__ = [
    "SolarHijriError",
    "InvalidDateError",
    "ZoneUnavailableError",
    "TimezoneError",
]

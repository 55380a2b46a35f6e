"""solarhijri: Persian (Solar Hijri) calendar conversion and formatting.

solarhijri converts Unix instants to Solar Hijri dates and back using
the 365.24218956-day mean year, and renders dates through PHP date()
style templates.

Core Types:
    CalendarDate: Solar Hijri date and time of day
    Calendar: An instant bound to its zone and CalendarDate
    ZoneContext: UTC offset, DST flag, abbreviation and identifier

Functions:
    to_calendar_date: Convert an instant to a CalendarDate
    to_instant: Convert a CalendarDate to an instant
    is_leap_year: Leap year under the 2820-year cycle
    weekday: Weekday of a day of the year (0=Saturday)
    week_of_year: Week number of a day of the year
    format_date: Render an instant through a template

Exceptions:
    SolarHijriError: Base exception
    InvalidDateError: Invalid date or time component
    ZoneUnavailableError: Time-zone service failure
    TimezoneError: Malformed zone context

Example:
    >>> from solarhijri import Calendar
    >>> Calendar(1710892800, "Asia/Tehran").format("l j F Y")
    'چهارشنبه 1 فروردین 1403'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Leap cycle
from solarhijri._internal.calendar import days_in_month, days_in_year
from solarhijri._internal.cycle import day_of_week as weekday
from solarhijri._internal.cycle import is_leap_year, leap_slot, week_of_year

# Core types
from solarhijri.core.calendar import Calendar
from solarhijri.core.date import CalendarDate

# Conversion
from solarhijri.convert import components_to_instant, to_calendar_date, to_instant

# Zones
from solarhijri.units.zone import (
    FixedZoneProvider,
    IanaZoneProvider,
    ZoneContext,
    ZoneProvider,
)

# Exceptions
from solarhijri.errors import (
    InvalidDateError,
    SolarHijriError,
    TimezoneError,
    ZoneUnavailableError,
)

# Formatting
from solarhijri.format import PERSIAN, Locale, format_date, render

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Leap cycle
    "is_leap_year",
    "leap_slot",
    "weekday",
    "week_of_year",
    "days_in_year",
    "days_in_month",
    # Core types
    "Calendar",
    "CalendarDate",
    # Conversion
    "to_calendar_date",
    "to_instant",
    "components_to_instant",
    # Zones
    "ZoneContext",
    "ZoneProvider",
    "FixedZoneProvider",
    "IanaZoneProvider",
    # Exceptions
    "SolarHijriError",
    "InvalidDateError",
    "ZoneUnavailableError",
    "TimezoneError",
    # Formatting
    "Locale",
    "PERSIAN",
    "format_date",
    "render",
]

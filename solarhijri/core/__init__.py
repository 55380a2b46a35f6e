"""Core Solar Hijri types.

This module provides:
    - CalendarDate: Solar Hijri date with a time of day
    - Calendar: an instant bound to its zone and CalendarDate
"""

from __future__ import annotations

from solarhijri.core.calendar import Calendar
from solarhijri.core.date import CalendarDate

__all__: list[str] = [
    "Calendar",
    "CalendarDate",
]

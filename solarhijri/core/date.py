"""CalendarDate class representing a Solar Hijri date and time of day.

This module provides the CalendarDate value type produced by the
forward conversion and consumed by the reverse conversion and the
template renderer.
"""

from __future__ import annotations

from solarhijri._internal import cycle
from solarhijri._internal.calendar import (
    day_of_year_to_month_day,
    days_in_month,
    days_in_year,
    local_seconds_to_fields,
    month_day_to_day_of_year,
)
from solarhijri._internal.validation import validate_components


class CalendarDate:
    """A Solar Hijri calendar date with a time of day.

    CalendarDate is immutable. Instances compare lexicographically on
    (year, month, day, hour, minute, second), which matches
    chronological order for dates under the same zone.

    Attributes:
        year: The Persian year.
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        day_of_year: The 1-based day of the year (1-366).

    Examples:
        >>> d = CalendarDate(1383, 12, 30, 13, 45, 25)
        >>> d.day_of_year
        366

        >>> CalendarDate.from_local_seconds(0)
        CalendarDate(1348, 10, 11, 0, 0, 0)

        >>> CalendarDate(1404, 12, 30)  # 1404 has 365 days
        Traceback (most recent call last):
        ...
        solarhijri.errors.InvalidDateError: day must be between 1 and 29 for 1404-12, got 30
    """

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second", "_day_of_year")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        """Create a CalendarDate from components.

        Raises:
            InvalidDateError: If any component is out of range.
        """
        validate_components(year, month, day, hour, minute, second)

        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._day_of_year = month_day_to_day_of_year(month, day)

    @classmethod
    def from_local_seconds(cls, local_seconds: int) -> CalendarDate:
        """Create a CalendarDate from epoch seconds already shifted to local time.

        Args:
            local_seconds: Epoch seconds plus the zone's UTC offset.

        Returns:
            The corresponding CalendarDate.
        """
        year, month, day, hour, minute, second, _ = local_seconds_to_fields(
            local_seconds
        )
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def from_day_of_year(
        cls,
        year: int,
        day_of_year: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> CalendarDate:
        """Create a CalendarDate from a year and a 1-based day of the year.

        Examples:
            >>> CalendarDate.from_day_of_year(1403, 366)
            CalendarDate(1403, 12, 30, 0, 0, 0)
        """
        from solarhijri.errors import InvalidDateError

        length = days_in_year(year)
        if day_of_year < 1 or day_of_year > length:
            raise InvalidDateError(
                f"day_of_year must be between 1 and {length} for {year}, "
                f"got {day_of_year}"
            )
        month, day = day_of_year_to_month_day(day_of_year)
        return cls(year, month, day, hour, minute, second)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def day_of_year(self) -> int:
        return self._day_of_year

    @property
    def weekday(self) -> int:
        """Return the weekday (0=Saturday, 6=Friday).

        Examples:
            >>> CalendarDate(1403, 1, 1).weekday
            4
        """
        return cycle.day_of_week(self._year, self._day_of_year)

    @property
    def week_of_year(self) -> int:
        """Return the week number within the year."""
        return cycle.week_of_year(self._year, self._day_of_year)

    @property
    def is_leap_year(self) -> bool:
        """Return True if the year is a leap year under the 2820-year cycle."""
        return cycle.is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the length of this date's month."""
        return days_in_month(self._year, self._month)

    @property
    def days_in_year(self) -> int:
        """Return the length of this date's year."""
        return days_in_year(self._year)

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second)."""
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
        )

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with specified components replaced.

        Raises:
            InvalidDateError: If the resulting date is invalid.

        Examples:
            >>> CalendarDate(1403, 1, 1).replace(month=7, hour=9)
            CalendarDate(1403, 7, 1, 9, 0, 0)
        """
        return CalendarDate(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
            hour if hour is not None else self._hour,
            minute if minute is not None else self._minute,
            second if second is not None else self._second,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'CalendarDate(1403, 1, 1, 0, 0, 0)'.
        """
        return "CalendarDate({}, {}, {}, {}, {}, {})".format(*self.as_tuple())

    def __str__(self) -> str:
        """Return the date as 'YYYY-MM-DD HH:MM:SS'."""
        return (
            f"{self._year:04d}-{self._month:02d}-{self._day:02d} "
            f"{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
        )


__all__ = ["CalendarDate"]

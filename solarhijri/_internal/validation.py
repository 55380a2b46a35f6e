"""Validation utilities for solarhijri.

This module provides validation decorators and utilities for
ensuring calendar components are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from solarhijri.errors import InvalidDateError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.
                  Non-integer values are left to the decorated function.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23))
        ... def at(hour: int) -> int:
        ...     return hour

        >>> at(24)
        Traceback (most recent call last):
        ...
        solarhijri.errors.InvalidDateError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if isinstance(value, int) and (value < min_val or value > max_val):
                    raise InvalidDateError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidDateError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day exists in the given year and month.

    Esfand has 30 days only in 366-day years.

    Raises:
        InvalidDateError: If day is invalid for the month.
    """
    from solarhijri._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


@validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59))
def validate_components(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> None:
    """Validate a full set of date and time components.

    Raises:
        InvalidDateError: If any component is out of range.
    """
    for name, value in (
        ("year", year),
        ("month", month),
        ("day", day),
        ("hour", hour),
        ("minute", minute),
        ("second", second),
    ):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDateError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_range",
    "validate_month",
    "validate_day",
    "validate_components",
]

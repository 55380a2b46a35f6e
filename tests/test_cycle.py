"""Tests for the 2820-year leap cycle.

These tests verify leap slots, leap-year periodicity, weekday numbering
and week numbering.
"""

from __future__ import annotations

import pytest

from solarhijri._internal.cycle import (
    day_of_week,
    is_leap_year,
    leap_slot,
    reference_offset,
    week_of_year,
)


class TestReferenceOffset:
    """Tests for reference_offset."""

    def test_offset(self) -> None:
        """Years are shifted by 2346."""
        assert reference_offset(0) == 2346
        assert reference_offset(1403) == 3749
        assert reference_offset(-2346) == 0


class TestLeapSlot:
    """Tests for leap_slot and is_leap_year."""

    def test_leap_year_slot(self) -> None:
        """1399 sits at position 29 of its sub-cycle, the 7th marker."""
        assert leap_slot(1399) == 7
        assert is_leap_year(1399) is True

    def test_common_year(self) -> None:
        """A common year has no slot."""
        assert leap_slot(1402) is None
        assert is_leap_year(1402) is False

    def test_first_slot_is_not_falsy_confusion(self) -> None:
        """Slot 1 (table index 0) is still a leap year."""
        assert leap_slot(1375) == 1
        assert is_leap_year(1375) is True

    def test_last_slot(self) -> None:
        """Position 0 of a sub-cycle is the 31st slot."""
        assert leap_slot(1370) == 31
        assert is_leap_year(1370) is True

    @pytest.mark.parametrize("year", [1383, 1387, 1391, 1395, 1399, 1404, 1408])
    def test_known_leap_years(self, year: int) -> None:
        """Leap years of the 2820-year cycle around the present."""
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1384, 1400, 1401, 1402, 1403, 1405])
    def test_known_common_years(self, year: int) -> None:
        """Common years of the 2820-year cycle around the present."""
        assert not is_leap_year(year)


class TestLeapPeriodicity:
    """Tests for the distribution of leap years."""

    @pytest.mark.parametrize("start", [1, 475, 1348, -2346, 5000])
    def test_grand_cycle_count(self, start: int) -> None:
        """Every 2820 consecutive years hold 22 * 31 + 1 leap years."""
        count = sum(1 for year in range(start, start + 2820) if is_leap_year(year))
        assert count == 683

    def test_period(self) -> None:
        """The pattern repeats every 2820 years."""
        for year in range(1300, 1500):
            assert is_leap_year(year) == is_leap_year(year + 2820)
            assert is_leap_year(year) == is_leap_year(year - 2820)

    def test_gaps(self) -> None:
        """Leap years are never consecutive and never more than 5 apart."""
        leaps = [year for year in range(-3000, 6000) if is_leap_year(year)]
        gaps = {b - a for a, b in zip(leaps, leaps[1:])}
        assert gaps <= {4, 5}


class TestDayOfWeek:
    """Tests for day_of_week."""

    def test_nowruz_1403(self) -> None:
        """1403-01-01 (2024-03-20) was a Wednesday."""
        assert day_of_week(1403, 1) == 4

    def test_unix_epoch(self) -> None:
        """1348-10-11 (1970-01-01) was a Thursday."""
        assert day_of_week(1348, 287) == 5

    def test_nowruz_1405(self) -> None:
        """1405-01-01 (2026-03-21) is a Saturday."""
        assert day_of_week(1405, 1) == 0

    def test_late_sub_cycle_position(self) -> None:
        """Positions after the last ascending marker (1367 is at 125)."""
        assert day_of_week(1367, 1) == 2  # 1988-03-21, Monday

    def test_day_zero_is_first_day(self) -> None:
        """A day_of_year of 0 counts as the first day."""
        assert day_of_week(1403, 0) == day_of_week(1403, 1)

    @pytest.mark.parametrize("year", [1348, 1367, 1370, 1403, 1500, -100])
    def test_weekly_cycle(self, year: int) -> None:
        """Consecutive days walk through all 7 weekdays with period 7."""
        days = [day_of_week(year, d) for d in range(1, 366)]
        assert set(days[:7]) == set(range(7))
        for a, b in zip(days, days[1:]):
            assert b == (a + 1) % 7
        for d in range(1, 359):
            assert day_of_week(year, d) == day_of_week(year, d + 7)


class TestWeekOfYear:
    """Tests for week_of_year.

    1403 starts on a Wednesday, so its first Saturday is day 4.
    """

    def test_first_saturday_starts_week_one(self) -> None:
        assert week_of_year(1403, 4) == 1
        assert week_of_year(1403, 10) == 1

    def test_second_week(self) -> None:
        assert week_of_year(1403, 11) == 2

    def test_day_before_first_saturday(self) -> None:
        """The distance is taken in absolute value before rounding up."""
        assert week_of_year(1403, 3) == 0
        assert week_of_year(1403, 2) == 1
        assert week_of_year(1403, 1) == 1

    def test_year_starting_on_saturday(self) -> None:
        """1405 starts on a Saturday: days 1-7 are week 1."""
        assert [week_of_year(1405, d) for d in range(1, 8)] == [1] * 7
        assert week_of_year(1405, 8) == 2

    def test_last_day(self) -> None:
        assert week_of_year(1405, 365) == 53

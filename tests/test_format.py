"""Tests for template tokenizing and rendering."""

from __future__ import annotations

import re
from dataclasses import replace

import pytest

from solarhijri.config import settings
from solarhijri.core.date import CalendarDate
from solarhijri.format import DIRECTIVES, PERSIAN, Locale, Token, format_date, render, tokenize


@pytest.fixture
def nowruz() -> CalendarDate:
    return CalendarDate(1403, 1, 1, 9, 5, 7)


@pytest.fixture
def english() -> Locale:
    return replace(
        PERSIAN,
        weekday_names=(
            "Shanbeh", "Yekshanbeh", "Doshanbeh", "Seshanbeh",
            "Chaharshanbeh", "Panjshanbeh", "Jomeh",
        ),
        weekday_abbreviations=("Sh", "Ye", "Do", "Se", "Ch", "Pa", "Jo"),
        month_names=(
            "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
            "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
        ),
        month_abbreviations=(
            "Far", "Ord", "Kho", "Tir", "Mor", "Sha",
            "Meh", "Aba", "Aza", "Dey", "Bah", "Esf",
        ),
        ante_meridiem="AM",
        post_meridiem="PM",
        digits="0123456789",
    )


class TestTokenize:
    """Tests for tokenize."""

    def test_directives_and_literals(self) -> None:
        assert tokenize("Y-m") == [
            Token(True, "Y"),
            Token(False, "-"),
            Token(True, "m"),
        ]

    def test_literals_are_merged(self) -> None:
        assert tokenize("Y :: x") == [Token(True, "Y"), Token(False, " :: x")]

    def test_escape(self) -> None:
        assert tokenize(r"\Y: Y") == [Token(False, "Y: "), Token(True, "Y")]

    def test_escaped_backslash(self) -> None:
        assert tokenize("\\\\Y") == [Token(False, "\\"), Token(True, "Y")]

    def test_trailing_backslash(self) -> None:
        assert tokenize("Y\\") == [Token(True, "Y"), Token(False, "\\")]

    def test_empty(self) -> None:
        assert tokenize("") == []

    def test_directive_set(self) -> None:
        assert set("aAdDjlNwSzWFmMntLYygGhHisUIOPZTecr") == DIRECTIVES


class TestDayDirectives:
    """Tests for day, weekday and week directives."""

    def test_day(self, nowruz, tehran) -> None:
        assert render("d j S z W", nowruz, zone=tehran) == "01 1 یکم 1 1"

    def test_weekday(self, nowruz, tehran) -> None:
        assert render("N w l D", nowruz, zone=tehran) == "5 4 چهارشنبه چ"

    def test_day_ordinals(self) -> None:
        assert render("S", CalendarDate(1403, 1, 12)) == "دوازدهم"
        assert render("S", CalendarDate(1403, 1, 31)) == "سی و یکم"

    def test_last_day_of_long_year(self) -> None:
        assert render("z t", CalendarDate(1403, 12, 30)) == "366 30"

    def test_leap_flag_independent_of_esfand_length(self) -> None:
        assert render("L t", CalendarDate(1403, 12, 30)) == "0 30"
        assert render("L t", CalendarDate(1404, 12, 1)) == "1 29"

    def test_last_week(self) -> None:
        assert render("W", CalendarDate(1405, 12, 29)) == "53"


class TestMonthYearDirectives:
    """Tests for month and year directives."""

    def test_month(self, nowruz) -> None:
        assert render("F m M n t", nowruz) == "فروردین 01 فرو 1 31"

    def test_days_in_month(self) -> None:
        assert render("t", CalendarDate(1402, 12, 1)) == "29"
        assert render("t", CalendarDate(1403, 7, 1)) == "30"

    def test_year(self, nowruz) -> None:
        assert render("Y y L", nowruz) == "1403 03 0"
        assert render("y L", CalendarDate(1399, 1, 1)) == "99 1"
        assert render("y", CalendarDate(1405, 1, 1)) == "05"


class TestTimeDirectives:
    """Tests for time-of-day directives."""

    def test_morning(self, nowruz) -> None:
        assert render("a g G h H i s", nowruz) == "ق.ظ 9 9 09 09 05 07"

    def test_midnight(self) -> None:
        assert render("g h G H", CalendarDate(1403, 1, 1)) == "12 12 0 00"

    def test_noon(self) -> None:
        assert render("A g h", CalendarDate(1403, 1, 1, 12)) == "ب.ظ 12 12"

    def test_afternoon(self) -> None:
        assert render("a g h G", CalendarDate(1403, 1, 1, 13)) == "ب.ظ 1 01 13"

    def test_epoch(self, nowruz) -> None:
        assert render("U", nowruz, instant=1710913507) == "1710913507"

    def test_epoch_requires_instant(self, nowruz) -> None:
        with pytest.raises(ValueError):
            render("U", nowruz)


class TestZoneDirectives:
    """Tests for zone directives."""

    def test_zone(self, nowruz, tehran) -> None:
        assert render("I O P Z T", nowruz, zone=tehran) == "0 +0330 +03:30 12600 IRST"

    def test_identifier_is_not_reinterpreted(self, nowruz, tehran) -> None:
        assert render("e", nowruz, zone=tehran) == "Asia/Tehran"

    def test_dst_flag(self, nowruz) -> None:
        from solarhijri.units.zone import ZoneContext

        zone = ZoneContext(16200, True, "IRDT", "Asia/Tehran")
        assert render("I P T", nowruz, zone=zone) == "1 +04:30 IRDT"

    def test_without_zone(self, nowruz) -> None:
        assert render("O|P|Z|T|e|I", nowruz) == "|||||"


class TestCompoundDirectives:
    """Tests for c and r."""

    def test_iso8601(self, nowruz, tehran) -> None:
        assert render("c", nowruz, zone=tehran) == "1403-01-01T09:05:07+03:30"

    def test_iso8601_without_zone(self, nowruz) -> None:
        assert render("c", nowruz) == "1403-01-01T09:05:07"

    def test_rfc2822(self, nowruz, tehran) -> None:
        assert render("r", nowruz, zone=tehran) == "چ، 01 فرو 1403 09:05:07 +0330"

    def test_rfc2822_without_zone(self, nowruz) -> None:
        assert render("r", nowruz) == "چ، 01 فرو 1403 09:05:07"


class TestLiteralText:
    """Tests for pass-through and escaped text."""

    def test_unknown_characters_pass_through(self, nowruz) -> None:
        assert render("k q x/Y", nowruz) == "k q x/1403"

    def test_escaped_directives(self, nowruz) -> None:
        assert render(r"\d\a\y: d", nowruz) == "day: 01"

    def test_persian_literal_text(self, nowruz) -> None:
        assert render("امروز: Y", nowruz) == "امروز: 1403"

    def test_substituted_text_is_not_reinterpreted(self, nowruz, english) -> None:
        assert render("F d", nowruz, locale=english) == "Farvardin 01"
        assert render("l, M", nowruz, locale=english) == "Chaharshanbeh, Far"
        assert render("A", nowruz, locale=english) == "AM"


class TestDecorate:
    """Tests for digit decoration."""

    def test_decorate(self, nowruz) -> None:
        assert render("Y/m/d", nowruz, decorate=True) == "۱۴۰۳/۰۱/۰۱"

    def test_decorate_offset(self, nowruz, tehran) -> None:
        assert render("P", nowruz, zone=tehran, decorate=True) == "+۰۳:۳۰"

    def test_no_decorate_by_default(self, nowruz) -> None:
        assert render("Y", nowruz) == "1403"

    def test_decorate_ascii_locale(self, nowruz, english) -> None:
        assert render("Y", nowruz, locale=english, decorate=True) == "1403"


class TestLocale:
    """Tests for Locale tables."""

    def test_meridiem(self) -> None:
        assert PERSIAN.meridiem(0) == "ق.ظ"
        assert PERSIAN.meridiem(11) == "ق.ظ"
        assert PERSIAN.meridiem(12) == "ب.ظ"
        assert PERSIAN.meridiem(23) == "ب.ظ"

    def test_accessors(self) -> None:
        assert PERSIAN.weekday_name(0) == "شنبه"
        assert PERSIAN.weekday_name(6) == "آدینه"
        assert PERSIAN.month_name(12) == "اسفند"
        assert PERSIAN.month_abbreviation(10) == "دی"
        assert PERSIAN.day_ordinal(1) == "یکم"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("weekday_names", ("a",) * 6),
            ("month_names", ("a",) * 13),
            ("day_ordinals", ("a",) * 30),
            ("digits", "0123"),
        ],
    )
    def test_invalid_tables(self, field, value) -> None:
        with pytest.raises(ValueError):
            replace(PERSIAN, **{field: value})


class TestFormatDate:
    """Tests for the format_date convenience function."""

    def test_instant(self) -> None:
        assert format_date("Y-m-d", 0, "UTC") == "1348-10-11"

    def test_zone_name(self) -> None:
        assert format_date("Y-m-d H:i T", 1590969600, "Asia/Tehran").startswith(
            "1399-03-12 04:30"
        )

    def test_now(self) -> None:
        assert re.fullmatch(r"1\d{3}-\d{2}-\d{2}", format_date("Y-m-d", zone="UTC"))

    def test_decorate_setting(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "DECORATE", True)
        assert format_date("Y", 0, "UTC") == "۱۳۴۸"

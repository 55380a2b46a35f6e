"""Locale tables for rendering Solar Hijri dates.

A Locale is pure lookup data: weekday and month names, ordinal
day-of-month names, meridiem markers and the digit glyphs used when
output is decorated.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Locale:
    """Names and glyphs used by the template renderer.

    Weekday tables start at Saturday (index 0). Month and day tables are
    stored 0-based and read 1-based through the accessor methods.
    """

    weekday_names: tuple[str, ...]
    weekday_abbreviations: tuple[str, ...]
    month_names: tuple[str, ...]
    month_abbreviations: tuple[str, ...]
    day_ordinals: tuple[str, ...]
    ante_meridiem: str
    post_meridiem: str
    digits: str = "0123456789"
    _digit_table: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.weekday_names) != 7 or len(self.weekday_abbreviations) != 7:
            raise ValueError("weekday tables must have 7 entries")
        if len(self.month_names) != 12 or len(self.month_abbreviations) != 12:
            raise ValueError("month tables must have 12 entries")
        if len(self.day_ordinals) != 31:
            raise ValueError("day ordinal table must have 31 entries")
        if len(self.digits) != 10:
            raise ValueError("digits must have 10 glyphs")
        object.__setattr__(
            self, "_digit_table", str.maketrans("0123456789", self.digits)
        )

    def weekday_name(self, weekday: int) -> str:
        return self.weekday_names[weekday]

    def weekday_abbreviation(self, weekday: int) -> str:
        return self.weekday_abbreviations[weekday]

    def month_name(self, month: int) -> str:
        return self.month_names[month - 1]

    def month_abbreviation(self, month: int) -> str:
        return self.month_abbreviations[month - 1]

    def day_ordinal(self, day: int) -> str:
        return self.day_ordinals[day - 1]

    def meridiem(self, hour: int) -> str:
        """Return the ante meridiem marker before noon, post meridiem after."""
        return self.ante_meridiem if hour < 12 else self.post_meridiem

    def decorate(self, text: str) -> str:
        """Replace ASCII digits with the locale's digit glyphs.

        Examples:
            >>> PERSIAN.decorate("1403/01/01")
            '۱۴۰۳/۰۱/۰۱'
        """
        return text.translate(self._digit_table)


PERSIAN = Locale(
    weekday_names=(
        "شنبه",
        "یکشنبه",
        "دوشنبه",
        "سه شنبه",
        "چهارشنبه",
        "پنج شنبه",
        "آدینه",
    ),
    weekday_abbreviations=("ش", "ی", "د", "س", "چ", "پ", "آ"),
    month_names=(
        "فروردین",
        "اردیبهشت",
        "خرداد",
        "تیر",
        "امرداد",
        "شهریور",
        "مهر",
        "آبان",
        "آذر",
        "دی",
        "بهمن",
        "اسفند",
    ),
    month_abbreviations=(
        "فرو",
        "ارد",
        "خرد",
        "تیر",
        "امر",
        "شهر",
        "مهر",
        "آبا",
        "آذر",
        "دی",
        "بهم",
        "اسف",
    ),
    day_ordinals=(
        "یکم", "دوم", "سوم", "چهارم", "پنجم", "ششم",
        "هفتم", "هشتم", "نهم", "دهم", "یازدهم", "دوازدهم",
        "سیزدهم", "چهاردهم", "پانزدهم", "شانزدهم", "هفدهم", "هجدهم",
        "نوزدهم", "بیستم", "بیست و یکم", "بیست و دوم", "بیست و سوم",
        "بیست و چهارم", "بیست و پنجم", "بیست و ششم", "بیست و هفتم",
        "بیست و هشتم", "بیست و نهم", "سی ام", "سی و یکم",
    ),
    ante_meridiem="ق.ظ",
    post_meridiem="ب.ظ",
    digits="۰۱۲۳۴۵۶۷۸۹",
)


__all__ = ["Locale", "PERSIAN"]

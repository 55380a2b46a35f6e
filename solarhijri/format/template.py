"""date()-style template rendering for Solar Hijri dates.

A template is a string of single-character directives and literal text,
following the directive set of PHP's date(). The template is tokenized
once and every directive is rendered exactly once, so text produced by
one directive is never read as another directive.

Supported Directives:
    a, A - Meridiem marker (ق.ظ / ب.ظ)
    d    - Day of month, 2 digits (01-31)
    D    - Weekday abbreviation
    j    - Day of month (1-31)
    l    - Weekday name
    N    - Weekday, 1 (Saturday) to 7 (Friday)
    w    - Weekday, 0 (Saturday) to 6 (Friday)
    S    - Ordinal name of the day of month
    z    - Day of year (1-366)
    W    - Week of year
    F    - Month name
    m    - Month, 2 digits (01-12)
    M    - Month abbreviation
    n    - Month (1-12)
    t    - Days in the month (29-31), from the converted year length
    L    - 1 for a leap year under the 2820-year cycle, 0 otherwise.
           This rule and the year length can disagree, so L does not
           tell whether Esfand has 30 days (1403: L is 0, t is 30).
    Y    - Full year
    y    - Year, 2 digits
    g, G - Hour, 12-hour (1-12) / 24-hour (0-23)
    h, H - Hour, 2 digits, 12-hour (01-12) / 24-hour (00-23)
    i    - Minutes, 2 digits
    s    - Seconds, 2 digits
    U    - Seconds since the Unix epoch
    I    - 1 if daylight saving time is in effect, 0 otherwise
    O    - UTC offset (+0330)
    P    - UTC offset with colon (+03:30)
    Z    - UTC offset in seconds
    T    - Zone abbreviation
    e    - Zone identifier
    c    - ISO 8601 date and time
    r    - RFC 2822 style date and time

Any other character is copied as is; a backslash copies the character
after it without interpreting it.

Examples:
    >>> from solarhijri.core.date import CalendarDate
    >>> render("Y/m/d H:i", CalendarDate(1403, 1, 1, 9, 5))
    '1403/01/01 09:05'

    >>> render("j F Y", CalendarDate(1403, 1, 1), decorate=True)
    '۱ فروردین ۱۴۰۳'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, NamedTuple

from solarhijri.format.locale import PERSIAN, Locale

if TYPE_CHECKING:
    from solarhijri.core.date import CalendarDate
    from solarhijri.units.zone import ZoneContext, ZoneLike


class Token(NamedTuple):
    """A piece of a tokenized template."""

    is_directive: bool
    text: str


class _RenderContext(NamedTuple):
    date: CalendarDate
    zone: ZoneContext | None
    instant: int | None
    locale: Locale


def _hour12(hour: int) -> int:
    return hour % 12 or 12


def _year(year: int) -> str:
    if year >= 0:
        return f"{year:04d}"
    return f"{year:05d}"  # Include minus sign


def _zone_field(getter: Callable[[ZoneContext], object]) -> Callable[[_RenderContext], str]:
    def render_field(ctx: _RenderContext) -> str:
        if ctx.zone is None:
            return ""
        return str(getter(ctx.zone))

    return render_field


def _epoch(ctx: _RenderContext) -> str:
    if ctx.instant is None:
        raise ValueError("format directive U requires an instant")
    return str(ctx.instant)


def _iso8601(ctx: _RenderContext) -> str:
    d = ctx.date
    offset = ctx.zone.gmt_offset_colon if ctx.zone is not None else ""
    return (
        f"{_year(d.year)}-{d.month:02d}-{d.day:02d}"
        f"T{d.hour:02d}:{d.minute:02d}:{d.second:02d}{offset}"
    )


def _rfc2822(ctx: _RenderContext) -> str:
    d = ctx.date
    text = (
        f"{ctx.locale.weekday_abbreviation(d.weekday)}، "
        f"{d.day:02d} {ctx.locale.month_abbreviation(d.month)} {_year(d.year)} "
        f"{d.hour:02d}:{d.minute:02d}:{d.second:02d}"
    )
    if ctx.zone is not None:
        text += f" {ctx.zone.gmt_offset}"
    return text


_DIRECTIVES: dict[str, Callable[[_RenderContext], str]] = {
    "a": lambda ctx: ctx.locale.meridiem(ctx.date.hour),
    "A": lambda ctx: ctx.locale.meridiem(ctx.date.hour),
    "d": lambda ctx: f"{ctx.date.day:02d}",
    "D": lambda ctx: ctx.locale.weekday_abbreviation(ctx.date.weekday),
    "j": lambda ctx: str(ctx.date.day),
    "l": lambda ctx: ctx.locale.weekday_name(ctx.date.weekday),
    "N": lambda ctx: str(ctx.date.weekday + 1),
    "w": lambda ctx: str(ctx.date.weekday),
    "S": lambda ctx: ctx.locale.day_ordinal(ctx.date.day),
    "z": lambda ctx: str(ctx.date.day_of_year),
    "W": lambda ctx: str(ctx.date.week_of_year),
    "F": lambda ctx: ctx.locale.month_name(ctx.date.month),
    "m": lambda ctx: f"{ctx.date.month:02d}",
    "M": lambda ctx: ctx.locale.month_abbreviation(ctx.date.month),
    "n": lambda ctx: str(ctx.date.month),
    "t": lambda ctx: str(ctx.date.days_in_month),
    "L": lambda ctx: "1" if ctx.date.is_leap_year else "0",
    "Y": lambda ctx: _year(ctx.date.year),
    "y": lambda ctx: f"{ctx.date.year % 100:02d}",
    "g": lambda ctx: str(_hour12(ctx.date.hour)),
    "G": lambda ctx: str(ctx.date.hour),
    "h": lambda ctx: f"{_hour12(ctx.date.hour):02d}",
    "H": lambda ctx: f"{ctx.date.hour:02d}",
    "i": lambda ctx: f"{ctx.date.minute:02d}",
    "s": lambda ctx: f"{ctx.date.second:02d}",
    "U": _epoch,
    "I": _zone_field(lambda zone: 1 if zone.is_dst else 0),
    "O": _zone_field(lambda zone: zone.gmt_offset),
    "P": _zone_field(lambda zone: zone.gmt_offset_colon),
    "Z": _zone_field(lambda zone: zone.offset_seconds),
    "T": _zone_field(lambda zone: zone.abbreviation),
    "e": _zone_field(lambda zone: zone.identifier),
    "c": _iso8601,
    "r": _rfc2822,
}

DIRECTIVES: frozenset[str] = frozenset(_DIRECTIVES)


def tokenize(template: str) -> list[Token]:
    """Split a template into literal and directive tokens.

    Adjacent literal characters are merged into one token. A backslash
    makes the next character literal; a trailing backslash is kept.

    Examples:
        >>> tokenize("Y-m")
        [Token(is_directive=True, text='Y'), Token(is_directive=False, text='-'), Token(is_directive=True, text='m')]

        >>> tokenize(r"\\Y: Y")
        [Token(is_directive=False, text='Y: '), Token(is_directive=True, text='Y')]
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(False, "".join(literal)))
            literal.clear()

    i = 0
    while i < len(template):
        char = template[i]
        if char == "\\" and i + 1 < len(template):
            literal.append(template[i + 1])
            i += 2
            continue
        if char in _DIRECTIVES:
            flush()
            tokens.append(Token(True, char))
        else:
            literal.append(char)
        i += 1

    flush()
    return tokens


def render(
    template: str,
    date: CalendarDate,
    *,
    zone: ZoneContext | None = None,
    instant: int | None = None,
    locale: Locale = PERSIAN,
    decorate: bool = False,
) -> str:
    """Render a CalendarDate through a date()-style template.

    Args:
        template: Template string of directives and literal text.
        date: The date to render.
        zone: Zone context for the zone directives. Without one, I, O,
            P, Z, T and e render as empty strings.
        instant: Epoch seconds for the U directive.
        locale: Names and digit glyphs.
        decorate: Replace ASCII digits with the locale's digits.

    Returns:
        The rendered string.

    Raises:
        ValueError: If the template uses U without an instant.
    """
    ctx = _RenderContext(date, zone, instant, locale)
    parts = [
        _DIRECTIVES[token.text](ctx) if token.is_directive else token.text
        for token in tokenize(template)
    ]
    result = "".join(parts)
    if decorate:
        result = locale.decorate(result)
    return result


def format_date(
    template: str,
    instant: int | None = None,
    zone: ZoneLike = None,
    *,
    decorate: bool | None = None,
    locale: Locale = PERSIAN,
) -> str:
    """Render an instant through a date()-style template.

    Args:
        template: Template string of directives and literal text.
        instant: Seconds since the Unix epoch; None for the current time.
        zone: A ZoneContext, ZoneProvider, zone name, or None for the
            configured default zone.
        decorate: Replace ASCII digits with the locale's digits. None
            uses the configured default.
        locale: Names and digit glyphs.

    Examples:
        >>> format_date("Y-m-d", 0, "UTC")
        '1348-10-11'
    """
    from solarhijri.core.calendar import Calendar

    if instant is None:
        calendar = Calendar.now(zone)
    else:
        calendar = Calendar(instant, zone)
    return calendar.format(template, decorate=decorate, locale=locale)


__all__ = [
    "DIRECTIVES",
    "Token",
    "tokenize",
    "render",
    "format_date",
]

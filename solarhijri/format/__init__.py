"""Template rendering for Solar Hijri dates.

Functions:
    tokenize: Split a date()-style template into tokens.
    render: Render a CalendarDate through a template.
    format_date: Render an instant through a template.

Examples:
    >>> from solarhijri.format import format_date
    >>> format_date("Y/m/d", 1710892800, "UTC", decorate=True)
    '۱۴۰۳/۰۱/۰۱'
"""

from __future__ import annotations

from solarhijri.format.locale import PERSIAN, Locale
from solarhijri.format.template import DIRECTIVES, Token, format_date, render, tokenize

__all__: list[str] = [
    "DIRECTIVES",
    "Locale",
    "PERSIAN",
    "Token",
    "tokenize",
    "render",
    "format_date",
]

from __future__ import annotations

from datetime import date, datetime

from babel.dates import format_date as _babel_format_date
from dateutil.relativedelta import relativedelta

from .config import DEFAULT_LOCALE, DEFAULT_PATTERN


def as_date(value: date) -> date:
    # datetime is a date subclass; drop the clock part
    return value.date() if isinstance(value, datetime) else value


def format_date(value: date, pattern: str | None = None, locale: str | None = None) -> str:
    """Render ``value`` with a CLDR pattern in the given locale.

    Absent pattern/locale fall back to the defaults, so 2019-04-02 renders as
    "martes 02 de abril de 2019". Callers skip absent dates before calling.
    """
    return _babel_format_date(
        as_date(value),
        format=pattern or DEFAULT_PATTERN,
        locale=locale or DEFAULT_LOCALE,
    )


def default_formatted(value: date) -> str:
    return format_date(value, DEFAULT_PATTERN, DEFAULT_LOCALE)


def years_between(start: date, end: date) -> int:
    """Completed Gregorian years from ``start`` to ``end``."""
    return relativedelta(as_date(end), as_date(start)).years

"""Literal calendar-date templates.

Templates are tried in a fixed priority order and the first one that
yields a valid calendar date wins:

1. ``<full month> <day> <year>``  e.g. "october 14 2019"
2. ``<full month> <day>``  e.g. "october 14" (current year)
3. ``<short month> <day>``  e.g. "oct 14" (current year)
4. ``<day>``  e.g. "14" (current month and year)

A template that does not fit simply yields None; the matcher moves on.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from whenctl.domain.types import MONTH_NAMES

_ORDINAL_RE = re.compile(r"(?<=\d)(st|nd|rd|th)")
_DAY_COMMA_RE = re.compile(r"(?<=\d),")

_MONTH_DAY_YEAR_RE = re.compile(r"([a-z]+) (\d{1,2}) (\d{4})")
_MONTH_DAY_RE = re.compile(r"([a-z]+) (\d{1,2})")
_DAY_RE = re.compile(r"\d{1,2}")

FULL_MONTHS: dict[str, int] = {name.lower(): i for i, name in enumerate(MONTH_NAMES, start=1)}
SHORT_MONTHS: dict[str, int] = {
    **{name[:3].lower(): i for i, name in enumerate(MONTH_NAMES, start=1)},
    "sept": 9,
}


def strip_ordinals(text: str) -> str:
    """Remove ordinal suffixes directly following a digit ("22nd" → "22")."""
    return _ORDINAL_RE.sub("", text)


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _full_month_day_year(text: str, now: date) -> date | None:
    match = _MONTH_DAY_YEAR_RE.fullmatch(text)
    if match is None or match.group(1) not in FULL_MONTHS:
        return None
    month = FULL_MONTHS[match.group(1)]
    return _safe_date(int(match.group(3)), month, int(match.group(2)))


def _full_month_day(text: str, now: date) -> date | None:
    match = _MONTH_DAY_RE.fullmatch(text)
    if match is None or match.group(1) not in FULL_MONTHS:
        return None
    return _safe_date(now.year, FULL_MONTHS[match.group(1)], int(match.group(2)))


def _short_month_day(text: str, now: date) -> date | None:
    match = _MONTH_DAY_RE.fullmatch(text)
    if match is None or match.group(1) not in SHORT_MONTHS:
        return None
    return _safe_date(now.year, SHORT_MONTHS[match.group(1)], int(match.group(2)))


def _day_only(text: str, now: date) -> date | None:
    if _DAY_RE.fullmatch(text) is None:
        return None
    return _safe_date(now.year, now.month, int(text))


@dataclass(frozen=True)
class DateTemplate:
    """A named literal date shape."""

    name: str
    match: Callable[[str, date], date | None]


TEMPLATES: tuple[DateTemplate, ...] = (
    DateTemplate("full_month_day_year", _full_month_day_year),
    DateTemplate("full_month_day", _full_month_day),
    DateTemplate("short_month_day", _short_month_day),
    DateTemplate("day_only", _day_only),
)


def match_literal_date(cleaned: str, now: date) -> date | None:
    """Resolve *cleaned* against the literal templates, or return None.

    *cleaned* is expected to be lowercase. Missing year and month are taken
    from *now*.
    """
    text = strip_ordinals(cleaned)
    text = " ".join(_DAY_COMMA_RE.sub("", text).split())
    for template in TEMPLATES:
        result = template.match(text, now)
        if result is not None:
            return result
    return None

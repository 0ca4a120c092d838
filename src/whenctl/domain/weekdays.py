"""Weekday lookup and next-occurrence search."""

from __future__ import annotations

from datetime import date

from whenctl.domain.arithmetic import add_days, start_of_day
from whenctl.domain.types import Weekday


def parse_weekday(name: str) -> Weekday | None:
    """Match a full English weekday name, ignoring case and padding."""
    try:
        return Weekday[name.strip().upper()]
    except KeyError:
        return None


def next_weekday_occurrence(
    target: Weekday,
    start: date,
    *,
    include_start: bool = False,
) -> date:
    """Return the first date after *start* that falls on *target*.

    When *start* itself is a *target* day the result is one week later,
    unless *include_start* is set, in which case *start* is returned.

    Examples:
        >>> next_weekday_occurrence(Weekday.FRIDAY, date(2024, 1, 1))
        datetime.date(2024, 1, 5)
        >>> next_weekday_occurrence(Weekday.FRIDAY, date(2024, 1, 5))
        datetime.date(2024, 1, 12)
    """
    start = start_of_day(start)
    diff = Weekday(target) - start.isoweekday()
    if diff == 0 and include_start:
        return start
    return add_days(start, diff + 7 if diff <= 0 else diff)

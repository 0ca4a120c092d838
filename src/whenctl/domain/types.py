"""Weekday and formatting enums.

Weekday ordinals follow ISO 8601 (Monday=1 .. Sunday=7), which is also
what :meth:`datetime.date.isoweekday` returns.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """Days of the week in their fixed total order."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class FormatComponent(StrEnum):
    """Optional pieces of a formatted date.

    Each pair (DOW, MONTH, YEAR) is mutually exclusive.
    """

    SHORT_DOW = "short_dow"
    FULL_DOW = "full_dow"
    SHORT_MONTH = "short_month"
    FULL_MONTH = "full_month"
    SHORT_YEAR = "short_year"
    FULL_YEAR = "full_year"


WEEKDAY_NAMES: dict[Weekday, str] = {day: day.name.capitalize() for day in Weekday}

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

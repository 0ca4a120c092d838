"""Day-boundary date arithmetic.

Every value handled here is a :class:`datetime.date`. Instants carrying a
time of day are truncated with :func:`start_of_day` first so that
comparisons and differences are never confounded by hours or minutes.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta


def start_of_day(instant: datetime | date) -> date:
    """Drop any time-of-day component from *instant*.

    Timezone-aware datetimes keep their own wall-clock date; no conversion
    is applied.
    """
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def days_between(start: date, end: date) -> int:
    """Return the number of whole days from *start* to *end*.

    Assumes ``end >= start``; a negative count is returned otherwise.
    """
    return (start_of_day(end) - start_of_day(start)).days


def add_days(base: date, days: int) -> date:
    """Return the date *days* after *base* (negative moves backwards)."""
    return start_of_day(base) + timedelta(days=days)


def is_on_or_after(first: date, second: date) -> bool:
    """Return True if *first* falls on or after *second*."""
    return start_of_day(first) >= start_of_day(second)

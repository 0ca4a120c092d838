"""Date → display string helper.

Output shape: ``[DOW, ][MONTH ]DAY[, YEAR]``. With no components only the
day of the month is rendered.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from whenctl.domain.numerals import to_ordinal
from whenctl.domain.types import MONTH_NAMES, WEEKDAY_NAMES, FormatComponent, Weekday

_PAIRS: dict[str, tuple[FormatComponent, FormatComponent]] = {
    "dow": (FormatComponent.SHORT_DOW, FormatComponent.FULL_DOW),
    "month": (FormatComponent.SHORT_MONTH, FormatComponent.FULL_MONTH),
    "year": (FormatComponent.SHORT_YEAR, FormatComponent.FULL_YEAR),
}


def _pick(components: set[FormatComponent], part: str) -> FormatComponent | None:
    short, full = _PAIRS[part]
    if short in components and full in components:
        msg = f"Conflicting {part} components: {short.value} and {full.value}"
        raise ValueError(msg)
    if short in components:
        return short
    if full in components:
        return full
    return None


def format_date(
    value: date,
    components: Iterable[FormatComponent | str] = (),
    *,
    ordinal: bool = False,
) -> str:
    """Format *value* using the requested optional components.

    Raises:
        ValueError: An unknown component was given, or both the short and
            full variant of the same part were requested.

    Examples:
        >>> format_date(date(2019, 10, 14), {FormatComponent.SHORT_MONTH, FormatComponent.FULL_YEAR})
        'Oct 14, 2019'
    """
    selected = {FormatComponent(component) for component in components}

    parts: list[str] = []
    dow = _pick(selected, "dow")
    if dow is not None:
        name = WEEKDAY_NAMES[Weekday(value.isoweekday())]
        parts.append((name[:3] if dow is FormatComponent.SHORT_DOW else name) + ", ")

    month = _pick(selected, "month")
    if month is not None:
        name = MONTH_NAMES[value.month - 1]
        parts.append((name[:3] if month is FormatComponent.SHORT_MONTH else name) + " ")

    parts.append(to_ordinal(value.day) if ordinal else str(value.day))

    year = _pick(selected, "year")
    if year is FormatComponent.SHORT_YEAR:
        parts.append(f", {value.year % 100:02d}")
    elif year is FormatComponent.FULL_YEAR:
        parts.append(f", {value.year:04d}")

    return "".join(parts)


def components_from_choices(
    *,
    dow: str | None = None,
    month: str | None = None,
    year: str | None = None,
) -> set[FormatComponent]:
    """Map ``"short"``/``"full"`` choices per part onto format components.

    ``None`` and ``"none"`` both leave the part out.

    Examples:
        >>> sorted(components_from_choices(month="short", year="full"))
        [<FormatComponent.FULL_YEAR: 'full_year'>, <FormatComponent.SHORT_MONTH: 'short_month'>]
    """
    selected: set[FormatComponent] = set()
    for part, choice in (("dow", dow), ("month", month), ("year", year)):
        if choice is None or choice == "none":
            continue
        selected.add(FormatComponent(f"{choice}_{part}"))
    return selected

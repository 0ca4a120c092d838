"""ResolveService — date expressions, worded numbers, weekdays, formatting.

Each operation wraps one domain entry point, resolves "now" once via
:meth:`BaseService.reference_date`, and converts domain failures into a
structured :class:`ServiceResult` instead of letting them escape.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from whenctl.domain.arithmetic import days_between
from whenctl.domain.formatting import components_from_choices, format_date
from whenctl.domain.grammar import UnrecognizedDateExpression, match_expression
from whenctl.domain.numerals import convert_worded_number, is_number_phrase
from whenctl.domain.types import WEEKDAY_NAMES, FormatComponent, Weekday
from whenctl.domain.weekdays import next_weekday_occurrence, parse_weekday
from whenctl.services.base import BaseService
from whenctl.services.result import ServiceResult, failure
from whenctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ResolveService(BaseService):
    """Natural-language date resolution and its supporting helpers."""

    def _display(self, value: date) -> str:
        fmt = self._settings.format
        components = components_from_choices(dow=fmt.dow, month=fmt.month, year=fmt.year)
        return format_date(value, components, ordinal=fmt.ordinal)

    @traced
    def resolve(self, text: str) -> ServiceResult:
        """Resolve *text* relative to the reference date."""
        op = "resolve"
        if not text.strip():
            return failure(op, "EMPTY_INPUT", "No date expression given")

        now = self.reference_date()
        resolver = self._settings.resolver

        with trace_span("grammar") as span:
            try:
                resolution = match_expression(
                    text,
                    now,
                    prefixes=resolver.prefixes,
                    strict_numerals=resolver.strict_numerals,
                    include_today=resolver.include_today,
                )
            except UnrecognizedDateExpression as exc:
                return failure(
                    op,
                    "UNRECOGNIZED_EXPRESSION",
                    str(exc),
                    input=exc.text,
                    reference_date=now.isoformat(),
                )
            except OverflowError:
                return failure(
                    op,
                    "DATE_OUT_OF_RANGE",
                    f"Date expression {text!r} falls outside the supported calendar range",
                    input=text,
                )
            if span:
                span.annotate("rule", resolution.rule)

        resolved = resolution.date
        logger.debug("Resolved %r via %s", text, resolution.rule)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": text,
                "cleaned": resolution.cleaned,
                "rule": resolution.rule,
                "date": resolved.isoformat(),
                "weekday": WEEKDAY_NAMES[Weekday(resolved.isoweekday())],
                "days_from_reference": days_between(now, resolved),
                "display": self._display(resolved),
                "reference_date": now.isoformat(),
            },
        )

    @traced
    def convert_words(self, text: str) -> ServiceResult:
        """Convert worded numbers into their digit string."""
        op = "convert_words"
        if not text.strip():
            return failure(op, "EMPTY_INPUT", "No number words given")

        warnings: list[str] = []
        if not is_number_phrase(text):
            warnings.append(f"Unrecognized number words in {text!r} were read as zero")

        digits = convert_worded_number(text)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": text,
                "digits": digits,
                "value": str(Decimal(digits)),
            },
            warnings=warnings,
        )

    @traced
    def next_weekday(
        self,
        name: str,
        *,
        start: date | None = None,
        include_start: bool | None = None,
    ) -> ServiceResult:
        """Find the next date falling on the weekday called *name*."""
        op = "next_weekday"
        weekday = parse_weekday(name)
        if weekday is None:
            return failure(
                op,
                "INVALID_WEEKDAY",
                f"Unknown weekday: {name!r}",
                choices=list(WEEKDAY_NAMES.values()),
            )

        origin = start or self.reference_date()
        if include_start is None:
            include_start = self._settings.resolver.include_today
        found = next_weekday_occurrence(weekday, origin, include_start=include_start)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "weekday": WEEKDAY_NAMES[weekday],
                "start": origin.isoformat(),
                "date": found.isoformat(),
                "days_ahead": days_between(origin, found),
                "display": self._display(found),
            },
        )

    @traced
    def format(
        self,
        value: date,
        components: Iterable[FormatComponent | str] | None = None,
        *,
        ordinal: bool | None = None,
    ) -> ServiceResult:
        """Render *value*; configured ``[format]`` defaults fill omitted options."""
        op = "format_date"
        fmt = self._settings.format
        if components is None:
            components = components_from_choices(dow=fmt.dow, month=fmt.month, year=fmt.year)
        if ordinal is None:
            ordinal = fmt.ordinal

        selected = list(components)
        try:
            text = format_date(value, selected, ordinal=ordinal)
        except ValueError as exc:
            return failure(
                op,
                "INVALID_COMPONENTS",
                str(exc),
                components=[str(c) for c in selected],
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"date": value.isoformat(), "text": text},
        )

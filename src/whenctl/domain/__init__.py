"""Domain layer — date arithmetic, numeral parsing, and the expression grammar.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""

from whenctl.domain.arithmetic import add_days, days_between, is_on_or_after, start_of_day
from whenctl.domain.formatting import components_from_choices, format_date
from whenctl.domain.grammar import (
    Resolution,
    UnrecognizedDateExpression,
    match_expression,
    resolve_date_expression,
)
from whenctl.domain.numerals import convert_worded_number, is_number_phrase, to_ordinal
from whenctl.domain.templates import match_literal_date
from whenctl.domain.types import FormatComponent, Weekday
from whenctl.domain.weekdays import next_weekday_occurrence, parse_weekday

__all__ = [
    "FormatComponent",
    "Resolution",
    "UnrecognizedDateExpression",
    "Weekday",
    "add_days",
    "components_from_choices",
    "convert_worded_number",
    "days_between",
    "format_date",
    "is_number_phrase",
    "is_on_or_after",
    "match_expression",
    "match_literal_date",
    "next_weekday_occurrence",
    "parse_weekday",
    "resolve_date_expression",
    "start_of_day",
    "to_ordinal",
]

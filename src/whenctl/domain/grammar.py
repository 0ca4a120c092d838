"""Date expression grammar — normalization and ordered rule dispatch.

Pipeline: NORMALIZE → DAY COUNTS → WEEK COUNTS → HALF WEEK → LITERAL DATE
→ RELATIVE NOUN → WEEKDAY NAME.

The first rule that produces a date wins; later rules are never consulted.
Every rule is a pure function of the cleaned text, the reference date and
the grammar options, so resolution is deterministic for a given "now".

INVARIANT: fractional day counts are always rounded up to the next whole
day before being added.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from whenctl.domain.arithmetic import add_days, start_of_day
from whenctl.domain.numerals import convert_worded_number, is_number_phrase
from whenctl.domain.templates import match_literal_date
from whenctl.domain.weekdays import next_weekday_occurrence, parse_weekday

logger = logging.getLogger(__name__)

FILLER_PREFIXES: tuple[str, ...] = ("expires ", "on ", "in ", "the ")

DAYS_PER_WEEK = 7
HALF_WEEK_DAYS = Decimal("3.5")
HALF_A_WEEK_LITERAL_DAYS = 4

# Widest offset that can still land inside the supported calendar.
_MAX_DAY_OFFSET = (date.max - date.min).days

_WORDS = r"[a-z]+(?:[ -][a-z]+)*"
_WORD = r"\w+"
_HALF = r" and a (?:half|1/2)"

_DIGIT_DAYS_RE = re.compile(r"(\d+) days?")
_DIGIT_WEEKS_RE = re.compile(r"(\d+(?:\.\d+)?) weeks?")
_DIGIT_HALF_WEEKS_RE = re.compile(rf"(\d+){_HALF} weeks?")

_WORD_DAYS_RE = re.compile(rf"({_WORDS}) days?")
_WORD_WEEKS_RE = re.compile(rf"({_WORDS}) weeks?")
_WORD_HALF_WEEKS_RE = re.compile(rf"({_WORDS}){_HALF} weeks?")

# Lenient (non-strict) forms accept one arbitrary word per number slot.
_LOOSE_DAYS_RE = re.compile(rf"({_WORD}) days?")
_LOOSE_WEEKS_RE = re.compile(rf"({_WORD}(?: point {_WORD})?) weeks?")
_LOOSE_HALF_WEEKS_RE = re.compile(rf"({_WORD}){_HALF} weeks?")

_HALF_A_WEEK = frozenset({"half a week", "1/2 a week"})

_RELATIVE_NOUNS: dict[str, int] = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


class UnrecognizedDateExpression(ValueError):
    """No grammar rule matched the given text."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse date expression: {text!r}")
        self.text = text


@dataclass(frozen=True)
class GrammarOptions:
    """Knobs shared by all rules for one resolution."""

    strict_numerals: bool = True
    include_today: bool = False


@dataclass(frozen=True)
class GrammarRule:
    """One recognized phrase shape mapped to a date computation."""

    name: str
    apply: Callable[[str, date, GrammarOptions], date | None]


@dataclass(frozen=True)
class Resolution:
    """A successfully resolved expression."""

    date: date
    rule: str
    cleaned: str


# ── Normalization ─────────────────────────────────────────────────────


def normalize_expression(text: str, prefixes: Sequence[str] = FILLER_PREFIXES) -> str:
    """Lowercase, collapse whitespace, and strip leading filler prefixes.

    Each prefix is checked once, in order, so "on the 5th" loses both
    "on " and "the ".
    """
    cleaned = " ".join(text.lower().split())
    for prefix in prefixes:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix) :]
    return cleaned


# ── Helpers ───────────────────────────────────────────────────────────


def _ceil_days(count: Decimal) -> int:
    if abs(count) > _MAX_DAY_OFFSET:
        msg = f"Day offset {count} is outside the supported calendar range"
        raise OverflowError(msg)
    return math.ceil(count)


def _worded_count(words: str, options: GrammarOptions) -> Decimal | None:
    if options.strict_numerals and not is_number_phrase(words):
        return None
    return Decimal(convert_worded_number(words))


def _weeks_to_days(weeks: Decimal, *, half: bool) -> int:
    days = weeks * DAYS_PER_WEEK
    if half:
        days += HALF_WEEK_DAYS
    return _ceil_days(days)


# ── Rules ─────────────────────────────────────────────────────────────


def _digit_days(text: str, now: date, options: GrammarOptions) -> date | None:
    match = _DIGIT_DAYS_RE.fullmatch(text)
    if match is None:
        return None
    return add_days(now, _ceil_days(Decimal(match.group(1))))


def _worded_days(text: str, now: date, options: GrammarOptions) -> date | None:
    pattern = _WORD_DAYS_RE if options.strict_numerals else _LOOSE_DAYS_RE
    match = pattern.fullmatch(text)
    if match is None:
        return None
    count = _worded_count(match.group(1), options)
    if count is None:
        return None
    return add_days(now, _ceil_days(count))


def _digit_weeks(text: str, now: date, options: GrammarOptions) -> date | None:
    match = _DIGIT_HALF_WEEKS_RE.fullmatch(text)
    if match is not None:
        return add_days(now, _weeks_to_days(Decimal(match.group(1)), half=True))
    match = _DIGIT_WEEKS_RE.fullmatch(text)
    if match is not None:
        return add_days(now, _weeks_to_days(Decimal(match.group(1)), half=False))
    return None


def _worded_weeks(text: str, now: date, options: GrammarOptions) -> date | None:
    if options.strict_numerals:
        half_re, plain_re = _WORD_HALF_WEEKS_RE, _WORD_WEEKS_RE
    else:
        half_re, plain_re = _LOOSE_HALF_WEEKS_RE, _LOOSE_WEEKS_RE

    for pattern, half in ((half_re, True), (plain_re, False)):
        match = pattern.fullmatch(text)
        if match is None:
            continue
        weeks = _worded_count(match.group(1), options)
        if weeks is None:
            continue
        return add_days(now, _weeks_to_days(weeks, half=half))
    return None


def _half_a_week(text: str, now: date, options: GrammarOptions) -> date | None:
    if text in _HALF_A_WEEK:
        return add_days(now, HALF_A_WEEK_LITERAL_DAYS)
    return None


def _literal_date(text: str, now: date, options: GrammarOptions) -> date | None:
    return match_literal_date(text, now)


def _relative_noun(text: str, now: date, options: GrammarOptions) -> date | None:
    offset = _RELATIVE_NOUNS.get(text)
    if offset is None:
        return None
    return add_days(now, offset)


def _weekday_name(text: str, now: date, options: GrammarOptions) -> date | None:
    weekday = parse_weekday(text)
    if weekday is None:
        return None
    return next_weekday_occurrence(weekday, now, include_start=options.include_today)


RULES: tuple[GrammarRule, ...] = (
    GrammarRule("digit_days", _digit_days),
    GrammarRule("worded_days", _worded_days),
    GrammarRule("digit_weeks", _digit_weeks),
    GrammarRule("worded_weeks", _worded_weeks),
    GrammarRule("half_a_week", _half_a_week),
    GrammarRule("literal_date", _literal_date),
    GrammarRule("relative_noun", _relative_noun),
    GrammarRule("weekday_name", _weekday_name),
)


# ── Public API ────────────────────────────────────────────────────────


def match_expression(
    text: str,
    now: date,
    *,
    prefixes: Sequence[str] = FILLER_PREFIXES,
    strict_numerals: bool = True,
    include_today: bool = False,
) -> Resolution:
    """Resolve *text* relative to *now* and report which rule matched.

    Raises:
        UnrecognizedDateExpression: No rule matched.
        OverflowError: The computed date falls outside the supported range.
    """
    now = start_of_day(now)
    cleaned = normalize_expression(text, prefixes)
    options = GrammarOptions(strict_numerals=strict_numerals, include_today=include_today)
    logger.debug("Parsing date expression: %s", cleaned)

    for rule in RULES:
        result = rule.apply(cleaned, now, options)
        if result is not None:
            logger.debug("Rule %s matched %r -> %s", rule.name, cleaned, result.isoformat())
            return Resolution(date=result, rule=rule.name, cleaned=cleaned)

    logger.debug("No grammar rule matched %r", cleaned)
    raise UnrecognizedDateExpression(text)


def resolve_date_expression(
    text: str,
    now: date,
    *,
    prefixes: Sequence[str] = FILLER_PREFIXES,
    strict_numerals: bool = True,
    include_today: bool = False,
) -> date:
    """Resolve a natural-language date expression into a calendar date.

    Examples:
        >>> resolve_date_expression("in 2 and a half weeks", date(2024, 1, 1))
        datetime.date(2024, 1, 19)
        >>> resolve_date_expression("October 14th 2019", date(2024, 1, 1))
        datetime.date(2019, 10, 14)
    """
    return match_expression(
        text,
        now,
        prefixes=prefixes,
        strict_numerals=strict_numerals,
        include_today=include_today,
    ).date

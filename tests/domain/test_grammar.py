"""Tests for expression normalization and grammar rule dispatch."""

from collections.abc import Callable
from datetime import date, datetime, timedelta

import pytest

from whenctl.domain.grammar import (
    RULES,
    UnrecognizedDateExpression,
    match_expression,
    normalize_expression,
    resolve_date_expression,
)

NOW = date(2024, 1, 3)  # a Wednesday


def _plus(days: int) -> date:
    return NOW + timedelta(days=days)


class TestNormalizeExpression:
    def test_lowercases_and_trims(self) -> None:
        assert normalize_expression("  Two   Days ") == "two days"

    def test_strips_prefixes_in_order(self) -> None:
        assert normalize_expression("expires on the 14th") == "14th"
        assert normalize_expression("in 2 days") == "2 days"
        assert normalize_expression("on the 5th") == "5th"

    def test_each_prefix_stripped_once(self) -> None:
        assert normalize_expression("in in 2 days") == "in 2 days"

    def test_prefix_needs_trailing_space(self) -> None:
        assert normalize_expression("the") == "the"
        assert normalize_expression("ontario") == "ontario"

    def test_custom_prefixes(self) -> None:
        assert normalize_expression("due 2 days", ("due ",)) == "2 days"
        assert normalize_expression("in 2 days", ()) == "in 2 days"


class TestDayCounts:
    @pytest.mark.parametrize("n", [0, 1, 2, 7, 30, 365])
    def test_digit_days(self, n: int) -> None:
        assert resolve_date_expression(f"{n} days", NOW) == _plus(n)

    def test_singular(self) -> None:
        assert resolve_date_expression("1 day", NOW) == date(2024, 1, 4)

    @pytest.mark.parametrize("n", [0, 1, 2, 12, 21, 100, 105, 999])
    def test_worded_days(self, n: int, spell: Callable[[int], str]) -> None:
        assert resolve_date_expression(f"{spell(n)} days", NOW) == _plus(n)

    def test_worded_with_filler_and_hyphen(self) -> None:
        assert resolve_date_expression("one hundred and twenty-one days", NOW) == _plus(121)

    def test_prefixed(self) -> None:
        assert resolve_date_expression("in 2 days", NOW) == date(2024, 1, 5)
        assert resolve_date_expression("In Two Days", NOW) == date(2024, 1, 5)


class TestWeekCounts:
    @pytest.mark.parametrize("n", [1, 2, 10, 52])
    def test_digit_weeks(self, n: int) -> None:
        assert resolve_date_expression(f"{n} weeks", NOW) == _plus(7 * n)

    def test_singular(self) -> None:
        assert resolve_date_expression("1 week", NOW) == date(2024, 1, 10)

    def test_fractional_weeks_round_up(self) -> None:
        assert resolve_date_expression("1.5 weeks", NOW) == _plus(11)
        assert resolve_date_expression("0.1 weeks", NOW) == _plus(1)

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_and_a_half(self, n: int) -> None:
        assert resolve_date_expression(f"{n} and a half weeks", NOW) == _plus(7 * n + 4)
        assert resolve_date_expression(f"{n} and a 1/2 weeks", NOW) == _plus(7 * n + 4)

    def test_two_and_a_half_weeks(self) -> None:
        assert resolve_date_expression("in 2 and a half weeks", NOW) == date(2024, 1, 21)

    def test_worded_weeks(self) -> None:
        assert resolve_date_expression("Ten weeks", NOW) == date(2024, 3, 13)
        assert resolve_date_expression("one week", NOW) == date(2024, 1, 10)

    def test_worded_point_weeks(self) -> None:
        assert resolve_date_expression("one point five weeks", NOW) == _plus(11)

    def test_worded_and_a_half(self) -> None:
        assert resolve_date_expression("two and a half weeks", NOW) == date(2024, 1, 21)
        assert resolve_date_expression("three and a 1/2 weeks", NOW) == _plus(25)


class TestHalfAWeek:
    @pytest.mark.parametrize("text", ["half a week", "1/2 a week", "in half a week"])
    def test_is_four_days(self, text: str) -> None:
        assert resolve_date_expression(text, NOW) == date(2024, 1, 7)

    def test_reached_in_lenient_mode(self) -> None:
        assert resolve_date_expression("half a week", NOW, strict_numerals=False) == (
            date(2024, 1, 7)
        )


class TestLiteralDates:
    def test_full_date(self) -> None:
        assert resolve_date_expression("October 14th 2019", NOW) == date(2019, 10, 14)

    def test_month_day_defaults_year(self) -> None:
        assert resolve_date_expression("October 14th", NOW) == date(2024, 10, 14)

    def test_abbreviated_month(self) -> None:
        assert resolve_date_expression("on Oct 22nd", NOW) == date(2024, 10, 22)

    def test_day_only(self) -> None:
        assert resolve_date_expression("on the 5th", NOW) == date(2024, 1, 5)
        assert resolve_date_expression("expires on the 14th", NOW) == date(2024, 1, 14)

    def test_impossible_date_is_unrecognized(self) -> None:
        with pytest.raises(UnrecognizedDateExpression):
            resolve_date_expression("february 30", NOW)


class TestRelativeNouns:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("today", date(2024, 1, 3)),
            ("Tomorrow", date(2024, 1, 4)),
            ("yesterday", date(2024, 1, 2)),
        ],
    )
    def test_nouns(self, text: str, expected: date) -> None:
        assert resolve_date_expression(text, NOW) == expected


class TestWeekdayNames:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Friday", date(2024, 1, 5)),
            ("monday", date(2024, 1, 8)),
            ("on Thursday", date(2024, 1, 4)),
            ("Wednesday", date(2024, 1, 10)),
        ],
    )
    def test_next_occurrence(self, text: str, expected: date) -> None:
        assert resolve_date_expression(text, NOW) == expected

    def test_include_today(self) -> None:
        assert resolve_date_expression("Wednesday", NOW, include_today=True) == NOW

    def test_friday_from_friday(self) -> None:
        assert resolve_date_expression("friday", date(2024, 1, 5)) == date(2024, 1, 12)


class TestUnrecognized:
    @pytest.mark.parametrize(
        "text",
        ["gibberish", "", "   ", "the", "in in 2 days", "twenty apples days", "next friday"],
    )
    def test_raises(self, text: str) -> None:
        with pytest.raises(UnrecognizedDateExpression) as exc_info:
            resolve_date_expression(text, NOW)
        assert exc_info.value.text == text

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Failed to parse date expression"):
            resolve_date_expression("gibberish", NOW)

    def test_strict_rejects_unknown_number_words(self) -> None:
        with pytest.raises(UnrecognizedDateExpression):
            resolve_date_expression("banana days", NOW)

    def test_lenient_reads_unknown_word_as_zero(self) -> None:
        assert resolve_date_expression("banana days", NOW, strict_numerals=False) == NOW


class TestMatchExpression:
    def test_reports_rule_and_cleaned_text(self) -> None:
        resolution = match_expression("  In 2 DAYS ", NOW)
        assert resolution.date == date(2024, 1, 5)
        assert resolution.rule == "digit_days"
        assert resolution.cleaned == "2 days"

    @pytest.mark.parametrize(
        ("text", "rule"),
        [
            ("2 days", "digit_days"),
            ("two days", "worded_days"),
            ("2 weeks", "digit_weeks"),
            ("two weeks", "worded_weeks"),
            ("half a week", "half_a_week"),
            ("october 14", "literal_date"),
            ("today", "relative_noun"),
            ("friday", "weekday_name"),
        ],
    )
    def test_rule_names(self, text: str, rule: str) -> None:
        assert match_expression(text, NOW).rule == rule

    def test_rule_order(self) -> None:
        assert [rule.name for rule in RULES] == [
            "digit_days",
            "worded_days",
            "digit_weeks",
            "worded_weeks",
            "half_a_week",
            "literal_date",
            "relative_noun",
            "weekday_name",
        ]

    def test_datetime_now_is_truncated(self) -> None:
        assert match_expression("2 days", datetime(2024, 1, 3, 23, 30)).date == date(2024, 1, 5)

    def test_custom_prefixes(self) -> None:
        assert match_expression("due 2 days", NOW, prefixes=("due ",)).date == date(2024, 1, 5)

    def test_out_of_range_raises_overflow(self) -> None:
        with pytest.raises(OverflowError):
            match_expression("99999999 days", NOW)


# ── Phrase × prefix matrix ───────────────────────────────────────────

_PHRASES: list[tuple[str, date]] = [
    ("Today", NOW),
    ("Tomorrow", _plus(1)),
    ("October 14th", date(2024, 10, 14)),
    ("October 14th 2019", date(2019, 10, 14)),
    ("October 14", date(2024, 10, 14)),
    ("October 14 2019", date(2019, 10, 14)),
    ("1st", date(2024, 1, 1)),
    ("2nd", date(2024, 1, 2)),
    ("3rd", date(2024, 1, 3)),
    ("4th", date(2024, 1, 4)),
    ("20th", date(2024, 1, 20)),
    ("Monday", date(2024, 1, 8)),
    ("Tuesday", date(2024, 1, 9)),
    ("Wednesday", date(2024, 1, 10)),
    ("Thursday", date(2024, 1, 4)),
    ("Friday", date(2024, 1, 5)),
    ("Saturday", date(2024, 1, 6)),
    ("Sunday", date(2024, 1, 7)),
    ("1 day", _plus(1)),
    ("2 days", _plus(2)),
    ("10 days", _plus(10)),
    ("15 days", _plus(15)),
    ("One day", _plus(1)),
    ("Two days", _plus(2)),
    ("Ten days", _plus(10)),
    ("Fifteen days", _plus(15)),
    ("1 week", _plus(7)),
    ("2 weeks", _plus(14)),
    ("10 weeks", _plus(70)),
    ("15 weeks", _plus(105)),
    ("One week", _plus(7)),
    ("Two weeks", _plus(14)),
    ("Ten weeks", _plus(70)),
    ("Fifteen weeks", _plus(105)),
    ("1.5 weeks", _plus(11)),
    ("One point five weeks", _plus(11)),
    ("1 and a half weeks", _plus(11)),
    ("One and a half weeks", _plus(11)),
    ("Half a week", _plus(4)),
    ("1 and a 1/2 weeks", _plus(11)),
    ("One and a 1/2 weeks", _plus(11)),
    ("1/2 a week", _plus(4)),
]

_PREFIXES = ["", "Expires on ", "On ", "In ", "The ", "On the ", "In the "]


@pytest.mark.parametrize("prefix", _PREFIXES)
@pytest.mark.parametrize(("phrase", "expected"), _PHRASES)
def test_phrase_with_prefix(prefix: str, phrase: str, expected: date) -> None:
    assert resolve_date_expression(prefix + phrase, NOW) == expected


# ── Edge cases ───────────────────────────────────────────────────────


class TestHugeCounts:
    def test_digit_days_beyond_int_string_limit(self) -> None:
        with pytest.raises(OverflowError):
            match_expression("9" * 5000 + " days", NOW)

    def test_digit_weeks_beyond_calendar(self) -> None:
        with pytest.raises(OverflowError):
            match_expression("9" * 5000 + " weeks", NOW)

    def test_largest_reachable_offset(self) -> None:
        assert match_expression("1 days", date.max - timedelta(days=1)).date == date.max


class TestMagnitudeOnlyWords:
    @pytest.mark.parametrize("text", ["hundred days", "and days", "thousand days", "point weeks"])
    def test_rejected_in_strict_mode(self, text: str) -> None:
        with pytest.raises(UnrecognizedDateExpression):
            resolve_date_expression(text, NOW)

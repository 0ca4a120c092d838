"""Shared pytest fixtures and test helpers for whenctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from whenctl.config.settings import WhenSettings
from whenctl.services.resolve import ResolveService
from whenctl.services.telemetry import disable_telemetry

# Wednesday. Every resolution test uses this instead of the system clock.
REFERENCE_DATE = date(2024, 1, 3)

_ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def _spell_group(n: int) -> list[str]:
    hundreds, rest = divmod(n, 100)
    words: list[str] = []
    if hundreds:
        words += [_ONES[hundreds], "hundred"]
    if rest >= 20:
        tens, ones = divmod(rest, 10)
        words.append(_TENS[tens])
        if ones:
            words.append(_ONES[ones])
    elif rest >= 10:
        words.append(_TEENS[rest - 10])
    elif rest:
        words.append(_ONES[rest])
    return words


def spell_number(n: int) -> str:
    """Spell a number below one million in English words."""
    if n == 0:
        return "zero"
    thousands, rest = divmod(n, 1000)
    words: list[str] = []
    if thousands:
        words += [*_spell_group(thousands), "thousand"]
    words += _spell_group(rest)
    return " ".join(words)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop WHENCTL_* variables and reset telemetry and logging around every test."""
    for key in list(os.environ):
        if key.startswith("WHENCTL_"):
            monkeypatch.delenv(key)
    root = logging.getLogger()
    handlers = root.handlers[:]
    package = logging.getLogger("whenctl")
    level = package.level
    yield
    disable_telemetry()
    root.handlers = handlers
    package.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def now() -> date:
    return REFERENCE_DATE


@pytest.fixture
def spell() -> Callable[[int], str]:
    return spell_number


@pytest.fixture
def settings(tmp_path: Path) -> WhenSettings:
    """Settings with no config file and the fixed reference date."""
    return WhenSettings.from_cli(start=tmp_path, today=REFERENCE_DATE)


@pytest.fixture
def service(settings: WhenSettings) -> ResolveService:
    return ResolveService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no stray whenctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)

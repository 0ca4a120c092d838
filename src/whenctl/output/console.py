"""Rich Console factory and theme for whenctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WHEN_THEME = Theme(
    {
        "when.ok": "bold green",
        "when.error": "bold red",
        "when.warning": "bold yellow",
        "when.op": "bold cyan",
        "when.key": "dim",
        "when.date": "bold blue",
        "when.rule": "magenta",
        "when.display": "bold",
    }
)

_KEY_STYLES: dict[str, str] = {
    "date": "when.date",
    "start": "when.date",
    "reference_date": "when.date",
    "rule": "when.rule",
    "display": "when.display",
    "text": "when.display",
    "digits": "when.display",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=WHEN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style name for a result data key."""
    return _KEY_STYLES.get(key, "")

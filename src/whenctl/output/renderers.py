"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text

from whenctl.output.console import create_console, get_output, style_for_key


if TYPE_CHECKING:
    from rich.console import Console

    from whenctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Successful results print only their primary value so the output can be
    captured directly in shell scripts.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _PRIMARY_KEYS.get(result.op)
    if key and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


_PRIMARY_KEYS: dict[str, str] = {
    "resolve": "date",
    "convert_words": "digits",
    "next_weekday": "date",
    "format_date": "text",
}


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="when.ok")
    op = Text(f"  {result.op}", style="when.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="when.key")
    v = Text(str(value), style=style_for_key(key))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 10 else "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line += f"  ({extras})"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="when.error")
    op = Text(f"  {result.op}", style="when.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a resolved expression as a small panel."""
    d = result.data
    lines = [
        f"[when.date]{d.get('date', '?')}[/when.date]  {d.get('display', '')}",
        f"[when.key]weekday:[/when.key] {d.get('weekday', '')}",
        f"[when.key]days from {d.get('reference_date', 'reference')}:[/when.key] "
        f"{d.get('days_from_reference', '')}",
    ]
    if verbose:
        lines.append(f"[when.key]rule:[/when.key] [when.rule]{d.get('rule', '')}[/when.rule]")
        lines.append(f"[when.key]cleaned:[/when.key] {d.get('cleaned', '')}")

    _status_line(console, result)
    console.print(Panel("\n".join(lines), title=Text(str(d.get("input", ""))), expand=False))
    if verbose:
        _render_meta(console, result)


def _render_fields(*keys: str) -> Any:
    """Build a renderer printing *keys* (in order) from ``result.data``."""

    def render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
        _status_line(console, result)
        for key in keys:
            if key in result.data:
                _field(console, key, result.data[key])
        if verbose:
            _render_meta(console, result)

    return render


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────


_OP_RENDERERS: dict[str, Any] = {
    "resolve": _render_resolve,
    "convert_words": _render_fields("input", "digits", "value"),
    "next_weekday": _render_fields("weekday", "start", "date", "days_ahead", "display"),
    "format_date": _render_fields("date", "text"),
}

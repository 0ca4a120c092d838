"""Telemetry primitives — Span, @traced, trace_span.

Disabled by default; the only cost per service call is one ContextVar
lookup. ``--verbose`` switches it on, after which every ``@traced``
operation records a span tree (grammar stage timings and the matched rule)
under ``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from whenctl.services.result import ServiceResult

log = structlog.get_logger("whenctl.telemetry")

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """One timed stage; children are the stages opened while it was current."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    started_ns: int = field(default_factory=time.perf_counter_ns)
    finished_ns: int | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished_ns is None:
            return 0.0
        return (self.finished_ns - self.started_ns) / 1_000_000

    @property
    def end_time(self) -> int | None:
        return self.finished_ns

    def end(self) -> None:
        self.finished_ns = time.perf_counter_ns()

    def child(self, name: str) -> Span:
        span = Span(name=name, parent=self)
        self.children.append(span)
        return span

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Open a child stage under the active span.

    Yields None when telemetry is off or no ``@traced`` call is running,
    so callers guard annotations with ``if span:``.
    """
    parent = get_current_span()
    if parent is None:
        yield None
        return
    with _activate(parent.child(name)) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Record a root span around a service operation.

    ServiceResult return values get the span tree merged into ``meta``;
    anything else is returned unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        try:
            with _activate(root):
                result = func(*args, **kwargs)
        except Exception:
            log.debug("span.failed", span_name=root.name)
            raise

        if not isinstance(result, ServiceResult):
            return result
        log.debug(
            "span.complete",
            span_name=root.name,
            duration_ms=round(root.duration_ms, 3),
            ok=result.ok,
            children=len(root.children),
        )
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn span recording on for the current context (``--verbose``)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    """Turn span recording off for the current context."""
    _verbose_enabled.set(False)


def get_current_span() -> Span | None:
    """Return the innermost active span, or None when telemetry is off."""
    if not _verbose_enabled.get():
        return None
    return _current_span.get()

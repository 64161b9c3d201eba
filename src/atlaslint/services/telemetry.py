"""Per-pass timing for ``--verbose`` runs.

A service entry point decorated with :func:`traced` opens a root span.
Inside it, :func:`trace_span` opens one child per validation step and the
step records what it produced (documents extracted, issues found). The
finished tree lands in ``ServiceResult.meta["telemetry"]``, where the rich
renderer prints it under the check report.

While timing is off, each helper costs a single ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from atlaslint.services.result import ServiceResult

log = structlog.get_logger("atlaslint.telemetry")

_timing_enabled: ContextVar[bool] = ContextVar("atlaslint_timing", default=False)
_active_span: ContextVar[Span | None] = ContextVar("atlaslint_active_span", default=None)


@dataclass
class Span:
    """One timed step: a service call or a single validation pass."""

    name: str
    counts: dict[str, int] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def finish(self) -> None:
        self.finished = time.perf_counter()

    def record(self, **counts: int) -> None:
        self.counts.update(counts)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.counts:
            data["counts"] = dict(self.counts)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def set_telemetry(enabled: bool) -> None:
    """Switch pass timing on or off for the current context."""
    _timing_enabled.set(enabled)


@contextmanager
def _activate(span: Span) -> Generator[Span]:
    token = _active_span.set(span)
    try:
        yield span
    finally:
        span.finish()
        _active_span.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a step as a child of the active span.

    Yields None when timing is off or no :func:`traced` call is running,
    so callers guard their ``record`` calls.
    """
    parent = _active_span.get() if _timing_enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the returned result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _timing_enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        ok = False
        try:
            with _activate(span):
                result = func(*args, **kwargs)
            ok = True
        finally:
            log.debug(
                "span.complete",
                span_name=span.name,
                duration_ms=round(span.duration_ms, 2),
                ok=ok,
                passes={child.name: round(child.duration_ms, 2) for child in span.children},
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": span.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper

"""Operation timings for ``--verbose``.

``@traced`` opens a root :class:`Span` around a service method and
:func:`trace_span` hangs child spans (graph load, GFA write) beneath it.
The finished tree lands in ``ServiceResult.meta["telemetry"]``. With
telemetry off, both cost one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec

import structlog

from panquery.services.result import ServiceResult

logger = structlog.get_logger(__name__)

_enabled: ContextVar[bool] = ContextVar("panquery_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("panquery_active_span", default=None)

P = ParamSpec("P")


@dataclass
class Span:
    """One timed region; ``children`` nest in call order."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
    _active.set(None)


@contextmanager
def _activate(span: Span) -> Generator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a block as a child of the running operation.

    Yields None when telemetry is off or no traced operation is running,
    so callers guard annotations with ``if span is not None``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name=name)
    parent.children.append(child)
    with _activate(child):
        yield child


def traced(func: Callable[P, ServiceResult]) -> Callable[P, ServiceResult]:
    """Record a span tree for a service method and attach it to the result.

    Failed results get an ``error`` annotation holding the error code.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return func(*args, **kwargs)

        with _activate(Span(name=func.__qualname__)) as span:
            result = func(*args, **kwargs)
        if result.error is not None:
            span.annotate("error", result.error.code)

        logger.debug(
            "query timed",
            op=result.op,
            ok=result.ok,
            duration_ms=round(span.duration_ms, 2),
        )
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper

"""BaseService — shared foundation for panquery services.

Every service receives a :class:`GraphSource` at construction time and
reads the graph through it. A graph that fails to load turns the
operation into a ``LOAD_FAILED`` result instead of an exception.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, ParamSpec, TypeVar

from panquery.infrastructure.graph.loader import GraphLoadError
from panquery.services.result import ServiceResult
from panquery.services.telemetry import trace_span

if TYPE_CHECKING:
    from panquery.infrastructure.graph.source import GraphSource
    from panquery.infrastructure.graph.store import VariationGraph

logger = logging.getLogger(__name__)

P = ParamSpec("P")
S = TypeVar("S", bound="BaseService")


def guard_load(
    func: Callable[Concatenate[S, P], ServiceResult],
) -> Callable[Concatenate[S, P], ServiceResult]:
    """Convert a :class:`GraphLoadError` raised by *func* into a failed result."""

    @functools.wraps(func)
    def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> ServiceResult:
        try:
            return func(self, *args, **kwargs)
        except GraphLoadError as exc:
            logger.warning("Graph load failed (%s): %s", exc.code, exc)
            return ServiceResult.failure(
                func.__name__,
                "LOAD_FAILED",
                str(exc),
                reason=exc.code,
                path=str(exc.path),
                line=exc.line_no,
            )

    return wrapper


class BaseService:
    """Base for service classes.

    Usage::

        class PathService(BaseService):
            @traced
            @guard_load
            def length(self, path_name: str) -> ServiceResult:
                g = self.graph
                ...
    """

    def __init__(self, source: GraphSource) -> None:
        self._source = source

    @property
    def graph(self) -> VariationGraph:
        """The loaded graph. Raises GraphLoadError on first access if loading fails."""
        with trace_span("load_graph") as span:
            g = self._source.graph
            if span:
                span.annotate("nodes", g.node_count())
                span.annotate("paths", g.path_count())
        return g

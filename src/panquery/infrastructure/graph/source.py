"""GraphSource — lazily loaded graph for one CLI invocation.

Commands that never touch the graph (``--help``, ``--version``) never
read the file. The loaded graph is cached for the lifetime of the source.
"""

from __future__ import annotations

from pathlib import Path

from panquery.infrastructure.graph.loader import UNREADABLE, GraphLoadError, load_graph
from panquery.infrastructure.graph.store import VariationGraph


class GraphSource:
    """Lazy-loading holder for a single graph resource."""

    def __init__(self, path: Path | None) -> None:
        self._path = path
        self._graph: VariationGraph | None = None

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def graph(self) -> VariationGraph:
        """Return the graph, loading it on first access.

        Raises:
            GraphLoadError: If no path is configured or loading fails.
        """
        if self._graph is None:
            if self._path is None:
                raise GraphLoadError(
                    UNREADABLE,
                    Path(),
                    "no graph configured (use --graph, PANQUERY_GRAPH__PATH, or [graph] path)",
                )
            self._graph = load_graph(self._path)
        return self._graph

    @classmethod
    def from_graph(cls, graph: VariationGraph, path: Path | None = None) -> GraphSource:
        """Wrap an already loaded graph."""
        source = cls(path)
        source._graph = graph
        return source

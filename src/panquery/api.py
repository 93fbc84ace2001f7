"""Sentinel-style query facade for embedding hosts.

Mirrors the flat query surface of the original binding: every function
takes the loaded graph first, never raises for unknown identifiers, and
signals "no result" with ``None``, ``""``, ``0``, ``-1``, or ``[]``.
Python callers that can use optionals should prefer
:mod:`panquery.engine`, where "no data" is unambiguous.
"""

from __future__ import annotations

import logging
from pathlib import Path

from panquery import engine
from panquery.domain.types import EdgeDescriptor, PathPosition
from panquery.infrastructure.graph import GraphLoadError, VariationGraph, load_graph

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def load(path: str | Path) -> VariationGraph | None:
    """Load a graph, or return None if the resource is unreadable or malformed."""
    try:
        return load_graph(path)
    except GraphLoadError as exc:
        logger.warning("Graph load failed (%s): %s", exc.code, exc)
        return None


def node_count(graph: VariationGraph) -> int:
    return graph.node_count()


def path_names(graph: VariationGraph) -> list[str]:
    return list(graph.path_names())


def project(graph: VariationGraph, path_name: str, offset: int) -> PathPosition | None:
    return engine.project(graph, path_name, offset)


def node_sequence(graph: VariationGraph, node_id: int) -> str:
    """Forward-strand sequence, or ``""`` for an unknown node."""
    seq = engine.node_sequence(graph, node_id)
    return "" if seq is None else seq


def node_length(graph: VariationGraph, node_id: int) -> int:
    """Sequence length, or ``0`` for an unknown node."""
    length = engine.node_length(graph, node_id)
    return 0 if length is None else length


def successors(graph: VariationGraph, node_id: int) -> list[EdgeDescriptor]:
    return engine.successors(graph, node_id)


def predecessors(graph: VariationGraph, node_id: int) -> list[EdgeDescriptor]:
    return engine.predecessors(graph, node_id)


def paths_on_node(graph: VariationGraph, node_id: int) -> list[str]:
    return engine.paths_on_node(graph, node_id)


def paths_on_edge(
    graph: VariationGraph,
    from_node: int,
    from_forward: bool,
    to_node: int,
    to_forward: bool,
) -> list[str]:
    return engine.paths_on_edge(graph, from_node, from_forward, to_node, to_forward)


def next_node_on_path(graph: VariationGraph, path_name: str, node_id: int) -> int:
    """Next node id along the path, or ``-1`` on any failure (including path end)."""
    node = engine.next_node_on_path(graph, path_name, node_id)
    return NOT_FOUND if node is None else node


def path_length(graph: VariationGraph, path_name: str) -> int:
    """Path length in bases, or ``0`` for an unknown path."""
    length = engine.path_length(graph, path_name)
    return 0 if length is None else length

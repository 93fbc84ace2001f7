"""Handle resolution and plain node accessors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from panquery.domain.handles import Handle

if TYPE_CHECKING:
    from panquery.infrastructure.graph.store import VariationGraph


def resolve(graph: VariationGraph, node_id: int, *, reverse: bool = False) -> Handle | None:
    """Return the handle for *node_id* on the requested strand, or None if absent."""
    if not graph.has_node(node_id):
        return None
    return graph.get_handle(node_id, reverse)


def node_sequence(graph: VariationGraph, node_id: int) -> str | None:
    """Forward-strand sequence of *node_id*, or None if the node is unknown."""
    handle = resolve(graph, node_id)
    if handle is None:
        return None
    return graph.get_sequence(handle)


def node_length(graph: VariationGraph, node_id: int) -> int | None:
    handle = resolve(graph, node_id)
    if handle is None:
        return None
    return graph.get_length(handle)

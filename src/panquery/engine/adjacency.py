"""Adjacency enumeration across both faces of a node.

Results follow store iteration order: forward face first, then reverse
face, each in edge insertion order. Nothing is sorted or deduplicated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from panquery.domain.types import EdgeDescriptor
from panquery.engine.resolver import resolve

if TYPE_CHECKING:
    from panquery.infrastructure.graph.store import VariationGraph


def successors(graph: VariationGraph, node_id: int) -> list[EdgeDescriptor]:
    """Edges leaving either face of *node_id*.

    ``from_forward`` tells which face of the queried node the edge leaves;
    ``to_forward`` is the orientation of the neighbor it enters.
    """
    edges: list[EdgeDescriptor] = []
    if resolve(graph, node_id) is None:
        return edges
    for is_reverse in (False, True):
        face = graph.get_handle(node_id, is_reverse)
        for neighbor in graph.follow_edges(face):
            edges.append(
                EdgeDescriptor(
                    node_id=graph.get_id(neighbor),
                    from_forward=not is_reverse,
                    to_forward=not graph.get_is_reverse(neighbor),
                )
            )
    return edges


def predecessors(graph: VariationGraph, node_id: int) -> list[EdgeDescriptor]:
    """Edges arriving at either face of *node_id*.

    ``from_forward`` is the orientation of the neighbor the edge leaves;
    ``to_forward`` tells which face of the queried node it arrives at.
    """
    edges: list[EdgeDescriptor] = []
    if resolve(graph, node_id) is None:
        return edges
    for is_reverse in (False, True):
        face = graph.get_handle(node_id, is_reverse)
        for neighbor in graph.follow_edges(face, go_left=True):
            edges.append(
                EdgeDescriptor(
                    node_id=graph.get_id(neighbor),
                    from_forward=not graph.get_is_reverse(neighbor),
                    to_forward=not is_reverse,
                )
            )
    return edges

"""Path membership: which paths visit a node or cross an edge."""

from __future__ import annotations

from typing import TYPE_CHECKING

from panquery.engine.resolver import resolve

if TYPE_CHECKING:
    from panquery.infrastructure.graph.store import VariationGraph


def paths_on_node(graph: VariationGraph, node_id: int) -> list[str]:
    """Name of the path of every step visiting *node_id*, on either strand.

    One entry per visiting step: a path that visits the node three times
    is listed three times. Callers wanting distinct names must dedupe.
    """
    handle = resolve(graph, node_id)
    if handle is None:
        return []
    return [graph.path_of_step(step) for step in graph.steps_on_node(graph.get_id(handle))]


def paths_on_edge(
    graph: VariationGraph,
    from_node: int,
    from_is_forward: bool,
    to_node: int,
    to_is_forward: bool,
) -> list[str]:
    """Sorted, distinct names of paths stepping ``from`` then directly ``to``.

    Both handles must match exactly, orientation included. A path that
    crosses the edge several times is reported once.
    """
    from_handle = resolve(graph, from_node, reverse=not from_is_forward)
    to_handle = resolve(graph, to_node, reverse=not to_is_forward)
    if from_handle is None or to_handle is None:
        return []

    names: set[str] = set()
    for step in graph.steps_on_node(from_node):
        if graph.handle_of_step(step) != from_handle or not graph.has_next_step(step):
            continue
        following = graph.next_step(step)
        if following is not None and graph.handle_of_step(following) == to_handle:
            names.add(graph.path_of_step(step))
    return sorted(names)

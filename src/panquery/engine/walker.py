"""Path walking: the node that follows a given node along a path."""

from __future__ import annotations

from typing import TYPE_CHECKING

from panquery.engine.resolver import resolve

if TYPE_CHECKING:
    from panquery.infrastructure.graph.store import Step, VariationGraph


def find_first_step(graph: VariationGraph, path_name: str, node_id: int) -> Step | None:
    """First step of *path_name* visiting *node_id* on either strand."""
    if not graph.has_path(path_name):
        return None
    forward = resolve(graph, node_id)
    if forward is None:
        return None
    reverse = forward.flip()
    for step in graph.steps(path_name):
        if graph.handle_of_step(step) in (forward, reverse):
            return step
    return None


def next_node_on_path(graph: VariationGraph, path_name: str, node_id: int) -> int | None:
    """Node id of the step right after the first visit of *node_id* on *path_name*.

    Returns None if the path or node is unknown, the node is not on the
    path, or its first visit is the path's last step. Use
    :func:`find_first_step` to tell the last two cases apart.
    """
    step = find_first_step(graph, path_name, node_id)
    if step is None:
        return None
    following = graph.next_step(step)
    if following is None:
        return None
    return graph.get_id(graph.handle_of_step(following))

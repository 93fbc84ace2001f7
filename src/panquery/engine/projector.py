"""Position projection from a linear path offset to graph coordinate.

No per-path index is kept: both the path length and the projection are
linear scans over the path's steps, which suits one-shot queries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from panquery.domain.types import PathPosition

if TYPE_CHECKING:
    from panquery.infrastructure.graph.store import VariationGraph

logger = logging.getLogger(__name__)


def path_length(graph: VariationGraph, path_name: str) -> int | None:
    """Sum of node lengths over every step of *path_name*, or None if unknown."""
    if not graph.has_path(path_name):
        return None
    return sum(graph.get_length(graph.handle_of_step(step)) for step in graph.steps(path_name))


def project(graph: VariationGraph, path_name: str, offset: int) -> PathPosition | None:
    """Map a 0-based *offset* along *path_name* to (node, node offset, strand).

    The first step, in path order, whose span contains *offset* wins.
    On a reverse-strand step the node offset is mirrored, since node
    offsets are always expressed on the forward strand.

    Returns None for an unknown path, a negative offset, or an offset at
    or beyond the path's length.
    """
    total = path_length(graph, path_name)
    if total is None or offset < 0 or offset >= total:
        logger.debug("No projection for %s:%d (path length %s)", path_name, offset, total)
        return None

    running = 0
    for step in graph.steps(path_name):
        handle = graph.handle_of_step(step)
        node_len = graph.get_length(handle)
        if offset < running + node_len:
            offset_in_step = offset - running
            is_reverse = graph.get_is_reverse(handle)
            return PathPosition(
                node_id=graph.get_id(handle),
                offset=node_len - 1 - offset_in_step if is_reverse else offset_in_step,
                is_forward=not is_reverse,
            )
        running += node_len
    return None

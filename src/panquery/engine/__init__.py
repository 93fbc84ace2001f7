"""Query engine over a loaded :class:`~panquery.infrastructure.graph.VariationGraph`.

Every query resolves its identifiers first and returns ``None`` or an
empty list when they name nothing in the graph; none of them raise for
unknown nodes, paths, or out-of-range offsets.
"""

from panquery.engine.adjacency import predecessors, successors
from panquery.engine.membership import paths_on_edge, paths_on_node
from panquery.engine.projector import path_length, project
from panquery.engine.resolver import node_length, node_sequence, resolve
from panquery.engine.walker import find_first_step, next_node_on_path

__all__ = [
    "find_first_step",
    "next_node_on_path",
    "node_length",
    "node_sequence",
    "path_length",
    "paths_on_edge",
    "paths_on_node",
    "predecessors",
    "project",
    "resolve",
    "successors",
]

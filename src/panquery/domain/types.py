"""Derived query result types.

Both types are computed on demand from a loaded graph and hold no
reference back to it.
"""

from __future__ import annotations

from pydantic import BaseModel


class PathPosition(BaseModel):
    """A graph coordinate produced by projecting a linear path offset.

    Attributes:
        node_id: The node the offset falls in.
        offset: Offset within the node's forward-strand sequence.
        is_forward: Whether the path traverses the node on its forward strand.
    """

    model_config = {"frozen": True}

    node_id: int
    offset: int
    is_forward: bool


class EdgeDescriptor(BaseModel):
    """One adjacency of a queried node.

    ``node_id`` is always the neighbor. ``from_forward`` and ``to_forward``
    give the orientation of the edge's source and target handles:

    * successors: the source is the queried node's face the edge leaves
      (``from_forward`` is the "via forward face" flag) and the target is
      the neighbor (``to_forward`` is "neighbor is forward").
    * predecessors: the source is the neighbor (``from_forward`` is
      "neighbor is forward") and the target is the queried node's face the
      edge arrives at (``to_forward``).

    With this labelling an edge ``a -> b`` yields the same triple's
    orientation flags from ``successors(a)`` and ``predecessors(b)``.
    """

    model_config = {"frozen": True}

    node_id: int
    from_forward: bool
    to_forward: bool

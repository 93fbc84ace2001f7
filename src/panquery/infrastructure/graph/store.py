"""VariationGraph — immutable handle-based store for a pangenome graph.

Adjacency lives in a frozen NetworkX DiGraph whose nodes are
:class:`~panquery.domain.handles.Handle` values, two per graph node.
Edges are bidirected: inserting ``A -> B`` also inserts the complement
``flip(B) -> flip(A)``, so following edges from either face of a node
sees every connection that touches that face.

INVARIANT: once constructed, nothing here mutates. Instances are safe to
share between threads without locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple

import networkx as nx

from panquery.domain.handles import Handle
from panquery.domain.sequence import reverse_complement

type _Adjacency = nx.DiGraph


class Step(NamedTuple):
    """One occurrence of a handle at *rank* within path *path_name*."""

    path_name: str
    rank: int
    handle: Handle


class VariationGraph:
    """Read-only store exposing handle, path, step, and edge primitives.

    Args:
        sequences: Node id to forward-strand sequence.
        edges: Directed handle pairs ``(a, b)`` meaning "end of *a* connects
            to start of *b*". Every endpoint must name a node in *sequences*.
        paths: Path name to its ordered handles. Insertion order is kept.
    """

    def __init__(
        self,
        sequences: Mapping[int, str],
        edges: Iterable[tuple[Handle, Handle]],
        paths: Mapping[str, Iterable[Handle]],
    ) -> None:
        adjacency: _Adjacency = nx.DiGraph()
        for node_id in sequences:
            adjacency.add_node(Handle(node_id, False))
            adjacency.add_node(Handle(node_id, True))

        edge_keys: set[tuple[Handle, Handle]] = set()
        for a, b in edges:
            for handle in (a, b):
                if handle.node_id not in sequences:
                    msg = f"Edge {a} -> {b} references unknown node {handle.node_id}"
                    raise KeyError(msg)
            complement = (b.flip(), a.flip())
            if (a, b) not in edge_keys and complement not in edge_keys:
                edge_keys.add((a, b))
            adjacency.add_edge(a, b)
            adjacency.add_edge(*complement)

        self._adjacency: _Adjacency = nx.freeze(adjacency)
        self._edge_count = len(edge_keys)
        self._sequences: Mapping[int, str] = MappingProxyType(dict(sequences))

        path_steps: dict[str, tuple[Step, ...]] = {}
        on_node: dict[int, list[Step]] = {}
        for name, handles in paths.items():
            steps = tuple(Step(name, rank, handle) for rank, handle in enumerate(handles))
            for step in steps:
                if step.handle.node_id not in sequences:
                    msg = f"Path '{name}' references unknown node {step.handle.node_id}"
                    raise KeyError(msg)
                on_node.setdefault(step.handle.node_id, []).append(step)
            path_steps[name] = steps
        self._paths: Mapping[str, tuple[Step, ...]] = MappingProxyType(path_steps)
        self._steps_on_node: Mapping[int, tuple[Step, ...]] = MappingProxyType(
            {node_id: tuple(steps) for node_id, steps in on_node.items()}
        )

    # ------------------------------------------------------------------
    # Existence and handles
    # ------------------------------------------------------------------

    def has_node(self, node_id: int) -> bool:
        return node_id in self._sequences

    def has_path(self, path_name: str) -> bool:
        return path_name in self._paths

    def get_handle(self, node_id: int, is_reverse: bool = False) -> Handle:
        """Build a handle for an existing node.

        Raises:
            KeyError: If *node_id* is not in the graph.
        """
        if node_id not in self._sequences:
            msg = f"Node {node_id} not in graph"
            raise KeyError(msg)
        return Handle(node_id, is_reverse)

    # ------------------------------------------------------------------
    # Node accessors
    # ------------------------------------------------------------------

    def get_sequence(self, handle: Handle) -> str:
        """Return the sequence read along *handle*'s strand."""
        seq = self._sequences[handle.node_id]
        return reverse_complement(seq) if handle.is_reverse else seq

    def get_length(self, handle: Handle) -> int:
        return len(self._sequences[handle.node_id])

    def get_id(self, handle: Handle) -> int:
        return handle.node_id

    def get_is_reverse(self, handle: Handle) -> bool:
        return handle.is_reverse

    def node_ids(self) -> Iterator[int]:
        """Yield node ids in load order."""
        yield from self._sequences

    # ------------------------------------------------------------------
    # Paths and steps
    # ------------------------------------------------------------------

    def path_names(self) -> Iterator[str]:
        """Yield path names in load order."""
        yield from self._paths

    def steps(self, path_name: str) -> Iterator[Step]:
        """Yield the steps of *path_name* in path order."""
        yield from self._paths[path_name]

    def handle_of_step(self, step: Step) -> Handle:
        return step.handle

    def path_of_step(self, step: Step) -> str:
        return step.path_name

    def has_next_step(self, step: Step) -> bool:
        return step.rank + 1 < len(self._paths[step.path_name])

    def next_step(self, step: Step) -> Step | None:
        """Return the step after *step* on its path, or None at path end."""
        steps = self._paths[step.path_name]
        if step.rank + 1 < len(steps):
            return steps[step.rank + 1]
        return None

    def steps_on_node(self, node_id: int) -> Iterator[Step]:
        """Yield every step visiting *node_id*, in either orientation."""
        yield from self._steps_on_node.get(node_id, ())

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def follow_edges(self, handle: Handle, *, go_left: bool = False) -> Iterator[Handle]:
        """Yield handles adjacent to *handle*.

        With ``go_left=False`` yields every ``b`` with an edge ``handle -> b``;
        with ``go_left=True`` yields every ``a`` with an edge ``a -> handle``.
        Order is edge insertion order. Consumers may stop early.
        """
        if go_left:
            yield from self._adjacency.predecessors(handle)
        else:
            yield from self._adjacency.successors(handle)

    def edges(self) -> Iterator[tuple[Handle, Handle]]:
        """Yield each bidirected edge once, in its canonical orientation.

        Of an edge and its complement, the one whose source handle sorts
        first is reported.
        """
        seen: set[tuple[Handle, Handle]] = set()
        for a, b in self._adjacency.edges():
            complement = (b.flip(), a.flip())
            if complement in seen or (a, b) in seen:
                continue
            canonical = min((a, b), complement)
            seen.add(canonical)
            seen.add((a, b))
            yield canonical

    # ------------------------------------------------------------------
    # Summary counts
    # ------------------------------------------------------------------

    def node_count(self) -> int:
        return len(self._sequences)

    def edge_count(self) -> int:
        return self._edge_count

    def path_count(self) -> int:
        return len(self._paths)

    def total_sequence_length(self) -> int:
        return sum(len(seq) for seq in self._sequences.values())

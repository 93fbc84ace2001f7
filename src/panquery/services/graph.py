"""GraphService — node, adjacency, and membership queries.

Thin wrappers over :mod:`panquery.engine` that turn its optionals into
ServiceResult payloads with stable error codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from panquery import engine
from panquery.domain.handles import Handle
from panquery.domain.types import EdgeDescriptor
from panquery.infrastructure.graph.gfa import iter_gfa_lines, write_file
from panquery.services.base import BaseService, guard_load
from panquery.services.result import ServiceResult
from panquery.services.telemetry import trace_span, traced


def _strand(forward: bool) -> str:
    return "+" if forward else "-"


class GraphService(BaseService):
    """Handles whole-graph and per-node queries."""

    @staticmethod
    def _node_not_found(op: str, node_id: int) -> ServiceResult:
        return ServiceResult.failure(
            op, "NOT_FOUND", f"Node {node_id} not found in graph", node_id=node_id
        )

    @traced
    @guard_load
    def info(self) -> ServiceResult:
        """Summary counts for the loaded graph."""
        g = self.graph
        return ServiceResult(
            ok=True,
            op="info",
            data={
                "graph": str(self._source.path) if self._source.path else None,
                "nodes": g.node_count(),
                "edges": g.edge_count(),
                "paths": g.path_count(),
                "total_length": g.total_sequence_length(),
            },
        )

    @traced
    @guard_load
    def sequence(self, node_id: int, *, reverse: bool = False) -> ServiceResult:
        """Sequence of *node_id*, reverse-complemented when *reverse* is set."""
        g = self.graph
        handle = engine.resolve(g, node_id, reverse=reverse)
        if handle is None:
            return self._node_not_found("sequence", node_id)
        return ServiceResult(
            ok=True,
            op="sequence",
            data={
                "node_id": node_id,
                "strand": _strand(handle.is_forward),
                "length": g.get_length(handle),
                "sequence": g.get_sequence(handle),
            },
        )

    @traced
    @guard_load
    def length(self, node_id: int) -> ServiceResult:
        length = engine.node_length(self.graph, node_id)
        if length is None:
            return self._node_not_found("length", node_id)
        return ServiceResult(ok=True, op="length", data={"node_id": node_id, "length": length})

    @traced
    @guard_load
    def successors(self, node_id: int) -> ServiceResult:
        """Edges leaving either face of *node_id*."""
        g = self.graph
        if not g.has_node(node_id):
            return self._node_not_found("successors", node_id)
        edges = engine.successors(g, node_id)
        items = [self._edge_item(node_id, e, outgoing=True) for e in edges]
        return ServiceResult(
            ok=True,
            op="successors",
            data={"node_id": node_id, "count": len(items), "items": items},
        )

    @traced
    @guard_load
    def predecessors(self, node_id: int) -> ServiceResult:
        """Edges arriving at either face of *node_id*."""
        g = self.graph
        if not g.has_node(node_id):
            return self._node_not_found("predecessors", node_id)
        edges = engine.predecessors(g, node_id)
        items = [self._edge_item(node_id, e, outgoing=False) for e in edges]
        return ServiceResult(
            ok=True,
            op="predecessors",
            data={"node_id": node_id, "count": len(items), "items": items},
        )

    @staticmethod
    def _edge_item(node_id: int, edge: EdgeDescriptor, *, outgoing: bool) -> dict[str, Any]:
        source, target = (node_id, edge.node_id) if outgoing else (edge.node_id, node_id)
        return {
            "node_id": edge.node_id,
            "from_forward": edge.from_forward,
            "to_forward": edge.to_forward,
            "edge": (
                f"{source}{_strand(edge.from_forward)} -> {target}{_strand(edge.to_forward)}"
            ),
        }

    @traced
    @guard_load
    def paths_on_node(self, node_id: int, *, unique: bool = False) -> ServiceResult:
        """Paths visiting *node_id*, one entry per visit unless *unique*.

        With *unique*, names are distinct and keep first-visit order.
        """
        g = self.graph
        if not g.has_node(node_id):
            return self._node_not_found("paths_on_node", node_id)
        names = engine.paths_on_node(g, node_id)
        if unique:
            names = list(dict.fromkeys(names))
        return ServiceResult(
            ok=True,
            op="paths_on_node",
            data={"node_id": node_id, "unique": unique, "count": len(names), "items": names},
        )

    @traced
    @guard_load
    def paths_on_edge(self, source: Handle, target: Handle) -> ServiceResult:
        """Distinct, sorted names of paths stepping *source* then *target*."""
        g = self.graph
        for handle in (source, target):
            if not g.has_node(handle.node_id):
                return self._node_not_found("paths_on_edge", handle.node_id)
        names = engine.paths_on_edge(
            g, source.node_id, source.is_forward, target.node_id, target.is_forward
        )
        return ServiceResult(
            ok=True,
            op="paths_on_edge",
            data={
                "from": str(source),
                "to": str(target),
                "count": len(names),
                "items": names,
            },
        )

    @traced
    @guard_load
    def export(self, output: Path) -> ServiceResult:
        """Write the loaded graph to *output* as GFA 1.0."""
        g = self.graph
        lines = iter_gfa_lines(
            ((node_id, g.get_sequence(g.get_handle(node_id))) for node_id in g.node_ids()),
            g.edges(),
            ((name, [g.handle_of_step(s) for s in g.steps(name)]) for name in g.path_names()),
        )
        with trace_span("write_gfa"):
            try:
                written = write_file(lines, output)
            except OSError as exc:
                return ServiceResult.failure(
                    "export", "WRITE_FAILED", f"Cannot write '{output}': {exc}"
                )
        return ServiceResult(
            ok=True,
            op="export",
            data={
                "output": str(output),
                "lines": written,
                "nodes": g.node_count(),
                "edges": g.edge_count(),
                "paths": g.path_count(),
            },
        )

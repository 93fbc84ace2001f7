"""PathService — path listing, lengths, projection, and walking."""

from __future__ import annotations

from typing import Any

from panquery import engine
from panquery.services.base import BaseService, guard_load
from panquery.services.result import ServiceResult
from panquery.services.telemetry import traced


class PathService(BaseService):
    """Handles queries addressed by path name."""

    @staticmethod
    def _path_not_found(op: str, path_name: str) -> ServiceResult:
        return ServiceResult.failure(
            op, "NOT_FOUND", f"Path '{path_name}' not found in graph", path=path_name
        )

    @traced
    @guard_load
    def list_paths(self) -> ServiceResult:
        """Every path with its step count and length, in load order."""
        g = self.graph
        items: list[dict[str, Any]] = []
        for name in g.path_names():
            items.append(
                {
                    "name": name,
                    "steps": sum(1 for _ in g.steps(name)),
                    "length": engine.path_length(g, name),
                }
            )
        return ServiceResult(ok=True, op="list_paths", data={"count": len(items), "items": items})

    @traced
    @guard_load
    def length(self, path_name: str) -> ServiceResult:
        length = engine.path_length(self.graph, path_name)
        if length is None:
            return self._path_not_found("length", path_name)
        return ServiceResult(ok=True, op="length", data={"path": path_name, "length": length})

    @traced
    @guard_load
    def project(self, path_name: str, offset: int) -> ServiceResult:
        """Project a 0-based *offset* on *path_name* to a graph coordinate."""
        g = self.graph
        length = engine.path_length(g, path_name)
        if length is None:
            return self._path_not_found("project", path_name)
        position = engine.project(g, path_name, offset)
        if position is None:
            return ServiceResult.failure(
                "project",
                "NOT_FOUND",
                f"Offset {offset} is outside path '{path_name}' (length {length})",
                path=path_name,
                offset=offset,
                length=length,
            )
        return ServiceResult(
            ok=True,
            op="project",
            data={
                "path": path_name,
                "offset": offset,
                "node_id": position.node_id,
                "node_offset": position.offset,
                "is_forward": position.is_forward,
            },
        )

    @traced
    @guard_load
    def next_node(self, path_name: str, node_id: int) -> ServiceResult:
        """Node that follows the first visit of *node_id* along *path_name*.

        Unlike the engine, reports ``END_OF_PATH`` separately from
        ``NOT_FOUND`` when the node's first visit is the path's last step.
        """
        g = self.graph
        if not g.has_path(path_name):
            return self._path_not_found("next_node", path_name)
        if not g.has_node(node_id):
            return ServiceResult.failure(
                "next_node", "NOT_FOUND", f"Node {node_id} not found in graph", node_id=node_id
            )
        step = engine.find_first_step(g, path_name, node_id)
        if step is None:
            return ServiceResult.failure(
                "next_node",
                "NOT_FOUND",
                f"Node {node_id} is not on path '{path_name}'",
                path=path_name,
                node_id=node_id,
            )
        next_id = engine.next_node_on_path(g, path_name, node_id)
        if next_id is None:
            return ServiceResult.failure(
                "next_node",
                "END_OF_PATH",
                f"Node {node_id} is the last step of path '{path_name}'",
                path=path_name,
                node_id=node_id,
                rank=step.rank,
            )
        return ServiceResult(
            ok=True,
            op="next_node",
            data={
                "path": path_name,
                "node_id": node_id,
                "rank": step.rank,
                "next_node_id": next_id,
            },
        )

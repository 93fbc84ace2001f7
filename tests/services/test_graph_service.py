"""Tests for GraphService — node, adjacency, membership, and export."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import IO

import pytest

from panquery.domain.handles import Handle
from panquery.infrastructure.graph import gfa, load_graph
from panquery.infrastructure.graph.source import GraphSource
from panquery.services.graph import GraphService


class TestInfo:
    def test_counts(self, queries_source: GraphSource, queries_gfa: Path) -> None:
        result = GraphService(queries_source).info()
        assert result.ok
        assert result.op == "info"
        assert result.data == {
            "graph": str(queries_gfa),
            "nodes": 4,
            "edges": 4,
            "paths": 3,
            "total_length": 12,
        }

    def test_lazy_load_from_path(self, queries_gfa: Path) -> None:
        result = GraphService(GraphSource(queries_gfa)).info()
        assert result.ok
        assert result.data["nodes"] == 4

    def test_load_failure(self, tmp_path: Path) -> None:
        result = GraphService(GraphSource(tmp_path / "missing.gfa")).info()
        assert not result.ok
        assert result.op == "info"
        assert result.error is not None
        assert result.error.code == "LOAD_FAILED"
        assert result.error.detail["reason"] == "UNREADABLE"

    def test_no_graph_configured(self) -> None:
        result = GraphService(GraphSource(None)).info()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "LOAD_FAILED"
        assert "no graph configured" in result.error.message

    def test_malformed_graph(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.gfa"
        path.write_text("S\tone\tACGT\n", encoding="utf-8")
        result = GraphService(GraphSource(path)).length(1)
        assert result.error is not None
        assert result.error.code == "LOAD_FAILED"
        assert result.error.detail["reason"] == "MALFORMED"
        assert result.error.detail["line"] == 1


class TestNodeQueries:
    def test_sequence(self, queries_source: GraphSource) -> None:
        result = GraphService(queries_source).sequence(1)
        assert result.ok
        assert result.data == {"node_id": 1, "strand": "+", "length": 7, "sequence": "GATTACA"}

    def test_sequence_reverse(self, queries_source: GraphSource) -> None:
        result = GraphService(queries_source).sequence(1, reverse=True)
        assert result.data["sequence"] == "TGTAATC"
        assert result.data["strand"] == "-"

    def test_sequence_unknown(self, queries_source: GraphSource) -> None:
        result = GraphService(queries_source).sequence(999)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {"node_id": 999}

    def test_length(self, queries_source: GraphSource) -> None:
        result = GraphService(queries_source).length(4)
        assert result.data == {"node_id": 4, "length": 3}

    def test_length_unknown(self, queries_source: GraphSource) -> None:
        result = GraphService(queries_source).length(0)
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestAdjacency:
    def test_successors(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).successors(5)
        assert result.ok
        assert result.data["count"] == 3
        assert [item["edge"] for item in result.data["items"]] == [
            "5+ -> 6+",
            "5+ -> 7-",
            "5- -> 8-",
        ]

    def test_predecessors(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).predecessors(5)
        assert [item["edge"] for item in result.data["items"]] == [
            "8+ -> 5+",
            "6- -> 5-",
            "7+ -> 5-",
        ]
        assert result.data["items"][0] == {
            "node_id": 8,
            "from_forward": True,
            "to_forward": True,
            "edge": "8+ -> 5+",
        }

    def test_unknown_node(self, strands_source: GraphSource) -> None:
        for result in (
            GraphService(strands_source).successors(42),
            GraphService(strands_source).predecessors(42),
        ):
            assert result.error is not None
            assert result.error.code == "NOT_FOUND"


class TestMembership:
    def test_paths_on_node_keeps_every_visit(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).paths_on_node(5)
        assert result.data["items"] == ["fwd", "inv", "cyc", "cyc", "rev"]
        assert result.data["count"] == 5
        assert result.data["unique"] is False

    def test_paths_on_node_unique(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).paths_on_node(5, unique=True)
        assert result.data["items"] == ["fwd", "inv", "cyc", "rev"]
        assert result.data["count"] == 4

    def test_paths_on_edge(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).paths_on_edge(Handle(5), Handle(6))
        assert result.ok
        assert result.data == {"from": "5+", "to": "6+", "count": 2, "items": ["cyc", "fwd"]}

    def test_paths_on_edge_no_traversal(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).paths_on_edge(Handle(5), Handle(7))
        assert result.ok
        assert result.data["items"] == []

    def test_paths_on_edge_unknown_node(self, strands_source: GraphSource) -> None:
        result = GraphService(strands_source).paths_on_edge(Handle(5), Handle(70, True))
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {"node_id": 70}


class TestExport:
    def test_round_trip(self, strands_source: GraphSource, tmp_path: Path) -> None:
        output = tmp_path / "out.gfa"
        result = GraphService(strands_source).export(output)
        assert result.ok
        assert result.data["lines"] == 1 + 4 + 5 + 4

        original = strands_source.graph
        reloaded = load_graph(output)
        assert list(reloaded.node_ids()) == list(original.node_ids())
        for node_id in original.node_ids():
            assert reloaded.get_sequence(Handle(node_id)) == original.get_sequence(Handle(node_id))
        assert sorted(reloaded.edges()) == sorted(original.edges())
        for name in original.path_names():
            assert list(reloaded.steps(name)) == list(original.steps(name))

    def test_unwritable_target(self, queries_source: GraphSource, tmp_path: Path) -> None:
        result = GraphService(queries_source).export(tmp_path / "missing-dir" / "out.gfa")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "WRITE_FAILED"

    def test_failed_write_keeps_existing_file(
        self,
        queries_source: GraphSource,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        exports = tmp_path / "exports"
        exports.mkdir()
        output = exports / "out.gfa"
        output.write_text("previous export\n", encoding="utf-8")

        def _fail_midway(lines: Iterable[str], stream: IO[str]) -> int:
            stream.write(next(iter(lines)) + "\n")
            raise OSError("No space left on device")

        monkeypatch.setattr(gfa, "write_lines", _fail_midway)
        result = GraphService(queries_source).export(output)
        assert result.error is not None
        assert result.error.code == "WRITE_FAILED"
        assert output.read_text(encoding="utf-8") == "previous export\n"
        assert [p.name for p in exports.iterdir()] == ["out.gfa"]

    def test_successful_write_leaves_no_temporary_file(
        self, queries_source: GraphSource, tmp_path: Path
    ) -> None:
        exports = tmp_path / "exports"
        exports.mkdir()
        assert GraphService(queries_source).export(exports / "out.gfa").ok
        assert [p.name for p in exports.iterdir()] == ["out.gfa"]

"""Tests for the all-or-nothing graph loader."""

from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

from panquery.infrastructure.graph import GraphLoadError, VariationGraph, load_graph
from panquery.infrastructure.graph.loader import MALFORMED, UNREADABLE


class TestLoadGraph:
    def test_loads_plain_gfa(self, queries_gfa: Path) -> None:
        graph = load_graph(queries_gfa)
        assert isinstance(graph, VariationGraph)
        assert graph.node_count() == 4
        assert sorted(graph.path_names()) == ["x", "y", "z"]

    def test_accepts_str_path(self, queries_gfa: Path) -> None:
        assert load_graph(str(queries_gfa)).node_count() == 4

    def test_loads_gzipped_gfa(self, queries_gfa: Path, tmp_path: Path) -> None:
        gz_path = tmp_path / "queries.gfa.gz"
        gz_path.write_bytes(gzip.compress(queries_gfa.read_bytes()))
        graph = load_graph(gz_path)
        assert graph.node_count() == 4
        assert graph.edge_count() == 4

    def test_gzip_detected_by_content_not_name(self, queries_gfa: Path, tmp_path: Path) -> None:
        disguised = tmp_path / "graph.gfa"
        disguised.write_bytes(gzip.compress(queries_gfa.read_bytes()))
        assert load_graph(disguised).path_count() == 3

    def test_empty_file_is_empty_graph(self, write_gfa: Callable[..., Path]) -> None:
        graph = load_graph(write_gfa(""))
        assert graph.node_count() == 0
        assert list(graph.path_names()) == []


class TestLoadFailures:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(tmp_path / "nope.gfa")
        assert exc_info.value.code == UNREADABLE
        assert exc_info.value.path == tmp_path / "nope.gfa"
        assert "nope.gfa" in str(exc_info.value)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(tmp_path)
        assert exc_info.value.code == UNREADABLE

    def test_truncated_gzip(self, queries_gfa: Path, tmp_path: Path) -> None:
        truncated = tmp_path / "cut.gfa.gz"
        truncated.write_bytes(gzip.compress(queries_gfa.read_bytes())[:-12])
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(truncated)
        assert exc_info.value.code == UNREADABLE

    def test_corrupt_gzip_body(self, queries_gfa: Path, tmp_path: Path) -> None:
        data = bytearray(gzip.compress(queries_gfa.read_bytes()))
        data[10] = 0x07  # final deflate block with the reserved block type
        corrupt = tmp_path / "corrupt.gfa.gz"
        corrupt.write_bytes(bytes(data))
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(corrupt)
        assert exc_info.value.code == UNREADABLE
        assert "corrupt gzip data" in str(exc_info.value)

    def test_path_with_nul_byte(self, tmp_path: Path) -> None:
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(f"{tmp_path}/bad\x00.gfa")
        assert exc_info.value.code == UNREADABLE

    def test_malformed_content_reports_line(self, write_gfa: Callable[..., Path]) -> None:
        path = write_gfa("S\t1\tA\nL\t1\t+\t2\t+\t0M\n")
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(path)
        assert exc_info.value.code == MALFORMED
        assert exc_info.value.line_no == 2

    def test_binary_content(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.odgi"
        path.write_bytes(b"S\t1\t\xff\xfe\xfa\n")
        with pytest.raises(GraphLoadError) as exc_info:
            load_graph(path)
        assert exc_info.value.code == MALFORMED

"""Shared pytest fixtures for panquery tests.

Two small graphs cover most behavior:

``queries`` (forward strand only)::

    S 1 GATTACA   S 2 T   S 3 G   S 4 GTC
    1+ -> 2+, 1+ -> 3+, 2+ -> 4+, 3+ -> 4+
    x = 1+,2+,4+   y = 1+,3+,4+   z = 1+,2+

``strands`` (reverse traversals and a cycle)::

    S 5 ACGT   S 6 AA   S 7 CCC   S 8 G
    5+ -> 6+, 5+ -> 7-, 7- -> 8+, 6+ -> 8+, 8+ -> 5+
    fwd = 5+,6+,8+         inv = 5+,7-,8+
    cyc = 5+,6+,8+,5+,6+   rev = 8-,7+,5-
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from panquery.infrastructure.graph import VariationGraph, load_graph
from panquery.infrastructure.graph.source import GraphSource
from panquery.services.telemetry import disable_telemetry

QUERIES_GFA = (
    "H\tVN:Z:1.0\n"
    "S\t1\tGATTACA\n"
    "S\t2\tT\n"
    "S\t3\tG\n"
    "S\t4\tGTC\n"
    "L\t1\t+\t2\t+\t0M\n"
    "L\t1\t+\t3\t+\t0M\n"
    "L\t2\t+\t4\t+\t0M\n"
    "L\t3\t+\t4\t+\t0M\n"
    "P\tx\t1+,2+,4+\t*\n"
    "P\ty\t1+,3+,4+\t*\n"
    "P\tz\t1+,2+\t*\n"
)

STRANDS_GFA = (
    "H\tVN:Z:1.0\n"
    "S\t5\tACGT\n"
    "S\t6\tAA\n"
    "S\t7\tCCC\n"
    "S\t8\tG\n"
    "L\t5\t+\t6\t+\t0M\n"
    "L\t5\t+\t7\t-\t0M\n"
    "L\t7\t-\t8\t+\t0M\n"
    "L\t6\t+\t8\t+\t0M\n"
    "L\t8\t+\t5\t+\t0M\n"
    "P\tfwd\t5+,6+,8+\t*\n"
    "P\tinv\t5+,7-,8+\t*\n"
    "P\tcyc\t5+,6+,8+,5+,6+\t*\n"
    "P\trev\t8-,7+,5-\t*\n"
)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Telemetry is a context variable; keep --verbose runs from leaking."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_gfa(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write GFA text to ``tmp_path / name`` and return the path."""

    def _write(text: str, name: str = "graph.gfa") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def queries_gfa(write_gfa: Callable[[str, str], Path]) -> Path:
    return write_gfa(QUERIES_GFA, "queries.gfa")


@pytest.fixture
def strands_gfa(write_gfa: Callable[[str, str], Path]) -> Path:
    return write_gfa(STRANDS_GFA, "strands.gfa")


@pytest.fixture
def queries_graph(queries_gfa: Path) -> VariationGraph:
    return load_graph(queries_gfa)


@pytest.fixture
def strands_graph(strands_gfa: Path) -> VariationGraph:
    return load_graph(strands_gfa)


@pytest.fixture
def queries_source(queries_graph: VariationGraph, queries_gfa: Path) -> GraphSource:
    return GraphSource.from_graph(queries_graph, queries_gfa)


@pytest.fixture
def strands_source(strands_graph: VariationGraph, strands_gfa: Path) -> GraphSource:
    return GraphSource.from_graph(strands_graph, strands_gfa)

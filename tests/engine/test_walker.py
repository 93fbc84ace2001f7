"""Tests for next-node lookup along a path."""

from __future__ import annotations

from panquery.engine import find_first_step, next_node_on_path
from panquery.infrastructure.graph import VariationGraph


class TestNextNodeOnPath:
    def test_forward_path(self, queries_graph: VariationGraph) -> None:
        assert next_node_on_path(queries_graph, "x", 1) == 2
        assert next_node_on_path(queries_graph, "x", 2) == 4

    def test_reverse_visit_matches(self, strands_graph: VariationGraph) -> None:
        # rev = 8-,7+,5- ; inv = 5+,7-,8+
        assert next_node_on_path(strands_graph, "rev", 8) == 7
        assert next_node_on_path(strands_graph, "inv", 7) == 8

    def test_first_visit_wins(self, strands_graph: VariationGraph) -> None:
        # cyc = 5+,6+,8+,5+,6+
        assert next_node_on_path(strands_graph, "cyc", 6) == 8
        assert next_node_on_path(strands_graph, "cyc", 8) == 5

    def test_last_step_has_no_next(self, queries_graph: VariationGraph) -> None:
        assert next_node_on_path(queries_graph, "x", 4) is None
        assert next_node_on_path(queries_graph, "z", 2) is None

    def test_every_path_end(self, strands_graph: VariationGraph) -> None:
        for name in ("fwd", "inv", "rev"):
            last = list(strands_graph.steps(name))[-1]
            assert next_node_on_path(strands_graph, name, last.handle.node_id) is None

    def test_node_not_on_path(self, queries_graph: VariationGraph) -> None:
        assert next_node_on_path(queries_graph, "x", 3) is None

    def test_unknown_path_or_node(self, queries_graph: VariationGraph) -> None:
        assert next_node_on_path(queries_graph, "nope", 1) is None
        assert next_node_on_path(queries_graph, "x", 999) is None


class TestFindFirstStep:
    def test_rank_of_first_visit(self, strands_graph: VariationGraph) -> None:
        step = find_first_step(strands_graph, "cyc", 5)
        assert step is not None
        assert (step.path_name, step.rank) == ("cyc", 0)

    def test_distinguishes_end_of_path(self, queries_graph: VariationGraph) -> None:
        step = find_first_step(queries_graph, "x", 4)
        assert step is not None
        assert queries_graph.next_step(step) is None

    def test_absent(self, queries_graph: VariationGraph) -> None:
        assert find_first_step(queries_graph, "x", 3) is None
        assert find_first_step(queries_graph, "missing", 1) is None

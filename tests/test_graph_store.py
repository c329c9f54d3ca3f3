"""Tests for the Graph store."""

import pytest

from edgegraph import Graph, InputLengthMismatchError, VertexNotFoundError


class TestGraphConstruction:
    """Tests for building a Graph from edge lists."""

    def test_empty_graph(self) -> None:
        graph = Graph.from_edge_lists([], [])
        assert len(graph) == 0
        assert graph.vertices == ()
        assert graph.edge_count == 0

    def test_empty_constructor(self) -> None:
        graph: Graph[str] = Graph()
        assert len(graph) == 0
        assert list(graph.edges()) == []

    def test_single_edge(self) -> None:
        graph = Graph.from_edge_lists(["a"], ["b"])
        assert graph.vertices == ("a", "b")
        assert graph.edge_count == 1

    def test_vertices_in_order_of_first_reference(self) -> None:
        graph = Graph.from_edge_lists(["c", "a", "b"], ["a", "d", "c"])
        assert graph.vertices == ("c", "a", "d", "b")

    def test_vertices_are_deduplicated(self) -> None:
        graph = Graph.from_edge_lists(["a", "b", "a"], ["b", "c", "c"])
        assert len(graph) == 3

    def test_length_mismatch(self) -> None:
        with pytest.raises(InputLengthMismatchError) as exc_info:
            Graph.from_edge_lists(["a", "b"], ["c"])
        assert exc_info.value.sources_length == 2
        assert exc_info.value.destinations_length == 1

    def test_length_mismatch_empty_vs_nonempty(self) -> None:
        with pytest.raises(InputLengthMismatchError):
            Graph.from_edge_lists([], ["a"])

    def test_length_mismatch_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="do not match"):
            Graph.from_edge_lists(["a"], [])

    def test_works_with_integers(self) -> None:
        graph = Graph.from_edge_lists([1, 2], [2, 3])
        assert graph.vertices == (1, 2, 3)

    def test_works_with_tuples(self) -> None:
        graph = Graph.from_edge_lists([("a", 1)], [("b", 2)])
        assert ("a", 1) in graph
        assert ("b", 2) in graph


class TestAddEdge:
    """Tests for incremental edge insertion."""

    def test_creates_missing_vertices(self) -> None:
        graph: Graph[str] = Graph()
        graph.add_edge("a", "b")
        assert graph.vertices == ("a", "b")

    def test_parallel_edges_are_kept(self) -> None:
        graph: Graph[str] = Graph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "b")
        assert len(graph) == 2
        assert graph.edge_count == 2
        assert graph.successors("a") == ("b", "b")

    def test_self_loop(self) -> None:
        graph: Graph[str] = Graph()
        graph.add_edge("a", "a")
        assert len(graph) == 1
        assert graph.successors("a") == ("a",)

    def test_add_vertex_is_idempotent(self) -> None:
        graph: Graph[str] = Graph()
        first = graph.add_vertex("a")
        second = graph.add_vertex("a")
        assert first == second
        assert len(graph) == 1


class TestGraphQueries:
    """Tests for Graph lookup and query methods."""

    def test_contains(self) -> None:
        graph = Graph.from_edge_lists(["a"], ["b"])
        assert "a" in graph
        assert "b" in graph
        assert "c" not in graph

    def test_get_returns_none_for_missing_vertex(self) -> None:
        graph = Graph.from_edge_lists(["a"], ["b"])
        assert graph.get("a") == 0
        assert graph.get("missing") is None

    def test_index_of_missing_vertex(self) -> None:
        graph = Graph.from_edge_lists(["a"], ["b"])
        with pytest.raises(VertexNotFoundError) as exc_info:
            graph.index_of("missing")
        assert exc_info.value.vertex == "missing"

    def test_vertex_not_found_is_key_error(self) -> None:
        graph = Graph.from_edge_lists(["a"], ["b"])
        with pytest.raises(KeyError):
            graph.successors("missing")

    def test_key_round_trips_index(self) -> None:
        graph = Graph.from_edge_lists(["a", "b"], ["b", "c"])
        for vertex in graph:
            assert graph.key(graph.index_of(vertex)) == vertex

    def test_successors(self) -> None:
        graph = Graph.from_edge_lists(["a", "a", "b"], ["b", "c", "c"])
        assert graph.successors("a") == ("b", "c")
        assert graph.successors("c") == ()

    def test_edges_grouped_by_source(self) -> None:
        graph = Graph.from_edge_lists(["a", "b", "a"], ["b", "c", "c"])
        assert list(graph.edges()) == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_iteration_follows_vertices(self) -> None:
        graph = Graph.from_edge_lists(["x", "y"], ["y", "z"])
        assert list(graph) == ["x", "y", "z"]

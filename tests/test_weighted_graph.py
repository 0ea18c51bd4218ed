import pytest

from exercisekit.weighted_graph import Graph, NodeNotInGraph, UndirectedGraph


def test_add_edge():
    graph = UndirectedGraph()
    graph.add_edge(("a", "b", 5))
    graph.add_edge(("b", "c", 10))
    graph.add_edge(("c", "a", 7))
    expected_edges = [
        ("a", "b", 5),
        ("b", "a", 5),
        ("c", "a", 7),
        ("a", "c", 7),
        ("b", "c", 10),
        ("c", "b", 10),
    ]
    edges = graph.edges()
    for edge in expected_edges:
        assert edge in edges
    assert len(edges) == 6


def test_directed_graph_keeps_one_direction():
    graph = Graph()
    graph.add_edge(("a", "b", 3))
    assert graph.edges() == [("a", "b", 3)]
    assert graph.contains("a")
    assert not graph.contains("b")
    assert graph.nodes() == {"a"}


def test_add_node():
    graph = UndirectedGraph()
    assert graph.add_node("x") is True
    assert graph.add_node("x") is False
    assert graph.nodes() == {"x"}
    assert graph.edges() == []


def test_nodes_of_undirected_graph():
    graph = UndirectedGraph()
    graph.add_edge(("a", "b", 1))
    graph.add_edge(("b", "c", 2))
    assert graph.nodes() == {"a", "b", "c"}
    assert "c" in graph
    assert "d" not in graph


def test_add_node_keeps_existing_edges():
    graph = UndirectedGraph()
    graph.add_edge(("a", "b", 4))
    assert graph.add_node("a") is False
    assert ("a", "b", 4) in graph.edges()


def test_node_not_in_graph_message():
    error = NodeNotInGraph()
    assert str(error) == "accessing a node that is not in the graph"
    with pytest.raises(KeyError):
        raise error
"""Weighted graphs keyed by node name, kept as adjacency tables."""

from __future__ import annotations


class NodeNotInGraph(KeyError):
    """Raised when accessing a node that is not in the graph."""

    def __init__(self, message: str = "accessing a node that is not in the graph") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class Graph:
    """A directed graph with integer edge weights."""

    def __init__(self) -> None:
        self.adjacency_table: dict[str, list[tuple[str, int]]] = {}

    def add_node(self, node: str) -> bool:
        """Add ``node``; return False when it was already present."""
        if node in self.adjacency_table:
            return False
        self.adjacency_table[node] = []
        return True

    def _add_edge_logic(self, edge: tuple[str, str, int]) -> None:
        source, target, weight = edge
        self.adjacency_table.setdefault(source, []).append((target, weight))

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        """Add the edge ``(from, to, weight)``."""
        self._add_edge_logic(edge)

    def contains(self, node: str) -> bool:
        return node in self.adjacency_table

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency_table

    def nodes(self) -> set[str]:
        """Return the nodes that have an entry in the adjacency table."""
        return set(self.adjacency_table)

    def edges(self) -> list[tuple[str, str, int]]:
        """Return every edge as ``(from, to, weight)``."""
        return [
            (source, target, weight)
            for source, neighbours in self.adjacency_table.items()
            for target, weight in neighbours
        ]


class UndirectedGraph(Graph):
    """A graph in which every edge is stored in both directions."""

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        source, target, weight = edge
        self._add_edge_logic((source, target, weight))
        self._add_edge_logic((target, source, weight))
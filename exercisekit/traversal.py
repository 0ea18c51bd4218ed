"""Breadth-first and depth-first traversal of a graph with numbered vertices."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class IndexGraph:
    """An undirected graph whose vertices are the integers ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of vertices must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order.

        Neighbours are explored in the order their edges were added.
        """
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order
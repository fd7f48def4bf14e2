"""A directed graph over numbered vertices with depth-first topological ordering."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """Directed graph whose vertices are the integers 0 .. vertex_count - 1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is outside 0..{self.vertex_count - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from v to w."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def topological_sort(self) -> list[int]:
        """Return the vertices in reverse depth-first finishing order.

        Vertices are started in ascending order and neighbours are visited in
        the order their edges were added.
        """
        visited = [False] * self.vertex_count
        finished: list[int] = []
        for start in range(self.vertex_count):
            if visited[start]:
                continue
            visited[start] = True
            stack: list[tuple[int, Iterator[int]]] = [(start, iter(self._adjacency[start]))]
            while stack:
                node, neighbours = stack[-1]
                for neighbour in neighbours:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(self._adjacency[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished
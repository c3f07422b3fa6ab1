"""Directed edge-list graph with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class Edge:
    """A directed edge from ``src`` to ``dst``."""

    src: int
    dst: int
    weight: Any = 0


class InvalidVertexError(ValueError):
    """Raised when an edge names a vertex outside the graph."""


class Graph:
    """Graph whose vertices are numbered from 1 to ``vertex_count``."""

    def __init__(self, vertex_count: int) -> None:
        self._vertex_count = vertex_count
        self._edges: list[Edge] = []

    def vertices(self) -> int:
        """Return the number of vertices."""
        return self._vertex_count

    def edges(self) -> tuple[Edge, ...]:
        """Return all edges in insertion order."""
        return tuple(self._edges)

    def edges_from(self, vertex: int) -> list[Edge]:
        """Return the edges leaving ``vertex``."""
        return [e for e in self._edges if e.src == vertex]

    def add_edge(self, edge: Edge) -> None:
        """Add ``edge``; both ends must be valid vertex numbers."""
        valid = range(1, self._vertex_count + 1)
        if edge.src not in valid or edge.dst not in valid:
            raise InvalidVertexError(f"vertex out of range in {edge}")
        self._edges.append(edge)

    def format(self) -> str:
        """Render the adjacency of vertices 1 .. vertex_count - 1."""
        lines = []
        for vertex in range(1, self._vertex_count):
            targets = "".join(f"{{{e.dst}: {e.weight}}}, " for e in self.edges_from(vertex))
            lines.append(f"{vertex}:\t{targets}")
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.format()


_REFERENCE_ADJACENCY = {
    1: (2, 5),
    2: (1, 5, 4),
    3: (4, 7),
    4: (2, 3, 5, 6, 8),
    5: (1, 2, 4, 8),
    6: (4, 7, 8),
    7: (3, 6),
    8: (4, 5, 6),
}


def create_reference_graph() -> Graph:
    """Build the unweighted sample graph with vertices 1 to 8."""
    graph = Graph(9)
    for src, targets in _REFERENCE_ADJACENCY.items():
        for dst in targets:
            graph.add_edge(Edge(src, dst, 0))
    return graph


def bfs(graph: Graph, start: int) -> list[int]:
    """Return the breadth-first visit order from ``start``."""
    queue = deque([start])
    visited: set[int] = set()
    order: list[int] = []
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        queue.extend(e.dst for e in graph.edges_from(current) if e.dst not in visited)
    return order


def dfs(graph: Graph, start: int) -> list[int]:
    """Return the depth-first visit order from ``start``."""
    stack = [start]
    visited: set[int] = set()
    order: list[int] = []
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        stack.extend(e.dst for e in graph.edges_from(current) if e.dst not in visited)
    return order


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph and its traversals from vertex 1."""
    graph = create_reference_graph()
    print("[Input graph]")
    print(graph.format())
    print("[BFS visit order]")
    for vertex in bfs(graph, 1):
        print(vertex)
    print("[DFS visit order]")
    for vertex in dfs(graph, 1):
        print(vertex)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
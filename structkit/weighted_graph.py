"""Undirected weighted graph with traversal, spanning tree and shortest paths."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Sequence

_ANSWER = {True: "Yes", False: "No"}


class WeightedGraph:
    """Undirected graph on vertices 0 .. vertex_count - 1 with integer weights."""

    def __init__(self, vertex_count: int) -> None:
        self._vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def format(self) -> str:
        """Render the adjacency list with weights."""
        lines = ["Graph adjacency list with weight"]
        for vertex, neighbours in enumerate(self._adjacency):
            cells = "".join(f"[{v}, {w}]" for v, w in neighbours)
            lines.append(f"{vertex}: {cells}")
        return "\n".join(lines) + "\n"

    def is_connected(self) -> bool:
        """Return True if every vertex is reachable from vertex 0."""
        if self._vertex_count == 0:
            return True
        return len(self.bfs(0)) == self._vertex_count

    def is_adjacent(self, u: int, v: int) -> bool:
        """Return True if an edge joins ``u`` and ``v``."""
        self._check(u)
        return any(neighbour == v for neighbour, _ in self._adjacency[u])

    def bfs(self, start: int) -> list[int]:
        """Return the breadth-first visit order from ``start``."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v, _ in self._adjacency[u]:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the depth-first visit order from ``start``, neighbours in insertion order."""
        self._check(start)
        visited: set[int] = set()
        stack = [start]
        order: list[int] = []
        while stack:
            u = stack.pop()
            if u in visited:
                continue
            visited.add(u)
            order.append(u)
            stack.extend(v for v, _ in reversed(self._adjacency[u]) if v not in visited)
        return order

    def min_spanning_tree(self) -> list[tuple[int, int, int]]:
        """Return Prim's tree edges from vertex 0 as (u, v, weight) in the order chosen."""
        if self._vertex_count == 0:
            return []
        in_tree = [False] * self._vertex_count
        in_tree[0] = True
        heap = [(w, 0, v) for v, w in self._adjacency[0]]
        heapq.heapify(heap)
        tree: list[tuple[int, int, int]] = []
        while heap:
            weight, u, v = heapq.heappop(heap)
            if in_tree[v]:
                continue
            in_tree[v] = True
            tree.append((u, v, weight))
            for nxt, w in self._adjacency[v]:
                if not in_tree[nxt]:
                    heapq.heappush(heap, (w, v, nxt))
        return tree

    def dijkstra(self, start: int) -> list[int | None]:
        """Return shortest distances from ``start``; None marks unreachable vertices."""
        self._check(start)
        dist: list[int | None] = [None] * self._vertex_count
        dist[start] = 0
        heap = [(0, start)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, w in self._adjacency[u]:
                candidate = d + w
                if dist[v] is None or candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(heap, (candidate, v))
        return dist


def _report(graph: WeightedGraph, adjacency_queries: Sequence[tuple[int, int]]) -> None:
    print(graph.format(), end="")
    print(f"\nIs graph connected? {_ANSWER[graph.is_connected()]}")
    for u, v in adjacency_queries:
        print(f"Is {u} adjacent to {v}? {_ANSWER[graph.is_adjacent(u, v)]}")
    print("\nBFS from 0:" + "".join(f"{v} " for v in graph.bfs(0)))
    print("DFS from 0:" + "".join(f"{v} " for v in graph.dfs(0)))
    print("\nMinimum Spanning Tree:")
    for u, v, w in graph.min_spanning_tree():
        print(f"{u} - {v} (weight {w})")
    print("\nDijkstra from node 0:")
    for vertex, d in enumerate(graph.dijkstra(0)):
        print(f"Distance from 0 to {vertex}: {'INF' if d is None else d}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration on a connected and a disconnected graph."""
    g = WeightedGraph(9)
    for u, v, w in (
        (0, 1, 15), (0, 2, 25), (1, 4, 10), (1, 7, 5), (1, 8, 25),
        (2, 3, 10), (2, 4, 20), (4, 5, 10), (4, 6, 5), (7, 8, 15),
    ):
        g.add_edge(u, v, w)
    _report(g, [(0, 3), (1, 2)])

    ng = WeightedGraph(5)
    for u, v, w in ((0, 1, 3), (0, 2, 5), (0, 3, 6), (1, 2, 2), (1, 3, 7), (2, 3, 3)):
        ng.add_edge(u, v, w)
    _report(ng, [(0, 3), (1, 2), (4, 0), (4, 1), (4, 2), (4, 3)])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
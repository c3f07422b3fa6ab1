"""Linked list, stack, bracket checking and graph algorithms (BFS, DFS, Prim, Dijkstra)."""

__version__ = "0.1.0"
__all__ = ["linked_list", "stack", "brackets", "graph", "weighted_graph"]
# structkit

A small collection of classic data structures and graph algorithms in plain
Python, with no dependencies outside the standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

- `structkit.linked_list` – `LinkedList`, a singly linked list of arbitrary
  values. It can be built from an iterable, supports iteration and `len()`, and
  offers `add_first`, `add_last`, `delete_first` and `delete_last` (both return
  the removed value), `reverse` (in place), `is_empty`, and `traverse`, which
  writes each element on its own line to a stream (standard output by default).
  Deleting from an empty list raises `EmptyListError`, a subclass of
  `IndexError`.
- `structkit.stack` – `Stack`, a last-in first-out stack built on
  `LinkedList`, with `push`, `pop` (returns the top value), `peek` and `show`
  (writes `Stack data = ` followed by the values, top first). Popping or
  peeking an empty stack raises `EmptyStackError`, a subclass of
  `EmptyListError`.
- `structkit.brackets` – `is_matching(open_char, close_char)`, and two checks
  that `()`, `[]` and `{}` are balanced in a piece of text:
  `check_with_linked_stack` (uses `Stack`) and `check_brackets` (uses a plain
  list). Characters other than brackets are ignored.
- `structkit.graph` – a directed `Graph` whose vertices are numbered from 1 to
  `vertex_count`, holding frozen `Edge(src, dst, weight=0)` objects. It offers
  `vertices()`, `edges()`, `edges_from(vertex)`, `add_edge(edge)` and
  `format()`. Adding an edge with a vertex outside the range raises
  `InvalidVertexError` (a `ValueError`). `create_reference_graph()` builds a
  sample graph on vertices 1 to 8, and `bfs(graph, start)` and
  `dfs(graph, start)` return the visit order as a list.
- `structkit.weighted_graph` – `WeightedGraph`, an undirected graph on
  vertices 0 to `vertex_count - 1` with weighted edges. It offers `add_edge`,
  `format`, `is_connected`, `is_adjacent`, `bfs` and `dfs` (visit orders),
  `min_spanning_tree` (Prim's algorithm from vertex 0, returning
  `(u, v, weight)` tuples in the order chosen) and `dijkstra` (a list of
  shortest distances, with `None` for unreachable vertices). Vertex numbers out
  of range raise `IndexError`.

## Example

```python
from structkit.brackets import check_brackets
from structkit.graph import bfs, create_reference_graph
from structkit.weighted_graph import WeightedGraph

check_brackets("{ int x = (a[5] + b) }")   # True
check_brackets("{ int y = (c*d)")          # False

graph = create_reference_graph()
bfs(graph, 1)                              # visit order starting from vertex 1

g = WeightedGraph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.is_connected()                           # True
g.dijkstra(0)                              # [0, 4, 5]
g.min_spanning_tree()                      # [(0, 1, 4), (1, 2, 1)]
```

## Commands

    structkit-brackets          # stack demo, then bracket checks on sample snippets
    structkit-graph             # reference graph, BFS and DFS visit orders
    structkit-weighted-graph    # weighted graph demo: adjacency, traversals, MST, Dijkstra

The commands run fixed demonstrations and take no options; they do not read
graphs or text from files or from the command line.
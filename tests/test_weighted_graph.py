import pytest

from structkit.weighted_graph import WeightedGraph, main

MAIN_EDGES = [
    (0, 1, 15), (0, 2, 25), (1, 4, 10), (1, 7, 5), (1, 8, 25),
    (2, 3, 10), (2, 4, 20), (4, 5, 10), (4, 6, 5), (7, 8, 15),
]
SPLIT_EDGES = [(0, 1, 3), (0, 2, 5), (0, 3, 6), (1, 2, 2), (1, 3, 7), (2, 3, 3)]


def build(count, edges):
    g = WeightedGraph(count)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def connected():
    return build(9, MAIN_EDGES)


@pytest.fixture
def split():
    return build(5, SPLIT_EDGES)


def test_is_connected(connected, split):
    assert connected.is_connected() is True
    assert split.is_connected() is False


def test_is_adjacent_is_symmetric(connected):
    for u, v, _ in MAIN_EDGES:
        assert connected.is_adjacent(u, v) is True
        assert connected.is_adjacent(v, u) is True
    assert connected.is_adjacent(0, 3) is False
    assert connected.is_adjacent(1, 2) is False


def test_isolated_vertex_has_no_neighbours(split):
    assert [split.is_adjacent(4, v) for v in range(4)] == [False] * 4


def test_bfs_order(connected):
    order = connected.bfs(0)
    assert sorted(order) == list(range(9))
    assert order[:3] == [0, 1, 2]


def test_dfs_follows_insertion_order(connected):
    order = connected.dfs(0)
    assert sorted(order) == list(range(9))
    assert order[:3] == [0, 1, 4]


def test_traversals_skip_unreachable(split):
    assert sorted(split.bfs(0)) == [0, 1, 2, 3]
    assert sorted(split.dfs(0)) == [0, 1, 2, 3]
    assert split.bfs(4) == [4]


def test_min_spanning_tree_is_spanning_tree(connected):
    tree = connected.min_spanning_tree()
    assert len(tree) == 8
    weights = {frozenset((u, v)): w for u, v, w in MAIN_EDGES}
    for u, v, w in tree:
        assert weights[frozenset((u, v))] == w
    assert {v for _, v, _ in tree} == set(range(1, 9))


def test_min_spanning_tree_triangle():
    g = build(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    assert g.min_spanning_tree() == [(0, 1, 1), (1, 2, 2)]


def test_dijkstra_triangle():
    g = build(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
    assert g.dijkstra(0) == [0, 1, 3]


def test_dijkstra_respects_edges(connected):
    dist = connected.dijkstra(0)
    assert dist[0] == 0
    for u, v, w in MAIN_EDGES:
        assert abs(dist[u] - dist[v]) <= w


def test_dijkstra_unreachable_is_none(split):
    dist = split.dijkstra(0)
    assert dist[4] is None
    assert dist[0] == 0


def test_add_edge_out_of_range():
    g = WeightedGraph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2, 1)


def test_format_lists_weights():
    g = build(2, [(0, 1, 7)])
    assert g.format() == "Graph adjacency list with weight\n0: [1, 7]\n1: [0, 7]\n"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Is graph connected? Yes" in out
    assert "Is graph connected? No" in out
    assert "Distance from 0 to 4: INF" in out
    assert "Is 4 adjacent to 0? No" in out
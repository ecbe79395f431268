import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graphs import Edge, bfs, dfs, dijkstra, kruskal, prim

DIJKSTRA_GRAPH = [
    [0, 10, 0, 0, 5],
    [0, 0, 1, 0, 2],
    [0, 0, 0, 4, 0],
    [7, 0, 6, 0, 0],
    [0, 3, 9, 2, 0],
]

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

KRUSKAL_EDGES = [
    Edge(0, 1, 10),
    Edge(0, 2, 6),
    Edge(0, 3, 5),
    Edge(1, 3, 15),
    Edge(2, 3, 4),
    Edge(1, 2, 25),
    Edge(3, 4, 2),
]


@st.composite
def unit_graphs(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    row = st.lists(st.integers(0, 1), min_size=size, max_size=size)
    matrix = draw(st.lists(row, min_size=size, max_size=size))
    start = draw(st.integers(min_value=0, max_value=size - 1))
    return matrix, start


@st.composite
def weighted_digraphs(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    row = st.lists(st.integers(0, 9), min_size=size, max_size=size)
    matrix = draw(st.lists(row, min_size=size, max_size=size))
    source = draw(st.integers(min_value=0, max_value=size - 1))
    return matrix, source


@st.composite
def connected_graphs(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            low = 1 if j == i + 1 else 0
            weight = draw(st.integers(min_value=low, max_value=9))
            matrix[i][j] = matrix[j][i] = weight
    return matrix


def _edges_of(matrix):
    size = len(matrix)
    return [
        Edge(i, j, matrix[i][j])
        for i in range(size)
        for j in range(i + 1, size)
        if matrix[i][j]
    ]


def test_dijkstra_source_example():
    assert dijkstra(DIJKSTRA_GRAPH, 0) == [0, 8, 9, 7, 5]


def test_kruskal_source_example():
    tree = kruskal(5, KRUSKAL_EDGES)
    assert len(tree) == 4
    assert sum(edge.weight for edge in tree) == 21
    assert all(edge in KRUSKAL_EDGES for edge in tree)


def test_kruskal_picks_edges_by_increasing_weight():
    tree = kruskal(5, KRUSKAL_EDGES)
    weights = [edge.weight for edge in tree]
    assert weights == sorted(weights)


def test_prim_source_example():
    tree = prim(PRIM_GRAPH)
    assert sum(edge.weight for edge in tree) == 16
    assert [edge.dest for edge in tree] == [1, 2, 3, 4]
    assert all(PRIM_GRAPH[e.src][e.dest] == e.weight for e in tree)


def test_prim_of_empty_graph_is_empty():
    assert prim([]) == []


def test_dijkstra_unreachable_vertex_is_infinite():
    assert dijkstra([[0, 0], [0, 0]], 0) == [0, math.inf]


def test_bfs_only_follows_entries_equal_to_one():
    assert bfs([[0, 2], [2, 0]], 0) == [0]
    assert dfs([[0, 2], [2, 0]], 0) == [0]


@given(unit_graphs())
def test_bfs_visits_by_nondecreasing_hop_count(case):
    matrix, start = case
    order = bfs(matrix, start)
    hops = dijkstra(matrix, start)
    assert order[0] == start
    assert len(order) == len(set(order))
    assert set(order) == {v for v, d in enumerate(hops) if d != math.inf}
    assert [hops[v] for v in order] == sorted(hops[v] for v in order)


@given(unit_graphs())
def test_dfs_reaches_what_bfs_reaches(case):
    matrix, start = case
    order = dfs(matrix, start)
    assert order[0] == start
    assert len(order) == len(set(order))
    assert set(order) == set(bfs(matrix, start))


@given(unit_graphs())
def test_dfs_each_vertex_is_entered_from_an_earlier_one(case):
    matrix, start = case
    order = dfs(matrix, start)
    for position, vertex in enumerate(order[1:], start=1):
        assert any(matrix[earlier][vertex] == 1 for earlier in order[:position])


@given(weighted_digraphs())
def test_dijkstra_distances_are_consistent(case):
    matrix, source = case
    distances = dijkstra(matrix, source)
    size = len(matrix)
    assert distances[source] == 0
    for u in range(size):
        for v in range(size):
            if matrix[u][v] and distances[u] != math.inf:
                assert distances[v] <= distances[u] + matrix[u][v]
    for v in range(size):
        if v != source and distances[v] != math.inf:
            assert any(
                matrix[u][v] and distances[u] + matrix[u][v] == distances[v]
                for u in range(size)
            )


@given(connected_graphs())
def test_prim_and_kruskal_agree_on_total_weight(matrix):
    size = len(matrix)
    prim_tree = prim(matrix)
    kruskal_tree = kruskal(size, _edges_of(matrix))
    assert len(prim_tree) == size - 1
    assert len(kruskal_tree) == size - 1
    assert sum(e.weight for e in prim_tree) == sum(e.weight for e in kruskal_tree)


def test_bfs_rejects_start_out_of_range():
    with pytest.raises(ValueError):
        bfs([[0, 1], [1, 0]], 2)


def test_dfs_rejects_negative_start():
    with pytest.raises(ValueError):
        dfs([[0, 1], [1, 0]], -1)


def test_dijkstra_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim([[0, 0], [0, 0]])


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        kruskal(2, [Edge(0, 5, 1)])


def test_kruskal_rejects_negative_vertex_count():
    with pytest.raises(ValueError):
        kruskal(-1, [])
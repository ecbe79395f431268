"""Graph traversal, shortest paths and minimum spanning trees.

Graphs other than the edge list given to :func:`kruskal` are square adjacency
matrices: ``graph[u][v]`` is the weight of the edge from ``u`` to ``v`` and 0
means there is no edge.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from operator import attrgetter

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: int


def _order(graph: Matrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_vertex(size: int, vertex: int, role: str) -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"{role} must be in range({size}), got {vertex}")


def _unit_neighbours(graph: Matrix, vertex: int) -> Iterator[int]:
    """Vertices joined to ``vertex`` by an edge marked with exactly 1."""
    return (other for other, mark in enumerate(graph[vertex]) if mark == 1)


def bfs(graph: Matrix, start: int) -> list[int]:
    """Breadth-first visiting order from ``start``; only entries equal to 1 are edges."""
    size = _order(graph)
    _check_vertex(size, start, "start vertex")
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in _unit_neighbours(graph, current):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(graph: Matrix, start: int) -> list[int]:
    """Depth-first visiting order from ``start``; only entries equal to 1 are edges."""
    size = _order(graph)
    _check_vertex(size, start, "start vertex")
    visited = {start}
    order = [start]
    stack = [_unit_neighbours(graph, start)]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(_unit_neighbours(graph, neighbour))
                break
        else:
            stack.pop()
    return order


def dijkstra(graph: Matrix, source: int) -> list[float]:
    """Shortest distance from ``source`` to every vertex; ``math.inf`` if unreachable."""
    size = _order(graph)
    _check_vertex(size, source, "source vertex")
    distances: list[float] = [math.inf] * size
    distances[source] = 0
    unvisited = set(range(size))
    while unvisited:
        nearest = min(sorted(unvisited), key=distances.__getitem__)
        unvisited.remove(nearest)
        if distances[nearest] == math.inf:
            continue
        for other in unvisited:
            weight = graph[nearest][other]
            if weight and distances[nearest] + weight < distances[other]:
                distances[other] = distances[nearest] + weight
    return distances


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order they were chosen."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    candidates = list(edges)
    for edge in candidates:
        _check_vertex(vertex_count, edge.src, "edge source")
        _check_vertex(vertex_count, edge.dest, "edge destination")

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    for edge in sorted(candidates, key=attrgetter("weight")):
        if len(tree) >= vertex_count - 1:
            break
        root_src, root_dest = find(edge.src), find(edge.dest)
        if root_src != root_dest:
            tree.append(edge)
            parent[root_src] = root_dest
    return tree


def prim(graph: Matrix) -> list[Edge]:
    """Minimum spanning tree grown from vertex 0, as one edge per other vertex.

    The edge for vertex ``v`` is ``Edge(parent, v, weight)``; edges are listed
    by increasing ``v``. Raises ValueError if the graph is not connected.
    """
    size = _order(graph)
    if size == 0:
        return []
    keys: list[float] = [math.inf] * size
    keys[0] = 0
    parents: list[int | None] = [None] * size
    outside = set(range(size))
    while outside:
        nearest = min(sorted(outside), key=keys.__getitem__)
        if keys[nearest] == math.inf:
            raise ValueError("graph is not connected")
        outside.remove(nearest)
        for other in outside:
            weight = graph[nearest][other]
            if weight and weight < keys[other]:
                parents[other] = nearest
                keys[other] = weight
    tree: list[Edge] = []
    for vertex in range(1, size):
        parent = parents[vertex]
        assert parent is not None
        tree.append(Edge(parent, vertex, graph[vertex][parent]))
    return tree
"""Classic algorithms over undirected graphs held as adjacency lists.

Vertices are the integers ``0 .. n-1``.  An unweighted graph is a list of
neighbour lists; a weighted graph is a list of ``(neighbour, weight)`` lists.
Unreachable distances are reported as ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

__all__ = [
    "NegativeCycleError",
    "build_graph",
    "dfs_order",
    "bfs_order",
    "connected_components",
    "is_bipartite",
    "has_cycle",
    "topological_order",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "prim_mst",
    "bridges",
    "articulation_points",
]

Adjacency = Sequence[Sequence[int]]
WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"vertex {vertex} is out of range 0..{count - 1}")


def build_graph(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> tuple[list[list[int]], list[list[tuple[int, int]]]]:
    """Build undirected plain and weighted adjacency lists.

    Each edge is ``(u, v)`` or ``(u, v, weight)``; a missing weight is 1.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adj: list[list[int]] = [[] for _ in range(vertex_count)]
    weighted: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        if len(edge) == 2:
            u, v = edge
            weight = 1
        elif len(edge) == 3:
            u, v, weight = edge
        else:
            raise ValueError(f"edge {edge!r} must have two or three items")
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adj[u].append(v)
        weighted[u].append((v, weight))
        adj[v].append(u)
        weighted[v].append((u, weight))
    return adj, weighted


def _dfs_from(adj: Adjacency, start: int, visited: list[bool]) -> list[int]:
    """Depth-first preorder from ``start``, marking vertices as visited."""
    order = [start]
    visited[start] = True
    stack = [iter(adj[start])]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                order.append(v)
                stack.append(iter(adj[v]))
                break
        else:
            stack.pop()
    return order


def dfs_order(adj: Adjacency) -> list[int]:
    """Depth-first visiting order covering every component."""
    visited = [False] * len(adj)
    order: list[int] = []
    for vertex in range(len(adj)):
        if not visited[vertex]:
            order.extend(_dfs_from(adj, vertex, visited))
    return order


def bfs_order(adj: Adjacency) -> list[int]:
    """Breadth-first visiting order covering every component."""
    visited = [False] * len(adj)
    order: list[int] = []
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in adj[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)
    return order


def connected_components(adj: Adjacency) -> list[list[int]]:
    """Connected components, each in depth-first order."""
    visited = [False] * len(adj)
    return [
        _dfs_from(adj, vertex, visited)
        for vertex in range(len(adj))
        if not visited[vertex]
    ]


def is_bipartite(adj: Adjacency) -> bool:
    """Whether the vertices can be two-coloured with no edge inside a colour."""
    color: list[int | None] = [None] * len(adj)
    for start in range(len(adj)):
        if color[start] is not None:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if color[v] is None:
                    color[v] = 1 - color[u]
                    queue.append(v)
                elif color[v] == color[u]:
                    return False
    return True


def has_cycle(adj: Adjacency) -> bool:
    """Whether the undirected graph contains a cycle."""
    visited = [False] * len(adj)
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, u, iter(adj[v])))
                    break
                if v != parent:
                    return True
            else:
                stack.pop()
    return False


def topological_order(adj: Adjacency) -> list[int]:
    """Vertices in reverse depth-first finishing order."""
    visited = [False] * len(adj)
    finished: list[int] = []
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                finished.append(u)
    finished.reverse()
    return finished


def dijkstra(weighted_adj: WeightedAdjacency, source: int) -> list[float]:
    """Shortest distances from ``source`` for non-negative weights."""
    n = len(weighted_adj)
    _check_vertex(source, n)
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in weighted_adj[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def bellman_ford(weighted_adj: WeightedAdjacency, source: int) -> list[float]:
    """Shortest distances from ``source``; raises on a reachable negative cycle."""
    n = len(weighted_adj)
    _check_vertex(source, n)
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, neighbours in enumerate(weighted_adj):
            if dist[u] == math.inf:
                continue
            for v, weight in neighbours:
                if dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    changed = True
        if not changed:
            break
    for u, neighbours in enumerate(weighted_adj):
        if dist[u] == math.inf:
            continue
        for v, weight in neighbours:
            if dist[u] + weight < dist[v]:
                raise NegativeCycleError(
                    "graph contains a negative cycle; shortest paths are undefined"
                )
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    Missing edges are ``math.inf``.  The input is left unchanged.
    """
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            through = dist[i][k]
            if through == math.inf:
                continue
            row_i = dist[i]
            for j in range(n):
                if row_k[j] != math.inf and through + row_k[j] < row_i[j]:
                    row_i[j] = through + row_k[j]
    return dist


def prim_mst(weighted_adj: WeightedAdjacency) -> list[tuple[int, int, int]]:
    """Minimum spanning tree of the component holding vertex 0.

    Returns ``(parent, vertex, weight)`` edges in the order they join the tree.
    """
    n = len(weighted_adj)
    if n == 0:
        return []
    visited = [False] * n
    visited[0] = True
    heap = [(weight, v, 0) for v, weight in weighted_adj[0]]
    heapq.heapify(heap)
    tree: list[tuple[int, int, int]] = []
    while heap:
        weight, u, parent = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        tree.append((parent, u, weight))
        for v, w in weighted_adj[u]:
            if not visited[v]:
                heapq.heappush(heap, (w, v, u))
    return tree


def bridges(adj: Adjacency) -> list[tuple[int, int]]:
    """Edges whose removal disconnects the graph, as ``(parent, child)`` pairs."""
    n = len(adj)
    disc = [-1] * n
    low = [0] * n
    found: list[tuple[int, int]] = []
    clock = 0
    for start in range(n):
        if disc[start] != -1:
            continue
        disc[start] = low[start] = clock
        clock += 1
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if disc[v] == -1:
                    disc[v] = low[v] = clock
                    clock += 1
                    stack.append((v, u, iter(adj[v])))
                    break
                if v != parent:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if low[u] > disc[p]:
                        found.append((p, u))
    return found


def articulation_points(adj: Adjacency) -> list[int]:
    """Vertices whose removal disconnects their component, in ascending order."""
    n = len(adj)
    disc = [-1] * n
    low = [0] * n
    parent = [-1] * n
    children = [0] * n
    is_point = [False] * n
    clock = 0
    for start in range(n):
        if disc[start] != -1:
            continue
        disc[start] = low[start] = clock
        clock += 1
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if disc[v] == -1:
                    children[u] += 1
                    parent[v] = u
                    disc[v] = low[v] = clock
                    clock += 1
                    stack.append((v, iter(adj[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if parent[p] == -1:
                        if children[p] > 1:
                            is_point[p] = True
                    elif low[u] >= disc[p]:
                        is_point[p] = True
    return [vertex for vertex, flag in enumerate(is_point) if flag]
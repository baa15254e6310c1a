"""Single-source and all-pairs shortest paths on nodes numbered from 1."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

from algokit.graph import weighted_adjacency_list

__all__ = ["bellman_ford", "dijkstra", "floyd_warshall"]

Edge = tuple[int, int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is out of range 1..{n}")


def _finite(value: float) -> int | None:
    return None if math.isinf(value) else int(value)


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> dict[int, int | None]:
    """Distances from ``source`` over directed weighted edges.

    Negative weights are allowed. Exactly ``n - 1`` relaxation rounds are
    made, so with a negative cycle reachable from ``source`` the results
    reflect those rounds only. Unreachable nodes map to ``None``.
    """
    _check_node(n, source)
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_node(n, u)
        _check_node(n, v)
    dist: dict[int, float] = {node: math.inf for node in range(1, n + 1)}
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if not math.isinf(dist[u]) and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    return {node: _finite(d) for node, d in dist.items()}


def dijkstra(n: int, edges: Iterable[Edge], source: int) -> dict[int, int | None]:
    """Distances from ``source`` over undirected edges with non-negative weights.

    Unreachable nodes map to ``None``.
    """
    _check_node(n, source)
    edge_list = list(edges)
    for _, _, w in edge_list:
        if w < 0:
            raise ValueError(f"weights must be non-negative, got {w}")
    adj = weighted_adjacency_list(n, edge_list)
    dist: dict[int, float] = {node: math.inf for node in range(1, n + 1)}
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    done: set[int] = set()
    while heap:
        d, u = heapq.heappop(heap)
        if u in done:
            continue
        done.add(u)
        for v, w in adj[u]:
            if v in done:
                continue
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return {node: _finite(d) for node, d in dist.items()}


def floyd_warshall(n: int, edges: Iterable[Edge]) -> list[list[int | None]]:
    """All-pairs distances over directed edges.

    Row and column ``i - 1`` stand for node ``i``; ``None`` marks an
    unreachable pair. When an edge between the same ordered pair is given
    more than once, the last one given is used.
    """
    dist: list[list[float]] = [
        [0 if i == j else math.inf for j in range(n)] for i in range(n)
    ]
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        dist[u - 1][v - 1] = w
    for k in range(n):
        via = dist[k]
        for row in dist:
            through_k = row[k]
            if math.isinf(through_k):
                continue
            for j, cost in enumerate(via):
                if through_k + cost < row[j]:
                    row[j] = through_k + cost
    return [[_finite(d) for d in row] for row in dist]
"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from algokit.dsu import DisjointSet, UnionStrategy
from algokit.graph import weighted_adjacency_list

__all__ = ["kruskal", "prim"]

Edge = tuple[int, int, int]


def kruskal(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order they are chosen.

    Edges of equal weight are considered in input order.
    """
    dsu = DisjointSet(n, UnionStrategy.BY_RANK)
    return [(u, v, w) for u, v, w in sorted(edges, key=lambda e: e[2]) if dsu.union(u, v)]


def prim(n: int, edges: Iterable[Edge], start: int = 1) -> list[Edge]:
    """Edges of a minimum spanning tree of ``start``'s component.

    Each edge is ``(tree_node, new_node, weight)`` in the order nodes join.
    """
    if not 1 <= start <= n:
        raise ValueError(f"node {start} is out of range 1..{n}")
    adj = weighted_adjacency_list(n, edges)
    heap: list[tuple[int, int, int]] = [(0, start, start)]
    visited: set[int] = set()
    chosen: list[Edge] = []
    while heap:
        w, u, v = heapq.heappop(heap)
        if v in visited:
            continue
        visited.add(v)
        if v != start:
            chosen.append((u, v, w))
        for nd, weight in adj[v]:
            if nd not in visited:
                heapq.heappush(heap, (weight, v, nd))
    return chosen
"""Graph problems: guard coverage, connecting roads and message routes."""

from __future__ import annotations

from collections.abc import Iterable

from algokit.graph import adjacency_list, bfs_tree, dfs_order, shortest_path

__all__ = ["guards_cover", "building_roads", "message_route"]


def guards_cover(
    n: int, roads: Iterable[tuple[int, int]], guards: Iterable[tuple[int, int]]
) -> bool:
    """Whether every city ``1..n`` lies within some guard's reach.

    Each guard is ``(city, strength)`` and protects its own city and every
    city at most ``strength`` roads away.
    """
    adj = adjacency_list(n, roads)
    covered: set[int] = set()
    for city, strength in guards:
        if not 1 <= city <= n:
            raise ValueError(f"city {city} is out of range 1..{n}")
        level, _ = bfs_tree(adj, city)
        covered.add(city)
        covered.update(node for node, dist in level.items() if dist <= strength)
    return len(covered) == n


def building_roads(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """New roads that connect all cities, one between consecutive components.

    Each component is represented by its smallest city; the number of roads
    is the number of components minus one.
    """
    adj = adjacency_list(n, edges)
    seen: set[int] = set()
    representatives: list[int] = []
    for node in adj:
        if node in seen:
            continue
        seen.update(dfs_order(adj, node))
        representatives.append(node)
    return list(zip(representatives, representatives[1:]))


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Shortest route of computers from 1 to ``n``, or ``None`` if there is none.

    A computer 1 with no connections never has a route, even when ``n`` is 1.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    adj = adjacency_list(n, edges)
    if not adj[1]:
        return None
    return shortest_path(adj, 1, n)
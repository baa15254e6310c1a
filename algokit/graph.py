"""Graph representations and basic traversals on nodes numbered from 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping

__all__ = [
    "adjacency_list",
    "weighted_adjacency_list",
    "adjacency_matrix",
    "bfs_order",
    "bfs_tree",
    "dfs_order",
    "count_components",
    "depths_and_heights",
    "shortest_path",
]

Adjacency = Mapping[int, Iterable[int]]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is out of range 1..{n}")


def adjacency_list(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    """Undirected adjacency list for nodes ``1..n``, neighbours in edge order."""
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        _check_node(n, u)
        _check_node(n, v)
        adj[u].append(v)
        adj[v].append(u)
    return adj


def weighted_adjacency_list(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> dict[int, list[tuple[int, int]]]:
    """Undirected adjacency list of ``(neighbour, weight)`` pairs."""
    adj: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Undirected 0/1 matrix; row and column ``i - 1`` stand for node ``i``."""
    matrix = [[0] * n for _ in range(n)]
    for u, v in edges:
        _check_node(n, u)
        _check_node(n, v)
        matrix[u - 1][v - 1] = 1
        matrix[v - 1][u - 1] = 1
    return matrix


def bfs_tree(adj: Adjacency, source: int) -> tuple[dict[int, int], dict[int, int | None]]:
    """Breadth-first levels and parents of every node reachable from ``source``.

    The source has level 0 and parent ``None``.
    """
    level = {source: 0}
    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj.get(u, ()):
            if v in level:
                continue
            level[v] = level[u] + 1
            parent[v] = u
            queue.append(v)
    return level, parent


def bfs_order(adj: Adjacency, source: int) -> list[int]:
    """Nodes in the order a breadth-first search from ``source`` visits them."""
    order = [source]
    seen = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj.get(u, ()):
            if v not in seen:
                seen.add(v)
                order.append(v)
                queue.append(v)
    return order


def dfs_order(adj: Adjacency, source: int) -> list[int]:
    """Nodes in the order a depth-first search from ``source`` enters them."""
    order = [source]
    seen = {source}
    stack = [iter(adj.get(source, ()))]
    while stack:
        for v in stack[-1]:
            if v not in seen:
                seen.add(v)
                order.append(v)
                stack.append(iter(adj.get(v, ())))
                break
        else:
            stack.pop()
    return order


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components among nodes ``1..n``."""
    adj = adjacency_list(n, edges)
    seen: set[int] = set()
    components = 0
    for node in adj:
        if node in seen:
            continue
        components += 1
        seen.update(dfs_order(adj, node))
    return components


def depths_and_heights(
    adj: Adjacency, root: int
) -> tuple[dict[int, int], dict[int, int]]:
    """Depth and subtree height of every node in the DFS tree from ``root``."""
    depth = {root: 0}
    height = {root: 0}
    stack = [(root, iter(adj.get(root, ())))]
    while stack:
        u, neighbours = stack[-1]
        for v in neighbours:
            if v not in depth:
                depth[v] = depth[u] + 1
                height[v] = 0
                stack.append((v, iter(adj.get(v, ()))))
                break
        else:
            stack.pop()
            if stack:
                p = stack[-1][0]
                height[p] = max(height[p], height[u] + 1)
    return depth, height


def shortest_path(adj: Adjacency, source: int, target: int) -> list[int] | None:
    """Fewest-edge path from ``source`` to ``target``, or ``None`` if unreachable."""
    _, parent = bfs_tree(adj, source)
    if target not in parent:
        return None
    path: list[int] = []
    current: int | None = target
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return path
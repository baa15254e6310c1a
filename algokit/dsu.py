"""Disjoint-set union with selectable union strategy."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

__all__ = ["UnionStrategy", "DisjointSet", "find_cycle_edges"]


class UnionStrategy(Enum):
    """How two sets are linked by :meth:`DisjointSet.union`."""

    PLAIN = "plain"
    BY_SIZE = "size"
    BY_RANK = "rank"


class DisjointSet:
    """Disjoint sets over nodes ``1..n``, each initially on its own."""

    def __init__(self, n: int, strategy: UnionStrategy = UnionStrategy.BY_RANK) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.n = n
        self.strategy = strategy
        self._parent: list[int | None] = [None] * (n + 1)
        self._size = [1] * (n + 1)
        self._rank = [0] * (n + 1)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.n:
            raise ValueError(f"node {node} is out of range 1..{self.n}")

    def find(self, node: int) -> int:
        """Leader of the set holding ``node``."""
        self._check(node)
        parent = self._parent[node]
        while parent is not None:
            node = parent
            parent = self._parent[node]
        return node

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were apart."""
        leader_a = self.find(a)
        leader_b = self.find(b)
        if leader_a == leader_b:
            return False
        if self.strategy is UnionStrategy.BY_SIZE:
            if self._size[leader_a] < self._size[leader_b]:
                leader_a, leader_b = leader_b, leader_a
            self._parent[leader_b] = leader_a
            self._size[leader_a] += self._size[leader_b]
        elif self.strategy is UnionStrategy.BY_RANK:
            if self._rank[leader_b] > self._rank[leader_a]:
                self._parent[leader_a] = leader_b
            else:
                self._parent[leader_b] = leader_a
                if self._rank[leader_a] == self._rank[leader_b]:
                    self._rank[leader_a] += 1
        else:
            self._parent[leader_b] = leader_a
        return True


def find_cycle_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Edges, in input order, whose ends were already connected by earlier ones."""
    dsu = DisjointSet(n, UnionStrategy.BY_SIZE)
    return [(u, v) for u, v in edges if not dsu.union(u, v)]
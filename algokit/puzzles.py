"""Small contest-style puzzles on digit strings and binary trees."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["split_increasing", "min_leaf_level"]


def split_increasing(digits: str) -> tuple[int, int] | None:
    """Split ``digits`` into two positive numbers with the second larger.

    The cut is made just before the first non-zero digit after the first
    position. Returns ``None`` when no valid split exists.
    """
    if not digits.isdigit() and digits:
        raise ValueError(f"not a digit string: {digits!r}")
    cut = next((i for i, ch in enumerate(digits) if i > 0 and ch != "0"), 0)
    if cut == 0:
        return None
    first, second = int(digits[:cut]), int(digits[cut:])
    if first == 0 or second == 0 or second <= first:
        return None
    return first, second


def min_leaf_level(directions: str, children: Sequence[tuple[int, int]]) -> int:
    """Smallest level of a leaf reachable from node 1.

    Nodes are numbered from 1; ``children[i - 1]`` holds the left and right
    child of node ``i``, with 0 meaning none. The root has level 1, and a
    child keeps its parent's level when its own letter in ``directions`` is
    ``'L'``, otherwise it sits one level deeper.
    """
    n = len(children)
    if len(directions) != n:
        raise ValueError("directions and children must have the same length")
    if n == 0:
        raise ValueError("the tree must have at least one node")
    for pair in children:
        for child in pair:
            if not 0 <= child <= n:
                raise ValueError(f"child {child} is out of range 0..{n}")
    level = {1: 1}
    stack = [1]
    best: int | None = None
    while stack:
        u = stack.pop()
        kids = [c for c in children[u - 1] if c]
        if not kids:
            best = level[u] if best is None else min(best, level[u])
        for v in kids:
            if v in level:
                continue
            level[v] = level[u] + (0 if directions[v - 1] == "L" else 1)
            stack.append(v)
    if best is None:
        raise ValueError("no leaf is reachable from the root")
    return best
"""Classic 0/1 knapsack and small dynamic-programming exercises."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["knapsack", "frog_min_cost", "fibonacci", "can_form_expression"]


def knapsack(values: Iterable[int], weights: Iterable[int], capacity: int) -> int:
    """Best total value of items fitting in ``capacity``, each used at most once.

    A capacity of zero always yields zero, even for zero-weight items.
    """
    vs = list(values)
    ws = list(weights)
    if len(vs) != len(ws):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    for weight in ws:
        if weight < 0:
            raise ValueError(f"weights must be non-negative, got {weight}")
    best = [0] * (capacity + 1)
    for value, weight in zip(vs, ws):
        for j in range(capacity, max(weight, 1) - 1, -1):
            best[j] = max(best[j], best[j - weight] + value)
    return best[capacity]


def frog_min_cost(heights: Iterable[int]) -> int:
    """Least total cost for a frog to reach the last stone from the first.

    The frog jumps one or two stones ahead; a jump costs the absolute
    difference of the heights.
    """
    hs = list(heights)
    if not hs:
        raise ValueError("at least one stone is required")
    costs = [0]
    for i in range(1, len(hs)):
        best = costs[i - 1] + abs(hs[i] - hs[i - 1])
        if i >= 2:
            best = min(best, costs[i - 2] + abs(hs[i] - hs[i - 2]))
        costs.append(best)
    return costs[-1]


def fibonacci(n: int) -> int:
    """The ``n``-th term of the sequence starting 1, 1, 2, 3, ..."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def can_form_expression(nums: Iterable[int], target: int) -> bool:
    """Whether signs can be put before every number so they sum to ``target``."""
    reachable = {target}
    for value in nums:
        reachable = {s + value for s in reachable} | {s - value for s in reachable}
    return 0 in reachable
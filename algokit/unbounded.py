"""Unbounded knapsack family: knapsack, rod cutting and coin change."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = [
    "unbounded_knapsack",
    "rod_cutting",
    "coin_change_table",
    "coin_change_ways",
    "min_coins",
]


def _positive_sizes(sizes: Iterable[int], what: str) -> list[int]:
    items = list(sizes)
    for size in items:
        if size <= 0:
            raise ValueError(f"{what} must be positive, got {size}")
    return items


def _non_negative(amount: int, what: str) -> None:
    if amount < 0:
        raise ValueError(f"{what} must be non-negative, got {amount}")


def unbounded_knapsack(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> int:
    """Best total value with each item usable any number of times."""
    ws = _positive_sizes(weights, "weights")
    vs = list(values)
    if len(ws) != len(vs):
        raise ValueError("weights and values must have the same length")
    _non_negative(capacity, "capacity")
    best = [0] * (capacity + 1)
    for weight, value in zip(ws, vs):
        for j in range(weight, capacity + 1):
            best[j] = max(best[j], best[j - weight] + value)
    return best[capacity]


def rod_cutting(prices: Iterable[int]) -> int:
    """Best revenue from a rod of length ``len(prices)``, where piece
    length ``k`` sells for ``prices[k - 1]``."""
    ps = list(prices)
    return unbounded_knapsack(range(1, len(ps) + 1), ps, len(ps))


def coin_change_table(coins: Iterable[int], target: int) -> list[list[int]]:
    """Counting table: cell ``[i][j]`` is the number of ways to make ``j``
    from the first ``i`` coin kinds, each usable any number of times."""
    cs = _positive_sizes(coins, "coins")
    _non_negative(target, "target")
    table = [[1] + [0] * target]
    for coin in cs:
        prev = table[-1]
        row: list[int] = []
        for j in range(target + 1):
            row.append(prev[j] + (row[j - coin] if coin <= j else 0))
        table.append(row)
    return table


def coin_change_ways(coins: Iterable[int], target: int) -> int:
    """Number of coin combinations (order ignored) summing to ``target``."""
    return coin_change_table(coins, target)[-1][target]


def min_coins(coins: Iterable[int], target: int) -> int | None:
    """Fewest coins summing to ``target``, or ``None`` when impossible."""
    cs = _positive_sizes(coins, "coins")
    _non_negative(target, "target")
    fewest: list[float] = [0] + [math.inf] * target
    for coin in cs:
        for j in range(coin, target + 1):
            fewest[j] = min(fewest[j], fewest[j - coin] + 1)
    result = fewest[target]
    return None if math.isinf(result) else int(result)
"""Subset-sum decision and counting over non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["subset_sum_exists", "subset_count_table", "count_subsets"]


def _validated(nums: Iterable[int], target: int) -> list[int]:
    items = list(nums)
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    negatives = [x for x in items if x < 0]
    if negatives:
        raise ValueError(f"numbers must be non-negative, got {negatives[0]}")
    return items


def subset_sum_exists(nums: Iterable[int], target: int) -> bool:
    """Whether some subset of ``nums`` adds up to ``target``."""
    items = _validated(nums, target)
    reachable = [True] + [False] * target
    for value in items:
        reachable = [
            reachable[j] or (value <= j and reachable[j - value])
            for j in range(target + 1)
        ]
    return reachable[target]


def subset_count_table(nums: Iterable[int], target: int) -> list[list[int]]:
    """Counting table: cell ``[i][j]`` is the number of subsets of the first
    ``i`` numbers that sum to ``j``. Zeros are counted as distinct items."""
    items = _validated(nums, target)
    table = [[1] + [0] * target]
    for value in items:
        prev = table[-1]
        table.append([
            prev[j] + (prev[j - value] if value <= j else 0)
            for j in range(target + 1)
        ])
    return table


def count_subsets(nums: Iterable[int], target: int) -> int:
    """Number of subsets of ``nums`` that sum to ``target``."""
    return subset_count_table(nums, target)[-1][target]
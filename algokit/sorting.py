"""Merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["merge_sort"]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(nums: Iterable[Any]) -> list[Any]:
    """Return a new list with the items of ``nums`` in ascending, stable order."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))
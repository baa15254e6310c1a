import random

import pytest

from algokit.sorting import merge_sort


@pytest.mark.parametrize(
    "nums",
    [[], [1], [2, 1], [5, 3, 8, 1, 9, 2], [4, 4, 4], [-3, 10, 0, -7, 10]],
)
def test_matches_sorted(nums):
    assert merge_sort(nums) == sorted(nums)


def test_random_lists():
    rng = random.Random(1234)
    for _ in range(50):
        nums = [rng.randint(-100, 100) for _ in range(rng.randint(0, 60))]
        assert merge_sort(nums) == sorted(nums)


def test_input_untouched():
    nums = [3, 1, 2]
    result = merge_sort(nums)
    assert nums == [3, 1, 2]
    assert result == [1, 2, 3]


def test_accepts_iterables():
    assert merge_sort(iter((9, 7, 8))) == [7, 8, 9]
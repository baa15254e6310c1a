import pytest

from algokit.dsu import DisjointSet, UnionStrategy, find_cycle_edges

ALL_STRATEGIES = list(UnionStrategy)


def test_find_follows_parent_chain():
    dsu = DisjointSet(7, UnionStrategy.PLAIN)
    dsu.union(1, 2)
    dsu.union(1, 3)
    dsu.union(6, 4)
    dsu.union(4, 5)
    assert dsu.find(2) == 1
    assert dsu.find(5) == 6


def test_plain_union_puts_second_under_first():
    dsu = DisjointSet(3, UnionStrategy.PLAIN)
    dsu.union(2, 1)
    assert dsu.find(1) == 2


def test_rank_equal_ranks_keeps_first_leader():
    dsu = DisjointSet(3, UnionStrategy.BY_RANK)
    dsu.union(1, 2)
    assert dsu.find(2) == 1
    dsu.union(3, 2)
    assert dsu.find(3) == 1


def test_size_smaller_joins_larger():
    dsu = DisjointSet(3, UnionStrategy.BY_SIZE)
    dsu.union(1, 2)
    dsu.union(3, 1)
    assert dsu.find(3) == dsu.find(1) == 1


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_union_reports_merge(strategy):
    dsu = DisjointSet(4, strategy)
    assert dsu.union(1, 2) is True
    assert dsu.union(2, 1) is False


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_connectivity_matches_components(strategy):
    dsu = DisjointSet(8, strategy)
    for a, b in [(1, 2), (3, 4), (2, 4), (5, 6), (7, 8), (6, 8)]:
        dsu.union(a, b)
    assert len({dsu.find(x) for x in (1, 2, 3, 4)}) == 1
    assert len({dsu.find(x) for x in (5, 6, 7, 8)}) == 1
    assert dsu.find(1) != dsu.find(5)


@pytest.mark.parametrize("node", [0, 5])
def test_out_of_range(node):
    dsu = DisjointSet(4)
    with pytest.raises(ValueError):
        dsu.find(node)


def test_cycle_edges_triangle():
    assert find_cycle_edges(3, [(1, 2), (2, 3), (3, 1)]) == [(3, 1)]


def test_cycle_edges_forest_has_none():
    assert find_cycle_edges(5, [(1, 2), (3, 4), (4, 5)]) == []


def test_cycle_edges_count_invariant():
    edges = [(1, 2), (2, 3), (3, 4), (4, 1), (1, 3), (2, 4)]
    # a connected graph on 4 nodes keeps 3 tree edges
    assert len(find_cycle_edges(4, edges)) == len(edges) - (4 - 1)
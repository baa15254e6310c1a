import pytest

from algokit.graph import (
    adjacency_list,
    adjacency_matrix,
    bfs_order,
    bfs_tree,
    count_components,
    depths_and_heights,
    dfs_order,
    shortest_path,
    weighted_adjacency_list,
)

TREE_EDGES = [(1, 2), (1, 3), (2, 4)]


def test_adjacency_list_undirected():
    assert adjacency_list(3, [(1, 2), (2, 3)]) == {1: [2], 2: [1, 3], 3: [2]}


def test_adjacency_list_rejects_bad_node():
    with pytest.raises(ValueError):
        adjacency_list(3, [(1, 4)])


def test_weighted_adjacency_list():
    adj = weighted_adjacency_list(3, [(1, 2, 7), (2, 3, 9)])
    assert adj == {1: [(2, 7)], 2: [(1, 7), (3, 9)], 3: [(2, 9)]}


def test_adjacency_matrix_symmetric():
    edges = [(1, 2), (2, 4), (3, 4)]
    matrix = adjacency_matrix(4, edges)
    assert all(matrix[i][j] == matrix[j][i] for i in range(4) for j in range(4))
    ones = {(i + 1, j + 1) for i in range(4) for j in range(4) if matrix[i][j]}
    assert ones == {(u, v) for u, v in edges} | {(v, u) for u, v in edges}


def test_adjacency_matrix_bad_node():
    with pytest.raises(ValueError):
        adjacency_matrix(2, [(0, 1)])


def test_bfs_and_dfs_order():
    adj = adjacency_list(4, TREE_EDGES)
    assert bfs_order(adj, 1) == [1, 2, 3, 4]
    assert dfs_order(adj, 1) == [1, 2, 4, 3]


def test_traversals_cover_same_nodes():
    adj = adjacency_list(7, [(1, 2), (2, 3), (3, 1), (4, 5), (3, 6)])
    assert set(bfs_order(adj, 1)) == set(dfs_order(adj, 1))
    assert 4 not in bfs_order(adj, 1)


def test_bfs_tree_levels_follow_parents():
    adj = adjacency_list(6, [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])
    level, parent = bfs_tree(adj, 1)
    assert parent[1] is None
    for node, par in parent.items():
        if par is not None:
            assert level[node] == level[par] + 1
    assert 6 not in level


def test_count_components():
    assert count_components(5, []) == 5
    assert count_components(5, [(1, 2), (3, 4)]) == 3
    assert count_components(4, [(1, 2), (2, 3), (3, 4)]) == count_components(1, [])


@pytest.mark.parametrize("length", [1, 2, 5])
def test_depths_and_heights_on_path(length):
    adj = adjacency_list(length, [(i, i + 1) for i in range(1, length)])
    depth, height = depths_and_heights(adj, 1)
    for node in range(1, length + 1):
        assert depth[node] == node - 1
        assert height[node] == length - node


def test_depths_and_heights_branching():
    adj = adjacency_list(4, TREE_EDGES)
    depth, height = depths_and_heights(adj, 1)
    assert height[1] == max(depth.values())
    assert height[3] == height[4] == depth[1]


def test_shortest_path():
    adj = adjacency_list(5, [(1, 2), (2, 3), (3, 4), (1, 4), (4, 5)])
    path = shortest_path(adj, 1, 5)
    assert path == [1, 4, 5]
    level, _ = bfs_tree(adj, 1)
    assert len(path) - 1 == level[5]


def test_shortest_path_edges_exist():
    adj = adjacency_list(6, [(1, 2), (2, 3), (3, 6), (1, 5), (5, 6)])
    path = shortest_path(adj, 1, 6)
    assert path[0] == 1 and path[-1] == 6
    for a, b in zip(path, path[1:]):
        assert b in adj[a]


def test_shortest_path_trivial_and_unreachable():
    adj = adjacency_list(3, [(1, 2)])
    assert shortest_path(adj, 2, 2) == [2]
    assert shortest_path(adj, 1, 3) is None
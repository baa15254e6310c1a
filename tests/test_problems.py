import pytest

from algokit.graph import count_components
from algokit.problems import building_roads, guards_cover, message_route


def test_guard_reaches_whole_path():
    assert guards_cover(3, [(1, 2), (2, 3)], [(1, 2)]) is True


def test_guard_too_weak():
    assert guards_cover(3, [(1, 2), (2, 3)], [(1, 1)]) is False


def test_two_guards_share_the_work():
    assert guards_cover(4, [(1, 2), (2, 3), (3, 4)], [(1, 1), (4, 1)]) is True


def test_isolated_city_needs_its_own_guard():
    assert guards_cover(2, [], [(1, 5)]) is False
    assert guards_cover(2, [], [(1, 0), (2, 0)]) is True


def test_guard_out_of_range():
    with pytest.raises(ValueError):
        guards_cover(2, [(1, 2)], [(3, 1)])


def test_building_roads_connects_everything():
    edges = [(1, 2), (3, 4), (6, 7)]
    n = 7
    roads = building_roads(n, edges)
    assert len(roads) == count_components(n, edges) - 1
    assert count_components(n, edges + roads) == 1


def test_building_roads_uses_smallest_representatives():
    assert building_roads(4, [(1, 2), (3, 4)]) == [(1, 3)]


def test_building_roads_connected_graph_needs_none():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


def test_message_route_example():
    edges = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)]
    assert message_route(5, edges) == [1, 4, 5]


def test_message_route_follows_edges():
    edges = [(1, 2), (2, 3), (3, 6), (1, 4), (4, 5), (5, 6)]
    route = message_route(6, edges)
    undirected = {frozenset(e) for e in edges}
    assert route[0] == 1 and route[-1] == 6
    assert all(frozenset(pair) in undirected for pair in zip(route, route[1:]))


def test_message_route_impossible():
    assert message_route(4, [(1, 2), (3, 4)]) is None
    assert message_route(1, []) is None
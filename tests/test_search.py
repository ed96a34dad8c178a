from itertools import pairwise

import pytest

from treasuremap.clues import empty_locations
from treasuremap.graph import Graph
from treasuremap.search import dfs_find_treasure, route_cost, shortest_path


def make_graph(names, edges):
    graph = Graph(names)
    for u, v, cost in edges:
        graph.add_undirected_edge(u, v, cost)
    return graph


@pytest.fixture
def triangle():
    # A-B 1, B-C 1, A-C 5
    return make_graph(["A", "B", "C"], [(0, 1, 1), (1, 2, 1), (0, 2, 5)])


def test_shortest_path_prefers_cheaper_detour(triangle):
    assert shortest_path(triangle, 0, 2) == [0, 1, 2]


def test_shortest_path_cost_not_above_direct_edge(triangle):
    route = shortest_path(triangle, 0, 2)
    assert route_cost(triangle, route) <= route_cost(triangle, [0, 2])


def test_shortest_path_to_self(triangle):
    assert shortest_path(triangle, 1, 1) == [1]


def test_shortest_path_unreachable_is_empty():
    graph = make_graph(["A", "B", "C"], [(0, 1, 1)])
    assert shortest_path(graph, 0, 2) == []


def test_shortest_path_saturated_cost_is_unreachable():
    graph = make_graph(["A", "B"], [(0, 1, 2**32 - 1)])
    assert shortest_path(graph, 0, 1) == []


def test_shortest_path_tie_settles_larger_index_first():
    graph = make_graph(
        ["A", "B", "C", "D"], [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)]
    )
    assert shortest_path(graph, 0, 3) == [0, 2, 3]


def test_route_cost_counts_parallel_edges():
    graph = make_graph(["A", "B"], [(0, 1, 2), (0, 1, 3)])
    assert route_cost(graph, [0, 1]) == 5


def test_route_cost_of_single_node_is_zero(triangle):
    assert route_cost(triangle, [0]) == 0


def test_dfs_without_clues_uses_adjacency_order(triangle):
    locations = empty_locations(3)
    assert dfs_find_treasure(triangle, locations, 0, 1) == [0, 1]


def test_dfs_follows_clue_first(triangle):
    locations = empty_locations(3)
    locations[0].next_index = 2
    assert dfs_find_treasure(triangle, locations, 0, 1) == [0, 2, 1]


def test_dfs_clue_can_jump_to_non_neighbour():
    graph = make_graph(["A", "B", "C"], [(0, 1, 1), (1, 2, 1)])
    locations = empty_locations(3)
    locations[0].next_index = 2
    assert dfs_find_treasure(graph, locations, 0, 2) == [0, 2]


def test_dfs_start_is_treasure(triangle):
    assert dfs_find_treasure(triangle, empty_locations(3), 2, 2) == [2]


def test_dfs_unreachable_returns_none():
    graph = make_graph(["A", "B", "C"], [(0, 1, 1)])
    assert dfs_find_treasure(graph, empty_locations(3), 0, 2) is None


def test_dfs_backtracks_out_of_dead_end_clue():
    # A-B, A-D, B-C ; clue at A points to B, but treasure D lies off A.
    graph = make_graph(["A", "B", "C", "D"], [(0, 1, 1), (1, 2, 1), (0, 3, 1)])
    locations = empty_locations(4)
    locations[0].next_index = 1
    assert dfs_find_treasure(graph, locations, 0, 3) == [0, 3]


def test_dfs_route_has_no_repeats_and_valid_steps():
    graph = make_graph(
        ["A", "B", "C", "D", "E"],
        [(0, 1, 1), (1, 2, 1), (2, 0, 1), (2, 3, 1), (3, 4, 1), (1, 3, 1)],
    )
    locations = empty_locations(5)
    locations[0].next_index = 2
    locations[2].next_index = 1
    route = dfs_find_treasure(graph, locations, 0, 4)
    assert route[0] == 0 and route[-1] == 4
    assert len(route) == len(set(route))
    for u, v in pairwise(route):
        neighbours = {edge.target for edge in graph.adjacency[u]}
        assert v in neighbours or locations[u].next_index == v
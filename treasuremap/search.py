"""Route finding: clue-guided depth-first search and Dijkstra's shortest path."""

from __future__ import annotations

import heapq
from collections.abc import Iterator, Sequence
from itertools import pairwise

from treasuremap.clues import Location
from treasuremap.graph import Graph

_UNREACHABLE = 2**32 - 1


def _candidates(graph: Graph, locations: Sequence[Location], node: int) -> Iterator[int]:
    """Yield the nodes to try from ``node``: its clue first, then its neighbours."""
    suggested = locations[node].next_index
    if suggested is not None:
        yield suggested
    for edge in graph.adjacency[node]:
        yield edge.target


def dfs_find_treasure(
    graph: Graph, locations: Sequence[Location], start: int, treasure: int
) -> list[int] | None:
    """Search for ``treasure`` from ``start``, following clues before plain edges.

    A node is never revisited within the current partial route, but may be
    reached again along a different branch. Returns the route as a list of
    node indices, or None if the treasure cannot be reached.
    """
    path = [start]
    on_path = {start}
    if start == treasure:
        return path

    stack = [_candidates(graph, locations, start)]
    while stack:
        for candidate in stack[-1]:
            if candidate in on_path:
                continue
            path.append(candidate)
            on_path.add(candidate)
            if candidate == treasure:
                return list(path)
            stack.append(_candidates(graph, locations, candidate))
            break
        else:
            stack.pop()
            on_path.discard(path.pop())
    return None


def shortest_path(graph: Graph, start: int, target: int) -> list[int]:
    """Return the cheapest route from ``start`` to ``target``, or [] if none exists.

    Costs saturate at 2**32 - 1, which counts as unreachable. Among entries of
    equal cost, the node with the larger index is settled first.
    """
    n = len(graph.names)
    dist = [_UNREACHABLE] * n
    parents: list[int | None] = [None] * n

    dist[start] = 0
    heap: list[tuple[int, int]] = [(0, -start)]

    while heap:
        cost, negated = heapq.heappop(heap)
        node = -negated
        if cost > dist[node]:
            continue
        if node == target:
            break
        for edge in graph.adjacency[node]:
            new_cost = min(cost + edge.cost, _UNREACHABLE)
            if new_cost < dist[edge.target]:
                dist[edge.target] = new_cost
                parents[edge.target] = node
                heapq.heappush(heap, (new_cost, -edge.target))

    if dist[target] == _UNREACHABLE:
        return []

    route = []
    current = target
    while (parent := parents[current]) is not None:
        route.append(current)
        current = parent
    route.append(start)
    route.reverse()
    return route


def route_cost(graph: Graph, route: Sequence[int]) -> int:
    """Sum the costs of every edge joining consecutive nodes of ``route``.

    Parallel edges between the same pair of nodes all count.
    """
    return sum(
        edge.cost
        for u, v in pairwise(route)
        for edge in graph.adjacency[u]
        if edge.target == v
    )
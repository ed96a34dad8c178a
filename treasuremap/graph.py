"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A half of an undirected edge: the neighbour it leads to and its cost."""

    target: int
    cost: int


class Graph:
    """Named nodes joined by undirected weighted edges.

    ``names[i]`` is the name of node ``i``, ``name_to_index`` maps a name back
    to its index, and ``adjacency[i]`` lists every edge leaving node ``i``.
    When a name appears more than once, the last occurrence owns the name.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.names: list[str] = list(names)
        self.name_to_index: dict[str, int] = {
            name: index for index, name in enumerate(self.names)
        }
        self.adjacency: list[list[Edge]] = [[] for _ in self.names]

    def __len__(self) -> int:
        return len(self.names)

    def __repr__(self) -> str:
        return f"Graph(names={self.names!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.adjacency):
            raise IndexError(f"node index {index} out of range")

    def add_undirected_edge(self, u: int, v: int, cost: int) -> None:
        """Connect ``u`` and ``v`` in both directions with the given cost."""
        self._check_index(u)
        self._check_index(v)
        self.adjacency[u].append(Edge(v, cost))
        self.adjacency[v].append(Edge(u, cost))

    def index_of(self, name: str) -> int | None:
        """Return the index of ``name``, or None if the graph has no such node."""
        return self.name_to_index.get(name)
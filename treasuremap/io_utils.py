"""Reading map files and writing routes."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from treasuremap.graph import Graph

NODES_PREFIX = "Nodos:"
EDGES_HEADER = "Aristas:"

_MAX_COST = 2**32 - 1
_COST_PATTERN = re.compile(r"\+?[0-9]+")


class MapFormatError(ValueError):
    """Raised when a map or clue file does not follow the expected format."""


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _clean_lines(lines: Iterable[str]) -> Iterator[str]:
    return (_strip_line_ending(line) for line in lines)


def _parse_cost(text: str) -> int:
    if not _COST_PATTERN.fullmatch(text):
        raise MapFormatError(f"cost is not a valid number: {text!r}")
    cost = int(text)
    if cost > _MAX_COST:
        raise MapFormatError(f"cost is not a valid number: {text!r}")
    return cost


def parse_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from the lines of a map description.

    The first line is ``Nodos: A,B,C``, the second ``Aristas:``, and each
    following line ``origin,target,cost``. Lines that do not split into
    exactly three fields are skipped.
    """
    rows = _clean_lines(lines)

    first = next(rows, None)
    if first is None:
        raise MapFormatError("empty map file")
    if not first.startswith(NODES_PREFIX):
        raise MapFormatError(f"expected a line starting with {NODES_PREFIX!r}")
    names = [name.strip() for name in first[len(NODES_PREFIX):].strip().split(",")]
    graph = Graph(names)

    header = next(rows, None)
    if header is None:
        raise MapFormatError(f"missing {EDGES_HEADER!r} section")
    if header.strip() != EDGES_HEADER:
        raise MapFormatError(f"expected a line {EDGES_HEADER!r}")

    for row in rows:
        fields = [field.strip() for field in row.strip().split(",")]
        if len(fields) != 3:
            continue
        origin, target, cost_text = fields
        cost = _parse_cost(cost_text)
        u = graph.index_of(origin)
        v = graph.index_of(target)
        if u is None or v is None:
            raise MapFormatError(f"unknown node: {origin!r} or {target!r}")
        graph.add_undirected_edge(u, v, cost)

    return graph


def read_graph(path: str | os.PathLike[str]) -> Graph:
    """Read a map description from ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_graph(handle)


def write_route(route: Iterable[str], path: str | os.PathLike[str]) -> None:
    """Write the route to ``path``, one location per line."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for location in route:
            handle.write(f"{location}\n")
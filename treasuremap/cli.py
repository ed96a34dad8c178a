"""Interactive treasure hunt over a map file and a clue file."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from treasuremap.clues import read_clues
from treasuremap.graph import Graph
from treasuremap.io_utils import MapFormatError, read_graph, write_route
from treasuremap.search import dfs_find_treasure, route_cost, shortest_path

_MENU = "\n=== MENU ===\n1) Follow clues (DFS)\n2) Shortest path (Dijkstra)\n0) Quit"


def _format_route(names: Sequence[str]) -> str:
    return "[" + ", ".join(json.dumps(name, ensure_ascii=False) for name in names) + "]"


def _read(prompt: str) -> str | None:
    print(prompt, end="", flush=True)
    try:
        return input()
    except EOFError:
        return None


def _save(names: Sequence[str], output: str) -> None:
    write_route(names, output)
    print(f"Route saved to '{output}'.\n")


def _follow_clues(graph: Graph, locations, start: int, treasure: int, output: str) -> None:
    print("\n--- Option 1: DFS following clues ---\n")
    route = dfs_find_treasure(graph, locations, start, treasure)
    if route is None:
        print("The treasure was not found by following the clues.\n")
        return
    names = [graph.names[i] for i in route]
    print(f"Treasure found! Route (DFS): {_format_route(names)}\n")
    _save(names, output)


def _shortest(graph: Graph, start: int, treasure: int, output: str) -> None:
    print("\n--- Option 2: Shortest path with Dijkstra ---\n")
    route = shortest_path(graph, start, treasure)
    if not route:
        print("Dijkstra found no route.\n")
        return
    names = [graph.names[i] for i in route]
    print(f"Treasure found! Route (Dijkstra): {_format_route(names)}\n")
    print(f"Total route cost: {route_cost(graph, route)}\n")
    _save(names, output)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="treasuremap", description="Hunt for treasure on a weighted map."
    )
    parser.add_argument("--graph", default="grafo.txt", help="map file")
    parser.add_argument("--clues", default="pistas.txt", help="clue file")
    parser.add_argument("--output", default="ruta_tesoro.txt", help="route output file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive hunt; return the process exit status."""
    args = _parse_args(argv)

    try:
        print(f"Loading graph from '{args.graph}'\n")
        graph = read_graph(args.graph)
        print(f"Graph loaded with {len(graph.names)} nodes.\n")

        print(f"Loading clues from '{args.clues}'\n")
        locations, treasure = read_clues(graph.name_to_index, args.clues)
    except (OSError, MapFormatError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Treasure index = {treasure} ('{graph.names[treasure]}').\n")

    print("Available nodes:")
    for index, name in enumerate(graph.names):
        print(f"{index}: {name}")
    answer = _read("\nEnter start index: ")
    try:
        start = int((answer or "").strip())
        if not 0 <= start < len(graph.names):
            raise ValueError
    except ValueError:
        print("error: invalid index", file=sys.stderr)
        return 1
    print(f"The pirate starts at '{graph.names[start]}' (index {start}).\n")

    while True:
        print(_MENU)
        answer = _read("\nOption: ")
        if answer is None:
            print("\nExiting.\n")
            break
        choice = answer.strip()
        try:
            if choice == "1":
                _follow_clues(graph, locations, start, treasure, args.output)
            elif choice == "2":
                _shortest(graph, start, treasure, args.output)
            elif choice == "0":
                print("\nExiting.\n")
                break
            else:
                print("\nInvalid option. Try again.\n")
        except OSError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
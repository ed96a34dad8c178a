# treasuremap

A small console game about a pirate looking for buried treasure. The island is
a weighted, undirected graph of locations. Some locations hold a clue that
points to another location. From a starting location you can either follow
the clues or ask for the cheapest route to the treasure.

## Installation

```
pip install .
```

## Input files

By default the program reads two files from the current directory.

`grafo.txt` describes the map:

```
Nodos: Beach, Cave, Forest, Hill
Aristas:
Beach,Cave,3
Cave,Forest,5
Beach,Hill,2
Hill,Forest,4
```

The first line must start with `Nodos:` and lists the location names,
separated by commas. The second line must be `Aristas:`. Each following line
is `origin,destination,cost`, an undirected path whose cost is a whole number
from 0 to 4294967295. Lines that do not split into exactly three fields are
skipped. An unknown location name or a cost that is not such a number is an
error. If a name is listed twice, the later entry is the one the name refers
to.

`pistas.txt` names the treasure and holds the clues:

```
Tesoro:Forest

# location, clue text, next location
Beach,Look behind the rocks,Cave
Cave,The trees will guide you,Forest
```

The first line must start with `Tesoro:` and names the treasure's location.
Any lines up to the first blank line are ignored; a file without that blank
line is an error. After it, each clue line is `location,clue text,next
location`; the clue text cannot contain a comma, and the next location may be
left empty. Blank lines and lines starting with `#` are skipped. Unknown
location names and lines with fewer than three fields are errors.

## Running

```
treasuremap
```

The same program can be started with `python -m treasuremap.cli`.

Options:

- `--graph PATH` – map file (default `grafo.txt`)
- `--clues PATH` – clue file (default `pistas.txt`)
- `--output PATH` – where a found route is written (default `ruta_tesoro.txt`)

The program lists the locations with their indices, asks for the index of the
starting location and then offers a menu:

- `1` follows the clues with a depth-first search: from each location it tries
  the clue's suggestion first, then the neighbouring locations in the order
  their paths were listed, never revisiting a location on the current path.
- `2` finds the cheapest route with Dijkstra's algorithm and prints its total
  cost.
- `0` quits; so does reaching the end of input.

Any route found is printed and written to the output file, one location per
line. If a file cannot be read, is malformed, or the start index is not a
valid index, the program prints an error to standard error and exits with
status 1.

## Using it as a library

```python
from treasuremap.io_utils import read_graph, write_route
from treasuremap.clues import read_clues
from treasuremap.search import dfs_find_treasure, shortest_path, route_cost

graph = read_graph("grafo.txt")
locations, treasure = read_clues(graph.name_to_index, "pistas.txt")

route = shortest_path(graph, 0, treasure)          # [] if unreachable
print([graph.names[i] for i in route], route_cost(graph, route))

clue_route = dfs_find_treasure(graph, locations, 0, treasure)  # None if unreachable
if clue_route is not None:
    write_route([graph.names[i] for i in clue_route], "ruta_tesoro.txt")
```

- `treasuremap.graph.Graph` holds `names`, `name_to_index` and `adjacency`
  (lists of `Edge(target, cost)`); `add_undirected_edge(u, v, cost)` adds a
  path in both directions and `index_of(name)` returns an index or `None`.
- `treasuremap.io_utils.parse_graph` and `treasuremap.clues.parse_clues` take
  an iterable of lines instead of a path. Malformed input raises
  `MapFormatError`, a subclass of `ValueError`.
- `treasuremap.clues.Location` carries a location's `clue` text and
  `next_index`; `empty_locations(n)` builds `n` blank ones.
- `shortest_path` treats a total cost of 4294967295 as unreachable and, among
  equally cheap candidates, settles the higher index first. `route_cost` sums
  every edge between consecutive locations, so parallel paths all count.

## Running the tests

```
pip install .[test]
pytest
```
"""Clue files: where the treasure lies and which node each clue points to."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from treasuremap.io_utils import MapFormatError

TREASURE_PREFIX = "Tesoro:"


@dataclass
class Location:
    """What is known about one node: its clue text and the node it points to."""

    clue: str = ""
    next_index: int | None = None
    visited: bool = False


def empty_locations(n: int) -> list[Location]:
    """Return ``n`` locations with no clue and no suggested next node."""
    return [Location() for _ in range(n)]


def _lookup(name_to_index: Mapping[str, int], name: str, message: str) -> int:
    index = name_to_index.get(name)
    if index is None:
        raise MapFormatError(message)
    return index


def parse_clues(
    name_to_index: Mapping[str, int], lines: Iterable[str]
) -> tuple[list[Location], int]:
    """Parse clue lines and return the locations and the treasure's index.

    The first line is ``Tesoro:Name``. Everything up to the first blank line
    is ignored; after it, each line is ``Name,clue text,NextName`` where
    ``NextName`` may be empty. Blank lines and lines starting with ``#`` are
    skipped.
    """
    rows = iter(lines)

    first = next(rows, None)
    if first is None:
        raise MapFormatError("empty clue file")
    first = first.strip()
    if not first.startswith(TREASURE_PREFIX):
        raise MapFormatError(
            f"the first line of the clue file must start with {TREASURE_PREFIX!r}"
        )
    treasure_name = first[len(TREASURE_PREFIX):].strip()
    treasure = _lookup(
        name_to_index,
        treasure_name,
        f"treasure node {treasure_name!r} does not exist in the graph",
    )

    if not any(not row.strip() for row in rows):
        raise MapFormatError(
            "no blank line separates the treasure from the clues"
        )

    locations = empty_locations(len(name_to_index))

    for row in rows:
        text = row.strip()
        if not text or text.startswith("#"):
            continue
        fields = [field.strip() for field in text.split(",", 2)]
        if len(fields) != 3:
            raise MapFormatError(f"malformed line: {text!r}")
        name, clue, target_name = fields

        origin = _lookup(
            name_to_index,
            name,
            f"node {name!r} in the clue file does not exist in the graph",
        )
        target = (
            _lookup(
                name_to_index,
                target_name,
                f"target node {target_name!r} for {name!r} does not exist in the graph",
            )
            if target_name
            else None
        )

        locations[origin].clue = clue
        locations[origin].next_index = target

    return locations, treasure


def read_clues(
    name_to_index: Mapping[str, int], path: str | os.PathLike[str]
) -> tuple[list[Location], int]:
    """Read a clue file from ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_clues(name_to_index, handle)
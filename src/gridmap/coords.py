# src/gridmap/coords.py
"""
Coordinate and neighbor-offset model for gridmap.

Coordinates are (x, y) pairs: x is the column, y is the row, both zero-based,
with y growing downward. A Coord has no bounds of its own; whether it is on
the map is decided only by Grid.at() returning a symbol.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple


class Coord(NamedTuple):
    """Zero-based (column, row) position. Compares and hashes by value."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Coord":
        return Coord(self.x + dx, self.y + dy)


# {-1, 0, 1} x {-1, 0, 1} without (0, 0), x outer and y inner.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


def neighbors(coord: Coord) -> List[Coord]:
    """
    Return the 8 surrounding coordinates in NEIGHBOR_OFFSETS order.

    No filtering happens here: off-map coordinates are returned as-is and
    rejected later by the grid lookup.
    """
    return [coord.shifted(dx, dy) for dx, dy in NEIGHBOR_OFFSETS]


def is_diagonal(a: Coord, b: Coord) -> bool:
    """True when moving from a to b changes both the column and the row."""
    return a.x != b.x and a.y != b.y

# src/gridmap/path.py
"""
Persistent path accumulator.

A Path is the tip coordinate plus a pointer to the Path it was extended from.
Extending a path (`path + coord`) allocates one new link and shares the whole
parent chain, so frontier entries never copy coordinate lists. The full
sequence is rebuilt only when someone asks for `coordinates`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from .coords import Coord, is_diagonal

SQRT2 = math.sqrt(2.0)


@dataclass(frozen=True, eq=False)
class Path:
    """
    Route from a start coordinate (inclusive) to `tip` (inclusive).

    - moves: number of single-cell moves taken (also exposed as `length`)
    - diagonal_moves: how many of those moves were diagonal
    """

    tip: Coord
    parent: Optional["Path"] = field(default=None, repr=False)
    moves: int = 0
    diagonal_moves: int = 0

    @classmethod
    def origin(cls, coord: Coord) -> "Path":
        """Zero-move path sitting on `coord`."""
        return cls(tip=Coord(*coord))

    @classmethod
    def from_coordinates(cls, coords) -> "Path":
        """Build a path by extending move by move through `coords`."""
        it = iter(coords)
        try:
            path = cls.origin(next(it))
        except StopIteration:
            raise ValueError("a Path needs at least one coordinate") from None
        for coord in it:
            path = path + coord
        return path

    def __add__(self, coord: Coord) -> "Path":
        coord = Coord(*coord)
        return Path(
            tip=coord,
            parent=self,
            moves=self.moves + 1,
            diagonal_moves=self.diagonal_moves + (1 if is_diagonal(self.tip, coord) else 0),
        )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Number of moves from start to tip."""
        return self.moves

    @property
    def euclidean_length(self) -> float:
        orthogonal = self.moves - self.diagonal_moves
        return orthogonal + self.diagonal_moves * SQRT2

    @property
    def start(self) -> Coord:
        node = self
        while node.parent is not None:
            node = node.parent
        return node.tip

    @property
    def coordinates(self) -> Tuple[Coord, ...]:
        """Full coordinate sequence, start first."""
        out = []
        node: Optional[Path] = self
        while node is not None:
            out.append(node.tip)
            node = node.parent
        out.reverse()
        return tuple(out)

    # ------------------------------------------------------------------
    # Sequence-ish protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coordinates)

    def __len__(self) -> int:
        return self.moves + 1

    def __contains__(self, coord: object) -> bool:
        node: Optional[Path] = self
        while node is not None:
            if node.tip == coord:
                return True
            node = node.parent
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.coordinates == other.coordinates

    def __hash__(self) -> int:
        return hash(self.coordinates)

    def __repr__(self) -> str:
        return f"Path(coordinates={list(self.coordinates)!r}, moves={self.moves})"

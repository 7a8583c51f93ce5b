# src/gridmap/grid.py
"""
Grid: immutable 2-D character map parsed from text.

This module does not know anything about routes. It only:
- Splits text into rows of single-character cells.
- Answers "what symbol is at (x, y)?", returning None off the map.
- Scans for marker symbols.

Ragged grids are legal: every row keeps its own length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .coords import Coord

LINE_BREAK = "\n"


@dataclass(frozen=True)
class MapSymbols:
    """Glyphs used to read and draw a map."""

    open: str = "."
    wall: str = "B"
    start: str = "S"
    end: str = "X"
    marker: str = "*"

    def __post_init__(self) -> None:
        for role in ("open", "wall", "start", "end", "marker"):
            glyph = getattr(self, role)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"symbol {role!r} must be a single character, got {glyph!r}")
        if len({self.open, self.wall, self.start, self.end}) != 4:
            raise ValueError(
                "open, wall, start and end symbols must all differ "
                f"(got {self.open!r}, {self.wall!r}, {self.start!r}, {self.end!r})"
            )
        if self.marker in (self.open, self.wall):
            raise ValueError(f"marker {self.marker!r} would be indistinguishable from open or wall cells")


DEFAULT_SYMBOLS = MapSymbols()


@dataclass(frozen=True)
class Grid:
    """Rows of single-character cells, indexed as rows[y][x]."""

    rows: Tuple[Tuple[str, ...], ...]

    @classmethod
    def parse(cls, text: str) -> "Grid":
        """Split `text` on line breaks into rows of characters."""
        if text is None:
            raise TypeError("Grid.parse() requires map text, got None")
        return cls(rows=tuple(tuple(line) for line in text.split(LINE_BREAK)))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def at(self, coord: Coord) -> Optional[str]:
        x, y = coord
        if y < 0 or y >= len(self.rows):
            return None
        row = self.rows[y]
        if x < 0 or x >= len(row):
            return None
        return row[x]

    def find(self, symbol: str) -> Optional[Coord]:
        """First cell carrying `symbol`, scanning top-to-bottom, left-to-right."""
        for coord in self._scan(symbol):
            return coord
        return None

    def find_all(self, symbol: str) -> List[Coord]:
        return list(self._scan(symbol))

    def _scan(self, symbol: str) -> Iterator[Coord]:
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell == symbol:
                    yield Coord(x, y)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.rows), default=0)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self.rows)

    def to_text(self) -> str:
        return LINE_BREAK.join("".join(row) for row in self.rows)


def parse(text: str) -> Grid:
    """Module-level alias for Grid.parse()."""
    return Grid.parse(text)

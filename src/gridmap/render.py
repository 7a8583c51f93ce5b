# src/gridmap/render.py
"""
Overlay a route onto a grid.

render() produces plain text with the same line count and line lengths as
the parsed input. render_rich() produces the same characters as a
rich.text.Text with the route highlighted, for terminal display.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable

from rich.text import Text

from .coords import Coord
from .grid import DEFAULT_SYMBOLS, LINE_BREAK, Grid, MapSymbols

PATH_STYLE = "bold green"
WALL_STYLE = "dim"


def _as_cells(path: Iterable[Coord]) -> FrozenSet[Coord]:
    return frozenset(Coord(*c) for c in path)


def render(grid: Grid, path: Iterable[Coord], *, marker: str = DEFAULT_SYMBOLS.marker) -> str:
    """
    Return the grid as text with every cell on `path` replaced by `marker`.

    `path` may be a Path or any iterable of coordinates. Both endpoints are
    overwritten when they are part of it.
    """
    cells = _as_cells(path)
    lines = []
    for y, row in enumerate(grid.rows):
        lines.append(
            "".join(marker if Coord(x, y) in cells else c for x, c in enumerate(row))
        )
    return LINE_BREAK.join(lines)


def render_rich(
    grid: Grid,
    path: Iterable[Coord],
    *,
    symbols: MapSymbols = DEFAULT_SYMBOLS,
) -> Text:
    """Styled variant of render().

    `.plain` equals render(grid, path) except that rich drops control
    characters, so a "\r" kept in a row does not survive.
    """
    cells = _as_cells(path)
    txt = Text()
    for y, row in enumerate(grid.rows):
        if y:
            txt.append(LINE_BREAK)
        for x, c in enumerate(row):
            if Coord(x, y) in cells:
                txt.append(symbols.marker, style=PATH_STYLE)
            elif c == symbols.wall:
                txt.append(c, style=WALL_STYLE)
            else:
                txt.append(c)
    return txt

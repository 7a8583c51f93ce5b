# src/gridmap/__init__.py
"""
gridmap package: shortest routes on character grid maps.

Provides:
- Grid / MapSymbols: parsing and symbol lookup
- Coord, neighbors: 8-directional coordinate model
- Path: persistent route accumulator
- find_shortest_path: level-synchronous BFS
- render / render_rich: route overlay
- add_path: text in, overlaid text out
"""

from __future__ import annotations

from typing import Optional

from .coords import NEIGHBOR_OFFSETS, Coord, is_diagonal, neighbors
from .errors import GridMapError, MalformedMapError, NoPathError
from .grid import DEFAULT_SYMBOLS, Grid, MapSymbols, parse
from .path import Path
from .render import render, render_rich
from .search import PathfindingResult, find_shortest_path


def add_path(
    map_text: str,
    *,
    symbols: MapSymbols = DEFAULT_SYMBOLS,
    max_levels: Optional[int] = None,
) -> str:
    """
    Parse `map_text`, find the shortest route and return the map with the
    route (endpoints included) drawn with `symbols.marker`.

    Raises MalformedMapError for missing/duplicate markers and NoPathError
    when the markers are not connected.
    """
    grid = Grid.parse(map_text)
    result = find_shortest_path(grid, symbols=symbols, max_levels=max_levels)
    if not result.success or result.path is None:
        raise NoPathError(result)
    return render(grid, result.path, marker=symbols.marker)


__all__ = [
    "Coord",
    "NEIGHBOR_OFFSETS",
    "neighbors",
    "is_diagonal",
    "Grid",
    "MapSymbols",
    "DEFAULT_SYMBOLS",
    "parse",
    "Path",
    "PathfindingResult",
    "find_shortest_path",
    "render",
    "render_rich",
    "add_path",
    "GridMapError",
    "MalformedMapError",
    "NoPathError",
]

# src/gridmap/search.py
"""
Level-synchronous breadth-first search over a Grid.

- 8-directional moves, every move costs the same.
- The whole frontier of one depth is expanded before any deeper cell.
- A visited set keeps each cell in at most one frontier, which bounds the
  work by the number of reachable cells and guarantees termination.
- Among equally short routes to a cell, the one with fewer diagonal moves
  (the shorter Euclidean route) is kept; remaining ties go to the first
  route found in frontier/offset order.
- max_levels guard to cap the search on huge maps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Set

from .coords import Coord, neighbors
from .errors import MalformedMapError
from .grid import DEFAULT_SYMBOLS, Grid, MapSymbols
from .path import Path

log = logging.getLogger(__name__)

NO_PATH_FOUND = "no_path_found"
MAX_LEVELS_EXHAUSTED = "max_levels_exhausted"


@dataclass
class PathfindingResult:
    """Structured result for one find_shortest_path() call."""

    path: Optional[Path]
    success: bool
    reason: str | None = None
    levels: int = 0
    visited: int = 0

    @property
    def moves(self) -> Optional[int]:
        return self.path.length if self.path is not None else None


def locate_marker(grid: Grid, symbol: str, role: str) -> Coord:
    """Return the single cell carrying `symbol`, or raise MalformedMapError."""
    found = grid.find_all(symbol)
    if len(found) != 1:
        raise MalformedMapError(symbol=symbol, role=role, count=len(found))
    return found[0]


def find_shortest_path(
    grid: Grid,
    *,
    symbols: MapSymbols = DEFAULT_SYMBOLS,
    max_levels: Optional[int] = None,
) -> PathfindingResult:
    """
    Find a minimum-move route from the start marker to the end marker.

    Returns a PathfindingResult with:
      - path: start ... end inclusive, or None
      - success: bool
      - reason: None on success, else NO_PATH_FOUND or MAX_LEVELS_EXHAUSTED

    Raises MalformedMapError if either marker is missing or repeated.
    """
    start = locate_marker(grid, symbols.start, "start")
    end = locate_marker(grid, symbols.end, "end")

    frontier: Dict[Coord, Path] = {start: Path.origin(start)}
    visited: Set[Coord] = {start}
    levels = 0

    while frontier:
        if max_levels is not None and levels >= max_levels:
            log.warning(
                "Search stopped after %d levels (%d cells visited) without reaching %s",
                levels, len(visited), end,
            )
            return PathfindingResult(
                path=None,
                success=False,
                reason=MAX_LEVELS_EXHAUSTED,
                levels=levels,
                visited=len(visited),
            )

        next_frontier = _expand(grid, frontier, visited, end, symbols.open)
        levels += 1
        visited.update(next_frontier)
        log.debug("level %d: frontier=%d visited=%d", levels, len(next_frontier), len(visited))

        found = next_frontier.get(end)
        if found is not None:
            log.info(
                "Found path %s -> %s: %d moves, %d levels, %d cells visited",
                start, end, found.length, levels, len(visited),
            )
            return PathfindingResult(
                path=found,
                success=True,
                levels=levels,
                visited=len(visited),
            )

        frontier = next_frontier

    log.warning("No path from %s to %s (%d cells visited)", start, end, len(visited))
    return PathfindingResult(
        path=None,
        success=False,
        reason=NO_PATH_FOUND,
        levels=levels,
        visited=len(visited),
    )


def _expand(
    grid: Grid,
    frontier: Dict[Coord, Path],
    visited: Set[Coord],
    end: Coord,
    open_symbol: str,
) -> Dict[Coord, Path]:
    """Build the frontier one move deeper than `frontier`."""
    next_frontier: Dict[Coord, Path] = {}
    for coord, path in frontier.items():
        for nxt in neighbors(coord):
            if nxt in visited:
                continue
            if nxt != end and grid.at(nxt) != open_symbol:
                continue

            candidate = path + nxt
            best = next_frontier.get(nxt)
            if best is None or candidate.diagonal_moves < best.diagonal_moves:
                next_frontier[nxt] = candidate
    return next_frontier

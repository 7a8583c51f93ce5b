# src/gridmap/errors.py
"""
Domain errors for gridmap.

A search that simply finds no route is NOT an error at the search layer:
find_shortest_path() returns a PathfindingResult with success=False. Only
add_path(), which has no other way to report it through a text return value,
raises NoPathError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .search import PathfindingResult


class GridMapError(Exception):
    """Base class for gridmap domain errors."""


class MalformedMapError(GridMapError, ValueError):
    """
    The map does not carry exactly one start and one end marker.

    `count` is how many cells carried `symbol` (0 means missing).
    """

    def __init__(self, symbol: str, role: str, count: int) -> None:
        self.symbol = symbol
        self.role = role
        self.count = count
        if count == 0:
            message = f"map has no {role} marker {symbol!r}"
        else:
            message = f"map has {count} {role} markers {symbol!r}, expected exactly one"
        super().__init__(message)


class NoPathError(GridMapError):
    """No route connects the start and end markers."""

    def __init__(self, result: "PathfindingResult") -> None:
        self.result = result
        super().__init__(f"no path between start and end ({result.reason})")

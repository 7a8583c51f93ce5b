# src/app/runtime.py

from __future__ import annotations  # allow forward type hints

from dataclasses import dataclass   # for simple container types
from typing import Optional

from env.loader import load_solver_profile  # YAML solver profiles
from env.schema import SolverProfile

from gridmap import Grid, Path, find_shortest_path, render


@dataclass
class SolveReport:
    """
    Outcome of solve_text().

    `text` is the overlaid map on success and None otherwise; a missing
    route is reported through `success` / `reason`, not raised.
    """

    text: Optional[str]
    path: Optional[Path]
    success: bool
    reason: Optional[str]
    moves: Optional[int]
    euclidean_length: Optional[float]
    levels: int
    visited: int
    profile_name: str


def solve_text(map_text: str, profile: Optional[SolverProfile] = None) -> SolveReport:
    """
    Parse, search and render `map_text` using a solver profile.

    When `profile` is omitted the active profile from gridmap.yaml is used.
    MalformedMapError still propagates: a map without exactly one start and
    one end is a caller error, not a search outcome.
    """
    if profile is None:
        profile = load_solver_profile()

    grid = Grid.parse(map_text)
    result = find_shortest_path(
        grid,
        symbols=profile.symbols,
        max_levels=profile.max_levels,
    )

    if not result.success or result.path is None:
        return SolveReport(
            text=None,
            path=None,
            success=False,
            reason=result.reason,
            moves=None,
            euclidean_length=None,
            levels=result.levels,
            visited=result.visited,
            profile_name=profile.name,
        )

    return SolveReport(
        text=render(grid, result.path, marker=profile.symbols.marker),
        path=result.path,
        success=True,
        reason=None,
        moves=result.path.length,
        euclidean_length=result.path.euclidean_length,
        levels=result.levels,
        visited=result.visited,
        profile_name=profile.name,
    )

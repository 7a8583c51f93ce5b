# tests/test_render.py
"""
Tests for gridmap.render: plain-text and rich overlays.
"""

from __future__ import annotations

import pytest
from rich.text import Text

from gridmap import Coord, Grid, MapSymbols, Path, render, render_rich
from gridmap.render import PATH_STYLE, WALL_STYLE


@pytest.mark.parametrize("name", ["walls", "labyrinth", "forest", "walled_in"])
def test_empty_path_reproduces_the_map(load_map, name: str) -> None:
    text = load_map(name)

    assert render(Grid.parse(text), ()) == text


def test_round_trip_keeps_ragged_rows_and_trailing_newline() -> None:
    text = "S..\n.\n..X.B\n"

    assert render(Grid.parse(text), []) == text


def test_path_cells_are_overwritten_including_endpoints() -> None:
    grid = Grid.parse("....\n.XS.\n....")
    path = Path.from_coordinates([Coord(2, 1), Coord(1, 1)])

    assert render(grid, path) == "....\n.**.\n...."


def test_custom_marker_and_plain_coordinate_iterables() -> None:
    grid = Grid.parse("S.X")

    assert render(grid, [(0, 0), (1, 0), (2, 0)], marker="o") == "ooo"


def test_coordinates_off_the_grid_are_ignored() -> None:
    grid = Grid.parse("..\n..")

    assert render(grid, [(5, 5), (-1, 0), (1, 1)]) == "..\n.*"


def test_render_rich_matches_plain_text(load_map) -> None:
    grid = Grid.parse(load_map("walls"))
    path = Path.from_coordinates([(15, 3), (14, 3), (13, 3)])

    styled = render_rich(grid, path)

    assert isinstance(styled, Text)
    assert styled.plain == render(grid, path)


def test_render_rich_drops_carriage_returns() -> None:
    grid = Grid.parse("S.X\r\n...")
    path = [(0, 0), (1, 0), (2, 0)]

    assert render(grid, path) == "***\r\n..."
    assert render_rich(grid, path).plain == "***\n..."


def test_render_rich_styles_route_and_walls() -> None:
    grid = Grid.parse("SB\n.X")
    styled = render_rich(grid, [(0, 0), (1, 1)])

    spans = {(span.start, span.end): str(span.style) for span in styled.spans}
    # "*B\n.*": route at offsets 0 and 4, wall at 1
    assert spans[(0, 1)] == PATH_STYLE
    assert spans[(1, 2)] == WALL_STYLE
    assert spans[(4, 5)] == PATH_STYLE


def test_render_rich_uses_profile_symbols() -> None:
    symbols = MapSymbols(wall="#", start="@", end=">", marker="o")
    grid = Grid.parse("@#>")

    styled = render_rich(grid, [(0, 0)], symbols=symbols)

    assert styled.plain == "o#>"

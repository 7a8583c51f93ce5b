# src/cli/solve_map.py
"""
gridmap-solve: draw the shortest route onto a map file.

    gridmap-solve maps/forest.txt
    cat maps/forest.txt | gridmap-solve --color --stats

Exit codes: 0 route drawn, 1 no route, 2 bad map or bad config.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from app.logging_config import configure_logging
from app.runtime import solve_text
from env.loader import load_solver_profile
from gridmap import Grid, MalformedMapError, render_rich

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridmap-solve",
        description="Mark the shortest 8-directional route between start and end on a text map.",
    )
    parser.add_argument(
        "map_file",
        nargs="?",
        help="Map text file; read from stdin when omitted",
    )
    parser.add_argument("--profile", default=None, help="Solver profile name (from gridmap.yaml)")
    parser.add_argument("--config", default=None, help="Path to an alternative gridmap.yaml")
    parser.add_argument("--color", action="store_true", help="Highlight the route in the terminal")
    parser.add_argument("--stats", action="store_true", help="Print move/level counts to stderr")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the profile's log level",
    )
    return parser


def _read_map(map_file: Optional[str]) -> str:
    if map_file is None:
        return sys.stdin.read()
    with open(map_file, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        profile = load_solver_profile(args.profile, args.config)
    except (OSError, KeyError, ValueError) as exc:
        print(f"gridmap-solve: configuration error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    level_name = args.log_level or profile.log_level
    configure_logging(logging.getLevelName(level_name), stream=sys.stderr)
    log.debug("Using solver profile %s", profile.name)

    try:
        map_text = _read_map(args.map_file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"gridmap-solve: cannot read map: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        report = solve_text(map_text, profile=profile)
    except MalformedMapError as exc:
        print(f"gridmap-solve: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.stats:
        print(
            f"profile={report.profile_name} moves={report.moves} "
            f"levels={report.levels} visited={report.visited}",
            file=sys.stderr,
        )

    if not report.success:
        print(f"gridmap-solve: no path ({report.reason})", file=sys.stderr)
        return EXIT_NO_PATH

    if args.color:
        grid = Grid.parse(map_text)
        styled = render_rich(grid, report.path, symbols=profile.symbols)
        # the map may already end with a line break
        end = "" if report.text.endswith("\n") else "\n"
        Console(soft_wrap=True).print(styled, end=end)
    else:
        sys.stdout.write(report.text if report.text.endswith("\n") else report.text + "\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

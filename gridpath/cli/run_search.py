#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Run a single planner on a text map (or the default empty layout) and print
the result.

Example:
    python -m gridpath.cli.run_search --map maps/trap.txt --planner greedy --animate --speed fast
    python -m gridpath.cli.run_search --rows 10 --cols 20 --planner bfs --json --plot out/bfs.png

Map format: one character per cell, '.' empty, '#' wall, 'S' start, 'E' end.
Exit codes: 0 path found, 1 no path, 2 invalid input, 3 interrupted.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .. import config, get_planner
from ..envs.grid import Grid, NodeType, create_initial_grid, load_grid, reset_path
from ..errors import GridPathError, InvalidPosition, SearchInterrupted
from ..planners import PLANNERS

logger = logging.getLogger(__name__)


# -------------------- helpers -------------------- #

def _parse_pos(s: str) -> Tuple[int, int]:
    token = s.strip().replace(" ", "")
    if "," not in token:
        raise argparse.ArgumentTypeError(f"Bad position '{s}', expected like 3,7")
    r, c = token.split(",", 1)
    try:
        return int(r), int(c)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad position '{s}', expected like 3,7")


def add_grid_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--map", type=str, default=None,
                    help="Text map file ('.', '#', 'S', 'E'); overrides --rows/--cols")
    ap.add_argument("--rows", type=int, default=config.DEFAULT_ROWS)
    ap.add_argument("--cols", type=int, default=config.DEFAULT_COLS)
    ap.add_argument("--start", type=_parse_pos, default=None, help="Start as row,col")
    ap.add_argument("--end", type=_parse_pos, default=None, help="End as row,col")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )


def build_grid(args) -> Grid:
    """Grid from --map or the default layout, with --start/--end applied."""
    if args.map:
        grid = load_grid(args.map)
    else:
        grid = create_initial_grid(args.rows, args.cols)
    # the grid model lets markers overwrite walls; refuse that here
    for label, pos, place in (("start", args.start, grid.set_start), ("end", args.end, grid.set_end)):
        if pos is None:
            continue
        pos = grid.check_position(pos)
        if grid.is_wall(pos):
            raise InvalidPosition(f"{label} position {tuple(pos)} is a wall")
        place(pos)
    if grid.start is None or grid.end is None:
        raise GridPathError("Map needs both a start (S) and an end (E)")
    return grid


def _frame_printer(frame: Grid):
    """Observer that paints each visited node onto `frame` and prints it."""
    def on_visit(node):
        frame.types[node.row, node.col] = NodeType.VISITED
        print(frame.to_ascii(), end="\n\n")
    return on_visit


# -------------------- main -------------------- #

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run one grid pathfinding algorithm.")
    add_grid_args(ap)
    ap.add_argument("--planner", type=str, default=config.DEFAULT_PLANNER,
                    choices=sorted(PLANNERS), help="Algorithm to run")
    ap.add_argument("--animate", action="store_true",
                    help="Print the map after every visited node")
    ap.add_argument("--speed", type=str, default=None, choices=sorted(config.SPEED_PRESETS),
                    help="Named animation pace")
    ap.add_argument("--delay", type=float, default=None,
                    help="Seconds between animation frames (overrides --speed)")
    ap.add_argument("--timeout", type=float, default=None, help="Abort after this many seconds")
    ap.add_argument("--json", action="store_true", help="Print the result as JSON")
    ap.add_argument("--plot", type=str, default=None, help="Save a PNG of the explored map")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        grid = build_grid(args)
    except (GridPathError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.delay is not None:
        delay = args.delay
    elif args.speed is not None:
        delay = config.SPEED_PRESETS[args.speed]
    else:
        delay = config.DEFAULT_STEP_DELAY

    on_visit = _frame_printer(reset_path(grid)) if args.animate else None

    planner = get_planner(args.planner)
    work = reset_path(grid)
    try:
        result = planner.search(work, grid.start, grid.end, on_visit=on_visit,
                                step_delay=delay if args.animate else 0.0,
                                timeout=args.timeout)
    except SearchInterrupted as e:
        print(f"Interrupted: {e}", file=sys.stderr)
        return 3
    except (GridPathError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    painted = reset_path(grid).mark_result(result)
    if args.json:
        print(json.dumps(result.to_dict()))
    else:
        print(painted.to_ascii())
        status = "Path found" if result.success else "No path found"
        print(f"{planner.label}: {status}. path={result.path_length} visited={result.nodes_visited}")

    if args.plot:
        from ..tools.render import save_search_figure  # lazy: pulls in matplotlib
        title = f"{planner.label}: {'success' if result.success else 'fail'}"
        save_search_figure(grid, result, args.plot, title=title)
        print(f"Saved: {args.plot}")

    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())

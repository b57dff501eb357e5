#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_compare.py
--------------
Run every planner (or a chosen subset) on the same map and print a metrics
table: success, path length, nodes visited, mean runtime.

Example:
    python -m gridpath.cli.run_compare --map maps/trap.txt --repeat 5 --csv results/compare.csv
"""

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from ..errors import GridPathError
from ..eval.compare import compare_planners, summarize_metrics
from .run_search import add_grid_args, build_grid, setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare grid pathfinding algorithms on one map.")
    add_grid_args(ap)
    ap.add_argument("--planners", type=str, default=None,
                    help="Comma-separated planner names (default: all)")
    ap.add_argument("--repeat", type=int, default=1, help="Runs per planner for timing")
    ap.add_argument("--csv", type=str, default=None, help="Write the metrics table to this CSV")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    names = [p for p in args.planners.split(",") if p.strip()] if args.planners else None
    try:
        grid = build_grid(args)
        df = compare_planners(grid, grid.start, grid.end, planners=names,
                              repeat=args.repeat, progress=True)
    except (GridPathError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(df.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    leaders = summarize_metrics(df)
    print(f"Shortest path: {leaders['shortest_path'] or '-'}  "
          f"Fastest: {leaders['fastest'] or '-'}  "
          f"Fewest nodes: {leaders['fewest_nodes'] or '-'}")

    if args.csv:
        out_dir = os.path.dirname(args.csv)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        df.to_csv(args.csv, index=False)
        print(f"Saved: {args.csv}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

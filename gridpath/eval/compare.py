#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
compare.py
----------
Side-by-side planner comparison on one map.

Each planner gets its own reset copy of the grid (planners mutate grids in
place), runs unthrottled and without an observer, and contributes one row:

    algorithm | label | success | path_length | nodes_visited | time_ms

`path_length` is 0 for failed runs. `time_ms` is the mean over `repeat` runs.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

import pandas as pd
from tqdm import tqdm

from ..config import COMPARE_STEP_DELAY
from ..envs.grid import Grid, PositionLike, reset_path
from ..planners import PLANNERS

logger = logging.getLogger(__name__)

METRIC_COLUMNS = ["algorithm", "label", "success", "path_length", "nodes_visited", "time_ms"]


def compare_planners(grid: Grid,
                     start: PositionLike,
                     end: PositionLike,
                     planners: Optional[Iterable[str]] = None,
                     repeat: int = 1,
                     progress: bool = False) -> pd.DataFrame:
    """Run each named planner (default: all, in registry order) and return a metrics table."""
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")
    names = list(PLANNERS) if planners is None else [p.strip().lower() for p in planners]
    unknown = [n for n in names if n not in PLANNERS]
    if unknown:
        raise ValueError(f"Unknown planner(s) {unknown}. Available: {sorted(PLANNERS)}")

    base = reset_path(grid)
    rows: List[Dict] = []
    for name in tqdm(names, desc="planners", disable=not progress):
        planner = PLANNERS[name](step_delay=COMPARE_STEP_DELAY)
        times = []
        result = None
        for _ in range(repeat):
            work = base.copy()
            t0 = time.perf_counter()
            result = planner.search(work, start, end)
            times.append((time.perf_counter() - t0) * 1000.0)
        rows.append({
            "algorithm": name,
            "label": planner.label,
            "success": bool(result.success),
            "path_length": result.path_length if result.success else 0,
            "nodes_visited": result.nodes_visited,
            "time_ms": sum(times) / len(times),
        })
        logger.debug(f"compare: {rows[-1]}")

    return pd.DataFrame(rows, columns=METRIC_COLUMNS)


def summarize_metrics(df: pd.DataFrame) -> Dict[str, Optional[str]]:
    """
    Leaders of a comparison table:
      shortest_path : successful run with the smallest positive path length
      fastest       : lowest time_ms
      fewest_nodes  : lowest nodes_visited
    Ties go to the earlier row. Missing leaders are None.
    """
    out: Dict[str, Optional[str]] = {"shortest_path": None, "fastest": None, "fewest_nodes": None}
    if df.empty:
        return out
    ok = df[df["success"] & (df["path_length"] > 0)]
    if not ok.empty:
        out["shortest_path"] = ok.loc[ok["path_length"].idxmin(), "algorithm"]
    out["fastest"] = df.loc[df["time_ms"].idxmin(), "algorithm"]
    out["fewest_nodes"] = df.loc[df["nodes_visited"].idxmin(), "algorithm"]
    return out

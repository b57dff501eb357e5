# -*- coding: utf-8 -*-
"""
Planners on 4-connected grids with a unified API:
planner.search(grid: Grid, start: (r,c), end: (r,c), on_visit=None, step_delay=None)
  -> SearchResult(path, visited_nodes, success)
"""

from __future__ import annotations
from typing import Dict, Type

from .base import BasePlanner, SearchResult, StepObserver
from .a_star import AStarPlanner
from .dijkstra import DijkstraPlanner
from .bfs import BFSPlanner
from .greedy_best_first import GreedyBestFirstPlanner

# Mapping used by factories/CLIs; order is the comparison order
PLANNERS: Dict[str, Type[BasePlanner]] = {
    "a_star": AStarPlanner,
    "dijkstra": DijkstraPlanner,
    "bfs": BFSPlanner,
    "greedy": GreedyBestFirstPlanner,
}

__all__ = [
    "BasePlanner",
    "SearchResult",
    "StepObserver",
    "AStarPlanner",
    "DijkstraPlanner",
    "BFSPlanner",
    "GreedyBestFirstPlanner",
    "PLANNERS",
]

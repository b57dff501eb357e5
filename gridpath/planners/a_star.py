#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* planner for 4-connected unit-cost grids.
- Heuristic: Manhattan distance to the goal (admissible, consistent).
- Frontier ordered by f = g + h, earlier insertion wins ties.
- Finalized nodes are never reopened.
"""

from __future__ import annotations
from typing import Generator

from ..envs.grid import Grid
from ..envs.neighbors import neighbor_indices
from .base import BasePlanner
from .frontier import PriorityFrontier
from .heuristics import manhattan_field


class AStarPlanner(BasePlanner):
    name = "a_star"
    label = "A*"

    def _prepare(self, grid: Grid, start: int, end: int) -> None:
        grid.clear_search_state(h=manhattan_field(grid.shape, grid.position(end)))
        g, h, f = grid.g.reshape(-1), grid.h.reshape(-1), grid.f.reshape(-1)
        g[start] = 0.0
        f[start] = h[start]

    def _explore(self, grid: Grid, start: int, end: int) -> Generator[int, None, bool]:
        g, h, f = grid.g.reshape(-1), grid.h.reshape(-1), grid.f.reshape(-1)
        parent = grid.parent.reshape(-1)
        closed = grid.visited.reshape(-1)

        open_set = PriorityFrontier()
        open_set.push(start, f[start])

        while open_set:
            current = open_set.pop()
            if current == end:
                return True

            closed[current] = True
            yield current

            for nb in neighbor_indices(grid, current):
                if closed[nb]:
                    continue
                tentative_g = g[current] + 1.0
                if tentative_g < g[nb]:
                    parent[nb] = current
                    g[nb] = tentative_g
                    f[nb] = tentative_g + h[nb]
                    open_set.push(nb, f[nb])

        return False

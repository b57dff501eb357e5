#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy Best-First Search planner.

Frontier ordered purely by the Manhattan heuristic h; path cost is ignored
(g stays 0). A node's parent is fixed when it is first discovered, so the
returned path is not guaranteed to be shortest.
"""

from __future__ import annotations
from typing import Generator

from ..envs.grid import Grid
from ..envs.neighbors import neighbor_indices
from .base import BasePlanner
from .frontier import PriorityFrontier
from .heuristics import manhattan_field


class GreedyBestFirstPlanner(BasePlanner):
    name = "greedy"
    label = "Greedy Best-First"

    def _prepare(self, grid: Grid, start: int, end: int) -> None:
        h = manhattan_field(grid.shape, grid.position(end))
        grid.clear_search_state(h=h)
        grid.g.fill(0.0)
        grid.f[...] = h

    def _explore(self, grid: Grid, start: int, end: int) -> Generator[int, None, bool]:
        h = grid.h.reshape(-1)
        parent = grid.parent.reshape(-1)
        visited = grid.visited.reshape(-1)

        open_set = PriorityFrontier()
        open_set.push(start, h[start])

        while open_set:
            current = open_set.pop()
            if current == end:
                return True

            visited[current] = True
            yield current

            for nb in neighbor_indices(grid, current):
                if visited[nb] or nb in open_set:
                    continue
                parent[nb] = current
                open_set.push(nb, h[nb])

        return False

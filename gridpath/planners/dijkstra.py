#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner for 4-connected unit-cost grids (A* with h = 0).

Selection is the classic O(V^2) scan over every unvisited non-wall cell, ties
going to the first cell in row-major order. Once the cheapest remaining cell
is unreached (g = inf) nothing else is reachable and the search stops.
"""

from __future__ import annotations
from typing import Generator

import numpy as np

from ..envs.grid import Grid
from ..envs.neighbors import neighbor_indices
from .base import BasePlanner
from .frontier import ScanFrontier


class DijkstraPlanner(BasePlanner):
    name = "dijkstra"
    label = "Dijkstra"

    def _prepare(self, grid: Grid, start: int, end: int) -> None:
        grid.clear_search_state(h=0.0)
        grid.g.reshape(-1)[start] = 0.0
        grid.f.reshape(-1)[start] = 0.0

    def _explore(self, grid: Grid, start: int, end: int) -> Generator[int, None, bool]:
        g, f = grid.g.reshape(-1), grid.f.reshape(-1)
        parent = grid.parent.reshape(-1)
        visited = grid.visited.reshape(-1)

        unvisited = ScanFrontier(grid)
        while unvisited:
            current = unvisited.pop()
            if g[current] == np.inf:
                return False

            visited[current] = True
            if current == end:
                return True
            yield current

            for nb in neighbor_indices(grid, current):
                if visited[nb]:
                    continue
                nd = g[current] + 1.0
                if nd < g[nb]:
                    g[nb] = nd
                    f[nb] = nd
                    parent[nb] = current

        return False

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- Nodes are marked visited when enqueued, so nothing is queued twice.
- Visits are reported when a node is dequeued.
- `g` holds the hop count from start.
"""

from __future__ import annotations
from typing import Generator

from ..envs.grid import Grid
from ..envs.neighbors import neighbor_indices
from .base import BasePlanner
from .frontier import FifoFrontier


class BFSPlanner(BasePlanner):
    name = "bfs"
    label = "BFS"

    def _prepare(self, grid: Grid, start: int, end: int) -> None:
        grid.clear_search_state(h=0.0)
        grid.g.reshape(-1)[start] = 0.0

    def _explore(self, grid: Grid, start: int, end: int) -> Generator[int, None, bool]:
        g, f = grid.g.reshape(-1), grid.f.reshape(-1)
        parent = grid.parent.reshape(-1)
        visited = grid.visited.reshape(-1)

        dq = FifoFrontier()
        dq.push(start)
        visited[start] = True

        while dq:
            current = dq.pop()
            if current == end:
                return True
            yield current

            for nb in neighbor_indices(grid, current):
                if visited[nb]:
                    continue
                visited[nb] = True
                parent[nb] = current
                g[nb] = f[nb] = g[current] + 1.0
                dq.push(nb)

        return False

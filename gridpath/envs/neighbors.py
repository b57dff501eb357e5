# -*- coding: utf-8 -*-
"""
4-connected neighbor expansion.

Order is fixed (up, down, left, right); every planner's tie-breaking depends
on it. Walls and off-grid cells are skipped. No diagonals.
"""

from __future__ import annotations
from typing import List

import numpy as np

from .grid import Grid, GridNode, NodeType

# up, down, left, right
DELTAS_4 = np.array([
    (-1, 0), (1, 0), (0, -1), (0, 1)
], dtype=np.int8)


def neighbor_indices(grid: Grid, index: int) -> List[int]:
    """Flat indices of the traversable neighbors of the cell at `index`."""
    r, c = divmod(int(index), grid.cols)
    out: List[int] = []
    for dr, dc in DELTAS_4:
        nr, nc = r + int(dr), c + int(dc)
        if nr < 0 or nr >= grid.rows or nc < 0 or nc >= grid.cols:
            continue
        if grid.types[nr, nc] == NodeType.WALL:
            continue
        out.append(nr * grid.cols + nc)
    return out


def neighbors(node: GridNode, grid: Grid) -> List[GridNode]:
    """Traversable neighbors of `node` as snapshots, in up/down/left/right order."""
    return [grid.node_at(i) for i in neighbor_indices(grid, grid.index((node.row, node.col)))]

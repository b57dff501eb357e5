# -*- coding: utf-8 -*-
"""Path reconstruction by walking parent indices back from the goal."""

from __future__ import annotations
from typing import List, Sequence, TypeVar

from ..envs.grid import Grid, GridNode, PositionLike
from ..errors import InvariantViolation

T = TypeVar("T")


def reconstruct(grid: Grid, goal: PositionLike) -> List[GridNode]:
    """Nodes from start to `goal` (both included), following `grid.parent`."""
    parent = grid.parent.reshape(-1)
    idx = grid.index(goal)
    chain: List[int] = []
    seen = set()
    while idx != -1:
        if idx in seen:
            raise InvariantViolation(
                f"Parent cycle through {grid.position(idx)} while reconstructing path to {tuple(goal)}")
        seen.add(idx)
        chain.append(idx)
        idx = int(parent[idx])
    chain.reverse()
    return [grid.node_at(i) for i in chain]


def strip_endpoints(nodes: Sequence[T]) -> List[T]:
    """Drop the start and end node of a reconstructed path."""
    return list(nodes[1:-1])

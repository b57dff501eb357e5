# -*- coding: utf-8 -*-
"""
Grid model and neighbor expansion.
Exposes:
- NodeType, Position, GridNode, Grid
- create_grid / create_initial_grid / reset_path / load_grid
- neighbors / neighbor_indices
"""

from __future__ import annotations

from .grid import (
    Grid,
    GridNode,
    NodeType,
    Position,
    SYMBOLS,
    create_grid,
    create_initial_grid,
    load_grid,
    reset_path,
)
from .neighbors import DELTAS_4, neighbor_indices, neighbors

__all__ = [
    "Grid",
    "GridNode",
    "NodeType",
    "Position",
    "SYMBOLS",
    "create_grid",
    "create_initial_grid",
    "load_grid",
    "reset_path",
    "DELTAS_4",
    "neighbor_indices",
    "neighbors",
]

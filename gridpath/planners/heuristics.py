# -*- coding: utf-8 -*-
"""
Distance heuristics on grid coordinates.

Accepts anything with `row`/`col` attributes (Position, GridNode) or a plain
(row, col) pair. Manhattan is admissible for 4-connected unit-cost moves.
"""

from __future__ import annotations
from typing import Tuple
import math

import numpy as np


def _rc(p) -> Tuple[int, int]:
    if hasattr(p, "row"):
        return int(p.row), int(p.col)
    return int(p[0]), int(p[1])


def manhattan(a, b) -> float:
    (ar, ac), (br, bc) = _rc(a), _rc(b)
    return float(abs(ar - br) + abs(ac - bc))


def euclidean(a, b) -> float:
    (ar, ac), (br, bc) = _rc(a), _rc(b)
    return math.sqrt((ar - br) ** 2 + (ac - bc) ** 2)


def manhattan_field(shape: Tuple[int, int], target) -> np.ndarray:
    """Manhattan distance from every cell of a `shape` grid to `target`."""
    tr, tc = _rc(target)
    rr, cc = np.indices(shape)
    return (np.abs(rr - tr) + np.abs(cc - tc)).astype(np.float64)

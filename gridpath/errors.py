# -*- coding: utf-8 -*-
"""
Exception taxonomy for the pathfinding core.

"No path found" is not here on purpose: it is a normal SearchResult with
success=False.
"""

from __future__ import annotations


class GridPathError(Exception):
    """Base class for every error raised by gridpath."""


class InvalidDimensions(GridPathError, ValueError):
    def __init__(self, rows, cols):
        super().__init__(f"Grid dimensions must be positive integers, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols


class OutOfBounds(GridPathError, IndexError):
    def __init__(self, position, shape):
        super().__init__(f"Position {tuple(position)} is outside grid of shape {tuple(shape)}")
        self.position = position
        self.shape = shape


class InvalidPosition(GridPathError, ValueError):
    """Start or end placed on a wall."""


class InvariantViolation(GridPathError, RuntimeError):
    """Internal state that the algorithms should never produce (e.g. a parent cycle)."""


class SearchInterrupted(GridPathError, RuntimeError):
    """A running search was stopped at a suspension point. The grid is left partially searched."""


class SearchCancelled(SearchInterrupted):
    pass


class SearchTimeout(SearchInterrupted):
    pass

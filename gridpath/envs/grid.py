#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Grid model shared by every planner.

Per-node search attributes live in parallel numpy arrays of shape (rows, cols):
    types    int8     NodeType code
    g, h, f  float64  cost-so-far, heuristic, priority (np.inf = unreached)
    parent   int64    row-major flat index of the predecessor, -1 = none
    visited  bool     finalized by the running algorithm

Parents are indices into the grid's own storage, never node references, so a
grid can be deep-copied with plain array copies.

Planners mutate a grid in place; a grid must not be shared between two
searches running at the same time. Use `reset_path` / `Grid.copy` to give each
search its own instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

import numpy as np

from ..errors import InvalidDimensions, OutOfBounds


# ------------------------------- Node kinds ------------------------------- #

class NodeType(IntEnum):
    EMPTY = 0
    START = 1
    END = 2
    WALL = 3
    VISITED = 4
    PATH = 5


# Text map symbols, one per NodeType
SYMBOLS = {
    NodeType.EMPTY: ".",
    NodeType.START: "S",
    NodeType.END: "E",
    NodeType.WALL: "#",
    NodeType.VISITED: "o",
    NodeType.PATH: "*",
}
_FROM_SYMBOL = {sym: kind for kind, sym in SYMBOLS.items()}


class Position(NamedTuple):
    row: int
    col: int


PositionLike = Union[Position, Tuple[int, int]]


@dataclass(frozen=True)
class GridNode:
    """Read-only snapshot of one grid cell at the moment it was taken."""
    row: int
    col: int
    type: NodeType
    g: float
    h: float
    f: float
    parent: Optional[Position]
    is_visited: bool

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


# --------------------------------- Grid ---------------------------------- #

class Grid:
    def __init__(self, rows: int, cols: int):
        if not isinstance(rows, (int, np.integer)) or not isinstance(cols, (int, np.integer)):
            raise InvalidDimensions(rows, cols)
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(rows, cols)
        self.rows = int(rows)
        self.cols = int(cols)
        shape = (self.rows, self.cols)
        self.types = np.full(shape, NodeType.EMPTY, dtype=np.int8)
        self.g = np.full(shape, np.inf, dtype=np.float64)
        self.h = np.zeros(shape, dtype=np.float64)
        self.f = np.full(shape, np.inf, dtype=np.float64)
        self.parent = np.full(shape, -1, dtype=np.int64)
        self.visited = np.zeros(shape, dtype=bool)

    # -- geometry --

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return (0 <= row < self.rows) and (0 <= col < self.cols)

    def check_position(self, pos: PositionLike) -> Position:
        """Normalize `pos` to a Position, raising OutOfBounds if it is off the grid."""
        try:
            r, c = int(pos[0]), int(pos[1])
        except (TypeError, ValueError, IndexError) as e:
            raise TypeError(f"Expected a (row, col) pair, got {pos!r}") from e
        if not self.in_bounds(r, c):
            raise OutOfBounds((r, c), self.shape)
        return Position(r, c)

    def index(self, pos: PositionLike) -> int:
        return int(pos[0]) * self.cols + int(pos[1])

    def position(self, index: int) -> Position:
        r, c = divmod(int(index), self.cols)
        return Position(r, c)

    # -- node snapshots --

    def node(self, row: int, col: int) -> GridNode:
        if not self.in_bounds(row, col):
            raise OutOfBounds((row, col), self.shape)
        p = int(self.parent[row, col])
        return GridNode(
            row=int(row),
            col=int(col),
            type=NodeType(int(self.types[row, col])),
            g=float(self.g[row, col]),
            h=float(self.h[row, col]),
            f=float(self.f[row, col]),
            parent=None if p < 0 else self.position(p),
            is_visited=bool(self.visited[row, col]),
        )

    def node_at(self, index: int) -> GridNode:
        r, c = self.position(index)
        return self.node(r, c)

    def __getitem__(self, pos: PositionLike) -> GridNode:
        return self.node(int(pos[0]), int(pos[1]))

    def nodes(self) -> Iterator[GridNode]:
        """All nodes in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield self.node(r, c)

    def type_at(self, pos: PositionLike) -> NodeType:
        return NodeType(int(self.types[int(pos[0]), int(pos[1])]))

    def is_wall(self, pos: PositionLike) -> bool:
        return self.types[int(pos[0]), int(pos[1])] == NodeType.WALL

    # -- placement --

    def _find(self, kind: NodeType) -> Optional[Position]:
        hits = np.argwhere(self.types == kind)
        if hits.size == 0:
            return None
        return Position(int(hits[0, 0]), int(hits[0, 1]))

    @property
    def start(self) -> Optional[Position]:
        return self._find(NodeType.START)

    @property
    def end(self) -> Optional[Position]:
        return self._find(NodeType.END)

    def _move_marker(self, kind: NodeType, pos: PositionLike) -> Position:
        pos = self.check_position(pos)
        self.types[self.types == kind] = NodeType.EMPTY
        self.types[pos.row, pos.col] = kind
        return pos

    def set_start(self, pos: PositionLike) -> Position:
        """Move the single START marker to `pos` (wall checks belong to the caller)."""
        return self._move_marker(NodeType.START, pos)

    def set_end(self, pos: PositionLike) -> Position:
        return self._move_marker(NodeType.END, pos)

    def set_wall(self, pos: PositionLike, wall: bool = True) -> None:
        pos = self.check_position(pos)
        if wall:
            self.types[pos.row, pos.col] = NodeType.WALL
        elif self.types[pos.row, pos.col] == NodeType.WALL:
            self.types[pos.row, pos.col] = NodeType.EMPTY

    def walls(self) -> List[Position]:
        return [Position(int(r), int(c)) for r, c in np.argwhere(self.types == NodeType.WALL)]

    # -- search state --

    def clear_search_state(self, h: Union[float, np.ndarray] = 0.0) -> None:
        """In-place reset of g/h/f/parent/visited. Node types are untouched."""
        self.g.fill(np.inf)
        self.f.fill(np.inf)
        self.h[...] = h
        self.parent.fill(-1)
        self.visited.fill(False)

    def mark_result(self, result) -> "Grid":
        """Paint a SearchResult: visited nodes become VISITED, then path nodes PATH."""
        for node in result.visited_nodes:
            self.types[node.row, node.col] = NodeType.VISITED
        for node in result.path:
            self.types[node.row, node.col] = NodeType.PATH
        return self

    def copy(self) -> "Grid":
        other = Grid.__new__(Grid)
        other.rows, other.cols = self.rows, self.cols
        other.types = self.types.copy()
        other.g = self.g.copy()
        other.h = self.h.copy()
        other.f = self.f.copy()
        other.parent = self.parent.copy()
        other.visited = self.visited.copy()
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.shape == other.shape
                and np.array_equal(self.types, other.types)
                and np.array_equal(self.g, other.g)
                and np.array_equal(self.h, other.h)
                and np.array_equal(self.f, other.f)
                and np.array_equal(self.parent, other.parent)
                and np.array_equal(self.visited, other.visited))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self.start}, end={self.end})"

    # -- text format --

    def to_ascii(self) -> str:
        lines = []
        for r in range(self.rows):
            lines.append("".join(SYMBOLS[NodeType(int(t))] for t in self.types[r]))
        return "\n".join(lines)

    @classmethod
    def from_ascii(cls, text: Union[str, Iterable[str]]) -> "Grid":
        """
        Parse a text map. One character per cell:
            .  empty   S start   E end   #  wall   o visited   *  path
        Blank lines are ignored; all rows must have the same width.
        """
        if isinstance(text, str):
            text = text.splitlines()
        lines = [ln.strip() for ln in text if ln.strip()]
        if not lines:
            raise InvalidDimensions(0, 0)
        width = len(lines[0])
        for i, ln in enumerate(lines):
            if len(ln) != width:
                raise ValueError(f"Row {i} has width {len(ln)}, expected {width}")
        grid = cls(len(lines), width)
        for r, ln in enumerate(lines):
            for c, ch in enumerate(ln):
                if ch not in _FROM_SYMBOL:
                    raise ValueError(f"Unknown map symbol {ch!r} at ({r}, {c})")
                grid.types[r, c] = _FROM_SYMBOL[ch]
        for kind in (NodeType.START, NodeType.END):
            if np.count_nonzero(grid.types == kind) > 1:
                raise ValueError(f"Map has more than one {kind.name} marker")
        return grid

    @classmethod
    def from_occupancy(cls, occupied: np.ndarray,
                       start: Optional[PositionLike] = None,
                       end: Optional[PositionLike] = None) -> "Grid":
        """Build a grid from a bool array (True = wall)."""
        occupied = np.asarray(occupied, dtype=bool)
        if occupied.ndim != 2:
            raise ValueError(f"Occupancy grid must be 2-D, got shape {occupied.shape}")
        grid = cls(*occupied.shape)
        grid.types[occupied] = NodeType.WALL
        if start is not None:
            grid.set_start(start)
        if end is not None:
            grid.set_end(end)
        return grid


# ------------------------------ Constructors ------------------------------ #

def create_grid(rows: int, cols: int) -> Grid:
    """All-empty grid; raises InvalidDimensions for non-positive sizes."""
    return Grid(rows, cols)


def create_initial_grid(rows: int, cols: int) -> Grid:
    """Empty grid with START at (rows//2, cols//4) and END at (rows//2, 3*cols//4)."""
    grid = Grid(rows, cols)
    grid.set_start((rows // 2, cols // 4))
    grid.set_end((rows // 2, (3 * cols) // 4))
    return grid


def reset_path(grid: Grid) -> Grid:
    """
    Return a cleared copy of `grid`: search attributes reset, VISITED/PATH
    cells back to EMPTY, WALL/START/END kept. The input grid is not modified.
    """
    out = grid.copy()
    out.clear_search_state()
    out.types[(out.types == NodeType.VISITED) | (out.types == NodeType.PATH)] = NodeType.EMPTY
    return out


def load_grid(path: Union[str, Path]) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        return Grid.from_ascii(f.read())

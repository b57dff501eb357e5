# -*- coding: utf-8 -*-
"""
Shared planner contract.

Every planner exposes
    planner.search(grid, start, end, on_visit=None, step_delay=None) -> SearchResult
and the lower-level generator form
    planner.iter_search(grid, start, end)
which yields a GridNode snapshot each time a node is finalized and returns the
SearchResult when exhausted. Subclasses only implement `_prepare` (reset
per-node attributes) and `_explore` (the search loop, yielding finalized
flat indices and returning whether the goal was reached).
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Generator, List, Optional

from ..envs.grid import Grid, GridNode, PositionLike
from ..errors import InvalidPosition, SearchCancelled, SearchTimeout
from .paths import reconstruct, strip_endpoints

logger = logging.getLogger(__name__)

StepObserver = Callable[[GridNode], None]


@dataclass
class SearchResult:
    """Outcome of one search. `path` and `visited_nodes` never contain start or end."""
    path: List[GridNode] = field(default_factory=list)
    visited_nodes: List[GridNode] = field(default_factory=list)
    success: bool = False
    algorithm: str = ""

    @property
    def path_length(self) -> int:
        return len(self.path)

    @property
    def nodes_visited(self) -> int:
        return len(self.visited_nodes)

    def to_dict(self) -> Dict:
        return {
            "algorithm": self.algorithm,
            "success": self.success,
            "path": [(n.row, n.col) for n in self.path],
            "visited": [(n.row, n.col) for n in self.visited_nodes],
        }


class BasePlanner(ABC):
    name: str = "base"
    label: str = "Base"

    def __init__(self, step_delay: float = 0.0):
        if step_delay < 0:
            raise ValueError(f"step_delay must be non-negative, got {step_delay}")
        self.step_delay = step_delay

    # ---- subclass hooks ---- #

    @abstractmethod
    def _prepare(self, grid: Grid, start: int, end: int) -> None:
        """Reset g/h/f/parent/visited to this algorithm's initial values."""

    @abstractmethod
    def _explore(self, grid: Grid, start: int, end: int) -> Generator[int, None, bool]:
        """Yield each finalized flat index; return True once `end` is reached."""

    # ---- public API ---- #

    def iter_search(self, grid: Grid, start: PositionLike, end: PositionLike
                    ) -> Generator[GridNode, None, SearchResult]:
        """
        Validate inputs (eagerly, before touching the grid) and return the
        step generator. Raises OutOfBounds / InvalidPosition.
        """
        start = grid.check_position(start)
        end = grid.check_position(end)
        for label, pos in (("start", start), ("end", end)):
            if grid.is_wall(pos):
                raise InvalidPosition(f"{label} position {tuple(pos)} is a wall")
        return self._run(grid, grid.index(start), grid.index(end))

    def _run(self, grid: Grid, s: int, e: int) -> Generator[GridNode, None, SearchResult]:
        self._prepare(grid, s, e)
        visited: List[GridNode] = []
        if s == e:
            return SearchResult(path=[], visited_nodes=visited, success=True, algorithm=self.name)

        explorer = self._explore(grid, s, e)
        while True:
            try:
                idx = next(explorer)
            except StopIteration as stop:
                found = bool(stop.value)
                break
            if idx == s or idx == e:
                continue
            node = grid.node_at(idx)
            visited.append(node)
            yield node

        path = strip_endpoints(reconstruct(grid, grid.position(e))) if found else []
        return SearchResult(path=path, visited_nodes=visited, success=found, algorithm=self.name)

    def search(self, grid: Grid, start: PositionLike, end: PositionLike,
               on_visit: Optional[StepObserver] = None,
               step_delay: Optional[float] = None,
               timeout: Optional[float] = None,
               cancel: Optional[threading.Event] = None) -> SearchResult:
        """
        Run to completion, notifying `on_visit` once per finalized node.

        Args:
            grid: mutated in place; must not be used by another search meanwhile
            start, end: (row, col) positions, in bounds and not walls
            on_visit: observer called with a GridNode snapshot; exceptions propagate
            step_delay: seconds to pause after each notification (default: self.step_delay)
            timeout: wall-clock budget in seconds, checked at each step
            cancel: event checked at each step

        Returns:
            SearchResult; "no path" is success=False, not an exception.
        """
        delay = self.step_delay if step_delay is None else step_delay
        if delay < 0:
            raise ValueError(f"step_delay must be non-negative, got {delay}")
        steps = self.iter_search(grid, start, end)
        deadline = None if timeout is None else time.monotonic() + timeout
        t0 = time.perf_counter()

        logger.debug(f"{self.label}: searching {tuple(start)} -> {tuple(end)} on {grid.rows}x{grid.cols} grid")
        while True:
            try:
                node = next(steps)
            except StopIteration as stop:
                result = stop.value
                break
            if on_visit is not None:
                on_visit(node)
                if delay > 0:
                    time.sleep(delay)
            if cancel is not None and cancel.is_set():
                steps.close()
                raise SearchCancelled(f"{self.label} search cancelled at {node.position}")
            if deadline is not None and time.monotonic() > deadline:
                steps.close()
                raise SearchTimeout(f"{self.label} search exceeded {timeout}s")

        logger.debug(
            f"{self.label}: success={result.success} path={result.path_length} "
            f"visited={result.nodes_visited} in {(time.perf_counter() - t0) * 1000:.2f} ms"
        )
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(step_delay={self.step_delay})"

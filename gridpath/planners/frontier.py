# -*- coding: utf-8 -*-
"""
Frontier structures.

- PriorityFrontier : binary heap keyed on (priority, insertion seq); used by A*
                     (f) and Greedy Best-First (h).
- FifoFrontier     : plain queue for BFS.
- ScanFrontier     : Dijkstra's full scan of the unvisited set for min g.

All three prefer the entry inserted first when priorities tie.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Hashable, List, Optional
import heapq
import itertools

import numpy as np

from ..envs.grid import Grid, NodeType

_REMOVED = object()  # placeholder for a superseded heap entry


class PriorityFrontier:
    """
    Min-priority queue with FIFO tie-break and in-place priority updates.

    Updating an item marks its old heap entry stale and pushes a new one that
    keeps the original sequence number, so the item does not lose its place
    among equal priorities. Stale entries are dropped lazily on pop.
    """

    def __init__(self):
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}
        self._counter = itertools.count()

    def push(self, item: Hashable, priority: float) -> None:
        old = self._entries.pop(item, None)
        if old is not None:
            seq = old[1]
            old[2] = _REMOVED
        else:
            seq = next(self._counter)
        entry = [priority, seq, item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def pop(self) -> Hashable:
        while self._heap:
            _, _, item = heapq.heappop(self._heap)
            if item is not _REMOVED:
                del self._entries[item]
                return item
        raise IndexError("pop from an empty frontier")

    def priority(self, item: Hashable) -> float:
        return self._entries[item][0]

    def __contains__(self, item) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class FifoFrontier:
    def __init__(self):
        self._dq: Deque[Hashable] = deque()

    def push(self, item: Hashable, priority: Optional[float] = None) -> None:
        self._dq.append(item)

    def pop(self) -> Hashable:
        if not self._dq:
            raise IndexError("pop from an empty frontier")
        return self._dq.popleft()

    def __contains__(self, item) -> bool:
        return item in self._dq

    def __len__(self) -> int:
        return len(self._dq)

    def __bool__(self) -> bool:
        return bool(self._dq)


class ScanFrontier:
    """
    Every non-wall cell of `grid`, scanned in full for the minimum g on each pop.

    O(V) per pop. numpy.argmin returns the first minimum in row-major order,
    which is the tie-break.
    """

    def __init__(self, grid: Grid):
        self._g = grid.g.reshape(-1)
        self._remaining = (grid.types != NodeType.WALL).reshape(-1).copy()
        self._count = int(self._remaining.sum())

    def pop(self) -> int:
        if self._count == 0:
            raise IndexError("pop from an empty frontier")
        masked = np.where(self._remaining, self._g, np.inf)
        idx = int(np.argmin(masked))
        if not self._remaining[idx]:
            # every remaining cell is at inf; fall back to the first of them
            idx = int(np.flatnonzero(self._remaining)[0])
        self._remaining[idx] = False
        self._count -= 1
        return idx

    def __contains__(self, index) -> bool:
        return bool(self._remaining[int(index)])

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

import itertools
import threading

import pytest

from gridpath import get_planner
from gridpath.envs.grid import GridNode
from gridpath.errors import SearchCancelled, SearchTimeout
from gridpath.planners import PLANNERS, base

from tests.maps import BOX_TRAP_7X7, OPEN_3X3, grid_of


@pytest.mark.parametrize("name", sorted(PLANNERS))
def test_observer_sees_every_visit_in_order(name):
    grid = grid_of(BOX_TRAP_7X7)
    seen = []
    res = get_planner(name).search(grid, grid.start, grid.end, on_visit=seen.append)
    assert seen == res.visited_nodes
    assert all(isinstance(n, GridNode) and n.is_visited for n in seen)


def test_snapshots_are_frozen():
    grid = grid_of(OPEN_3X3)
    seen = []
    get_planner("a_star").search(grid, grid.start, grid.end, on_visit=seen.append)
    with pytest.raises(AttributeError):
        seen[0].g = -1


def test_iter_search_yields_then_returns_result():
    grid = grid_of(OPEN_3X3)
    steps = get_planner("greedy").iter_search(grid, grid.start, grid.end)
    yielded = []
    while True:
        try:
            yielded.append(next(steps))
        except StopIteration as stop:
            result = stop.value
            break
    assert result.success
    assert yielded == result.visited_nodes


def test_delay_applied_per_notification(monkeypatch):
    sleeps = []
    monkeypatch.setattr(base.time, "sleep", sleeps.append)
    grid = grid_of(OPEN_3X3)
    res = get_planner("bfs").search(grid, grid.start, grid.end, on_visit=lambda n: None, step_delay=0.05)
    assert sleeps == [0.05] * res.nodes_visited


def test_no_pacing_without_observer_or_delay(monkeypatch):
    sleeps = []
    monkeypatch.setattr(base.time, "sleep", sleeps.append)
    grid = grid_of(OPEN_3X3)
    get_planner("bfs", step_delay=0.05).search(grid, grid.start, grid.end)
    get_planner("bfs").search(grid, grid.start, grid.end, on_visit=lambda n: None, step_delay=0)
    assert sleeps == []


def test_negative_delay_rejected():
    grid = grid_of(OPEN_3X3)
    with pytest.raises(ValueError):
        get_planner("a_star").search(grid, grid.start, grid.end, step_delay=-1)
    with pytest.raises(ValueError):
        get_planner("a_star", step_delay=-0.5)


def test_observer_errors_propagate():
    grid = grid_of(OPEN_3X3)

    def boom(node):
        raise RuntimeError("observer failed")

    with pytest.raises(RuntimeError, match="observer failed"):
        get_planner("dijkstra").search(grid, grid.start, grid.end, on_visit=boom)


def test_cancel_event_stops_at_next_step():
    grid = grid_of(BOX_TRAP_7X7)
    cancel = threading.Event()
    seen = []

    def observer(node):
        seen.append(node)
        cancel.set()

    with pytest.raises(SearchCancelled):
        get_planner("a_star").search(grid, grid.start, grid.end, on_visit=observer, cancel=cancel)
    assert len(seen) == 1


def test_timeout_checked_at_each_step(monkeypatch):
    clock = itertools.count(0, 10)
    monkeypatch.setattr(base.time, "monotonic", lambda: next(clock))
    grid = grid_of(BOX_TRAP_7X7)
    with pytest.raises(SearchTimeout):
        get_planner("bfs").search(grid, grid.start, grid.end, timeout=5)

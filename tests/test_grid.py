import numpy as np
import pytest

from gridpath.envs.grid import (
    SYMBOLS, Grid, NodeType, Position, create_grid, create_initial_grid, load_grid, reset_path,
)
from gridpath.errors import InvalidDimensions, OutOfBounds
from gridpath.planners import AStarPlanner

from tests.maps import ONE_GAP_5X5, grid_of


def test_create_grid_initial_attributes():
    grid = create_grid(3, 4)
    assert grid.shape == (3, 4)
    for node in grid.nodes():
        assert node.type == NodeType.EMPTY
        assert node.g == np.inf and node.f == np.inf
        assert node.h == 0.0
        assert node.parent is None
        assert not node.is_visited


def test_node_coordinates_match_index():
    grid = create_grid(4, 5)
    for i, node in enumerate(grid.nodes()):
        assert (node.row, node.col) == divmod(i, 5)
        assert grid.index(node.position) == i


@pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3), (2.5, 3)])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(InvalidDimensions):
        create_grid(rows, cols)


def test_initial_grid_places_start_and_end():
    grid = create_initial_grid(25, 50)
    assert grid.start == Position(12, 12)
    assert grid.end == Position(12, 37)


def test_set_start_moves_single_marker():
    grid = create_initial_grid(5, 8)
    grid.set_start((0, 0))
    assert grid.start == (0, 0)
    assert np.count_nonzero(grid.types == NodeType.START) == 1
    with pytest.raises(OutOfBounds):
        grid.set_end((5, 0))


def test_set_wall_toggle():
    grid = create_grid(2, 2)
    grid.set_wall((1, 1))
    assert grid.walls() == [(1, 1)]
    grid.set_wall((1, 1), wall=False)
    assert grid.walls() == []


def test_ascii_round_trip_and_symbols_cover_every_kind():
    assert set(SYMBOLS) == set(NodeType)
    grid = grid_of(ONE_GAP_5X5)
    assert grid.start == (2, 0) and grid.end == (2, 4)
    assert grid.to_ascii() == ONE_GAP_5X5.strip()


def test_from_ascii_rejects_ragged_rows_and_unknown_symbols():
    with pytest.raises(ValueError):
        Grid.from_ascii(["S..", ".E"])
    with pytest.raises(ValueError):
        Grid.from_ascii(["S.x", "..E"])
    with pytest.raises(ValueError):
        Grid.from_ascii(["SS.", "..E"])


def test_from_occupancy():
    occ = np.zeros((3, 3), dtype=bool)
    occ[1, 1] = True
    grid = Grid.from_occupancy(occ, start=(0, 0), end=(2, 2))
    assert grid.type_at((1, 1)) == NodeType.WALL
    assert grid.start == (0, 0) and grid.end == (2, 2)


def test_load_grid(tmp_path):
    p = tmp_path / "map.txt"
    p.write_text(ONE_GAP_5X5)
    assert load_grid(p) == grid_of(ONE_GAP_5X5)


def test_reset_path_copies_and_preserves_layout():
    grid = grid_of(ONE_GAP_5X5)
    work = reset_path(grid)
    result = AStarPlanner().search(work, grid.start, grid.end)
    work.mark_result(result)
    snapshot = work.copy()

    cleared = reset_path(work)
    # input untouched
    assert work == snapshot
    assert cleared is not work
    assert not np.any(cleared.types == NodeType.VISITED)
    assert not np.any(cleared.types == NodeType.PATH)
    assert np.all(cleared.parent == -1)
    assert not cleared.visited.any()
    assert cleared.walls() == grid.walls()
    assert cleared.start == grid.start and cleared.end == grid.end


def test_reset_path_is_idempotent():
    grid = grid_of(ONE_GAP_5X5)
    AStarPlanner().search(grid, grid.start, grid.end)
    once = reset_path(grid)
    assert reset_path(once) == once


def test_mark_result_paints_visited_then_path():
    grid = grid_of(ONE_GAP_5X5)
    result = AStarPlanner().search(grid.copy(), grid.start, grid.end)
    painted = reset_path(grid).mark_result(result)
    for node in result.path:
        assert painted.type_at(node.position) == NodeType.PATH
    assert painted.type_at(grid.start) == NodeType.START
    assert painted.type_at(grid.end) == NodeType.END


def test_copy_is_deep():
    grid = create_grid(2, 2)
    other = grid.copy()
    other.g[0, 0] = 1.0
    other.set_wall((1, 1))
    assert grid.g[0, 0] == np.inf
    assert grid.walls() == []

import pytest

from gridpath.eval.compare import METRIC_COLUMNS, compare_planners, summarize_metrics

from tests.maps import BOX_TRAP_7X7, ENCLOSED_5X5, grid_of


def test_compare_all_planners_on_box_trap():
    grid = grid_of(BOX_TRAP_7X7)
    before = grid.copy()
    df = compare_planners(grid, grid.start, grid.end, repeat=2)
    assert list(df.columns) == METRIC_COLUMNS
    assert list(df["algorithm"]) == ["a_star", "dijkstra", "bfs", "greedy"]
    assert df["success"].all()
    lengths = dict(zip(df["algorithm"], df["path_length"]))
    assert lengths == {"a_star": 11, "dijkstra": 11, "bfs": 11, "greedy": 13}
    assert (df["time_ms"] >= 0).all()
    # source grid untouched
    assert grid == before

    leaders = summarize_metrics(df)
    assert leaders["shortest_path"] == "a_star"
    assert leaders["fastest"] in set(df["algorithm"])
    fewest = df["nodes_visited"].min()
    assert df.set_index("algorithm").loc[leaders["fewest_nodes"], "nodes_visited"] == fewest


def test_compare_subset_and_failure():
    grid = grid_of(ENCLOSED_5X5)
    df = compare_planners(grid, grid.start, grid.end, planners=["bfs", "Greedy"])
    assert list(df["algorithm"]) == ["bfs", "greedy"]
    assert not df["success"].any()
    assert (df["path_length"] == 0).all()
    assert (df["nodes_visited"] == 19).all()
    assert summarize_metrics(df)["shortest_path"] is None


def test_compare_rejects_bad_arguments():
    grid = grid_of(BOX_TRAP_7X7)
    with pytest.raises(ValueError):
        compare_planners(grid, grid.start, grid.end, planners=["dfs"])
    with pytest.raises(ValueError):
        compare_planners(grid, grid.start, grid.end, repeat=0)

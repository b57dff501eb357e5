import json

import pandas as pd

from gridpath.cli import run_compare, run_search

from tests.maps import BOX_TRAP_7X7, ENCLOSED_5X5, ONE_GAP_5X5


def _write(tmp_path, text, name="map.txt"):
    p = tmp_path / name
    p.write_text(text)
    return str(p)


def test_run_search_prints_painted_map(tmp_path, capsys):
    code = run_search.main(["--map", _write(tmp_path, ONE_GAP_5X5), "--planner", "bfs"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Path found" in out
    assert "*" in out


def test_run_search_json(tmp_path, capsys):
    code = run_search.main(["--map", _write(tmp_path, BOX_TRAP_7X7), "--planner", "greedy", "--json"])
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert code == 0
    assert payload["algorithm"] == "greedy"
    assert len(payload["path"]) == 13


def test_run_search_no_path_exit_code(tmp_path, capsys):
    code = run_search.main(["--map", _write(tmp_path, ENCLOSED_5X5)])
    assert code == 1
    assert "No path found" in capsys.readouterr().out


def test_run_search_rejects_wall_start(tmp_path, capsys):
    code = run_search.main(["--map", _write(tmp_path, ONE_GAP_5X5), "--start", "0,2"])
    assert code == 2
    assert "wall" in capsys.readouterr().err


def test_run_search_rejects_out_of_bounds_and_missing_file(tmp_path):
    assert run_search.main(["--rows", "5", "--cols", "5", "--end", "9,9"]) == 2
    assert run_search.main(["--map", str(tmp_path / "missing.txt")]) == 2


def test_run_search_animate_and_plot(tmp_path, capsys):
    png = tmp_path / "a_star.png"
    code = run_search.main(["--rows", "3", "--cols", "8", "--animate", "--delay", "0",
                            "--plot", str(png)])
    out = capsys.readouterr().out
    assert code == 0
    assert png.exists()
    assert "o" in out


def test_run_compare_writes_csv(tmp_path, capsys):
    csv_path = tmp_path / "out" / "compare.csv"
    code = run_compare.main(["--map", _write(tmp_path, BOX_TRAP_7X7), "--csv", str(csv_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Shortest path: a_star" in out
    df = pd.read_csv(csv_path)
    assert list(df["algorithm"]) == ["a_star", "dijkstra", "bfs", "greedy"]


def test_run_compare_unknown_planner(tmp_path):
    assert run_compare.main(["--map", _write(tmp_path, BOX_TRAP_7X7), "--planners", "a_star,dfs"]) == 2

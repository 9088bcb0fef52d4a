import json

import pytest
from click.testing import CliRunner

from gc_solver.cli.main import cli, main

TRIANGLE = "3 3\n1 2\n2 3\n1 3\n"


@pytest.fixture
def runner():
    return CliRunner()


def test_solve_prompts_for_colors_and_prints_coloring(runner, write_graph):
    path = write_graph(TRIANGLE)
    result = runner.invoke(cli, ["solve", str(path)], input="3\n")
    assert result.exit_code == 0, result.output
    assert "Number of colors" in result.output
    lines = result.output.splitlines()
    assert "SAT!" in lines
    colors = {line for line in lines if line.startswith("Vertex ")}
    assert len(colors) == 3
    assert len({line.split("Color ")[1] for line in colors}) == 3


def test_solve_unsat(runner, write_graph):
    path = write_graph(TRIANGLE)
    result = runner.invoke(cli, ["solve", str(path), "-k", "2"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["UNSAT!"]


def test_solve_one_edge_one_color(runner, write_graph):
    path = write_graph("2 1\n1 2\n")
    result = runner.invoke(cli, ["solve", str(path), "--colors", "1"])
    assert result.exit_code == 0
    assert "UNSAT!" in result.output


def test_solve_with_reference_solver_and_saved_result(runner, write_graph, tmp_path):
    graph = write_graph("4 4\n1 2\n2 3\n3 4\n4 1\n", name="square.txt")
    out_dir = tmp_path / "res"
    result = runner.invoke(cli, ["solve", str(graph), "-k", "2", "-s", "z3", "-o", str(out_dir)])
    assert result.exit_code == 0, result.output
    assert "SAT!" in result.output

    data = json.loads((out_dir / "square.json").read_text())
    assert data["z3"]["satisfiable"] is True

    result = runner.invoke(cli, ["validate", str(graph), str(out_dir / "square.json")])
    assert result.exit_code == 0, result.output
    assert "z3: Valid coloring" in result.output


def test_validate_flags_bad_coloring(runner, write_graph, tmp_path):
    graph = write_graph("2 1\n1 2\n")
    results = tmp_path / "bad.json"
    results.write_text(json.dumps({
        "tree": {"time": 0, "satisfiable": True, "colors": 2, "coloring": {"1": 1, "2": 1}},
    }))
    result = runner.invoke(cli, ["validate", str(graph), str(results)])
    assert result.exit_code == 1


def test_missing_graph_file_exits_with_one(runner, tmp_path):
    result = runner.invoke(cli, ["solve", str(tmp_path / "nope.txt"), "-k", "2"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_malformed_graph_exits_with_one(runner, write_graph):
    path = write_graph("3 2\n1 2\n")
    result = runner.invoke(cli, ["solve", str(path), "-k", "2"])
    assert result.exit_code == 1


def test_oversized_instance_exits_with_one(runner, write_graph, default_config):
    default_config.max_colors = 2
    path = write_graph(TRIANGLE)
    result = runner.invoke(cli, ["solve", str(path), "-k", "3"])
    assert result.exit_code == 1
    assert "maximum is 2" in result.output


def test_unknown_solver_exits_with_one(runner, write_graph):
    path = write_graph(TRIANGLE)
    result = runner.invoke(cli, ["solve", str(path), "-k", "3", "-s", "walksat"])
    assert result.exit_code == 1


def test_encode_prints_dimacs(runner, write_graph):
    path = write_graph("2 1\n1 2\n")
    result = runner.invoke(cli, ["encode", str(path), "-k", "1"])
    assert result.exit_code == 0
    assert result.output == "p cnf 2 3\n1 0\n2 0\n-1 -2 0\n"


def test_list_solvers(runner):
    result = runner.invoke(cli, ["list-solvers", "-v"])
    assert result.exit_code == 0
    assert "  - tree" in result.output
    assert "  - z3" in result.output


def test_main_maps_usage_errors_to_exit_status_one(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["solve"])
    assert exc.value.code == 1


def test_main_exits_zero_after_solving(write_graph):
    path = write_graph("2 1\n1 2\n")
    with pytest.raises(SystemExit) as exc:
        main(["solve", str(path), "-k", "2"])
    assert exc.value.code == 0


def test_fatal_search_error_exits_with_one(runner, write_graph, monkeypatch):
    from gc_solver.exceptions import SearchResourceError
    from gc_solver.sat.search import BacktrackingSearch

    def exhausted(self):
        raise SearchResourceError("Search recursion exhausted the stack at 9 variables")

    monkeypatch.setattr(BacktrackingSearch, "run", exhausted)
    path = write_graph(TRIANGLE)
    result = runner.invoke(cli, ["solve", str(path), "-k", "3"])
    assert result.exit_code == 1
    assert "Fatal: Search recursion exhausted the stack" in result.output
    assert "SAT!" not in result.output


def test_save_writes_to_configured_results_dir(runner, write_graph, tmp_path, default_config):
    default_config.results_dir = tmp_path / "configured"
    path = write_graph(TRIANGLE, name="triangle.txt")
    result = runner.invoke(cli, ["solve", str(path), "-k", "3", "--save"])
    assert result.exit_code == 0, result.output

    data = json.loads((tmp_path / "configured" / "triangle.json").read_text())
    assert data["tree"]["satisfiable"] is True
    assert sorted(data["tree"]["coloring"].values()) == [1, 2, 3]


def test_output_option_overrides_results_dir(runner, write_graph, tmp_path, default_config):
    default_config.results_dir = tmp_path / "configured"
    path = write_graph(TRIANGLE, name="triangle.txt")
    result = runner.invoke(cli, ["solve", str(path), "-k", "2", "--save", "-o", str(tmp_path / "explicit")])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "explicit" / "triangle.json").exists()
    assert not (tmp_path / "configured").exists()


def test_nothing_is_saved_by_default(runner, write_graph, tmp_path, default_config):
    default_config.results_dir = tmp_path / "configured"
    path = write_graph(TRIANGLE)
    result = runner.invoke(cli, ["solve", str(path), "-k", "3"])
    assert result.exit_code == 0
    assert not (tmp_path / "configured").exists()

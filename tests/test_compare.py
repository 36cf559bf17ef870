"""Tests for the side-by-side runner and the command-line entry point."""
import pytest

from mlsttools import solve
from mlsttools.cli import main, parse_edge_list
from mlsttools.compare import compare_strategies
from mlsttools.errors import DisconnectedGraphError, InfeasibleError, InvalidInputError
from mlsttools.io.cases import get_case
from mlsttools.strategies import STRATEGIES, get_strategy


# --- registry ---

def test_registry_names():
    assert list(STRATEGIES) == ["exhaustive", "approximate", "greedy"]


def test_get_strategy_with_options():
    s = get_strategy("approximate", mode="corrected")
    assert s.mode == "corrected"


def test_get_strategy_unknown():
    with pytest.raises(InvalidInputError):
        get_strategy("annealing")


def test_solve_shortcut(k4):
    assert solve(k4).leaves == 3
    assert solve(k4, "greedy").leaves == 2


# --- compare ---

def test_compare_all(k4):
    rows = compare_strategies(k4)
    assert [r.strategy for r in rows] == ["exhaustive", "approximate", "greedy"]
    assert all(r.error is None and r.result is not None for r in rows)
    assert all(r.seconds >= 0 for r in rows)
    assert rows[0].result.leaves >= max(r.result.leaves for r in rows[1:])


def test_compare_records_errors(two_components):
    rows = compare_strategies(two_components)
    assert [type(r.error) for r in rows] == [InfeasibleError, DisconnectedGraphError, DisconnectedGraphError]
    assert all(r.result is None for r in rows)


def test_compare_passes_options(branch_graph):
    rows = compare_strategies(branch_graph, ["approximate"], {"approximate": {"mode": "corrected"}})
    assert rows[0].result.leaves == 5


# --- cli ---

def test_parse_edge_list():
    assert parse_edge_list("0-1, 1-2 2-3") == [(0, 1), (1, 2), (2, 3)]


def test_cli_case(capsys):
    assert main(["--case", "star4"]) == 0
    out = capsys.readouterr().out
    assert "Known maximum leaves: 3" in out
    assert "[exhaustive] spanning tree with 3 leaves" in out
    assert "[greedy]" in out


def test_cli_list_cases(capsys):
    assert main(["--list-cases"]) == 0
    out = capsys.readouterr().out
    assert "k4" in out and "pendant_tree30" in out


def test_cli_trace(capsys):
    assert main(["--case", "k4", "--strategy", "exhaustive", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "Valid Spanning Tree #16" in out
    assert "[BEST SO FAR]" in out


def test_cli_edges_disconnected(capsys):
    assert main(["--edges", "0-1,2-3", "--n", "4"]) == 1
    out = capsys.readouterr().out
    assert "InfeasibleError" in out
    assert "DisconnectedGraphError" in out


def test_cli_g6_matrix(capsys):
    assert main(["--g6", "C~", "--strategy", "greedy", "--matrix"]) == 0
    out = capsys.readouterr().out
    assert "Adjacency Matrix of Input Graph:" in out
    assert "Graph: K4" in out


def test_cli_budget_cancels(capsys):
    assert main(["--case", "k5", "--strategy", "exhaustive", "--max-subsets", "3"]) == 1
    assert "SearchCancelledError" in capsys.readouterr().out


def test_cli_unknown_case(capsys):
    assert main(["--case", "nope"]) == 2
    assert "unknown case" in capsys.readouterr().err


def test_cli_invalid_edges(capsys):
    assert main(["--edges", "0-0", "--n", "2"]) == 2


def test_cli_edges_need_n():
    with pytest.raises(SystemExit):
        main(["--edges", "0-1"])


def test_cli_corrected_mode(capsys):
    assert main(["--edges", "0-1,1-2,2-3,3-4,1-4,1-5,1-6", "--n", "7",
                 "--strategy", "approximate", "--mode", "corrected"]) == 0
    assert "5 leaves" in capsys.readouterr().out


@pytest.mark.parametrize("var, value", [
    ("MLST_EXHAUSTIVE_TIME_LIMIT", "soon"),
    ("MLST_MAX_VERTICES", "abc"),
    ("MLST_LOG_LEVEL", "LOUD"),
])
def test_cli_malformed_environment(monkeypatch, capsys, var, value):
    monkeypatch.setenv(var, value)
    assert main(["--case", "k4", "--strategy", "greedy"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert var in err


def test_cli_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--case", "k4", "--log-level", "LOUD"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_cli_log_level_case_insensitive(capsys):
    assert main(["--case", "k4", "--strategy", "greedy", "--log-level", "info"]) == 0

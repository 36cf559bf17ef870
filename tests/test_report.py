"""Tests for text rendering of results."""
from mlsttools.compare import ComparisonRow
from mlsttools.core.leaves import SpanningTreeResult
from mlsttools.errors import InfeasibleError
from mlsttools.report.text import (
    adjacency_matrix,
    format_adjacency_matrix,
    format_combo_trace,
    format_comparison,
    format_degrees,
    format_edges,
    format_result,
)
from mlsttools.strategies.exhaustive import ComboTrace


STAR = SpanningTreeResult.from_edges("exhaustive", 4, [(0, 1), (0, 2), (0, 3)], valid_trees=1, subsets_examined=1)


def test_format_edges():
    assert format_edges([(0, 1), (1, 2)]) == "(0-1) (1-2)"


def test_format_degrees():
    assert format_degrees([1, 2, 1]) == "0:1 1:2 2:1"


def test_adjacency_matrix_symmetric():
    assert adjacency_matrix([(0, 1), (1, 2)], 3) == [[0, 1, 0], [1, 0, 1], [0, 1, 0]]


def test_format_adjacency_matrix_shape():
    text = format_adjacency_matrix([(0, 1), (1, 2)], 3, label="M:")
    lines = text.splitlines()
    assert lines[0] == "M:"
    assert len(lines) == 1 + 1 + 3
    assert lines[2].split() == ["0", "0", "1", "0"]


def test_format_combo_trace_best():
    t = ComboTrace(2, ((0, 1), (0, 2), (0, 3)), (3, 1, 1, 1), 3, True)
    line = format_combo_trace(t)
    assert line.startswith("Valid Spanning Tree #2")
    assert "(0-1) (0-2) (0-3)" in line
    assert "Leaves: 3" in line
    assert line.endswith("[BEST SO FAR]")


def test_format_combo_trace_not_best():
    t = ComboTrace(3, ((0, 1),), (1, 1), 2, False)
    assert "BEST" not in format_combo_trace(t)


def test_format_result():
    text = format_result(STAR)
    assert "3 leaves" in text
    assert "K1,3" in text
    assert "Node Degrees: 0:3 1:1 2:1 3:1" in text
    assert "Valid spanning trees: 1 of 1 subsets" in text


def test_format_result_with_matrix():
    text = format_result(STAR, matrix=True)
    assert "Adjacency Matrix of Spanning Tree:" in text


def test_format_comparison():
    rows = [
        ComparisonRow("exhaustive", STAR, 0.0012),
        ComparisonRow("greedy", None, 0.0001, InfeasibleError("nope", subsets_examined=0)),
    ]
    text = format_comparison(rows)
    assert "exhaustive" in text and "1.200" in text
    assert "InfeasibleError: nope" in text

"""Tests for matplotlib drawing (Agg backend)."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from mlsttools.io.cases import get_case
from mlsttools.strategies import ExhaustiveSearchStrategy
from mlsttools.viz.draw import draw_tree
from mlsttools.viz.layouts import base_layout, tree_layout


def test_draw_tree_saves_png(tmp_path):
    g = get_case("wheel5").graph()
    r = ExhaustiveSearchStrategy().solve(g)
    out = tmp_path / "wheel.png"
    draw_tree(g, r, save_path=str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_draw_tree_on_given_axes():
    g = get_case("prism").graph()
    r = ExhaustiveSearchStrategy().solve(g)
    fig, ax = plt.subplots()
    returned = draw_tree(g, r, ax=ax, layered=True)
    assert returned is ax
    assert "4 leaves" in ax.get_title()
    plt.close(fig)


def test_layouts_cover_all_vertices():
    g = get_case("binary_tree").graph()
    T = g.to_networkx()
    assert set(base_layout(T)) == set(range(7))
    pos = tree_layout(T, 0)
    assert set(pos) == set(range(7))
    assert pos[0][1] == 1.0
    assert pos[3][1] == 0.0

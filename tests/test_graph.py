"""Tests for mlsttools.core.graph."""
import networkx as nx
import pytest

from mlsttools.core.graph import Graph
from mlsttools.errors import InvalidInputError


# --- construction / validation ---

def test_build_equivalent_to_constructor():
    assert Graph.build(3, [(0, 1), (1, 2)]) == Graph(3, [(0, 1), (1, 2)])


@pytest.mark.parametrize("n", [0, -1, True, 2.0, "3"])
def test_rejects_bad_vertex_count(n):
    with pytest.raises(InvalidInputError):
        Graph(n, [])


def test_rejects_out_of_range_vertex():
    with pytest.raises(InvalidInputError, match="outside"):
        Graph(3, [(0, 1), (1, 3)])


def test_rejects_negative_vertex():
    with pytest.raises(InvalidInputError):
        Graph(3, [(-1, 1)])


def test_rejects_self_loop():
    with pytest.raises(InvalidInputError, match="self-loop"):
        Graph(3, [(0, 1), (2, 2)])


@pytest.mark.parametrize("edge", [(0,), (0, 1, 2), 5, (0, "1")])
def test_rejects_malformed_edge(edge):
    with pytest.raises(InvalidInputError):
        Graph(3, [edge])


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        Graph(2, [(0, 5)])


def test_single_vertex_no_edges():
    g = Graph(1, [])
    assert g.n == 1
    assert g.edges == ()
    assert g.adj == ((),)


class _Index:
    def __init__(self, v):
        self.v = v

    def __index__(self):
        return self.v


def test_accepts_integer_like_vertices():
    g = Graph(_Index(3), [(_Index(0), _Index(1)), (1, _Index(2))])
    assert g.n == 3
    assert g.edges == ((0, 1), (1, 2))
    assert all(type(x) is int for e in g.edges for x in e)
    assert type(g.n) is int


def test_accepts_numpy_integers():
    np = pytest.importorskip("numpy")
    pairs = np.array([[0, 1], [1, 2], [2, 0]], dtype=np.int64)
    g = Graph(np.int64(3), pairs)
    assert g.edges == ((0, 1), (1, 2), (2, 0))
    assert all(type(x) is int for e in g.edges for x in e)
    assert g.degrees() == [2, 2, 2]


@pytest.mark.parametrize("edge", [(True, 0), (0, False), (0.0, 1), ("0", 1)])
def test_rejects_non_integer_endpoints(edge):
    with pytest.raises(InvalidInputError, match="non-integer"):
        Graph(2, [edge])


# --- adjacency ---

def test_adjacency_in_input_order():
    g = Graph(4, [(2, 0), (0, 1), (3, 0), (1, 2)])
    assert g.neighbors(0) == (2, 1, 3)
    assert g.neighbors(1) == (0, 2)
    assert g.neighbors(2) == (0, 1)
    assert g.neighbors(3) == (0,)


def test_duplicate_edges_kept():
    g = Graph(3, [(0, 1), (1, 0), (1, 2)])
    assert g.number_of_edges() == 3
    assert g.neighbors(0) == (1, 1)
    assert g.degree(1) == 3
    assert g.degrees() == [2, 3, 1]


def test_edges_normalized_to_tuples():
    g = Graph(3, [[0, 1], [1, 2]])
    assert g.edges == ((0, 1), (1, 2))


def test_graph_is_read_only():
    g = Graph(2, [(0, 1)])
    with pytest.raises(AttributeError):
        g.n = 5
    with pytest.raises(AttributeError):
        g.edges = ()


# --- connectivity ---

def test_is_connected(k4):
    assert k4.is_connected() is True


def test_is_not_connected(two_components):
    assert two_components.is_connected() is False


def test_isolated_vertex_disconnects():
    assert Graph(3, [(0, 1)]).is_connected() is False


# --- networkx interchange ---

def test_to_networkx_collapses_duplicates():
    G = Graph(3, [(0, 1), (0, 1), (1, 2)]).to_networkx()
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 2


def test_to_networkx_keeps_isolated_vertices():
    G = Graph(4, [(0, 1)]).to_networkx()
    assert sorted(G.nodes()) == [0, 1, 2, 3]


def test_from_networkx_relabels_sorted():
    G = nx.Graph()
    G.add_edges_from([("b", "c"), ("a", "b")])
    g = Graph.from_networkx(G)
    assert g.n == 3
    assert sorted(tuple(sorted(e)) for e in g.edges) == [(0, 1), (1, 2)]


def test_from_networkx_complete():
    g = Graph.from_networkx(nx.complete_graph(5))
    assert g.n == 5
    assert g.number_of_edges() == 10
    assert g.is_connected()

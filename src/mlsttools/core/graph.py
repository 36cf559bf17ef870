from __future__ import annotations

import operator
from typing import Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from mlsttools.config import max_vertices
from mlsttools.errors import InvalidInputError
from mlsttools.utils.connectivity import is_connected_edges


Edge = Tuple[int, int]


def _as_vertex_id(x: object) -> Optional[int]:
    """Plain int for anything integer-like (numpy ints included), else None. Bools are rejected."""
    if isinstance(x, bool):
        return None
    try:
        return operator.index(x)
    except TypeError:
        return None


def validate_edges(n: int, edges: Iterable[Sequence[int]]) -> List[Edge]:
    """
    Check n and every edge; return the edges as a list of (u, v) tuples
    of plain ints in input order. Duplicates are kept.
    """
    count = _as_vertex_id(n)
    if count is None or count <= 0:
        raise InvalidInputError(f"vertex count must be a positive integer, got {n!r}")
    n = count

    limit = max_vertices()
    if n > limit:
        raise InvalidInputError(
            f"n={n} exceeds the vertex limit {limit} (set MLST_MAX_VERTICES to raise it)"
        )

    out: List[Edge] = []
    for i, e in enumerate(edges):
        try:
            a, b = e
        except (TypeError, ValueError):
            raise InvalidInputError(f"edge #{i} is not a vertex pair: {e!r}") from None
        u, v = _as_vertex_id(a), _as_vertex_id(b)
        if u is None or v is None:
            raise InvalidInputError(f"edge #{i} has non-integer endpoints: {e!r}")
        if not (0 <= u < n and 0 <= v < n):
            raise InvalidInputError(f"edge #{i} {(u, v)} references a vertex outside [0, {n})")
        if u == v:
            raise InvalidInputError(f"edge #{i} is a self-loop on vertex {u}")
        out.append((u, v))
    return out


class Graph:
    """
    Undirected multigraph on vertices 0..n-1, read-only after construction.

    Neighbor order is input order: for each edge (u, v) in sequence, v is
    appended to adj[u] and u to adj[v]. DFS-based strategies depend on it.
    Degrees count multiplicity, so a repeated edge contributes twice.
    """

    __slots__ = ("_n", "_edges", "_adj")

    def __init__(self, n: int, edges: Iterable[Sequence[int]] = ()):
        checked = validate_edges(n, edges)
        n = operator.index(n)
        adj: List[List[int]] = [[] for _ in range(n)]
        for u, v in checked:
            adj[u].append(v)
            adj[v].append(u)
        self._n = n
        self._edges: Tuple[Edge, ...] = tuple(checked)
        self._adj: Tuple[Tuple[int, ...], ...] = tuple(tuple(nb) for nb in adj)

    @classmethod
    def build(cls, n: int, edges: Iterable[Sequence[int]]) -> "Graph":
        return cls(n, edges)

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":
        """
        Convert a NetworkX graph. Nodes are relabelled 0..n-1 in sorted order
        (insertion order if the labels are not mutually comparable).
        """
        nodes = list(G.nodes())
        try:
            nodes = sorted(nodes)
        except TypeError:
            pass
        index = {v: i for i, v in enumerate(nodes)}
        return cls(len(nodes), [(index[u], index[v]) for u, v in G.edges()])

    @property
    def n(self) -> int:
        return self._n

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def adj(self) -> Tuple[Tuple[int, ...], ...]:
        return self._adj

    def neighbors(self, v: int) -> Tuple[int, ...]:
        return self._adj[v]

    def degree(self, v: int) -> int:
        return len(self._adj[v])

    def degrees(self) -> List[int]:
        return [len(nb) for nb in self._adj]

    def number_of_edges(self) -> int:
        return len(self._edges)

    def is_connected(self) -> bool:
        return is_connected_edges(list(self._edges), vertices=set(range(self._n)))

    def to_networkx(self, G: Optional[nx.Graph] = None) -> nx.Graph:
        """Simple NetworkX graph on 0..n-1 (duplicate edges collapse)."""
        H = nx.Graph() if G is None else G
        H.add_nodes_from(range(self._n))
        H.add_edges_from(self._edges)
        return H

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, m={len(self._edges)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._n == other._n and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._n, self._edges))

from __future__ import annotations

import networkx as nx

from mlsttools.core.graph import Graph
from mlsttools.errors import InvalidInputError


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.
    """
    s = strip_graph6_header(g6)
    try:
        return nx.from_graph6_bytes(s.encode("ascii"))
    except (nx.NetworkXError, ValueError, UnicodeEncodeError) as exc:
        raise InvalidInputError(f"not a graph6 string: {g6!r} ({exc})") from exc


def g6_to_graph(g6: str) -> Graph:
    """
    Parse a graph6 string into a Graph on 0..n-1.

    Edges come out in NetworkX order (row by row over the adjacency), which
    fixes the neighbor order the DFS strategies see.
    """
    return Graph.from_networkx(g6_to_nx(g6))


def graph_to_g6(graph: Graph) -> str:
    """Encode a Graph as graph6 (duplicate edges collapse)."""
    return nx.to_graph6_bytes(graph.to_networkx(), header=False).decode("ascii").strip()

from __future__ import annotations

from collections import defaultdict


def _degrees(edges: list[tuple[int, int]], n: int) -> list[int]:
    deg = [0] * n
    for u, v in edges:
        deg[u] += 1
        deg[v] += 1
    return deg


def tree_name(edges: list[tuple[int, int]], n: int) -> str:
    """Human-readable shape of a spanning tree on vertices 0..n-1.

    Handles: K1, K2, P{n}, K1,{r} (star), caterpillar{n}[spine] and the
    general T{n}[{deg_seq}] with the degree sequence in descending order.
    A caterpillar is a tree whose non-leaf vertices induce a path.
    """
    if n == 1:
        return "K1"
    if n == 2:
        return "K2"

    deg = _degrees(edges, n)
    max_d = max(deg)

    if max_d <= 2:
        return f"P{n}"

    if max_d == n - 1:
        return f"K1,{n - 1}"

    # Caterpillar: internal vertices form a path
    internal = {v for v in range(n) if deg[v] > 1}
    inner_deg: dict[int, int] = defaultdict(int)
    for u, v in edges:
        if u in internal and v in internal:
            inner_deg[u] += 1
            inner_deg[v] += 1
    if all(inner_deg[v] <= 2 for v in internal):
        return f"caterpillar{n}[{len(internal)}]"

    ds_str = "".join(str(d) for d in sorted(deg, reverse=True))
    return f"T{n}[{ds_str}]"


def describe_graph(edges: list[tuple[int, int]], n: int) -> str:
    """Human-readable description of a small input graph on 0..n-1.

    Returns recognizable names for common structures (K{n}, C{n}, P{n},
    K1,{r}, W{n}) and a generic descriptor with vertex/edge counts otherwise.
    Duplicate edges are ignored.
    """
    simple = {(min(u, v), max(u, v)) for u, v in edges}
    m = len(simple)
    if m == 0:
        return "K1" if n == 1 else f"empty({n}v)"

    deg = _degrees(list(simple), n)
    deg_seq = sorted(deg, reverse=True)

    if m == n * (n - 1) // 2:
        return f"K{n}"

    if m == n - 1 and all(d > 0 for d in deg):
        if deg_seq[0] <= 2:
            return f"P{n}"
        if deg_seq[0] == n - 1:
            return f"K1,{n - 1}"
        return f"Tree({n}v,{''.join(map(str, deg_seq))})"

    if m == n and all(d == 2 for d in deg):
        return f"C{n}"

    # Wheel: one hub adjacent to everything, rim vertices of degree 3
    if n >= 4 and m == 2 * (n - 1) and deg_seq[0] == n - 1 and all(d == 3 for d in deg_seq[1:]):
        return f"W{n}"

    return f"Graph({n}v,{m}e)"

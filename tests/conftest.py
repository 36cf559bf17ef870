import pytest

from mlsttools.core.graph import Graph


# Branching vertex 1 reached early by DFS from 0; the seed tree detours
# 1-2-3-4 although 1 is adjacent to 4 directly.
BRANCH_N = 7
BRANCH_EDGES = [(0, 1), (1, 2), (2, 3), (3, 4), (1, 4), (1, 5), (1, 6)]


@pytest.fixture
def branch_graph():
    return Graph(BRANCH_N, BRANCH_EDGES)


@pytest.fixture
def k4():
    return Graph(4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])


@pytest.fixture
def two_components():
    return Graph(4, [(0, 1), (2, 3)])

import matplotlib.pyplot as plt

from mlsttools.io.cases import get_case
from mlsttools.strategies import (
    ApproximateExpansionStrategy,
    ExhaustiveSearchStrategy,
    GreedyDegreeDFSStrategy,
)
from mlsttools.viz.draw import draw_tree

case = get_case("prism")
g = case.graph()

strategies = [
    ExhaustiveSearchStrategy(),
    ApproximateExpansionStrategy(mode="corrected"),
    GreedyDegreeDFSStrategy(),
]

fig, axes = plt.subplots(1, len(strategies), figsize=(15, 5))
for ax, s in zip(axes, strategies):
    r = s.solve(g)
    print(f"{s!r}: {r.leaves} leaves, edges {r.edges}")
    draw_tree(g, r, ax=ax, seed=7)

plt.tight_layout()
plt.show()

from __future__ import annotations

from typing import Dict, Type

from mlsttools.errors import InvalidInputError
from .base import MLSTStrategy, dfs_discovery_edges
from .exhaustive import ExhaustiveSearchStrategy, ComboTrace
from .approximate import ApproximateExpansionStrategy
from .greedy import GreedyDegreeDFSStrategy


STRATEGIES: Dict[str, Type[MLSTStrategy]] = {
    ExhaustiveSearchStrategy.name: ExhaustiveSearchStrategy,
    ApproximateExpansionStrategy.name: ApproximateExpansionStrategy,
    GreedyDegreeDFSStrategy.name: GreedyDegreeDFSStrategy,
}


def get_strategy(name: str, **options) -> MLSTStrategy:
    """Instantiate a strategy by registry name, passing options to its constructor."""
    try:
        cls = STRATEGIES[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown strategy {name!r}; choose from {', '.join(STRATEGIES)}"
        ) from None
    return cls(**options)


__all__ = [
    "MLSTStrategy",
    "dfs_discovery_edges",
    "ExhaustiveSearchStrategy",
    "ComboTrace",
    "ApproximateExpansionStrategy",
    "GreedyDegreeDFSStrategy",
    "STRATEGIES",
    "get_strategy",
]

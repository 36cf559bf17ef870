import argparse

import networkx as nx

from mlsttools.compare import compare_strategies
from mlsttools.core.graph import Graph
from mlsttools.io.cases import CASES


def run_catalog(mode: str) -> None:
    print(f"{'case':<16} {'best':>4} {'exh':>4} {'approx':>6} {'greedy':>6}")
    for case in CASES.values():
        rows = compare_strategies(case.graph(), options={"approximate": {"mode": mode}})
        leaves = {r.strategy: (r.result.leaves if r.result else "-") for r in rows}
        print(
            f"{case.name:<16} {case.expected_max_leaves:>4} {leaves['exhaustive']:>4} "
            f"{leaves['approximate']:>6} {leaves['greedy']:>6}"
        )


def run_random(n: int, p: float, trials: int, seed: int, mode: str) -> None:
    """Heuristics vs exhaustive optimum on connected G(n, p) samples."""
    gaps = {"approximate": 0, "greedy": 0}
    done = 0
    s = seed
    while done < trials:
        G = nx.gnp_random_graph(n, p, seed=s)
        s += 1
        if not nx.is_connected(G):
            continue
        rows = compare_strategies(Graph.from_networkx(G), options={"approximate": {"mode": mode}})
        best = rows[0].result.leaves
        for r in rows[1:]:
            gaps[r.strategy] += best - r.result.leaves
        done += 1
    for name, total in gaps.items():
        print(f"{name}: mean leaf gap to optimum {total / trials:.3f} over {trials} graphs")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--mode', choices=['faithful', 'corrected'], default='faithful')
    parser.add_argument('--random', action='store_true', help='sample G(n, p) instead of the catalog')
    parser.add_argument('--n', type=int, default=7)
    parser.add_argument('--p', type=float, default=0.5)
    parser.add_argument('--trials', type=int, default=20)
    parser.add_argument('--seed', type=int, default=1)
    args = parser.parse_args()
    if args.random:
        run_random(args.n, args.p, args.trials, args.seed, args.mode)
    else:
        run_catalog(args.mode)


if __name__ == '__main__':
    main()

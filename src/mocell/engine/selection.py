from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from mocell.foundation.dominance import DominanceComparator
from mocell.foundation.solution import Solution


class BinaryTournament:
    """
    Binary tournament over a solution collection.

    Two distinct contenders are drawn uniformly; the comparator
    decides (<0 first wins, >0 second wins) and ties are broken at random.
    """

    def __init__(self, comparator: Callable[[Solution, Solution], int] | None = None) -> None:
        self.comparator = comparator or DominanceComparator()

    def __call__(self, solutions: Sequence[Solution], rng: np.random.Generator) -> Solution:
        n = len(solutions)
        if n == 0:
            raise ValueError("cannot select from an empty collection.")
        if n == 1:
            return solutions[0]
        i, j = rng.choice(n, size=2, replace=False)
        a, b = solutions[int(i)], solutions[int(j)]
        flag = self.comparator(a, b)
        if flag < 0:
            return a
        if flag > 0:
            return b
        return a if rng.random() < 0.5 else b


class RandomSelection:
    """Uniform random parent selection."""

    def __call__(self, solutions: Sequence[Solution], rng: np.random.Generator) -> Solution:
        n = len(solutions)
        if n == 0:
            raise ValueError("cannot select from an empty collection.")
        return solutions[int(rng.integers(0, n))]


__all__ = ["BinaryTournament", "RandomSelection"]

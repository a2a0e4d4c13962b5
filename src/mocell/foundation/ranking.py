"""
Non-dominated sorting.

Array-level ``fast_non_dominated_sort`` plus a Solution-level ``Ranking`` that
partitions an arbitrary collection into fronts and stamps each member's rank.
Fronts are transient: they are recomputed every time they are needed.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .dominance import dominance_matrix
from .solution import Solution, solutions_to_arrays


def fast_non_dominated_sort(F: np.ndarray, cv: np.ndarray | None = None):
    """
    Classic O(N^2) fast non-dominated sort.
    Args:
        F: objective matrix (N, M), float64.
        cv: optional aggregated constraint violation (N,), 0 = feasible.
    Returns:
      - fronts: list of lists with indices per front (0, 1, ...)
      - rank: array with the front rank for each solution
    """
    F = np.asarray(F, dtype=float)
    N = F.shape[0]
    if N == 0:
        return [], np.empty(0, dtype=int)

    dom_matrix = dominance_matrix(F, cv)
    dominated_count = dom_matrix.sum(axis=0).astype(np.int64)
    rank = np.empty(N, dtype=int)
    fronts = []

    current = np.flatnonzero(dominated_count == 0)
    level = 0
    while current.size > 0:
        fronts.append(current.tolist())
        rank[current] = level
        dom_contrib = dom_matrix[current].sum(axis=0)
        dominated_count -= dom_contrib
        dominated_count[current] = -1
        dom_matrix[current] = False
        level += 1
        current = np.flatnonzero(dominated_count == 0)

    return fronts, rank


class Ranking:
    """Partition of a solution collection into ordered fronts.

    Front 0 is the non-dominated subset; members of front i are dominated
    only by members of fronts < i. Each solution's ``rank`` attribute is set
    to the index of its front.
    """

    def __init__(self, solutions: Sequence[Solution]) -> None:
        self._solutions = list(solutions)
        if not self._solutions:
            self._fronts: list[list[Solution]] = []
            return
        _, F, cv = solutions_to_arrays(self._solutions)
        fronts, ranks = fast_non_dominated_sort(F, cv)
        for sol, r in zip(self._solutions, ranks):
            sol.rank = int(r)
        self._fronts = [[self._solutions[i] for i in front] for front in fronts]

    @property
    def number_of_subfronts(self) -> int:
        return len(self._fronts)

    def subfront(self, index: int) -> list[Solution]:
        return self._fronts[index]

    def __iter__(self):
        return iter(self._fronts)

    def __len__(self) -> int:
        return len(self._fronts)


__all__ = ["Ranking", "fast_non_dominated_sort"]

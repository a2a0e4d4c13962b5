"""
Crowding-distance density estimator.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .solution import Solution


def crowding_distance(F: np.ndarray) -> np.ndarray:
    """
    Crowding distance of the rows of one front.

    Boundary members of every objective get ``inf``; interior members
    accumulate the normalized gap between their sorted neighbors. An objective
    whose range in the front is zero contributes nothing.
    """
    F = np.asarray(F, dtype=float)
    n = F.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)
    if n <= 2:
        return np.full(n, np.inf)

    d = np.zeros(n, dtype=float)
    for m in range(F.shape[1]):
        order = np.argsort(F[:, m], kind="mergesort")
        sorted_vals = F[order, m]

        d[order[0]] = np.inf
        d[order[-1]] = np.inf

        span = sorted_vals[-1] - sorted_vals[0]
        if span <= 0.0:
            continue

        contrib = np.zeros_like(sorted_vals)
        contrib[1:-1] = (sorted_vals[2:] - sorted_vals[:-2]) / span
        d[order[1:-1]] += contrib[1:-1]

    return d


def assign_crowding_distance(front: Sequence[Solution]) -> np.ndarray:
    """Write the crowding distance of each member into ``solution.crowding_distance``."""
    if len(front) == 0:
        return np.empty(0, dtype=float)
    F = np.vstack([s.objectives for s in front])
    d = crowding_distance(F)
    for sol, value in zip(front, d):
        sol.crowding_distance = float(value)
    return d


__all__ = ["assign_crowding_distance", "crowding_distance"]

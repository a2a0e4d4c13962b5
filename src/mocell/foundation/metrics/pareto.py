from __future__ import annotations

import numpy as np

from mocell.foundation.ranking import fast_non_dominated_sort


def pareto_filter(F: np.ndarray | None, *, return_indices: bool = False):
    """
    Return the non-dominated subset of points (first Pareto front).

    Args:
        F: Objective values array (n_solutions, n_objectives) or None.
        return_indices: When True, also return indices of the front in F.

    Returns:
        Front array, or (front, indices) when return_indices is True.
    """
    if F is None:
        if return_indices:
            return np.empty((0, 0)), np.array([], dtype=int)
        return None
    F = np.asarray(F, dtype=float)
    if F.size == 0 or F.ndim < 2:
        idx = np.arange(int(F.shape[0]) if F.ndim > 0 else 0, dtype=int)
        return (F, idx) if return_indices else F
    fronts, _ = fast_non_dominated_sort(F)
    idx = np.asarray(fronts[0], dtype=int)
    front = F[idx]
    return (front, idx) if return_indices else front


__all__ = ["pareto_filter"]

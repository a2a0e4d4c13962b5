"""
Utility helpers for constraint handling.
"""

from __future__ import annotations

import numpy as np


def compute_violation(G: np.ndarray | None, *, n: int | None = None) -> np.ndarray:
    """Sum of positive parts per solution; assumes G shape (N, n_constr), g<=0 satisfied.

    When *G* is ``None`` (unconstrained), returns zeros of length *n*.
    """
    if G is None:
        return np.zeros(n or 0, dtype=float)
    G = np.asarray(G, dtype=float)
    if G.ndim == 1:
        G = G.reshape(-1, 1)
    positive = np.maximum(G, 0.0)
    return np.asarray(np.sum(positive, axis=1), dtype=float)


def is_feasible(cv: np.ndarray) -> np.ndarray:
    """Boolean feasibility mask from an aggregated violation vector."""
    return np.asarray(cv, dtype=float) <= 0.0


__all__ = ["compute_violation", "is_feasible"]

"""Distance-based quality indicators against a reference front."""

from __future__ import annotations

import numpy as np


def _min_distances(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """For each row of A, the Euclidean distance to its nearest row of B."""
    A = np.asarray(A, dtype=float)
    B = np.asarray(B, dtype=float)
    if A.ndim != 2 or B.ndim != 2 or A.shape[1] != B.shape[1]:
        raise ValueError("fronts must be 2D arrays with the same number of objectives")
    if B.shape[0] == 0:
        raise ValueError("reference front is empty")
    diff = A[:, None, :] - B[None, :, :]
    return np.sqrt(np.min(np.sum(diff**2, axis=2), axis=1))


def generational_distance(F: np.ndarray, reference_front: np.ndarray) -> float:
    """GD: sqrt of summed squared nearest distances from F to the reference, divided by |F|."""
    F = np.asarray(F, dtype=float)
    if F.shape[0] == 0:
        return float("inf")
    d = _min_distances(F, reference_front)
    return float(np.sqrt(np.sum(d**2)) / F.shape[0])


def inverted_generational_distance(F: np.ndarray, reference_front: np.ndarray) -> float:
    """IGD: mean distance from each reference point to its nearest point of F."""
    F = np.asarray(F, dtype=float)
    if F.shape[0] == 0:
        return float("inf")
    return float(np.mean(_min_distances(reference_front, F)))


__all__ = ["generational_distance", "inverted_generational_distance"]

from __future__ import annotations

from typing import Sequence

import numpy as np


def hypervolume(F: np.ndarray, ref_point: Sequence[float]) -> float:
    """Exact hypervolume of a 2-objective minimization front.

    Points that do not improve on ``ref_point`` in both objectives contribute
    nothing. For more objectives use a dedicated indicator library.
    """
    F = np.asarray(F, dtype=float)
    ref = np.asarray(ref_point, dtype=float)

    if F.ndim != 2 or F.shape[1] != 2:
        raise ValueError("hypervolume currently supports 2D fronts only")
    if ref.shape != (2,):
        raise ValueError("ref_point must have length 2")
    if not np.isfinite(F).all() or not np.isfinite(ref).all():
        raise ValueError("F and ref_point must contain finite numbers")

    pts = F[np.all(F < ref, axis=1)]
    if pts.size == 0:
        return 0.0

    # Sweep by f1 ascending keeping strictly decreasing f2 (the 2-D Pareto front).
    sorted_pts = pts[np.argsort(pts[:, 0], kind="mergesort")]
    front = []
    best_f2 = np.inf
    for x, y in sorted_pts:
        if y < best_f2:
            front.append((x, y))
            best_f2 = y

    hv = 0.0
    prev_f1 = ref[0]
    for x, y in reversed(front):
        hv += (prev_f1 - x) * (ref[1] - y)
        prev_f1 = x
    return float(max(hv, 0.0))


__all__ = ["hypervolume"]

"""
Constrained Pareto dominance.

Convention for every comparator in this module: ``-1`` means the first
argument is better, ``1`` means the second one is better, ``0`` is a tie.
All objectives are minimized.

Constraint violation takes precedence over objectives:
  - both infeasible: the smaller aggregated violation wins;
  - exactly one feasible: the feasible one wins;
  - both feasible: classic Pareto dominance.
"""

from __future__ import annotations

import numpy as np

from .solution import Solution


def pareto_compare(f1: np.ndarray, f2: np.ndarray) -> int:
    """Pareto dominance on two objective vectors, ignoring constraints."""
    better1 = bool(np.any(f1 < f2))
    better2 = bool(np.any(f2 < f1))
    if better1 == better2:
        return 0
    return -1 if better1 else 1


def dominance_compare(a: Solution, b: Solution) -> int:
    cv_a = a.constraint_violation
    cv_b = b.constraint_violation
    if cv_a > 0.0 or cv_b > 0.0:
        if cv_a < cv_b:
            return -1
        if cv_b < cv_a:
            return 1
        # Equal violation: two infeasible solutions tie regardless of objectives.
        return 0
    return pareto_compare(a.objectives, b.objectives)


class DominanceComparator:
    """Callable strategy wrapping :func:`dominance_compare`.

    ``ignore_constraints=True`` turns it into plain Pareto dominance.
    """

    def __init__(self, *, ignore_constraints: bool = False) -> None:
        self.ignore_constraints = bool(ignore_constraints)

    def __call__(self, a: Solution, b: Solution) -> int:
        if self.ignore_constraints:
            return pareto_compare(a.objectives, b.objectives)
        return dominance_compare(a, b)

    compare = __call__


def crowding_compare(a: Solution, b: Solution) -> int:
    """Order by front rank (lower first), then by crowding distance (larger first)."""
    if a.rank < b.rank:
        return -1
    if a.rank > b.rank:
        return 1
    if a.crowding_distance > b.crowding_distance:
        return -1
    if a.crowding_distance < b.crowding_distance:
        return 1
    return 0


def equal_objectives(a: Solution, b: Solution) -> bool:
    return bool(np.array_equal(a.objectives, b.objectives))


def dominance_matrix(F: np.ndarray, cv: np.ndarray | None = None) -> np.ndarray:
    """
    Boolean matrix D where D[i, j] is True iff solution i dominates solution j.

    Vectorized counterpart of :func:`dominance_compare`; pairs where at least
    one side is infeasible are decided by the violation alone.
    """
    F = np.asarray(F, dtype=float)
    less_equal = F[:, None, :] <= F[None, :, :]
    strictly_less = F[:, None, :] < F[None, :, :]
    dom = np.logical_and(
        np.all(less_equal, axis=2),
        np.any(strictly_less, axis=2),
    )
    if cv is None:
        return dom
    cv = np.asarray(cv, dtype=float)
    infeasible = cv > 0.0
    if not infeasible.any():
        return dom
    either = infeasible[:, None] | infeasible[None, :]
    by_violation = cv[:, None] < cv[None, :]
    return np.where(either, by_violation, dom)


__all__ = [
    "DominanceComparator",
    "crowding_compare",
    "dominance_compare",
    "dominance_matrix",
    "equal_objectives",
    "pareto_compare",
]

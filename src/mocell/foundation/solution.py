"""
Solution container shared by the grid, the archive and the neighbor sets.

A Solution is value-like: whenever it is handed to another owner (archive,
neighbor set) a copy is made, so the grid and the archive evolve independently.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

UNPLACED = -1


@dataclass(eq=False)
class Solution:
    """One candidate: decision variables, objectives and constraint state.

    ``location`` is the grid cell the solution occupies, or ``UNPLACED`` (-1)
    for offspring and other transient candidates. ``rank`` and
    ``crowding_distance`` are auxiliary values written by ranking and the
    density estimator; they never touch the objective vector.
    """

    variables: np.ndarray
    objectives: np.ndarray
    constraints: np.ndarray | None = None
    constraint_violation: float = 0.0
    location: int = UNPLACED
    rank: int = 0
    crowding_distance: float = 0.0
    attributes: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.variables = np.array(self.variables, dtype=float).reshape(-1)
        self.objectives = np.array(self.objectives, dtype=float).reshape(-1)
        if self.constraints is not None:
            self.constraints = np.array(self.constraints, dtype=float).reshape(-1)
        self.constraint_violation = float(self.constraint_violation)
        self.location = int(self.location)

    @classmethod
    def empty(cls, n_var: int, n_obj: int) -> "Solution":
        return cls(variables=np.zeros(n_var), objectives=np.full(n_obj, np.nan))

    @property
    def number_of_variables(self) -> int:
        return int(self.variables.shape[0])

    @property
    def number_of_objectives(self) -> int:
        return int(self.objectives.shape[0])

    @property
    def is_feasible(self) -> bool:
        return self.constraint_violation <= 0.0

    def copy(self) -> "Solution":
        return Solution(
            variables=self.variables.copy(),
            objectives=self.objectives.copy(),
            constraints=None if self.constraints is None else self.constraints.copy(),
            constraint_violation=self.constraint_violation,
            location=self.location,
            rank=self.rank,
            crowding_distance=self.crowding_distance,
            attributes=dict(self.attributes),
        )

    def __repr__(self) -> str:
        objs = np.array2string(self.objectives, precision=4, separator=", ")
        return f"Solution(objectives={objs}, cv={self.constraint_violation:.4g}, location={self.location})"


def solutions_to_arrays(solutions: Sequence[Solution]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Stack a sequence of solutions into (X, F, CV) arrays."""
    if len(solutions) == 0:
        return np.empty((0, 0)), np.empty((0, 0)), np.empty(0)
    X = np.vstack([s.variables for s in solutions])
    F = np.vstack([s.objectives for s in solutions])
    cv = np.fromiter((s.constraint_violation for s in solutions), dtype=float, count=len(solutions))
    return X, F, cv


__all__ = ["Solution", "UNPLACED", "solutions_to_arrays"]

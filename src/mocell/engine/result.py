"""Final payload of a MOCell run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from mocell.foundation.solution import Solution, solutions_to_arrays


@dataclass
class MOCellResult:
    """Archive contents at termination plus run counters.

    ``solutions`` are copies of the archive members, in archive order;
    ``population`` holds copies of the final grid occupants.
    """

    solutions: list[Solution]
    n_eval: int
    n_gen: int
    population: list[Solution] = field(default_factory=list)

    @property
    def X(self) -> np.ndarray:
        return solutions_to_arrays(self.solutions)[0]

    @property
    def F(self) -> np.ndarray:
        return solutions_to_arrays(self.solutions)[1]

    @property
    def constraint_violation(self) -> np.ndarray:
        return solutions_to_arrays(self.solutions)[2]

    def __len__(self) -> int:
        return len(self.solutions)

    def to_dict(self) -> dict[str, Any]:
        pop_X, pop_F, _ = solutions_to_arrays(self.population)
        return {
            "X": self.X,
            "F": self.F,
            "evaluations": self.n_eval,
            "generations": self.n_gen,
            "population": {"X": pop_X, "F": pop_F},
        }


__all__ = ["MOCellResult"]

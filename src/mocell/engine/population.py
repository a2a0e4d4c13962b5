from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from mocell.exceptions import ConfigurationError
from mocell.foundation.solution import Solution, solutions_to_arrays


class PopulationGrid:
    """Fixed-size population addressed by grid location.

    ``replace`` is the only mutator: it overwrites a cell in place and stamps
    the incoming solution's ``location`` with the cell index.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ConfigurationError(f"Population size must be positive, got {size}.")
        self._cells: list[Solution | None] = [None] * int(size)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"grid index {index} out of range [0, {len(self._cells)}).")

    def get(self, index: int) -> Solution:
        self._check(index)
        sol = self._cells[index]
        if sol is None:
            raise ConfigurationError(f"Grid cell {index} read before initialization.")
        return sol

    def replace(self, index: int, solution: Solution) -> None:
        self._check(index)
        solution.location = index
        self._cells[index] = solution

    def size(self) -> int:
        return len(self._cells)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def solutions(self) -> list[Solution]:
        return [self.get(i) for i in range(len(self._cells))]

    def to_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        return solutions_to_arrays(self.solutions())

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self.solutions())


__all__ = ["PopulationGrid"]

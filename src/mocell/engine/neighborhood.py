"""
Toroidal neighborhood topology for the cellular population.

Grid index ``i`` maps to row ``i // cols`` and column ``i % cols``; every
direction wraps around, so each cell has the same number of neighbors.
"""

from __future__ import annotations

import math

import numpy as np

from mocell.exceptions import ConfigurationError
from mocell.foundation.solution import Solution

# (d_row, d_col) offsets in the order neighbors are returned.
_OFFSETS = {
    "l5": ((-1, 0), (1, 0), (0, 1), (0, -1)),
    "c9": ((-1, 0), (1, 0), (0, 1), (0, -1), (-1, -1), (-1, 1), (1, -1), (1, 1)),
}
_ALIASES = {"moore": "c9", "eight": "c9", "von_neumann": "l5", "four": "l5"}
MIN_SIDE = 3


def grid_shape(n: int) -> tuple[int, int]:
    """Most square factorization rows x cols of ``n`` with rows <= cols."""
    if n <= 0:
        raise ConfigurationError(f"Population size must be positive, got {n}.")
    rows = 1
    for candidate in range(int(math.isqrt(n)), 0, -1):
        if n % candidate == 0:
            rows = candidate
            break
    return rows, n // rows


class Neighborhood:
    """Maps a grid index to the indices of its structural neighbors.

    ``kind="c9"`` yields the 8 Moore neighbors (N, S, E, W, NW, NE, SW, SE);
    ``kind="l5"`` the 4 von Neumann neighbors (N, S, E, W).
    """

    def __init__(self, population_size: int, shape: tuple[int, int] | None = None, kind: str = "c9") -> None:
        key = _ALIASES.get(kind.lower(), kind.lower())
        if key not in _OFFSETS:
            raise ConfigurationError(
                f"Unknown neighborhood '{kind}'.",
                suggestion="Available neighborhoods: c9 (8 neighbors), l5 (4 neighbors)",
            )
        if shape is None:
            rows, cols = grid_shape(population_size)
        else:
            rows, cols = int(shape[0]), int(shape[1])
            if rows * cols != population_size:
                raise ConfigurationError(
                    f"Grid shape {rows}x{cols} holds {rows * cols} cells, population size is {population_size}.",
                    details={"shape": (rows, cols), "population_size": population_size},
                )
        if rows < MIN_SIDE or cols < MIN_SIDE:
            raise ConfigurationError(
                f"A {rows}x{cols} toroidal grid cannot give every cell {len(_OFFSETS[key])} distinct neighbors.",
                suggestion="Use a population size with a factorization of at least 3x3 (e.g. 9, 16, 25, 100) "
                "or pass an explicit grid shape",
                details={"shape": (rows, cols), "population_size": population_size},
            )
        self.population_size = int(population_size)
        self.rows = rows
        self.cols = cols
        self.kind = key
        self._table = self._build_table()

    def _build_table(self) -> np.ndarray:
        idx = np.arange(self.population_size)
        row = idx // self.cols
        col = idx % self.cols
        table = np.empty((self.population_size, len(_OFFSETS[self.kind])), dtype=int)
        for k, (dr, dc) in enumerate(_OFFSETS[self.kind]):
            table[:, k] = ((row + dr) % self.rows) * self.cols + (col + dc) % self.cols
        return table

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def size(self) -> int:
        return int(self._table.shape[1])

    def neighbor_indices(self, index: int) -> list[int]:
        if not 0 <= index < self.population_size:
            raise IndexError(f"grid index {index} out of range [0, {self.population_size}).")
        return self._table[index].tolist()

    def neighbors(self, grid, index: int) -> list[Solution]:
        """Copies of the current occupants of the neighbor cells of ``index``."""
        return [grid.get(j).copy() for j in self.neighbor_indices(index)]

    def __repr__(self) -> str:
        return f"Neighborhood(kind={self.kind!r}, shape={self.rows}x{self.cols})"


__all__ = ["Neighborhood", "grid_shape"]

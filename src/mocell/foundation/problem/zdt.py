from __future__ import annotations

import numpy as np

from .base import Problem


class ZDT1Problem(Problem):
    name = "zdt1"

    def __init__(self, n_var: int = 30) -> None:
        if n_var < 2:
            raise ValueError("ZDT problems need at least two variables.")
        self.n_var = int(n_var)
        self.n_obj = 2
        self.xl = 0.0
        self.xu = 1.0

    def _g(self, X: np.ndarray) -> np.ndarray:
        return 1.0 + 9.0 * np.mean(X[:, 1:], axis=1)

    def objectives(self, X: np.ndarray) -> np.ndarray:
        f1 = X[:, 0]
        g = self._g(X)
        f2 = g * (1.0 - np.sqrt(f1 / g))
        return np.column_stack([f1, f2])

    def pareto_front(self, n_points: int = 100) -> np.ndarray:
        f1 = np.linspace(0.0, 1.0, n_points)
        return np.column_stack([f1, 1.0 - np.sqrt(f1)])


class ZDT2Problem(ZDT1Problem):
    name = "zdt2"

    def objectives(self, X: np.ndarray) -> np.ndarray:
        f1 = X[:, 0]
        g = self._g(X)
        f2 = g * (1.0 - (f1 / g) ** 2)
        return np.column_stack([f1, f2])

    def pareto_front(self, n_points: int = 100) -> np.ndarray:
        f1 = np.linspace(0.0, 1.0, n_points)
        return np.column_stack([f1, 1.0 - f1**2])


__all__ = ["ZDT1Problem", "ZDT2Problem"]

"""Small classic benchmarks: Schaffer, Kursawe and the constrained ConstrEx."""

from __future__ import annotations

import numpy as np

from .base import Problem


class SchafferProblem(Problem):
    """Schaffer's single-variable bi-objective problem; Pareto set is x in [0, 2]."""

    name = "schaffer"

    def __init__(self, bound: float = 1.0e5) -> None:
        self.n_var = 1
        self.n_obj = 2
        self.xl = -float(bound)
        self.xu = float(bound)

    def objectives(self, X: np.ndarray) -> np.ndarray:
        x = X[:, 0]
        return np.column_stack([x**2, (x - 2.0) ** 2])


class KursaweProblem(Problem):
    name = "kursawe"

    def __init__(self, n_var: int = 3) -> None:
        if n_var < 2:
            raise ValueError("Kursawe needs at least two variables.")
        self.n_var = int(n_var)
        self.n_obj = 2
        self.xl = -5.0
        self.xu = 5.0

    def objectives(self, X: np.ndarray) -> np.ndarray:
        sq = X[:, :-1] ** 2 + X[:, 1:] ** 2
        f1 = np.sum(-10.0 * np.exp(-0.2 * np.sqrt(sq)), axis=1)
        f2 = np.sum(np.abs(X) ** 0.8 + 5.0 * np.sin(X**3), axis=1)
        return np.column_stack([f1, f2])


class ConstrExProblem(Problem):
    """Two-variable problem with two inequality constraints."""

    name = "constrex"
    n_constraints = 2

    def __init__(self) -> None:
        self.n_var = 2
        self.n_obj = 2
        self.xl = np.array([0.1, 0.0])
        self.xu = np.array([1.0, 5.0])

    def objectives(self, X: np.ndarray) -> np.ndarray:
        f1 = X[:, 0]
        f2 = (1.0 + X[:, 1]) / X[:, 0]
        return np.column_stack([f1, f2])

    def constraints(self, X: np.ndarray) -> np.ndarray:
        # x2 + 9 x1 >= 6 and -x2 + 9 x1 >= 1, written as g <= 0
        g1 = 6.0 - (X[:, 1] + 9.0 * X[:, 0])
        g2 = 1.0 - (-X[:, 1] + 9.0 * X[:, 0])
        return np.column_stack([g1, g2])


__all__ = ["ConstrExProblem", "KursaweProblem", "SchafferProblem"]

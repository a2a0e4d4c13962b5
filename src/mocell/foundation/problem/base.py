"""
Base class for optimization problems.

Problems speak the batch protocol ``evaluate(X, out)``: ``X`` has shape
(N, n_var), the problem fills ``out["F"]`` with shape (N, n_obj) and, when it
declares constraints, ``out["G"]`` with shape (N, n_constraints) where
g(x) <= 0 means satisfied. The Solution-level helpers at the bottom adapt that
protocol to the per-individual capability the cellular engine consumes.
"""

from __future__ import annotations

import numpy as np

from mocell.foundation.constraints import compute_violation
from mocell.foundation.solution import Solution


class Problem:
    """Base class for class-based optimization problems.

    **Required:** set ``n_var``, ``n_obj``, ``xl``, ``xu`` in ``__init__`` and
    implement :meth:`objectives`.
    **Optional:** set ``n_constraints`` at class level and implement
    :meth:`constraints`.

    Example::

        class Sphere2(Problem):
            def __init__(self):
                self.n_var = 3
                self.n_obj = 2
                self.xl = np.zeros(3)
                self.xu = np.ones(3)

            def objectives(self, X):
                f1 = np.sum(X ** 2, axis=1)
                f2 = np.sum((X - 1) ** 2, axis=1)
                return np.column_stack([f1, f2])
    """

    name: str = "problem"
    n_constraints: int = 0

    @property
    def n_constr(self) -> int:
        return self.n_constraints

    def objectives(self, X: np.ndarray) -> np.ndarray:
        raise NotImplementedError(f"{type(self).__name__} must implement objectives(self, X).")

    def constraints(self, X: np.ndarray) -> np.ndarray | None:
        return None

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        """Framework evaluation entry point. Override :meth:`objectives` instead."""
        X = np.asarray(X, dtype=float)
        F_computed = np.asarray(self.objectives(X), dtype=float)
        if F_computed.ndim == 1:
            F_computed = F_computed.reshape(-1, self.n_obj)
        F_buf = out.get("F")
        if F_buf is not None and F_buf.shape == F_computed.shape:
            F_buf[:] = F_computed
        else:
            out["F"] = F_computed

        if self.n_constraints > 0:
            G_computed = self.constraints(X)
            if G_computed is not None:
                G_computed = np.asarray(G_computed, dtype=float)
                if G_computed.ndim == 1:
                    G_computed = G_computed.reshape(-1, self.n_constraints)
                out["G"] = G_computed

    # ------------------------------------------------------------------
    # Solution-level capability
    # ------------------------------------------------------------------

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        return resolve_bounds(self)

    def create_solution(self, rng: np.random.Generator) -> Solution:
        """Uniform random solution inside the variable bounds (not evaluated)."""
        xl, xu = self.bounds()
        return Solution(variables=rng.uniform(xl, xu), objectives=np.full(self.n_obj, np.nan))

    def evaluate_solution(self, solution: Solution) -> None:
        evaluate_solutions(self, [solution])

    def evaluate_constraints(self, solution: Solution) -> None:
        """Constraints are computed together with the objectives in :meth:`evaluate_solution`."""
        if self.n_constraints <= 0:
            solution.constraints = None
            solution.constraint_violation = 0.0
            return
        G = self.constraints(solution.variables.reshape(1, -1))
        if G is None:
            return
        G = np.asarray(G, dtype=float).reshape(1, -1)
        solution.constraints = G[0].copy()
        solution.constraint_violation = float(compute_violation(G)[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_var={self.n_var}, n_obj={self.n_obj})"


def resolve_bounds(problem) -> tuple[np.ndarray, np.ndarray]:
    xl = np.asarray(problem.xl, dtype=float)
    xu = np.asarray(problem.xu, dtype=float)
    n_var = int(problem.n_var)
    if xl.ndim == 0:
        xl = np.full(n_var, float(xl))
    if xu.ndim == 0:
        xu = np.full(n_var, float(xu))
    return np.ascontiguousarray(xl), np.ascontiguousarray(xu)


def create_solution(problem, rng: np.random.Generator) -> Solution:
    """Create a random solution for any problem, using its own factory when it has one."""
    factory = getattr(problem, "create_solution", None)
    if callable(factory):
        return factory(rng)
    xl, xu = resolve_bounds(problem)
    return Solution(variables=rng.uniform(xl, xu), objectives=np.full(problem.n_obj, np.nan))


def evaluate_arrays(problem, X: np.ndarray) -> tuple[np.ndarray, np.ndarray | None]:
    """Evaluate a batch through the problem's ``evaluate(X, out)`` protocol."""
    out = {"F": np.empty((X.shape[0], problem.n_obj))}
    n_constr = getattr(problem, "n_constr", 0)
    if n_constr and n_constr > 0:
        out["G"] = np.empty((X.shape[0], n_constr))
    problem.evaluate(X, out)
    return out["F"], out.get("G")


def evaluate_solutions(problem, solutions: list[Solution]) -> None:
    """Evaluate solutions in place: objectives, raw constraints and aggregated violation."""
    if not solutions:
        return
    X = np.vstack([s.variables for s in solutions])
    F, G = evaluate_arrays(problem, X)
    write_evaluation(solutions, F, G)


def write_evaluation(solutions: list[Solution], F: np.ndarray, G: np.ndarray | None) -> None:
    """Copy batch results back into the solutions they were computed for."""
    cv = compute_violation(G, n=len(solutions))
    for i, sol in enumerate(solutions):
        sol.objectives = np.array(F[i], dtype=float)
        sol.constraints = None if G is None else np.array(G[i], dtype=float)
        sol.constraint_violation = float(cv[i])


__all__ = [
    "Problem",
    "create_solution",
    "evaluate_arrays",
    "evaluate_solutions",
    "resolve_bounds",
    "write_evaluation",
]

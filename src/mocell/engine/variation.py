"""
Solution-level variation operators and the operator registry.

Crossover: ``crossover(parents, rng) -> [child0, child1]`` (new Solutions).
Mutation:  ``mutation(solution, rng) -> None`` (in place).
Selection: ``selection(solutions, rng) -> Solution``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from mocell.exceptions import ConfigurationError, InvalidOperatorError, OperatorArityError
from mocell.foundation.solution import Solution
from mocell.operators.real import PolynomialMutationKernel, SBXKernel

from .selection import BinaryTournament, RandomSelection


def _offspring_from(parent: Solution, variables: np.ndarray) -> Solution:
    return Solution(variables=variables, objectives=np.full(parent.number_of_objectives, np.nan))


class SBXCrossover:
    def __init__(self, lower, upper, prob: float = 0.9, eta: float = 20.0) -> None:
        self.kernel = SBXKernel(prob_crossover=prob, eta=eta, lower=lower, upper=upper)

    def __call__(self, parents: Sequence[Solution], rng: np.random.Generator) -> list[Solution]:
        if len(parents) != 2:
            raise OperatorArityError("sbx", 2, len(parents))
        p0, p1 = parents
        c0, c1 = self.kernel(p0.variables, p1.variables, rng)
        return [_offspring_from(p0, c0), _offspring_from(p1, c1)]


class PolynomialMutation:
    def __init__(self, lower, upper, prob: float, eta: float = 20.0) -> None:
        self.kernel = PolynomialMutationKernel(prob_mutation=prob, eta=eta, lower=lower, upper=upper)

    def __call__(self, solution: Solution, rng: np.random.Generator) -> None:
        self.kernel(solution.variables, rng)


def resolve_prob(value: Any, n_var: int) -> float:
    """Accept plain numbers or the expressions ``"1/n"`` / ``"k/n"``."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text.endswith("/n"):
            numerator = text[:-2].strip() or "1"
            return min(1.0, float(numerator) / max(1, n_var))
        return float(text)
    return float(value)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_CROSSOVERS: dict[str, Callable[..., Any]] = {
    "sbx": lambda xl, xu, n_var, prob=0.9, eta=20.0: SBXCrossover(xl, xu, prob=resolve_prob(prob, n_var), eta=float(eta)),
}
_MUTATIONS: dict[str, Callable[..., Any]] = {
    "pm": lambda xl, xu, n_var, prob="1/n", eta=20.0: PolynomialMutation(
        xl, xu, prob=resolve_prob(prob, n_var), eta=float(eta)
    ),
}
_SELECTIONS: dict[str, Callable[..., Any]] = {
    "binary_tournament": lambda: BinaryTournament(),
    "tournament": lambda: BinaryTournament(),
    "random": lambda: RandomSelection(),
}
_MUTATIONS["polynomial"] = _MUTATIONS["pm"]


def _lookup(table: dict[str, Callable[..., Any]], kind: str, name: str) -> Callable[..., Any]:
    key = name.strip().lower()
    if key not in table:
        raise InvalidOperatorError(kind, name, sorted(table))
    return table[key]


def _build(table, kind: str, method: str, params: dict[str, Any], *args: Any):
    factory = _lookup(table, kind, method)
    try:
        return factory(*args, **params)
    except TypeError as exc:
        raise InvalidOperatorError(kind, f"{method}({', '.join(sorted(params))})", sorted(table)) from exc
    except ValueError as exc:
        raise ConfigurationError(f"Invalid parameters for {kind} operator '{method}': {exc}", details=params) from exc


def make_crossover(method: str, params: dict[str, Any], xl: np.ndarray, xu: np.ndarray):
    return _build(_CROSSOVERS, "crossover", method, params, xl, xu, int(xl.shape[0]))


def make_mutation(method: str, params: dict[str, Any], xl: np.ndarray, xu: np.ndarray):
    return _build(_MUTATIONS, "mutation", method, params, xl, xu, int(xl.shape[0]))


def make_selection(method: str, params: dict[str, Any] | None = None):
    return _build(_SELECTIONS, "selection", method, dict(params or {}))


def available_operators() -> dict[str, list[str]]:
    return {
        "crossover": sorted(_CROSSOVERS),
        "mutation": sorted(_MUTATIONS),
        "selection": sorted(_SELECTIONS),
    }


__all__ = [
    "PolynomialMutation",
    "SBXCrossover",
    "available_operators",
    "make_crossover",
    "make_mutation",
    "make_selection",
    "resolve_prob",
]

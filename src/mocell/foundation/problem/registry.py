"""
Problem registry: metadata and factories for the bundled benchmarks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mocell.exceptions import ConfigurationError, InvalidProblemError

from .classic import ConstrExProblem, KursaweProblem, SchafferProblem
from .wfg import WFG4Problem
from .zdt import ZDT1Problem, ZDT2Problem


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a benchmark problem."""

    key: str
    label: str
    factory: Callable[..., Any]
    default_n_var: int
    n_obj: int
    description: str = ""
    constrained: bool = False


_SPECS: dict[str, ProblemSpec] = {
    "schaffer": ProblemSpec(
        key="schaffer",
        label="Schaffer",
        factory=lambda **kw: SchafferProblem(**kw),
        default_n_var=1,
        n_obj=2,
        description="Single-variable problem with a convex front between x=0 and x=2.",
    ),
    "kursawe": ProblemSpec(
        key="kursawe",
        label="Kursawe",
        factory=lambda n_var=3, **kw: KursaweProblem(n_var=n_var, **kw),
        default_n_var=3,
        n_obj=2,
        description="Disconnected, non-convex front.",
    ),
    "constrex": ProblemSpec(
        key="constrex",
        label="ConstrEx",
        factory=lambda **kw: ConstrExProblem(**kw),
        default_n_var=2,
        n_obj=2,
        description="Two inequality constraints cut the unconstrained front.",
        constrained=True,
    ),
    "zdt1": ProblemSpec(
        key="zdt1",
        label="ZDT1",
        factory=lambda n_var=30, **kw: ZDT1Problem(n_var=n_var, **kw),
        default_n_var=30,
        n_obj=2,
        description="Classic bi-objective benchmark with a convex Pareto front.",
    ),
    "zdt2": ProblemSpec(
        key="zdt2",
        label="ZDT2",
        factory=lambda n_var=30, **kw: ZDT2Problem(n_var=n_var, **kw),
        default_n_var=30,
        n_obj=2,
        description="ZDT variant with a concave Pareto front.",
    ),
    "wfg4": ProblemSpec(
        key="wfg4",
        label="WFG4",
        factory=lambda **kw: WFG4Problem(**kw),
        default_n_var=6,
        n_obj=2,
        description="Multi-modal WFG problem with a concave front; takes k, l and n_obj.",
    ),
}


def available_problem_names() -> list[str]:
    return sorted(_SPECS)


def get_problem_spec(name: str) -> ProblemSpec:
    key = (name or "").strip().lower()
    try:
        return _SPECS[key]
    except KeyError:
        raise InvalidProblemError(name, available_problem_names()) from None


def make_problem(name: str, **overrides: Any):
    """Instantiate a registered problem; ``overrides`` are passed to its constructor."""
    spec = get_problem_spec(name)
    params = {k: v for k, v in overrides.items() if v is not None}
    try:
        return spec.factory(**params)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Invalid parameters for problem '{spec.label}': {exc}",
            suggestion=spec.description or None,
            details={"problem": spec.key, "overrides": params},
        ) from exc


__all__ = ["ProblemSpec", "available_problem_names", "get_problem_spec", "make_problem"]

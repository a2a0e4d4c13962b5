from .base import Problem, create_solution, evaluate_arrays, evaluate_solutions, resolve_bounds
from .classic import ConstrExProblem, KursaweProblem, SchafferProblem
from .registry import ProblemSpec, available_problem_names, get_problem_spec, make_problem
from .wfg import WFG4Problem
from .zdt import ZDT1Problem, ZDT2Problem

__all__ = [
    "ConstrExProblem",
    "KursaweProblem",
    "Problem",
    "ProblemSpec",
    "SchafferProblem",
    "WFG4Problem",
    "ZDT1Problem",
    "ZDT2Problem",
    "available_problem_names",
    "create_solution",
    "evaluate_arrays",
    "evaluate_solutions",
    "get_problem_spec",
    "make_problem",
    "resolve_bounds",
]

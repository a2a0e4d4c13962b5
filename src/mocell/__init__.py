from .engine import (
    CrowdingArchive,
    MOCell,
    MOCellConfig,
    MOCellConfigData,
    MOCellResult,
    Neighborhood,
    PopulationGrid,
)
from .exceptions import (
    ConfigurationError,
    EvaluationError,
    MOCellError,
    OperatorArityError,
)
from .experiment import run_experiment
from .foundation import DominanceComparator, Ranking, Solution
from .foundation.problem import Problem, available_problem_names, make_problem
from .logging import configure_mocell_logging

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CrowdingArchive",
    "DominanceComparator",
    "EvaluationError",
    "MOCell",
    "MOCellConfig",
    "MOCellConfigData",
    "MOCellError",
    "MOCellResult",
    "Neighborhood",
    "OperatorArityError",
    "PopulationGrid",
    "Problem",
    "Ranking",
    "Solution",
    "available_problem_names",
    "configure_mocell_logging",
    "make_problem",
    "run_experiment",
]

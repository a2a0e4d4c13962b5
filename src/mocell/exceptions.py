"""
MOCell exception hierarchy.

Every error raised by the engine, its collaborators and the experiment layer
derives from MOCellError, so callers can catch the whole family at once.
All of them are fatal to a run: the engine never retries and never keeps
going with a partially updated grid or archive.

Example:
    try:
        result = run_experiment("zdt1", config)
    except MOCellError as e:
        print(f"Run failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOCellError(Exception):
    """
    Base exception for all MOCell errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MOCellError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown operator is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} operator '{operator_name}'."
        suggestion = f"Available {operator_type} operators: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(MOCellError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown problem is specified."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Available problems: {', '.join(available)}"
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MOCellError):
    """Raised when a run fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when the problem fails to evaluate a solution."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your problem's evaluate() function for errors"
        super().__init__(message, suggestion, {"solution": solution})


class OperatorArityError(OptimizationError):
    """Raised when a variation or selection operator returns the wrong number of solutions."""

    def __init__(self, operator: str, expected: int | str, received: int | str) -> None:
        message = f"Operator '{operator}' returned {received} solution(s), expected {expected}."
        suggestion = "Crossover must return exactly two children; selection must return a single solution"
        super().__init__(message, suggestion, {"operator": operator, "expected": expected, "received": received})


__all__ = [
    "MOCellError",
    "ConfigurationError",
    "InvalidOperatorError",
    "MissingConfigError",
    "ProblemError",
    "InvalidProblemError",
    "OptimizationError",
    "EvaluationError",
    "OperatorArityError",
]

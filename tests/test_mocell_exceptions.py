"""Tests for the MOCell exception hierarchy."""

from __future__ import annotations

import pytest

from mocell.exceptions import (
    ConfigurationError,
    EvaluationError,
    InvalidOperatorError,
    InvalidProblemError,
    MissingConfigError,
    MOCellError,
    OperatorArityError,
    OptimizationError,
    ProblemError,
)


class TestMOCellError:
    def test_basic_error(self):
        err = MOCellError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        err = MOCellError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)

    def test_error_with_details(self):
        err = MOCellError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestSpecificErrors:
    def test_invalid_operator_lists_available(self):
        err = InvalidOperatorError("crossover", "blx", available=["sbx"])
        assert "blx" in str(err)
        assert "sbx" in str(err)
        assert err.details["operator_type"] == "crossover"

    def test_missing_config_mentions_default(self):
        err = MissingConfigError("pop_size", "MOCellConfig")
        assert "pop_size" in str(err)
        assert "MOCellConfig.default()" in str(err)

    def test_invalid_problem(self):
        err = InvalidProblemError("foo", available=["zdt1"])
        assert "zdt1" in str(err)

    def test_operator_arity(self):
        err = OperatorArityError("sbx", 2, 3)
        assert err.details == {"operator": "sbx", "expected": 2, "received": 3}
        assert "expected 2" in str(err)

    def test_evaluation_error_keeps_solution(self):
        err = EvaluationError("boom", solution=[1.0])
        assert err.details["solution"] == [1.0]


@pytest.mark.parametrize(
    "exc_cls, parent",
    [
        (ConfigurationError, MOCellError),
        (InvalidOperatorError, ConfigurationError),
        (MissingConfigError, ConfigurationError),
        (ProblemError, MOCellError),
        (InvalidProblemError, ProblemError),
        (OptimizationError, MOCellError),
        (EvaluationError, OptimizationError),
        (OperatorArityError, OptimizationError),
    ],
)
def test_hierarchy(exc_cls, parent):
    assert issubclass(exc_cls, parent)

from __future__ import annotations

import pytest

from mocell.engine.replacement import worst_by_crowding
from mocell.engine.termination import StoppingCondition
from mocell.exceptions import ConfigurationError
from mocell.foundation.solution import Solution


def test_evaluation_budget() -> None:
    stop = StoppingCondition(max_evaluations=100)
    assert not stop(99, 50)
    assert stop(100, 0)


def test_generation_budget_and_combination() -> None:
    stop = StoppingCondition(max_evaluations=1000, max_generations=3)
    assert not stop(10, 2)
    assert stop(10, 3)
    assert stop(1000, 0)
    assert StoppingCondition(max_generations=0)(0, 0)


@pytest.mark.parametrize("kwargs", [{}, {"max_evaluations": 0}, {"max_generations": -1}])
def test_invalid_budgets(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        StoppingCondition(**kwargs)


def _ranked(rank: int, crowding: float) -> Solution:
    s = Solution(variables=[0.0], objectives=[0.0, 0.0])
    s.rank = rank
    s.crowding_distance = crowding
    return s


def test_worst_by_crowding_prefers_last_front_then_smallest_distance() -> None:
    a, b, c, d = _ranked(0, 0.1), _ranked(1, 5.0), _ranked(1, 0.5), _ranked(0, float("inf"))
    assert worst_by_crowding([a, b, c, d]) is c


def test_worst_by_crowding_first_seen_wins_ties() -> None:
    a, b = _ranked(1, 0.5), _ranked(1, 0.5)
    assert worst_by_crowding([a, b]) is a

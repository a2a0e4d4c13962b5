from __future__ import annotations

import numpy as np

from mocell.foundation.dominance import dominance_compare
from mocell.foundation.ranking import Ranking, fast_non_dominated_sort
from mocell.foundation.solution import Solution


def test_fast_non_dominated_sort_layers() -> None:
    F = np.array(
        [
            [1.0, 4.0],
            [2.0, 2.0],
            [4.0, 1.0],
            [3.0, 3.0],
            [5.0, 5.0],
        ]
    )
    fronts, rank = fast_non_dominated_sort(F)
    assert [sorted(f) for f in fronts] == [[0, 1, 2], [3], [4]]
    np.testing.assert_array_equal(rank, [0, 0, 0, 1, 2])


def test_fast_non_dominated_sort_empty() -> None:
    fronts, rank = fast_non_dominated_sort(np.empty((0, 2)))
    assert fronts == []
    assert rank.size == 0


def test_infeasible_solutions_rank_after_feasible_ones() -> None:
    F = np.array([[0.0, 0.0], [5.0, 5.0], [1.0, 1.0]])
    cv = np.array([2.0, 0.0, 1.0])
    fronts, _ = fast_non_dominated_sort(F, cv)
    assert fronts == [[1], [2], [0]]


def test_ranking_front_properties_on_random_set() -> None:
    rng = np.random.default_rng(7)
    sols = [
        Solution(variables=[0.0], objectives=rng.random(2), constraint_violation=float(rng.choice([0.0, 0.0, 0.3])))
        for _ in range(40)
    ]
    ranking = Ranking(sols)
    assert sum(len(front) for front in ranking) == len(sols)

    for i in range(ranking.number_of_subfronts):
        front = ranking.subfront(i)
        for a in front:
            assert a.rank == i
            for b in front:
                assert dominance_compare(a, b) == 0
            if i > 0:
                better = [s for j in range(i) for s in ranking.subfront(j)]
                assert any(dominance_compare(s, a) == -1 for s in better)


def test_ranking_of_empty_collection() -> None:
    ranking = Ranking([])
    assert ranking.number_of_subfronts == 0
    assert len(ranking) == 0

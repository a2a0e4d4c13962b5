from __future__ import annotations

import numpy as np

from mocell.foundation.constraints import compute_violation, is_feasible
from mocell.foundation.solution import UNPLACED, Solution, solutions_to_arrays


def test_new_solution_is_unplaced_and_feasible() -> None:
    s = Solution(variables=[1, 2], objectives=[3, 4])
    assert s.location == UNPLACED == -1
    assert s.is_feasible
    assert s.number_of_variables == 2
    assert s.number_of_objectives == 2
    assert s.variables.dtype == float


def test_copy_is_deep_and_keeps_location() -> None:
    s = Solution(variables=[1.0], objectives=[2.0, 3.0], constraints=[0.5], constraint_violation=0.5, location=4)
    s.attributes["tag"] = "a"
    c = s.copy()
    assert c is not s
    assert c.location == 4
    c.variables[0] = 9.0
    c.objectives[0] = 9.0
    c.constraints[0] = 9.0
    c.attributes["tag"] = "b"
    assert s.variables[0] == 1.0
    assert s.objectives[0] == 2.0
    assert s.constraints[0] == 0.5
    assert s.attributes["tag"] == "a"


def test_empty_solution_has_nan_objectives() -> None:
    s = Solution.empty(3, 2)
    assert s.variables.shape == (3,)
    assert np.all(np.isnan(s.objectives))


def test_solutions_to_arrays_stacks_rows() -> None:
    sols = [Solution(variables=[i, i], objectives=[i, -i], constraint_violation=i) for i in range(3)]
    X, F, cv = solutions_to_arrays(sols)
    assert X.shape == (3, 2) and F.shape == (3, 2)
    np.testing.assert_array_equal(cv, [0.0, 1.0, 2.0])
    X, F, cv = solutions_to_arrays([])
    assert X.size == 0 and F.size == 0 and cv.size == 0


def test_compute_violation_sums_positive_parts() -> None:
    G = np.array([[-1.0, 2.0], [0.5, 0.5], [-3.0, 0.0]])
    cv = compute_violation(G)
    np.testing.assert_allclose(cv, [2.0, 1.0, 0.0])
    np.testing.assert_array_equal(is_feasible(cv), [False, False, True])
    np.testing.assert_array_equal(compute_violation(None, n=2), [0.0, 0.0])

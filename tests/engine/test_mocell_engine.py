from __future__ import annotations

import numpy as np
import pytest

from mocell.engine import MOCell, MOCellConfig, Neighborhood
from mocell.exceptions import ConfigurationError, EvaluationError, OperatorArityError
from mocell.foundation.dominance import dominance_compare
from mocell.foundation.eval import SerialEvaluator
from mocell.foundation.problem import Problem, SchafferProblem, ZDT1Problem
from mocell.foundation.solution import UNPLACED, Solution


class ParabolaProblem(Problem):
    """Both objectives minimized at x = 0, so the optimal front is a single point."""

    name = "parabola"

    def __init__(self) -> None:
        self.n_var = 1
        self.n_obj = 2
        self.xl = np.array([-5.0])
        self.xu = np.array([5.0])

    def objectives(self, X):
        f = X[:, 0] ** 2
        return np.column_stack([f, f + 1.0])


class ConstantStartProblem(Problem):
    """Every random solution starts at x = 10; objectives are (x, x)."""

    name = "constant-start"

    def __init__(self) -> None:
        self.n_var = 1
        self.n_obj = 2
        self.xl = np.array([0.0])
        self.xu = np.array([2000.0])

    def create_solution(self, rng):
        return Solution(variables=[10.0], objectives=[np.nan, np.nan])

    def objectives(self, X):
        if np.any(X[:, 0] > 100.0):
            raise FloatingPointError("x out of the model's validity range")
        return np.column_stack([X[:, 0], X[:, 0]])


class RecordingSelection:
    """Picks the first candidate and remembers every candidate set it saw."""

    def __init__(self) -> None:
        self.calls: list[list[tuple[int, float]]] = []

    def __call__(self, solutions, rng):
        self.calls.append([(s.location, float(s.variables[0])) for s in solutions])
        return solutions[0]


def copy_crossover(parents, rng):
    return [Solution(variables=p.variables.copy(), objectives=np.full(2, np.nan)) for p in parents]


class SetOnceMutation:
    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def __call__(self, solution, rng):
        if self.calls == 0:
            solution.variables[0] = self.value
        self.calls += 1


def noop_mutation(solution, rng):
    return None


class RecordingObserver:
    def __init__(self) -> None:
        self.started = False
        self.generations: list[tuple[int, int, int]] = []
        self.ended: tuple[int, int] | None = None

    def on_start(self, *, problem, config):
        self.started = True

    def on_generation(self, generation, *, evaluations, archive_size):
        self.generations.append((generation, evaluations, archive_size))

    def on_end(self, *, evaluations, generations):
        self.ended = (evaluations, generations)


class ClosingEvaluator(SerialEvaluator):
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


def _small_config(**overrides):
    cfg = MOCellConfig().pop_size(9).archive_size(5).max_generations(overrides.pop("max_generations", 1))
    if "max_evaluations" in overrides:
        cfg = cfg.max_evaluations(overrides.pop("max_evaluations"))
    return cfg.fixed()


@pytest.mark.smoke
def test_small_grid_converges_and_respects_archive_bound() -> None:
    observer = RecordingObserver()
    engine = MOCell(_small_config(max_generations=100), ParabolaProblem(), observer=observer)
    result = engine.run(seed=1)

    assert observer.started
    assert len(observer.generations) == 100
    assert all(size <= 5 for _, _, size in observer.generations)
    assert observer.ended == (9 + 100 * 9, 100)
    assert result.n_eval == 909
    assert result.n_gen == 100

    # Non-conflicting objectives: only the best point found can remain non-dominated.
    assert len(result) == 1
    assert result.F[0, 0] < 0.1
    assert result.F.shape == (1, 2)
    assert len(result.population) == 9


@pytest.mark.smoke
def test_conflicting_objectives_fill_archive_with_non_dominated_front() -> None:
    cfg = MOCellConfig().pop_size(9).archive_size(5).max_evaluations(2000).fixed()
    result = MOCell(cfg, SchafferProblem(bound=10.0)).run(seed=3)

    assert 1 <= len(result) <= 5
    for a in result.solutions:
        for b in result.solutions:
            if a is not b:
                assert dominance_compare(a, b) == 0
    assert np.all(result.X >= -1.0) and np.all(result.X <= 3.0)
    # Checked between sweeps only, so the last sweep may overshoot by up to pop_size - 1.
    assert 2000 <= result.n_eval < 2000 + 9


def test_replacement_is_visible_to_later_cells_in_the_same_sweep() -> None:
    selection = RecordingSelection()
    engine = MOCell(
        _small_config(),
        ConstantStartProblem(),
        selection=selection,
        crossover=copy_crossover,
        mutation=SetOnceMutation(0.0),
    )
    engine.initialize(seed=0)

    assert engine.update_cell(0) == 1
    assert engine.grid.get(0).variables[0] == 0.0
    assert engine.archive.size() == 1

    engine.update_cell(1)
    # calls[0], calls[1]: cell 0 (archive still empty); calls[2]: neighbor set of cell 1.
    neighbor_set = selection.calls[2]
    assert (0, 0.0) in neighbor_set
    assert (1, 10.0) == neighbor_set[-1]
    # parent1 of cell 1 comes from the archive, which now holds the improved solution.
    assert selection.calls[3] == [(0, 0.0)]


def test_non_dominated_offspring_replaces_most_crowded_placed_neighbor() -> None:
    engine = MOCell(
        _small_config(),
        ConstantStartProblem(),
        selection=RecordingSelection(),
        crossover=copy_crossover,
        mutation=noop_mutation,
    )
    engine.initialize(seed=0)
    before = [engine.grid.get(i) for i in range(9)]

    assert engine.update_cell(4) == 0

    # Neighbors of 4 are [1, 7, 5, 3, 0, 2, 6, 8]; all objectives tie, so the first
    # and last candidates keep infinite crowding and cell 7 is the first worst one.
    replaced = [i for i in range(9) if engine.grid.get(i) is not before[i]]
    assert replaced == [7]
    assert engine.grid.get(7).location == 7
    assert engine.archive.size() == 1


def test_unplaced_worst_only_updates_archive() -> None:
    engine = MOCell(
        _small_config(),
        ConstantStartProblem(),
        selection=RecordingSelection(),
        crossover=copy_crossover,
        mutation=noop_mutation,
        replacement=lambda candidates: candidates[-1],
    )
    engine.initialize(seed=0)
    before = [engine.grid.get(i) for i in range(9)]

    assert engine.update_cell(2) == 0
    assert all(engine.grid.get(i) is before[i] for i in range(9))
    assert engine.archive.size() == 1
    assert engine.archive.get(0).location == UNPLACED


def test_resident_dominating_offspring_changes_nothing() -> None:
    engine = MOCell(
        _small_config(),
        ConstantStartProblem(),
        selection=RecordingSelection(),
        crossover=copy_crossover,
        mutation=SetOnceMutation(50.0),
    )
    engine.initialize(seed=0)
    before = [engine.grid.get(i) for i in range(9)]

    assert engine.update_cell(0) == -1
    assert all(engine.grid.get(i) is before[i] for i in range(9))
    assert engine.archive.size() == 0
    assert engine.evaluations == 10


def test_crossover_arity_is_enforced() -> None:
    def single_child(parents, rng):
        return copy_crossover(parents, rng)[:1]

    engine = MOCell(_small_config(), ZDT1Problem(n_var=3), crossover=single_child)
    engine.initialize(seed=0)
    with pytest.raises(OperatorArityError):
        engine.update_cell(0)


def test_selection_must_return_one_solution() -> None:
    engine = MOCell(_small_config(), ZDT1Problem(n_var=3), selection=lambda sols, rng: list(sols[:2]))
    engine.initialize(seed=0)
    with pytest.raises(OperatorArityError):
        engine.update_cell(0)


def test_evaluation_failure_aborts_run_and_closes_evaluator() -> None:
    evaluator = ClosingEvaluator()
    engine = MOCell(
        _small_config(max_generations=3),
        ConstantStartProblem(),
        selection=RecordingSelection(),
        crossover=copy_crossover,
        mutation=SetOnceMutation(1000.0),
        evaluator=evaluator,
    )
    with pytest.raises(EvaluationError) as excinfo:
        engine.run(seed=0)
    assert isinstance(excinfo.value.__cause__, FloatingPointError)
    assert evaluator.closed
    assert engine.generation == 0


def test_initial_population_counts_as_evaluations() -> None:
    engine = MOCell(_small_config(), ZDT1Problem(n_var=3))
    assert engine.should_terminate()
    with pytest.raises(RuntimeError):
        engine.update_cell(0)

    engine.initialize(seed=0)
    assert engine.evaluations == 9
    assert engine.generation == 0
    assert engine.archive.size() == 0
    assert engine.grid.is_full()
    assert [engine.grid.get(i).location for i in range(9)] == list(range(9))

    engine.step()
    assert engine.evaluations == 18
    assert engine.generation == 1
    assert engine.should_terminate()


def test_same_seed_gives_same_front() -> None:
    cfg = MOCellConfig().pop_size(16).archive_size(10).max_evaluations(16 * 15).fixed()
    a = MOCell(cfg, ZDT1Problem(n_var=5)).run(seed=7)
    b = MOCell(cfg, ZDT1Problem(n_var=5)).run(seed=7)
    np.testing.assert_array_equal(a.F, b.F)
    np.testing.assert_array_equal(a.X, b.X)


def test_rerun_starts_from_an_empty_archive() -> None:
    cfg = MOCellConfig().pop_size(9).archive_size(5).max_generations(5).fixed()
    engine = MOCell(cfg, ZDT1Problem(n_var=3))
    first = engine.run(seed=11)
    second = engine.run(seed=11)
    np.testing.assert_array_equal(first.F, second.F)
    assert second.n_eval == first.n_eval


def test_builder_is_accepted_and_neighborhood_must_match() -> None:
    engine = MOCell(MOCellConfig().pop_size(16).archive_size(4).max_generations(1), ZDT1Problem(n_var=3))
    assert engine.config.pop_size == 16
    assert engine.neighborhood.shape == (4, 4)

    with pytest.raises(ConfigurationError):
        MOCell(_small_config(), ZDT1Problem(n_var=3), neighborhood=Neighborhood(16))
    with pytest.raises(ConfigurationError):
        MOCell(MOCellConfig().pop_size(10).archive_size(4).max_generations(1), ZDT1Problem(n_var=3))


def test_result_to_dict() -> None:
    result = MOCell(_small_config(max_generations=2), ZDT1Problem(n_var=3)).run(seed=0)
    payload = result.to_dict()
    assert payload["evaluations"] == 27
    assert payload["generations"] == 2
    assert payload["F"].shape[0] == len(result)
    assert payload["population"]["X"].shape == (9, 3)


def test_only_the_initial_population_is_evaluated_as_a_batch() -> None:
    class BatchRecordingEvaluator(SerialEvaluator):
        def __init__(self) -> None:
            self.batches: list[int] = []

        def evaluate(self, solutions, problem) -> None:
            self.batches.append(len(solutions))
            super().evaluate(solutions, problem)

    evaluator = BatchRecordingEvaluator()
    MOCell(_small_config(max_generations=2), ZDT1Problem(n_var=3), evaluator=evaluator).run(seed=0)
    assert evaluator.batches == [9] + [1] * 18

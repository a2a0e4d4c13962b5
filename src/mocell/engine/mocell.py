"""MOCell: asynchronous cellular multi-objective genetic algorithm (aMOCell4 variant).

The population lives on a toroidal grid. Cells are visited in ascending
index order and each one is updated in place, so a cell processed later in
the same sweep already sees the replacements made earlier in it. Every
accepted offspring is also offered to a bounded external archive, which is
the result of the run.

Per-cell update:
    1. copy the resident and collect copies of its neighbors (+ the resident);
    2. parent0 from the neighbor set, parent1 from the archive (or the
       neighbor set while the archive is empty);
    3. crossover, mutate the first child, evaluate it;
    4. offspring dominates the resident: replace the cell and archive it;
       mutually non-dominated: rank the neighbor set plus the offspring,
       replace the worst placed member (if any) and archive the offspring;
       resident dominates: nothing changes.

Reference:
    Nebro, A.J., Durillo, J.J., Luna, F., Dorronsoro, B. and Alba, E. (2009).
    MOCell: A cellular genetic algorithm for multiobjective optimization.
    International Journal of Intelligent Systems 24(7), pp. 726-746.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from mocell.exceptions import ConfigurationError, OperatorArityError
from mocell.foundation.density import assign_crowding_distance
from mocell.foundation.problem.base import create_solution
from mocell.foundation.ranking import Ranking
from mocell.foundation.solution import UNPLACED, Solution

from .config import MOCellConfig, MOCellConfigData
from .factory import build_components
from .population import PopulationGrid
from .result import MOCellResult

_logger = logging.getLogger(__name__)


def _operator_name(op: Any) -> str:
    return getattr(op, "__name__", type(op).__name__)


class MOCell:
    """
    Asynchronous cellular MOEA.

    Parameters
    ----------
    config : MOCellConfigData | MOCellConfig
        Run configuration; a builder is frozen on construction.
    problem
        Problem exposing ``n_var``, ``n_obj``, bounds and ``evaluate(X, out)``.
    selection, crossover, mutation
        Operators following ``selection(solutions, rng) -> Solution``,
        ``crossover(parents, rng) -> [child0, child1]`` and
        ``mutation(solution, rng) -> None``. Built from ``config`` when omitted.
    archive, neighborhood, evaluator, replacement, comparator, stopping, observer
        Optional overrides of the remaining collaborators.
    """

    def __init__(
        self,
        config: MOCellConfigData | MOCellConfig,
        problem: Any,
        *,
        selection=None,
        crossover=None,
        mutation=None,
        archive=None,
        neighborhood=None,
        evaluator=None,
        replacement=None,
        comparator=None,
        stopping=None,
        observer=None,
    ) -> None:
        if isinstance(config, MOCellConfig):
            config = config.fixed()
        self.config = config
        self.problem = problem
        components = build_components(
            config,
            problem,
            selection=selection,
            crossover=crossover,
            mutation=mutation,
            archive=archive,
            neighborhood=neighborhood,
            evaluator=evaluator,
            replacement=replacement,
            comparator=comparator,
            stopping=stopping,
            observer=observer,
        )
        self.selection = components.selection
        self.crossover = components.crossover
        self.mutation = components.mutation
        self.archive = components.archive
        self.neighborhood = components.neighborhood
        self.evaluator = components.evaluator
        self.replacement = components.replacement
        self.comparator = components.comparator
        self.stopping = components.stopping
        self.observer = components.observer

        if self.neighborhood.population_size != config.pop_size:
            raise ConfigurationError(
                f"Neighborhood covers {self.neighborhood.population_size} cells, pop_size is {config.pop_size}."
            )

        self.grid: PopulationGrid | None = None
        self.rng: np.random.Generator | None = None
        self.evaluations = 0
        self.generation = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, seed: int | None = None) -> None:
        """Fill the grid with random evaluated solutions and empty the archive."""
        self.rng = np.random.default_rng(seed)
        self.evaluations = 0
        self.generation = 0
        self.archive.clear()

        population = [create_solution(self.problem, self.rng) for _ in range(self.config.pop_size)]
        self._evaluate(population)
        grid = PopulationGrid(self.config.pop_size)
        for index, solution in enumerate(population):
            grid.replace(index, solution)
        self.grid = grid

        _logger.debug(
            "MOCell initialized: %d cells on a %dx%d %s grid, archive capacity %d",
            self.config.pop_size,
            self.neighborhood.rows,
            self.neighborhood.cols,
            self.neighborhood.kind,
            self.archive.capacity,
        )
        self.observer.on_start(problem=self.problem, config=self.config)

    def update_cell(self, index: int) -> int:
        """Run one asynchronous update of grid cell ``index``.

        Returns the dominance flag of resident vs offspring: 1 when the
        offspring won, 0 when they are mutually non-dominated, -1 when the
        resident won.
        """
        grid = self._require_grid()
        rng = self.rng
        archive = self.archive

        individual = grid.get(index).copy()
        neighbors = self.neighborhood.neighbors(grid, index)
        neighbors.append(individual)

        parent0 = self._select(neighbors)
        parent1 = self._select(archive.solutions if archive.size() > 0 else neighbors)
        offspring = self._crossover([parent0, parent1])[0]
        self.mutation(offspring, rng)
        self._evaluate([offspring])

        flag = self.comparator(individual, offspring)
        if flag == 1:
            grid.replace(index, offspring)
            archive.add(offspring)
        elif flag == 0:
            offspring.location = UNPLACED
            neighbors.append(offspring)
            for front in Ranking(neighbors):
                assign_crowding_distance(front)
            worst = self.replacement(neighbors)
            if worst.location != UNPLACED:
                grid.replace(worst.location, offspring)
            archive.add(offspring)
        return flag

    def step(self) -> None:
        """One sweep over every cell in ascending index order."""
        grid = self._require_grid()
        for index in range(grid.size()):
            self.update_cell(index)
        self.generation += 1
        _logger.debug(
            "Generation %d: %d evaluations, archive size %d",
            self.generation,
            self.evaluations,
            self.archive.size(),
        )
        self.observer.on_generation(self.generation, evaluations=self.evaluations, archive_size=self.archive.size())

    def should_terminate(self) -> bool:
        if self.grid is None:
            return True
        return bool(self.stopping(self.evaluations, self.generation))

    def run(self, seed: int | None = None) -> MOCellResult:
        self.initialize(seed)
        try:
            while not self.should_terminate():
                self.step()
        finally:
            self.evaluator.close()
        self.observer.on_end(evaluations=self.evaluations, generations=self.generation)
        _logger.debug("MOCell finished after %d generations (%d evaluations)", self.generation, self.evaluations)
        return self.result()

    def result(self) -> MOCellResult:
        grid = self._require_grid()
        return MOCellResult(
            solutions=[s.copy() for s in self.archive.solutions],
            n_eval=self.evaluations,
            n_gen=self.generation,
            population=[s.copy() for s in grid.solutions()],
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_grid(self) -> PopulationGrid:
        if self.grid is None:
            raise RuntimeError("MOCell is not initialized. Call run() or initialize() first.")
        return self.grid

    def _evaluate(self, solutions: list[Solution]) -> None:
        self.evaluator.evaluate(solutions, self.problem)
        self.evaluations += len(solutions)

    def _select(self, candidates) -> Solution:
        chosen = self.selection(candidates, self.rng)
        if not isinstance(chosen, Solution):
            received = len(chosen) if isinstance(chosen, (list, tuple)) else type(chosen).__name__
            raise OperatorArityError(_operator_name(self.selection), 1, received)
        return chosen

    def _crossover(self, parents: list[Solution]) -> list[Solution]:
        children = self.crossover(parents, self.rng)
        children = list(children) if isinstance(children, (list, tuple)) else [children]
        if len(children) != 2 or not all(isinstance(c, Solution) for c in children):
            raise OperatorArityError(_operator_name(self.crossover), 2, len(children))
        return children


__all__ = ["MOCell"]

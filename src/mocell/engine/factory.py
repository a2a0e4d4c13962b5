"""
Resolve the collaborators of a MOCell engine from its configuration.

Every component can be overridden by passing an instance; anything left as
``None`` is built from the config and the problem's bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from mocell.foundation.dominance import DominanceComparator
from mocell.foundation.eval import resolve_evaluator
from mocell.foundation.problem.base import resolve_bounds

from .archive import CrowdingArchive
from .config import MOCellConfigData
from .hooks import NoOpObserver
from .neighborhood import Neighborhood
from .replacement import worst_by_crowding
from .termination import StoppingCondition
from .variation import make_crossover, make_mutation, make_selection


@dataclass
class MOCellComponents:
    selection: Callable[..., Any]
    crossover: Callable[..., Any]
    mutation: Callable[..., Any]
    archive: CrowdingArchive
    neighborhood: Neighborhood
    evaluator: Any
    replacement: Callable[..., Any]
    comparator: Callable[..., int]
    stopping: Callable[[int, int], bool]
    observer: Any


def build_components(
    config: MOCellConfigData,
    problem: Any,
    *,
    selection=None,
    crossover=None,
    mutation=None,
    archive: CrowdingArchive | None = None,
    neighborhood: Neighborhood | None = None,
    evaluator=None,
    replacement=None,
    comparator=None,
    stopping=None,
    observer=None,
) -> MOCellComponents:
    xl, xu = resolve_bounds(problem)
    comparator = comparator or DominanceComparator()

    if selection is None:
        method, params = config.selection
        selection = make_selection(method, params)
    if crossover is None:
        method, params = config.crossover
        crossover = make_crossover(method, params, xl, xu)
    if mutation is None:
        method, params = config.mutation
        mutation = make_mutation(method, params, xl, xu)
    if archive is None:
        archive = CrowdingArchive(config.archive_size, allow_duplicates=config.allow_duplicates, comparator=comparator)
    if neighborhood is None:
        neighborhood = Neighborhood(config.pop_size, shape=config.grid_shape, kind=config.neighborhood)
    if evaluator is None:
        evaluator = resolve_evaluator(config.eval_backend, n_workers=config.n_workers)
    if stopping is None:
        stopping = StoppingCondition(config.max_evaluations, config.max_generations)

    return MOCellComponents(
        selection=selection,
        crossover=crossover,
        mutation=mutation,
        archive=archive,
        neighborhood=neighborhood,
        evaluator=evaluator,
        replacement=replacement or worst_by_crowding,
        comparator=comparator,
        stopping=stopping,
        observer=observer or NoOpObserver(),
    )


__all__ = ["MOCellComponents", "build_components"]

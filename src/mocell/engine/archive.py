"""
Bounded external archive of non-dominated solutions.

Unlike a batch archive that re-filters merged populations, this archive is
updated one candidate at a time, which is what the asynchronous cellular
loop produces. Members are always pairwise non-dominated and the size never
exceeds ``capacity`` once ``add`` returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import numpy as np

from mocell.exceptions import ConfigurationError
from mocell.foundation.density import assign_crowding_distance
from mocell.foundation.dominance import DominanceComparator, equal_objectives
from mocell.foundation.ranking import Ranking
from mocell.foundation.solution import Solution, solutions_to_arrays


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class CrowdingArchive:
    """
    Bounded archive with crowding-distance truncation.

    ``add`` policy:
      - reject the candidate if any member dominates it;
      - drop every member the candidate dominates;
      - reject an exact objective-vector duplicate unless ``allow_duplicates``;
      - insert a copy, then while over capacity evict the member with the
        smallest crowding distance in the last front.
    """

    def __init__(
        self,
        capacity: int,
        *,
        allow_duplicates: bool = False,
        comparator: Callable[[Solution, Solution], int] | None = None,
    ) -> None:
        self.capacity = int(capacity)
        if self.capacity <= 0:
            raise ConfigurationError(f"Archive capacity must be positive, got {capacity}.")
        self.allow_duplicates = bool(allow_duplicates)
        self.comparator = comparator or DominanceComparator()
        self._members: list[Solution] = []

    def add(self, solution: Solution) -> bool:
        """Offer a copy of ``solution``; return True if it is a member afterwards."""
        survivors: list[Solution] = []
        for i, member in enumerate(self._members):
            flag = self.comparator(solution, member)
            if flag == 1:
                return False
            if flag == -1:
                continue
            if not self.allow_duplicates and equal_objectives(member, solution):
                # An equal member is non-dominated by every other member, so nothing was dropped.
                return False
            survivors.append(member)

        candidate = solution.copy()
        survivors.append(candidate)
        removed = len(self._members) + 1 - len(survivors)
        self._members = survivors
        if removed:
            _logger().debug("Archive insertion removed %d dominated member(s)", removed)

        while len(self._members) > self.capacity:
            self._evict_most_crowded()
        return any(m is candidate for m in self._members)

    def _evict_most_crowded(self) -> None:
        ranking = Ranking(self._members)
        last_front = ranking.subfront(ranking.number_of_subfronts - 1)
        distances = assign_crowding_distance(last_front)
        worst = last_front[int(np.argmin(distances))]
        self._members = [m for m in self._members if m is not worst]

    def clear(self) -> None:
        self._members = []

    @property
    def solutions(self) -> tuple[Solution, ...]:
        return tuple(self._members)

    def get(self, index: int) -> Solution:
        return self._members[index]

    def contents(self) -> tuple[np.ndarray, np.ndarray]:
        X, F, _ = solutions_to_arrays(self._members)
        return X, F

    def size(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Solution]:
        return iter(list(self._members))


__all__ = ["CrowdingArchive"]

"""
Strategies choosing which member of a ranked neighbor set is the worst.

A strategy receives the neighbor set (neighbors, the resident copy and the
offspring) after ranking and crowding have been assigned, and returns the
member to discard.
"""

from __future__ import annotations

from collections.abc import Sequence

from mocell.foundation.dominance import crowding_compare
from mocell.foundation.solution import Solution


def worst_by_crowding(candidates: Sequence[Solution]) -> Solution:
    """Highest front index, then smallest crowding distance; the first one seen wins ties."""
    worst = candidates[0]
    for candidate in candidates[1:]:
        if crowding_compare(worst, candidate) < 0:
            worst = candidate
    return worst


__all__ = ["worst_by_crowding"]

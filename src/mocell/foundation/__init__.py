"""
Foundation layer: the solution data model, constrained dominance, non-dominated
sorting, crowding distance, problems, evaluation and quality indicators.
"""

from .density import assign_crowding_distance, crowding_distance
from .dominance import (
    DominanceComparator,
    crowding_compare,
    dominance_compare,
    dominance_matrix,
    equal_objectives,
)
from .ranking import Ranking, fast_non_dominated_sort
from .solution import UNPLACED, Solution, solutions_to_arrays

__all__ = [
    "DominanceComparator",
    "Ranking",
    "Solution",
    "UNPLACED",
    "assign_crowding_distance",
    "crowding_compare",
    "crowding_distance",
    "dominance_compare",
    "dominance_matrix",
    "equal_objectives",
    "fast_non_dominated_sort",
    "solutions_to_arrays",
]

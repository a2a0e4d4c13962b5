"""
Cellular engine: grid, neighborhood, archive, operators and the MOCell loop.
"""

from .archive import CrowdingArchive
from .config import MOCellConfig, MOCellConfigData
from .factory import MOCellComponents, build_components
from .hooks import GenerationObserver, NoOpObserver
from .mocell import MOCell
from .neighborhood import Neighborhood, grid_shape
from .population import PopulationGrid
from .replacement import worst_by_crowding
from .result import MOCellResult
from .selection import BinaryTournament, RandomSelection
from .termination import StoppingCondition
from .variation import (
    PolynomialMutation,
    SBXCrossover,
    available_operators,
    make_crossover,
    make_mutation,
    make_selection,
    resolve_prob,
)

__all__ = [
    "BinaryTournament",
    "CrowdingArchive",
    "GenerationObserver",
    "MOCell",
    "MOCellComponents",
    "MOCellConfig",
    "MOCellConfigData",
    "MOCellResult",
    "Neighborhood",
    "NoOpObserver",
    "PolynomialMutation",
    "PopulationGrid",
    "RandomSelection",
    "SBXCrossover",
    "StoppingCondition",
    "available_operators",
    "build_components",
    "grid_shape",
    "make_crossover",
    "make_mutation",
    "make_selection",
    "resolve_prob",
    "worst_by_crowding",
]

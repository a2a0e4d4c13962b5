from .distance import generational_distance, inverted_generational_distance
from .hypervolume import hypervolume
from .pareto import pareto_filter

__all__ = ["generational_distance", "hypervolume", "inverted_generational_distance", "pareto_filter"]

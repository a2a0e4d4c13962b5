from __future__ import annotations

import numpy as np
import pytest

from mocell.engine.neighborhood import Neighborhood, grid_shape
from mocell.engine.population import PopulationGrid
from mocell.exceptions import ConfigurationError
from mocell.foundation.solution import Solution


def test_grid_shape_prefers_square_factorization() -> None:
    assert grid_shape(100) == (10, 10)
    assert grid_shape(9) == (3, 3)
    assert grid_shape(12) == (3, 4)
    assert grid_shape(7) == (1, 7)


def test_c9_neighbors_of_center_and_corner() -> None:
    hood = Neighborhood(9)
    # N, S, E, W, NW, NE, SW, SE
    assert hood.neighbor_indices(4) == [1, 7, 5, 3, 0, 2, 6, 8]
    assert hood.neighbor_indices(0) == [6, 3, 1, 2, 8, 7, 5, 4]
    assert hood.size == 8
    assert hood.shape == (3, 3)


def test_l5_neighbors_wrap_around() -> None:
    hood = Neighborhood(16, kind="l5")
    assert hood.neighbor_indices(0) == [12, 4, 1, 3]
    assert hood.size == 4


def test_every_cell_has_distinct_neighbors_excluding_itself() -> None:
    hood = Neighborhood(100)
    for i in range(100):
        nbrs = hood.neighbor_indices(i)
        assert len(set(nbrs)) == 8
        assert i not in nbrs


def test_neighbor_relation_is_symmetric() -> None:
    hood = Neighborhood(20, shape=(4, 5))
    for i in range(20):
        for j in hood.neighbor_indices(i):
            assert i in hood.neighbor_indices(j)


@pytest.mark.parametrize("size, shape", [(7, None), (4, None), (12, (2, 6)), (10, (3, 3))])
def test_invalid_grids_are_rejected(size, shape) -> None:
    with pytest.raises(ConfigurationError):
        Neighborhood(size, shape=shape)


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        Neighborhood(9, kind="hexagonal")
    assert Neighborhood(9, kind="moore").kind == "c9"


def test_neighbors_returns_copies_of_current_occupants() -> None:
    grid = PopulationGrid(9)
    for i in range(9):
        grid.replace(i, Solution(variables=[float(i)], objectives=[float(i), 0.0]))
    hood = Neighborhood(9)
    nbrs = hood.neighbors(grid, 4)
    assert [int(s.variables[0]) for s in nbrs] == hood.neighbor_indices(4)
    assert [s.location for s in nbrs] == hood.neighbor_indices(4)
    nbrs[0].variables[0] = 99.0
    assert grid.get(1).variables[0] == 1.0
    assert all(s is not grid.get(s.location) for s in nbrs)


def test_out_of_range_index() -> None:
    with pytest.raises(IndexError):
        Neighborhood(9).neighbor_indices(9)
    assert np.asarray(Neighborhood(9).neighbor_indices(8)).max() < 9

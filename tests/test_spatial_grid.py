"""Tests for the SpatialGrid background grid."""

from __future__ import annotations

import math
from functools import partial

import pytest

from BlueNoise import InternalInvariantViolation, SpatialGrid
from BlueNoise.Geometry import make_point, squared_distance, toroidal_squared_distance


def test_dimensions() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	assert grid.cell_size == pytest.approx(5.0 / math.sqrt(2))
	assert (grid.grid_width, grid.grid_height) == (3, 3)
	assert len(grid.cells) == 9
	assert len(grid) == 0


def test_non_square_dimensions() -> None:
	grid = SpatialGrid(30.0, 5.0, 1.0)
	assert grid.grid_width == math.ceil(30.0 * math.sqrt(2))
	assert grid.grid_height == math.ceil(5.0 * math.sqrt(2))


def test_cell_of() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	assert grid.cell_of(make_point(4.0, 8.0)) == (1, 2)
	assert grid.cell_of(make_point(0.0, 0.0)) == (0, 0)


def test_insert_and_get() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	p = make_point(4.0, 8.0)
	grid.insert(p)
	assert grid.get(1, 2) is p
	assert grid.get(0, 0) is None
	assert len(grid) == 1


def test_double_insert_is_fatal() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	grid.insert(make_point(4.0, 8.0))
	with pytest.raises(InternalInvariantViolation):
		grid.insert(make_point(4.1, 8.1))


def test_out_of_range_index_is_fatal() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	with pytest.raises(InternalInvariantViolation):
		grid.index_of(3, 0)
	with pytest.raises(InternalInvariantViolation):
		grid.index_of(0, -1)
	with pytest.raises(InternalInvariantViolation):
		grid.insert(make_point(50.0, 1.0))


def test_index_is_row_major() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	assert grid.index_of(2, 1) == 1 * grid.grid_width + 2


def test_is_far_enough() -> None:
	grid = SpatialGrid(10.0, 10.0, 1.0)
	grid.insert(make_point(1.0, 1.0))
	assert not grid.is_far_enough(make_point(1.5, 1.0), 1.0, squared_distance)
	assert grid.is_far_enough(make_point(3.0, 3.0), 1.0, squared_distance)


def test_exact_radius_counts_as_far_enough() -> None:
	"""A neighbour at exactly min_radius does not block the candidate."""
	grid = SpatialGrid(10.0, 10.0, 1.0)
	grid.insert(make_point(1.0, 1.0))
	assert grid.is_far_enough(make_point(2.0, 1.0), 1.0, squared_distance)
	assert not grid.is_far_enough(make_point(1.999, 1.0), 1.0, squared_distance)


def test_neighbourhood_two_cells_away() -> None:
	"""A conflicting point two cells away along an axis is found."""
	grid = SpatialGrid(10.0, 10.0, 1.0)
	cell = grid.cell_size
	grid.insert(make_point(0.99 * cell, 0.5 * cell))
	candidate = make_point(2.05 * cell, 0.5 * cell)
	assert grid.cell_of(candidate)[0] - grid.cell_of(grid.cells[0])[0] == 2
	assert not grid.is_far_enough(candidate, 1.0, squared_distance)


def test_bounded_grid_skips_cells_outside() -> None:
	grid = SpatialGrid(10.0, 10.0, 1.0)
	grid.insert(make_point(9.9, 5.0))
	assert grid.is_far_enough(make_point(0.1, 0.1), 1.0, squared_distance)
	assert grid.is_far_enough(make_point(0.1, 5.0), 1.0, squared_distance)


def test_periodic_grid_tiles_domain() -> None:
	grid = SpatialGrid(10.0, 7.0, 1.0, periodic=True)
	assert grid.cell_width * grid.grid_width == pytest.approx(10.0)
	assert grid.cell_height * grid.grid_height == pytest.approx(7.0)
	assert grid.cell_width <= grid.cell_size
	assert grid.cell_height <= grid.cell_size


def test_periodic_grid_looks_across_the_seam() -> None:
	grid = SpatialGrid(10.0, 10.0, 1.0, periodic=True)
	grid.insert(make_point(9.9, 5.0))
	distance = partial(toroidal_squared_distance, extent=(10.0, 10.0))
	assert not grid.is_far_enough(make_point(0.1, 5.0), 1.0, distance)
	assert not grid.is_far_enough(make_point(0.2, 5.2), 1.0, distance)
	assert grid.is_far_enough(make_point(2.0, 5.0), 1.0, distance)


def test_periodic_grid_smaller_than_window() -> None:
	"""Grids narrower than five cells are scanned without error."""
	grid = SpatialGrid(1.0, 1.0, 1.0, periodic=True)
	assert grid.grid_width == 2
	grid.insert(make_point(0.1, 0.9))
	distance = partial(toroidal_squared_distance, extent=(1.0, 1.0))
	assert not grid.is_far_enough(make_point(0.6, 0.4), 1.0, distance)


def test_clear() -> None:
	grid = SpatialGrid(10.0, 10.0, 5.0)
	grid.insert(make_point(4.0, 8.0))
	grid.clear()
	assert len(grid) == 0
	assert all(cell is None for cell in grid.cells)
	grid.insert(make_point(4.0, 8.0))

"""
Exports the SpatialGrid class.
"""

import logging
import math
from typing import Callable, List, Optional, Tuple

import numpy as np

from .Errors import InternalInvariantViolation

logger = logging.getLogger(__name__)

DistanceFn = Callable[[np.ndarray, np.ndarray], float]


class SpatialGrid:
	"""
	Background grid of square cells used to accelerate the minimum-distance check. The cells are as large as possible
	while their diagonal stays within the minimum radius, so each cell holds at most one accepted point.
	"""

	# Cells on each side of the centre cell to scan. Two cells of size r/sqrt(2) always cover the radius r.
	REACH = 2

	def __init__(self, width: float, height: float, min_radius: float, periodic: bool = False):
		"""
		:param float width:      Domain size in x.
		:param float height:     Domain size in y.
		:param float min_radius: Minimum distance between points.
		:param bool  periodic:   Whether the domain wraps around. The cells are then shrunk slightly so they tile the
		                         domain exactly, and neighbour lookups wrap across the edges.
		"""
		self.periodic = periodic
		self.cell_size = min_radius / math.sqrt(2)

		# Round domain size up to nearest multiple of cell size
		self.grid_width = max(1, math.ceil(width / self.cell_size))
		self.grid_height = max(1, math.ceil(height / self.cell_size))

		if periodic:
			self.cell_width = width / self.grid_width
			self.cell_height = height / self.grid_height
		else:
			self.cell_width = self.cell_size
			self.cell_height = self.cell_size

		self.cells: List[Optional[np.ndarray]] = [None] * (self.grid_width * self.grid_height)
		self._count = 0

		logger.debug("Allocated %dx%d grid (cell size %g)", self.grid_width, self.grid_height, self.cell_size)

	def __len__(self) -> int:
		return self._count

	def cell_of(self, point: np.ndarray) -> Tuple[int, int]:
		"""
		:param np.ndarray point: Ndarray of shape (2) containing the point coordinates.
		:return: Tuple:          2-tuple of integer cell coordinates.
		"""
		cx = math.floor(point[0] / self.cell_width)
		cy = math.floor(point[1] / self.cell_height)
		if self.periodic:
			return cx % self.grid_width, cy % self.grid_height
		return cx, cy

	def index_of(self, cx: int, cy: int) -> int:
		"""
		Linear index of a cell in the flattened cell list.
		"""
		if not (0 <= cx < self.grid_width and 0 <= cy < self.grid_height):
			raise InternalInvariantViolation(
				f"Cell ({cx}, {cy}) is outside the {self.grid_width}x{self.grid_height} grid")
		return cy * self.grid_width + cx

	def get(self, cx: int, cy: int) -> Optional[np.ndarray]:
		return self.cells[self.index_of(cx, cy)]

	def insert(self, point: np.ndarray) -> None:
		"""
		Store an accepted point in its cell. The cell must be empty.
		:param np.ndarray point: Ndarray of shape (2) containing the point coordinates.
		"""
		index = self.index_of(*self.cell_of(point))
		if self.cells[index] is not None:
			raise InternalInvariantViolation(f"Grid cell {index} was already occupied by {self.cells[index]}")
		self.cells[index] = point
		self._count += 1

	def _neighbour_range(self, c: int, size: int) -> range:
		if self.periodic:
			# Never visit a cell twice when the grid is narrower than the 5-cell window
			span = min(2 * self.REACH + 1, size)
			return range(c - self.REACH, c - self.REACH + span)
		return range(max(c - self.REACH, 0), min(c + self.REACH + 1, size))

	def is_far_enough(self, point: np.ndarray, min_radius: float, distance_fn: DistanceFn) -> bool:
		"""
		Check the 5x5 block of cells around the point for accepted points closer than min_radius.
		:param np.ndarray point:       Ndarray of shape (2) containing the candidate coordinates.
		:param float      min_radius:  Minimum distance between points.
		:param Callable   distance_fn: Squared distance between two points.
		:return bool:                  True if no accepted point is closer than min_radius.
		"""
		radius_squared = min_radius * min_radius
		cx, cy = self.cell_of(point)

		for y in self._neighbour_range(cy, self.grid_height):
			row = (y % self.grid_height) * self.grid_width
			for x in self._neighbour_range(cx, self.grid_width):
				neighbour = self.cells[row + x % self.grid_width]
				if neighbour is not None and distance_fn(neighbour, point) < radius_squared:
					return False

		return True

	def clear(self) -> None:
		self.cells = [None] * (self.grid_width * self.grid_height)
		self._count = 0

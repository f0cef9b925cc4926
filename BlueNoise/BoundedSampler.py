"""
Exports the BoundedSampler class.
"""

import copy
import logging
import math
from enum import Enum
from typing import Callable, List, Optional, Union

import numpy as np

from .ActiveList import ActiveList
from .Errors import InvalidParameterError, SamplerLockedError
from .Geometry import make_point, squared_distance
from .RandomSource import RandomSource
from .SamplerConfig import SamplerConfig
from .SpatialGrid import DistanceFn, SpatialGrid

logger = logging.getLogger(__name__)

PlaceFn = Callable[[float, float], Optional[np.ndarray]]
RNGLike = Union[RandomSource, np.random.RandomState]


class BoundedSampler:
	"""
	Generate a Poisson-disk point set inside the rectangle [0, width) x [0, height) using Bridson's algorithm,
	accelerated by a background grid. Points are produced lazily: iterate over the sampler, or call next_point() or
	take().

	Every random draw happens in a fixed order (initial x and y, then per visited parent one index draw and per attempt
	an angle and a radius), so a fixed seed and configuration always give the same sequence.
	"""

	States: Enum = Enum('States', ['uninitialized', 'active', 'exhausted'])

	def __init__(self, width: float, height: float, min_radius: float, seed: Optional[int] = None,
	             max_samples: int = SamplerConfig.DEFAULT_MAX_SAMPLES, rng: Optional[RNGLike] = None, *,
	             _periodic: bool = False):
		"""
		:param float        width:       Domain size in x. Must be positive.
		:param float        height:      Domain size in y. Must be positive.
		:param float        min_radius:  Minimum distance between points. Must be positive.
		:param int          seed:        Seed used to initialize the PRNG. May be None, in which case a random seed
		                                 will be used.
		:param int          max_samples: Number of candidates tried around a parent before it is retired.
		:param RandomSource rng:         Prebuilt random source (or numpy RandomState) to draw from instead of
		                                 creating one. If seed is also given, it is reseeded with it.
		:param bool         _periodic:   Build the grid for a wrapping domain. Only ToroidalSampler sets this.
		"""
		self.config: SamplerConfig = SamplerConfig(width, height, min_radius, max_samples, seed).validate()
		self._periodic = _periodic

		if rng is None:
			self.rng = RandomSource(self.config.seed)
		else:
			self.rng = RandomSource.coerce(rng)
			if seed is not None:
				self.rng.seed(self.config.seed)

		self.grid = SpatialGrid(self.config.width, self.config.height, self.config.min_radius, _periodic)
		self.active = ActiveList()
		self.state = self.States.uninitialized
		self._accepted: List[np.ndarray] = []

	@classmethod
	def from_config(cls, config: SamplerConfig, rng: Optional[RNGLike] = None, **kwargs):
		return cls(config.width, config.height, config.min_radius, seed=config.seed, max_samples=config.max_samples,
		           rng=rng, **kwargs)

	def __repr__(self) -> str:
		return (f"{type(self).__name__}(width={self.config.width}, height={self.config.height}, "
		        f"min_radius={self.config.min_radius}, max_samples={self.config.max_samples}, "
		        f"state={self.state.name}, n_emitted={self.n_emitted})")

	@property
	def n_emitted(self) -> int:
		return len(self._accepted)

	@property
	def is_exhausted(self) -> bool:
		return self.state is self.States.exhausted

	# Configuration

	def _check_unlocked(self, name: str) -> None:
		if self.state is not self.States.uninitialized:
			raise SamplerLockedError(f"Cannot change {name} after the first point was emitted; call reset() first")

	def with_samples(self, max_samples: int) -> 'BoundedSampler':
		"""
		Set the number of candidates tried around each parent. Only allowed before the first point.
		"""
		self._check_unlocked('max_samples')
		self.config = self.config._replace(max_samples=max_samples).validate()
		return self

	def with_min_radius(self, min_radius: float) -> 'BoundedSampler':
		"""
		Set the minimum distance and rebuild the grid for it. Only allowed before the first point.
		"""
		self._check_unlocked('min_radius')
		self.config = self.config._replace(min_radius=min_radius).validate()
		self.grid = SpatialGrid(self.config.width, self.config.height, self.config.min_radius, self._periodic)
		return self

	def with_seed(self, seed: int) -> 'BoundedSampler':
		"""
		Reseed the PRNG. Points generated so far are kept.
		"""
		if seed is None:
			raise InvalidParameterError("with_seed() needs an integer seed")
		self.config = self.config._replace(seed=seed).validate()
		self.rng.seed(self.config.seed)
		return self

	def reset(self) -> 'BoundedSampler':
		"""
		Forget all points and start over on the next draw. The PRNG keeps its state, so call with_seed() as well for a
		repeatable restart.
		"""
		self.grid.clear()
		self.active.clear()
		self._accepted = []
		self.state = self.States.uninitialized
		logger.debug("Sampler reset")
		return self

	def copy(self) -> 'BoundedSampler':
		"""
		:return: An independent sampler with the same points and PRNG state.
		"""
		return copy.deepcopy(self)

	# Generation

	def _place(self, x: float, y: float) -> Optional[np.ndarray]:
		"""
		Turn candidate coordinates into a point, or None if they fall outside the domain.
		"""
		if 0 <= x < self.config.width and 0 <= y < self.config.height:
			return make_point(x, y)
		return None

	def _accept(self, point: np.ndarray) -> np.ndarray:
		self.grid.insert(point)
		self.active.push(point)
		self._accepted.append(point)
		return point

	def _step(self, place: PlaceFn, distance_fn: DistanceFn) -> Optional[np.ndarray]:
		"""
		Advance by one accepted point.
		:param Callable place:       Maps raw candidate coordinates to a point in the domain, or None to reject.
		:param Callable distance_fn: Squared distance between two points.
		:return: np.ndarray:         The new point, or None once the sampler is exhausted.
		"""
		if self.state is self.States.exhausted:
			return None

		if self.state is self.States.uninitialized:
			# The grid is empty, so the first point is always valid
			x = self.rng.uniform(0, self.config.width)
			y = self.rng.uniform(0, self.config.height)
			self.state = self.States.active
			return self._accept(make_point(x, y))

		radius = self.config.min_radius
		while not self.active.is_empty():
			index = self.active.pick_random(self.rng)
			parent = self.active[index]

			for _ in range(self.config.max_samples):
				# Throw a dart in the annulus between one and two radii around the parent
				theta = self.rng.uniform(0, 2 * math.pi)
				r = self.rng.uniform(radius, 2 * radius)
				candidate = place(parent[0] + r * math.cos(theta), parent[1] + r * math.sin(theta))
				if candidate is not None and self.grid.is_far_enough(candidate, radius, distance_fn):
					return self._accept(candidate)

			self.active.remove(index)

		self.state = self.States.exhausted
		logger.debug("Sampler exhausted after %d points", self.n_emitted)
		return None

	def next_point(self) -> Optional[np.ndarray]:
		"""
		:return: np.ndarray: The next point, or None if no more points can be placed.
		"""
		return self._step(self._place, squared_distance)

	def __iter__(self):
		return self

	def __next__(self) -> np.ndarray:
		point = self.next_point()
		if point is None:
			raise StopIteration
		return point

	def take(self, n: int) -> np.ndarray:
		"""
		:param int n: Maximum number of points to generate.
		:return: Ndarray of shape (k, 2), k <= n, with the next point coordinates.
		"""
		if n < 0:
			raise InvalidParameterError(f"Cannot take a negative number of points ({n})")
		coordinates = []
		for _ in range(n):
			point = self.next_point()
			if point is None:
				break
			coordinates.append(point)
		return np.array(coordinates, dtype=np.float64).reshape(-1, 2)

	def points(self) -> np.ndarray:
		"""
		:return: Ndarray of shape (n_emitted, 2) with every point generated so far, in order.
		"""
		return np.array(self._accepted, dtype=np.float64).reshape(-1, 2)

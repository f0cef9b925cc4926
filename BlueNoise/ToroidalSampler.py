"""
Exports the ToroidalSampler class.
"""

from typing import Optional

import numpy as np

from .BoundedSampler import BoundedSampler, RNGLike
from .Errors import InvalidParameterError
from .Geometry import toroidal_squared_distance, wrap_point
from .SamplerConfig import SamplerConfig


class ToroidalSampler:
	"""
	Generate a Poisson-disk point set on a torus: the rectangle wraps around in both directions, so the resulting set
	tiles seamlessly. Candidates are wrapped back into the domain instead of being rejected, and distances are measured
	across the edges.

	The grid, active list and generation loop are those of an inner BoundedSampler; only placement and distance differ.
	"""

	def __init__(self, width: float, height: float, min_radius: float, seed: Optional[int] = None,
	             max_samples: int = SamplerConfig.DEFAULT_MAX_SAMPLES, rng: Optional[RNGLike] = None):
		"""
		:param float        width:       Period in x. Must be positive.
		:param float        height:      Period in y. Must be positive.
		:param float        min_radius:  Minimum toroidal distance between points. Must be positive.
		:param int          seed:        Seed used to initialize the PRNG. May be None, in which case a random seed
		                                 will be used.
		:param int          max_samples: Number of candidates tried around a parent before it is retired.
		:param RandomSource rng:         Prebuilt random source (or numpy RandomState) to draw from.
		"""
		self.inner = BoundedSampler(width, height, min_radius, seed=seed, max_samples=max_samples, rng=rng,
		                            _periodic=True)

	@classmethod
	def from_config(cls, config: SamplerConfig, rng: Optional[RNGLike] = None) -> 'ToroidalSampler':
		return cls(config.width, config.height, config.min_radius, seed=config.seed, max_samples=config.max_samples,
		           rng=rng)

	def __repr__(self) -> str:
		return repr(self.inner).replace(type(self.inner).__name__, type(self).__name__, 1)

	@property
	def config(self) -> SamplerConfig:
		return self.inner.config

	@property
	def rng(self):
		return self.inner.rng

	@property
	def grid(self):
		return self.inner.grid

	@property
	def n_emitted(self) -> int:
		return self.inner.n_emitted

	@property
	def is_exhausted(self) -> bool:
		return self.inner.is_exhausted

	def with_samples(self, max_samples: int) -> 'ToroidalSampler':
		self.inner.with_samples(max_samples)
		return self

	def with_min_radius(self, min_radius: float) -> 'ToroidalSampler':
		self.inner.with_min_radius(min_radius)
		return self

	def with_seed(self, seed: int) -> 'ToroidalSampler':
		self.inner.with_seed(seed)
		return self

	def reset(self) -> 'ToroidalSampler':
		self.inner.reset()
		return self

	def copy(self) -> 'ToroidalSampler':
		duplicate = ToroidalSampler.__new__(ToroidalSampler)
		duplicate.inner = self.inner.copy()
		return duplicate

	def distance_squared(self, p: np.ndarray, q: np.ndarray) -> float:
		return toroidal_squared_distance(p, q, self.config.extent)

	def _place(self, x: float, y: float) -> np.ndarray:
		return wrap_point(x, y, self.config.extent)

	def next_point(self) -> Optional[np.ndarray]:
		"""
		:return: np.ndarray: The next point, or None if no more points can be placed.
		"""
		return self.inner._step(self._place, self.distance_squared)

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
		:return: Ndarray of shape (k, 2), k <= n, with the next point coordinates in [0, width) x [0, height).
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
		return self.inner.points()

"""
Exports the PoissonDiskGenerator class.
"""

from typing import Optional, Tuple

import numpy as np

from .BoundedSampler import BoundedSampler
from .RandomSource import RandomSource
from .ToroidalSampler import ToroidalSampler


class PoissonDiskGenerator:
	"""
	Generate a Poisson-disk point set in one call, for callers that want an array rather than a lazy sampler.
	"""

	def __init__(self, seed: Optional[int]):
		"""
		:param int seed: Seed used to initialize the PRNG. May be None, in which case a random seed will be used.
		"""
		self.rng = RandomSource(seed)

	def generate(self, n: int, min_radius: float, size: Tuple[float, float], max_samples: int = 4,
	             periodic: bool = False) -> np.ndarray:
		"""
		:param int   n:           Maximum number of points.
		:param float min_radius:  Minimum distance between points.
		:param Tuple size:        2-tuple corresponding to the (2d) domain size.
		:param int   max_samples: Candidates tried around each point before it is retired.
		:param bool  periodic:    Wrap the domain around its edges, so the point set tiles.
		:return: Ndarray of shape (k, 2), k <= n, with all point coordinates.
		"""
		sampler_cls = ToroidalSampler if periodic else BoundedSampler
		sampler = sampler_cls(size[0], size[1], min_radius, max_samples=max_samples, rng=self.rng)
		return sampler.take(n)

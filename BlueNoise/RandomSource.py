"""
Exports the RandomSource class.
"""

import logging
from numbers import Integral
from typing import Optional, Union

import numpy as np

from .Errors import InvalidParameterError

logger = logging.getLogger(__name__)


class RandomSource:
	"""
	The random draws needed by the samplers, backed by a numpy RandomState (Mersenne Twister).
	"""

	# Largest seed accepted by RandomState, exclusive
	SEED_LIMIT = 2**32

	def __init__(self, seed: Optional[int] = None):
		"""
		:param int seed: Seed used to initialize the PRNG. May be None, in which case a random seed will be used.
		"""
		self.state = np.random.RandomState(seed=self.check_seed(seed))

	@classmethod
	def check_seed(cls, seed: Optional[int]) -> Optional[int]:
		"""
		:param int seed: Candidate seed, or None.
		:return: int:    The seed as a plain int (or None).
		"""
		if seed is None:
			return None
		if isinstance(seed, bool) or not isinstance(seed, Integral):
			raise InvalidParameterError(f"Seed must be an integer, got {seed!r}")
		if not 0 <= seed < cls.SEED_LIMIT:
			raise InvalidParameterError(f"Seed must be in [0, 2**32), got {seed}")
		return int(seed)

	@classmethod
	def coerce(cls, rng: Union['RandomSource', np.random.RandomState]) -> 'RandomSource':
		"""
		Wrap a prebuilt RandomState, or pass a RandomSource through unchanged. The state is shared, not copied.
		"""
		if isinstance(rng, RandomSource):
			return rng
		if isinstance(rng, np.random.RandomState):
			source = cls.__new__(cls)
			source.state = rng
			return source
		raise InvalidParameterError(f"Expected a RandomSource or numpy RandomState, got {type(rng).__name__}")

	def seed(self, seed: Optional[int]) -> None:
		"""
		Reseed in place. None draws fresh entropy from the OS.
		"""
		self.state.seed(self.check_seed(seed))
		logger.debug("Reseeded PRNG with %s", seed)

	def random(self) -> float:
		"""
		:return: float: Uniform sample in [0, 1).
		"""
		return float(self.state.random_sample())

	def uniform(self, low: float, high: float) -> float:
		"""
		:return: float: Uniform sample in [low, high).
		"""
		return float(self.state.uniform(low, high))

	def randint(self, n: int) -> int:
		"""
		:return: int: Uniform integer in [0, n).
		"""
		return int(self.state.randint(0, n))

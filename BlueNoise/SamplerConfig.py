"""
Exports the SamplerConfig class.
"""

import math
from numbers import Integral, Real
from typing import NamedTuple, Optional

from .Errors import InvalidParameterError
from .RandomSource import RandomSource


class SamplerConfig(NamedTuple):
	"""
	Immutable sampler settings. Use _replace() to derive a modified copy, then validate() it.
	"""
	# Defaults:
	DEFAULT_MAX_SAMPLES = 4

	width: float
	height: float
	min_radius: float
	max_samples: int = DEFAULT_MAX_SAMPLES
	seed: Optional[int] = None

	@property
	def extent(self):
		return self.width, self.height

	def validate(self) -> 'SamplerConfig':
		"""
		Check every field, raising InvalidParameterError on the first bad one.
		:return: SamplerConfig: self, with the numeric fields normalised to float/int.
		"""
		for name in ('width', 'height', 'min_radius'):
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, Real):
				raise InvalidParameterError(f"{name} must be a number, got {value!r}")
			if not math.isfinite(value) or value <= 0:
				raise InvalidParameterError(f"{name} must be finite and > 0, got {value}")

		if isinstance(self.max_samples, bool) or not isinstance(self.max_samples, Integral):
			raise InvalidParameterError(f"max_samples must be an integer, got {self.max_samples!r}")
		if self.max_samples < 1:
			raise InvalidParameterError(f"max_samples must be >= 1, got {self.max_samples}")

		return self._replace(width=float(self.width), height=float(self.height), min_radius=float(self.min_radius),
		                     max_samples=int(self.max_samples), seed=RandomSource.check_seed(self.seed))

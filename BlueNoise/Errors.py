"""
Exports the exceptions raised by the BlueNoise samplers.
"""


class InvalidParameterError(ValueError):
	"""
	Raised when a sampler is constructed or configured with a domain size, radius, sample count or seed that cannot
	produce a valid background grid.
	"""
	pass


class InternalInvariantViolation(AssertionError):
	"""
	Raised when a computed grid index falls outside the allocated grid, or when a point is inserted into an occupied
	cell. Either means the grid bookkeeping is broken; it is not meant to be caught.
	"""
	pass


class SamplerLockedError(RuntimeError):
	"""
	Raised when the radius or sample count is changed after the first point has been emitted.
	"""
	pass

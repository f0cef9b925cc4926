"""
Poisson-disk ("blue noise") point sampling in bounded and toroidal 2d domains.
"""

from .ActiveList import ActiveList
from .BoundedSampler import BoundedSampler
from .Errors import InternalInvariantViolation, InvalidParameterError, SamplerLockedError
from .PoissonDiskGenerator import PoissonDiskGenerator
from .RandomSource import RandomSource
from .SamplerConfig import SamplerConfig
from .SpatialGrid import SpatialGrid
from .ToroidalSampler import ToroidalSampler

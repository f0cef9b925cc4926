"""
Point helpers shared by the samplers. Points are read-only float64 ndarrays of shape (2).
"""

from typing import Tuple

import numpy as np


def make_point(x: float, y: float) -> np.ndarray:
	"""
	:param float x: X coordinate.
	:param float y: Y coordinate.
	:return: Read-only ndarray of shape (2).
	"""
	point = np.array([x, y], dtype=np.float64)
	point.flags.writeable = False
	return point


def squared_distance(p: np.ndarray, q: np.ndarray) -> float:
	d = p - q
	return float(d[0] * d[0] + d[1] * d[1])


def toroidal_squared_distance(p: np.ndarray, q: np.ndarray, extent: Tuple[float, float]) -> float:
	"""
	Squared distance on a torus: per axis the shorter of the direct delta and the delta wrapped around the domain.
	:param np.ndarray p:      First point.
	:param np.ndarray q:      Second point.
	:param Tuple      extent: 2-tuple with the (width, height) of the periodic domain.
	:return: float:           Squared toroidal distance.
	"""
	d = np.abs(p - q)
	d = np.minimum(d, np.asarray(extent, dtype=np.float64) - d)
	return float(d[0] * d[0] + d[1] * d[1])


def wrap_point(x: float, y: float, extent: Tuple[float, float]) -> np.ndarray:
	"""
	Reduce coordinates modulo the domain extent, so the result lies in [0, width) x [0, height).
	"""
	width, height = extent
	x %= width
	y %= height
	# A tiny negative coordinate can round up to the extent itself
	if x >= width:
		x = 0.0
	if y >= height:
		y = 0.0
	return make_point(x, y)

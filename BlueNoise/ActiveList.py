"""
Exports the ActiveList class.
"""

from typing import List

import numpy as np

from .RandomSource import RandomSource


class ActiveList:
	"""
	Accepted points that may still spawn new candidates. Order is irrelevant, so removal swaps in the last entry.
	"""

	def __init__(self):
		self._points: List[np.ndarray] = []

	def __len__(self) -> int:
		return len(self._points)

	def __getitem__(self, index: int) -> np.ndarray:
		return self._points[index]

	def push(self, point: np.ndarray) -> None:
		self._points.append(point)

	def pick_random(self, rng: RandomSource) -> int:
		"""
		:param RandomSource rng: Source of the draw.
		:return: int:            Uniformly chosen index of an active point.
		"""
		if not self._points:
			raise IndexError("pick from empty ActiveList")
		return rng.randint(len(self._points))

	def remove(self, index: int) -> np.ndarray:
		"""
		Remove the point at index in O(1) by moving the last point into its slot.
		:return: np.ndarray: The removed point.
		"""
		if not 0 <= index < len(self._points):
			raise IndexError(f"ActiveList index {index} out of range")
		last = self._points.pop()
		if index == len(self._points):
			return last
		removed = self._points[index]
		self._points[index] = last
		return removed

	def is_empty(self) -> bool:
		return not self._points

	def clear(self) -> None:
		self._points.clear()

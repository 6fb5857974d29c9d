from __future__ import annotations

import numpy as np

from config import COEFF_MAX, COEFF_MIN


class Coeff:
	"""Signed 64-bit coefficient with two's-complement wrapping arithmetic."""
	__slots__ = ("_v",)
	def __init__(self, value: int | np.int64 = 0) -> None:
		if isinstance(value, np.int64):
			self._v = value
		else:
			if not COEFF_MIN <= value <= COEFF_MAX:
				raise OverflowError(f"coefficient {value} out of range")
			self._v = np.int64(value)
	def __add__(self, other: Coeff) -> Coeff:
		with np.errstate(over="ignore"):
			return Coeff(self._v + other._v)
	def __sub__(self, other: Coeff) -> Coeff:
		with np.errstate(over="ignore"):
			return Coeff(self._v - other._v)
	def __mul__(self, other: Coeff) -> Coeff:
		with np.errstate(over="ignore"):
			return Coeff(self._v * other._v)
	def __neg__(self) -> Coeff:
		with np.errstate(over="ignore"):
			return Coeff(-self._v)
	def __pow__(self, exp: int) -> Coeff:
		# square-and-multiply, exp may exceed the int64 range
		res, base = Coeff(1), self
		while exp > 0:
			if exp & 1:
				res = res * base
			exp >>= 1
			if exp:
				base = base * base
		return res
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Coeff):
			return False
		return bool(self._v == other._v)
	def __hash__(self) -> int:
		return hash(int(self._v))
	def is_zero(self) -> bool:
		return bool(self._v == 0)
	def to_string(self) -> str:
		return str(int(self._v))
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Coeff({int(self._v)})"

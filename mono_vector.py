from __future__ import annotations
from typing import List
from mono import Mono
from poly import Poly


class MonoVector:
	"""Append-only list of terms collected while parsing a sum."""
	def __init__(self) -> None:
		self.items: List[Mono] = []
	def push(self, m: Mono) -> None:
		self.items.append(m)
	def into_poly(self) -> Poly:
		# the vector is empty afterwards, its terms now belong to the result
		monos, self.items = self.items, []
		return Poly.add_monos(monos)
	def clear(self) -> None:
		self.items.clear()

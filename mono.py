from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from poly import Poly

@dataclass
class Mono:
	"""One term p * x^exp, where p is a polynomial in the next variable."""
	exp: int
	p: Poly
	def degree(self) -> int:
		return self.exp + self.p.degree()
	def clone(self) -> Mono:
		return Mono(self.exp, self.p.clone())
	def __neg__(self) -> Mono:
		return Mono(self.exp, -self.p)
	def to_string(self) -> str:
		return f"({self.p.to_string()},{self.exp})"
	def __str__(self) -> str:
		return self.to_string()

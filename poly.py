from __future__ import annotations
from typing import Dict, List, Iterable, Sequence
from dataclasses import dataclass, field
from coeff import Coeff
from mono import Mono

# degree reported for the zero polynomial
ZERO_DEGREE = -1


@dataclass(eq=False)
class Poly:
    """Sparse multivariate polynomial over signed 64-bit integers.

    A polynomial is either a constant (``monos`` empty, value in ``coeff``) or a
    sum of terms ``p_i * x0^e_i`` where every ``p_i`` is itself a polynomial in
    ``x1, x2, ...``. Terms are kept sorted by strictly decreasing exponent and
    never carry a zero coefficient; zero is always the constant ``0``.

    Operators never modify their operands and return independent results.
    """

    coeff: Coeff = field(default_factory=Coeff)
    monos: List[Mono] = field(default_factory=list)

    def __post_init__(self):
        if self.monos:
            self.normalize()

    @staticmethod
    def from_coeff(c: int | Coeff) -> "Poly":
        return Poly(c if isinstance(c, Coeff) else Coeff(c))

    @staticmethod
    def zero() -> "Poly":
        return Poly(Coeff(0))

    @staticmethod
    def add_monos(monos: Iterable[Mono]) -> "Poly":
        p = Poly()
        p.monos = list(monos)
        p.normalize()
        return p

    def normalize(self) -> None:
        # merge equal exponents
        acc: Dict[int, Poly] = {}
        for m in self.monos:
            if m.exp in acc:
                acc[m.exp] = acc[m.exp] + m.p
            else:
                acc[m.exp] = m.p
        new_monos = [Mono(e, p) for e, p in acc.items() if not p.is_zero()]
        new_monos.sort(key=lambda m: m.exp, reverse=True)
        self.coeff = Coeff(0)
        self.monos = new_monos
        if len(new_monos) == 1 and new_monos[0].exp == 0 and new_monos[0].p.is_coeff():
            self.coeff = new_monos[0].p.coeff
            self.monos = []

    def is_zero(self) -> bool:
        return not self.monos and self.coeff.is_zero()

    def is_coeff(self) -> bool:
        return not self.monos

    def is_eq(self, rhs: "Poly") -> bool:
        """Structural equality, walked with an explicit stack of pairs."""
        pending = [(self, rhs)]
        while pending:
            a, b = pending.pop()
            if a.coeff != b.coeff or len(a.monos) != len(b.monos):
                return False
            for ma, mb in zip(a.monos, b.monos):
                if ma.exp != mb.exp:
                    return False
                pending.append((ma.p, mb.p))
        return True

    def __eq__(self, rhs: object) -> bool:
        if not isinstance(rhs, Poly):
            return NotImplemented
        return self.is_eq(rhs)

    def clone(self) -> "Poly":
        # already canonical, no need to normalize again
        p = Poly(self.coeff)
        p.monos = [m.clone() for m in self.monos]
        return p

    def _as_monos(self) -> List[Mono]:
        if self.monos:
            return [m.clone() for m in self.monos]
        if self.coeff.is_zero():
            return []
        return [Mono(0, Poly(self.coeff))]

    def _lift(self, depth: int) -> "Poly":
        """Re-embed a polynomial in x0, x1, ... as one in x_depth, x_depth+1, ..."""
        p = self.clone()
        if p.is_coeff():
            return p
        for _ in range(depth):
            p = Poly.add_monos([Mono(0, p)])
        return p

    def degree(self) -> int:
        if self.is_zero():
            return ZERO_DEGREE
        deg = 0
        for m in self.monos:
            deg = max(deg, m.degree())
        return deg

    def degree_by(self, var: int) -> int:
        """Degree in x_var alone.

        The zero constant has degree -1 in x0 and 0 in every deeper variable.
        """
        if self.is_coeff():
            return ZERO_DEGREE if self.is_zero() and var == 0 else 0
        if var == 0:
            return self.monos[0].exp
        return max(m.p.degree_by(var - 1) for m in self.monos)

    def __add__(self, rhs: "Poly") -> "Poly":
        if self.is_coeff() and rhs.is_coeff():
            return Poly(self.coeff + rhs.coeff)
        return Poly.add_monos(self._as_monos() + rhs._as_monos())

    def __neg__(self) -> "Poly":
        if self.is_coeff():
            return Poly(-self.coeff)
        return Poly.add_monos([-m for m in self.monos])

    def __sub__(self, rhs: "Poly") -> "Poly":
        return self + (-rhs)

    def __mul__(self, rhs: "Poly") -> "Poly":
        if self.is_coeff() and rhs.is_coeff():
            return Poly(self.coeff * rhs.coeff)
        if self.is_coeff():
            return Poly.add_monos([Mono(m.exp, self * m.p) for m in rhs.monos])
        if rhs.is_coeff():
            return Poly.add_monos([Mono(m.exp, m.p * rhs) for m in self.monos])
        prods: List[Mono] = []
        for a in self.monos:
            for b in rhs.monos:
                prods.append(Mono(a.exp + b.exp, a.p * b.p))
        return Poly.add_monos(prods)

    def pow(self, exp: int) -> "Poly":
        res = Poly.from_coeff(1)
        base = self
        while exp > 0:
            if exp & 1:
                res = res * base
            exp >>= 1
            if exp:
                base = base * base
        return res

    def at(self, x: int | Coeff) -> "Poly":
        """Substitute x for x0; the remaining variables shift down by one."""
        if self.is_coeff():
            return self.clone()
        if not isinstance(x, Coeff):
            x = Coeff(x)
        # Horner over the sparse exponents, highest first
        res = Poly.zero()
        prev = self.monos[0].exp
        for m in self.monos:
            res = res * Poly(x ** (prev - m.exp)) + m.p
            prev = m.exp
        return res * Poly(x ** prev)

    def compose(self, subs: Sequence["Poly"]) -> "Poly":
        """Substitute subs[i] for x_i simultaneously.

        Variables x_i with i >= len(subs) remain as themselves: the rest of
        the polynomial is re-embedded at its own depth.
        """
        return self._compose(subs, 0)

    def _compose(self, subs: Sequence["Poly"], var: int) -> "Poly":
        if self.is_coeff():
            return self.clone()
        if var >= len(subs):
            return self._lift(var)
        result = Poly.zero()
        for m in self.monos:
            result = result + subs[var].pow(m.exp) * m.p._compose(subs, var + 1)
        return result

    def to_string(self) -> str:
        if self.is_coeff():
            return self.coeff.to_string()
        return "+".join(m.to_string() for m in self.monos)

    def __str__(self) -> str:
        return self.to_string()

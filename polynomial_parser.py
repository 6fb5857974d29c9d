from __future__ import annotations
import re
from typing import Tuple
from config import COEFF_MAX, COEFF_MIN, EXP_MAX, MAX_NESTING
from errors import PolyParseError
from mono import Mono
from mono_vector import MonoVector
from poly import Poly

# Recursive descent over the grammar
#   poly  := coeff | mono ('+' mono)*
#   mono  := '(' poly ',' exp ')'
#   coeff := ['-'] digit+
#   exp   := digit+

LEGAL_CHARS = frozenset("0123456789-+(),")
_COEFF_RE = re.compile(r"-?[0-9]+")
_EXP_RE = re.compile(r"[0-9]+")

def has_illegal_characters(s: str) -> bool:
	return any(c not in LEGAL_CHARS for c in s)

def nesting_depth(s: str) -> int:
	"""Deepest bracket nesting in s, or -1 if the brackets are unbalanced."""
	ctr = deepest = 0
	for c in s:
		if c == '(':
			ctr += 1
			deepest = max(deepest, ctr)
		elif c == ')':
			ctr -= 1
			if ctr < 0:
				return -1
	return deepest if ctr == 0 else -1

def are_parentheses_valid(s: str) -> bool:
	return nesting_depth(s) >= 0

def parse_exp(s: str, i: int) -> Tuple[int, int]:
	"""Parse an exponent at s[i]; returns it with the index of the closing ')'."""
	m = _EXP_RE.match(s, i)
	if m is None:
		raise PolyParseError(f"exponent expected at {i}")
	end = m.end()
	if end == len(s) or s[end] != ')':
		raise PolyParseError(f"')' expected at {end}")
	exp = int(m.group())
	if exp > EXP_MAX:
		raise PolyParseError(f"exponent {exp} out of range")
	return exp, end

def parse_coeff(s: str, i: int) -> Tuple[Poly, int]:
	m = _COEFF_RE.match(s, i)
	if m is None:
		raise PolyParseError(f"coefficient expected at {i}")
	end = m.end()
	if end != len(s) and s[end] != ',':
		raise PolyParseError(f"unexpected {s[end]!r} at {end}")
	c = int(m.group())
	if not COEFF_MIN <= c <= COEFF_MAX:
		raise PolyParseError(f"coefficient {c} out of range")
	return Poly.from_coeff(c), end

def parse_mono(s: str, i: int) -> Tuple[Mono, int]:
	"""Parse a term starting just after its '('; returns it with the index of its ')'."""
	if i == len(s):
		raise PolyParseError("unexpected end of line")
	p, end = parse_poly_at(s, i)
	if end == len(s):
		raise PolyParseError("',' expected at end of line")
	# s[end] is ','
	exp, end = parse_exp(s, end + 1)
	return Mono(exp, p), end

def parse_poly_at(s: str, i: int) -> Tuple[Poly, int]:
	"""Parse a polynomial at s[i].

	Returns the polynomial and the index of the first unconsumed character,
	which is either the end of the line or a ','.
	"""
	if i == len(s):
		raise PolyParseError("unexpected end of line")
	if s[i].isdigit() or s[i] == '-':
		return parse_coeff(s, i)
	monos = MonoVector()
	try:
		while True:
			if s[i] != '(':
				raise PolyParseError(f"'(' expected at {i}")
			m, end = parse_mono(s, i + 1)
			monos.push(m)
			end += 1
			if end == len(s) or s[end] == ',':
				break
			if s[end] != '+':
				raise PolyParseError(f"'+' expected at {end}")
			i = end + 1
			if i == len(s):
				raise PolyParseError("unexpected end of line")
	except PolyParseError:
		monos.clear()
		raise
	return monos.into_poly(), end

def parse_polynomial(line: str) -> Poly:
	"""Parse a whole line as a polynomial, raising PolyParseError if it is not one.

	Nesting deeper than MAX_NESTING is rejected: every engine operation
	recurses once per level and must stay within the interpreter's limit.
	"""
	if has_illegal_characters(line):
		raise PolyParseError("illegal characters")
	depth = nesting_depth(line)
	if depth < 0:
		raise PolyParseError("unbalanced parentheses")
	if depth > MAX_NESTING:
		raise PolyParseError(f"nesting depth {depth} exceeds {MAX_NESTING}")
	p, end = parse_poly_at(line, 0)
	if end != len(line):
		raise PolyParseError(f"trailing characters at {end}")
	return p

"""Conversion of one input line into a parsed line value."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from command import CommandCall, parse_command
from errors import CalcError, ErrorKind, PolyParseError
from poly import Poly
from polynomial_parser import parse_polynomial

logger = logging.getLogger("polycalc.line")


@dataclass(frozen=True)
class ErrorLine:
    error: CalcError


@dataclass(frozen=True)
class CommandLine:
    call: CommandCall


@dataclass
class PolyLine:
    poly: Poly


Line = Union[ErrorLine, CommandLine, PolyLine]


def _is_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def parse_line(text: str, line_nr: int) -> Line:
    """Route a line to the command classifier or the expression parser.

    A line starting with an ASCII letter is a command, anything else is a
    polynomial literal.
    """
    if text and _is_alpha(text[0]):
        result = parse_command(text)
        if isinstance(result, ErrorKind):
            return ErrorLine(CalcError(result, line_nr))
        return CommandLine(result)
    try:
        return PolyLine(parse_polynomial(text))
    except PolyParseError as e:
        logger.debug("line %d: %s", line_nr, e)
    return ErrorLine(CalcError(ErrorKind.WRONG_POLY, line_nr))

"""Error kinds reported by the calculator, one line each on the error stream."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Diagnostic messages, by the stage that detects them."""

    WRONG_COMMAND = "WRONG COMMAND"
    WRONG_POLY = "WRONG POLY"
    DEG_BY_WRONG_VARIABLE = "DEG BY WRONG VARIABLE"
    AT_WRONG_VALUE = "AT WRONG VALUE"
    COMPOSE_WRONG_PARAMETER = "COMPOSE WRONG PARAMETER"
    STACK_UNDERFLOW = "STACK UNDERFLOW"


@dataclass(frozen=True)
class CalcError:
    kind: ErrorKind
    line_nr: int

    def __str__(self) -> str:
        return f"ERROR {self.line_nr} {self.kind.value}"


class PolyParseError(ValueError):
    """Raised inside the expression parser; never leaves ``line.parse_line``."""

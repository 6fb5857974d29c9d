"""Command vocabulary and classification of command lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config import ARG_MAX, COEFF_MAX, COEFF_MIN
from errors import ErrorKind

# C locale whitespace
_SPACE = " \t\n\v\f\r"
_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"-?[0-9]+")


class Command(str, Enum):
    ZERO = "ZERO"
    IS_COEFF = "IS_COEFF"
    IS_ZERO = "IS_ZERO"
    CLONE = "CLONE"
    ADD = "ADD"
    MUL = "MUL"
    NEG = "NEG"
    SUB = "SUB"
    IS_EQ = "IS_EQ"
    DEG = "DEG"
    DEG_BY = "DEG_BY"
    AT = "AT"
    COMPOSE = "COMPOSE"
    PRINT = "PRINT"
    POP = "POP"


NO_ARG_COMMANDS = frozenset(
    c for c in Command if c not in (Command.DEG_BY, Command.AT, Command.COMPOSE)
)


@dataclass(frozen=True)
class ArgSpec:
    """How the argument of a one-argument command is read."""

    pattern: "re.Pattern[str]"
    lo: int
    hi: int
    error: ErrorKind
    first_chars: str


ARG_COMMANDS = {
    Command.DEG_BY: ArgSpec(_UNSIGNED_RE, 0, ARG_MAX, ErrorKind.DEG_BY_WRONG_VARIABLE, "0123456789"),
    Command.AT: ArgSpec(_SIGNED_RE, COEFF_MIN, COEFF_MAX, ErrorKind.AT_WRONG_VALUE, "0123456789-"),
    Command.COMPOSE: ArgSpec(_UNSIGNED_RE, 0, ARG_MAX, ErrorKind.COMPOSE_WRONG_PARAMETER, "0123456789"),
}


@dataclass(frozen=True)
class CommandCall:
    command: Command
    arg: Optional[int] = None


def is_correct_command(line: str, keyword: str) -> bool:
    """True if ``line`` is ``keyword`` alone or ``keyword`` followed by whitespace."""
    n = len(keyword)
    return line.startswith(keyword) and (len(line) == n or line[n] in _SPACE)


def parse_argument(line: str, keyword: str, spec: ArgSpec) -> Optional[int]:
    """Read the argument after ``keyword``; None if it is missing or malformed."""
    n = len(keyword)
    if len(line) < n + 2 or line[n] != " " or line[n + 1] not in spec.first_chars:
        return None
    m = spec.pattern.fullmatch(line, n + 1)
    if m is None:
        return None
    value = int(m.group())
    if not spec.lo <= value <= spec.hi:
        return None
    return value


def parse_command(line: str) -> Union[CommandCall, ErrorKind]:
    """Classify a command line.

    Returns the recognized command with its argument, or the kind of error to
    report for this line.
    """
    for command in NO_ARG_COMMANDS:
        if line == command.value:
            return CommandCall(command)
    for command, spec in ARG_COMMANDS.items():
        if is_correct_command(line, command.value):
            arg = parse_argument(line, command.value, spec)
            if arg is None:
                return spec.error
            return CommandCall(command, arg)
    return ErrorKind.WRONG_COMMAND

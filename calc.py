from __future__ import annotations
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from command import Command, CommandCall
from config import COMMENT_PREFIX
from errors import CalcError, ErrorKind
from line import CommandLine, ErrorLine, Line, PolyLine, parse_line
from poly import Poly

logger = logging.getLogger("polycalc.calc")

# stack elements needed by commands with a fixed arity
STACK_NEEDED = {
    Command.ZERO: 0,
    Command.IS_COEFF: 1,
    Command.IS_ZERO: 1,
    Command.CLONE: 1,
    Command.NEG: 1,
    Command.DEG: 1,
    Command.DEG_BY: 1,
    Command.AT: 1,
    Command.PRINT: 1,
    Command.POP: 1,
    Command.ADD: 2,
    Command.MUL: 2,
    Command.SUB: 2,
    Command.IS_EQ: 2,
}


class Calculator:
    """Stack calculator over polynomials.

    Each input line is either a polynomial, pushed onto the stack, or a command
    working on the top of the stack. Results go to ``out``; every faulty line
    produces exactly one ``ERROR <line> <message>`` line on ``err`` and leaves
    the stack as it was.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self.stack: List[Poly] = []
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def report(self, error: CalcError) -> None:
        logger.debug("reporting %s", error)
        print(error, file=self.err)

    def _emit(self, value: object) -> None:
        print(value, file=self.out)

    def run(self, lines: Iterable[str]) -> None:
        for line_nr, text in enumerate(lines, start=1):
            self.process_line(text, line_nr)
        logger.info("done, %d polynomial(s) left on the stack", len(self.stack))
        self.stack.clear()

    def process_line(self, text: str, line_nr: int) -> None:
        if text.endswith("\n"):
            text = text[:-1]
        if not text or text.startswith(COMMENT_PREFIX):
            return
        self.execute(parse_line(text, line_nr), line_nr)

    def execute(self, line: Line, line_nr: int) -> None:
        if isinstance(line, ErrorLine):
            self.report(line.error)
        elif isinstance(line, PolyLine):
            self.stack.append(line.poly)
        elif isinstance(line, CommandLine):
            error = self.run_command(line.call)
            if error is not None:
                self.report(CalcError(error, line_nr))
        else:
            raise TypeError(f"unsupported line {line!r}")

    def _needed(self, call: CommandCall) -> int:
        if call.command == Command.COMPOSE:
            return call.arg + 1
        return STACK_NEEDED[call.command]

    def run_command(self, call: CommandCall) -> Optional[ErrorKind]:
        """Execute one command; returns the error kind if it could not run."""
        if len(self.stack) < self._needed(call):
            return ErrorKind.STACK_UNDERFLOW
        logger.debug("%s %s (stack size %d)", call.command.value,
                     "" if call.arg is None else call.arg, len(self.stack))
        s = self.stack
        cmd = call.command
        if cmd == Command.ZERO:
            s.append(Poly.zero())
        elif cmd == Command.IS_COEFF:
            self._emit(int(s[-1].is_coeff()))
        elif cmd == Command.IS_ZERO:
            self._emit(int(s[-1].is_zero()))
        elif cmd == Command.CLONE:
            s.append(s[-1].clone())
        elif cmd == Command.ADD:
            b = s.pop()
            a = s.pop()
            s.append(a + b)
        elif cmd == Command.MUL:
            b = s.pop()
            a = s.pop()
            s.append(a * b)
        elif cmd == Command.SUB:
            b = s.pop()
            a = s.pop()
            s.append(a - b)
        elif cmd == Command.NEG:
            s.append(-s.pop())
        elif cmd == Command.IS_EQ:
            self._emit(int(s[-1].is_eq(s[-2])))
        elif cmd == Command.DEG:
            self._emit(s[-1].degree())
        elif cmd == Command.DEG_BY:
            self._emit(s[-1].degree_by(call.arg))
        elif cmd == Command.AT:
            s.append(s.pop().at(call.arg))
        elif cmd == Command.COMPOSE:
            p = s.pop()
            subs = [s.pop() for _ in range(call.arg)]
            subs.reverse()
            s.append(p.compose(subs))
        elif cmd == Command.PRINT:
            self._emit(s[-1].to_string())
        elif cmd == Command.POP:
            s.pop()
        return None

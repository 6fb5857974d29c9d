#!/usr/bin/env python3
"""Command line entry point.

Usage:
    polycalc < input.txt                 # read commands from standard input
    polycalc a.txt b.txt                 # process files as one line stream
    polycalc --log-level DEBUG a.txt     # trace every command on stderr
"""
from __future__ import annotations
import fileinput
import logging
from pathlib import Path
from typing import List, Optional

import typer

from calc import Calculator
from config import INPUT_ENCODING, INPUT_ERRORS, LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger("polycalc.main")

app = typer.Typer(
    name="polycalc",
    help="Stack calculator for sparse multivariate polynomials",
    add_completion=False,
)


def setup_logging(level: str = LOG_LEVEL) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    for h in list(root.handlers):
        if h.get_name() == "polycalc":
            root.removeHandler(h)
    handler = logging.StreamHandler()
    handler.set_name("polycalc")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


@app.command()
def main(
    files: Optional[List[Path]] = typer.Argument(
        None, exists=True, dir_okay=False, readable=True,
        help="Input files, standard input when omitted",
    ),
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", "-l", help="Logging level"),
) -> None:
    """Evaluate polynomial calculator commands, one per line."""
    setup_logging(log_level)
    calc = Calculator()
    sources = [str(f) for f in files] if files else ["-"]
    try:
        with fileinput.input(sources, mode="rb") as lines:
            calc.run(line.decode(INPUT_ENCODING, INPUT_ERRORS) for line in lines)
    except MemoryError:
        logger.critical("out of memory")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

"""Line-oriented interactive front end.

Each line is one expression, evaluated against a single long-lived
environment. An error aborts that evaluation and the environment is replaced
by a fresh one, since a partially evaluated environment is not reused.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.printer import print_cell

logger = logging.getLogger(__name__)

BANNER = "Welcome to sprig!"
PROMPT = "> "


def repl(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    interp: Optional[Interpreter] = None,
) -> None:
    interp = interp if interp is not None else Interpreter()
    print(BANNER, file=stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        if not line.strip():
            continue
        try:
            output = print_cell(interp.eval(line))
        except (SprigError, RecursionError) as ex:
            logger.debug("evaluation aborted: %r", ex)
            print(f"error: {ex}", file=stdout)
            interp.reset()
            continue
        print(output, file=stdout)

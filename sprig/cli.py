from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sprig import config
from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.printer import print_cell
from sprig.repl import repl
from sprig.server import serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sprig", description="Sprig Lisp interpreter")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--repl", action="store_true", help="interactive prompt (default)")
    mode.add_argument("--server", action="store_true", help="serve POST /submit-code over HTTP")
    parser.add_argument("--addr", help="HOST:PORT to bind in server mode")
    parser.add_argument("--trace", action="store_true", help="log evaluator steps at DEBUG level")
    parser.add_argument("file", nargs="?", type=Path, help="evaluate every expression in FILE and print the last result")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    trace = args.trace or config.trace_enabled()
    logging.basicConfig(
        level=logging.DEBUG if trace else config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    trace_logger = logging.getLogger("sprig.trace") if trace else None

    if args.server:
        try:
            host, port = config.parse_addr(args.addr) if args.addr else config.get_server_addr()
        except ValueError as ex:
            print(f"sprig: {ex}", file=sys.stderr)
            return 2
        serve(host, port, trace_logger)
        return 0

    if args.file is not None:
        try:
            result = Interpreter(trace_logger).load(args.file.read_text(encoding="utf-8"))
            output = print_cell(result)
        except (SprigError, RecursionError) as ex:
            print(f"error: {ex}", file=sys.stderr)
            return 1
        print(output)
        return 0

    repl(interp=Interpreter(trace_logger))
    return 0


if __name__ == "__main__":
    sys.exit(main())

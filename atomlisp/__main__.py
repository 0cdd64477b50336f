"""Console shell: python -m atomlisp [FILE ...]

With files, evaluates each one in turn and exits. Without, reads a line at a
time, evaluates it and prints the value or the error, until EOF or Ctrl-C.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from atomlisp.config import get_settings
from atomlisp.errors import AtomError
from atomlisp.interpreter import Interpreter

PROMPT = ">> "


def repl(itp: Interpreter) -> None:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print("CTRL-D")
            break
        except KeyboardInterrupt:
            print("CTRL-C")
            break
        if not line.strip():
            continue
        print(itp.rep(line))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="atomlisp", description="atomlisp interpreter")
    parser.add_argument("files", nargs="*", type=Path, help="source files to evaluate")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the bootstrap prelude")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    with Interpreter(prelude=not args.no_prelude, settings=settings) as itp:
        if not args.files:
            repl(itp)
            return 0
        for path in args.files:
            try:
                itp.eval(path.read_text(encoding="utf-8"))
            except (AtomError, OSError) as e:
                print(f"{path}: Error: {e}", file=sys.stderr)
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

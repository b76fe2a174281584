"""Command-line entry point: run one .asa source file.

    asa program.asa [--tree] [--debug]

ASA_PPRINT_OPTIONS may hold JSON options for the --tree printer.

Output from `print` goes to stdout; parse and evaluation errors are reported
on stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import Optional, Sequence

from asa import config
from asa.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json, plain_options, pprint_node
from asa.errors import AsaError, AsaSyntaxError
from asa.interpreter import Interpreter

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asa", description="Run an asa program.")
    parser.add_argument("file", help=f"source file to run (must end in {config.SOURCE_SUFFIX})")
    parser.add_argument("--tree", action="store_true", help="print the parse tree before running")
    parser.add_argument("--debug", action="store_true", help="debug logging and Python tracebacks")
    return parser


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        level = logging.DEBUG if args.debug else config.get_log_level()
        recursion_limit = config.get_recursion_limit()
    except ValueError as ex:
        return _fail(str(ex))
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if recursion_limit is not None:
        sys.setrecursionlimit(recursion_limit)

    if not config.has_source_suffix(args.file):
        return _fail(f"files must end in {config.SOURCE_SUFFIX}")

    try:
        with open(args.file, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as ex:
        return _fail(f"could not read {args.file}: {ex.strerror or ex}")

    interp = Interpreter()
    try:
        program = interp.parse(code)
    except AsaSyntaxError as ex:
        return _fail(f"parse error: {ex}")

    if args.tree:
        raw_options = config.get_pprint_options()
        options = load_options_from_json(raw_options) if raw_options else DEFAULT_OPTIONS
        if not sys.stdout.isatty():
            options = plain_options(options)
        print(pprint_node(program, options))

    try:
        result = interp.run(program)
    except AsaError as ex:
        if args.debug:
            traceback.print_exc()
        return _fail(str(ex))
    except RecursionError:
        return _fail("maximum recursion depth exceeded")

    logger.debug("program finished with %r", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI: python -m sexpcalc [-e EXPR] — read-eval-print loop over stdin."""

import argparse
import logging
import sys

from .calc import calculate
from .types import DEFAULT_MAX_DEPTH, Config

BANNER = """Expression parser, exit with: exit || quit
Valid Expressions examples:
\t (+ 10 10 10)
\t (+ 10 (* 5 2) (- 8 3) (/ 20 4))"""

EXIT_COMMANDS = ("exit", "quit")


def format_result(result: dict) -> str:
    if result["ok"]:
        return f"Result: {result['value']}"
    return result["error"]


def repl(stdin, stdout, config: Config) -> None:
    for line in stdin:
        line = line.strip()
        if line in EXIT_COMMANDS:
            break
        if not line:
            continue
        print(format_result(calculate(line, config)), file=stdout, flush=True)


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog="sexpcalc", description="Evaluate prefix arithmetic S-expressions."
    )
    ap.add_argument("-e", "--expr", help="evaluate one expression and exit")
    ap.add_argument("--strict", action="store_true",
                    help="report syntax errors with their own message")
    ap.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                    help="maximum nesting depth (default: %(default)s)")
    ap.add_argument("--no-banner", action="store_true", help="do not print the banner")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = Config(max_depth=args.max_depth, strict=args.strict)

    if args.expr is not None:
        result = calculate(args.expr, config)
        print(format_result(result))
        return 0 if result["ok"] else 1

    if not args.no_banner:
        print(BANNER)
    repl(sys.stdin, sys.stdout, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line entry point: parse a Lox expression and print its tree.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .parser.config import ParserConfig, parse_max_depth
from .parser.parser import parse_string, parse_file
from .parser.printer import AstPrinter

EXIT_OK = 0
EXIT_DATA_ERROR = 65   # EX_DATAERR: malformed input
EXIT_IO_ERROR = 74     # EX_IOERR


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxparse",
        description="Parse a Lox expression and print it fully parenthesized",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxparse "1 + 2 * 3"            # (+ 1 (* 2 3))
    loxparse -f expr.lox            # Parse the contents of a file
    loxparse --max-depth 8 "((1))"  # Tighter nesting limit
    loxparse "-(1)"                 # Leading '-' is taken as the expression
    loxparse -- -false              # Use '--' when it could be mistaken for an option
        """
    )

    parser.add_argument('expression', nargs='?',
                        help='Expression source text')
    parser.add_argument('-f', '--file',
                        help='Read the expression from a file')

    parser.add_argument('--max-depth', default=None,
                        help='Maximum nesting of groupings and unary operators (0 = unlimited)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log scanner and parser activity to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    arg_parser = build_arg_parser()
    args, extras = arg_parser.parse_known_args(argv)

    # Negated expressions such as "-(1)" look like unknown options
    if extras:
        if args.expression is None and len(extras) == 1 and not extras[0].startswith("--"):
            args.expression = extras[0]
        else:
            arg_parser.error(f"unrecognized arguments: {' '.join(extras)}")
    if (args.expression is None) == (args.file is None):
        arg_parser.error("give exactly one of an expression or -f/--file")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    overrides = {}
    try:
        if args.max_depth is not None:
            overrides["max_depth"] = parse_max_depth(args.max_depth)
        config = ParserConfig.from_env(**overrides)
    except ValueError as e:
        arg_parser.error(str(e))

    try:
        if args.file:
            result = parse_file(args.file, config, require_end=True)
        else:
            result = parse_string(args.expression, config=config, require_end=True)
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return EXIT_IO_ERROR

    if not result.ok:
        for error in result.lexer_errors:
            print(f"[line {error.location.line}] Error: {error.message}", file=sys.stderr)
        for error in result.parse_errors:
            print(error, file=sys.stderr)
        return EXIT_DATA_ERROR

    print(AstPrinter().print(result.expression))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

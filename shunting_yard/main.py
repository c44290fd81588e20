# main.py

"""
Command-line entry point.

    $ shunting-yard '2 + 3 * 4'
    14
    $ shunting-yard -5!
    -120

All arguments that are not options are joined with single spaces into one
expression, so negative numbers and `--3` reach the evaluator untouched.
The result goes to stdout; diagnostics go to stderr.

Exit status: 0 on success, 1 for an invalid expression, 2 for invalid
settings.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .codec import trim_double
from .config import load_settings
from .errors import ExpressionError
from .evaluator import evaluate
from .reporter import report_error

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def join_argv(args: Sequence[str]) -> str:
    """Concatenate the arguments, separated by single spaces."""
    return " ".join(args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shunting-yard",
        description="Evaluate an arithmetic expression (+ - * / ^ !, parentheses).",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        help="Terminal width used for error excerpts (default: 80, env CALC_TERM_WIDTH).",
    )
    parser.add_argument(
        "-p", "--precision",
        type=int,
        help="Digits after the decimal point before trimming (default: 12, env CALC_PRECISION).",
    )
    parser.add_argument(
        "-e", "--exponent-threshold",
        type=int,
        help="Exponent at which results switch to scientific notation (default: 12).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each applied operator to stderr.",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the calculator.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        The process exit status.
    """
    parser = build_parser()
    options, words = parser.parse_known_args(sys.argv[1:] if argv is None else argv)

    try:
        settings = load_settings(
            term_width=options.width,
            precision=options.precision,
            exponent_threshold=options.exponent_threshold,
            log_level="DEBUG" if options.verbose else None,
        )
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level)

    expression = join_argv(words)
    logger.debug("Evaluating %r", expression)
    try:
        result = evaluate(expression)
    except ExpressionError as e:
        report_error(e, expression, stream=sys.stderr, term_width=settings.term_width)
        return EXIT_FAILURE

    print(trim_double(result, settings.precision, settings.exponent_threshold))
    return EXIT_SUCCESS


def run():
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

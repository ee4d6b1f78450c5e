"""Command line entry point.

Usage: intcalc "(2 x 3) ^ 2"

Quote the expression, or the shell expands characters such as ``(`` and
``^``. Several arguments are joined with spaces.
"""

import argparse
import logging
import math
import sys
import typing as t

from intcalc.calculator import calculate
from intcalc.config import LOG_FORMAT, LOG_LEVEL, MAX_RESULT_BITS, Settings
from intcalc.errors import DomainError, ParseError
from intcalc.evaluator import evaluate_postfix
from intcalc.symbols import UNARY_MARKER

logger = logging.getLogger(__name__)

# Column the values line up on.
POSTFIX_LABEL: t.Final = "Postfix expression: "
EVALUATION_LABEL: t.Final = "Evaluation:         "
ERROR_LABEL: t.Final = "Error:              "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intcalc",
        description="Evaluate an integer expression with + - x / % ^ and parentheses.",
    )
    parser.add_argument("expression", nargs="+", help="the expression to evaluate")
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="read the expression as space separated postfix text",
    )
    parser.add_argument(
        "--unary-symbol",
        default=UNARY_MARKER,
        help="how unary minus is written in postfix text (default: %(default)s)",
    )
    parser.add_argument(
        "--max-bits",
        type=int,
        default=MAX_RESULT_BITS,
        help="largest result of ^ in bits (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser


def allow_result_digits(max_bits: int) -> None:
    """Raise the interpreter's int to str digit limit to fit ``max_bits``.

    The limit is never lowered, 0 means it is already disabled.
    """
    digits = math.ceil(max_bits * math.log10(2)) + 1
    current = sys.get_int_max_str_digits()
    if current and current < digits:
        logger.debug("Raising the int digit limit from %d to %d", current, digits)
        sys.set_int_max_str_digits(digits)


def main(argv: t.Sequence[str] | None = None) -> int:
    """Run the calculator and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    expression = " ".join(args.expression).strip()
    if not expression:
        parser.error("the expression is empty")

    try:
        settings = Settings(
            unary_symbol=args.unary_symbol,
            max_result_bits=args.max_bits,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    allow_result_digits(settings.max_result_bits)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.debug("Evaluating %r with %s", expression, settings)

    if args.postfix:
        try:
            value = evaluate_postfix(expression, settings)
        except (ValueError, IndexError) as e:
            print(f"{ERROR_LABEL}{e}", file=sys.stderr)
            return 1
        if isinstance(value, DomainError):
            print(f"{ERROR_LABEL}{value.message}", file=sys.stderr)
            return 1
        print(f"{EVALUATION_LABEL}{value}")
        return 0

    result = calculate(expression, settings)

    if isinstance(result, ParseError):
        print(expression, file=sys.stderr)
        print(result.message, file=sys.stderr)
        return 1

    if isinstance(result, DomainError):
        print(f"{ERROR_LABEL}{result.message}", file=sys.stderr)
        return 1

    print(f"{POSTFIX_LABEL}{result.postfix.render(settings.unary_symbol)}")
    print(f"{EVALUATION_LABEL}{result.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

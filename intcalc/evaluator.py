"""Evaluator.

A stack machine reducing a postfix expression to a single integer.

    - A numeral is pushed.
    - Unary minus negates the top of the stack.
    - A binary operator pops its right operand, then its left operand, and
    pushes the result.

All arithmetic stays in the integers: division truncates toward zero, the
remainder takes the sign of the dividend and exponentiation is exact. An
operation without an integer result, or with one longer than the
configured number of bits, stops the evaluation and its
DomainError is returned instead of a value.
"""

import logging
import typing as t

from intcalc.config import DEFAULT_SETTINGS, MAX_NUMERAL_DIGITS, Settings
from intcalc.converter import SEPARATOR, PostfixExpression, parse_postfix
from intcalc.errors import DomainError, DomainErrorKind
from intcalc.stack import Stack
from intcalc.symbols import Operator
from intcalc.tokens import TokenKind

logger = logging.getLogger(__name__)

BinaryOperation = t.Callable[[int, int, Settings], int | DomainError]


def truncating_divide(dividend: int, divisor: int, /) -> int:
    """Divide, rounding toward zero. The divisor must not be zero."""
    # Python's // rounds toward negative infinity.
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def truncating_remainder(dividend: int, divisor: int, /) -> int:
    """Remainder of truncating_divide(), it has the sign of the dividend."""
    return dividend - divisor * truncating_divide(dividend, divisor)


def integer_power(base: int, exponent: int, /, max_bits: int) -> int | None:
    """Raise ``base`` to ``exponent`` by repeated squaring.

    A negative exponent truncates toward zero like division does, so only
    bases of 1 and -1 give a non-zero result.

    Returns:
        int | None: The exact power, or None if it has more than
        ``max_bits`` bits.

    """
    if exponent < 0:
        if base == 1:
            return 1
        if base == -1:
            return -1 if exponent % 2 else 1
        return 0

    result = 1
    while exponent:
        if exponent & 1:
            result *= base
            if result.bit_length() > max_bits:
                return None
        exponent >>= 1
        if exponent:
            # This square is part of the result, so it has to fit as well.
            base *= base
            if base.bit_length() > max_bits:
                return None
    return result


def _add(left: int, right: int, settings: Settings) -> int:
    return left + right


def _subtract(left: int, right: int, settings: Settings) -> int:
    return left - right


def _multiply(left: int, right: int, settings: Settings) -> int:
    return left * right


def _divide(left: int, right: int, settings: Settings) -> int | DomainError:
    if right == 0:
        return DomainError(DomainErrorKind.DIVISION_BY_ZERO)
    return truncating_divide(left, right)


def _modulo(left: int, right: int, settings: Settings) -> int | DomainError:
    if right == 0:
        return DomainError(DomainErrorKind.DIVISION_BY_ZERO)
    return truncating_remainder(left, right)


def _power(left: int, right: int, settings: Settings) -> int | DomainError:
    if left == 0 and right == 0:
        return DomainError(DomainErrorKind.ZERO_POWER_ZERO)
    if left == 0 and right < 0:
        # 0^-n is 1 / 0^n.
        return DomainError(DomainErrorKind.DIVISION_BY_ZERO)
    result = integer_power(left, right, max_bits=settings.max_result_bits)
    if result is None:
        return DomainError(DomainErrorKind.OVERFLOW, settings.max_result_bits)
    return result


# Define a map for operator execution, operands in (left, right) order.
operator_map: t.Final[dict[Operator, BinaryOperation]] = {
    "+": _add,
    "-": _subtract,
    "x": _multiply,
    "/": _divide,
    "%": _modulo,
    "^": _power,
}


def evaluate(
    postfix: PostfixExpression,
    /,
    settings: Settings = DEFAULT_SETTINGS,
) -> int | DomainError:
    """Evaluate a postfix expression.

    Returns:
        int | DomainError: The value, or the error of the first operation
        that has no integer result.

    Raises:
        IndexError: If ``postfix`` does not describe a complete expression,
            converted expressions never do this.

    """
    operands: t.Final[Stack[int]] = Stack()

    for term in postfix.terms:
        if term.kind is TokenKind.NUMERAL:
            operands.push(int(term.symbol))
            continue

        if term.kind is TokenKind.UNARY_MINUS:
            operands.push(-operands.pop())
            continue

        right = operands.pop()
        left = operands.pop()
        result = operator_map[t.cast(Operator, term.symbol)](left, right, settings)
        if not isinstance(result, DomainError) and result.bit_length() > settings.max_result_bits:
            # e.g: a long chain of x, or adding to the largest numeral.
            result = DomainError(DomainErrorKind.OVERFLOW, settings.max_result_bits)
        if isinstance(result, DomainError):
            logger.info(
                "Evaluation stopped at %s: %s",
                term.symbol,
                result.kind.value,
            )
            return result
        operands.push(result)

    value = operands.pop()
    if not operands.is_empty():
        msg = f"Postfix expression left {len(operands) + 1} values on the stack"
        raise IndexError(msg)

    logger.debug("Evaluated %r to a %d bit value", postfix.render(), value.bit_length())
    return value


def evaluate_postfix(
    text: str,
    /,
    settings: Settings = DEFAULT_SETTINGS,
) -> int | DomainError:
    """Evaluate postfix text such as ``"2 3 x 2 ^"``.

    Raises:
        ValueError: If the text holds something other than numerals and
            operators.

    """
    stripped = text.strip()
    if (
        SEPARATOR not in stripped
        and len(stripped) <= MAX_NUMERAL_DIGITS
        and stripped.isascii()
        and stripped.isdigit()
    ):
        # A lone numeral.
        return int(stripped)
    return evaluate(parse_postfix(text, settings.unary_symbol), settings)

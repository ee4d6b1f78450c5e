"""Validator.

A single pass over the preprocessed tokens checking that operands and
operators alternate and parentheses balance. The scan stops at the first
problem and reports it with the column of the offending character.

Running state:
    expecting_operand: True at the start and after ``(``, unary minus or a
        binary operator.
    operand_open: True while reading a run of digits.
    operand_found: A complete operand (digits closed by whitespace, or a
        parenthesised group) has been read since the last binary operator.
    binary_operator_found: A binary operator was read since the last digit
        or ``)``.
    numeral_start, numeral_length: Where the current run of digits began and
        how long it is, numerals may not exceed MAX_NUMERAL_DIGITS.

operand_found and binary_operator_found catch operands placed next to each
other, e.g. ``2 3``.
"""

import dataclasses
import logging
import typing as t

from intcalc.config import MAX_NUMERAL_DIGITS
from intcalc.errors import ParseError
from intcalc.preprocessor import Expression
from intcalc.stack import Stack
from intcalc.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ValidatedExpression:
    """An expression that is known to be well formed.

    Only validate() creates these, which lets the converter rely on correct
    operator arity and balanced parentheses.
    """

    expression: Expression

    @property
    def text(self) -> str:
        return self.expression.text

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.expression.tokens


def _error(description: str, position: int) -> ParseError:
    logger.info("Invalid expression at column %d: %s", position, description)
    return ParseError(description, position)


def validate(expression: Expression, /) -> ValidatedExpression | ParseError:
    """Check that ``expression`` is well formed.

    Returns:
        ValidatedExpression | ParseError: The validated expression, or the
        first error found in scan order.

    """
    open_parens: t.Final[Stack[Token]] = Stack()
    expecting_operand = True
    operand_open = False
    operand_found = False
    binary_operator_found = False
    numeral_start = 0
    numeral_length = 0

    for token in expression.tokens:
        kind = token.kind
        position = token.position

        if kind is TokenKind.WHITESPACE:
            if operand_open:
                # Whitespace ends the current run of digits.
                operand_found = True
                operand_open = False
            continue

        if kind is TokenKind.INVALID:
            return _error(
                f"Unexpected symbol '{token.symbol}' found at position {position + 1}.",
                position,
            )

        if kind is TokenKind.DIGIT:
            if operand_found and not binary_operator_found:
                # Two operands with nothing in between. e.g: 2 3
                return _error(f"Expected operator at position {position + 1}.", position)
            if not operand_open:
                numeral_start = position
                numeral_length = 0
            numeral_length += 1
            if numeral_length > MAX_NUMERAL_DIGITS:
                return _error(
                    f"Numeral longer than {MAX_NUMERAL_DIGITS} digits at position {numeral_start + 1}.",
                    numeral_start,
                )
            binary_operator_found = False
        elif kind is TokenKind.BINARY_OPERATOR:
            binary_operator_found = True
            operand_found = False

        if kind in (TokenKind.BINARY_OPERATOR, TokenKind.RIGHT_PAREN):
            if expecting_operand:
                # e.g: 1 + x 2, ()
                return _error(
                    f"Expected operand, but found '{token.symbol}' at position {position + 1}.",
                    position,
                )
        elif kind is not TokenKind.DIGIT and not expecting_operand:
            # A ( or unary minus straight after an operand. e.g: 2 (3)
            return _error(
                f"Expected operator, but found '{token.symbol}' at position {position + 1}.",
                position,
            )

        if kind is TokenKind.LEFT_PAREN:
            open_parens.push(token)
        elif kind is TokenKind.RIGHT_PAREN:
            if open_parens.is_empty():
                return _error(f"Unmatched ')' found at position {position + 1}.", position)
            open_parens.pop()
            # A closed group counts as a complete operand. e.g: (2) 3
            binary_operator_found = False
            operand_found = True

        operand_open = kind is TokenKind.DIGIT
        expecting_operand = kind in (
            TokenKind.LEFT_PAREN,
            TokenKind.UNARY_MINUS,
            TokenKind.BINARY_OPERATOR,
        )

    length = len(expression.text)
    if expecting_operand:
        # Empty input, or a trailing operator. e.g: 1 +
        return _error(f"Missing operand at position {length + 1}.", length)

    if not open_parens.is_empty():
        # Report the most recently opened group.
        unmatched = open_parens.pop()
        return _error(
            f"Unmatched '(' found at position {unmatched.position + 1}.",
            unmatched.position,
        )

    logger.debug("Validated %r", expression.text)
    return ValidatedExpression(expression)

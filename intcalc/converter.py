"""Converter.

Infix to postfix conversion using the shunting-yard algorithm.

1) Scan the validated tokens left to right.
    - A run of digits becomes one NUMERAL term and goes straight to the
    output.
    - ``(`` is pushed onto the operator stack.
    - ``)`` moves operators from the stack to the output until the matching
    ``(``, which is discarded.
    - Unary minus is pushed without popping anything, it binds tighter than
    every binary operator and applies to exactly one operand.
    - A binary operator first moves every stacked operator that binds at
    least as tightly to the output, then is pushed. A right associative
    operator leaves stacked operators of equal precedence in place, so
    ``2 ^ 3 ^ 2`` groups as ``2 ^ (3 ^ 2)``.

2) Move whatever is left on the stack to the output.
"""

import dataclasses
import logging
import typing as t

from intcalc.config import DEFAULT_SETTINGS, MAX_NUMERAL_DIGITS
from intcalc.stack import Stack
from intcalc.symbols import (
    is_binary_operator,
    is_left_associative,
    precedence,
)
from intcalc.tokens import Token, TokenKind
from intcalc.validator import ValidatedExpression

logger = logging.getLogger(__name__)

SEPARATOR: t.Final = " "


@dataclasses.dataclass(frozen=True, slots=True)
class PostfixExpression:
    """An expression in postfix order.

    Args:
        terms: NUMERAL, UNARY_MINUS and BINARY_OPERATOR tokens only.

    """

    terms: tuple[Token, ...]

    def render(self, unary_symbol: str = DEFAULT_SETTINGS.unary_symbol) -> str:
        """Join the terms with single spaces.

        Args:
            unary_symbol: How unary minus is written. Defaults to the marker
                so the text can be read back by parse_postfix().

        """
        return SEPARATOR.join(
            unary_symbol if term.kind is TokenKind.UNARY_MINUS else term.symbol
            for term in self.terms
        )

    def __str__(self) -> str:
        return self.render()


def _pops_before(incoming: str, top: Token) -> bool:
    """Return True if ``top`` has to be output before ``incoming`` is pushed."""
    if not top.is_operator:
        return False
    incoming_precedence = precedence(incoming)
    top_precedence = precedence(top.operator)
    if top_precedence == incoming_precedence:
        return is_left_associative(incoming)
    return top_precedence > incoming_precedence


def convert(validated: ValidatedExpression, /) -> PostfixExpression:
    """Convert a validated infix expression to postfix order."""
    operators: t.Final[Stack[Token]] = Stack()
    output: t.Final[list[Token]] = []
    digits: list[Token] = []

    def flush_numeral() -> None:
        if digits:
            numeral = "".join(digit.symbol for digit in digits)
            output.append(Token(numeral, TokenKind.NUMERAL, digits[0].position))
            digits.clear()

    for token in validated.tokens:
        kind = token.kind

        if kind is TokenKind.DIGIT:
            digits.append(token)
            continue

        if kind is TokenKind.WHITESPACE:
            # Validation guarantees whitespace never splits a numeral, so the
            # run may stay open across it.
            continue

        flush_numeral()

        if kind in (TokenKind.LEFT_PAREN, TokenKind.UNARY_MINUS):
            operators.push(token)
        elif kind is TokenKind.RIGHT_PAREN:
            while operators.peek().kind is not TokenKind.LEFT_PAREN:
                output.append(operators.pop())
            operators.pop()
        elif kind is TokenKind.BINARY_OPERATOR:
            while not operators.is_empty() and _pops_before(token.operator, operators.peek()):
                output.append(operators.pop())
            operators.push(token)

    flush_numeral()
    while not operators.is_empty():
        output.append(operators.pop())

    postfix = PostfixExpression(tuple(output))
    logger.debug("Converted %r to postfix %r", validated.text, postfix.render())
    return postfix


def parse_postfix(
    text: str,
    /,
    unary_symbol: str = DEFAULT_SETTINGS.unary_symbol,
) -> PostfixExpression:
    """Read postfix text back into terms.

    Terms are separated by any whitespace. Positions refer to ``text``.

    Raises:
        ValueError: If a term is neither a numeral nor an operator, or a
            numeral is longer than MAX_NUMERAL_DIGITS.

    """
    terms: t.Final[list[Token]] = []
    position = 0
    for term in text.split():
        position = text.index(term, position)
        if term.isascii() and term.isdigit():
            if len(term) > MAX_NUMERAL_DIGITS:
                msg = f"Numeral longer than {MAX_NUMERAL_DIGITS} digits at position {position + 1}"
                raise ValueError(msg)
            kind = TokenKind.NUMERAL
        elif term == unary_symbol:
            kind = TokenKind.UNARY_MINUS
        elif is_binary_operator(term):
            kind = TokenKind.BINARY_OPERATOR
        else:
            msg = f"Unexpected postfix term {term!r} at position {position + 1}"
            raise ValueError(msg)
        terms.append(Token(term, kind, position))
        position += len(term)
    return PostfixExpression(tuple(terms))

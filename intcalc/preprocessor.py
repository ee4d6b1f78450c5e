"""Preprocessor.

Turns raw user text into classified tokens in one left to right pass.

The only ambiguity in the input language is ``-``: it is a binary operator
after an operand or ``)``, and unary negation everywhere else. A running
"expecting operand" flag decides which one applies:

    - It starts True, an expression has to begin with an operand.
    - ``(`` and every binary operator (``-`` included) set it to True.
    - Digits, ``)`` and unknown symbols set it to False.
    - Whitespace leaves it unchanged.

Unknown symbols do not stop the scan, the first one is reported and the
remaining text is still classified so the display text is always complete.
"""

import dataclasses
import logging
import typing as t

from intcalc.errors import ParseError
from intcalc.symbols import (
    is_binary_operator,
    is_digit,
    is_whitespace,
)
from intcalc.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Expression:
    """A classified, not yet validated, expression.

    Args:
        text: The display text exactly as the user wrote it.
        tokens: One token per character of ``text``.

    """

    text: str
    tokens: tuple[Token, ...]


def _classify(symbol: str, expecting_operand: bool) -> TokenKind:
    if is_whitespace(symbol):
        return TokenKind.WHITESPACE
    if is_digit(symbol):
        return TokenKind.DIGIT
    if symbol == "-" and expecting_operand:
        return TokenKind.UNARY_MINUS
    if is_binary_operator(symbol):
        return TokenKind.BINARY_OPERATOR
    if symbol == "(":
        return TokenKind.LEFT_PAREN
    if symbol == ")":
        return TokenKind.RIGHT_PAREN
    return TokenKind.INVALID


def preprocess(text: str, /) -> tuple[Expression, ParseError | None]:
    """Classify every character of ``text``.

    Returns:
        tuple[Expression, ParseError | None]: The expression, and the error
        for the first unexpected symbol if there is one.

    """
    tokens: t.Final[list[Token]] = []
    error: ParseError | None = None
    expecting_operand = True

    for position, symbol in enumerate(text):
        kind = _classify(symbol, expecting_operand)
        tokens.append(Token(symbol, kind, position))

        if kind is TokenKind.WHITESPACE:
            continue

        if kind is TokenKind.INVALID and error is None:
            error = ParseError(
                f"Unexpected symbol '{symbol}' found at position {position + 1}.",
                position,
            )
            logger.info("Unexpected symbol %r at column %d", symbol, position)

        expecting_operand = kind in (
            TokenKind.LEFT_PAREN,
            TokenKind.UNARY_MINUS,
            TokenKind.BINARY_OPERATOR,
        )

    expression = Expression(text, tuple(tokens))
    logger.debug("Preprocessed %r into %d tokens", text, len(expression.tokens))
    return expression, error

"""Tests for intcalc.preprocessor."""

import pytest

from intcalc.preprocessor import preprocess
from intcalc.tokens import TokenKind

D = TokenKind.DIGIT
B = TokenKind.BINARY_OPERATOR
U = TokenKind.UNARY_MINUS
L = TokenKind.LEFT_PAREN
R = TokenKind.RIGHT_PAREN
W = TokenKind.WHITESPACE


@pytest.mark.parametrize("text,kinds", [
    ("-3 + 4", [U, D, W, B, W, D]),
    ("2 - -3", [D, W, B, W, U, D]),
    ("2 --3", [D, W, B, U, D]),
    ("--1", [U, U, D]),
    ("(-1)", [L, U, D, R]),
    ("(1)-1", [L, D, R, B, D]),
    ("2 ^ -1", [D, W, B, W, U, D]),
    ("-(1x2)", [U, L, D, B, D, R]),
    ("1\t-\n1", [D, W, B, W, D]),
])
def test_unary_minus_is_told_apart_from_subtraction(text, kinds):
    expression, error = preprocess(text)

    assert error is None
    assert [token.kind for token in expression.tokens] == kinds


def test_display_text_keeps_the_minus_sign():
    expression, _ = preprocess("-(-2)")

    assert expression.text == "-(-2)"
    assert "".join(token.symbol for token in expression.tokens) == "-(-2)"
    assert expression.tokens[0].operator == "~"


def test_positions_point_into_the_display_text():
    expression, _ = preprocess(" 12 x 3")

    assert [token.position for token in expression.tokens] == list(range(7))


@pytest.mark.parametrize("text,symbol,position", [
    ("1=2", "=", 1),
    ("5 * 5", "*", 2),
    ("2.5", ".", 1),
    ("2²", "²", 1),
    ("五-五", "五", 0),
    ("1 + 2\r", "\r", 5),
])
def test_unexpected_symbol(text, symbol, position):
    _, error = preprocess(text)

    assert error is not None
    assert error.position == position
    assert error.description == (
        f"Unexpected symbol '{symbol}' found at position {position + 1}."
    )


def test_only_the_first_unexpected_symbol_is_reported():
    expression, error = preprocess("1 = 2 ? 3")

    assert error is not None
    assert error.description == "Unexpected symbol '=' found at position 3."
    assert error.message == "  ^ Unexpected symbol '=' found at position 3."
    # Scanning continues past the error.
    assert expression.text == "1 = 2 ? 3"
    assert len(expression.tokens) == 9
    assert expression.tokens[6].kind is TokenKind.INVALID


def test_empty_text():
    expression, error = preprocess("")

    assert error is None
    assert expression.tokens == ()

"""Tests for intcalc.symbols."""

import pytest

from intcalc import symbols


@pytest.mark.parametrize("symbol", list("0123456789"))
def test_is_digit_accepts_ascii_digits(symbol):
    assert symbols.is_digit(symbol)


# isdigit() would allow most of these, we should not.
@pytest.mark.parametrize("symbol", ["a", "²", "½", "五", "٣", " ", "", "12"])
def test_is_digit_rejects_everything_else(symbol):
    assert not symbols.is_digit(symbol)


@pytest.mark.parametrize("symbol,expected", [
    (" ", True),
    ("\t", True),
    ("\n", True),
    ("\r", False),
    ("\x0b", False),
    ("1", False),
])
def test_is_whitespace(symbol, expected):
    assert symbols.is_whitespace(symbol) is expected


@pytest.mark.parametrize("symbol", list("+-x/%^"))
def test_binary_operators(symbol):
    assert symbols.is_binary_operator(symbol)
    assert symbols.is_operator(symbol)
    assert not symbols.is_unary_operator(symbol)


@pytest.mark.parametrize("symbol", ["*", "X", "**", "//", "=", "~"])
def test_not_binary_operators(symbol):
    assert not symbols.is_binary_operator(symbol)


def test_unary_marker_is_the_only_unary_operator():
    assert symbols.is_unary_operator(symbols.UNARY_MARKER)
    assert symbols.is_operator(symbols.UNARY_MARKER)
    assert not symbols.is_unary_operator("-")


@pytest.mark.parametrize("symbol,expected", [
    ("(", True),
    (")", True),
    ("[", False),
    ("{", False),
])
def test_is_parenthesis(symbol, expected):
    assert symbols.is_parenthesis(symbol) is expected


@pytest.mark.parametrize("symbol,expected", [
    ("~", 4),
    ("^", 3),
    ("x", 2),
    ("/", 2),
    ("%", 2),
    ("+", 1),
    ("-", 1),
    ("(", symbols.NOT_FOUND),
    ("7", symbols.NOT_FOUND),
    ("*", symbols.NOT_FOUND),
])
def test_precedence(symbol, expected):
    assert symbols.precedence(symbol) == expected


def test_only_exponentiation_is_right_associative():
    assert not symbols.is_left_associative("^")
    for symbol in "+-x/%~":
        assert symbols.is_left_associative(symbol)


def test_precedence_table_is_read_only():
    with pytest.raises(TypeError):
        symbols.BINARY_OPERATORS["*"] = symbols.OperatorInfo(2)  # type: ignore[index]


@pytest.mark.parametrize("symbol,expected", [
    ("5", True),
    ("(", True),
    ("^", True),
    ("~", True),
    (" ", False),
    ("=", False),
    (".", False),
])
def test_is_valid(symbol, expected):
    assert symbols.is_valid(symbol) is expected

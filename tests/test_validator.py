"""Tests for intcalc.validator."""

import pytest

from intcalc.config import MAX_NUMERAL_DIGITS
from intcalc.errors import ParseError
from intcalc.preprocessor import preprocess
from intcalc.validator import ValidatedExpression, validate


def _validate(text):
    expression, error = preprocess(text)
    assert error is None
    return validate(expression)


@pytest.mark.parametrize("text", [
    "1",
    "0",
    "-1",
    "--1",
    "-(1)",
    "2 ^ -3",
    "(((1)))",
    " 1\n+\t2 ",
    "2 x (3 - 1)",
    "2-(-3)",
    "(1+1) x (1+(1+2))",
    "123 % 45",
])
def test_well_formed(text):
    result = _validate(text)

    assert isinstance(result, ValidatedExpression)
    assert result.text == text


@pytest.mark.parametrize("text,description,position", [
    # Unmatched parentheses.
    ("(1 + 2", "Unmatched '(' found at position 1.", 0),
    ("1 + 2)", "Unmatched ')' found at position 6.", 5),
    ("((1 + 2)", "Unmatched '(' found at position 1.", 0),
    ("(1) + (2", "Unmatched '(' found at position 7.", 6),
    ("((1", "Unmatched '(' found at position 2.", 1),
    ("(4))", "Unmatched ')' found at position 4.", 3),
    # Missing operands.
    ("1 + ", "Missing operand at position 5.", 4),
    ("1 -", "Missing operand at position 4.", 3),
    ("2 ^ -", "Missing operand at position 6.", 5),
    ("", "Missing operand at position 1.", 0),
    ("   ", "Missing operand at position 4.", 3),
    ("(", "Missing operand at position 2.", 1),
    # Adjacent operands.
    ("2 3", "Expected operator at position 3.", 2),
    ("12 34", "Expected operator at position 4.", 3),
    ("1 x (2 3)", "Expected operator at position 8.", 7),
    ("(2)3", "Expected operator at position 4.", 3),
    ("(2) 3", "Expected operator at position 5.", 4),
    # Operators without operands.
    ("()", "Expected operand, but found ')' at position 2.", 1),
    ("+1", "Expected operand, but found '+' at position 1.", 0),
    ("1 + + 1", "Expected operand, but found '+' at position 5.", 4),
    ("(x2)", "Expected operand, but found 'x' at position 2.", 1),
    ("(1+)", "Expected operand, but found ')' at position 4.", 3),
    (")4(", "Expected operand, but found ')' at position 1.", 0),
    ("- x 1", "Expected operand, but found 'x' at position 3.", 2),
    # Operands without operators, implicit multiplication is not supported.
    ("2 (3)", "Expected operator, but found '(' at position 3.", 2),
    ("(2x3)(2x3)", "Expected operator, but found '(' at position 6.", 5),
])
def test_malformed(text, description, position):
    result = _validate(text)

    assert isinstance(result, ParseError)
    assert result.description == description
    assert result.position == position


def test_first_error_in_scan_order_wins():
    result = _validate("1 + 2) + (")

    assert isinstance(result, ParseError)
    assert result.description == "Unmatched ')' found at position 6."


def test_error_message_has_a_caret_under_the_column():
    result = _validate("1 + 2)")

    assert isinstance(result, ParseError)
    assert result.message == "     ^ Unmatched ')' found at position 6."
    assert str(result) == result.message


def test_unexpected_symbols_are_rejected():
    expression, _ = preprocess("1 = 2")

    result = validate(expression)

    assert isinstance(result, ParseError)
    assert result.description == "Unexpected symbol '=' found at position 3."


def test_longest_numeral_is_accepted():
    assert isinstance(_validate("9" * MAX_NUMERAL_DIGITS), ValidatedExpression)


@pytest.mark.parametrize("text,description,position", [
    ("1" * (MAX_NUMERAL_DIGITS + 1) + " + 1", f"Numeral longer than {MAX_NUMERAL_DIGITS} digits at position 1.", 0),
    ("5 + " + "1" * (MAX_NUMERAL_DIGITS + 1), f"Numeral longer than {MAX_NUMERAL_DIGITS} digits at position 5.", 4),
])
def test_numeral_too_long(text, description, position):
    result = _validate(text)

    assert isinstance(result, ParseError)
    assert result.description == description
    assert result.position == position

"""Integer calculator.

Parses an infix expression over integers, converts it to postfix and
evaluates it with integer-only arithmetic.
"""

from intcalc.calculator import Calculation, calculate, parse
from intcalc.config import DEFAULT_SETTINGS, Settings
from intcalc.converter import PostfixExpression, convert, parse_postfix
from intcalc.errors import DomainError, DomainErrorKind, ParseError
from intcalc.evaluator import evaluate, evaluate_postfix
from intcalc.preprocessor import Expression, preprocess
from intcalc.tokens import Token, TokenKind
from intcalc.validator import ValidatedExpression, validate

__all__ = [
    "DEFAULT_SETTINGS",
    "Calculation",
    "DomainError",
    "DomainErrorKind",
    "Expression",
    "ParseError",
    "PostfixExpression",
    "Settings",
    "Token",
    "TokenKind",
    "ValidatedExpression",
    "calculate",
    "convert",
    "evaluate",
    "evaluate_postfix",
    "parse",
    "parse_postfix",
    "preprocess",
    "validate",
]

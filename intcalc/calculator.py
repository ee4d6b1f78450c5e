"""The full pipeline: text to validated expression to postfix to value."""

import dataclasses
import logging

from intcalc.config import DEFAULT_SETTINGS, Settings
from intcalc.converter import PostfixExpression, convert
from intcalc.errors import DomainError, ParseError
from intcalc.evaluator import evaluate
from intcalc.preprocessor import preprocess
from intcalc.validator import ValidatedExpression, validate

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Calculation:
    """A successfully evaluated expression.

    Args:
        expression: The display text.
        postfix: The converted expression.
        value: The integer result.

    """

    expression: str
    postfix: PostfixExpression
    value: int


def parse(text: str, /) -> ValidatedExpression | ParseError:
    """Preprocess and validate ``text``.

    Returns:
        ValidatedExpression | ParseError: The expression, or the first syntax
        error. An unexpected symbol is reported ahead of structural problems.

    """
    expression, error = preprocess(text)
    if error is not None:
        return error
    return validate(expression)


def calculate(
    text: str,
    /,
    settings: Settings = DEFAULT_SETTINGS,
) -> Calculation | ParseError | DomainError:
    """Run every stage on ``text``."""
    parsed = parse(text)
    if isinstance(parsed, ParseError):
        return parsed

    postfix = convert(parsed)
    value = evaluate(postfix, settings)
    if isinstance(value, DomainError):
        return value

    logger.debug("Calculated %r", text)
    return Calculation(parsed.text, postfix, value)

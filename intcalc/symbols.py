"""Symbol classification and the operator precedence table.

Every predicate takes a single character. Unary minus never appears in
user input as its own character; the marker defined here is only used when
postfix text is rendered or read back.
"""

import dataclasses
import enum
import types
import typing as t

# Define Operator as a Literal for strict type checking on keys.
Operator = t.Literal["+", "-", "x", "/", "%", "^"]

UNARY_MARKER: t.Final = "~"

# Returned by precedence() for anything that is not an operator.
NOT_FOUND: t.Final = -1


class Associativity(enum.Enum):
    """Grouping of a chain of equal-precedence operators."""

    LEFT = "left"
    RIGHT = "right"


@dataclasses.dataclass(frozen=True, slots=True)
class OperatorInfo:
    """A single entry of the precedence table.

    Args:
        precedence: Higher values bind tighter.
        associativity: How chains of this operator group.

    """

    precedence: int
    associativity: Associativity = Associativity.LEFT


BINARY_OPERATORS: t.Final[t.Mapping[str, OperatorInfo]] = types.MappingProxyType(
    {
        "^": OperatorInfo(3, Associativity.RIGHT),
        "x": OperatorInfo(2),
        "/": OperatorInfo(2),
        "%": OperatorInfo(2),
        "+": OperatorInfo(1),
        "-": OperatorInfo(1),
    },
)

UNARY_OPERATORS: t.Final[t.Mapping[str, OperatorInfo]] = types.MappingProxyType(
    {UNARY_MARKER: OperatorInfo(4)},
)

WHITESPACE: t.Final = frozenset(" \t\n")


def is_digit(symbol: str, /) -> bool:
    """Return True for the ASCII digits 0 through 9."""
    # Direct comparison, isdigit() accepts superscripts and other scripts.
    return len(symbol) == 1 and "0" <= symbol <= "9"


def is_whitespace(symbol: str, /) -> bool:
    """Return True for space, tab and newline."""
    return symbol in WHITESPACE


def is_parenthesis(symbol: str, /) -> bool:
    return symbol in ("(", ")")


def is_binary_operator(symbol: str, /) -> t.TypeGuard[Operator]:
    """Type-safe helper to check if a character is a binary Operator.

    Args:
        symbol: The character that should be checked as an operator.

    Returns:
        bool: True, if the symbol is one of ``+ - x / % ^``.

    """
    return symbol in BINARY_OPERATORS


def is_unary_operator(symbol: str, /) -> bool:
    """Return True for the unary minus marker, the only unary operator."""
    return symbol in UNARY_OPERATORS


def is_operator(symbol: str, /) -> bool:
    return is_binary_operator(symbol) or is_unary_operator(symbol)


def is_valid(symbol: str, /) -> bool:
    """Return True if the symbol may appear in an expression.

    Whitespace is not a symbol and is not covered here.
    """
    return is_operator(symbol) or is_digit(symbol) or is_parenthesis(symbol)


def precedence(symbol: str, /) -> int:
    """Look up the precedence of an operator.

    Returns:
        int: The table value, or NOT_FOUND for anything else.

    """
    info = BINARY_OPERATORS.get(symbol) or UNARY_OPERATORS.get(symbol)
    return info.precedence if info is not None else NOT_FOUND


def is_left_associative(symbol: str, /) -> bool:
    # Only ^ is right associative.
    info = BINARY_OPERATORS.get(symbol)
    return info is None or info.associativity is Associativity.LEFT

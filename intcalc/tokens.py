"""Token model used between the pipeline stages."""

import dataclasses
import enum

from intcalc.symbols import UNARY_MARKER


class TokenKind(enum.Enum):
    DIGIT = "digit"
    NUMERAL = "numeral"
    BINARY_OPERATOR = "binary operator"
    UNARY_MINUS = "unary minus"
    LEFT_PAREN = "left parenthesis"
    RIGHT_PAREN = "right parenthesis"
    WHITESPACE = "whitespace"
    INVALID = "invalid"


@dataclasses.dataclass(frozen=True, slots=True)
class Token:
    """A classified piece of the expression.

    Args:
        symbol: The text as written by the user. A single character, except
            for NUMERAL tokens which hold a whole run of digits.
        kind: What the symbol means in this position.
        position: 0-based column of the first character in the display text.

    """

    symbol: str
    kind: TokenKind
    position: int

    @property
    def operator(self) -> str:
        """The key of this token in the precedence table.

        Unary minus is written as ``-`` but looked up by its marker.
        """
        if self.kind is TokenKind.UNARY_MINUS:
            return UNARY_MARKER
        return self.symbol

    @property
    def is_operator(self) -> bool:
        return self.kind in (TokenKind.BINARY_OPERATOR, TokenKind.UNARY_MINUS)

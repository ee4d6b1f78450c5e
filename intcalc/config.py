"""Runtime settings."""

import dataclasses
import typing as t

from intcalc.symbols import (
    UNARY_MARKER,
    is_binary_operator,
    is_digit,
    is_parenthesis,
)

# Longest numeral accepted in an expression. Matches the interpreter's default
# limit on int <-> str conversion.
MAX_NUMERAL_DIGITS: t.Final = 4300

# Results longer than this many bits are rejected rather than computed. Every
# value below 2 ** 14284 prints in at most MAX_NUMERAL_DIGITS digits.
MAX_RESULT_BITS: t.Final = 14284

LOG_LEVEL: t.Final = "WARNING"

LOG_FORMAT: t.Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclasses.dataclass(frozen=True, slots=True)
class Settings:
    """Knobs shared by the converter, evaluator and command line.

    Args:
        unary_symbol: How unary minus is written in postfix text.
        max_result_bits: Overflow limit for the result of every operation.
        log_level: Logging level name used by the command line.

    """

    unary_symbol: str = UNARY_MARKER
    max_result_bits: int = MAX_RESULT_BITS
    log_level: str = LOG_LEVEL

    def __post_init__(self) -> None:
        if len(self.unary_symbol) != 1 or self.unary_symbol.isspace():
            msg = f"unary_symbol must be one visible character, got {self.unary_symbol!r}"
            raise ValueError(msg)
        # The marker has to stay distinguishable from every other postfix term.
        if is_digit(self.unary_symbol) or is_binary_operator(self.unary_symbol) or is_parenthesis(self.unary_symbol):
            msg = f"unary_symbol {self.unary_symbol!r} clashes with an expression symbol"
            raise ValueError(msg)
        if self.max_result_bits < 1:
            msg = f"max_result_bits must be positive, got {self.max_result_bits}"
            raise ValueError(msg)


DEFAULT_SETTINGS: t.Final = Settings()

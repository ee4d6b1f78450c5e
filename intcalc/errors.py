"""Error values returned by the pipeline.

Neither class is an exception. Stages return them in place of a result so
that callers handle failures as part of the normal control flow.
"""

import dataclasses
import enum
import typing as t

DIVISION_BY_ZERO_MESSAGE: t.Final = "Cannot evaluate expression, division by zero."
ZERO_POWER_ZERO_MESSAGE: t.Final = "Cannot evaluate expression, 0^0 is undefined."
OVERFLOW_MESSAGE: t.Final = "Cannot evaluate expression, result exceeds {} bits."


def error_header(column: int, /) -> str:
    """Return spaces followed by a caret so the caret sits under ``column``."""
    return " " * column + "^ "


@dataclasses.dataclass(frozen=True, slots=True)
class ParseError:
    """A syntax problem found before evaluation.

    Args:
        description: Human readable text, e.g. "Missing operand at position 5.".
        position: 0-based column of the offending character in the display
            text.

    Attributes:
        message: The description prefixed by a caret pointing at the column.

    """

    description: str
    position: int

    @property
    def message(self) -> str:
        return error_header(self.position) + self.description

    def __str__(self) -> str:
        return self.message


class DomainErrorKind(enum.Enum):
    DIVISION_BY_ZERO = "division by zero"
    ZERO_POWER_ZERO = "0^0"
    OVERFLOW = "overflow"


@dataclasses.dataclass(frozen=True, slots=True)
class DomainError:
    """An arithmetic operation that has no integer result.

    Args:
        kind: Which operation failed.
        limit: The bit limit that was exceeded, only set for OVERFLOW.

    """

    kind: DomainErrorKind
    limit: int | None = None

    @property
    def message(self) -> str:
        if self.kind is DomainErrorKind.DIVISION_BY_ZERO:
            return DIVISION_BY_ZERO_MESSAGE
        if self.kind is DomainErrorKind.ZERO_POWER_ZERO:
            return ZERO_POWER_ZERO_MESSAGE
        return OVERFLOW_MESSAGE.format(self.limit)

    def __str__(self) -> str:
        return self.message

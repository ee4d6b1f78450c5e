"""LIFO container used by the validator, converter and evaluator."""

import typing as t

T = t.TypeVar("T")


class Stack(t.Generic[T]):
    """Last in, first out storage with push, pop, peek and is_empty.

    Open parentheses and pending operators are stacked as tokens, operands
    of the evaluator as ints. Popping or peeking an empty stack raises
    IndexError, which only happens for malformed postfix input.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: t.Final[list[T]] = []

    def push(self, item: T, /) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the most recently pushed item."""
        if not self._items:
            msg = "pop from an empty stack"
            raise IndexError(msg)
        return self._items.pop()

    def peek(self) -> T:
        """Return the most recently pushed item without removing it."""
        if not self._items:
            msg = "peek at an empty stack"
            raise IndexError(msg)
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

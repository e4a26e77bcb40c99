"""LIFO stack used for the evaluator's operator and operand stacks."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from infixeval.errors import StackUnderflowError

T = TypeVar("T")


class Stack(Generic[T]):
    """A list-backed last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflowError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflowError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate bottom to top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

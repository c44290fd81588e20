# stack.py

"""Stacks used by the evaluator, and the operator token they hold."""

from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


class StackUnderflow(IndexError):
    """Raised when popping or peeking an empty stack."""
    pass


@dataclass(frozen=True)
class Operator:
    """An operator token. `(` markers are stored as Operator('(')."""
    char: str
    unary: bool = False

    def __repr__(self):
        flag = ", unary" if self.unary else ""
        return f"Operator({self.char!r}{flag})"


class Stack(Generic[T]):
    """LIFO stack owned by a single evaluation."""

    def __init__(self):
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflow("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise StackUnderflow("top of empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"

"""Bounded integer stacks."""

from __future__ import annotations

from typing import List

STACK_CAPACITY = 150
HANOI_CAPACITY = 100


class Stack:
    """A last-in, first-out stack of at most ``STACK_CAPACITY`` integers."""

    capacity = STACK_CAPACITY

    def __init__(self) -> None:
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: int) -> None:
        """Put ``value`` on top; OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]


class HanoiStack:
    """A tower of disc sizes, at most ``HANOI_CAPACITY`` high.

    The top of an empty tower reads as 0, so any disc fits on it.
    """

    capacity = HANOI_CAPACITY

    def __init__(self) -> None:
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HanoiStack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: int) -> None:
        """Put ``value`` on top; OverflowError when the tower is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value, or 0 when the tower is empty."""
        return self._items[-1] if self._items else 0
"""A bounded first-in, first-out queue of words."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

CAPACITY = 100


class WordQueue:
    """Holds up to ``CAPACITY`` words in arrival order."""

    def __init__(self) -> None:
        self._items: Deque[str] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Yield the words from head to tail."""
        return iter(list(self._items))

    def __contains__(self, word: object) -> bool:
        return word in self._items

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == CAPACITY

    def enqueue(self, word: str) -> None:
        """Add ``word`` at the tail; OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(word)

    def dequeue(self) -> str:
        """Remove and return the word at the head; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def format(self) -> str:
        """Numbered listing from head to tail, one word per line."""
        return "".join(
            f"{position}. {word}\n"
            for position, word in enumerate(self._items, start=1)
        )
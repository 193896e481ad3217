"""Bounded sets of words and of single characters, kept in insertion order."""

from __future__ import annotations

from typing import Iterator, List

WORD_SET_CAPACITY = 100
CHAR_SET_CAPACITY = 100


class WordSet:
    """Holds up to ``WORD_SET_CAPACITY`` distinct words in insertion order."""

    capacity = WORD_SET_CAPACITY

    def __init__(self) -> None:
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, word: object) -> bool:
        return word in self._items

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def add(self, word: str) -> bool:
        """Add ``word`` unless present; returns whether it was added.

        Raises OverflowError when a new word does not fit.
        """
        if word in self._items:
            return False
        if self.is_full():
            raise OverflowError("set is full")
        self._items.append(word)
        return True

    def discard(self, word: str) -> bool:
        """Remove ``word`` if present; returns whether anything was removed."""
        if word not in self._items:
            return False
        self._items.remove(word)
        return True


class CharSet:
    """Holds up to ``CHAR_SET_CAPACITY`` distinct characters in insertion order."""

    capacity = CHAR_SET_CAPACITY

    def __init__(self) -> None:
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, char: object) -> bool:
        return char in self._items

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    @staticmethod
    def _check(char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")

    def add(self, char: str) -> bool:
        """Add ``char`` unless present; returns whether it was added.

        Raises ValueError for anything but one character, and OverflowError
        when a new character does not fit.
        """
        self._check(char)
        if char in self._items:
            return False
        if self.is_full():
            raise OverflowError("set is full")
        self._items.append(char)
        return True

    def discard(self, char: str) -> bool:
        """Remove ``char`` if present; returns whether anything was removed."""
        self._check(char)
        if char not in self._items:
            return False
        self._items.remove(char)
        return True
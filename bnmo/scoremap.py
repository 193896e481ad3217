"""A bounded map from names to scores, kept in descending score order."""

from __future__ import annotations

from typing import Iterator, List, Tuple

CAPACITY = 100


class ScoreMap:
    """Maps words to integer scores, ordered from highest to lowest.

    Entries with equal scores keep insertion order: newer ones come later.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[str, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        """Yield ``(key, value)`` pairs in descending value order."""
        return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        return any(existing == key for existing, _ in self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def is_full(self) -> bool:
        return len(self._entries) == CAPACITY

    def value(self, key: str) -> int:
        """Return the score stored under ``key``; KeyError if absent."""
        for existing, score in self._entries:
            if existing == key:
                return score
        raise KeyError(key)

    def insert(self, key: str, value: int) -> bool:
        """Add ``key`` with ``value`` in order; returns False if the key exists.

        Raises OverflowError when the map is full.
        """
        if key in self:
            return False
        if self.is_full():
            raise OverflowError("map is full")
        position = next(
            (i for i, (_, score) in enumerate(self._entries) if score < value),
            len(self._entries),
        )
        self._entries.insert(position, (key, value))
        return True

    def delete(self, key: str) -> bool:
        """Remove ``key`` if present; returns whether anything was removed."""
        for i, (existing, _) in enumerate(self._entries):
            if existing == key:
                del self._entries[i]
                return True
        return False
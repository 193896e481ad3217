"""A bounded, 1-indexed list of words."""

from __future__ import annotations

from typing import Iterator, List, Optional

FIRST_INDEX = 1
CAPACITY = 100
EMPTY_TEXT = "Tabel kosong"


class WordArray:
    """Holds up to ``CAPACITY`` words, indexed from 1."""

    def __init__(self) -> None:
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def _check_effective(self, index: int) -> None:
        if not self.is_effective_index(index):
            raise IndexError(f"index {index} out of range 1..{len(self)}")

    def get(self, index: int) -> str:
        """Return the word at ``index`` (1-based)."""
        self._check_effective(index)
        return self._items[index - FIRST_INDEX]

    def index_of(self, word: str) -> Optional[int]:
        """Return the 1-based index of the first ``word``, or None if absent."""
        for position, item in enumerate(self._items, start=FIRST_INDEX):
            if item == word:
                return position
        return None

    def set(self, index: int, word: str) -> None:
        """Put ``word`` at ``index``; the index just past the end appends."""
        if index == len(self) + 1:
            self.insert_last(word)
            return
        self._check_effective(index)
        self._items[index - FIRST_INDEX] = word

    def truncate(self, count: int) -> None:
        """Keep only the first ``count`` words."""
        if not 0 <= count <= len(self):
            raise ValueError(f"count {count} out of range 0..{len(self)}")
        del self._items[count:]

    def is_valid_index(self, index: int) -> bool:
        """True when ``index`` fits within the array's capacity."""
        return FIRST_INDEX <= index <= CAPACITY

    def is_effective_index(self, index: int) -> bool:
        """True when ``index`` refers to a stored word."""
        return FIRST_INDEX <= index <= len(self)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == CAPACITY

    def insert_last(self, word: str) -> None:
        """Append ``word``; raises OverflowError when the array is full."""
        if self.is_full():
            raise OverflowError("array is full")
        self._items.append(word)

    def delete_at(self, index: int) -> str:
        """Remove and return the word at ``index``, shifting later words down."""
        self._check_effective(index)
        return self._items.pop(index - FIRST_INDEX)

    def copy(self) -> "WordArray":
        """Return an independent copy of this array."""
        other = WordArray()
        other._items = list(self._items)
        return other

    def format(self) -> str:
        """Numbered listing, one word per line, or the empty-table notice."""
        if self.is_empty():
            return EMPTY_TEXT + "\n"
        return "".join(
            f"{position}. {item}\n"
            for position, item in enumerate(self._items, start=FIRST_INDEX)
        )
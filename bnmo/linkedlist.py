"""An ordered list of integer points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class PointList:
    """A sequence of points with insertion and removal at both ends."""

    def __init__(self) -> None:
        self._points: List[Point] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __str__(self) -> str:
        """Points written left to right, comma separated; '' when empty."""
        return ",".join(str(point) for point in self._points)

    def is_empty(self) -> bool:
        return not self._points

    def search(self, x: int, y: int) -> Optional[Point]:
        """Return the first point equal to ``(x, y)``, or None."""
        target = Point(x, y)
        return next((point for point in self._points if point == target), None)

    def index_of(self, x: int, y: int) -> Optional[int]:
        """Return the 0-based position of the first ``(x, y)``, or None."""
        target = Point(x, y)
        return next(
            (i for i, point in enumerate(self._points) if point == target), None
        )

    def insert_first(self, x: int, y: int) -> Point:
        """Put a new point ``(x, y)`` at the front and return it."""
        point = Point(x, y)
        self._points.insert(0, point)
        return point

    def insert_last(self, x: int, y: int) -> Point:
        """Put a new point ``(x, y)`` at the back and return it."""
        point = Point(x, y)
        self._points.append(point)
        return point

    def delete_first(self) -> Point:
        """Remove and return the first point; IndexError when empty."""
        if not self._points:
            raise IndexError("delete from empty list")
        return self._points.pop(0)

    def delete_last(self) -> Point:
        """Remove and return the last point; IndexError when empty."""
        if not self._points:
            raise IndexError("delete from empty list")
        return self._points.pop()

    def delete(self, x: int, y: int) -> bool:
        """Remove the first point equal to ``(x, y)``; return whether one was found."""
        position = self.index_of(x, y)
        if position is None:
            return False
        del self._points[position]
        return True
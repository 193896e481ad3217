"""A small integer grid with the sliding moves of the 2048 game."""

from __future__ import annotations

from typing import List

MAX_ROWS = 4
MAX_COLS = 4


class Matrix:
    """A grid of at most ``MAX_ROWS`` x ``MAX_COLS`` integers.

    A cell holding 0 is empty.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if not 0 <= rows <= MAX_ROWS:
            raise ValueError(f"rows {rows} out of range 0..{MAX_ROWS}")
        if not 0 <= cols <= MAX_COLS:
            raise ValueError(f"cols {cols} out of range 0..{MAX_COLS}")
        self.rows = rows
        self.cols = cols
        self._cells: List[List[int]] = [[0] * cols for _ in range(rows)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols}")

    def get(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``."""
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        """Store ``value`` at ``(row, col)``."""
        self._check(row, col)
        self._cells[row][col] = value

    def is_empty(self) -> bool:
        """True when every cell is 0."""
        return all(value == 0 for line in self._cells for value in line)

    def is_full(self) -> bool:
        """True when no cell is 0."""
        return all(value != 0 for line in self._cells for value in line)

    def max_value(self) -> int:
        """The largest value in the grid, or -1 for a grid with no cells."""
        return max((value for line in self._cells for value in line), default=-1)

    def copy(self) -> "Matrix":
        """Return an independent copy of this grid."""
        other = Matrix(self.rows, self.cols)
        other._cells = [list(line) for line in self._cells]
        return other

    def render(self) -> str:
        """Draw the grid as a board of boxes, empty cells left blank."""
        rule = "_" * (9 + (self.rows - 1) * 8)
        parts = []
        for line in self._cells:
            parts.append(rule + "\n\n|")
            for value in line:
                parts.append(f"{value:6d}\t|" if value > 0 else "      \t|")
            parts.append("\n")
        parts.append(rule + "\n")
        return "".join(parts)

    def _step(self, target: tuple, source: tuple, merge: bool, score_merge: bool) -> int:
        (ti, tj), (si, sj) = target, source
        cells = self._cells
        if merge:
            if cells[ti][tj] == cells[si][sj]:
                cells[ti][tj] += cells[si][sj]
                cells[si][sj] = 0
                return cells[ti][tj] if score_merge else 0
            return 0
        if cells[ti][tj] == 0:
            cells[ti][tj] = cells[si][sj]
            cells[si][sj] = 0
            return cells[ti][tj]
        return 0

    def shift_right(self, merge: bool) -> int:
        """One pass towards the right edge; returns the points scored.

        Without ``merge`` each empty cell takes its left neighbour; with it,
        equal neighbours are added together into the right one.
        """
        return sum(
            self._step((i, j), (i, j - 1), merge, score_merge=False)
            for i in range(self.rows)
            for j in range(self.cols - 1, 0, -1)
        )

    def shift_left(self, merge: bool) -> int:
        """One pass towards the left edge; returns the points scored."""
        return sum(
            self._step((i, j), (i, j + 1), merge, score_merge=True)
            for i in range(self.rows)
            for j in range(self.cols - 1)
        )

    def shift_up(self, merge: bool) -> int:
        """One pass towards the top edge; returns the points scored."""
        return sum(
            self._step((i, j), (i + 1, j), merge, score_merge=False)
            for j in range(self.cols)
            for i in range(self.rows - 1)
        )

    def shift_down(self, merge: bool) -> int:
        """One pass towards the bottom edge; returns the points scored."""
        return sum(
            self._step((i, j), (i - 1, j), merge, score_merge=False)
            for j in range(self.cols)
            for i in range(self.rows - 1, 0, -1)
        )
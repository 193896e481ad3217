"""A bounded queue of food orders for the diner game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

CAPACITY = 20


@dataclass
class Food:
    """An order: cooking time, how long it keeps once cooked, and its price."""

    name: str
    duration: int
    durability: int
    price: int


class FoodQueue:
    """Holds up to ``CAPACITY`` food orders in arrival order."""

    def __init__(self) -> None:
        self._items: List[Food] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Food]:
        """Yield the orders from head to tail."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == CAPACITY

    def enqueue(self, food: Food) -> None:
        """Add ``food`` at the tail; OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(food)

    def dequeue(self) -> Food:
        """Remove and return the order at the head; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.pop(0)

    def remove_at(self, index: int) -> Food:
        """Remove and return the order at 0-based ``index`` from the head."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range 0..{len(self._items) - 1}")
        return self._items.pop(index)

    def format_orders(self) -> str:
        """The order table: name, cooking time, durability and price."""
        lines = [
            f"Daftar Pesanan\t\t\t  Banyaknya pesanan: {len(self)}\n",
            "Makanan\t| Durasi memasak\t| Ketahanan\t| Harga\n",
            "--------------------------------------------------------\n",
        ]
        if self.is_empty():
            lines.append("\t| \t\t\t| \t\t| \n")
        else:
            lines.extend(
                f"{food.name}\t| {food.duration}\t\t\t| {food.durability}\t\t| {food.price} \n"
                for food in self._items
            )
        lines.append("\n")
        return "".join(lines)

    def format_cooking(self) -> str:
        """The table of dishes being cooked with their remaining time."""
        lines = [
            "Daftar Makanan yang sedang dimasak\n",
            "Makanan\t| Sisa durasi memasak\n",
            "-----------------------------\n",
        ]
        if self.is_empty():
            lines.append(" \t| \n")
        else:
            lines.extend(f"{food.name}\t| {food.duration}\n" for food in self._items)
        lines.append("\n")
        return "".join(lines)

    def format_ready(self) -> str:
        """The table of dishes ready to serve with their remaining durability."""
        lines = [
            "Daftar Makanan yang dapat disajikan\n",
            "Makanan | Sisa ketahanan memasak\n",
            "---------------------------------\n",
        ]
        if self.is_empty():
            lines.append(" \t| \n")
        else:
            lines.extend(f"{food.name}\t| {food.durability}\n" for food in self._items)
        lines.append("\n")
        return "".join(lines)
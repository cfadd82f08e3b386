from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterator, List, Sequence, Tuple

Coord = Tuple[int, int]


class Category(Enum):
    EMPTY = "empty"
    ROOM = "room"
    HALL = "hall"
    DOOR = "door"
    EXIT = "exit"
    ENTRY = "entry"


# Neighbours that count as built when naming room tiles; halls do not.
SOLID: FrozenSet[Category] = frozenset({Category.ROOM, Category.DOOR, Category.EXIT, Category.ENTRY})

# Categories whose tiles carry a shape name.
SHAPED: FrozenSet[Category] = frozenset({Category.ROOM, Category.ENTRY, Category.EXIT})


class Grid:
    """Square buffer of categories addressed by ``(row, col)``."""

    def __init__(self, size: int, fill: Category = Category.EMPTY) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}.")
        self.size = size
        self._cells: List[List[Category]] = [[fill for _ in range(size)] for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Category]]) -> "Grid":
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError("Grid rows must form a non-empty square.")
        grid = cls(size)
        for r, row in enumerate(rows):
            for c, category in enumerate(row):
                grid[r, c] = Category(category)
        return grid

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def __getitem__(self, coord: Coord) -> Category:
        row, col = coord
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell {coord} outside {self.size}x{self.size} grid.")
        return self._cells[row][col]

    def __setitem__(self, coord: Coord, category: Category) -> None:
        row, col = coord
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell {coord} outside {self.size}x{self.size} grid.")
        self._cells[row][col] = category

    def __iter__(self) -> Iterator[Tuple[Category, ...]]:
        for row in self._cells:
            yield tuple(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def cells(self) -> Iterator[Tuple[int, int, Category]]:
        for r, row in enumerate(self._cells):
            for c, category in enumerate(row):
                yield r, c, category

    def count(self, category: Category) -> int:
        return sum(row.count(category) for row in self._cells)

    def copy(self) -> "Grid":
        return Grid.from_rows(self._cells)

    def rows(self) -> List[List[Category]]:
        return [list(row) for row in self._cells]

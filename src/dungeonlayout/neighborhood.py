from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .grid import Category, Grid

Window = Tuple[Tuple[Category, Category, Category], ...]


@dataclass(frozen=True)
class Neighborhood:
    """3x3 window where ``cells[dr + 1][dc + 1]`` is the cell at offset ``(dr, dc)``."""

    cells: Window

    @property
    def center(self) -> Category:
        return self.cells[1][1]

    @property
    def forward(self) -> Category:
        return self.cells[1][2]

    @property
    def back(self) -> Category:
        return self.cells[1][0]

    @property
    def left(self) -> Category:
        return self.cells[0][1]

    @property
    def right(self) -> Category:
        return self.cells[2][1]

    @property
    def cardinals(self) -> Tuple[Tuple[str, Category], ...]:
        return (
            ("Forward", self.forward),
            ("Back", self.back),
            ("Left", self.left),
            ("Right", self.right),
        )

    @property
    def diagonals(self) -> Tuple[Category, ...]:
        return (self.cells[0][0], self.cells[0][2], self.cells[2][0], self.cells[2][2])


def sample_neighborhood(grid: Grid, row: int, col: int) -> Neighborhood:
    rows = []
    for dr in (-1, 0, 1):
        rows.append(
            tuple(
                grid[row + dr, col + dc] if grid.in_bounds(row + dr, col + dc) else Category.EMPTY
                for dc in (-1, 0, 1)
            )
        )
    return Neighborhood(cells=tuple(rows))

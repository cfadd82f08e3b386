from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .grid import Category, Coord, Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Half-open rectangle covering rows ``[row, row + rows)`` and cols ``[col, col + cols)``."""

    row: int
    col: int
    rows: int
    cols: int

    @property
    def row_max(self) -> int:
        return self.row + self.rows

    @property
    def col_max(self) -> int:
        return self.col + self.cols

    def overlaps(self, other: "Rect") -> bool:
        return (
            self.row < other.row_max
            and other.row < self.row_max
            and self.col < other.col_max
            and other.col < self.col_max
        )

    def contains(self, other: "Rect") -> bool:
        return (
            self.row <= other.row
            and self.col <= other.col
            and other.row_max <= self.row_max
            and other.col_max <= self.col_max
        )

    def expanded(self, amount: int) -> "Rect":
        return Rect(
            row=self.row - amount,
            col=self.col - amount,
            rows=self.rows + 2 * amount,
            cols=self.cols + 2 * amount,
        )

    def cells(self) -> Iterator[Coord]:
        for r in range(self.row, self.row_max):
            for c in range(self.col, self.col_max):
                yield r, c

    @property
    def area(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class Room:
    bounds: Rect
    buffer: Rect
    doors: Tuple[Coord, ...] = field(default_factory=tuple)
    entry: Optional[Coord] = None
    exit: Optional[Coord] = None

    @classmethod
    def from_bounds(cls, bounds: Rect) -> "Room":
        return cls(bounds=bounds, buffer=bounds.expanded(1))

    def conflicts_with(self, other: "Room") -> bool:
        return self.buffer.overlaps(other.bounds) or self.bounds.overlaps(other.buffer)


@dataclass
class PlacementResult:
    rooms: List[Room]
    requested: int
    exhausted: bool = False
    stopped_early: bool = False


class RoomPlacementEngine:
    def __init__(
        self,
        grid_size: int,
        min_dimension: int,
        max_dimension: int,
        max_rooms: int,
        retry_threshold: int,
        rng: random.Random,
    ) -> None:
        self.grid_size = grid_size
        self.min_dimension = min_dimension
        self.max_dimension = max_dimension
        self.max_rooms = max_rooms
        self.retry_threshold = retry_threshold
        self._random = rng

    def candidate(self) -> Room:
        length = self._random.randint(self.min_dimension, self.max_dimension)
        width = self._random.randint(self.min_dimension, self.max_dimension)
        top_x = self._random.randint(0, self.grid_size - width)
        top_z = self._random.randint(0, self.grid_size - length)
        return Room.from_bounds(Rect(row=top_x, col=top_z, rows=width, cols=length))

    def place(self) -> PlacementResult:
        result = PlacementResult(rooms=[], requested=self.max_rooms)
        rooms = result.rooms
        stop_chance = 0.0
        stop_step = 1.0 / (self.max_rooms * 1.1)

        while len(rooms) < self.max_rooms:
            room = self._attempt(rooms)
            if room is None:
                result.exhausted = True
                logger.warning(
                    "No valid room found after %d rejections; keeping %d of %d rooms.",
                    self.retry_threshold,
                    len(rooms),
                    self.max_rooms,
                )
                break
            rooms.append(room)
            if len(rooms) < self.max_rooms:
                if self._random.random() < stop_chance:
                    result.stopped_early = True
                    logger.debug("Stopped early with %d of %d rooms.", len(rooms), self.max_rooms)
                    break
                stop_chance += stop_step
        return result

    def _attempt(self, rooms: Sequence[Room]) -> Optional[Room]:
        rejections = 0
        while True:
            room = self.candidate()
            conflicts = sum(1 for existing in rooms if room.conflicts_with(existing))
            if not conflicts:
                return room
            # One rejection per room the candidate runs into.
            rejections += conflicts
            if rejections >= self.retry_threshold:
                return None


def rasterize(grid: Grid, rooms: Sequence[Room], category: Category = Category.ROOM) -> None:
    for room in rooms:
        for r, c in room.bounds.cells():
            grid[r, c] = category

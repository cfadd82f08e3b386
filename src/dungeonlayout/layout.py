from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .config import LayoutConfig
from .grid import Category, Grid
from .rooms import Room, RoomPlacementEngine, rasterize
from .tiles import EMPTY_TILE, ClassifiedTile, TileClassifier

logger = logging.getLogger(__name__)

TileGrid = List[List[ClassifiedTile]]


@dataclass
class DungeonLayout:
    grid: Grid
    tiles: TileGrid
    rooms: Sequence[Room]
    requested_rooms: int
    seed: Optional[int] = None

    @property
    def size(self) -> int:
        return self.grid.size

    def tile(self, row: int, col: int) -> ClassifiedTile:
        return self.tiles[row][col]

    def to_dict(self) -> Dict[str, object]:
        return {
            "size": self.size,
            "seed": self.seed,
            "requested_rooms": self.requested_rooms,
            "grid": [[category.value for category in row] for row in self.grid.rows()],
            "tiles": [[tile.to_dict() for tile in row] for row in self.tiles],
            "rooms": [
                {
                    "bounds": [room.bounds.row, room.bounds.col, room.bounds.rows, room.bounds.cols],
                    "buffer": [room.buffer.row, room.buffer.col, room.buffer.rows, room.buffer.cols],
                    "doors": [list(door) for door in room.doors],
                    "entry": list(room.entry) if room.entry is not None else None,
                    "exit": list(room.exit) if room.exit is not None else None,
                }
                for room in self.rooms
            ],
        }


def classify_grid(grid: Grid, classifier: Optional[TileClassifier] = None) -> TileGrid:
    classifier = classifier or TileClassifier()
    tiles: TileGrid = [[EMPTY_TILE for _ in range(grid.size)] for _ in range(grid.size)]
    for row, col, category in grid.cells():
        if category is Category.EMPTY:
            continue
        tiles[row][col] = classifier.classify(grid, row, col)
    return tiles


def generate_layout(
    config: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
    classifier: Optional[TileClassifier] = None,
) -> DungeonLayout:
    config = (config or LayoutConfig()).validated()
    seed = config.seed
    if rng is None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        rng = random.Random(seed)

    engine = RoomPlacementEngine(
        grid_size=config.grid_dimensions,
        min_dimension=config.min_room_dimensions,
        max_dimension=config.max_room_dimensions,
        max_rooms=config.max_room_count,
        retry_threshold=config.retry_threshold,
        rng=rng,
    )
    placement = engine.place()
    grid = Grid(config.grid_dimensions)
    rasterize(grid, placement.rooms)
    logger.info(
        "Placed %d of %d rooms on a %dx%d grid.",
        len(placement.rooms),
        placement.requested,
        grid.size,
        grid.size,
    )

    tiles = classify_grid(grid, classifier)
    return DungeonLayout(
        grid=grid,
        tiles=tiles,
        rooms=tuple(placement.rooms),
        requested_rooms=placement.requested,
        seed=seed,
    )

from __future__ import annotations

import logging
from dataclasses import dataclass

from .grid import SHAPED, SOLID, Category, Grid
from .neighborhood import Neighborhood, sample_neighborhood

logger = logging.getLogger(__name__)

ASSET_SUFFIX = ".prefab"


@dataclass(frozen=True)
class ClassifiedTile:
    category: Category = Category.EMPTY
    shape_name: str = ""

    def to_dict(self) -> dict:
        return {"category": self.category.value, "shape_name": self.shape_name}


EMPTY_TILE = ClassifiedTile()


class TileClassifier:
    def __init__(self, suffix: str = ASSET_SUFFIX) -> None:
        self.suffix = suffix

    def classify(self, grid: Grid, row: int, col: int) -> ClassifiedTile:
        category = grid[row, col]
        if category is Category.EMPTY:
            return EMPTY_TILE
        if category not in SHAPED:
            # Halls and doors have no shape variants yet.
            return ClassifiedTile(category=category)
        shape_name = self.shape_name(sample_neighborhood(grid, row, col))
        logger.debug("Tile %s at (%d, %d): %s", category.value, row, col, shape_name)
        return ClassifiedTile(category=category, shape_name=shape_name)

    def shape_name(self, neighborhood: Neighborhood) -> str:
        adjacent_count = 0
        directions = ""
        for label, neighbor in neighborhood.cardinals:
            if neighbor in SOLID:
                adjacent_count += 1
            else:
                directions += label
        diag_count = sum(1 for neighbor in neighborhood.diagonals if neighbor in SOLID)

        name = "Open" if diag_count >= 2 else ""
        if adjacent_count == 4:
            # directions is always empty when all four sides are solid.
            name += "NoWall" if diag_count == 4 else directions + "Corner"
        else:
            name += directions
            name += "Wall" if adjacent_count == 3 else "Corner"
        return name + self.suffix

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .grid import Category
from .layout import DungeonLayout

Vec3 = Tuple[int, int, int]

ROOM_BUNDLE = "dungeonrooms"
DOOR_BUNDLE = "dungeondoors"
HALL_BUNDLE = "dungeonhalls"

BUNDLES: Dict[Category, str] = {
    Category.ROOM: ROOM_BUNDLE,
    Category.ENTRY: ROOM_BUNDLE,
    Category.EXIT: ROOM_BUNDLE,
    Category.DOOR: DOOR_BUNDLE,
    Category.HALL: HALL_BUNDLE,
}


@dataclass(frozen=True)
class RenderRequest:
    category: Category
    asset_key: str
    bundle: str
    position: Vec3
    cell: Tuple[int, int]

    def to_dict(self) -> Dict[str, object]:
        return {
            "category": self.category.value,
            "asset_key": self.asset_key,
            "bundle": self.bundle,
            "position": list(self.position),
            "cell": list(self.cell),
        }


class LayoutBuilder:
    """Turns a classified layout into placement requests for an asset-backed renderer.

    Only tiles with a shape name produce requests; door and hall assets have no
    variants to pick from yet.
    """

    def __init__(self, tile_dimensions: int = 6) -> None:
        if tile_dimensions <= 0:
            raise ValueError("tile_dimensions must be positive.")
        self.tile_dimensions = tile_dimensions

    def position(self, row: int, col: int) -> Vec3:
        return (row * self.tile_dimensions, 0, (col + 1) * self.tile_dimensions)

    def requests(self, layout: DungeonLayout) -> Iterator[RenderRequest]:
        for row, tiles in enumerate(layout.tiles):
            for col, tile in enumerate(tiles):
                if tile.category is Category.EMPTY or not tile.shape_name:
                    continue
                yield RenderRequest(
                    category=tile.category,
                    asset_key=tile.shape_name,
                    bundle=BUNDLES[tile.category],
                    position=self.position(row, col),
                    cell=(row, col),
                )

    def build(self, layout: DungeonLayout) -> List[RenderRequest]:
        return list(self.requests(layout))


def build_requests(layout: DungeonLayout, builder: Optional[LayoutBuilder] = None) -> List[RenderRequest]:
    if builder is None:
        return []
    return builder.build(layout)

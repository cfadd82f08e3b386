from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Mapping

from .grid import Category
from .layout import DungeonLayout


@dataclass
class LayoutStats:
    room_count: int
    requested_rooms: int
    fill_ratio: float
    room_cells: int
    largest_room: int
    smallest_room: int
    shapes: Mapping[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "room_count": self.room_count,
            "requested_rooms": self.requested_rooms,
            "fill_ratio": self.fill_ratio,
            "room_cells": self.room_cells,
            "largest_room": self.largest_room,
            "smallest_room": self.smallest_room,
            "shapes": dict(self.shapes),
        }


def compute_stats(layout: DungeonLayout) -> LayoutStats:
    total_cells = max(layout.size * layout.size, 1)
    room_cells = layout.grid.count(Category.ROOM)
    areas = [room.bounds.area for room in layout.rooms]

    shapes: Counter[str] = Counter()
    for row in layout.tiles:
        for tile in row:
            if tile.shape_name:
                shapes[tile.shape_name] += 1

    return LayoutStats(
        room_count=len(layout.rooms),
        requested_rooms=layout.requested_rooms,
        fill_ratio=room_cells / total_cells,
        room_cells=room_cells,
        largest_room=max(areas, default=0),
        smallest_room=min(areas, default=0),
        shapes=dict(sorted(shapes.items())),
    )

from dungeonlayout.config import LayoutConfig
from dungeonlayout.layout import DungeonLayout, classify_grid, generate_layout
from dungeonlayout.rooms import Rect, Room, rasterize
from dungeonlayout.grid import Grid
from dungeonlayout.stats import compute_stats


def test_stats_for_known_rooms():
    rooms = (Room.from_bounds(Rect(0, 0, 3, 3)), Room.from_bounds(Rect(10, 10, 2, 4)))
    grid = Grid(20)
    rasterize(grid, rooms)
    layout = DungeonLayout(grid=grid, tiles=classify_grid(grid), rooms=rooms, requested_rooms=6)
    stats = compute_stats(layout)
    assert stats.room_count == 2
    assert stats.requested_rooms == 6
    assert stats.room_cells == 17
    assert stats.fill_ratio == 17 / 400
    assert (stats.largest_room, stats.smallest_room) == (9, 8)
    assert stats.shapes["OpenNoWall.prefab"] == 1
    assert sum(stats.shapes.values()) == 17


def test_stats_for_empty_layout():
    grid = Grid(20)
    layout = DungeonLayout(grid=grid, tiles=classify_grid(grid), rooms=(), requested_rooms=3)
    stats = compute_stats(layout)
    assert stats.room_count == 0
    assert stats.largest_room == 0
    assert stats.shapes == {}


def test_stats_to_dict():
    data = compute_stats(generate_layout(LayoutConfig(seed=9))).to_dict()
    assert set(data) == {
        "room_count",
        "requested_rooms",
        "fill_ratio",
        "room_cells",
        "largest_room",
        "smallest_room",
        "shapes",
    }

import pytest

from dungeonlayout.grid import SOLID, Category, Grid


def test_new_grid_is_empty():
    grid = Grid(20)
    assert grid.size == 20
    assert grid.count(Category.EMPTY) == 400
    assert all(category is Category.EMPTY for _, _, category in grid.cells())


def test_set_and_get_cell():
    grid = Grid(20)
    grid[3, 17] = Category.ROOM
    assert grid[3, 17] is Category.ROOM
    assert grid[17, 3] is Category.EMPTY
    assert grid.count(Category.ROOM) == 1


def test_out_of_bounds_access_raises():
    grid = Grid(20)
    with pytest.raises(IndexError):
        grid[20, 0]
    with pytest.raises(IndexError):
        grid[0, -1] = Category.ROOM


def test_from_rows_requires_square():
    with pytest.raises(ValueError):
        Grid.from_rows([[Category.EMPTY, Category.EMPTY]])
    with pytest.raises(ValueError):
        Grid.from_rows([])


def test_copy_is_independent():
    grid = Grid(20)
    clone = grid.copy()
    clone[0, 0] = Category.HALL
    assert grid[0, 0] is Category.EMPTY
    assert clone != grid


def test_solid_set_excludes_hall_and_empty():
    assert SOLID == {Category.ROOM, Category.DOOR, Category.EXIT, Category.ENTRY}


def test_rows_returns_a_detached_copy():
    grid = Grid(20)
    rows = grid.rows()
    rows[0][0] = Category.ROOM
    assert len(rows) == 20 and all(len(row) == 20 for row in rows)
    assert grid[0, 0] is Category.EMPTY

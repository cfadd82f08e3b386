from dungeonlayout.grid import Category, Grid
from dungeonlayout.neighborhood import sample_neighborhood

from tests.layout_test_utils import grid_from

E, R, H = Category.EMPTY, Category.ROOM, Category.HALL


def test_window_is_centered_on_cell():
    grid = Grid(20)
    grid[4, 5] = R
    grid[4, 6] = H
    grid[3, 5] = Category.DOOR
    hood = sample_neighborhood(grid, 4, 5)
    assert hood.center is R
    assert hood.forward is H
    assert hood.left is Category.DOOR
    assert hood.back is E
    assert hood.right is E
    assert hood.diagonals == (E, E, E, E)


def test_outside_cells_read_as_empty():
    grid = Grid(20, fill=R)
    hood = sample_neighborhood(grid, 0, 0)
    assert hood.cells == (
        (E, E, E),
        (E, R, R),
        (E, R, R),
    )


def test_last_row_and_last_column_are_bounded_symmetrically():
    grid = Grid(20, fill=R)
    last_row = sample_neighborhood(grid, 19, 7)
    last_col = sample_neighborhood(grid, 7, 19)
    assert last_row.cells[2] == (E, E, E)
    assert tuple(row[2] for row in last_col.cells) == (E, E, E)
    # transposing one window gives the other
    assert tuple(zip(*last_row.cells)) == last_col.cells

    corner = sample_neighborhood(grid, 19, 19)
    assert corner.cells == (
        (R, R, E),
        (R, R, E),
        (E, E, E),
    )


def test_sampling_does_not_touch_grid():
    grid = grid_from(
        *(["." * 20] * 9 + [".........RR........."] + ["." * 20] * 10)
    )
    before = grid.copy()
    sample_neighborhood(grid, 9, 9)
    assert grid == before

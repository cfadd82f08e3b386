from datetime import datetime

import pytest

from dungeonlayout.config import LayoutConfig, SymbolAlphabet
from dungeonlayout.grid import Category, Grid
from dungeonlayout.layout import generate_layout
from dungeonlayout.text import dump_layout, parse_ascii, render_ascii, render_canvas

from tests.layout_test_utils import DOTS


def small_grid():
    grid = Grid(20)
    grid[0, 0] = Category.ROOM
    grid[0, 1] = Category.HALL
    grid[1, 0] = Category.ENTRY
    return grid


def test_render_ascii_uses_alphabet():
    lines = render_ascii(small_grid()).split("\n")
    assert len(lines) == 20
    assert lines[0] == "RH" + "■" * 18
    assert lines[1] == "N" + "■" * 19


def test_render_canvas_pads_occupied_cells():
    lines = render_canvas(small_grid(), DOTS).splitlines()
    assert lines[0] == " R H" + "." * 18
    assert lines[1] == " N" + "." * 19
    assert lines[2] == "." * 20


def test_parse_reads_back_rendered_layout():
    layout = generate_layout(LayoutConfig(seed=13))
    assert parse_ascii(render_ascii(layout.grid)) == layout.grid
    assert parse_ascii(render_ascii(layout.grid, DOTS), DOTS) == layout.grid


def test_parse_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_ascii("")
    with pytest.raises(ValueError):
        parse_ascii("RR\nR", DOTS)
    with pytest.raises(ValueError):
        parse_ascii("R?\nRR", DOTS)


def test_dump_layout_writes_timestamped_file(tmp_path):
    symbols = SymbolAlphabet(empty="-")
    path = dump_layout(small_grid(), tmp_path / "Text", symbols, now=datetime(2024, 3, 9, 14, 5, 7))
    assert path.name == "DungeonLayout_03092024140507.txt"
    content = path.read_text(encoding="utf-8")
    assert content.splitlines()[0] == "RH" + "-" * 18
    assert parse_ascii(content, symbols) == small_grid()

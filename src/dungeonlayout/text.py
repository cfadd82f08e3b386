from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import SymbolAlphabet
from .grid import Category, Grid

DUMP_PREFIX = "DungeonLayout_"


def render_ascii(grid: Grid, symbols: Optional[SymbolAlphabet] = None) -> str:
    symbols = symbols or SymbolAlphabet()
    return "\n".join("".join(symbols.symbol(category) for category in row) for row in grid)


def render_canvas(grid: Grid, symbols: Optional[SymbolAlphabet] = None) -> str:
    # Occupied cells get a leading space to line up with the wide empty glyph.
    symbols = symbols or SymbolAlphabet()
    lines = []
    for row in grid:
        parts = []
        for category in row:
            if category is not Category.EMPTY:
                parts.append(" ")
            parts.append(symbols.symbol(category))
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


def parse_ascii(text: str, symbols: Optional[SymbolAlphabet] = None) -> Grid:
    symbols = symbols or SymbolAlphabet()
    lines = [line for line in text.splitlines() if line]
    if not lines:
        raise ValueError("Layout text is empty.")
    if any(len(line) != len(lines) for line in lines):
        raise ValueError(f"Layout text must be square, got {len(lines)} rows of lengths {sorted({len(line) for line in lines})}.")
    return Grid.from_rows([[symbols.category(char) for char in line] for line in lines])


def dump_layout(
    grid: Grid,
    directory: str | Path,
    symbols: Optional[SymbolAlphabet] = None,
    now: Optional[datetime] = None,
) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now()).strftime("%m%d%Y%H%M%S")
    path = directory / f"{DUMP_PREFIX}{stamp}.txt"
    path.write_text(render_ascii(grid, symbols) + "\n", encoding="utf-8")
    return path

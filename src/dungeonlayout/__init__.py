"""Procedural dungeon floor layouts with neighbourhood-based tile classification."""

from .builder import LayoutBuilder, RenderRequest
from .config import LayoutConfig, SymbolAlphabet, load_config
from .grid import Category, Grid
from .layout import DungeonLayout, classify_grid, generate_layout
from .neighborhood import Neighborhood, sample_neighborhood
from .rooms import Rect, Room, RoomPlacementEngine
from .tiles import ClassifiedTile, TileClassifier

__all__ = [
    "Category",
    "ClassifiedTile",
    "DungeonLayout",
    "Grid",
    "LayoutBuilder",
    "LayoutConfig",
    "Neighborhood",
    "Rect",
    "RenderRequest",
    "Room",
    "RoomPlacementEngine",
    "SymbolAlphabet",
    "TileClassifier",
    "classify_grid",
    "generate_layout",
    "load_config",
    "sample_neighborhood",
]

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for 3.10
    import tomli as tomllib  # type: ignore[no-redef]

from .grid import Category

logger = logging.getLogger(__name__)

MIN_GRID_DIMENSIONS = 20
MIN_ROOM_DIMENSIONS = 2


@dataclass(frozen=True)
class SymbolAlphabet:
    empty: str = "■"
    room: str = "R"
    hall: str = "H"
    door: str = "D"
    exit: str = "X"
    entry: str = "N"

    def __post_init__(self) -> None:
        chars = [getattr(self, f.name) for f in fields(self)]
        for f, char in zip(fields(self), chars):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Symbol for '{f.name}' must be a single character, got {char!r}.")
        if len(set(chars)) != len(chars):
            raise ValueError("Symbols must be six distinct characters.")

    def symbol(self, category: Category) -> str:
        return getattr(self, category.value)

    def category(self, char: str) -> Category:
        for category in Category:
            if self.symbol(category) == char:
                return category
        raise ValueError(f"Unknown layout symbol {char!r}.")


@dataclass(frozen=True)
class LayoutConfig:
    grid_dimensions: int = 20
    min_room_dimensions: int = 2
    max_room_dimensions: int = 6
    max_room_count: int = 6
    retry_threshold: int = 100
    seed: Optional[int] = None
    symbols: SymbolAlphabet = field(default_factory=SymbolAlphabet)

    def validated(self) -> "LayoutConfig":
        grid = max(self.grid_dimensions, MIN_GRID_DIMENSIONS)
        min_room = min(max(self.min_room_dimensions, MIN_ROOM_DIMENSIONS), grid)
        max_room = min(max(self.max_room_dimensions, min_room), grid)
        rooms = max(self.max_room_count, 1)
        retries = max(self.retry_threshold, 1)
        corrected = replace(
            self,
            grid_dimensions=grid,
            min_room_dimensions=min_room,
            max_room_dimensions=max_room,
            max_room_count=rooms,
            retry_threshold=retries,
        )
        for name in ("grid_dimensions", "min_room_dimensions", "max_room_dimensions", "max_room_count", "retry_threshold"):
            before, after = getattr(self, name), getattr(corrected, name)
            if before != after:
                logger.warning("Clamped %s from %d to %d.", name, before, after)
        return corrected


_INT_KEYS = ("grid_dimensions", "min_room_dimensions", "max_room_dimensions", "max_room_count", "retry_threshold")


def _parse_symbols(symbols_raw: Any) -> SymbolAlphabet:
    if symbols_raw is None:
        return SymbolAlphabet()
    if not isinstance(symbols_raw, Mapping):
        raise ValueError("[symbols] must be a table if provided.")
    known = {f.name for f in fields(SymbolAlphabet)}
    unknown = set(symbols_raw) - known
    if unknown:
        raise ValueError(f"Unknown symbol names: {', '.join(sorted(unknown))}.")
    return SymbolAlphabet(**{str(key): str(value) for key, value in symbols_raw.items()})


def config_from_mapping(raw: Mapping[str, Any]) -> LayoutConfig:
    layout_raw = raw.get("layout", {})
    if layout_raw is None:
        layout_raw = {}
    if not isinstance(layout_raw, Mapping):
        raise ValueError("[layout] must be a table if provided.")
    values: Dict[str, Any] = {}
    for key in _INT_KEYS:
        if key in layout_raw:
            try:
                values[key] = int(layout_raw[key])
            except (TypeError, ValueError):
                raise ValueError(f"layout.{key} must be an integer.") from None
    seed = layout_raw.get("seed")
    if seed is not None:
        try:
            values["seed"] = int(seed)
        except (TypeError, ValueError):
            raise ValueError("layout.seed must be an integer.") from None
    return LayoutConfig(symbols=_parse_symbols(raw.get("symbols")), **values)


def load_config(path: str | Path) -> LayoutConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as handle:
        raw = tomllib.load(handle)
    return config_from_mapping(raw)

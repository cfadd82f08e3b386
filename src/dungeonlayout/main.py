from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .builder import LayoutBuilder
from .config import LayoutConfig, load_config
from .layout import DungeonLayout, generate_layout
from .log_utils import setup_logging
from .stats import compute_stats
from .text import dump_layout, render_ascii, render_canvas

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path("config/default_config.toml")


def _resolve_config(args: argparse.Namespace) -> LayoutConfig:
    if args.config is not None:
        config = load_config(args.config)
    elif DEFAULT_CONFIG.exists():
        config = load_config(DEFAULT_CONFIG)
    else:
        config = LayoutConfig()

    overrides = {
        "grid_dimensions": args.grid_size,
        "min_room_dimensions": args.min_room,
        "max_room_dimensions": args.max_room,
        "max_room_count": args.max_rooms,
        "retry_threshold": args.retries,
        "seed": args.seed,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **overrides)


def _payload(layout: DungeonLayout, with_render: bool, tile_dimensions: int) -> dict:
    payload = layout.to_dict()
    payload["stats"] = compute_stats(layout).to_dict()
    if with_render:
        builder = LayoutBuilder(tile_dimensions=tile_dimensions)
        payload["render"] = [request.to_dict() for request in builder.build(layout)]
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a dungeon floor layout and classify its tiles.")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to config file (defaults to config/default_config.toml when present).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible layouts.")
    parser.add_argument("--grid-size", type=int, default=None, help="Override the floor side length.")
    parser.add_argument("--min-room", type=int, default=None, help="Override the minimum room side.")
    parser.add_argument("--max-room", type=int, default=None, help="Override the maximum room side.")
    parser.add_argument("--max-rooms", type=int, default=None, help="Override the target room count.")
    parser.add_argument("--retries", type=int, default=None,
                        help="Override the rejection count that abandons placement.")
    parser.add_argument("--format", choices=("ascii", "canvas", "json"), default="ascii",
                        help="Choose the output format.")
    parser.add_argument("--render", action="store_true",
                        help="Include render requests in JSON output.")
    parser.add_argument("--tile-dimensions", type=int, default=6,
                        help="World units per tile for render requests.")
    parser.add_argument("--dump-dir", type=Path, default=None,
                        help="Also write a timestamped text dump into this directory.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    parser.add_argument("--color", action="store_true", help="Colour log output.")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, color=args.color, log_file=args.log_file)

    try:
        config = _resolve_config(args)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    layout = generate_layout(config)
    symbols = config.symbols

    if args.format == "json":
        print(json.dumps(_payload(layout, args.render, args.tile_dimensions), indent=2, ensure_ascii=False))
    elif args.format == "canvas":
        print(render_canvas(layout.grid, symbols), end="")
    else:
        print(render_ascii(layout.grid, symbols))

    if args.dump_dir is not None:
        path = dump_layout(layout.grid, args.dump_dir, symbols)
        logger.info("Wrote layout dump to %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

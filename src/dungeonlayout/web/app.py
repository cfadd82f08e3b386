from __future__ import annotations

import argparse
import html
from dataclasses import replace
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
import uvicorn

from ..builder import LayoutBuilder
from ..config import LayoutConfig, load_config
from ..layout import DungeonLayout, generate_layout
from ..log_utils import setup_logging
from ..stats import compute_stats
from ..text import render_ascii, render_canvas


class LayoutManager:
    def __init__(self, config: LayoutConfig) -> None:
        self._config = config
        self._current_layout: Optional[DungeonLayout] = None

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def get_layout(self, reload: bool = False, seed: Optional[int] = None) -> DungeonLayout:
        if seed is not None:
            config = replace(self._config, seed=seed)
            self._current_layout = generate_layout(config)
        elif reload or self._current_layout is None:
            self._current_layout = generate_layout(self._config)
        return self._current_layout


def create_app(config: LayoutConfig | Path | None = None, tile_dimensions: int = 6) -> FastAPI:
    if isinstance(config, Path):
        config = load_config(config)
    manager = LayoutManager(config or LayoutConfig())
    builder = LayoutBuilder(tile_dimensions=tile_dimensions)

    app = FastAPI(title="Dungeon Layout Explorer", version="0.1.0")

    @app.get("/", response_class=HTMLResponse)
    async def serve_index() -> HTMLResponse:
        layout = manager.get_layout()
        body = html.escape(render_canvas(layout.grid, manager.config.symbols))
        return HTMLResponse(f"<!doctype html><title>Dungeon layout</title><pre>{body}</pre>")

    @app.get("/api/layout")
    async def get_layout(reload: Optional[int] = None, seed: Optional[int] = None) -> JSONResponse:
        layout = manager.get_layout(reload=bool(reload), seed=seed)
        return JSONResponse(layout.to_dict())

    @app.get("/api/layout.txt", response_class=PlainTextResponse)
    async def get_layout_text(reload: Optional[int] = None, seed: Optional[int] = None) -> PlainTextResponse:
        layout = manager.get_layout(reload=bool(reload), seed=seed)
        return PlainTextResponse(render_ascii(layout.grid, manager.config.symbols) + "\n")

    @app.get("/api/render")
    async def get_render_requests() -> JSONResponse:
        layout = manager.get_layout()
        return JSONResponse([request.to_dict() for request in builder.build(layout)])

    @app.get("/api/stats")
    async def get_stats() -> JSONResponse:
        return JSONResponse(compute_stats(manager.get_layout()).to_dict())

    @app.get("/api/tile/{row}/{col}")
    async def get_tile(row: int, col: int) -> JSONResponse:
        layout = manager.get_layout()
        if not layout.grid.in_bounds(row, col):
            raise HTTPException(status_code=404, detail=f"Cell ({row}, {col}) is outside the layout.")
        return JSONResponse(layout.tile(row, col).to_dict())

    return app


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the dungeon layout web explorer.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the layout configuration file.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    app = create_app(args.config.resolve() if args.config is not None else None)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()

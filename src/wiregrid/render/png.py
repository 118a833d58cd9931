# src/wiregrid/render/png.py
# Draw a level to a PNG with Pillow. Wires come from each tile's current
# connection mask; no image assets are needed.

import os
from typing import Tuple

from PIL import Image, ImageDraw

from ..tiles import DIRECTION_DELTAS, TileType, tile_connections

MIN_TILE_SIZE = 8

Color = Tuple[int, int, int, int]

BACKGROUND = (33, 38, 78, 255)
GRID_LINE = (20, 22, 40, 255)
WIRE = (220, 220, 220, 255)
PATH_WIRE = (255, 220, 0, 255)


def _cell_color(tile, is_start: bool, is_end: bool, on_path: bool) -> Color:
    if is_start:
        return (0, 170, 70, 255)
    if is_end:
        return (190, 40, 40, 255)
    if tile.type is TileType.EMPTY:
        return (45, 50, 90, 255)
    if tile.fixed:
        return (70, 110, 160, 255)
    if on_path:
        return (90, 80, 40, 255)
    return (60, 66, 110, 255)


def _draw_wires(draw: ImageDraw.ImageDraw, tile, x0: int, y0: int, size: int, color: Color) -> None:
    mask = tile_connections(tile)
    if not mask:
        return
    cx, cy = x0 + size // 2, y0 + size // 2
    half = size // 2
    width = max(2, size // 6)
    for d, dx, dy in DIRECTION_DELTAS:
        if mask & d:
            draw.line((cx, cy, cx + dx * half, cy + dy * half), fill=color, width=width)
    r = width
    draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=color)


def render_level(level, tile_size: int = 32, highlight_path: bool = True) -> Image.Image:
    """
    Paint every cell's background and wires. Start is green, end red, fixed
    tiles blue; with `highlight_path` the generator's path is drawn in yellow.
    """
    if tile_size < MIN_TILE_SIZE:
        raise ValueError(f"tile_size must be >= {MIN_TILE_SIZE}, got {tile_size}")
    grid = level.grid
    start, end = tuple(level.start), tuple(level.end)
    on_path = {(p[0], p[1]) for p in level.solution_path} if highlight_path else set()

    canvas = Image.new("RGBA", (grid.width * tile_size, grid.height * tile_size), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for tile in grid.tiles():
        x0, y0 = tile.x * tile_size, tile.y * tile_size
        pos = (tile.x, tile.y)
        fill = _cell_color(tile, pos == start, pos == end, pos in on_path)
        draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=fill, outline=GRID_LINE)
        _draw_wires(draw, tile, x0, y0, tile_size, PATH_WIRE if pos in on_path else WIRE)
    return canvas


def save_level_png(level, out_png: str, tile_size: int = 32, highlight_path: bool = True) -> str:
    img = render_level(level, tile_size=tile_size, highlight_path=highlight_path)
    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    img.save(out_png)
    return out_png

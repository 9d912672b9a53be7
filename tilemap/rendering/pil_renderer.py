"""
Tile Map - PIL Renderer

PIL-based rendering for generating PNG images of tile maps. Used by the
render and check tools to create static images.
"""

from typing import Optional

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.tile import TILE_SIZE, Tile
from ..core.tile_map import TileMap
from .palettes import (
    BACKGROUND_COLOR,
    FLOOD_REACHED_COLOR,
    FLOOD_UNREACHED_COLOR,
    GRID_COLOR,
    PIXEL_COLOR,
)


def map_bounds(tile_map: TileMap) -> tuple[int, int]:
    """
    Pixel size needed to show every non-empty tile.

    Compact maps report their full canvas; sparse maps are measured from
    the origin to the furthest tile.
    """
    size = getattr(tile_map, "get_size", None)
    if size is not None:
        return size()
    width = 0
    height = 0
    for entry in tile_map.tiles():
        width = max(width, entry.get_x() + TILE_SIZE)
        height = max(height, entry.get_y() + TILE_SIZE)
    return width, height


def render_map_to_image(
    tile_map: TileMap,
    scale: int = 1,
    frontier: Optional[list[Tile]] = None,
    show_grid: bool = False,
) -> Image.Image:
    """
    Render a tile map to a PIL Image.

    Args:
        tile_map: Map to draw
        scale: Size of one map pixel in image pixels (default: 1)
        frontier: Optional flood frontier, one tile per slot of tile_map.
            Pixels in the frontier are drawn as reached, other on pixels
            as unreached.
        show_grid: Draw tile boundaries (only visible when scale >= 2)

    Returns:
        PIL Image object (at least 1x1 for an empty map)

    Raises:
        ValueError: If scale < 1 or frontier length does not match the map
    """
    if scale < 1:
        raise ValueError(f"Scale must be at least 1, got {scale}")
    if frontier is not None and len(frontier) != tile_map.slot_count():
        raise ValueError(
            f"Frontier has {len(frontier)} tiles, map has {tile_map.slot_count()} slots"
        )

    width, height = map_bounds(tile_map)
    img = Image.new("RGB", (max(width, 1) * scale, max(height, 1) * scale), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    for slot in range(tile_map.slot_count()):
        tile = tile_map.read_slot(slot)
        if tile.is_empty():
            continue
        key = tile_map.slot_key(slot)
        reached = frontier[slot] if frontier is not None else None

        for x, y in tile.pixels():
            if reached is None:
                color = PIXEL_COLOR
            elif reached.contain(x, y):
                color = FLOOD_REACHED_COLOR
            else:
                color = FLOOD_UNREACHED_COLOR
            px = (key.pixel_x + x) * scale
            py = (key.pixel_y + y) * scale
            draw.rectangle([px, py, px + scale - 1, py + scale - 1], fill=color)

    if show_grid and scale >= 2:
        step = TILE_SIZE * scale
        for gx in range(0, img.width, step):
            draw.line([(gx, 0), (gx, img.height - 1)], fill=GRID_COLOR)
        for gy in range(0, img.height, step):
            draw.line([(0, gy), (img.width - 1, gy)], fill=GRID_COLOR)

    return img

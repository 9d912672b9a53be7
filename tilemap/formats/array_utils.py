"""
Tile Map - numpy Array Conversion

Converts between tile maps and 2D boolean numpy arrays indexed
``array[y, x]``.
"""

import numpy as np

from ..core.tile import TILE_SIZE, Tile
from ..core.tile_map import TileMap
from ..core.tile_with_coord import TileKey, TileWithCoord


def map_to_array(tile_map: TileMap, width: int, height: int) -> np.ndarray:
    """
    Rasterize a map into a boolean array.

    Pixels outside width x height are dropped.

    Returns:
        Array of shape (height, width), True where a pixel is on
    """
    array = np.zeros((height, width), dtype=bool)
    for entry in tile_map.tiles():
        x0 = entry.get_x()
        y0 = entry.get_y()
        if x0 >= width or y0 >= height:
            continue
        for x, y in entry.tile.pixels():
            px = x0 + x
            py = y0 + y
            if px < width and py < height:
                array[py, px] = True
    return array


def array_to_map(array: np.ndarray, tile_map: TileMap) -> TileMap:
    """
    OR every True pixel of a 2D array into tile_map.

    Args:
        array: Array indexed [y, x]; any dtype, non-zero means on
        tile_map: Map to write into

    Returns:
        tile_map (for chaining)

    Raises:
        ValueError: If array is not 2D
        InvalidCoordinates: If an on pixel falls outside a compact map
    """
    if array.ndim != 2:
        raise ValueError(f"Expected a 2D array, got {array.ndim} dimensions")

    height, width = array.shape
    for ty in range(0, height, TILE_SIZE):
        for tx in range(0, width, TILE_SIZE):
            block = array[ty : ty + TILE_SIZE, tx : tx + TILE_SIZE]
            ys, xs = np.nonzero(block)
            if len(xs) == 0:
                continue
            data = 0
            for x, y in zip(xs.tolist(), ys.tolist()):
                data |= 1 << (y * TILE_SIZE + x)
            key = TileKey(tx // TILE_SIZE, ty // TILE_SIZE)
            tile_map.set_tile(TileWithCoord.from_key(key, Tile(data)))
    return tile_map

"""Integration tests for PNG rendering of tile maps."""

import pytest

from tilemap.core.compact_map import CompactMap
from tilemap.core.flood import flood
from tilemap.core.sparse_map import SparseMap
from tilemap.rendering.palettes import (
    BACKGROUND_COLOR,
    FLOOD_REACHED_COLOR,
    FLOOD_UNREACHED_COLOR,
    GRID_COLOR,
    PIXEL_COLOR,
)
from tilemap.rendering.pil_renderer import map_bounds, render_map_to_image


def test_sparse_bounds_follow_furthest_tile():
    tile_map = SparseMap()
    tile_map.set(40, 5)
    tile_map.set(3, 70)
    assert map_bounds(tile_map) == (48, 80)


def test_compact_bounds_are_canvas():
    assert map_bounds(CompactMap(64, 32)) == (64, 32)


def test_pixels_drawn_at_scale():
    tile_map = SparseMap()
    tile_map.set(1, 0)
    img = render_map_to_image(tile_map, scale=2)

    assert img.size == (32, 32)
    assert img.getpixel((2, 0)) == PIXEL_COLOR
    assert img.getpixel((3, 1)) == PIXEL_COLOR
    assert img.getpixel((0, 0)) == BACKGROUND_COLOR
    assert img.getpixel((4, 0)) == BACKGROUND_COLOR


def test_grid_lines():
    tile_map = CompactMap(32, 16)
    tile_map.set(1, 1)
    img = render_map_to_image(tile_map, scale=2, show_grid=True)

    assert img.getpixel((32, 5)) == GRID_COLOR
    assert img.getpixel((5, 0)) == GRID_COLOR
    assert img.getpixel((2, 2)) == PIXEL_COLOR


def test_flood_coloring():
    """Pixels the flood reaches and pixels it misses get different colors."""
    tile_map = SparseMap()
    tile_map.set(0, 0)
    tile_map.set(10, 10)
    frontier, _ = flood(tile_map)
    img = render_map_to_image(tile_map, frontier=frontier)

    assert img.getpixel((0, 0)) == FLOOD_REACHED_COLOR
    assert img.getpixel((10, 10)) == FLOOD_UNREACHED_COLOR


def test_empty_map_renders():
    img = render_map_to_image(SparseMap(), scale=3)
    assert img.size == (3, 3)


def test_invalid_arguments():
    tile_map = SparseMap()
    tile_map.set(0, 0)
    with pytest.raises(ValueError):
        render_map_to_image(tile_map, scale=0)
    with pytest.raises(ValueError):
        render_map_to_image(tile_map, frontier=[])


def test_save_png(tmp_path):
    tile_map = CompactMap(32, 32)
    tile_map.set(16, 16, 16)
    path = tmp_path / "map.png"
    render_map_to_image(tile_map, scale=2).save(path)
    assert path.stat().st_size > 0

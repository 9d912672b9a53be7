"""
Unit tests for TileKey and TileWithCoord.
"""

import pytest

from tilemap.core.tile import InvalidCoordinates, Tile
from tilemap.core.tile_with_coord import TileKey, TileWithCoord


class TestTileKey:
    """Grid keys derived from pixel coordinates."""

    def test_from_pixel(self):
        assert TileKey.from_pixel(0, 0) == TileKey(0, 0)
        assert TileKey.from_pixel(15, 15) == TileKey(0, 0)
        assert TileKey.from_pixel(16, 33) == TileKey(1, 2)

    def test_negative_pixel_rejected(self):
        with pytest.raises(InvalidCoordinates):
            TileKey.from_pixel(-1, 0)
        with pytest.raises(InvalidCoordinates):
            TileKey.from_pixel(0, -16)

    def test_pixel_origin(self):
        key = TileKey(3, 2)
        assert (key.pixel_x, key.pixel_y) == (48, 32)

    def test_neighbor(self):
        key = TileKey(1, 1)
        assert key.neighbor(1, 0) == TileKey(2, 1)
        assert key.neighbor(0, -1) == TileKey(1, 0)

    def test_neighbor_off_grid_is_none(self):
        assert TileKey(0, 0).neighbor(-1, 0) is None
        assert TileKey(0, 0).neighbor(0, -1) is None

    def test_keys_are_distinct_for_large_coordinates(self):
        """Keys are plain pairs, so far-apart tiles never collide."""
        assert TileKey(0, 65536) != TileKey(65536, 0)
        assert len({TileKey(x, y) for x in range(4) for y in range(4)}) == 16


class TestTileWithCoord:
    """Pixel-coordinate operations on an anchored tile."""

    def test_anchor_from_any_pixel(self):
        t = TileWithCoord(37, 20)
        assert t.get_key() == TileKey(2, 1)
        assert (t.get_x(), t.get_y()) == (32, 16)
        assert t.is_empty()

    def test_set_and_contain_use_map_pixels(self):
        t = TileWithCoord(32, 16).set(34, 18, 3)
        assert t.contain(34, 18, 3)
        assert t.contain(36, 20)
        assert not t.contain(37, 20)
        assert t.tile == Tile().set(2, 2, 3)

    def test_clear(self):
        t = TileWithCoord(16, 0).set(16, 0, 4).clear(17, 1, 2)
        assert not t.contain(17, 1)
        assert t.contain(16, 0)
        assert t.tile.bit_count() == 12

    def test_pixel_in_other_tile_rejected(self):
        t = TileWithCoord(16, 16)
        with pytest.raises(InvalidCoordinates):
            t.set(15, 16)
        with pytest.raises(InvalidCoordinates):
            t.contain(32, 16)

    def test_square_crossing_boundary_rejected(self):
        t = TileWithCoord(0, 0)
        with pytest.raises(InvalidCoordinates):
            t.set(14, 0, 3)

    def test_merge_and_subtract(self):
        a = TileWithCoord(0, 0).set(0, 0, 2)
        b = TileWithCoord(5, 5).set(1, 1, 2)
        a.merge(b)
        assert a.tile.bit_count() == 7
        a.subtract(b)
        assert a.tile.bit_count() == 3
        assert not a.contain(1, 1)

    def test_tile_ops_need_matching_key(self):
        a = TileWithCoord(0, 0).set(0, 0)
        b = TileWithCoord(16, 0).set(16, 0)
        for op in (a.merge, a.subtract, a.contain_tile, a.is_equal, a.is_adjacent):
            with pytest.raises(InvalidCoordinates):
                op(b)

    def test_contain_tile_and_adjacent(self):
        big = TileWithCoord(0, 0).set(0, 0, 8)
        small = TileWithCoord(0, 0).set(2, 2, 2)
        apart = TileWithCoord(0, 0).set(10, 10)
        assert big.contain_tile(small)
        assert not small.contain_tile(big)
        assert big.is_adjacent(small)
        assert not big.is_adjacent(apart)

    def test_copy_is_independent(self):
        a = TileWithCoord(0, 0).set(0, 0)
        b = a.copy()
        b.set(1, 1)
        assert a.is_equal(TileWithCoord(0, 0).set(0, 0))
        assert a != b

    def test_equality(self):
        assert TileWithCoord(0, 0).set(3, 3) == TileWithCoord(4, 4).set(3, 3)
        assert TileWithCoord(0, 0) != TileWithCoord(16, 0)

"""Shared pytest fixtures for tile map tests."""

import random

import pytest

from tilemap.core.compact_map import CompactMap
from tilemap.core.sparse_map import SparseMap
from tilemap.core.tile import TILE_SIZE

# Canvas used by the compact map fixtures: 8x8 tiles
COMPACT_SIZE = 8 * TILE_SIZE


@pytest.fixture
def sparse_map():
    """Empty sparse map."""
    return SparseMap()


@pytest.fixture
def compact_map():
    """Empty 128x128 compact map."""
    return CompactMap(COMPACT_SIZE, COMPACT_SIZE)


@pytest.fixture(params=["sparse", "compact"])
def any_map(request):
    """Empty map of each kind."""
    if request.param == "sparse":
        return SparseMap()
    return CompactMap(COMPACT_SIZE, COMPACT_SIZE)


@pytest.fixture
def make_map():
    """Factory for empty maps of the same kind as a given map."""

    def factory(like):
        if isinstance(like, CompactMap):
            return CompactMap(like.width, like.height)
        return SparseMap()

    return factory


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def create_test_map():
    """
    Generator of random (x, y, size) squares inside a max_x x max_y canvas.

    Squares are clipped so they never cross a tile boundary.
    """

    def factory(rng, max_x, max_y, count):
        squares = []
        for _ in range(count):
            x = rng.randrange(max_x)
            y = rng.randrange(max_y)
            size = rng.randint(1, TILE_SIZE)
            squares.append((x, y, min(TILE_SIZE - x % TILE_SIZE, TILE_SIZE - y % TILE_SIZE, size)))
        return squares

    return factory

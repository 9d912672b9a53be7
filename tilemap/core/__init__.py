"""
Core tile map functionality.

This package contains the 16x16 bit tile, tiles bound to grid
coordinates, the sparse and compact tile stores, and the multi-tile
flood fill that tests 4-connectivity.
"""

from .tile import (
    TILE_SIZE,
    ExtendedTile,
    InvalidCoordinates,
    InvalidSize,
    Tile,
    TileError,
)
from .tile_with_coord import TileKey, TileWithCoord
from .tile_map import TileMap, TileMissing
from .sparse_map import SparseMap
from .compact_map import CompactMap
from .flood import FloodState, flood, flood_step, is_adjacent, is_adjacent_rectangle, seed_frontier
from .instrumented_map import InstrumentedCompactMap, InstrumentedSparseMap

__all__ = [
    "TILE_SIZE",
    "Tile",
    "ExtendedTile",
    "TileError",
    "InvalidSize",
    "InvalidCoordinates",
    "TileMissing",
    "TileKey",
    "TileWithCoord",
    "TileMap",
    "SparseMap",
    "CompactMap",
    "FloodState",
    "seed_frontier",
    "flood_step",
    "flood",
    "is_adjacent",
    "is_adjacent_rectangle",
    "InstrumentedSparseMap",
    "InstrumentedCompactMap",
]

"""
Tile Map - Tiles With Coordinates

A TileWithCoord pins a Tile to its place on the tile grid. The grid
coordinate is the pixel coordinate integer-divided by 16 and never changes
for the life of the instance; any operation that resolves to a different
grid cell is a programming error and raises InvalidCoordinates.
"""

from typing import NamedTuple

from .tile import TILE_SIZE, InvalidCoordinates, Tile


class TileKey(NamedTuple):
    """Tile-grid coordinate (pixel coordinate // 16)."""

    x: int
    y: int

    @classmethod
    def from_pixel(cls, x: int, y: int) -> "TileKey":
        """
        Get the key of the tile that contains pixel (x, y).

        Raises:
            InvalidCoordinates: If x or y is negative
        """
        if x < 0 or y < 0:
            raise InvalidCoordinates(x, y, "pixel coordinates must be non-negative")
        return cls(x // TILE_SIZE, y // TILE_SIZE)

    def neighbor(self, dx: int, dy: int) -> "TileKey | None":
        """Key of the adjacent grid cell, or None when it would be negative."""
        x = self.x + dx
        y = self.y + dy
        if x < 0 or y < 0:
            return None
        return TileKey(x, y)

    @property
    def pixel_x(self) -> int:
        return self.x * TILE_SIZE

    @property
    def pixel_y(self) -> int:
        return self.y * TILE_SIZE


class TileWithCoord:
    """A tile bound to a fixed tile-grid coordinate."""

    __slots__ = ("key", "tile")

    def __init__(self, x: int, y: int, tile: Tile | None = None):
        """
        Create a tile anchored at the grid cell containing pixel (x, y).

        Args:
            x: Any pixel x inside the target tile
            y: Any pixel y inside the target tile
            tile: Initial contents (default: empty)
        """
        self.key = TileKey.from_pixel(x, y)
        self.tile = tile if tile is not None else Tile()

    @classmethod
    def from_key(cls, key: TileKey, tile: Tile | None = None) -> "TileWithCoord":
        return cls(key.pixel_x, key.pixel_y, tile)

    def get_key(self) -> TileKey:
        return self.key

    def get_x(self) -> int:
        """Pixel x of the tile's left column."""
        return self.key.pixel_x

    def get_y(self) -> int:
        """Pixel y of the tile's top row."""
        return self.key.pixel_y

    def _local(self, x: int, y: int) -> tuple[int, int]:
        if TileKey.from_pixel(x, y) != self.key:
            raise InvalidCoordinates(
                x, y, f"pixel is outside tile at grid ({self.key.x}, {self.key.y})"
            )
        return x % TILE_SIZE, y % TILE_SIZE

    def _check_same_key(self, other: "TileWithCoord"):
        if other.key != self.key:
            raise InvalidCoordinates(
                other.get_x(),
                other.get_y(),
                f"tile does not match grid ({self.key.x}, {self.key.y})",
            )

    # Pixel-coordinate operations (mutate in place)

    def set(self, x: int, y: int, size: int = 1) -> "TileWithCoord":
        lx, ly = self._local(x, y)
        self.tile = self.tile.set(lx, ly, size)
        return self

    def clear(self, x: int, y: int, size: int = 1) -> "TileWithCoord":
        lx, ly = self._local(x, y)
        self.tile = self.tile.clear(lx, ly, size)
        return self

    def contain(self, x: int, y: int, size: int = 1) -> bool:
        lx, ly = self._local(x, y)
        return self.tile.contain(lx, ly, size)

    # Tile-to-tile operations (coordinates must match)

    def merge(self, other: "TileWithCoord") -> "TileWithCoord":
        self._check_same_key(other)
        self.tile = self.tile | other.tile
        return self

    def subtract(self, other: "TileWithCoord") -> "TileWithCoord":
        self._check_same_key(other)
        self.tile = self.tile - other.tile
        return self

    def contain_tile(self, other: "TileWithCoord") -> bool:
        self._check_same_key(other)
        return self.tile.contain_tile(other.tile)

    def is_equal(self, other: "TileWithCoord") -> bool:
        self._check_same_key(other)
        return self.tile == other.tile

    def is_adjacent(self, other: "TileWithCoord") -> bool:
        self._check_same_key(other)
        return self.tile.is_adjacent(other.tile)

    def is_empty(self) -> bool:
        return self.tile.is_empty()

    def copy(self) -> "TileWithCoord":
        return TileWithCoord.from_key(self.key, self.tile)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TileWithCoord):
            return NotImplemented
        return self.key == other.key and self.tile == other.tile

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"TileWithCoord(x={self.get_x()}, y={self.get_y()}, tile={self.tile!r})"

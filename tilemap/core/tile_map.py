"""
Tile Map - Store Base Class

Both store kinds (SparseMap, CompactMap) expose the same pixel-level
surface on top of a small slot interface. A slot is a position in the
store's backing sequence; the flood-fill engine and the instrumented
stores only ever go through that interface.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional, Tuple

from . import flood
from .tile import EMPTY_TILE, TILE_SIZE, Tile, TileError, rectangle_mask
from .tile_with_coord import TileKey, TileWithCoord

# (up, down, left, right) neighbour slots, None where there is no neighbour
SlotNeighbors = Tuple[Optional[int], Optional[int], Optional[int], Optional[int]]


class TileMissing(TileError):
    """Raised when removing or moving pixels that are not in the map."""

    def __init__(self, key: TileKey):
        self.key = key
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Tile at pixel ({self.key.pixel_x}, {self.key.pixel_y}) "
            f"is missing from the map"
        )


class TileMap(ABC):
    """
    Base class for collections of tiles addressable by grid coordinate.

    Subclasses implement the slot interface; everything else is shared.
    Not thread-safe: a map must not be mutated while a flood query or a
    bulk operation over it is running.
    """

    # Slot interface

    @abstractmethod
    def key_of(self, x: int, y: int) -> TileKey:
        """
        Get the grid key for pixel (x, y).

        Raises:
            InvalidCoordinates: If the pixel is outside the map
        """
        pass

    @abstractmethod
    def slot_count(self) -> int:
        pass

    @abstractmethod
    def slot_of(self, key: TileKey) -> Optional[int]:
        """Slot holding key, or None when the map has no slot for it."""
        pass

    @abstractmethod
    def slot_key(self, slot: int) -> TileKey:
        pass

    @abstractmethod
    def read_slot(self, slot: int) -> Tile:
        pass

    @abstractmethod
    def write_slot(self, slot: int, tile: Tile) -> None:
        pass

    @abstractmethod
    def add_slot(self, key: TileKey, tile: Tile) -> int:
        """Create a slot for key holding a non-empty tile."""
        pass

    @abstractmethod
    def tile_count(self) -> int:
        """Number of non-empty tiles."""
        pass

    @abstractmethod
    def find_non_empty_slot(self) -> Optional[int]:
        pass

    @abstractmethod
    def clear_all(self) -> None:
        pass

    def check_key(self, key: TileKey) -> None:
        """
        Validate a grid key given directly rather than through key_of().

        Raises:
            InvalidCoordinates: If the map can never hold a tile at key
        """
        pass

    def slot_neighbors(self, slot: int) -> SlotNeighbors:
        """Slots of the up, down, left and right neighbours of slot."""
        key = self.slot_key(slot)
        result = []
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            neighbor = key.neighbor(dx, dy)
            result.append(None if neighbor is None else self.slot_of(neighbor))
        return tuple(result)

    # Internal read-modify-write helpers

    def _merge_into(self, key: TileKey, tile: Tile):
        slot = self.slot_of(key)
        if slot is None:
            if not tile.is_empty():
                self.add_slot(key, tile)
            return
        current = self.read_slot(slot)
        merged = current | tile
        if merged != current:
            self.write_slot(slot, merged)

    def _subtract_from(self, key: TileKey, tile: Tile) -> bool:
        slot = self.slot_of(key)
        if slot is None:
            return False
        current = self.read_slot(slot)
        remaining = current - tile
        if remaining != current:
            self.write_slot(slot, remaining)
        return True

    def _tile_at(self, key: TileKey) -> Tile:
        slot = self.slot_of(key)
        if slot is None:
            return EMPTY_TILE
        return self.read_slot(slot)

    # Rectangle operations

    def set(self, x: int, y: int, size: int = 1):
        """
        Turn on a size x size square starting at pixel (x, y).

        The square must lie inside a single tile.

        Raises:
            InvalidSize: If size is not 1-16
            InvalidCoordinates: If the square crosses a tile boundary or
                lies outside the map
        """
        key = self.key_of(x, y)
        mask = Tile(rectangle_mask(x % TILE_SIZE, y % TILE_SIZE, size))
        self._merge_into(key, mask)

    def clear(self, x: int, y: int, size: int = 1) -> bool:
        """
        Turn off a size x size square starting at pixel (x, y).

        Returns:
            False if there was no tile at that coordinate, True otherwise
        """
        key = self.key_of(x, y)
        mask = Tile(rectangle_mask(x % TILE_SIZE, y % TILE_SIZE, size))
        return self._subtract_from(key, mask)

    def contain(self, x: int, y: int, size: int = 1) -> bool:
        """Check whether every pixel of the square is on."""
        key = self.key_of(x, y)
        return self._tile_at(key).contain(x % TILE_SIZE, y % TILE_SIZE, size)

    def contain_tile_at(self, x: int, y: int) -> bool:
        """Check whether the tile containing pixel (x, y) has any pixel on."""
        return not self._tile_at(self.key_of(x, y)).is_empty()

    # Tile operations

    def set_tile(self, tile: TileWithCoord):
        """OR a whole tile into the map at its own coordinate."""
        self.check_key(tile.key)
        self._merge_into(tile.key, tile.tile)

    def clear_tile(self, tile: TileWithCoord) -> bool:
        """Remove a whole tile's pixels from the map."""
        self.check_key(tile.key)
        return self._subtract_from(tile.key, tile.tile)

    def contain_tile(self, tile: TileWithCoord) -> bool:
        self.check_key(tile.key)
        return self._tile_at(tile.key).contain_tile(tile.tile)

    def get_tile(self, x: int, y: int) -> TileWithCoord:
        """Copy of the tile containing pixel (x, y), empty if absent."""
        key = self.key_of(x, y)
        return TileWithCoord.from_key(key, self._tile_at(key))

    # Whole-map operations (cost follows the size of other)

    def set_from(self, other: "TileMap"):
        for tile in other.tiles():
            self.set_tile(tile)

    def clear_from(self, other: "TileMap"):
        for tile in other.tiles():
            self.clear_tile(tile)

    def contains_all(self, other: "TileMap") -> bool:
        return all(self.contain_tile(tile) for tile in other.tiles())

    def move_to(self, dest: "TileMap", tiles: Iterable[TileWithCoord]):
        """
        Move the given pixels from this map into dest.

        Every tile is checked before anything changes, then each one is
        removed from this map and merged into dest in order. An empty tile
        moves nothing and is accepted by both map kinds.

        Raises:
            TileMissing: If any tile's pixels are not all present here
            InvalidCoordinates: If a tile lies outside either map
        """
        tiles = list(tiles)
        for tile in tiles:
            dest.check_key(tile.key)
            if not self.contain_tile(tile):
                raise TileMissing(tile.key)
        for tile in tiles:
            self.clear_tile(tile)
            dest.set_tile(tile)

    def is_equal(self, other: "TileMap") -> bool:
        """Same non-empty tiles at the same coordinates, in any order."""
        if self.tile_count() != other.tile_count():
            return False
        for tile in self.tiles():
            if other._tile_at(tile.key) != tile.tile:
                return False
        return True

    def is_empty(self) -> bool:
        return self.tile_count() == 0

    # Enumeration

    def at(self, index: int) -> TileWithCoord:
        """Copy of the tile stored in slot index."""
        if index < 0 or index >= self.slot_count():
            raise IndexError(f"Slot {index} out of range (0-{self.slot_count() - 1})")
        return TileWithCoord.from_key(self.slot_key(index), self.read_slot(index))

    def at_range(self, offset: int, count: int) -> list[TileWithCoord]:
        """Copies of up to count tiles starting at slot offset."""
        end = min(offset + count, self.slot_count())
        return [self.at(i) for i in range(offset, end)]

    def tiles(self) -> Iterator[TileWithCoord]:
        """Yield a copy of every non-empty tile."""
        for slot in range(self.slot_count()):
            tile = self.read_slot(slot)
            if not tile.is_empty():
                yield TileWithCoord.from_key(self.slot_key(slot), tile)

    def __iter__(self) -> Iterator[TileWithCoord]:
        return self.tiles()

    def __len__(self) -> int:
        return self.slot_count()

    def __eq__(self, other) -> bool:
        if not isinstance(other, TileMap):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None

    # Connectivity

    def is_adjacent(self) -> bool:
        """True if all on pixels form a single 4-connected region."""
        return flood.is_adjacent(self)

    def is_adjacent_rectangle(self, x: int, y: int, size: int) -> bool:
        """True if a square at (x, y) would touch or overlap existing pixels."""
        return flood.is_adjacent_rectangle(self, x, y, size)

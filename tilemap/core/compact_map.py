"""
Tile Map - Compact Map

Dense tile store for a bounded canvas. Every tile of the canvas has a
slot from construction on, indexed row-major: ``x // 16 + (y // 16) *
tiles_wide``. Slots are never removed; an empty tile just means no
pixels. A running count of non-empty slots keeps ``is_empty`` O(1).
"""

from typing import Optional

from .tile import EMPTY_TILE, TILE_SIZE, InvalidCoordinates, Tile
from .tile_map import SlotNeighbors, TileMap
from .tile_with_coord import TileKey


class CompactMap(TileMap):
    """Fixed-size map covering a width x height pixel canvas."""

    def __init__(self, width: int, height: int):
        """
        Allocate an empty canvas.

        Args:
            width: Canvas width in pixels (positive multiple of 16)
            height: Canvas height in pixels (positive multiple of 16)

        Raises:
            ValueError: If a dimension is not a positive multiple of 16
        """
        for name, value in (("width", width), ("height", height)):
            if value <= 0 or value % TILE_SIZE != 0:
                raise ValueError(
                    f"Map {name} must be a positive multiple of {TILE_SIZE}, got {value}"
                )
        self.width = width
        self.height = height
        self.tiles_wide = width // TILE_SIZE
        self.tiles_high = height // TILE_SIZE
        self.grid: list[Tile] = [EMPTY_TILE] * (self.tiles_wide * self.tiles_high)
        self._non_empty = 0

    def get_size(self) -> tuple[int, int]:
        """Canvas (width, height) in pixels."""
        return self.width, self.height

    def key_of(self, x: int, y: int) -> TileKey:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise InvalidCoordinates(
                x, y, f"outside {self.width}x{self.height} map"
            )
        return TileKey(x // TILE_SIZE, y // TILE_SIZE)

    def slot_count(self) -> int:
        return len(self.grid)

    def slot_of(self, key: TileKey) -> Optional[int]:
        if 0 <= key.x < self.tiles_wide and 0 <= key.y < self.tiles_high:
            return key.x + key.y * self.tiles_wide
        return None

    def check_key(self, key: TileKey) -> None:
        if self.slot_of(key) is None:
            raise InvalidCoordinates(
                key.pixel_x, key.pixel_y, f"tile outside {self.width}x{self.height} map"
            )

    def slot_key(self, slot: int) -> TileKey:
        return TileKey(slot % self.tiles_wide, slot // self.tiles_wide)

    def slot_neighbors(self, slot: int) -> SlotNeighbors:
        col = slot % self.tiles_wide
        row = slot // self.tiles_wide
        up = slot - self.tiles_wide if row > 0 else None
        down = slot + self.tiles_wide if row < self.tiles_high - 1 else None
        left = slot - 1 if col > 0 else None
        right = slot + 1 if col < self.tiles_wide - 1 else None
        return up, down, left, right

    def read_slot(self, slot: int) -> Tile:
        return self.grid[slot]

    def write_slot(self, slot: int, tile: Tile) -> None:
        was_empty = self.grid[slot].is_empty()
        if was_empty != tile.is_empty():
            self._non_empty += 1 if was_empty else -1
        self.grid[slot] = tile

    def add_slot(self, key: TileKey, tile: Tile) -> int:
        # Every in-range key already has a slot
        raise InvalidCoordinates(
            key.pixel_x, key.pixel_y, f"tile outside {self.width}x{self.height} map"
        )

    def tile_count(self) -> int:
        return self._non_empty

    def find_non_empty_slot(self) -> Optional[int]:
        """
        Find any non-empty slot.

        Scans from the middle of the grid down to slot 0, then from the
        middle up to the last slot, so both halves are reached early.

        Returns:
            Slot index, or None if the map is empty
        """
        if self._non_empty == 0:
            return None
        middle = len(self.grid) // 2
        for slot in range(middle, -1, -1):
            if not self.read_slot(slot).is_empty():
                return slot
        for slot in range(middle + 1, len(self.grid)):
            if not self.read_slot(slot).is_empty():
                return slot
        return None

    def clear_all(self) -> None:
        self.grid = [EMPTY_TILE] * len(self.grid)
        self._non_empty = 0

    def __repr__(self) -> str:
        return f"CompactMap({self.width}x{self.height}, {self._non_empty} tiles)"

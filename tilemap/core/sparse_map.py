"""
Tile Map - Sparse Map

Associative tile store for scattered data. Tiles live in an unordered
list of slots with a dict from grid key to slot. Only non-empty tiles are
kept: when a tile is cleared to zero its slot is filled with the last
slot and the list shrinks, so ``len(map) == 0`` is the emptiness test.
"""

from typing import Optional

from .tile import Tile
from .tile_map import TileMap
from .tile_with_coord import TileKey, TileWithCoord


class SparseMap(TileMap):
    """Unbounded map holding only non-empty tiles."""

    def __init__(self):
        self.values: list[TileWithCoord] = []
        self.index: dict[TileKey, int] = {}

    def key_of(self, x: int, y: int) -> TileKey:
        return TileKey.from_pixel(x, y)

    def slot_count(self) -> int:
        return len(self.values)

    def slot_of(self, key: TileKey) -> Optional[int]:
        return self.index.get(key)

    def slot_key(self, slot: int) -> TileKey:
        return self.values[slot].key

    def read_slot(self, slot: int) -> Tile:
        return self.values[slot].tile

    def write_slot(self, slot: int, tile: Tile) -> None:
        if tile.is_empty():
            self._remove_slot(slot)
        else:
            self.values[slot].tile = tile

    def add_slot(self, key: TileKey, tile: Tile) -> int:
        if key in self.index:
            raise KeyError(f"Slot for {key} already exists")
        if tile.is_empty():
            raise ValueError("Sparse maps never hold empty tiles")
        self.values.append(TileWithCoord.from_key(key, tile))
        slot = len(self.values) - 1
        self.index[key] = slot
        return slot

    def _remove_slot(self, slot: int):
        """Swap the last slot into slot and drop the tail."""
        removed = self.values[slot].key
        last = self.values.pop()
        if slot < len(self.values):
            self.values[slot] = last
            self.index[last.key] = slot
        del self.index[removed]

    def tile_count(self) -> int:
        return len(self.values)

    def find_non_empty_slot(self) -> Optional[int]:
        return 0 if self.values else None

    def clear_all(self) -> None:
        self.values.clear()
        self.index.clear()

    def __repr__(self) -> str:
        return f"SparseMap({len(self.values)} tiles)"

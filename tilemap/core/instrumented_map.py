"""
Tile Map - Instrumented Maps

Instrumented versions of SparseMap and CompactMap that log every tile
read and write made through the slot interface, with annotations. The
trace shows exactly which tiles an operation touched, which is what
matters when each tile is costly to load or store.
"""

import json
from typing import Optional

from .compact_map import CompactMap
from .sparse_map import SparseMap
from .tile import Tile
from .tile_with_coord import TileKey


class _TileTrace:
    """Annotated trace of tile accesses, mixed into a TileMap subclass."""

    def __init__(self, *args, require_annotations: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self._pending_annotation: Optional[str] = None
        self._require_annotations = require_annotations
        self._trace: list[dict] = []

    def annotate(self, description: str):
        """
        Annotate the next operation's tile accesses.

        The annotation applies to every access until the next call to
        annotate() or reset_trace().

        Returns:
            self (for method chaining)
        """
        self._pending_annotation = description
        return self

    def _log_access(self, op_type: str, key: TileKey, tile: Tile):
        if self._pending_annotation is None and self._require_annotations:
            raise RuntimeError(
                f"{op_type.capitalize()} of tile ({key.pixel_x}, {key.pixel_y}) "
                f"without annotation"
            )
        self._trace.append({
            "type": op_type,
            "annotation": self._pending_annotation or "[no annotation]",
            "x": key.pixel_x,
            "y": key.pixel_y,
            "pixels": tile.bit_count(),
        })

    def get_trace(self) -> list[dict]:
        """Get the list of logged accesses."""
        return self._trace

    def touch_count(self, annotation: Optional[str] = None) -> int:
        """
        Number of distinct tiles touched.

        Args:
            annotation: Only count accesses with this annotation
        """
        touched = {
            (entry["x"], entry["y"])
            for entry in self._trace
            if annotation is None or entry["annotation"] == annotation
        }
        return len(touched)

    def reset_trace(self):
        self._trace = []
        self._pending_annotation = None

    def write_trace(self, path: str):
        """
        Write trace to JSON file.

        Args:
            path: Output file path
        """
        with open(path, "w") as f:
            json.dump({"entries": self._trace}, f, indent=2)
        print(f"Wrote tile trace ({len(self._trace)} entries) to: {path}")

    # Slot interface overrides

    def read_slot(self, slot: int) -> Tile:
        tile = super().read_slot(slot)
        self._log_access("read", self.slot_key(slot), tile)
        return tile

    def write_slot(self, slot: int, tile: Tile) -> None:
        key = self.slot_key(slot)
        super().write_slot(slot, tile)
        self._log_access("write", key, tile)

    def add_slot(self, key: TileKey, tile: Tile) -> int:
        slot = super().add_slot(key, tile)
        self._log_access("add", key, tile)
        return slot


class InstrumentedSparseMap(_TileTrace, SparseMap):
    """
    SparseMap that logs all tile accesses.

    Usage:
        patch = InstrumentedSparseMap()
        patch.annotate("claim").set(8, 8, 4)
        patch.annotate("adjacency").is_adjacent_rectangle(12, 8, 2)
        patch.touch_count("adjacency")
    """

    pass


class InstrumentedCompactMap(_TileTrace, CompactMap):
    """
    CompactMap that logs all tile accesses.

    Usage:
        canvas = InstrumentedCompactMap(128, 128)
        canvas.annotate("flood").is_adjacent()
        canvas.write_trace("flood_trace.json")
    """

    pass

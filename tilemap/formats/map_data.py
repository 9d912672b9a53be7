"""
Tile Map - Map Data Files

Loads and saves tile maps as JSON. A file records the store kind, the
canvas size for compact maps, and one entry per non-empty tile:

    {
      "kind": "sparse",
      "tiles": [
        {"x": 0, "y": 0, "data": "000...1F"},
        ...
      ]
    }

x and y are tile-grid coordinates; data is the tile word in hex.
"""

from typing import Any, Dict, Optional

from . import compact_json as json
from .tile_hex import format_tile_hex, parse_tile_hex
from ..core.compact_map import CompactMap
from ..core.sparse_map import SparseMap
from ..core.tile_map import TileMap
from ..core.tile_with_coord import TileKey, TileWithCoord

SPARSE = "sparse"
COMPACT = "compact"


def map_to_dict(tile_map: TileMap) -> Dict[str, Any]:
    """Convert a map to its JSON-ready dictionary."""
    if isinstance(tile_map, CompactMap):
        data: Dict[str, Any] = {
            "kind": COMPACT,
            "width": tile_map.width,
            "height": tile_map.height,
        }
    elif isinstance(tile_map, SparseMap):
        data = {"kind": SPARSE}
    else:
        raise ValueError(f"Unsupported map type: {type(tile_map).__name__}")

    entries = sorted(tile_map.tiles(), key=lambda t: (t.key.y, t.key.x))
    data["tiles"] = [
        {"x": t.key.x, "y": t.key.y, "data": format_tile_hex(t.tile)}
        for t in entries
    ]
    return data


def map_from_dict(data: Dict[str, Any]) -> TileMap:
    """
    Build a map from its dictionary form.

    Raises:
        ValueError: If a required field is missing or malformed
    """
    kind = data.get("kind", SPARSE)
    if kind == SPARSE:
        tile_map: TileMap = SparseMap()
    elif kind == COMPACT:
        for field in ("width", "height"):
            if field not in data:
                raise ValueError(f"Missing '{field}' for compact map")
        tile_map = CompactMap(data["width"], data["height"])
    else:
        raise ValueError(f"Unknown map kind '{kind}'")

    for i, entry in enumerate(data.get("tiles", [])):
        for field in ("x", "y", "data"):
            if field not in entry:
                raise ValueError(f"Tile {i} is missing '{field}'")
        key = TileKey(entry["x"], entry["y"])
        if key.x < 0 or key.y < 0:
            raise ValueError(f"Tile {i} has negative coordinates ({key.x}, {key.y})")
        tile_map.set_tile(TileWithCoord.from_key(key, parse_tile_hex(entry["data"])))

    return tile_map


class MapData:
    """Manages a tile map together with the file it came from."""

    def __init__(self, tile_map: Optional[TileMap] = None):
        self.tile_map: TileMap = tile_map if tile_map is not None else SparseMap()
        self.filepath: Optional[str] = None

    def load(self, path: str):
        """Load map data from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)

        self.tile_map = map_from_dict(data)
        self.filepath = path

    def save(self, path: Optional[str] = None):
        """Save map data to JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        with open(path, "w") as f:
            json.dump(map_to_dict(self.tile_map), f, indent=2)

        self.filepath = path

#!/usr/bin/env python3
"""
Tile Map - Connectivity Checker

Reports whether each map's pixels form a single 4-connected region and
how many tiles the check had to touch.
"""

import argparse
import sys
from pathlib import Path

from tilemap.core.compact_map import CompactMap
from tilemap.core.flood import flood
from tilemap.core.instrumented_map import InstrumentedCompactMap, InstrumentedSparseMap
from tilemap.core.tile import TileError
from tilemap.formats.map_data import MapData


def instrument(tile_map):
    """Copy a loaded map into its instrumented counterpart."""
    if isinstance(tile_map, CompactMap):
        traced = InstrumentedCompactMap(tile_map.width, tile_map.height)
    else:
        traced = InstrumentedSparseMap()
    traced.set_from(tile_map)
    traced.reset_trace()
    return traced


def check_map(map_path: str, trace_path: str | None = None) -> bool:
    """
    Check one map file and print a summary.

    Returns:
        True if the map is connected
    """
    map_data = MapData()
    map_data.load(map_path)
    traced = instrument(map_data.tile_map)

    connected = traced.annotate("is_adjacent").is_adjacent()
    _, rounds = flood(map_data.tile_map)

    status = "connected" if connected else "NOT connected"
    print(
        f"{map_path}: {status} "
        f"({traced.tile_count()} tiles, {rounds} flood rounds, "
        f"{traced.touch_count('is_adjacent')} tiles touched)"
    )

    if trace_path:
        traced.write_trace(trace_path)

    return connected


def main():
    parser = argparse.ArgumentParser(
        description="Check tile maps for 4-connectivity",
    )
    parser.add_argument("maps", nargs="+", help="Map JSON files to check")
    parser.add_argument(
        "--trace",
        type=str,
        help="Write the tile access trace to this JSON file (single map only)",
    )

    args = parser.parse_args()

    if args.trace and len(args.maps) > 1:
        print("Error: --trace only works with a single map")
        sys.exit(1)

    all_connected = True
    for map_path in args.maps:
        if not Path(map_path).exists():
            print(f"Error: {map_path} not found")
            sys.exit(1)
        try:
            all_connected &= check_map(map_path, args.trace)
        except (ValueError, TileError) as e:
            print(f"Error: {map_path}: {e}")
            sys.exit(1)

    sys.exit(0 if all_connected else 2)


if __name__ == "__main__":
    main()

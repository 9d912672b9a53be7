#!/usr/bin/env python3
"""
Tile Map - Flood Fill Analyzer

Builds random maps of squares and reports how many flood rounds and tile
touches the connectivity checks need.
Usage: python tools/analyze.py [--maps N] [--squares N] [--size PIXELS] [--seed N]
"""

import argparse
import random

import numpy as np

from tilemap.core.flood import flood
from tilemap.core.instrumented_map import InstrumentedSparseMap
from tilemap.core.tile import TILE_SIZE


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "count": len(values),
    }


def random_squares(rng: random.Random, max_x: int, max_y: int, count: int):
    """Random (x, y, size) squares, each clipped to stay inside its tile."""
    squares = []
    for _ in range(count):
        x = rng.randrange(max_x)
        y = rng.randrange(max_y)
        size = rng.randint(1, TILE_SIZE)
        size = min(TILE_SIZE - x % TILE_SIZE, TILE_SIZE - y % TILE_SIZE, size)
        squares.append((x, y, size))
    return squares


def print_stats(title, stats):
    print(f"{title}:")
    print(
        f"  min={stats['min']:.0f} 25th={stats['25th']:.1f} "
        f"50th={stats['50th']:.1f} 75th={stats['75th']:.1f} max={stats['max']:.0f}"
    )


def analyze(maps: int, squares: int, size: int, seed: int):
    rng = random.Random(seed)
    rounds = []
    flood_touches = []
    probe_touches = []
    connected_count = 0

    for _ in range(maps):
        tile_map = InstrumentedSparseMap()
        for x, y, side in random_squares(rng, size, size, squares):
            tile_map.set(x, y, side)
        tile_map.reset_trace()

        if tile_map.annotate("full").is_adjacent():
            connected_count += 1
        _, map_rounds = flood(tile_map)
        rounds.append(map_rounds)
        flood_touches.append(tile_map.touch_count("full"))

        x, y, side = random_squares(rng, size, size, 1)[0]
        tile_map.annotate("probe").is_adjacent_rectangle(x, y, side)
        probe_touches.append(tile_map.touch_count("probe"))

    print(f"Analyzed {maps} random maps of {squares} squares on {size}x{size} pixels")
    print(f"Connected: {connected_count}/{maps}\n")
    print_stats("Flood rounds", percentile_stats(rounds))
    print_stats("Tiles touched by full check", percentile_stats(flood_touches))
    print_stats("Tiles touched by rectangle check", percentile_stats(probe_touches))


def main():
    parser = argparse.ArgumentParser(description="Flood fill cost statistics on random maps")
    parser.add_argument("--maps", type=int, default=50, help="Number of maps (default: 50)")
    parser.add_argument("--squares", type=int, default=30, help="Squares per map (default: 30)")
    parser.add_argument("--size", type=int, default=128, help="Canvas size in pixels (default: 128)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    args = parser.parse_args()

    analyze(args.maps, args.squares, args.size, args.seed)


if __name__ == "__main__":
    main()

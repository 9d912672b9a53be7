#!/usr/bin/env python3
"""
Tile Map - Map Renderer

Renders tile map JSON files as PNG images, optionally coloring the
pixels a flood fill reaches from the seed pixel.
"""

import argparse
import sys
from pathlib import Path

from tilemap.core.flood import flood
from tilemap.formats.map_data import MapData
from tilemap.rendering.pil_renderer import render_map_to_image


def render_map(
    map_path: str,
    output_path: str,
    scale: int = 4,
    show_flood: bool = False,
    show_grid: bool = True,
):
    """Render a single map file to PNG."""
    map_data = MapData()
    map_data.load(map_path)

    frontier = None
    if show_flood:
        frontier, rounds = flood(map_data.tile_map)
        print(f"Flood settled after {rounds} rounds")

    img = render_map_to_image(
        map_data.tile_map, scale=scale, frontier=frontier, show_grid=show_grid
    )
    img.save(output_path)
    print(f"Saved: {output_path} ({img.width}x{img.height})")


def render_directory(
    map_dir: str,
    output_dir: str,
    scale: int = 4,
    show_flood: bool = False,
    show_grid: bool = True,
):
    """Render every map JSON file in a directory."""
    map_path = Path(map_dir)
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    map_files = sorted(map_path.glob("*.json"))

    if not map_files:
        print(f"No map files found in {map_dir}")
        return

    print(f"Rendering {len(map_files)} maps from {map_dir}...")

    for map_file in map_files:
        out_file = output_path / f"{map_file.stem}.png"
        render_map(str(map_file), str(out_file), scale, show_flood, show_grid)


def main():
    parser = argparse.ArgumentParser(
        description="Render tile map JSON files as PNG images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render single map:
    python tools/render.py maps/patch.json
    python tools/render.py maps/patch.json patch.png

  Render a directory of maps:
    python tools/render.py maps/ renders/

  Show which pixels the flood fill reaches:
    python tools/render.py maps/patch.json --flood
        """,
    )
    parser.add_argument("input", help="Path to map JSON file or directory")
    parser.add_argument(
        "output", nargs="?", help="Output PNG file or directory (optional)"
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=int,
        default=4,
        help="Image pixels per map pixel (default: 4)",
    )
    parser.add_argument(
        "--flood",
        action="store_true",
        help="Color pixels reached / not reached by the flood fill",
    )
    parser.add_argument(
        "--no-grid",
        action="store_true",
        help="Do not draw tile boundaries",
    )

    args = parser.parse_args()

    if args.scale < 1:
        print("Error: --scale must be at least 1")
        sys.exit(1)

    input_p = Path(args.input)

    if not input_p.exists():
        print(f"Error: {args.input} not found")
        sys.exit(1)

    try:
        if input_p.is_file():
            output_path = args.output if args.output else input_p.stem + ".png"
            render_map(args.input, output_path, args.scale, args.flood, not args.no_grid)
        else:
            output_dir = args.output if args.output else f"renders/{input_p.name}"
            render_directory(args.input, output_dir, args.scale, args.flood, not args.no_grid)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

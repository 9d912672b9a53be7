"""
Tile Map - Render Colors

Shared colour constants for map rendering used by the render and check
tools.
"""

from typing import Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

BACKGROUND_COLOR: RGBColor = (0x20, 0x20, 0x20)
PIXEL_COLOR: RGBColor = (0xF0, 0xF0, 0xF0)

# Pixels reached by the flood fill vs. pixels it never reached
FLOOD_REACHED_COLOR: RGBColor = (0x5C, 0xE4, 0x30)
FLOOD_UNREACHED_COLOR: RGBColor = (0xE4, 0x40, 0x30)

# Tile boundary lines (drawn only when scale >= 2)
GRID_COLOR: RGBColor = (0x40, 0x40, 0x60)

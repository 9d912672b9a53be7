"""
Tile Map - Hex String Utilities

Utilities for parsing and formatting tile words as hex strings in map
files. A tile word is written as 64 uppercase hex digits, most
significant digit first, so the last four digits hold row 0.
"""

from typing import List

from ..core.tile import TILE_BITS, Tile

TILE_HEX_DIGITS = TILE_BITS // 4


def format_tile_hex(tile: Tile) -> str:
    """
    Format a tile as a fixed-width hex string.

    Example:
        >>> format_tile_hex(Tile(0x1F))[-4:]
        '001F'
    """
    return f"{tile.data:0{TILE_HEX_DIGITS}X}"


def parse_tile_hex(text: str) -> Tile:
    """
    Parse a hex tile word.

    Accepts an optional "0x" prefix, either case, and fewer than 64 digits
    (leading zeros may be omitted).

    Raises:
        ValueError: If the text is not hex or has more than 64 digits
    """
    digits = text.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    if not digits or len(digits) > TILE_HEX_DIGITS:
        raise ValueError(f"Tile hex must have 1-{TILE_HEX_DIGITS} digits, got {text!r}")
    return Tile(int(digits, 16))


def format_tile_hexes(tiles: List[Tile]) -> List[str]:
    return [format_tile_hex(tile) for tile in tiles]


def parse_tile_hexes(texts: List[str]) -> List[Tile]:
    return [parse_tile_hex(text) for text in texts]

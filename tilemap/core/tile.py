"""
Tile Map - 16x16 Bit Tiles

A tile is a 16x16 boolean grid packed into one 256-bit integer.
Bit ``y * 16 + x`` holds pixel (x, y), so each row occupies 16
consecutive bits and row 0 is the least significant.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Tuple

# Tile format constants
TILE_SIZE = 16  # 16x16 pixels per tile
TILE_BITS = TILE_SIZE * TILE_SIZE  # 256 bits per tile

FULL_MASK = (1 << TILE_BITS) - 1
ROW_MASK = (1 << TILE_SIZE) - 1

# One bit at the start of every row; multiplying a row pattern by this
# repeats it on all 16 rows.
_ROW_STARTS = FULL_MASK // ROW_MASK

FIRST_ROW = ROW_MASK
LAST_ROW = ROW_MASK << (TILE_BITS - TILE_SIZE)
FIRST_COLUMN = _ROW_STARTS
LAST_COLUMN = _ROW_STARTS << (TILE_SIZE - 1)

# Rectangle masks used when shifting sideways so bits never wrap into
# the neighbouring row.
NOT_FIRST_COLUMN = FULL_MASK ^ FIRST_COLUMN
NOT_LAST_COLUMN = FULL_MASK ^ LAST_COLUMN


class TileError(Exception):
    """Base class for tile and tile map contract violations."""

    pass


class InvalidSize(TileError):
    """Raised when a square size is outside 1-16."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Invalid size {self.size}, must be 1-{TILE_SIZE}"


class InvalidCoordinates(TileError):
    """Raised when coordinates fall outside a tile, a map or the expected tile."""

    def __init__(self, x: int, y: int, reason: str = "out of range"):
        self.x = x
        self.y = y
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Invalid coordinates ({self.x}, {self.y}): {self.reason}"


def _square_mask(x: int, y: int, size: int) -> int:
    line = ((1 << size) - 1) << x
    return (line * (_ROW_STARTS & ((1 << (size * TILE_SIZE)) - 1))) << (y * TILE_SIZE)


def rectangle_mask(x: int, y: int, size: int) -> int:
    """
    Build the bit mask of a size x size square at local offset (x, y).

    Args:
        x: Column of the top-left pixel (0-15)
        y: Row of the top-left pixel (0-15)
        size: Side of the square (1-16)

    Returns:
        256-bit integer with the square's bits set

    Raises:
        InvalidSize: If size is not 1-16
        InvalidCoordinates: If the square does not fit inside the tile
    """
    if size < 1 or size > TILE_SIZE:
        raise InvalidSize(size)
    if x < 0 or y < 0 or x + size > TILE_SIZE or y + size > TILE_SIZE:
        raise InvalidCoordinates(x, y, f"square of size {size} crosses the tile boundary")
    return _square_mask(x, y, size)


def grow_bits(data: int) -> Tuple[int, int, int, int, int]:
    """
    Dilate a tile word by one pixel in the four axis directions.

    Returns:
        Tuple of (middle, up, down, left, right). The middle word is the
        dilation clipped to this tile; the other four are the pixels that
        spilled over each edge, expressed in the neighbour tile's local
        coordinates (up -> row 15, down -> row 0, left -> column 15,
        right -> column 0).
    """
    middle = (
        data
        | ((data << 1) & NOT_FIRST_COLUMN)
        | ((data >> 1) & NOT_LAST_COLUMN)
        | ((data << TILE_SIZE) & FULL_MASK)
        | (data >> TILE_SIZE)
    )
    up = (data & FIRST_ROW) << (TILE_BITS - TILE_SIZE)
    down = (data & LAST_ROW) >> (TILE_BITS - TILE_SIZE)
    left = (data & FIRST_COLUMN) << (TILE_SIZE - 1)
    right = (data & LAST_COLUMN) >> (TILE_SIZE - 1)
    return middle, up, down, left, right


@dataclass(frozen=True)
class Tile:
    """
    Immutable 16x16 bit tile.

    Every operation returns a new Tile; instances are hashable and can be
    compared with ``==``.
    """

    data: int = 0

    def __post_init__(self):
        if self.data < 0 or self.data > FULL_MASK:
            raise ValueError(f"Tile data must fit in {TILE_BITS} bits")

    # Rectangle mutation

    def set(self, x: int, y: int, size: int = 1) -> "Tile":
        """Return a copy with the size x size square at (x, y) turned on."""
        return Tile(self.data | rectangle_mask(x, y, size))

    def clear(self, x: int, y: int, size: int = 1) -> "Tile":
        """Return a copy with the size x size square at (x, y) turned off."""
        return Tile(self.data & ~rectangle_mask(x, y, size))

    # Membership

    def contain(self, x: int, y: int, size: int = 1) -> bool:
        """
        Check whether every pixel of a square is on.

        A square that does not fit inside the tile is reported as not
        contained instead of raising, so callers can use this as a cheap
        pre-check.

        Raises:
            InvalidSize: If size is not 1-16
        """
        if size < 1 or size > TILE_SIZE:
            raise InvalidSize(size)
        if x < 0 or y < 0 or x + size > TILE_SIZE or y + size > TILE_SIZE:
            return False
        mask = _square_mask(x, y, size)
        return self.data & mask == mask

    def contain_tile(self, other: "Tile") -> bool:
        """Check whether every pixel of other is also on here."""
        return self.data & other.data == other.data

    # Combinators

    def union(self, other: "Tile") -> "Tile":
        return Tile(self.data | other.data)

    def intersection(self, other: "Tile") -> "Tile":
        return Tile(self.data & other.data)

    def subtract(self, other: "Tile") -> "Tile":
        return Tile(self.data & ~other.data)

    def invert(self) -> "Tile":
        return Tile(self.data ^ FULL_MASK)

    __or__ = union
    __and__ = intersection
    __sub__ = subtract
    __invert__ = invert

    @classmethod
    def union_all(cls, tiles: Iterable["Tile"]) -> "Tile":
        """OR together any number of tiles."""
        data = 0
        for tile in tiles:
            data |= tile.data
        return cls(data)

    @classmethod
    def intersection_all(cls, tiles: Iterable["Tile"]) -> "Tile":
        """AND together any number of tiles (an empty iterable gives a full tile)."""
        data = FULL_MASK
        for tile in tiles:
            data &= tile.data
        return cls(data)

    # Predicates

    def is_empty(self) -> bool:
        return self.data == 0

    def is_equal(self, other: "Tile") -> bool:
        return self.data == other.data

    def is_adjacent(self, other: "Tile") -> bool:
        """True if the two tiles share at least one pixel."""
        return self.data & other.data != 0

    def bit_count(self) -> int:
        return self.data.bit_count()

    # Flood fill primitives

    def grow(self) -> "ExtendedTile":
        """Dilate one pixel in the four axis directions."""
        middle, up, down, left, right = grow_bits(self.data)
        return ExtendedTile(
            middle=Tile(middle),
            up=Tile(up),
            down=Tile(down),
            left=Tile(left),
            right=Tile(right),
        )

    def find_a_pixel(self) -> "Tile":
        """Return a tile holding only the lowest set pixel (empty if none)."""
        return Tile(self.data & -self.data)

    def flood_step(self, frontier: "Tile") -> "Tile":
        """Grow frontier one step without leaving this tile's pixels."""
        middle = grow_bits(frontier.data)[0]
        return Tile(middle & self.data)

    def is_connected(self) -> bool:
        """
        Check whether the on pixels form one 4-connected region.

        Only this tile is considered; pixels that would connect through a
        neighbouring tile do not count. An empty tile is connected.
        """
        current = self.find_a_pixel()
        while True:
            next_frontier = self.flood_step(current)
            if next_frontier == current:
                return current == self
            current = next_frontier

    # Conversion

    def pixels(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) for every on pixel in bit order."""
        data = self.data
        while data:
            low = data & -data
            index = low.bit_length() - 1
            yield index % TILE_SIZE, index // TILE_SIZE
            data ^= low

    def to_rows(self) -> List[str]:
        """Render as 16 strings of 'X' (on) and 'O' (off), row 0 first."""
        rows = []
        for y in range(TILE_SIZE):
            line = (self.data >> (y * TILE_SIZE)) & ROW_MASK
            rows.append("".join("X" if line >> x & 1 else "O" for x in range(TILE_SIZE)))
        return rows

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Tile":
        """
        Parse a picture made of 'X'/'O' characters.

        Whitespace is ignored; 'O' and '.' are off, anything else is on.
        Rows shorter than 16 pixels are padded with off pixels.

        Raises:
            InvalidCoordinates: If the picture is larger than 16x16
        """
        if len(rows) > TILE_SIZE:
            raise InvalidCoordinates(0, len(rows) - 1, "picture has more than 16 rows")
        data = 0
        for y, row in enumerate(rows):
            cells = [c for c in row if not c.isspace()]
            if len(cells) > TILE_SIZE:
                raise InvalidCoordinates(len(cells) - 1, y, "picture row wider than 16")
            for x, cell in enumerate(cells):
                if cell not in "O.":
                    data |= 1 << (y * TILE_SIZE + x)
        return cls(data)

    def __repr__(self) -> str:
        return f"Tile(0x{self.data:064X})"


EMPTY_TILE = Tile(0)
FULL_TILE = Tile(FULL_MASK)


class ExtendedTile(NamedTuple):
    """
    Result of growing a tile by one pixel.

    middle is the dilation clipped to the tile. up/down/left/right are the
    pixels that crossed each edge, already placed in the neighbour's own
    coordinates so they can be OR-ed straight into the neighbour.
    """

    middle: Tile
    up: Tile
    down: Tile
    left: Tile
    right: Tile

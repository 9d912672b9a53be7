"""
Tile Map - Multi-Tile Flood Fill

Answers "is the set of on pixels a single 4-connected region?" for any
TileMap, working on whole 256-bit tiles at a time.

Algorithm (fixed-point flood fill):
1. Seed a frontier with one pixel of one non-empty tile.
2. Each round, dilate every non-empty frontier tile by one pixel. The
   dilation clipped to the tile goes back into the same slot; pixels that
   cross an edge go into the neighbour slot (or are dropped when there is
   no neighbour). Then AND every slot with the map's real tile so the
   flood never claims pixels that are not on.
3. Stop when a round changes nothing. The map is connected iff the final
   frontier equals the map.

The frontier only grows and is bounded by the map, so the loop always
terminates; in practice it runs for about the Manhattan diameter of the
region. The map is only read, never written.
"""

from typing import TYPE_CHECKING, List, NamedTuple, Optional

from .tile import TILE_SIZE, Tile, grow_bits, rectangle_mask

if TYPE_CHECKING:
    from .tile_map import SlotNeighbors, TileMap


class FloodState(NamedTuple):
    """One round of the flood fill: frontier before and after, and whether it settled."""

    current: List[Tile]
    next: List[Tile]
    done: bool


class _FloodGrid:
    """Snapshot of a map's tiles and neighbour slots for one flood run."""

    def __init__(self, store: "TileMap"):
        self.store = store
        self.actual = [store.read_slot(slot).data for slot in range(store.slot_count())]
        self._neighbors: List[Optional["SlotNeighbors"]] = [None] * len(self.actual)

    def neighbors(self, slot: int) -> "SlotNeighbors":
        cached = self._neighbors[slot]
        if cached is None:
            cached = self.store.slot_neighbors(slot)
            self._neighbors[slot] = cached
        return cached

    def seed(self) -> List[int]:
        frontier = [0] * len(self.actual)
        slot = self.store.find_non_empty_slot()
        if slot is not None:
            bits = self.actual[slot]
            frontier[slot] = bits & -bits
        return frontier

    def step(self, current: List[int]) -> List[int]:
        grown = [0] * len(current)
        for slot, bits in enumerate(current):
            if not bits:
                continue
            middle, up, down, left, right = grow_bits(bits)
            grown[slot] |= middle
            up_slot, down_slot, left_slot, right_slot = self.neighbors(slot)
            if up and up_slot is not None:
                grown[up_slot] |= up
            if down and down_slot is not None:
                grown[down_slot] |= down
            if left and left_slot is not None:
                grown[left_slot] |= left
            if right and right_slot is not None:
                grown[right_slot] |= right
        return [g & a for g, a in zip(grown, self.actual)]

    def run(self) -> tuple[List[int], int]:
        current = self.seed()
        rounds = 0
        while True:
            next_frontier = self.step(current)
            rounds += 1
            if next_frontier == current:
                return current, rounds
            current = next_frontier


def _to_tiles(frontier: List[int]) -> List[Tile]:
    return [Tile(bits) for bits in frontier]


def seed_frontier(store: "TileMap") -> List[Tile]:
    """
    Initial frontier: empty everywhere except the lowest pixel of one
    non-empty slot (all empty when the map is empty).
    """
    return _to_tiles(_FloodGrid(store).seed())


def flood_step(store: "TileMap", current: List[Tile]) -> FloodState:
    """
    Run one round of the flood fill.

    Args:
        store: Map being flooded (read only)
        current: Frontier with one tile per slot of store

    Returns:
        FloodState with the input frontier, the grown frontier and whether
        the two are equal

    Raises:
        ValueError: If current does not have one tile per slot
    """
    if len(current) != store.slot_count():
        raise ValueError(
            f"Frontier has {len(current)} tiles, map has {store.slot_count()} slots"
        )
    grid = _FloodGrid(store)
    next_bits = grid.step([tile.data for tile in current])
    next_frontier = _to_tiles(next_bits)
    return FloodState(current=current, next=next_frontier, done=next_frontier == current)


def flood(store: "TileMap") -> tuple[List[Tile], int]:
    """
    Flood from the seed pixel until the frontier stops changing.

    Returns:
        Tuple of (final frontier, number of rounds run)
    """
    frontier, rounds = _FloodGrid(store).run()
    return _to_tiles(frontier), rounds


def is_adjacent(store: "TileMap") -> bool:
    """
    Check whether all on pixels of store form one 4-connected region.

    An empty map is connected. Diagonal contact does not connect.
    """
    if store.is_empty():
        return True
    grid = _FloodGrid(store)
    frontier, _ = grid.run()
    return frontier == grid.actual


def is_adjacent_rectangle(store: "TileMap", x: int, y: int, size: int) -> bool:
    """
    Check whether a size x size square at (x, y) would touch existing pixels.

    Only the square's own tile and its four neighbours are read: the
    square is grown by one pixel and each part of the growth is tested
    for overlap against the matching tile. Overlap with existing pixels
    also counts as touching.

    Raises:
        InvalidSize: If size is not 1-16
        InvalidCoordinates: If the square crosses a tile boundary or lies
            outside the map
    """
    key = store.key_of(x, y)
    mask = rectangle_mask(x % TILE_SIZE, y % TILE_SIZE, size)
    middle, up, down, left, right = grow_bits(mask)
    checks = (
        (key, middle),
        (key.neighbor(0, -1), up),
        (key.neighbor(0, 1), down),
        (key.neighbor(-1, 0), left),
        (key.neighbor(1, 0), right),
    )
    for neighbor, grown in checks:
        if neighbor is None or not grown:
            continue
        slot = store.slot_of(neighbor)
        if slot is None:
            continue
        if store.read_slot(slot).data & grown:
            return True
    return False

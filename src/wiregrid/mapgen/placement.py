# src/wiregrid/mapgen/placement.py
# Grid synthesis steps that write tiles: path placement, decoys, fill,
# fixed marking and scrambling. Every random draw goes through `rng`.

import logging
import math
from typing import List, Optional, Sequence, Tuple

from ..grid import Grid, Tile
from ..rng import SeededRandom
from ..tiles import (
    VALID_ROTATIONS, TileDefinition, TileType, definition_for,
    direction_between, rotate_connections,
)
from .path import PathStep

logger = logging.getLogger(__name__)

# Chance an empty cell left after decoys receives a random tile.
FILL_CHANCE = 0.7

_DECOY_DELTAS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def required_connections(path: Sequence[PathStep], i: int) -> int:
    """Mask a path cell needs: toward the previous cell and toward the next."""
    cur = path[i]
    mask = 0
    if i > 0:
        prev = path[i - 1]
        mask |= direction_between(cur.x, cur.y, prev.x, prev.y)
    if i < len(path) - 1:
        nxt = path[i + 1]
        mask |= direction_between(cur.x, cur.y, nxt.x, nxt.y)
    return int(mask)


def tile_candidates(required: int, allowed: Sequence[TileType]) -> List[Tuple[TileDefinition, int]]:
    # Extra connections are allowed: a T-junction can stand in for a straight.
    out = []
    for tile_type in allowed:
        definition = definition_for(tile_type)
        for rotation in VALID_ROTATIONS:
            rotated = rotate_connections(definition.base_connections, rotation // 90)
            if (rotated & required) == required:
                out.append((definition, rotation))
    return out


def find_tile_for_connections(
    required: int, allowed: Sequence[TileType], rng: SeededRandom
) -> Optional[Tile]:
    cands = tile_candidates(required, allowed)
    if not cands:
        return None
    definition, rotation = cands[rng.next_int(0, len(cands) - 1)]
    return Tile(definition, rotation, False)


def random_tile(allowed: Sequence[TileType], rng: SeededRandom) -> Tile:
    definition = definition_for(rng.pick(allowed))
    return Tile(definition, rng.next_int(0, 3) * 90, False)


def place_path_tiles(
    grid: Grid, path: Sequence[PathStep], allowed: Sequence[TileType], rng: SeededRandom
) -> bool:
    """Lay a connecting tile on every path cell. False if some cell has no fit."""
    for i, step in enumerate(path):
        required = required_connections(path, i)
        tile = find_tile_for_connections(required, allowed, rng)
        if tile is None:
            logger.debug("no tile fits (%d,%d) with connections %d", step.x, step.y, required)
            return False
        grid.set(step.x, step.y, tile)
    return True


def add_decoy_branches(
    grid: Grid,
    path: Sequence[PathStep],
    count: int,
    allowed: Sequence[TileType],
    rng: SeededRandom,
) -> int:
    """
    Hang a random tile off a random path cell, `count` times. Decoys are not
    required to connect to anything. A branch point with no free neighbour is
    skipped. Returns the number of decoys placed.
    """
    on_path = {(p.x, p.y) for p in path}
    placed = 0
    for _ in range(count):
        branch = path[rng.next_int(0, len(path) - 1)]
        for dx, dy in rng.shuffle(_DECOY_DELTAS):
            nx, ny = branch.x + dx, branch.y + dy
            if grid.in_bounds(nx, ny) and (nx, ny) not in on_path:
                grid.set(nx, ny, random_tile(allowed, rng))
                placed += 1
                break
    return placed


def fill_empty_spaces(grid: Grid, allowed: Sequence[TileType], rng: SeededRandom) -> int:
    filled = 0
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.get(x, y).type is not TileType.EMPTY:
                continue
            if rng.next_float() < FILL_CHANCE:
                grid.set(x, y, random_tile(allowed, rng))
                filled += 1
    return filled


def mark_fixed_tiles(grid: Grid, percentage: float, rng: SeededRandom) -> int:
    """Lock floor(n * percentage) of the rotatable tiles, path tiles included."""
    if percentage == 0:
        return 0
    rotatable = [t for t in grid.tiles() if t.definition.rotatable]
    fix_count = math.floor(len(rotatable) * percentage)
    for tile in rng.shuffle(rotatable)[:fix_count]:
        tile.fixed = True
    return fix_count


def scramble_tiles(grid: Grid, path: Sequence[PathStep], rng: SeededRandom) -> int:
    """
    Re-roll the rotation of every rotatable, unfixed tile that is off the
    solution path. Path tiles keep the rotation placement gave them; that is
    what keeps the puzzle solvable.
    """
    on_path = {(p.x, p.y) for p in path}
    scrambled = 0
    for tile in grid.tiles():
        if tile.definition.rotatable and not tile.fixed and (tile.x, tile.y) not in on_path:
            tile.rotation = rng.next_int(0, 3) * 90
            scrambled += 1
    return scrambled

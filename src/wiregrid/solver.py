# src/wiregrid/solver.py
"""
Breadth-first solver over the grid's current rotations.

Works only from the tiles as they sit now, never from the generator's
recorded path, so it answers "is this grid solvable as rotated" both right
after generation and after player moves.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Tuple

from .grid import Grid, Tile
from .mapgen.path import PathStep
from .tiles import DIRECTION_DELTAS, Direction, opposite_direction, tile_connections

Pos = Tuple[int, int]


@dataclass
class SolveResult:
    solved: bool
    path: Optional[List[PathStep]]
    path_length: int
    explored_nodes: int
    message: str


def has_connection(tile: Tile, direction: Direction) -> bool:
    return bool(tile_connections(tile) & direction)


def tiles_connected(a: Tile, b: Tile, direction: Direction) -> bool:
    """True when `a` plugs into `b` (lying `direction` from a) and `b` plugs back."""
    if not tile_connections(a) & direction:
        return False
    back = opposite_direction(direction)
    if back == Direction.NONE:
        return False
    return bool(tile_connections(b) & back)


def _exits(tile: Tile, entry: Direction, strict: bool) -> int:
    mask = tile_connections(tile)
    groups = tile.definition.connection_groups
    if not strict or not groups or entry == Direction.NONE:
        return mask
    # Criss-cross: signal leaves only through the far side of the group it came in on.
    for group in groups:
        if entry in group:
            out = 0
            for d in group:
                if d != entry:
                    out |= d
            return out & mask
    return 0


def _state_key(tile: Tile, x: int, y: int, entry: Direction, strict: bool):
    groups = tile.definition.connection_groups
    if strict and groups and entry != Direction.NONE:
        for i, group in enumerate(groups):
            if entry in group:
                return (x, y, i)
    return (x, y, None)


def _steps(grid: Grid, x: int, y: int, entry: Direction, strict: bool) -> Iterator[Tuple[int, int, Direction]]:
    tile = grid.get(x, y)
    exits = _exits(tile, entry, strict)
    for d, dx, dy in DIRECTION_DELTAS:
        if not exits & d:
            continue
        nx, ny = x + dx, y + dy
        if not grid.in_bounds(nx, ny):
            continue
        if not tile_connections(grid.get(nx, ny)) & opposite_direction(d):
            continue
        yield nx, ny, d


def _search(grid: Grid, start: Pos, strict: bool, goal: Optional[Pos] = None):
    """BFS from `start`. Yields (x, y, path, explored) for each dequeued node."""
    sx, sy = start
    first = [PathStep(sx, sy, Direction.NONE)]
    queue = deque([(sx, sy, Direction.NONE, first)])
    seen = {_state_key(grid.get(sx, sy), sx, sy, Direction.NONE, strict)}
    explored = 0
    while queue:
        x, y, entry, path = queue.popleft()
        explored += 1
        yield x, y, path, explored
        if goal is not None and (x, y) == goal:
            return
        for nx, ny, d in _steps(grid, x, y, entry, strict):
            nentry = opposite_direction(d)
            key = _state_key(grid.get(nx, ny), nx, ny, nentry, strict)
            if key in seen:
                continue
            seen.add(key)
            queue.append((nx, ny, nentry, path + [PathStep(nx, ny, d)]))


def solve_puzzle(level, *, strict_crossings: bool = False) -> SolveResult:
    """
    Shortest start-to-end path through mutually plugged tiles.

    With `strict_crossings` a criss-cross tile keeps its two wires apart:
    signal entering from the north may only leave south, and so on.
    An unsolvable grid is a normal result, not an error.
    """
    grid = level.grid
    end = tuple(level.end)
    explored = 0
    for x, y, path, explored in _search(grid, tuple(level.start), strict_crossings, goal=end):
        if (x, y) == end:
            return SolveResult(
                solved=True,
                path=path,
                path_length=len(path),
                explored_nodes=explored,
                message=f"Puzzle solved! Path length: {len(path)}",
            )
    return SolveResult(
        solved=False,
        path=None,
        path_length=0,
        explored_nodes=explored,
        message="Puzzle is not solvable - no path found from start to end",
    )


def energized_cells(level, *, strict_crossings: bool = False) -> Set[Pos]:
    """Every cell the start currently powers."""
    return {(x, y) for x, y, _, _ in _search(level.grid, tuple(level.start), strict_crossings)}

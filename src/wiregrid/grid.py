from dataclasses import dataclass, replace
from typing import Iterator, List, Tuple

from .tiles import TileDefinition, TileType, definition_for

Pos = Tuple[int, int]


class TileLockedError(ValueError):
    """Raised when a player rotation targets a fixed or non-rotatable tile."""


@dataclass
class Tile:
    definition: TileDefinition
    rotation: int = 0
    fixed: bool = False
    x: int = 0
    y: int = 0

    @property
    def type(self) -> TileType:
        return self.definition.type

    def to_dict(self):
        return {
            "type": self.definition.type.value,
            "rotation": self.rotation,
            "fixed": self.fixed,
        }


@dataclass
class Grid:
    rows: List[List[Tile]]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        # Every cell holds a tile; "empty" is a tile type, not an absence.
        blank = definition_for(TileType.EMPTY)
        rows = [[Tile(blank, 0, False, x, y) for x in range(width)] for y in range(height)]
        return cls(rows=rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        return self.rows[y][x]

    def set(self, x: int, y: int, tile: Tile) -> None:
        # Coordinates are re-stamped so they always match the array slot.
        tile.x, tile.y = x, y
        self.rows[y][x] = tile

    def tiles(self) -> Iterator[Tile]:
        for row in self.rows:
            yield from row

    def copy(self) -> "Grid":
        return Grid(rows=[[replace(t) for t in row] for row in self.rows])

    def to_rows(self) -> List[List[dict]]:
        return [[t.to_dict() for t in row] for row in self.rows]


def rotate_tile(grid: Grid, x: int, y: int, quarter_turns: int = 1) -> Tile:
    """Player action: turn the tile at (x, y) clockwise."""
    if not grid.in_bounds(x, y):
        raise IndexError(f"cell ({x},{y}) is outside a {grid.width}x{grid.height} grid")
    tile = grid.get(x, y)
    if tile.fixed or not tile.definition.rotatable:
        raise TileLockedError(f"tile at ({x},{y}) cannot be rotated")
    tile.rotation = (tile.rotation + 90 * quarter_turns) % 360
    return tile

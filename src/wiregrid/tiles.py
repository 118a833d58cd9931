# Tile catalog and connection-mask helpers.
# A connection mask is a 4-bit int: N=1, E=2, S=4, W=8.

from dataclasses import dataclass
from enum import Enum, IntFlag
from types import MappingProxyType
from typing import Optional, Tuple


class Direction(IntFlag):
    NONE = 0  # synthetic first path step / failed opposite lookup
    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8


ALL_DIRECTIONS = Direction.NORTH | Direction.EAST | Direction.SOUTH | Direction.WEST

# Scan order used by the path search and the solver.
DIRECTION_DELTAS: Tuple[Tuple[Direction, int, int], ...] = (
    (Direction.NORTH, 0, -1),
    (Direction.EAST, 1, 0),
    (Direction.SOUTH, 0, 1),
    (Direction.WEST, -1, 0),
)

_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_CLOCKWISE = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


class TileType(Enum):
    STRAIGHT = "straight"
    CORNER = "corner"
    T_JUNCTION = "t-junction"
    FOUR_WAY = "four-way"
    CRISS_CROSS = "criss-cross"
    COLOR_CHANGER = "color-changer"
    EMPTY = "empty"


SIGNAL_COLORS = ("red", "blue", "green", "yellow", "white")


@dataclass(frozen=True)
class ColorChange:
    from_color: str
    to_color: str


@dataclass(frozen=True)
class TileDefinition:
    type: TileType
    base_connections: int
    rotatable: bool
    # Only criss-cross: pairs of sides that carry signal between each other.
    connection_groups: Optional[Tuple[Tuple[Direction, ...], ...]] = None
    # Only color-changer; carried for gameplay, the solver ignores it.
    color_change: Optional[ColorChange] = None


_N, _E, _S, _W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

TILE_DEFINITIONS = MappingProxyType({
    TileType.STRAIGHT: TileDefinition(TileType.STRAIGHT, int(_N | _S), True),
    TileType.CORNER: TileDefinition(TileType.CORNER, int(_N | _E), True),
    TileType.T_JUNCTION: TileDefinition(TileType.T_JUNCTION, int(_N | _E | _W), True),
    # Rotation-invariant shapes are not rotatable.
    TileType.FOUR_WAY: TileDefinition(TileType.FOUR_WAY, int(ALL_DIRECTIONS), False),
    TileType.CRISS_CROSS: TileDefinition(
        TileType.CRISS_CROSS,
        int(ALL_DIRECTIONS),
        False,
        connection_groups=((_N, _S), (_E, _W)),
    ),
    TileType.COLOR_CHANGER: TileDefinition(
        TileType.COLOR_CHANGER,
        int(_N | _S),
        True,
        color_change=ColorChange("white", "blue"),
    ),
    TileType.EMPTY: TileDefinition(TileType.EMPTY, 0, False),
})

VALID_ROTATIONS = (0, 90, 180, 270)


def definition_for(tile_type: TileType) -> TileDefinition:
    return TILE_DEFINITIONS[tile_type]


def rotate_connections(mask: int, quarter_turns: int) -> int:
    """Rotate a connection mask clockwise by `quarter_turns` quarter turns."""
    result = mask
    for _ in range(quarter_turns):
        rotated = 0
        for d, cw in _CLOCKWISE.items():
            if result & d:
                rotated |= cw
        result = rotated
    return result


def tile_connections(tile) -> int:
    # Single source of truth for what a placed tile currently plugs into.
    return rotate_connections(tile.definition.base_connections, tile.rotation // 90)


def opposite_direction(d: Direction) -> Direction:
    """N<->S, E<->W. Anything else (NONE, combined flags) maps to NONE."""
    return _OPPOSITE.get(d, Direction.NONE)


def direction_between(ax: int, ay: int, bx: int, by: int) -> Direction:
    """Direction travelled from (ax, ay) to the adjacent cell (bx, by)."""
    for d, dx, dy in DIRECTION_DELTAS:
        if ax + dx == bx and ay + dy == by:
            return d
    return Direction.NONE


def directions_in(mask: int) -> Tuple[Direction, ...]:
    return tuple(d for d, _, _ in DIRECTION_DELTAS if mask & d)

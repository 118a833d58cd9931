# src/wiregrid/mapgen/checkpoint.py
import logging
from typing import Sequence

from ..grid import Grid
from ..tiles import Direction, direction_between, opposite_direction, tile_connections
from .path import PathStep

logger = logging.getLogger(__name__)


def validate_solution_path(grid: Grid, path: Sequence[PathStep]) -> bool:
    """
    Walk the recorded path and require every consecutive pair to plug into
    each other. Run after placement, after fill and after scrambling, since
    each later step writes to the grid.
    """
    for cur, nxt in zip(path, path[1:]):
        d = direction_between(cur.x, cur.y, nxt.x, nxt.y)
        if d == Direction.NONE:
            logger.debug("path cells (%d,%d) and (%d,%d) are not adjacent", cur.x, cur.y, nxt.x, nxt.y)
            return False
        if not tile_connections(grid.get(cur.x, cur.y)) & d:
            logger.debug("tile at (%d,%d) missing %s connection", cur.x, cur.y, d.name)
            return False
        back = opposite_direction(d)
        if not tile_connections(grid.get(nxt.x, nxt.y)) & back:
            logger.debug("tile at (%d,%d) missing %s connection back", nxt.x, nxt.y, back.name)
            return False
    return True

# src/wiregrid/mapgen/path.py
# Randomized depth-first backtracking search for the solution path.

import logging
from typing import List, NamedTuple, Optional, Tuple

from ..rng import SeededRandom
from ..tiles import DIRECTION_DELTAS, Direction

logger = logging.getLogger(__name__)

# Cell expansions allowed per attempt before the search gives up.
PATH_SEARCH_BUDGET = 20_000


class PathStep(NamedTuple):
    x: int
    y: int
    dir: Direction  # direction travelled to arrive here; NONE for the start


def generate_path(
    width: int,
    height: int,
    start: Tuple[int, int],
    end: Tuple[int, int],
    min_length: int,
    max_length: int,
    rng: SeededRandom,
    budget: int = PATH_SEARCH_BUDGET,
) -> Optional[List[PathStep]]:
    """
    Find a simple path from `start` to `end` whose length (cells, start
    included) lies in [min_length, max_length].

    Directions are tried in a fresh random order at every cell. Reaching the
    end too early is a dead end, not a success. Returns None when every
    branch is exhausted or the expansion budget runs out; the caller treats
    both as a retryable failure.

    The search keeps its own stack, one frame of untried directions per
    expanded path cell, so path length is not bounded by Python's recursion
    limit.
    """
    if min_length > width * height:
        # A simple path cannot visit more cells than the grid has.
        return None

    ex, ey = end
    visited = set()
    path = [PathStep(start[0], start[1], Direction.NONE)]
    frames = []  # frames[i] holds the untried directions out of path[i]
    expansions = 0

    while True:
        x, y = path[-1].x, path[-1].y
        if (x, y) == (ex, ey):
            if len(path) >= min_length:
                return list(path)
            path.pop()
        # Covers the plain max-length cut too: the end is at least one cell away.
        elif len(path) + abs(ex - x) + abs(ey - y) > max_length:
            path.pop()
        else:
            expansions += 1
            if expansions > budget:
                logger.debug("path search hit its budget of %d expansions", budget)
                return None
            visited.add((x, y))
            frames.append(iter(rng.shuffle(DIRECTION_DELTAS)))

        # Step into the next untried neighbour, backtracking over spent frames.
        step = None
        while frames and step is None:
            here = path[-1]
            for d, dx, dy in frames[-1]:
                nx, ny = here.x + dx, here.y + dy
                if 0 <= nx < width and 0 <= ny < height and (nx, ny) not in visited:
                    step = PathStep(nx, ny, d)
                    break
            else:
                frames.pop()
                visited.discard((here.x, here.y))
                path.pop()
        if step is None:
            return None
        path.append(step)

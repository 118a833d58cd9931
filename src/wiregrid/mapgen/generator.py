# src/wiregrid/mapgen/generator.py
# Level generation entry point: merge config, seed one RNG, then retry the
# full synthesis until the final checkpoint passes or attempts run out.

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple, Union

from ..config import LevelConfig, LevelOptions, resolve_config
from ..grid import Grid
from ..rng import SeededRandom
from ..tiles import TileType
from .checkpoint import validate_solution_path
from .endpoints import choose_endpoints
from .path import PathStep, generate_path
from .placement import (
    add_decoy_branches, fill_empty_spaces, mark_fixed_tiles,
    place_path_tiles, scramble_tiles,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100

Pos = Tuple[int, int]


class LevelGenerationError(RuntimeError):
    """Every attempt failed; the parameters need changing, retrying won't help."""

    def __init__(self, difficulty: str, attempts: int):
        super().__init__(f"failed to generate a valid {difficulty} level after {attempts} attempts")
        self.difficulty = difficulty
        self.attempts = attempts


@dataclass
class LevelMetadata:
    difficulty: str
    grid_width: int
    grid_height: int
    tile_types: List[TileType]
    fixed_tile_count: int
    generation_attempts: int
    seed: int

    def to_dict(self):
        return {
            "difficulty": self.difficulty,
            "grid_width": self.grid_width,
            "grid_height": self.grid_height,
            "tile_types": [t.value for t in self.tile_types],
            "fixed_tile_count": self.fixed_tile_count,
            "generation_attempts": self.generation_attempts,
            "seed": self.seed,
        }


@dataclass
class GeneratedLevel:
    grid: Grid
    start: Pos
    end: Pos
    solved_path_length: int
    metadata: LevelMetadata
    # The generator's own path; the solver may find a shorter one.
    solution_path: List[PathStep] = field(default_factory=list)

    def to_dict(self):
        return {
            "start": list(self.start),
            "end": list(self.end),
            "solved_path_length": self.solved_path_length,
            "solution_path": [[p.x, p.y] for p in self.solution_path],
            "metadata": self.metadata.to_dict(),
            "grid": self.grid.to_rows(),
        }


@dataclass
class _Attempt:
    grid: Grid
    start: Pos
    end: Pos
    path: List[PathStep]
    fixed_count: int


def _run_attempt(cfg: LevelConfig, rng: SeededRandom, n: int) -> Optional[_Attempt]:
    """One pass over the synthesis steps. None means "retry"."""
    w, h = cfg.grid_width, cfg.grid_height
    grid = Grid.empty(w, h)
    start, end = choose_endpoints(w, h, rng)
    logger.debug("[attempt %d] %dx%d grid, start=%s end=%s", n, w, h, start, end)

    path = generate_path(w, h, start, end, cfg.min_path_length, cfg.max_path_length, rng)
    if path is None or len(path) < cfg.min_path_length:
        logger.debug("[attempt %d] no path of length %d..%d", n, cfg.min_path_length, cfg.max_path_length)
        return None
    logger.debug("[attempt %d] path of length %d", n, len(path))

    if not place_path_tiles(grid, path, cfg.allowed_tile_types, rng):
        logger.debug("[attempt %d] tile placement failed", n)
        return None
    if not validate_solution_path(grid, path):
        logger.debug("[attempt %d] checkpoint failed after placement", n)
        return None

    decoys = add_decoy_branches(grid, path, cfg.decoy_branches, cfg.allowed_tile_types, rng)
    filled = fill_empty_spaces(grid, cfg.allowed_tile_types, rng)
    logger.debug("[attempt %d] %d decoys, %d cells filled", n, decoys, filled)
    if not validate_solution_path(grid, path):
        logger.debug("[attempt %d] checkpoint failed after fill", n)
        return None

    pct = cfg.fixed_tile_percentage if cfg.allow_fixed_tiles else 0
    fixed_count = mark_fixed_tiles(grid, pct, rng)
    scrambled = scramble_tiles(grid, path, rng)
    logger.debug("[attempt %d] %d fixed, %d scrambled", n, fixed_count, scrambled)
    if not validate_solution_path(grid, path):
        logger.debug("[attempt %d] checkpoint failed after scrambling", n)
        return None

    return _Attempt(grid, start, end, path, fixed_count)


def generate_level(
    difficulty: str = "easy",
    options: Union[LevelOptions, Mapping, None] = None,
    *,
    max_attempts: int = MAX_ATTEMPTS,
) -> GeneratedLevel:
    """
    Build a solvable, scrambled level for `difficulty`.

    `options` may be a LevelOptions or a plain mapping of its fields. A fixed
    seed reproduces the whole call; attempts share one RNG stream, so a
    single retry is not reproducible on its own.

    Raises LevelGenerationError after `max_attempts` failed attempts and
    ValueError for malformed options.
    """
    if isinstance(options, Mapping):
        options = LevelOptions(**options)
    options = options or LevelOptions()
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    cfg = resolve_config(difficulty, options)
    if cfg.required_tile_types:
        logger.debug("required_tile_types %s is not enforced",
                     [t.value for t in cfg.required_tile_types])
    rng = SeededRandom(options.seed)

    for attempt in range(1, max_attempts + 1):
        result = _run_attempt(cfg, rng, attempt)
        if result is None:
            continue
        logger.info("generated %s level (seed=%s) in %d attempt(s), path length %d",
                    difficulty, rng.seed, attempt, len(result.path))
        metadata = LevelMetadata(
            difficulty=difficulty,
            grid_width=cfg.grid_width,
            grid_height=cfg.grid_height,
            tile_types=list(dict.fromkeys(t.type for t in result.grid.tiles())),
            fixed_tile_count=result.fixed_count,
            generation_attempts=attempt,
            seed=rng.seed,
        )
        return GeneratedLevel(
            grid=result.grid,
            start=result.start,
            end=result.end,
            solved_path_length=len(result.path),
            metadata=metadata,
            solution_path=result.path,
        )

    logger.warning("giving up on %s level (seed=%s) after %d attempts", difficulty, rng.seed, max_attempts)
    raise LevelGenerationError(difficulty, max_attempts)

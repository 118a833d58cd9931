from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from .tiles import TileType

DIFFICULTIES = ("easy", "medium", "hard", "superHard")


@dataclass(frozen=True)
class DifficultyConfig:
    grid_width: int
    grid_height: int
    min_path_length: int
    max_path_length: int
    decoy_branches: int
    fixed_tile_percentage: float
    allowed_tile_types: Tuple[TileType, ...]


# Read-only after import; shared by every generation call.
DIFFICULTY_CONFIGS = MappingProxyType({
    "easy": DifficultyConfig(
        grid_width=5, grid_height=5,
        min_path_length=6, max_path_length=10,
        decoy_branches=1, fixed_tile_percentage=0.2,
        allowed_tile_types=(TileType.STRAIGHT, TileType.CORNER),
    ),
    "medium": DifficultyConfig(
        grid_width=6, grid_height=6,
        min_path_length=12, max_path_length=18,
        decoy_branches=2, fixed_tile_percentage=0.3,
        allowed_tile_types=(TileType.STRAIGHT, TileType.CORNER, TileType.T_JUNCTION),
    ),
    "hard": DifficultyConfig(
        grid_width=8, grid_height=8,
        min_path_length=24, max_path_length=35,
        decoy_branches=3, fixed_tile_percentage=0.25,
        allowed_tile_types=(
            TileType.STRAIGHT, TileType.CORNER, TileType.T_JUNCTION, TileType.FOUR_WAY,
        ),
    ),
    "superHard": DifficultyConfig(
        grid_width=10, grid_height=10,
        min_path_length=45, max_path_length=70,
        decoy_branches=5, fixed_tile_percentage=0.2,
        allowed_tile_types=(
            TileType.STRAIGHT, TileType.CORNER, TileType.T_JUNCTION,
            TileType.FOUR_WAY, TileType.CRISS_CROSS, TileType.COLOR_CHANGER,
        ),
    ),
})


@dataclass
class LevelOptions:
    """Per-call overrides. None means "use the difficulty default"."""
    grid_width: Optional[int] = None
    grid_height: Optional[int] = None
    allowed_tile_types: Optional[Tuple[TileType, ...]] = None
    # Accepted and checked against the catalog, but generation does not
    # enforce it (see DESIGN.md).
    required_tile_types: Optional[Tuple[TileType, ...]] = None
    min_path_length: Optional[int] = None
    max_path_length: Optional[int] = None
    allow_fixed_tiles: bool = True
    seed: Optional[int] = None


@dataclass(frozen=True)
class LevelConfig:
    difficulty: str
    grid_width: int
    grid_height: int
    min_path_length: int
    max_path_length: int
    allowed_tile_types: Tuple[TileType, ...]
    required_tile_types: Tuple[TileType, ...]
    allow_fixed_tiles: bool
    fixed_tile_percentage: float
    decoy_branches: int


def _pick(override, default):
    return default if override is None else override


def _tile_types(values, field_name: str) -> Tuple[TileType, ...]:
    try:
        return tuple(TileType(v) for v in values)
    except ValueError as exc:
        raise ValueError(f"{field_name}: {exc}") from exc


def resolve_config(difficulty: str, options: Optional[LevelOptions] = None) -> LevelConfig:
    """Merge `options` over the tier defaults and check the result."""
    if difficulty not in DIFFICULTY_CONFIGS:
        raise ValueError(
            f"unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}"
        )
    base = DIFFICULTY_CONFIGS[difficulty]
    opts = options or LevelOptions()

    allowed = _tile_types(
        _pick(opts.allowed_tile_types, base.allowed_tile_types), "allowed_tile_types"
    )
    required = _tile_types(opts.required_tile_types or (), "required_tile_types")

    cfg = LevelConfig(
        difficulty=difficulty,
        grid_width=_pick(opts.grid_width, base.grid_width),
        grid_height=_pick(opts.grid_height, base.grid_height),
        min_path_length=_pick(opts.min_path_length, base.min_path_length),
        max_path_length=_pick(opts.max_path_length, base.max_path_length),
        allowed_tile_types=allowed,
        required_tile_types=required,
        allow_fixed_tiles=opts.allow_fixed_tiles,
        fixed_tile_percentage=base.fixed_tile_percentage,
        decoy_branches=base.decoy_branches,
    )

    if cfg.grid_width < 2 or cfg.grid_height < 2:
        raise ValueError(f"grid must be at least 2x2, got {cfg.grid_width}x{cfg.grid_height}")
    if cfg.min_path_length < 1:
        raise ValueError(f"min_path_length must be >= 1, got {cfg.min_path_length}")
    if cfg.max_path_length < cfg.min_path_length:
        raise ValueError(
            f"max_path_length ({cfg.max_path_length}) is below min_path_length ({cfg.min_path_length})"
        )
    if not cfg.allowed_tile_types:
        raise ValueError("allowed_tile_types must not be empty")
    if TileType.EMPTY in cfg.allowed_tile_types:
        raise ValueError("allowed_tile_types must not contain 'empty'")
    return cfg

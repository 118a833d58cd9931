import pytest

from wiregrid.config import DIFFICULTY_CONFIGS, LevelOptions, resolve_config
from wiregrid.tiles import TileType


def test_tier_table():
    assert [(c.grid_width, c.min_path_length, c.max_path_length) for c in DIFFICULTY_CONFIGS.values()] == [
        (5, 6, 10), (6, 12, 18), (8, 24, 35), (10, 45, 70),
    ]
    assert DIFFICULTY_CONFIGS["superHard"].decoy_branches == 5
    assert TileType.CRISS_CROSS in DIFFICULTY_CONFIGS["superHard"].allowed_tile_types
    with pytest.raises(TypeError):
        DIFFICULTY_CONFIGS["easy"] = None


def test_defaults_without_options():
    cfg = resolve_config("medium")
    assert (cfg.grid_width, cfg.grid_height) == (6, 6)
    assert cfg.fixed_tile_percentage == 0.3
    assert cfg.allow_fixed_tiles
    assert cfg.required_tile_types == ()


def test_overrides_and_string_tile_names():
    opts = LevelOptions(grid_width=7, min_path_length=3, max_path_length=4,
                        allowed_tile_types=("straight", "corner"), allow_fixed_tiles=False)
    cfg = resolve_config("hard", opts)
    assert cfg.grid_width == 7 and cfg.grid_height == 8
    assert (cfg.min_path_length, cfg.max_path_length) == (3, 4)
    assert cfg.allowed_tile_types == (TileType.STRAIGHT, TileType.CORNER)
    assert not cfg.allow_fixed_tiles
    assert cfg.decoy_branches == 3


@pytest.mark.parametrize("difficulty,opts", [
    ("impossible", LevelOptions()),
    ("easy", LevelOptions(grid_width=1)),
    ("easy", LevelOptions(grid_height=0)),
    ("easy", LevelOptions(min_path_length=0)),
    ("easy", LevelOptions(min_path_length=8, max_path_length=7)),
    ("easy", LevelOptions(allowed_tile_types=())),
    ("easy", LevelOptions(allowed_tile_types=("straight", "empty"))),
    ("easy", LevelOptions(allowed_tile_types=("spiral",))),
    ("easy", LevelOptions(required_tile_types=("spiral",))),
])
def test_malformed_options_fail_fast(difficulty, opts):
    with pytest.raises(ValueError):
        resolve_config(difficulty, opts)

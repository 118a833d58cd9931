import pytest

from wiregrid.grid import Grid, Tile
from wiregrid.mapgen.generator import GeneratedLevel, LevelMetadata
from wiregrid.mapgen.path import PathStep
from wiregrid.tiles import Direction, TileType, definition_for


@pytest.fixture
def make_level():
    """
    Build a level by hand. `cells` maps (x, y) -> (kind, rotation[, fixed]);
    everything else is empty.
    """
    def build(width, height, cells, start, end, solved_path_length=0, path=()):
        grid = Grid.empty(width, height)
        for (x, y), cell in cells.items():
            grid.set(x, y, Tile(definition_for(TileType(cell[0])), *cell[1:]))
        steps = [PathStep(x, y, Direction.NONE) for x, y in path]
        meta = LevelMetadata(
            difficulty="easy",
            grid_width=width,
            grid_height=height,
            tile_types=list(dict.fromkeys(t.type for t in grid.tiles())),
            fixed_tile_count=sum(1 for t in grid.tiles() if t.fixed),
            generation_attempts=1,
            seed=0,
        )
        return GeneratedLevel(grid, start, end, solved_path_length, meta, steps)
    return build

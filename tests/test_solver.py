from wiregrid.solver import energized_cells, has_connection, solve_puzzle, tiles_connected
from wiregrid.grid import Tile
from wiregrid.tiles import Direction, TileType, definition_for


def tile(kind, rotation=0):
    return Tile(definition_for(TileType(kind)), rotation)


def test_straight_row_solves(make_level):
    level = make_level(3, 1, {(0, 0): ("straight", 90), (1, 0): ("straight", 270), (2, 0): ("straight", 90)},
                       (0, 0), (2, 0), solved_path_length=3)
    result = solve_puzzle(level)
    assert result.solved
    assert result.path_length == 3
    assert result.message == "Puzzle solved! Path length: 3"
    assert [(p.x, p.y) for p in result.path] == [(0, 0), (1, 0), (2, 0)]
    assert [p.dir for p in result.path] == [Direction.NONE, Direction.EAST, Direction.EAST]
    assert result.explored_nodes >= 3


def test_broken_row_is_unsolved_not_an_error(make_level):
    level = make_level(3, 1, {(0, 0): ("straight", 90), (1, 0): ("straight", 0), (2, 0): ("straight", 90)},
                       (0, 0), (2, 0))
    result = solve_puzzle(level)
    assert not result.solved
    assert result.path is None
    assert result.path_length == 0
    assert result.message == "Puzzle is not solvable - no path found from start to end"


def test_bfs_finds_shortest(make_level):
    cells = {(x, y): ("four-way", 0) for x in range(3) for y in range(3)}
    level = make_level(3, 3, cells, (0, 0), (2, 2))
    result = solve_puzzle(level)
    assert result.solved and result.path_length == 5


def test_bfs_explores_north_first(make_level):
    # Two shortest routes to the corner; neighbours are queued N, E, S, W.
    cells = {(x, y): ("four-way", 0) for x in range(3) for y in range(3)}
    level = make_level(3, 3, cells, (1, 1), (0, 0))
    path = solve_puzzle(level).path
    assert (path[1].x, path[1].y) == (1, 0)


def _crossing_level(make_level, end):
    # Signal drops into a criss-cross from the north.
    cells = {
        (1, 0): ("straight", 0),
        (1, 1): ("criss-cross", 0),
        (2, 1): ("straight", 90),
        (1, 2): ("straight", 0),
    }
    return make_level(3, 3, cells, (1, 0), end)


def test_crossing_flat_mode_turns_corner(make_level):
    level = _crossing_level(make_level, (2, 1))
    assert solve_puzzle(level).solved


def test_crossing_strict_mode_keeps_wires_apart(make_level):
    level = _crossing_level(make_level, (2, 1))
    assert not solve_puzzle(level, strict_crossings=True).solved
    straight_through = _crossing_level(make_level, (1, 2))
    assert solve_puzzle(straight_through, strict_crossings=True).solved


def test_energized_cells(make_level):
    level = _crossing_level(make_level, (2, 1))
    assert energized_cells(level) == {(1, 0), (1, 1), (2, 1), (1, 2)}
    assert energized_cells(level, strict_crossings=True) == {(1, 0), (1, 1), (1, 2)}


def test_energized_isolated_start(make_level):
    level = make_level(2, 2, {(0, 0): ("corner", 180)}, (0, 0), (1, 1))
    assert energized_cells(level) == {(0, 0)}


def test_connection_helpers():
    east = tile("straight", 90)
    west_plug = tile("corner", 180)  # S|W
    assert has_connection(east, Direction.EAST)
    assert not has_connection(east, Direction.NORTH)
    assert tiles_connected(east, west_plug, Direction.EAST)
    assert not tiles_connected(west_plug, east, Direction.SOUTH)
    assert not tiles_connected(east, west_plug, Direction.NONE)

from wiregrid.mapgen.generator import generate_level
from wiregrid.render.ascii import (
    ASCII_TILES, connection_code, debug_path, draw_comparison,
    draw_connection_debug, draw_level, draw_solution, glyph,
)

ROW = {(0, 0): ("straight", 90), (1, 0): ("corner", 180), (2, 0): ("straight", 90), (1, 1): ("straight", 0)}


def _level(make_level):
    return make_level(3, 2, ROW, (0, 0), (1, 1), solved_path_length=3, path=[(0, 0), (1, 0), (1, 1)])


def test_glyph_table_covers_every_mask():
    assert set(ASCII_TILES) == set(range(16))
    assert ASCII_TILES[5] == "│" and ASCII_TILES[10] == "─" and ASCII_TILES[15] == "┼"


def test_glyph_follows_rotation(make_level):
    level = _level(make_level)
    assert glyph(level.grid.get(0, 0)) == "─"
    assert glyph(level.grid.get(1, 0)) == "┐"
    assert glyph(level.grid.get(2, 1)) == "·"


def test_draw_level_plain(make_level):
    text = draw_level(_level(make_level), use_colors=False)
    assert "\x1b[" not in text
    assert "Level: EASY" in text and "Grid: 3x2" in text
    assert "S " in text and "E " in text
    assert "Generation Attempts: 1" in text


def test_draw_level_colored_marks_fixed_and_path():
    level = generate_level("medium", {"seed": 4})
    text = draw_level(level, show_rotations=True)
    assert "\x1b[96m" in text  # fixed
    assert "\x1b[93m" in text  # path
    assert "Numbers = Rotation" in text


def test_draw_level_tile_types(make_level):
    text = draw_level(_level(make_level), use_colors=False, show_tile_types=True, show_coordinates=False)
    assert "CR" in text


def test_draw_solution_blanks_off_path(make_level):
    text = draw_solution(_level(make_level), use_colors=False)
    lines = text.splitlines()
    assert lines[1].strip() == "SOLUTION"
    assert lines[3] == " S ┐ " + " "
    assert lines[4] == "   E  "


def test_draw_comparison_has_both_sides(make_level):
    text = draw_comparison(_level(make_level), use_colors=False)
    assert "SCRAMBLED" in text and "SOLUTION" in text
    assert " | " in text


def test_connection_debug(make_level):
    assert connection_code(0b0101) == "N·S·"
    text = draw_connection_debug(_level(make_level), use_colors=False)
    assert "·E·W" in text
    assert "··SW" in text
    assert "CONNECTION DEBUG VIEW" in text


def test_debug_path(make_level):
    level = _level(make_level)
    text = debug_path(level, level.solution_path)
    assert "Step 0: (0, 0)" in text
    assert "Moving: East to (1, 0)" in text
    assert "Moving: South to (1, 1)" in text
    assert "Tile: corner" in text
    assert "Connections: South, West" in text

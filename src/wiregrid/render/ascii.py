# src/wiregrid/render/ascii.py
# Terminal views of a level. Each cell is drawn from its current
# connection mask, so what you see is what the solver sees.

from typing import Iterable, Optional, Sequence, Set, Tuple

from ..tiles import DIRECTION_DELTAS, Direction, TileType, directions_in, tile_connections

Pos = Tuple[int, int]

# Glyph per connection mask (N=1, E=2, S=4, W=8).
ASCII_TILES = {
    0: "·",
    1: "╵", 2: "╶", 4: "╷", 8: "╴",
    5: "│", 10: "─",
    3: "└", 6: "┌", 12: "┐", 9: "┘",
    7: "├", 11: "┴", 14: "┤", 13: "┬",
    15: "┼",
}

TYPE_CODES = {
    TileType.STRAIGHT: "ST",
    TileType.CORNER: "CR",
    TileType.T_JUNCTION: "TJ",
    TileType.FOUR_WAY: "4W",
    TileType.CRISS_CROSS: "XX",
    TileType.COLOR_CHANGER: "CC",
    TileType.EMPTY: "  ",
}

ANSI = {
    "reset": "\x1b[0m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
    "green": "\x1b[92m",
    "yellow": "\x1b[93m",
    "cyan": "\x1b[96m",
    "bg_red": "\x1b[41m",
    "bg_green": "\x1b[42m",
}

_DIR_NAMES = {
    Direction.NORTH: "North",
    Direction.EAST: "East",
    Direction.SOUTH: "South",
    Direction.WEST: "West",
}


def glyph(tile) -> str:
    return ASCII_TILES.get(tile_connections(tile), "?")


def _paint(text: str, *colors: str) -> str:
    return "".join(ANSI[c] for c in colors) + text + ANSI["reset"]


def _cells(path: Optional[Iterable]) -> Set[Pos]:
    return {(p[0], p[1]) for p in path} if path else set()


def draw_level(
    level,
    *,
    show_rotations: bool = False,
    highlight_solution: bool = True,
    show_fixed: bool = True,
    use_colors: bool = True,
    show_coordinates: bool = True,
    show_tile_types: bool = False,
) -> str:
    """
    The level as it currently stands, with a header, a legend and the
    generation metadata. Start and end are marked S and E.
    """
    grid = level.grid
    w, h = grid.width, grid.height
    start, end = tuple(level.start), tuple(level.end)
    on_path = _cells(level.solution_path) if highlight_solution else set()
    bar = "=" * (w * 4 + 2)

    out = [
        bar,
        f"  Level: {level.metadata.difficulty.upper()} | Grid: {w}x{h} | "
        f"Path Length: {level.solved_path_length}",
        bar,
    ]
    if show_coordinates:
        out.append("  " + "".join(f" {x:>2} " for x in range(w)))
        out.append("  " + "-" * (w * 4))

    for y in range(h):
        row = f"{y:>2}|" if show_coordinates else ""
        for x in range(w):
            tile = grid.get(x, y)
            if show_tile_types:
                cell = TYPE_CODES[tile.type]
            else:
                suffix = str(tile.rotation // 90) if show_rotations and tile.definition.rotatable else " "
                cell = glyph(tile) + suffix
            if (x, y) == start:
                cell = _paint("S ", "bg_green", "white") if use_colors else "S "
            elif (x, y) == end:
                cell = _paint("E ", "bg_red", "white") if use_colors else "E "
            elif use_colors:
                if (x, y) in on_path:
                    cell = _paint(cell, "yellow")
                elif tile.fixed and show_fixed:
                    cell = _paint(cell, "cyan")
                elif tile.type is TileType.EMPTY:
                    cell = _paint(cell, "gray")
            row += " " + cell
        out.append(row + ("|" if show_coordinates else ""))

    if show_coordinates:
        out.append("  " + "-" * (w * 4))
    out.append("")
    out.append("Legend:")
    out.append("  S = Start, E = End")
    if show_fixed and use_colors:
        out.append(f"  {_paint('Cyan', 'cyan')} = Fixed tiles (cannot rotate)")
    if highlight_solution and use_colors:
        out.append(f"  {_paint('Yellow', 'yellow')} = Solution path")
    if show_rotations:
        out.append("  Numbers = Rotation (0=0, 1=90, 2=180, 3=270 degrees)")
    out.append(
        f"  {ASCII_TILES[5]} = Straight  {ASCII_TILES[3]} = Corner  "
        f"{ASCII_TILES[7]} = T-junction  {ASCII_TILES[15]} = 4-way"
    )
    out.append("")
    meta = level.metadata
    out.append("Metadata:")
    out.append(f"  Fixed Tiles: {meta.fixed_tile_count}")
    out.append(f"  Tile Types: {', '.join(t.value for t in meta.tile_types)}")
    out.append(f"  Generation Attempts: {meta.generation_attempts}")
    out.append(f"  Seed: {meta.seed}")
    out.append(bar)
    return "\n".join(out)


def _solution_rows(level, path_cells: Set[Pos], use_colors: bool):
    grid = level.grid
    start, end = tuple(level.start), tuple(level.end)
    for y in range(grid.height):
        cells = []
        for x in range(grid.width):
            ch = glyph(grid.get(x, y))
            if (x, y) == start:
                ch = _paint("S", "bg_green") if use_colors else "S"
            elif (x, y) == end:
                ch = _paint("E", "bg_red") if use_colors else "E"
            elif (x, y) in path_cells:
                ch = _paint(ch, "green") if use_colors else ch
            elif use_colors:
                ch = _paint(ch, "gray")
            elif path_cells:
                ch = " "
            cells.append(ch)
        yield cells


def draw_solution(level, solution_path: Optional[Sequence] = None, *, use_colors: bool = True) -> str:
    """Only the path cells, others dimmed (or blanked without colors)."""
    path = solution_path if solution_path is not None else level.solution_path
    cells = _cells(path)
    bar = "=" * (level.grid.width * 2 + 2)
    out = [bar, "  SOLUTION", bar]
    for row in _solution_rows(level, cells, use_colors):
        out.append(" " + " ".join(row))
    out.append(bar)
    return "\n".join(out)


def draw_comparison(level, solution_path: Optional[Sequence] = None, *, use_colors: bool = True) -> str:
    """Scrambled grid on the left, path highlighted on the right."""
    grid = level.grid
    path = solution_path if solution_path is not None else level.solution_path
    cells = _cells(path)
    start, end = tuple(level.start), tuple(level.end)
    width = grid.width * 2
    bar = "=" * (width * 2 + 7)
    out = [bar, f"  {'SCRAMBLED':<{width}}   {'SOLUTION':<{width}}", bar]
    right_rows = list(_solution_rows(level, cells, use_colors))
    for y in range(grid.height):
        left = []
        for x in range(grid.width):
            tile = grid.get(x, y)
            ch = glyph(tile)
            if (x, y) == start:
                ch = _paint("S", "bg_green") if use_colors else "S"
            elif (x, y) == end:
                ch = _paint("E", "bg_red") if use_colors else "E"
            elif tile.fixed and use_colors:
                ch = _paint(ch, "cyan")
            left.append(ch)
        out.append(" " + " ".join(left) + "  |  " + " ".join(right_rows[y]))
    out.append(bar)
    return "\n".join(out)


def connection_code(mask: int) -> str:
    """Four letters, N E S W order, with a dot for each missing side."""
    return "".join(
        letter if mask & d else "·"
        for (d, _, _), letter in zip(DIRECTION_DELTAS, "NESW")
    )


def draw_connection_debug(level, *, use_colors: bool = True) -> str:
    grid = level.grid
    start, end = tuple(level.start), tuple(level.end)
    bar = "=" * (grid.width * 5 + 2)
    out = [bar, "  CONNECTION DEBUG VIEW", bar]
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            cell = connection_code(tile_connections(grid.get(x, y)))
            if use_colors and (x, y) == start:
                cell = _paint(cell, "bg_green")
            elif use_colors and (x, y) == end:
                cell = _paint(cell, "bg_red")
            row.append(cell)
        out.append(" " + " ".join(row))
    out.append("")
    out.append("Each cell shows: North, East, South, West connections")
    out.append('Example: "N·SW" = Connected North, South, and West')
    out.append(bar)
    return "\n".join(out)


def debug_path(level, path: Sequence) -> str:
    """Step-by-step dump of a path: tile, rotation, connections, next move."""
    grid = level.grid
    bar = "=" * 60
    out = [bar, "  PATH DEBUG", bar]
    for i, step in enumerate(path):
        x, y = step[0], step[1]
        tile = grid.get(x, y)
        mask = tile_connections(tile)
        out.append(f"Step {i}: ({x}, {y})")
        out.append(f"  Tile: {tile.type.value}")
        out.append(f"  Rotation: {tile.rotation}")
        out.append("  Connections: " + ", ".join(_DIR_NAMES[d] for d in directions_in(mask)))
        if i < len(path) - 1:
            nx, ny = path[i + 1][0], path[i + 1][1]
            if nx > x:
                move = "East"
            elif nx < x:
                move = "West"
            elif ny > y:
                move = "South"
            elif ny < y:
                move = "North"
            else:
                move = "ERROR"
            out.append(f"  Moving: {move} to ({nx}, {ny})")
        out.append("")
    out.append(bar)
    return "\n".join(out)

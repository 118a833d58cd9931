# src/wiregrid/validation.py
# Structural checks plus a solver run over a finished level.

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from .solver import SolveResult, solve_puzzle
from .tiles import VALID_ROTATIONS, TileType

logger = logging.getLogger(__name__)


@dataclass
class GridAnalysis:
    total_tiles: int = 0
    empty_tiles: int = 0
    rotatable_tiles: int = 0
    fixed_tiles: int = 0
    tile_type_counts: Dict[TileType, int] = field(default_factory=dict)


@dataclass
class ValidationResult:
    valid: bool
    issues: List[str]
    warnings: List[str]
    solve_result: SolveResult
    grid_analysis: GridAnalysis


def analyze_grid(grid) -> GridAnalysis:
    """Census of the grid. `rotatable_tiles` counts only tiles a player can turn."""
    counts = Counter()
    out = GridAnalysis()
    for tile in grid.tiles():
        out.total_tiles += 1
        counts[tile.type] += 1
        if tile.type is TileType.EMPTY:
            out.empty_tiles += 1
        if tile.fixed:
            out.fixed_tiles += 1
        elif tile.definition.rotatable:
            out.rotatable_tiles += 1
    out.tile_type_counts = dict(counts)
    return out


def validate_level(level, *, strict_crossings: bool = False) -> ValidationResult:
    """
    Check a level for structural problems and solve it as currently rotated.

    Issues make a level invalid; warnings are informational. A level is valid
    when there are no issues and the solver reaches the end.
    """
    grid = level.grid
    issues: List[str] = []
    warnings: List[str] = []

    sx, sy = level.start
    ex, ey = level.end
    start_ok = grid.in_bounds(sx, sy)
    end_ok = grid.in_bounds(ex, ey)
    if not start_ok:
        issues.append(f"Invalid start position: ({sx}, {sy})")
    if not end_ok:
        issues.append(f"Invalid end position: ({ex}, {ey})")
    if (sx, sy) == (ex, ey):
        issues.append("Start and end positions are the same")

    for tile in grid.tiles():
        if tile.rotation not in VALID_ROTATIONS:
            issues.append(f"Invalid rotation {tile.rotation} at ({tile.x}, {tile.y})")

    if start_ok and grid.get(sx, sy).type is TileType.EMPTY:
        issues.append("Start position has an empty tile")
    if end_ok and grid.get(ex, ey).type is TileType.EMPTY:
        issues.append("End position has an empty tile")

    analysis = analyze_grid(grid)
    if analysis.rotatable_tiles == 0:
        warnings.append("No rotatable tiles - puzzle cannot be solved by player interaction")

    if start_ok and end_ok:
        solve = solve_puzzle(level, strict_crossings=strict_crossings)
    else:
        solve = SolveResult(False, None, 0, 0, "Start or end position is outside the grid")
    if not solve.solved:
        issues.append(solve.message)
    elif solve.path_length != level.solved_path_length:
        warnings.append(
            f"Path length mismatch: solver found {solve.path_length}, "
            f"level reports {level.solved_path_length}"
        )

    valid = not issues and solve.solved
    logger.debug("validated level: valid=%s, %d issue(s), %d warning(s)",
                 valid, len(issues), len(warnings))
    return ValidationResult(valid, issues, warnings, solve, analysis)


def format_validation_report(result: ValidationResult) -> str:
    a = result.grid_analysis
    lines = [
        "=== Level validation report ===",
        f"Status: {'VALID' if result.valid else 'INVALID'}",
        f"Solver: {result.solve_result.message}",
        f"Explored nodes: {result.solve_result.explored_nodes}",
        "",
        "Grid analysis:",
        f"  total tiles:     {a.total_tiles}",
        f"  empty tiles:     {a.empty_tiles}",
        f"  rotatable tiles: {a.rotatable_tiles}",
        f"  fixed tiles:     {a.fixed_tiles}",
        "  tile types:",
    ]
    for tile_type, n in sorted(a.tile_type_counts.items(), key=lambda kv: kv[0].value):
        lines.append(f"    {tile_type.value}: {n}")
    if result.issues:
        lines.append("")
        lines.append("Issues:")
        lines.extend(f"  - {msg}" for msg in result.issues)
    if result.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  - {msg}" for msg in result.warnings)
    return "\n".join(lines)

#!/usr/bin/env python3
import argparse, json, sys

from wiregrid.config import DIFFICULTIES, LevelOptions
from wiregrid.logging_config import configure_logging
from wiregrid.mapgen.generator import LevelGenerationError, generate_level
from wiregrid.render.ascii import (
    debug_path, draw_comparison, draw_connection_debug, draw_level, draw_solution,
)
from wiregrid.render.png import save_level_png
from wiregrid.stats import format_stats, survey_generation
from wiregrid.validation import format_validation_report, validate_level


def level_options(args):
    return LevelOptions(
        grid_width=args.width,
        grid_height=args.height,
        min_path_length=args.min_path,
        max_path_length=args.max_path,
        allowed_tile_types=tuple(args.tiles) if args.tiles else None,
        allow_fixed_tiles=not args.no_fixed,
        seed=args.seed,
    )

def build_level(args):
    return generate_level(args.difficulty, level_options(args), max_attempts=args.attempts)

def cmd_emit(args):
    level = build_level(args)
    text = json.dumps(level.to_dict(), indent=2 if args.pretty else None)
    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        print(f"Wrote {args.out}")
    else:
        print(text)
    return 0

def cmd_show(args):
    level = build_level(args)
    colors = not args.no_color
    if args.view == 'level':
        print(draw_level(level, use_colors=colors, show_rotations=args.rotations))
    elif args.view == 'solution':
        print(draw_solution(level, use_colors=colors))
    elif args.view == 'comparison':
        print(draw_comparison(level, use_colors=colors))
    elif args.view == 'connections':
        print(draw_connection_debug(level, use_colors=colors))
    else:
        print(debug_path(level, level.solution_path))
    return 0

def cmd_validate(args):
    level = build_level(args)
    result = validate_level(level, strict_crossings=args.strict_crossings)
    print(format_validation_report(result))
    return 0 if result.valid else 1

def cmd_stats(args):
    stats = survey_generation(args.difficulty, args.count, level_options(args))
    print(format_stats(stats))
    return 0

def cmd_render(args):
    level = build_level(args)
    save_level_png(level, args.out, tile_size=args.tile, highlight_path=not args.no_path)
    print(f"Wrote {args.out}")
    return 0

def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--difficulty', choices=DIFFICULTIES, default='easy')
    common.add_argument('--seed', type=int, default=None)
    common.add_argument('--width', type=int, default=None)
    common.add_argument('--height', type=int, default=None)
    common.add_argument('--min-path', type=int, default=None)
    common.add_argument('--max-path', type=int, default=None)
    common.add_argument('--tiles', nargs='+', default=None, help='Allowed tile types, e.g. straight corner')
    common.add_argument('--no-fixed', action='store_true', help='Never lock tiles')
    common.add_argument('--attempts', type=int, default=100, help='Generation attempts before giving up')

    p = argparse.ArgumentParser(prog='wiregrid')
    p.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('emit', parents=[common], help='Write the level as JSON')
    p1.add_argument('--out', type=str, default=None)
    p1.add_argument('--pretty', action='store_true')
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('show', parents=[common], help='Print an ASCII view')
    p2.add_argument('--view', choices=['level', 'solution', 'comparison', 'connections', 'path'], default='level')
    p2.add_argument('--no-color', action='store_true')
    p2.add_argument('--rotations', action='store_true')
    p2.set_defaults(func=cmd_show)

    p3 = sub.add_parser('validate', parents=[common], help='Validate a generated level')
    p3.add_argument('--strict-crossings', action='store_true')
    p3.set_defaults(func=cmd_validate)

    p4 = sub.add_parser('stats', parents=[common], help='Generate many levels and summarise')
    p4.add_argument('--count', type=int, default=10)
    p4.set_defaults(func=cmd_stats)

    p5 = sub.add_parser('render', parents=[common], help='Render the level to PNG')
    p5.add_argument('--out', type=str, required=True)
    p5.add_argument('--tile', type=int, default=32, help='Tile size in pixels')
    p5.add_argument('--no-path', action='store_true')
    p5.set_defaults(func=cmd_render)
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except (LevelGenerationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

if __name__ == '__main__':
    sys.exit(main())

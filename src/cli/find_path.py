# src/cli/find_path.py

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from app.logging_config import configure_logging, is_level_name
from env.loader import CONFIG_ROOT, load_map_rows, load_nav_config
from nav import Coord, MalformedGridError, build_grid, find_path

log = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def parse_coord(text: str) -> Coord:
    """Parse "X,Y" into an (x, y) tuple."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Coordinates must be integers, got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest 4-directional path on a character map (A*)."
    )
    parser.add_argument("--map", help="Map text file (defaults to default_map in nav.yaml)")
    parser.add_argument("--start", type=parse_coord, help="Start as X,Y (defaults to the S marker)")
    parser.add_argument("--goal", type=parse_coord, help="Goal as X,Y (defaults to the G marker)")
    parser.add_argument(
        "--config-dir",
        default=str(CONFIG_ROOT),
        help="Directory holding nav.yaml",
    )
    parser.add_argument("--log-level", help="Override logging.level from nav.yaml")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_nav_config(Path(args.config_dir))
    except (FileNotFoundError, ValueError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    level = (args.log_level or cfg.logging.level).upper()
    if not is_level_name(level):
        print(f"Unknown log level: {level}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # stdout carries the JSON result, so logs go to stderr
    configure_logging(level=level, stream=sys.stderr)

    map_path = args.map or cfg.default_map
    if map_path is None:
        print("No --map given and no default_map configured", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        rows: List[str] = load_map_rows(map_path)
        grid = build_grid(
            rows,
            glyphs=cfg.glyphs,
            require_markers=args.start is None and args.goal is None,
        )
        start = args.start or grid.start
        goal = args.goal or grid.goal
        if start is None or goal is None:
            raise MalformedGridError("Map needs start/goal markers or --start/--goal")
        result = find_path(grid, start, goal)
    except (FileNotFoundError, ValueError) as e:
        # MalformedGridError is a ValueError
        print(f"Input error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    log.info("map=%s start=%s goal=%s success=%s", map_path, start, goal, result.success)

    print(json.dumps(
        {
            "success": result.success,
            "reason": result.reason,
            "path": [list(c) for c in result.path],
            "steps": result.steps,
            "nodes_expanded": result.nodes_expanded,
        },
        indent=2,
        sort_keys=True,
    ))
    return EXIT_FOUND if result.success else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())

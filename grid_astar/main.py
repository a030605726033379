"""Command line entry point: search a map file and print the route."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import CONFIG, Config, load_config
from .persistence.map_loader import MapFormatError, load_map
from .systems.search.astar import AStarSearch, SearchStatus
from .systems.search.frontier import FRONTIER_KINDS
from .systems.search.path import nodes_in_shortest_path_order, path_cost
from .utils.profiling import profile_search

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_MAP = 2


def configure_logging(cfg: Config = CONFIG) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, None)
    valid_global = isinstance(numeric_level, int)
    logging.basicConfig(
        level=numeric_level if valid_global else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    if not valid_global:
        logger.warning(
            "Invalid global log level '%s' in config; using INFO.", cfg.logging.global_level
        )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-astar",
        description="Find a route between the S and E cells of a YAML map.",
    )
    parser.add_argument("map", type=Path, help="YAML map file")
    parser.add_argument(
        "--frontier",
        choices=FRONTIER_KINDS,
        default=None,
        help="frontier implementation (default: from config)",
    )
    parser.add_argument("--config", type=Path, default=None, help="config.yaml to use")
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        metavar="OUT",
        help="write cProfile stats for the search to OUT",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = load_config(args.config) if args.config else CONFIG
    configure_logging(cfg)

    try:
        grid = load_map(args.map)
    except (OSError, MapFormatError) as exc:
        logger.error("Could not load map %s: %s", args.map, exc)
        return EXIT_BAD_MAP

    search = AStarSearch(
        grid,
        grid.start_node,
        grid.end_node,
        frontier=args.frontier or cfg.search.frontier,
    )
    if args.profile is not None:
        result, _ = profile_search(search, args.profile)
        logger.info("Profile written to %s", args.profile)
    else:
        result = search.run()

    print(f"status: {result.status.value}")
    print(f"visited: {len(result.visited)}")
    if result.status is not SearchStatus.FOUND:
        return EXIT_NO_PATH

    path = nodes_in_shortest_path_order(grid, grid.end_node)
    route: List[str] = [f"{node.row},{node.col}" for node in path]
    print(f"cost: {path_cost(path):g}")
    print("path: " + " ".join(route))
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())

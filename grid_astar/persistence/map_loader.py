"""Load grids from YAML map files.

A map document looks like::

    layout:
      - "S..#"
      - ".#3."
      - "...E"
    weights:
      "1,3": 2

``S`` marks the start, ``E`` the end, ``#`` a wall and ``.`` a plain cell. A
digit ``1``-``9`` gives the cell that weight. Entries under ``weights`` keyed
by ``"row,col"`` override the layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from ..core.grid import Grid, GridError
from ..core.node import Coord

logger = logging.getLogger(__name__)

START_CHAR = "S"
END_CHAR = "E"
WALL_CHAR = "#"
OPEN_CHAR = "."
WEIGHT_CHARS = "123456789"


class MapFormatError(ValueError):
    """Raised when a map document cannot be turned into a grid."""


def _parse_coord(key: Any) -> Coord:
    try:
        row_s, col_s = str(key).split(",")
        return (int(row_s), int(col_s))
    except ValueError as exc:
        raise MapFormatError(f"invalid weight key {key!r}, expected 'row,col'") from exc


def _scan_layout(
    layout: List[str],
) -> Tuple[List[Coord], Dict[Coord, float], Optional[Coord], Optional[Coord]]:
    walls: List[Coord] = []
    weights: Dict[Coord, float] = {}
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    for r, line in enumerate(layout):
        for c, ch in enumerate(line):
            if ch == OPEN_CHAR:
                continue
            if ch == WALL_CHAR:
                walls.append((r, c))
            elif ch == START_CHAR:
                if start is not None:
                    raise MapFormatError(f"second start cell at {(r, c)}")
                start = (r, c)
            elif ch == END_CHAR:
                if end is not None:
                    raise MapFormatError(f"second end cell at {(r, c)}")
                end = (r, c)
            elif ch in WEIGHT_CHARS:
                weights[(r, c)] = int(ch)
            else:
                raise MapFormatError(f"unknown map character {ch!r} at {(r, c)}")
    return walls, weights, start, end


def grid_from_layout(data: Mapping[str, Any]) -> Grid:
    """Build a :class:`Grid` from an already-parsed map document."""

    layout = data.get("layout")
    if not isinstance(layout, list) or not layout:
        raise MapFormatError("map needs a non-empty 'layout' list")
    layout = [str(line) for line in layout]
    width = len(layout[0])
    for r, line in enumerate(layout):
        if len(line) != width:
            raise MapFormatError(
                f"row {r} has {len(line)} cells, expected {width}"
            )

    walls, weights, start, end = _scan_layout(layout)
    if start is None or end is None:
        raise MapFormatError("map needs exactly one 'S' and one 'E' cell")

    overrides = data.get("weights") or {}
    if not isinstance(overrides, dict):
        raise MapFormatError("'weights' must be a mapping of 'row,col' to numbers")
    for key, value in overrides.items():
        coord = _parse_coord(key)
        try:
            weights[coord] = float(value)
        except (TypeError, ValueError) as exc:
            raise MapFormatError(f"invalid weight {value!r} for {key!r}") from exc

    try:
        return Grid.create(
            len(layout),
            width,
            walls=walls,
            weights=weights,
            start=start,
            end=end,
        )
    except GridError as exc:
        raise MapFormatError(str(exc)) from exc


def load_map(path: str | Path) -> Grid:
    """Read the YAML map at ``path`` and return its grid."""

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise MapFormatError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise MapFormatError(f"{path}: expected a mapping at the top level")
    grid = grid_from_layout(data)
    logger.debug("Loaded %dx%d map from %s", grid.rows, grid.cols, path)
    return grid


__all__ = ["MapFormatError", "grid_from_layout", "load_map"]

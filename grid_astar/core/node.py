"""Grid cell record read and mutated by the search."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple


Coord = Tuple[int, int]

# Sentinel for cells the search has not reached yet.
INFINITY = math.inf


@dataclass(eq=False)
class Node:
    """One grid cell.

    ``row``/``col`` and ``is_wall``/``weight`` are fixed once the grid is
    built. ``distance``, ``is_visited`` and ``previous`` are search state and
    are reset before every run.
    """

    row: int
    col: int
    weight: float = 0
    is_wall: bool = False
    is_visited: bool = False
    distance: float = INFINITY
    # (row, col) of the cell this one was last relaxed from
    previous: Optional[Coord] = field(default=None)

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_reached(self) -> bool:
        return self.distance != INFINITY

    def reset(self) -> None:
        """Restore the initial search state."""

        self.is_visited = False
        self.distance = INFINITY
        self.previous = None

    def __repr__(self) -> str:
        flags = " wall" if self.is_wall else ""
        return f"Node({self.row}, {self.col}, d={self.distance}{flags})"


def euclidean(a: Node, b: Node) -> float:
    """Straight-line distance between two cells."""

    dr = a.row - b.row
    dc = a.col - b.col
    return math.sqrt(dr * dr + dc * dc)


__all__ = ["Coord", "INFINITY", "Node", "euclidean"]

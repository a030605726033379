"""Route reconstruction from the back-pointers left by a search."""

from __future__ import annotations

from typing import List, Sequence

from ...core.grid import Grid
from ...core.node import Node


def nodes_in_shortest_path_order(grid: Grid, end: Node) -> List[Node]:
    """Walk ``previous`` links from ``end`` back to the start.

    Only meaningful after a search over ``grid`` reached ``end`` with status
    ``FOUND``. Returns the route from start to ``end`` inclusive.
    """

    path: List[Node] = []
    current = end
    while current is not None:
        path.append(current)
        current = grid.previous_of(current)
    path.reverse()
    return path


def path_cost(path: Sequence[Node]) -> float:
    """Sum of entry costs (``weight + 1``) along ``path`` after its first node."""

    return sum(node.weight + 1 for node in path[1:])


__all__ = ["nodes_in_shortest_path_order", "path_cost"]

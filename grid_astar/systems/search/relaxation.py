"""Relaxation of a finalized node's neighbours."""

from __future__ import annotations

from typing import Callable, List, Optional

from ...core.grid import Grid
from ...core.node import Node
from .neighbors import unvisited_neighbors


def relax_neighbors(
    node: Node,
    grid: Grid,
    on_relaxed: Optional[Callable[[Node], None]] = None,
) -> List[Node]:
    """Point every unvisited neighbour of ``node`` back at it.

    The neighbour's distance is overwritten with ``node.distance + weight + 1``
    even when it already holds a smaller value; the last relaxation before a
    node is popped wins. ``on_relaxed`` is called with each updated neighbour.
    """

    relaxed = unvisited_neighbors(node, grid)
    for neighbor in relaxed:
        neighbor.distance = node.distance + neighbor.weight + 1
        neighbor.previous = node.coord
        if on_relaxed is not None:
            on_relaxed(neighbor)
    return relaxed


__all__ = ["relax_neighbors"]

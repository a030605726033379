"""Neighbor enumeration for 4-connected grids."""

from __future__ import annotations

from typing import List

from ...core.grid import Grid
from ...core.node import Node


def unvisited_neighbors(node: Node, grid: Grid) -> List[Node]:
    """Return the in-bounds cardinal neighbours of ``node`` not yet visited.

    Order is up, down, left, right. Walls are included; the search drops
    them when they are popped.
    """

    row, col = node.row, node.col
    neighbors: List[Node] = []
    if row > 0:
        neighbors.append(grid.node(row - 1, col))
    if row < grid.rows - 1:
        neighbors.append(grid.node(row + 1, col))
    if col > 0:
        neighbors.append(grid.node(row, col - 1))
    if col < grid.cols - 1:
        neighbors.append(grid.node(row, col + 1))
    return [n for n in neighbors if not n.is_visited]


__all__ = ["unvisited_neighbors"]

"""Rectangular arena of :class:`Node` cells."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping, Optional

from .node import Coord, Node


class GridError(ValueError):
    """Raised when a grid is built or addressed with invalid input."""


class Grid:
    """Fixed-size grid owning its nodes, addressed by ``(row, col)``."""

    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise GridError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._nodes: List[List[Node]] = [
            [Node(r, c) for c in range(cols)] for r in range(rows)
        ]
        self.start: Optional[Coord] = None
        self.end: Optional[Coord] = None
        if start is not None:
            self.start = self._checked(start)
        if end is not None:
            self.end = self._checked(end)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        *,
        walls: Iterable[Coord] = (),
        weights: Optional[Mapping[Coord, float]] = None,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ) -> "Grid":
        """Build a grid with the given ``walls`` and per-cell ``weights``."""

        grid = cls(rows, cols, start=start, end=end)
        for coord in walls:
            grid.node(*grid._checked(coord)).is_wall = True
        for coord, weight in (weights or {}).items():
            if not weight >= 0:
                raise GridError(f"weight must be non-negative, got {weight} at {coord}")
            grid.node(*grid._checked(coord)).weight = weight
        return grid

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _checked(self, coord: Coord) -> Coord:
        row, col = coord
        if not self.in_bounds(row, col):
            raise GridError(f"{coord} is outside a {self.rows}x{self.cols} grid")
        return (row, col)

    def node(self, row: int, col: int) -> Node:
        """Return the node at ``(row, col)``."""

        return self._nodes[row][col]

    def __getitem__(self, coord: Coord) -> Node:
        return self.node(*self._checked(coord))

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, Node) or not self.in_bounds(node.row, node.col):
            return False
        return self._nodes[node.row][node.col] is node

    def __iter__(self) -> Iterator[Node]:
        """Yield every node in row-major order."""

        for row in self._nodes:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    @property
    def start_node(self) -> Node:
        if self.start is None:
            raise GridError("grid has no start cell")
        return self.node(*self.start)

    @property
    def end_node(self) -> Node:
        if self.end is None:
            raise GridError("grid has no end cell")
        return self.node(*self.end)

    def previous_of(self, node: Node) -> Optional[Node]:
        """Resolve ``node.previous`` to the node it names."""

        if node.previous is None:
            return None
        return self.node(*node.previous)

    # ------------------------------------------------------------------
    # Search state
    # ------------------------------------------------------------------
    def reset_search_state(self) -> None:
        """Clear distance, visited flag and back-pointer on every node."""

        for node in self:
            node.reset()


__all__ = ["Grid", "GridError"]

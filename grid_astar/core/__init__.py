"""core package."""

from .grid import Grid, GridError
from .node import INFINITY, Coord, Node, euclidean

__all__ = ["Coord", "Grid", "GridError", "INFINITY", "Node", "euclidean"]

"""Grid search: frontier, relaxation, driver and path reconstruction."""

from .astar import AStarSearch, SearchResult, SearchStatus, SearchStep, a_star
from .frontier import FRONTIER_KINDS, HeapFrontier, SortedFrontier, make_frontier
from .neighbors import unvisited_neighbors
from .path import nodes_in_shortest_path_order, path_cost
from .relaxation import relax_neighbors

__all__ = [
    "AStarSearch",
    "FRONTIER_KINDS",
    "HeapFrontier",
    "SearchResult",
    "SearchStatus",
    "SearchStep",
    "SortedFrontier",
    "a_star",
    "make_frontier",
    "nodes_in_shortest_path_order",
    "path_cost",
    "relax_neighbors",
    "unvisited_neighbors",
]

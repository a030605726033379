"""Weighted best-first (A*-ordered) grid search.

The search finalizes one node per step and records the order in which
non-wall nodes were finalized. It ends in one of three states:

``FOUND``
    the end node was popped and finalized.
``TRAPPED``
    the next node to finalize has infinite distance; nothing left in the
    frontier is reachable from the start.
``EXHAUSTED``
    the frontier emptied without either of the above, e.g. when the end node
    is a wall.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from ...config import CONFIG
from ...core.grid import Grid, GridError
from ...core.node import INFINITY, Node
from .frontier import Frontier, make_frontier
from .relaxation import relax_neighbors

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    RUNNING = "running"
    FOUND = "found"
    TRAPPED = "trapped"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self is not SearchStatus.RUNNING


@dataclass(slots=True)
class SearchStep:
    """Outcome of a single pop."""

    status: SearchStatus
    node: Optional[Node] = None
    skipped_wall: bool = False


@dataclass
class SearchResult:
    """Terminal outcome of a search run."""

    status: SearchStatus
    visited: List[Node] = field(default_factory=list)
    pops: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


class AStarSearch:
    """Step-wise search over ``grid`` from ``start`` to ``end``.

    ``reset`` clears any search state left on the grid by a previous run.
    """

    def __init__(
        self,
        grid: Grid,
        start: Node,
        end: Node,
        *,
        frontier: Optional[str] = None,
        reset: bool = True,
    ) -> None:
        if start not in grid or end not in grid:
            raise GridError("start and end must be nodes of the searched grid")
        self.grid = grid
        self.start = start
        self.end = end
        self.frontier_kind = frontier or CONFIG.search.frontier
        if reset:
            grid.reset_search_state()
        start.distance = 0
        self.frontier: Frontier = make_frontier(self.frontier_kind, grid, end)
        self.visited: List[Node] = []
        self.status = SearchStatus.RUNNING
        self.pops = 0

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def step(self) -> SearchStep:
        """Pop one node and advance the state machine."""

        if self.status.is_terminal:
            return SearchStep(self.status)

        if not self.frontier:
            self.status = SearchStatus.EXHAUSTED
            logger.info(
                "Frontier exhausted after %d pops without reaching %s",
                self.pops,
                self.end.coord,
            )
            return SearchStep(self.status)

        node = self.frontier.select_next()
        self.pops += 1

        if node.is_wall:
            logger.debug("Skipping wall %s", node.coord)
            return SearchStep(self.status, node, skipped_wall=True)

        self.visited.append(node)

        if node.distance == INFINITY:
            self.status = SearchStatus.TRAPPED
            logger.info(
                "Trapped after %d pops: %s is unreachable", self.pops, node.coord
            )
            return SearchStep(self.status, node)

        node.is_visited = True

        if node is self.end:
            self.status = SearchStatus.FOUND
            logger.info(
                "Reached %s at distance %s after %d pops",
                node.coord,
                node.distance,
                self.pops,
            )
            return SearchStep(self.status, node)

        relax_neighbors(node, self.grid, self.frontier.notify_relaxed)
        logger.debug("Finalized %s at distance %s", node.coord, node.distance)
        return SearchStep(self.status, node)

    def steps(self) -> Iterator[SearchStep]:
        """Yield each step until the search terminates.

        Stopping iteration early leaves the grid in its partial state.
        """

        while True:
            step = self.step()
            yield step
            if step.status.is_terminal:
                return

    def run(self) -> SearchResult:
        """Drive the search to a terminal state."""

        for _ in self.steps():
            pass
        return self.result()

    def result(self) -> SearchResult:
        return SearchResult(self.status, list(self.visited), self.pops)


def a_star(
    grid: Grid,
    start: Node,
    end: Node,
    frontier: Optional[str] = None,
) -> SearchResult:
    """Run a full search and return its :class:`SearchResult`."""

    return AStarSearch(grid, start, end, frontier=frontier).run()


__all__ = [
    "AStarSearch",
    "SearchResult",
    "SearchStatus",
    "SearchStep",
    "a_star",
]

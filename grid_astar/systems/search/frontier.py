"""Frontier selection: which unfinalized node the search pops next.

Both frontiers order nodes by ``distance + euclidean(node, end)``. Keys are
derived from each node's *current* distance, so relaxations that overwrite a
distance are reflected at the next pop.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List, Tuple

from ...core.node import Node, euclidean


FRONTIER_KINDS = ("sorted", "heap")


class SortedFrontier:
    """Re-sorts every remaining node on each pop.

    The sort is stable and the list keeps its sorted order between pops, so
    nodes with equal keys come out in their current relative order. This
    reproduces the reference visit order exactly at O(n log n) per pop.
    """

    def __init__(self, nodes: Iterable[Node], end: Node) -> None:
        self.end = end
        self._nodes: List[Node] = list(nodes)

    def _key(self, node: Node) -> float:
        return node.distance + euclidean(node, self.end)

    def select_next(self) -> Node:
        """Remove and return the node with the lowest key."""

        self._nodes.sort(key=self._key)
        return self._nodes.pop(0)

    def notify_relaxed(self, node: Node) -> None:
        # Keys are recomputed on every pop.
        pass

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)


class HeapFrontier:
    """Binary heap with re-insertion on relax and lazy stale-entry removal.

    Ties are broken by row-major enumeration index. Each node still leaves
    the frontier exactly once, but tie order can differ from
    :class:`SortedFrontier` once distances have been overwritten.
    """

    def __init__(self, nodes: Iterable[Node], end: Node) -> None:
        self.end = end
        self._heap: List[Tuple[float, int, Node]] = []
        self._index: Dict[Node, int] = {}
        self._keys: Dict[Node, float] = {}
        for index, node in enumerate(nodes):
            self._index[node] = index
            self._push(node)
        heapq.heapify(self._heap)

    def _key(self, node: Node) -> float:
        return node.distance + euclidean(node, self.end)

    def _push(self, node: Node) -> None:
        key = self._key(node)
        self._keys[node] = key
        self._heap.append((key, self._index[node], node))

    def select_next(self) -> Node:
        """Remove and return the node with the lowest current key."""

        while self._heap:
            key, _, node = heapq.heappop(self._heap)
            if node not in self._keys or self._keys[node] != key:
                continue  # stale
            del self._keys[node]
            return node
        raise IndexError("select_next from an empty frontier")

    def notify_relaxed(self, node: Node) -> None:
        """Queue ``node`` again under its updated key."""

        if node not in self._keys:
            return  # already left the frontier
        key = self._key(node)
        self._keys[node] = key
        heapq.heappush(self._heap, (key, self._index[node], node))

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)


Frontier = SortedFrontier | HeapFrontier


def make_frontier(kind: str, nodes: Iterable[Node], end: Node) -> Frontier:
    """Build a frontier of ``kind`` (``"sorted"`` or ``"heap"``)."""

    if kind == "sorted":
        return SortedFrontier(nodes, end)
    if kind == "heap":
        return HeapFrontier(nodes, end)
    raise ValueError(
        f"unknown frontier kind {kind!r}; expected one of {', '.join(FRONTIER_KINDS)}"
    )


__all__ = [
    "FRONTIER_KINDS",
    "Frontier",
    "HeapFrontier",
    "SortedFrontier",
    "make_frontier",
]

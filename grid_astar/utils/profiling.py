"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Tuple

from ..systems.search.astar import AStarSearch, SearchResult


def profile_search(
    search: AStarSearch,
    out_path: str | Path = "search.prof",
) -> Tuple[SearchResult, pstats.Stats]:
    """Run ``search`` to completion under cProfile and dump stats to ``out_path``.

    Parameters
    ----------
    search:
        A freshly constructed :class:`AStarSearch`.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    tuple
        The search result and the profiling statistics for the run.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in search.steps():
        pass
    profiler.disable()
    profiler.dump_stats(str(path))
    return search.result(), pstats.Stats(profiler)


__all__ = ["profile_search"]

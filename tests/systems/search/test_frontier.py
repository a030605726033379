import pytest

from grid_astar.core import Grid
from grid_astar.systems.search.frontier import HeapFrontier, SortedFrontier, make_frontier


@pytest.mark.parametrize("kind", ["sorted", "heap"])
def test_lowest_key_first(kind):
    grid = Grid(1, 4)
    end = grid.node(0, 3)
    grid.node(0, 2).distance = 0
    frontier = make_frontier(kind, grid, end)
    assert frontier.select_next() is grid.node(0, 2)
    assert len(frontier) == 3


@pytest.mark.parametrize("kind", ["sorted", "heap"])
def test_equal_keys_keep_enumeration_order(kind):
    grid = Grid(1, 3)
    end = grid.node(0, 2)
    grid.node(0, 0).distance = 0  # 0 + 2
    grid.node(0, 1).distance = 1  # 1 + 1
    frontier = make_frontier(kind, grid, end)
    assert frontier.select_next() is grid.node(0, 0)
    assert frontier.select_next() is grid.node(0, 1)
    assert frontier.select_next() is grid.node(0, 2)
    assert not frontier


@pytest.mark.parametrize("kind", ["sorted", "heap"])
def test_unreached_nodes_come_out_in_order(kind):
    grid = Grid(2, 2)
    frontier = make_frontier(kind, grid, grid.node(1, 1))
    popped = [frontier.select_next().coord for _ in range(4)]
    assert popped == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_sorted_frontier_sees_distance_changes():
    grid = Grid(1, 3)
    end = grid.node(0, 2)
    frontier = SortedFrontier(grid, end)
    grid.node(0, 1).distance = 0
    assert frontier.select_next() is grid.node(0, 1)


def test_heap_frontier_skips_stale_entries():
    grid = Grid(1, 3)
    end = grid.node(0, 2)
    grid.node(0, 0).distance = 0
    frontier = HeapFrontier(grid, end)

    grid.node(0, 1).distance = 1
    frontier.notify_relaxed(grid.node(0, 1))
    assert frontier.select_next() is grid.node(0, 0)

    grid.node(0, 1).distance = 10
    frontier.notify_relaxed(grid.node(0, 1))
    grid.node(0, 2).distance = 3
    frontier.notify_relaxed(grid.node(0, 2))

    assert frontier.select_next() is grid.node(0, 2)
    assert frontier.select_next() is grid.node(0, 1)
    assert len(frontier) == 0


def test_heap_frontier_ignores_nodes_already_removed():
    grid = Grid(1, 2)
    frontier = HeapFrontier(grid, grid.node(0, 1))
    first = frontier.select_next()
    frontier.notify_relaxed(first)
    assert len(frontier) == 1
    assert frontier.select_next() is grid.node(0, 1)


def test_heap_frontier_empty_pop_raises():
    grid = Grid(1, 1)
    frontier = HeapFrontier(grid, grid.node(0, 0))
    frontier.select_next()
    with pytest.raises(IndexError):
        frontier.select_next()


def test_unknown_frontier_kind():
    grid = Grid(1, 1)
    with pytest.raises(ValueError):
        make_frontier("fibonacci", grid, grid.node(0, 0))

import pytest

from grid_astar.core import Grid
from grid_astar.systems.search.astar import a_star
from grid_astar.systems.search.path import nodes_in_shortest_path_order, path_cost


def test_walks_back_pointers_to_start():
    grid = Grid(1, 4)
    grid.node(0, 1).previous = (0, 0)
    grid.node(0, 2).previous = (0, 1)
    grid.node(0, 3).previous = (0, 2)
    path = nodes_in_shortest_path_order(grid, grid.node(0, 3))
    assert [n.coord for n in path] == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_node_without_predecessor_is_its_own_path():
    grid = Grid(2, 2)
    assert nodes_in_shortest_path_order(grid, grid.node(1, 1)) == [grid.node(1, 1)]


def test_path_cost_counts_entry_weights():
    grid = Grid.create(1, 3, weights={(0, 0): 9, (0, 1): 2, (0, 2): 0.5})
    path = [grid.node(0, 0), grid.node(0, 1), grid.node(0, 2)]
    assert path_cost(path) == pytest.approx(4.5)
    assert path_cost(path[:1]) == 0
    assert path_cost([]) == 0


@pytest.mark.parametrize("kind", ["sorted", "heap"])
def test_path_cost_matches_goal_distance(kind):
    grid = Grid.create(
        5,
        5,
        walls=[(1, 1), (1, 2), (1, 3), (3, 1), (3, 3)],
        weights={(2, 2): 3, (0, 4): 2, (4, 0): 1},
    )
    end = grid.node(4, 4)
    result = a_star(grid, grid.node(0, 0), end, frontier=kind)
    assert result.found
    path = nodes_in_shortest_path_order(grid, end)
    assert path_cost(path) == pytest.approx(end.distance)

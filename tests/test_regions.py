from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gridkit.constants import UNREACHED
from gridkit.errors import EmptyCollection, InvalidState
from gridkit.grid import Grid
from gridkit.regions import (
    clear_neighbors,
    fill_distances_depth_first,
    get_regions,
    reset_distances,
    reset_visited,
    set_neighbors,
    shortest_path_to,
)


def positions(nodes):
    return [node.position for node in nodes]


def test_uniform_grid_is_one_region():
    grid = Grid.filled(4, 3, "a")
    regions = list(get_regions(grid))
    assert len(regions) == 1
    assert len(regions[0]) == 12


def test_checkerboard_has_one_region_per_cell():
    grid = Grid([[(x + y) % 2 for x in range(4)] for y in range(4)])
    regions = list(get_regions(grid))
    assert len(regions) == 16
    assert all(len(region) == 1 for region in regions)


def test_regions_follow_storage_order_and_equal_values():
    grid = Grid(["AAB", "ABB", "CCB"])
    regions = list(get_regions(grid))
    assert [region[0].value for region in regions] == ["A", "B", "C"]
    assert sorted(positions(regions[0])) == [(0, 0), (0, 1), (1, 0)]
    assert sorted(positions(regions[1])) == [(1, 1), (2, 0), (2, 1), (2, 2)]
    assert all(node.visited == 1 for node in grid)


def test_regions_do_not_join_diagonally():
    grid = Grid(["AB", "BA"])
    assert len(list(get_regions(grid))) == 4


def test_pre_visited_nodes_are_excluded():
    grid = Grid(["AAA"])
    grid.get(1, 0).visit()
    regions = list(get_regions(grid))
    assert [positions(region) for region in regions] == [[(0, 0)], [(2, 0)]]


def test_regions_are_lazy():
    grid = Grid(["AB"])
    regions = get_regions(grid)
    first = next(regions)
    assert positions(first) == [(0, 0)]
    assert not grid.get(1, 0).is_visited


def test_none_value_is_invalid_state():
    grid = Grid([["a", None]])
    with pytest.raises(InvalidState):
        list(get_regions(grid))


def test_set_neighbors_filters_and_replaces_links():
    grid = Grid(["a#", "aa"])
    set_neighbors(grid, with_diagonals=True)
    assert len(grid.get(0, 0).neighbor_indices) == 3

    set_neighbors(grid, include=lambda node: node.value != "#")
    assert positions(grid.linked(grid.get(0, 0))) == [(0, 1)]
    assert positions(grid.linked(grid.get(1, 0))) == [(0, 0), (1, 1)]

    clear_neighbors(grid)
    assert all(not node.neighbor_indices for node in grid)


def test_resets():
    grid = Grid(["ab"])
    for node in grid:
        node.set_distance(3)
    reset_visited(grid)
    reset_distances(grid)
    assert all(node.visited == 0 and node.distance == UNREACHED for node in grid)


def test_depth_first_fill_matches_breadth_first_on_open_grid():
    grid = Grid(["....", "....", "...."])
    set_neighbors(grid)
    fill_distances_depth_first(grid, grid.get(0, 0), visit_limit=100)
    for node in grid:
        assert node.distance == node.x + node.y


def test_depth_first_fill_handles_long_corridors():
    grid = Grid.filled(3000, 1, ".")
    set_neighbors(grid)
    fill_distances_depth_first(grid, grid.get(0, 0))
    assert grid.get(2999, 0).distance == 2999


def test_depth_first_fill_respects_starting_distance():
    grid = Grid(["..."])
    set_neighbors(grid)
    fill_distances_depth_first(grid, grid.get(2, 0), distance=5)
    assert [node.distance for node in grid] == [7, 6, 5]


def test_shortest_path_walks_down_the_distance_field():
    grid = Grid(["...", ".#.", "..."])
    set_neighbors(grid, include=lambda node: node.value == ".")
    end = grid.get(2, 2)
    grid.fill_distances(end)
    reset_visited(grid)
    start = grid.get(0, 0)
    start.visit()
    path = list(shortest_path_to(grid, start, end))
    assert path[-1] is end
    assert len(path) == 4
    assert [node.distance for node in path] == [3, 2, 1, 0]


def test_shortest_path_without_exit_raises():
    grid = Grid(["a"])
    node = grid.get(0, 0)
    with pytest.raises(EmptyCollection):
        list(shortest_path_to(grid, node, Grid(["b"]).get(0, 0)))

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gridkit.constants import UNREACHED
from gridkit.errors import InvalidInput
from gridkit.grid import Grid
from gridkit.node import Node
from gridkit.rays import (
    RAYS,
    cast,
    down_from,
    down_left_from,
    down_right_from,
    get_ray,
    left_from,
    right_from,
    up_from,
    up_left_from,
    up_right_from,
)


def make_letters():
    return Grid(["abcd", "efgh", "ijkl", "mnop"])


def values(nodes):
    return "".join(node.value for node in nodes)


def test_straight_rays():
    grid = make_letters()
    node = grid.get(1, 2)
    assert values(up_from(grid, node)) == "fb"
    assert values(down_from(grid, node)) == "n"
    assert values(left_from(grid, node)) == "i"
    assert values(right_from(grid, node)) == "kl"


def test_diagonal_rays():
    grid = make_letters()
    node = grid.get(1, 2)
    assert values(up_left_from(grid, node)) == "e"
    assert values(up_right_from(grid, node)) == "gd"
    assert values(down_left_from(grid, node)) == "m"
    assert values(down_right_from(grid, node)) == "o"


def test_ray_from_edge_is_empty_and_restartable():
    grid = make_letters()
    corner = grid.get(0, 0)
    assert list(up_from(grid, corner)) == []
    ray = right_from(grid, corner)
    assert values(ray) == "bcd"
    assert list(ray) == []
    assert values(right_from(grid, corner)) == "bcd"


def test_rays_do_not_touch_node_state():
    grid = make_letters()
    for walk in RAYS.values():
        list(walk(grid, grid.get(2, 2)))
    assert all(node.visited == 0 and node.distance == UNREACHED for node in grid)


def test_cast_and_registry():
    grid = make_letters()
    assert values(cast(grid, grid.get(0, 0), 1, 1)) == "fkp"
    assert values(cast(grid, grid.get(0, 0), 2, 1)) == "g"
    assert list(cast(grid, grid.get(0, 0), 0, 0)) == []
    assert get_ray("down") is down_from
    with pytest.raises(KeyError):
        get_ray("sideways")


def test_node_scratch_state():
    node = Node(2, 3, "x")
    assert node.distance == UNREACHED
    assert not node.is_visited
    assert node.set_distance(4) == 4
    assert node.visited == 1
    assert node.visit() == 2
    node.reset_visited()
    node.reset_distance()
    assert node.visited == 0 and node.distance == UNREACHED


def test_node_value_and_position():
    node = Node(2, 3, 5)
    assert node.get_value() == 5
    assert node.update_value(lambda v: v + 1) == 6
    node.set_position((7, 8))
    assert node.astuple() == (7, 8, 6)
    x, y, value = node.astuple()
    assert (x, y, value) == (7, 8, 6)
    assert str(node) == "7,8 6"


def test_node_links_are_indices():
    grid = Grid(["ab"])
    a, b = grid.nodes()
    a.add_neighbors(b, b)
    assert a.neighbor_indices == (1, 1)
    assert grid.linked(a) == [b, b]
    a.clear_neighbors()
    assert grid.linked(a) == []


def test_linking_unowned_node_fails():
    grid = Grid(["a"])
    with pytest.raises(InvalidInput):
        grid.get(0, 0).add_neighbor(Node(0, 0, "stray"))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from grids.cost_map import CostMap, CoordinateOutOfBounds, WALL_COST


def test_create_fills_every_cell():
    cm = CostMap.create(4, 3, 7)
    assert cm.size == (4, 3)
    assert all(cm.get(c) == 7 for c in cm.coords())
    assert len(list(cm.coords())) == 12


def test_set_get_uses_x_y_order():
    cm = CostMap.create(4, 3, 1)
    cm.set((3, 0), 5)
    assert cm.get((3, 0)) == 5
    assert cm.to_array()[0, 3] == 5
    cm[(0, 2)] = WALL_COST
    assert cm[(0, 2)] == WALL_COST
    assert cm.is_wall((0, 2))
    assert cm.walls() == [(0, 2)]


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (4, 0), (0, 3), (10, 10)])
def test_out_of_bounds_fails_fast(coord):
    cm = CostMap.create(4, 3, 1)
    assert not cm.in_bounds(coord)
    with pytest.raises(CoordinateOutOfBounds):
        cm.get(coord)
    with pytest.raises(IndexError):
        cm.set(coord, 1)


def test_negative_non_wall_cost_rejected():
    cm = CostMap.create(2, 2, 1)
    with pytest.raises(ValueError):
        cm.set((0, 0), -5)
    with pytest.raises(ValueError):
        CostMap.from_array([[1, -3]])


def test_custom_wall_value():
    cm = CostMap.from_array([[0, 1], [0, 0]], wall_cost=1)
    assert cm.is_wall((1, 0))
    assert not cm.is_wall((0, 0))


def test_from_array_copies_and_view_is_read_only():
    src = np.array([[1, 2, 3], [4, 5, 6]])
    cm = CostMap.from_array(src)
    src[0, 0] = 99
    assert cm.get((0, 0)) == 1
    assert cm.get((2, 1)) == 6
    view = cm.to_array()
    with pytest.raises(ValueError):
        view[0, 0] = 3


def test_copy_resize_fill():
    cm = CostMap.create(3, 3, 2)
    other = cm.copy()
    other.set((1, 1), WALL_COST)
    assert cm.get((1, 1)) == 2
    assert cm != other
    cm.fill(4)
    assert cm.get((2, 2)) == 4
    cm.resize(5, 2, 0)
    assert cm.size == (5, 2)
    assert cm.get((4, 1)) == 0
    with pytest.raises(ValueError):
        cm.resize(0, 3)


def test_costs_outside_int32_rejected_not_wrapped():
    # 2**32 - 1 would wrap to -1, the wall value
    with pytest.raises(ValueError):
        CostMap.from_array(np.array([[1, 2**32 - 1, 1]], dtype=np.int64))
    cm = CostMap.create(3, 1, 1)
    with pytest.raises(ValueError):
        cm.set((1, 0), 2**40)
    with pytest.raises(ValueError):
        CostMap.create(2, 2, 2**31)
    assert not cm.is_wall((1, 0))
    top = np.iinfo(np.int32).max
    assert CostMap.from_array([[top]]).get((0, 0)) == top

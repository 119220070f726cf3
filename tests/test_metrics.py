#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from grids.cost_map import CostMap, WALL_COST
from metrics import compute_path_metrics, is_valid_path, path_cost


def test_path_cost_excludes_goal_and_includes_start():
    cm = CostMap.from_array([[3, 4, 50]])
    assert path_cost((0, 0), [(1, 0), (2, 0)], cm) == 7
    assert path_cost((0, 0), [], cm) == 0


def test_invalid_paths_detected():
    cm = CostMap.create(4, 4, 1)
    cm.set((1, 1), WALL_COST)
    assert is_valid_path((0, 0), [(1, 0), (2, 0)], cm, "square4")
    assert not is_valid_path((0, 0), [(2, 0)], cm, "square4")           # jump
    assert not is_valid_path((0, 0), [(1, 0), (1, 1)], cm, "square4")   # wall
    assert not is_valid_path((0, 0), [(1, 0), (0, 0)], cm, "square4")   # revisits start
    assert not is_valid_path((0, 0), [(1, 1)], cm, "square8")
    assert not is_valid_path((3, 3), [(4, 3)], cm, "square4")           # off map


def test_compute_path_metrics():
    cm = CostMap.create(3, 3, 2)
    m = compute_path_metrics((0, 0), [(1, 0), (2, 0)], cm, "square4")
    assert m == {"hops": 2, "cost": 4, "valid": True, "unique": True, "path_success": True}


def test_failed_query_has_no_cost():
    cm = CostMap.create(3, 3, 2)
    for path in (None, []):
        m = compute_path_metrics((0, 0), path, cm, "square4")
        assert m["hops"] == 0 and not m["path_success"]
        assert m["cost"] is None and not m["valid"]


def test_repeated_cell_is_not_unique():
    cm = CostMap.create(3, 3, 1)
    m = compute_path_metrics((0, 0), [(1, 0), (2, 0), (1, 0)], cm, "square4")
    assert not m["unique"] and not m["valid"] and m["cost"] is None

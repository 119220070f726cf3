#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from grids.cost_map import CostMap, WALL_COST
from grids.generator import generate_cost_map
from grids.io import load_cost_map, save_cost_map


def test_generate_is_seeded_and_respects_keep_free():
    a = generate_cost_map(30, 20, wall_density=0.3, keep_free=[(0, 0), (29, 19)],
                          rng=np.random.default_rng(42))
    b = generate_cost_map(30, 20, wall_density=0.3, keep_free=[(0, 0), (29, 19)],
                          rng=np.random.default_rng(42))
    assert a.cost_map == b.cost_map
    assert a.cost_map.size == (30, 20)
    assert not a.cost_map.is_wall((0, 0)) and not a.cost_map.is_wall((29, 19))
    assert 0.2 <= a.wall_fraction <= 0.32
    assert a.settings["width"] == 30 and "seed" in a.settings


def test_generated_costs_stay_in_range():
    gm = generate_cost_map(10, 10, wall_density=0.1, cost_range=(2, 4), rng=np.random.default_rng(0))
    arr = gm.cost_map.to_array()
    free = arr[arr != WALL_COST]
    assert free.min() >= 2 and free.max() <= 4


def test_no_walls_at_zero_density():
    gm = generate_cost_map(8, 8, wall_density=0.0, rng=np.random.default_rng(1))
    assert gm.cost_map.walls() == []


def test_cost_range_may_not_contain_wall_value():
    with pytest.raises(ValueError):
        generate_cost_map(5, 5, cost_range=(0, 3), wall_cost=1)
    with pytest.raises(ValueError):
        generate_cost_map(5, 5, cost_range=(4, 2))


@pytest.mark.parametrize("ext", [".npy", ".json", ".txt"])
def test_save_load_preserves_map(tmp_path, ext):
    cm = CostMap.from_array([[1, 2, WALL_COST], [0, 5, 7]])
    path = str(tmp_path / f"level{ext}")
    save_cost_map(cm, path)
    assert load_cost_map(path) == cm


def test_load_text_with_legacy_wall_value(tmp_path):
    p = tmp_path / "legacy.txt"
    p.write_text("0 0 1\n0 1 0\n")
    cm = load_cost_map(str(p), wall_cost=1)
    assert cm.size == (3, 2)
    assert cm.walls() == [(2, 0), (1, 1)]


@pytest.mark.parametrize("payload", ["5", "[[1, 2]]", "\"cells\""])
def test_json_map_must_be_an_object(tmp_path, payload):
    p = tmp_path / "bad.json"
    p.write_text(payload)
    with pytest.raises(ValueError):
        load_cost_map(str(p))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import json
import logging
import pytest

from grids.cost_map import WALL_COST
from planners.config import SearchConfig, load_config


def test_defaults():
    cfg = SearchConfig()
    assert cfg.topology == "hex"
    assert cfg.wall_cost == WALL_COST
    assert cfg.level == logging.WARNING


def test_values_are_normalised():
    cfg = SearchConfig(topology="8", log_level="debug")
    assert cfg.topology == "square8"
    assert cfg.log_level == "DEBUG"


def test_bad_values_rejected():
    with pytest.raises(ValueError):
        SearchConfig(topology="octagon")
    with pytest.raises(ValueError):
        SearchConfig(log_level="LOUD")
    with pytest.raises(ValueError):
        SearchConfig.from_dict({"topology": "hex", "colour": "red"})


def test_load_and_override(tmp_path):
    p = tmp_path / "search.json"
    p.write_text(json.dumps({"topology": "square4", "wall_cost": 1}))
    cfg = load_config(str(p))
    assert cfg.topology == "square4" and cfg.wall_cost == 1
    merged = cfg.merged(topology="hex", wall_cost=None)
    assert merged.topology == "hex" and merged.wall_cost == 1
    assert SearchConfig.from_dict(merged.to_dict()) == merged

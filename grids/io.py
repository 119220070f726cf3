#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load/save cost maps.

Formats, chosen by file extension:
- .npy  : raw int array via numpy.save/load (wall value defaults to WALL_COST)
- .json : {"wall_cost": int, "cells": [[...], ...]}   (rows = y)
- other : whitespace separated text, one row per line (numpy.loadtxt)
"""

from __future__ import annotations
import json
import os
from typing import Optional

import numpy as np

from .cost_map import CostMap, WALL_COST


def load_cost_map(path: str, wall_cost: Optional[int] = None) -> CostMap:
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")
        if "cells" not in data:
            raise ValueError(f"{path}: missing 'cells'")
        wc = data.get("wall_cost", WALL_COST) if wall_cost is None else wall_cost
        return CostMap.from_array(data["cells"], wall_cost=int(wc))
    if ext == ".npy":
        arr = np.load(path, allow_pickle=False)
    else:
        arr = np.loadtxt(path, dtype=np.int64, ndmin=2)
    return CostMap.from_array(arr, wall_cost=WALL_COST if wall_cost is None else wall_cost)


def save_cost_map(cost_map: CostMap, path: str) -> None:
    ext = os.path.splitext(path)[1].lower()
    arr = cost_map.to_array()
    if ext == ".json":
        with open(path, "w") as f:
            json.dump({"wall_cost": cost_map.wall_cost, "cells": arr.tolist()}, f, indent=2)
    elif ext == ".npy":
        np.save(path, np.asarray(arr))
    else:
        np.savetxt(path, arr, fmt="%d")

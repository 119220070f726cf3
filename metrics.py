"""Path accounting and validation for planner output."""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence

import numpy as np

from grids.cost_map import CostMap, Coordinate
from grids.topology import are_neighbors


def path_cost(start: Coordinate, path: Sequence[Coordinate], cost_map: CostMap) -> int:
    """Sum of the cost of every cell left along the way: start .. second-to-last."""
    if not path:
        return 0
    left = [tuple(start)] + [tuple(c) for c in path[:-1]]
    return int(np.sum([cost_map.get(c) for c in left]))


def is_valid_path(start: Coordinate, path: Sequence[Coordinate], cost_map: CostMap,
                  topology) -> bool:
    """Adjacent steps, in bounds, no walls, no repeated cell (start included)."""
    cells = [tuple(start)] + [tuple(c) for c in path]
    if len(set(cells)) != len(cells):
        return False
    for c in cells:
        if not cost_map.in_bounds(c) or cost_map.is_wall(c):
            return False
    return all(are_neighbors(a, b, topology) for a, b in zip(cells[:-1], cells[1:]))


def compute_path_metrics(start: Coordinate, path: Optional[List[Coordinate]],
                         cost_map: CostMap, topology) -> Dict:
    path = [tuple(c) for c in (path or [])]
    # an empty path is a failed query, not a zero-cost route
    valid = bool(path) and is_valid_path(start, path, cost_map, topology)
    return {
        "hops": len(path),
        "cost": path_cost(start, path, cost_map) if valid else None,
        "valid": valid,
        "unique": len(set(path)) == len(path),
        "path_success": len(path) > 0,
    }


def compute_runtime_statistics(runtime_list):
    """Basic runtime metrics"""
    return {
        "mean_runtime": np.mean(runtime_list),
        "std_runtime": np.std(runtime_list),
        "max_runtime": np.max(runtime_list),
        "min_runtime": np.min(runtime_list),
    }

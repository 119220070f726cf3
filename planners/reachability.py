#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reachable area within a hop budget (layered breadth-first expansion).
- Every non-wall cell counts as one hop; map costs are only used for the
  wall test.
- Result keeps first-discovery order: start, then layer 1, layer 2, ...
- Neighbors outside the map are ignored.
"""

from __future__ import annotations
from typing import Dict, List, Union
import logging

import numpy as np

from grids.cost_map import CostMap, Coordinate
from grids.topology import Topology, neighbors_of, parse_topology

logger = logging.getLogger(__name__)


class ReachabilityPlanner:
    def __init__(self, topology: Union[Topology, str, int] = Topology.HEXAGONAL):
        self.topology = parse_topology(topology)

    def plan(self, cost_map: CostMap, start: Coordinate, budget: int) -> Dict:
        start = (int(start[0]), int(start[1]))
        if int(budget) != budget or budget < 0:
            raise ValueError(f"Budget must be a non-negative integer, got {budget!r}")
        budget = int(budget)

        blocked = cost_map.is_wall(start)  # raises on out-of-bounds start
        if budget == 0 or blocked:
            return {'success': False, 'cells': [], 'hops': {}}

        W, H = cost_map.width, cost_map.height
        cells = cost_map.to_array()
        wall = cost_map.wall_cost
        seen = np.zeros((H, W), dtype=bool)

        reachables: List[Coordinate] = [start]
        hops: Dict[Coordinate, int] = {start: 0}
        seen[start[1], start[0]] = True
        checks: List[Coordinate] = [start]

        for layer in range(1, budget + 1):
            future: List[Coordinate] = []
            for check in checks:
                for nx, ny in neighbors_of(check, self.topology):
                    if nx < 0 or nx >= W or ny < 0 or ny >= H:
                        continue
                    if seen[ny, nx] or cells[ny, nx] == wall:
                        continue
                    seen[ny, nx] = True
                    reachables.append((nx, ny))
                    hops[(nx, ny)] = layer
                    future.append((nx, ny))
            if not future:
                break
            checks = future

        logger.debug("reachability from %s, budget %d (%s): %d cells",
                     start, budget, self.topology.value, len(reachables))
        return {'success': True, 'cells': reachables, 'hops': hops}


def reachable(start: Coordinate, budget: int, cost_map: CostMap,
              topology: Union[Topology, str, int] = Topology.HEXAGONAL) -> List[Coordinate]:
    """Cells reachable from start within `budget` hops (start included); [] if budget is 0."""
    return ReachabilityPlanner(topology).plan(cost_map, start, budget)['cells']

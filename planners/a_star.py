#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner over a CostMap (square 4/8-connected or hexagonal).
- Walls are cells whose cost equals the map's wall value.
- Edge cost: moving out of a cell costs that cell's map value. The cost is
  charged to the cell being left, so the goal's own cost never counts and
  the start's cost is paid on the first move.
- Heuristic: Euclidean distance truncated to int. Admissible on square
  grids when every move costs at least its Euclidean length; only an
  approximation on hex grids.

Returns {'success': bool, 'path': list[(x,y)], 'cost': int|None,
         'expanded': int, 'reason': str|None}.
The path excludes start and includes goal; it is empty on failure.
"""

from __future__ import annotations
from typing import Dict, List, Tuple, Union
import heapq
import itertools
import logging
import math

from grids.cost_map import CostMap, Coordinate
from grids.topology import Topology, neighbors_of, parse_topology

from .node_store import SearchNodeStore

logger = logging.getLogger(__name__)


def heuristic(a: Coordinate, b: Coordinate) -> int:
    """Distance as the crow flies, truncated toward zero."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return int(math.sqrt(dx * dx + dy * dy))


class AStarPlanner:
    def __init__(self, topology: Union[Topology, str, int] = Topology.HEXAGONAL):
        self.topology = parse_topology(topology)

    def _result(self, success: bool, path: List[Coordinate], cost, expanded: int, reason) -> Dict:
        return {'success': success, 'path': path, 'cost': cost, 'expanded': expanded, 'reason': reason}

    def plan(self, cost_map: CostMap, start: Coordinate, goal: Coordinate) -> Dict:
        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))

        store = SearchNodeStore(cost_map)
        store.check(start)
        store.check(goal)

        if start == goal:
            return self._result(False, [], None, 0, "start_is_goal")
        if store.is_wall(start) or store.is_wall(goal):
            return self._result(False, [], None, 0, "blocked_endpoint")

        sx, sy = start
        store.path_cost[sy, sx] = 0
        store.priority[sy, sx] = heuristic(start, goal)
        store.in_open[sy, sx] = True

        seq = itertools.count()  # FIFO among equal priorities
        pq: List[Tuple[int, int, int, int]] = []
        heapq.heappush(pq, (int(store.priority[sy, sx]), next(seq), sx, sy))
        expanded = 0

        while pq:
            pri, _, x, y = heapq.heappop(pq)

            # Skip entries superseded by a cheaper push or already closed
            if not store.in_open[y, x] or pri != store.priority[y, x]:
                continue

            if (x, y) == goal:
                path = store.reconstruct(start, goal)
                cost = int(store.path_cost[y, x])
                logger.debug("a_star %s -> %s (%s): %d cells, cost %d, expanded %d",
                             start, goal, self.topology.value, len(path), cost, expanded)
                return self._result(True, path, cost, expanded, None)

            store.in_open[y, x] = False
            store.visited[y, x] = True
            expanded += 1

            candidate = int(store.path_cost[y, x]) + int(store.base_cost[y, x])

            for nx, ny in neighbors_of((x, y), self.topology):
                # Boundary check
                if nx < 0 or nx >= store.width or ny < 0 or ny >= store.height:
                    continue
                # Skip walls and closed nodes
                if store.is_wall((nx, ny)) or store.visited[ny, nx]:
                    continue

                if not store.in_open[ny, nx] or candidate < store.path_cost[ny, nx]:
                    store.set_predecessor((nx, ny), (x, y))
                    store.path_cost[ny, nx] = candidate
                    store.priority[ny, nx] = candidate + heuristic((nx, ny), goal)
                    store.in_open[ny, nx] = True
                    heapq.heappush(pq, (int(store.priority[ny, nx]), next(seq), nx, ny))

        logger.debug("a_star %s -> %s (%s): no path, expanded %d",
                     start, goal, self.topology.value, expanded)
        return self._result(False, [], None, expanded, "no_path_found")


def find_path(start: Coordinate, end: Coordinate, cost_map: CostMap,
              topology: Union[Topology, str, int] = Topology.HEXAGONAL) -> List[Coordinate]:
    """Lowest-cost path from start (excluded) to end (included); [] if none."""
    return AStarPlanner(topology).plan(cost_map, start, end)['path']

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Per-query search scratch space.

One node per grid cell, stored as parallel numpy arrays indexed [y, x]
(an arena). Predecessors are kept as coordinates in pred_x/pred_y
(-1 = none), never as object references, so nothing outlives the store.

base_cost is copied from the CostMap once and never written again; the
wall test reads it, not path_cost.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from grids.cost_map import CostMap, Coordinate, CoordinateOutOfBounds


@dataclass(frozen=True)
class SearchNode:
    """Read-only snapshot of one node's bookkeeping."""
    cell: Coordinate
    base_cost: int
    path_cost: int
    priority: int
    predecessor: Optional[Coordinate]
    visited: bool


class SearchNodeStore:
    def __init__(self, cost_map: CostMap):
        H, W = cost_map.height, cost_map.width
        self.width = W
        self.height = H
        self.wall_cost = cost_map.wall_cost

        base = np.array(cost_map.to_array(), dtype=np.int64)
        base.flags.writeable = False
        self.base_cost = base
        self.path_cost = base.copy()
        self.priority = np.zeros((H, W), dtype=np.int64)
        self.pred_x = np.full((H, W), -1, dtype=np.int32)
        self.pred_y = np.full((H, W), -1, dtype=np.int32)
        self.visited = np.zeros((H, W), dtype=bool)
        self.in_open = np.zeros((H, W), dtype=bool)

    def __len__(self) -> int:
        return self.width * self.height

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def check(self, coord: Coordinate) -> None:
        if not self.in_bounds(coord):
            raise CoordinateOutOfBounds(coord, (self.width, self.height))

    def is_wall(self, coord: Coordinate) -> bool:
        x, y = coord
        return bool(self.base_cost[y, x] == self.wall_cost)

    def set_predecessor(self, coord: Coordinate, pred: Optional[Coordinate]) -> None:
        x, y = coord
        if pred is None:
            self.pred_x[y, x] = -1
            self.pred_y[y, x] = -1
        else:
            self.pred_x[y, x] = pred[0]
            self.pred_y[y, x] = pred[1]

    def predecessor(self, coord: Coordinate) -> Optional[Coordinate]:
        x, y = coord
        px = int(self.pred_x[y, x])
        if px == -1:
            return None
        return (px, int(self.pred_y[y, x]))

    def node(self, coord: Coordinate) -> SearchNode:
        self.check(coord)
        x, y = coord
        return SearchNode(
            cell=(x, y),
            base_cost=int(self.base_cost[y, x]),
            path_cost=int(self.path_cost[y, x]),
            priority=int(self.priority[y, x]),
            predecessor=self.predecessor(coord),
            visited=bool(self.visited[y, x]),
        )

    def reconstruct(self, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        """Cells from start (excluded) to end (included), following predecessors."""
        path: List[Coordinate] = []
        cur: Optional[Coordinate] = end
        while cur is not None and cur != start:
            path.append(cur)
            cur = self.predecessor(cur)
            if len(path) > len(self):  # predecessor cycle
                raise RuntimeError(f"Predecessor chain from {end} does not terminate")
        if cur is None:
            return []
        path.reverse()
        return path

# -*- coding: utf-8 -*-
"""
Grid data for the planners.
Exposes:
- CostMap, Coordinate, WALL_COST, CoordinateOutOfBounds  (cost_map.py)
- Topology, neighbors_of, are_neighbors, parse_topology  (topology.py)
- generate_cost_map, GeneratedMap                         (generator.py)
- load_cost_map, save_cost_map                            (io.py)
"""

from __future__ import annotations

from .cost_map import CostMap, Coordinate, WALL_COST, CoordinateOutOfBounds
from .topology import Topology, neighbors_of, are_neighbors, parse_topology
from .generator import generate_cost_map, GeneratedMap
from .io import load_cost_map, save_cost_map

__all__ = [
    "CostMap",
    "Coordinate",
    "WALL_COST",
    "CoordinateOutOfBounds",
    "Topology",
    "neighbors_of",
    "are_neighbors",
    "parse_topology",
    "generate_cost_map",
    "GeneratedMap",
    "load_cost_map",
    "save_cost_map",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Neighbor rules for square and hexagonal grids.

neighbors_of() returns *raw* candidates: no bounds or wall filtering,
callers do both against their CostMap.

Hexagonal grids use "odd-r" offset coordinates: rows are pointy-top hex
rows and every odd row is shifted right by half a cell.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Union

import numpy as np

from .cost_map import Coordinate


class Topology(Enum):
    SQUARE_4 = "square4"
    SQUARE_8 = "square8"
    HEXAGONAL = "hex"


# (dx, dy) deltas
DELTAS_4 = np.array([(1, 0), (-1, 0), (0, -1), (0, 1)], dtype=np.int8)

DELTAS_8 = np.array([
    (-1, -1), (0, -1), (+1, -1),
    (-1,  0),          (+1,  0),
    (-1, +1), (0, +1), (+1, +1),
], dtype=np.int8)

# odd-r offsets, selected by row parity
DELTAS_HEX_EVEN = np.array([(1, 0), (-1, 0), (0, -1), (-1, -1), (0, 1), (-1, 1)], dtype=np.int8)
DELTAS_HEX_ODD = np.array([(1, 0), (-1, 0), (1, -1), (0, -1), (1, 1), (0, 1)], dtype=np.int8)

_ALIASES = {
    "4": Topology.SQUARE_4,
    "square4": Topology.SQUARE_4,
    "square_4": Topology.SQUARE_4,
    "square": Topology.SQUARE_4,
    "8": Topology.SQUARE_8,
    "square8": Topology.SQUARE_8,
    "square_8": Topology.SQUARE_8,
    "6": Topology.HEXAGONAL,
    "hex": Topology.HEXAGONAL,
    "hexagonal": Topology.HEXAGONAL,
}


def parse_topology(value: Union[Topology, str, int]) -> Topology:
    """Accepts a Topology, its name/value, or a neighbor count (4, 6, 8)."""
    if isinstance(value, Topology):
        return value
    key = str(value).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Topology[key.upper()]
    except KeyError:
        raise ValueError(f"Unknown topology '{value}'. Available: {sorted(_ALIASES)}") from None


def deltas_for(coord: Coordinate, topology: Topology) -> np.ndarray:
    if topology is Topology.SQUARE_4:
        return DELTAS_4
    if topology is Topology.SQUARE_8:
        return DELTAS_8
    return DELTAS_HEX_ODD if coord[1] % 2 else DELTAS_HEX_EVEN


def neighbors_of(coord: Coordinate, topology: Union[Topology, str, int] = Topology.HEXAGONAL) -> List[Coordinate]:
    topology = parse_topology(topology)
    x, y = coord
    return [(x + int(dx), y + int(dy)) for dx, dy in deltas_for(coord, topology)]


def are_neighbors(a: Coordinate, b: Coordinate, topology: Union[Topology, str, int] = Topology.HEXAGONAL) -> bool:
    return tuple(b) in neighbors_of(a, topology)

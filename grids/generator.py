#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Seeded random cost maps for tests, benchmarks and the CLI.

Strategy:
  1) Scatter wall seeds and grow them into blobs with binary dilation
     until the wall fraction reaches ``wall_density``.
  2) Fill the remaining cells with uniform integer costs in ``cost_range``.
  3) Clear every coordinate listed in ``keep_free`` (typically start/goal).

Dependencies:
    numpy
    scipy.ndimage   (binary dilation for blob growth)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

try:
    from scipy.ndimage import binary_dilation
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .cost_map import CostMap, Coordinate, WALL_COST


@dataclass
class GeneratedMap:
    """A generated cost map plus a record of the settings used (for provenance)."""
    cost_map: CostMap
    settings: Dict

    @property
    def wall_fraction(self) -> float:
        return len(self.cost_map.walls()) / float(self.cost_map.width * self.cost_map.height)


def _grow_walls(shape: Tuple[int, int], target_cells: int,
                rng: np.random.Generator, max_rounds: int = 64) -> np.ndarray:
    walls = np.zeros(shape, dtype=bool)
    if target_cells <= 0:
        return walls
    structure = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool)
    for _ in range(max_rounds):
        missing = target_cells - int(walls.sum())
        if missing <= 0:
            break
        # a handful of seeds per round, each dilated once into a small blob
        n_seeds = max(1, missing // 5)
        seeds = np.zeros(shape, dtype=bool)
        idx = rng.integers(0, shape[0] * shape[1], size=n_seeds)
        seeds.flat[idx] = True
        blobs = binary_dilation(seeds, structure=structure, iterations=1)
        free = np.argwhere(blobs & ~walls)
        rng.shuffle(free)
        for r, c in free[:missing]:
            walls[r, c] = True
    return walls


def generate_cost_map(
    width: int = 16,
    height: int = 16,
    *,
    wall_density: float = 0.2,
    cost_range: Tuple[int, int] = (1, 5),
    keep_free: Iterable[Coordinate] = (),
    rng: Optional[np.random.Generator] = None,
    wall_cost: int = WALL_COST,
) -> GeneratedMap:
    """
    Create a width x height CostMap with clustered walls.

    cost_range is inclusive on both ends and must not contain wall_cost.
    """
    lo, hi = int(cost_range[0]), int(cost_range[1])
    if lo < 0 or hi < lo:
        raise ValueError(f"Bad cost range {cost_range}")
    if lo <= wall_cost <= hi:
        raise ValueError(f"Cost range {cost_range} contains the wall value {wall_cost}")

    rng = rng or np.random.default_rng()
    wall_density = float(np.clip(wall_density, 0.0, 0.9))
    keep_free = [tuple(c) for c in keep_free]

    settings = dict(
        width=width, height=height, wall_density=wall_density,
        cost_range=(lo, hi), keep_free=keep_free, wall_cost=wall_cost,
        seed=int(rng.integers(0, 2**31 - 1)),
    )

    cells = rng.integers(lo, hi + 1, size=(height, width)).astype(np.int32)
    walls = _grow_walls((height, width), int(round(wall_density * width * height)), rng)
    for x, y in keep_free:
        if 0 <= x < width and 0 <= y < height:
            walls[y, x] = False
    cells[walls] = wall_cost

    return GeneratedMap(cost_map=CostMap.from_array(cells, wall_cost=wall_cost), settings=settings)


if __name__ == "__main__":
    gm = generate_cost_map(24, 12, wall_density=0.25, keep_free=[(0, 0), (23, 11)],
                           rng=np.random.default_rng(123))
    print("Map:", gm.cost_map, "walls:", f"{gm.wall_fraction:.2f}")
    print(gm.cost_map.to_array())

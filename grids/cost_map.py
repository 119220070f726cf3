#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cost_map.py
-----------
Rectangular grid of integer traversal costs used by the planners.

- Backed by an int32 numpy array of shape (height, width), indexed [y, x].
- Coordinates are (x, y) tuples.
- One reserved value (``wall_cost``, default WALL_COST = -1) marks a cell
  impassable. Every other value is a non-negative cost charged for
  *leaving* the cell.

Out-of-bounds access is a caller error and raises CoordinateOutOfBounds.
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

import numpy as np

Coordinate = Tuple[int, int]  # (x, y)

WALL_COST = -1


class CoordinateOutOfBounds(IndexError):
    """Raised when a coordinate outside [0, width) x [0, height) is used."""

    def __init__(self, coord, size: Tuple[int, int]):
        self.coord = coord
        self.size = size
        super().__init__(f"Coordinate {coord} outside map of size {size[0]}x{size[1]}")


class CostMap:
    def __init__(self, width: int, height: int, fill: int = 0, wall_cost: int = WALL_COST):
        self.wall_cost = int(wall_cost)
        self._cells = np.empty((0, 0), dtype=np.int32)
        self.resize(width, height, fill)

    # ------------------------------ construction ------------------------------ #

    @classmethod
    def create(cls, width: int, height: int, fill: int, wall_cost: int = WALL_COST) -> "CostMap":
        """Map of width x height with every cell set to ``fill``."""
        return cls(width, height, fill, wall_cost=wall_cost)

    @classmethod
    def from_array(cls, cells, wall_cost: int = WALL_COST) -> "CostMap":
        """
        Build a map from a 2D array-like laid out as rows, i.e. cells[y][x].
        The data is copied.
        """
        arr = np.asarray(cells)
        if arr.ndim != 2:
            raise ValueError(f"Cost array must be 2D, got shape {arr.shape}")
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            if not np.all(np.equal(np.mod(arr, 1), 0)):
                raise ValueError("Cost array must hold integer values")
        info = np.iinfo(np.int32)
        if arr.size and (arr.min() < info.min or arr.max() > info.max):
            raise ValueError(f"Cost array values must fit in int32 [{info.min}, {info.max}]")
        arr = arr.astype(np.int32)
        bad = (arr < 0) & (arr != wall_cost)
        if bad.any():
            y, x = np.argwhere(bad)[0]
            raise ValueError(f"Negative cost {arr[y, x]} at {(int(x), int(y))} is not the wall value {wall_cost}")
        cm = cls(arr.shape[1], arr.shape[0], 0, wall_cost=wall_cost)
        cm._cells[:, :] = arr
        return cm

    def resize(self, width: int, height: int, fill: int = 0) -> None:
        """Discard all content and reinitialise to width x height cells of ``fill``."""
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self._check_value(fill)
        self._cells = np.full((int(height), int(width)), int(fill), dtype=np.int32)

    def fill(self, value: int) -> None:
        self._check_value(value)
        self._cells.fill(int(value))

    def copy(self) -> "CostMap":
        cm = CostMap(self.width, self.height, 0, wall_cost=self.wall_cost)
        cm._cells[:, :] = self._cells
        return cm

    # -------------------------------- queries --------------------------------- #

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, coord: Coordinate) -> int:
        self._check_bounds(coord)
        x, y = coord
        return int(self._cells[y, x])

    def set(self, coord: Coordinate, value: int) -> None:
        self._check_bounds(coord)
        self._check_value(value)
        x, y = coord
        self._cells[y, x] = int(value)

    def is_wall(self, coord: Coordinate) -> bool:
        return self.get(coord) == self.wall_cost

    def coords(self) -> Iterator[Coordinate]:
        """All coordinates, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def walls(self) -> List[Coordinate]:
        ys, xs = np.nonzero(self._cells == self.wall_cost)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def to_array(self) -> np.ndarray:
        """Read-only view of the underlying (height, width) array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    # -------------------------------- dunder ---------------------------------- #

    def __getitem__(self, coord: Coordinate) -> int:
        return self.get(coord)

    def __setitem__(self, coord: Coordinate, value: int) -> None:
        self.set(coord, value)

    def __contains__(self, coord) -> bool:
        return self.in_bounds(coord)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CostMap):
            return NotImplemented
        return self.wall_cost == other.wall_cost and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"CostMap({self.width}x{self.height}, wall_cost={self.wall_cost})"

    # -------------------------------- helpers --------------------------------- #

    def _check_bounds(self, coord: Coordinate) -> None:
        x, y = coord
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CoordinateOutOfBounds(coord, self.size)

    def _check_value(self, value: int) -> None:
        if int(value) != value:
            raise ValueError(f"Cost must be an integer, got {value!r}")
        info = np.iinfo(np.int32)
        if not (info.min <= value <= info.max):
            raise ValueError(f"Cost {value} does not fit in int32 [{info.min}, {info.max}]")
        if value < 0 and value != self.wall_cost:
            raise ValueError(f"Negative cost {value} is not the wall value {self.wall_cost}")

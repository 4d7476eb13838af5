"""
organism_sim module: world/grid.py

Dense occupancy grid. The single source of truth for which cell holds an
organism, a pellet, or nothing.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Iterator

import numpy as np

from world.coord import Coord


class CellType(IntEnum):
    EMPTY = 0
    ORGANISM = 1
    CONSUMABLE = 2


class Grid:
    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        self.data = np.zeros((size, size), dtype=np.int8)

    def in_bounds(self, c: Coord) -> bool:
        return 0 <= c.x < self.size and 0 <= c.y < self.size

    def _check(self, c: Coord) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(c):
            raise IndexError(f"{c} outside {self.size}x{self.size} grid")

    def get(self, c: Coord) -> CellType:
        self._check(c)
        return CellType(int(self.data[c.x, c.y]))

    def set(self, c: Coord, kind: CellType) -> None:
        self._check(c)
        self.data[c.x, c.y] = int(kind)

    def is_empty(self, c: Coord) -> bool:
        return self.in_bounds(c) and self.get(c) == CellType.EMPTY

    def get_cell_coords(self, kind: CellType) -> Iterator[Coord]:
        """
        Yield every cell tagged ``kind`` in row-major [x, y] order.
        """
        for x, y in np.argwhere(self.data == int(kind)):
            yield Coord(int(x), int(y))

    def count(self, kind: CellType) -> int:
        return int(np.count_nonzero(self.data == int(kind)))

    def clone(self) -> "Grid":
        g = Grid(self.size)
        g.data = self.data.copy()
        return g

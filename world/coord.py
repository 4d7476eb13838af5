"""
organism_sim module: world/coord.py

Integer grid coordinate. Used both as an absolute cell index and as a
signed step delta; bounds are checked by whoever indexes the grid.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    x: int
    y: int

    def __add__(self, other: "Coord") -> "Coord":
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coord") -> "Coord":
        return Coord(self.x - other.x, self.y - other.y)

    def chebyshev(self, other: "Coord") -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

"""
organism_sim module: world/dir.py

The 9 discrete step directions (8 compass points + no move).
North is +y.
"""

from __future__ import annotations
from enum import Enum
import random
from typing import List

from world.coord import Coord


class Dir(Enum):
    NULL = 0
    N = 1
    S = 2
    E = 3
    W = 4
    NE = 5
    NW = 6
    SE = 7
    SW = 8

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]

    @staticmethod
    def neighbours() -> List["Dir"]:
        """The 8 moving directions in fixed sensing/search order."""
        return list(_NEIGHBOURS)


_DELTAS = {
    Dir.NULL: Coord(0, 0),
    Dir.N: Coord(0, 1),
    Dir.S: Coord(0, -1),
    Dir.E: Coord(1, 0),
    Dir.W: Coord(-1, 0),
    Dir.NE: Coord(1, 1),
    Dir.NW: Coord(-1, 1),
    Dir.SE: Coord(1, -1),
    Dir.SW: Coord(-1, -1),
}

_NEIGHBOURS = (Dir.N, Dir.S, Dir.E, Dir.W, Dir.NE, Dir.NW, Dir.SE, Dir.SW)


def sample_direction(rng: random.Random) -> Dir:
    """Uniform draw over all 9 directions, NULL included."""
    return Dir(rng.randrange(len(Dir)))

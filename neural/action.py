"""
organism_sim module: neural/action.py

Behavioural outputs. The enum value is the action node index.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Optional

from world.dir import Dir


class Action(IntEnum):
    MOVE_N = 0
    MOVE_S = 1
    MOVE_E = 2
    MOVE_W = 3
    MOVE_NE = 4
    MOVE_NW = 5
    MOVE_SE = 6
    MOVE_SW = 7
    STAY = 8
    EAT = 9
    REPLICATE = 10

    @property
    def direction(self) -> Optional[Dir]:
        """Step direction for move actions, None otherwise."""
        return _MOVE_DIRS.get(self)


_MOVE_DIRS = {
    Action.MOVE_N: Dir.N,
    Action.MOVE_S: Dir.S,
    Action.MOVE_E: Dir.E,
    Action.MOVE_W: Dir.W,
    Action.MOVE_NE: Dir.NE,
    Action.MOVE_NW: Dir.NW,
    Action.MOVE_SE: Dir.SE,
    Action.MOVE_SW: Dir.SW,
}

N_ACTIONS = len(Action)

"""
organism_sim module: world/physics.py

Grid movement:
- one cell per move, in one of the 8 compass directions
- moves off the grid or onto another organism are rejected
- moving onto a pellet eats it
- the old cell is vacated before the new one is occupied
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from world.coord import Coord
from world.dir import Dir
from world.grid import CellType

if TYPE_CHECKING:
    from world.world import World


def try_move(world: "World", org_id: int, d: Dir) -> bool:
    """
    Returns True if the organism changed cell.
    """
    src = world.positions[org_id]
    dst = src + d.delta
    if dst == src or not world.grid.in_bounds(dst):
        return False
    if world.grid.get(dst) == CellType.ORGANISM:
        return False

    gained = world.food.eat_at(dst)
    if gained:
        world.organisms[org_id].add_energy(gained)

    world.grid.set(src, CellType.EMPTY)
    world.grid.set(dst, CellType.ORGANISM)
    world.positions[org_id] = dst
    return True


def adjacent_pellet(world: "World", c: Coord) -> Optional[Coord]:
    for d in Dir.neighbours():
        n = c + d.delta
        if world.grid.in_bounds(n) and world.grid.get(n) == CellType.CONSUMABLE:
            return n
    return None


def try_eat(world: "World", org_id: int) -> float:
    """
    Eat the first neighbouring pellet (in Dir.neighbours() order) without
    moving. Returns the energy gained.
    """
    target = adjacent_pellet(world, world.positions[org_id])
    if target is None:
        return 0.0
    gained = world.food.eat_at(target)
    world.organisms[org_id].add_energy(gained)
    return gained

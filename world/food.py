"""
organism_sim module: world/food.py

Food system:
- Each pellet sits on exactly one CONSUMABLE grid cell
- Every pellet carries the same fixed energy
- Pellets are regenerated from whatever energy the population has burnt,
  so organism + pellet energy stays at the world's target level
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import Dict, List

import config
from world.coord import Coord
from world.grid import CellType, Grid

log = logging.getLogger(__name__)

# tolerance for float drift when turning an energy deficit into a pellet count
ENERGY_EPS = 1e-9


@dataclass
class Pellet:
    coord: Coord
    energy: float = config.PELLET_ENERGY


def pellets_for_energy(energy: float, pellet_energy: float = config.PELLET_ENERGY) -> int:
    """Whole pellets that fit in ``energy`` (never negative)."""
    if energy <= 0.0:
        return 0
    return int(energy / pellet_energy + ENERGY_EPS)


class FoodField:
    def __init__(self, grid: Grid, pellet_energy: float = config.PELLET_ENERGY):
        self.grid = grid
        self.pellet_energy = pellet_energy
        self.pellets: Dict[Coord, Pellet] = {}

    def __len__(self) -> int:
        return len(self.pellets)

    def total_energy(self) -> float:
        return sum(p.energy for p in self.pellets.values())

    def add(self, c: Coord) -> Pellet:
        if self.grid.get(c) != CellType.EMPTY:
            raise ValueError(f"cannot place pellet on non-empty cell {c}")
        p = Pellet(coord=c, energy=self.pellet_energy)
        self.pellets[c] = p
        self.grid.set(c, CellType.CONSUMABLE)
        return p

    def eat_at(self, c: Coord) -> float:
        """
        Remove the pellet at ``c`` and return its energy (0.0 if none).
        Leaves the cell EMPTY.
        """
        p = self.pellets.pop(c, None)
        if p is None:
            return 0.0
        self.grid.set(c, CellType.EMPTY)
        return p.energy

    def spawn(self, n: int, rng: random.Random) -> List[Pellet]:
        """
        Place up to ``n`` pellets on randomly chosen empty cells.
        Spawns fewer when the grid runs out of room.
        """
        if n <= 0:
            return []
        empties = list(self.grid.get_cell_coords(CellType.EMPTY))
        if len(empties) < n:
            log.debug("only %d empty cells for %d pellets", len(empties), n)
            n = len(empties)
        return [self.add(c) for c in rng.sample(empties, n)]

    def replenish(self, deficit: float, rng: random.Random) -> List[Pellet]:
        """
        Convert an energy shortfall into pellets. A remainder smaller than
        one pellet is left for later ticks.
        """
        return self.spawn(pellets_for_energy(deficit, self.pellet_energy), rng)

    def clear(self) -> None:
        for c in list(self.pellets):
            self.eat_at(c)

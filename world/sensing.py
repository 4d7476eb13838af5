"""
organism_sim module: world/sensing.py

Builds the sensor vector an organism feeds to its controller.

Layout (N_SENSORS values):
  0..7  neighbour cells in Dir.neighbours() order
  8     tanh(energy)
  9     age / lifespan
  10    constant bias
"""

from __future__ import annotations
import math
from typing import List

from organism.organism import Organism
from world.coord import Coord
from world.dir import Dir
from world.grid import CellType, Grid

CELL_READINGS = {
    CellType.EMPTY: 0.0,
    CellType.ORGANISM: -1.0,
    CellType.CONSUMABLE: 1.0,
}
OUT_OF_BOUNDS = -0.5
BIAS = 1.0

SENSOR_ENERGY = 8
SENSOR_AGE = 9
SENSOR_BIAS = 10
N_SENSORS = 11


def read_cell(grid: Grid, c: Coord) -> float:
    if not grid.in_bounds(c):
        return OUT_OF_BOUNDS
    return CELL_READINGS[grid.get(c)]


def sense(grid: Grid, pos: Coord, org: Organism) -> List[float]:
    values = [read_cell(grid, pos + d.delta) for d in Dir.neighbours()]
    values.append(math.tanh(org.energy))
    values.append(org.age / max(1, org.lifespan))
    values.append(BIAS)
    return values

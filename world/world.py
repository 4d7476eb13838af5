"""
organism_sim module: world/world.py

World state container: the grid, the organism table with its parallel
position index, and the pellets. This is the one simulation context the
tick function receives; nothing else holds simulation state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import Dict, Iterator, Optional, Tuple

import config
from neural.action import N_ACTIONS
from neural.ns_shape import NsShape
from organism.organism import Organism, draw_lifespan
from world.coord import Coord
from world.food import FoodField, pellets_for_energy
from world.grid import CellType, Grid
from world.sensing import N_SENSORS

log = logging.getLogger(__name__)


def default_shape() -> NsShape:
    return NsShape(N_SENSORS, config.N_HIDDEN, N_ACTIONS)


@dataclass
class Parameters:
    grid_size: int = config.GRID_SIZE
    n_initial_entities: int = config.N_INITIAL_ENTITIES
    n_max_entities: int = config.N_MAX_ENTITIES
    genome_len: int = config.GENOME_LEN
    ns_shape: NsShape = field(default_factory=default_shape)
    average_lifespan: int = config.AVERAGE_LIFESPAN
    mut_p: float = config.MUT_P
    insert_p: float = config.INSERT_P

    # presentation only
    cell_width: float = 1.0
    cell_height: float = 1.0

    def __post_init__(self) -> None:
        # sense() always produces N_SENSORS readings
        if self.ns_shape.sensor_count != N_SENSORS:
            raise ValueError(
                f"ns_shape needs {N_SENSORS} sensors, got {self.ns_shape.sensor_count}"
            )

    @staticmethod
    def from_config(screen_w: int = config.SCREEN_W, screen_h: int = config.SCREEN_H) -> "Parameters":
        return Parameters(
            cell_width=screen_w / config.GRID_SIZE,
            cell_height=screen_h / config.GRID_SIZE,
        )


class World:
    def __init__(self, params: Parameters, rng: Optional[random.Random] = None):
        self.params = params
        self.rng = rng if rng is not None else random.Random()
        self.tick = 0
        self.epoch = 0
        self._clear()

    def _clear(self) -> None:
        self.grid = Grid(self.params.grid_size)
        self.food = FoodField(self.grid)
        self.organisms: Dict[int, Organism] = {}
        self.positions: Dict[int, Coord] = {}
        self.next_id = 0
        self.births = 0
        self.deaths = 0
        self.target_energy = 0.0

    @staticmethod
    def empty(params: Parameters, rng: Optional[random.Random] = None) -> "World":
        """A world with no organisms and no pellets."""
        return World(params, rng)

    @staticmethod
    def create(params: Parameters, rng: Optional[random.Random] = None) -> "World":
        w = World(params, rng)
        w.populate()
        return w

    def populate(self) -> None:
        """
        Seed the initial population on random cells, then lay down as much
        pellet energy as the population holds. That total becomes the level
        the world conserves.
        """
        p = self.params
        cells = list(self.grid.get_cell_coords(CellType.EMPTY))
        n = min(p.n_initial_entities, len(cells))
        for c in self.rng.sample(cells, n):
            org = Organism.new(
                config.INITIAL_ENERGY,
                p.genome_len,
                self.rng,
                lifespan=draw_lifespan(self.rng, p.average_lifespan),
            )
            self.add_organism(org, c)

        self.food.spawn(pellets_for_energy(self.organism_energy()), self.rng)
        self.reset_energy_target()
        log.info(
            "world seeded: %d organisms, %d pellets, energy %.2f",
            len(self.organisms), len(self.food), self.target_energy,
        )

    def reset(self) -> None:
        """Tear everything down and seed a fresh world."""
        self._clear()
        self.tick = 0
        self.epoch = 0
        self.populate()

    def reset_energy_target(self) -> None:
        self.target_energy = self.total_energy()

    # ---- organism table ----

    def add_organism(self, org: Organism, c: Coord) -> int:
        if self.grid.get(c) != CellType.EMPTY:
            raise ValueError(f"cell {c} is not empty")
        org_id = self.next_id
        self.next_id += 1
        self.organisms[org_id] = org
        self.positions[org_id] = c
        self.grid.set(c, CellType.ORGANISM)
        return org_id

    def remove_organism(self, org_id: int) -> Organism:
        org = self.organisms.pop(org_id)
        c = self.positions.pop(org_id)
        self.grid.set(c, CellType.EMPTY)
        return org

    def entities(self) -> Iterator[Tuple[int, Organism, Coord]]:
        for org_id in sorted(self.organisms):
            yield org_id, self.organisms[org_id], self.positions[org_id]

    # ---- accounting ----

    def organism_energy(self) -> float:
        return sum(o.energy for o in self.organisms.values())

    def total_energy(self) -> float:
        return self.organism_energy() + len(self.food) * self.food.pellet_energy

    def advance_epoch(self) -> None:
        self.epoch += 1
        log.info(
            "epoch %d: %d organisms, %d pellets, energy %.2f",
            self.epoch, len(self.organisms), len(self.food), self.total_energy(),
        )

    def stats(self) -> dict:
        return {
            "total_energy": self.total_energy(),
            "population": len(self.organisms),
            "pellets": len(self.food),
            "epoch": self.epoch,
            "tick": self.tick,
            "births": self.births,
            "deaths": self.deaths,
        }

    def validate(self) -> None:
        """
        Raise RuntimeError if the grid disagrees with the organism and
        pellet tables.
        """
        if len(set(self.positions.values())) != len(self.positions):
            raise RuntimeError("two organisms share a cell")
        for c in self.positions.values():
            if self.grid.get(c) != CellType.ORGANISM:
                raise RuntimeError(f"organism cell {c} tagged {self.grid.get(c).name}")
        for c in self.food.pellets:
            if self.grid.get(c) != CellType.CONSUMABLE:
                raise RuntimeError(f"pellet cell {c} tagged {self.grid.get(c).name}")
        if self.grid.count(CellType.ORGANISM) != len(self.positions):
            raise RuntimeError("stray ORGANISM cells on grid")
        if self.grid.count(CellType.CONSUMABLE) != len(self.food):
            raise RuntimeError("stray CONSUMABLE cells on grid")

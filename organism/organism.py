"""
organism_sim module: organism/organism.py

Organism container: genome + species + age + energy.
Position is not stored here; the world keeps it in its own index.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import Optional

import config
from neural.ns import NS
from neural.ns_shape import NsShape
from organism.genome import Genome


def draw_lifespan(rng: random.Random, average: int = config.AVERAGE_LIFESPAN) -> int:
    spread = average * config.LIFESPAN_SPREAD
    return max(1, int(round(rng.gauss(average, spread))))


@dataclass
class Organism:
    genome: Genome
    species: int = 0
    age: int = 0
    energy: float = config.INITIAL_ENERGY
    lifespan: int = config.AVERAGE_LIFESPAN

    # decoded controller, built on first use
    _ns: Optional[NS] = field(default=None, repr=False, compare=False)

    @staticmethod
    def new(
        energy: float,
        genome_len: int,
        rng: random.Random,
        lifespan: Optional[int] = None,
    ) -> "Organism":
        return Organism(
            genome=Genome.new(genome_len, rng),
            species=0,
            age=0,
            energy=energy,
            lifespan=lifespan if lifespan is not None else draw_lifespan(rng),
        )

    def add_energy(self, quantity: float) -> None:
        self.energy += quantity

    def sub_energy(self, quantity: float) -> None:
        self.energy -= quantity

    def is_dead(self) -> bool:
        return self.energy <= 0.0 or self.age > self.lifespan

    def replicate(
        self,
        mut_p: float,
        insert_p: float,
        rng: random.Random,
        lifespan: Optional[int] = None,
    ) -> "Organism":
        """
        Pay REPLICATION_COST and hand exactly that much to the child.
        """
        self.energy -= config.REPLICATION_COST
        return Organism(
            genome=self.genome.replicate(mut_p, insert_p, rng),
            species=self.species,
            age=0,
            energy=config.REPLICATION_COST,
            lifespan=lifespan if lifespan is not None else draw_lifespan(rng),
        )

    def controller(self, shape: NsShape) -> NS:
        # genomes never change after birth, so the decode is reused
        if self._ns is None or self._ns.shape != shape:
            self._ns = NS.decode(self.genome, shape)
        return self._ns

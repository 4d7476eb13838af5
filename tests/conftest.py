import random

import pytest

from organism.gene import Gene
from organism.genome import Genome
from organism.organism import Organism
from neural.action import Action
from neural.neuron import NodeKind
from world.sensing import SENSOR_BIAS
from world.world import Parameters, World


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def params() -> Parameters:
    """Small grid, default controller shape."""
    return Parameters(grid_size=10, n_initial_entities=5, n_max_entities=20, genome_len=8)


@pytest.fixture
def world(params, rng) -> World:
    return World.empty(params, rng)


def fixed_action_genome(action: Action) -> Genome:
    """Bias sensor -> hidden 0 -> ``action``: always picks that action."""
    return Genome(genes=[
        Gene(NodeKind.SENSOR, SENSOR_BIAS, NodeKind.HIDDEN, 0, 1.0),
        Gene(NodeKind.HIDDEN, 0, NodeKind.ACTION, int(action), 1.0),
    ])


def make_organism(action: Action | None = None, energy: float = 1.0, lifespan: int = 1000) -> Organism:
    genome = fixed_action_genome(action) if action is not None else Genome()
    return Organism(genome=genome, energy=energy, lifespan=lifespan)

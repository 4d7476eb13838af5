"""
organism_sim module: organism/gene.py

One encoded synaptic connection.

Endpoints are stored as raw indices in [0, GENE_INDEX_RANGE). They are
only reduced into a concrete node slot when the genome is decoded against
an NsShape, so any gene is decodable whatever the shape.
"""

from __future__ import annotations
from dataclasses import dataclass
import random

import config
from neural.neuron import NodeKind, SOURCE_KINDS, DEST_KINDS


@dataclass(frozen=True)
class Gene:
    src_kind: NodeKind
    src_index: int
    dst_kind: NodeKind
    dst_index: int
    weight: float


def random_source(rng: random.Random) -> tuple[NodeKind, int]:
    return rng.choice(SOURCE_KINDS), rng.randrange(config.GENE_INDEX_RANGE)


def random_dest(rng: random.Random) -> tuple[NodeKind, int]:
    return rng.choice(DEST_KINDS), rng.randrange(config.GENE_INDEX_RANGE)


def random_weight(rng: random.Random) -> float:
    return rng.uniform(-1.0, 1.0)


def random_gene(rng: random.Random) -> Gene:
    src_kind, src_index = random_source(rng)
    dst_kind, dst_index = random_dest(rng)
    return Gene(src_kind, src_index, dst_kind, dst_index, random_weight(rng))

"""
organism_sim module: evolution/mutate.py

Mutation operators for genomes: point mutation of single genes and
insertion of fresh ones.
"""

from __future__ import annotations
import random
from dataclasses import replace
from typing import List, Sequence

import config
from organism.gene import Gene, random_dest, random_gene, random_source


def mutate_gene(gene: Gene, rng: random.Random, sigma: float = config.MUT_SIGMA) -> Gene:
    """
    Return a copy of ``gene`` with one part changed:
      - half the time the weight gets gaussian noise (clamped to [-1, 1])
      - otherwise the source or the destination endpoint is re-drawn
    """
    roll = rng.random()
    if roll < 0.5:
        w = gene.weight + rng.gauss(0.0, sigma)
        return replace(gene, weight=max(-1.0, min(1.0, w)))
    if roll < 0.75:
        src_kind, src_index = random_source(rng)
        return replace(gene, src_kind=src_kind, src_index=src_index)
    dst_kind, dst_index = random_dest(rng)
    return replace(gene, dst_kind=dst_kind, dst_index=dst_index)


def replicate_genes(
    genes: Sequence[Gene],
    mut_p: float,
    insert_p: float,
    rng: random.Random,
    max_len: int = config.MAX_GENOME_LEN,
) -> List[Gene]:
    """
    Copy ``genes`` for a child.

    Insertions are budgeted so the child is never longer than
    ``max(len(genes), max_len)``. ``insert_p=1`` therefore doubles the
    length only while ``2 * len(genes) <= max_len``.
    """
    budget = max_len - len(genes)
    child: List[Gene] = []
    for gene in genes:
        if rng.random() < mut_p:
            gene = mutate_gene(gene, rng)
        child.append(gene)

        if rng.random() < insert_p and budget > 0:
            child.append(random_gene(rng))
            budget -= 1

    return child

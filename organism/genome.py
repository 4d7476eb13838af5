"""
organism_sim module: organism/genome.py

Genome for the neural controller.

- Ordered list of genes, each one weighted sensor/hidden -> hidden/action edge
- Never rejected by the decoder: bad endpoints degrade to a valid edge
- Replication copies gene by gene, so the expected number of mutations
  grows with genome length
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import Iterator, List

from organism.gene import Gene, random_gene
from evolution.mutate import replicate_genes


@dataclass
class Genome:
    genes: List[Gene] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self.genes)

    @staticmethod
    def new(length: int, rng: random.Random) -> "Genome":
        return Genome(genes=[random_gene(rng) for _ in range(length)])

    def replicate(self, mut_p: float, insert_p: float, rng: random.Random) -> "Genome":
        """
        Return a child genome. Each gene is independently point-mutated with
        probability ``mut_p`` and followed by a fresh random gene with
        probability ``insert_p``.
        """
        return Genome(genes=replicate_genes(self.genes, mut_p, insert_p, rng))

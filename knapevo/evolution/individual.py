from __future__ import annotations

import random
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Gene = Literal[0, 1]
Chromosome = tuple[Gene, ...]


class Individual(BaseModel):
    """A chromosome paired with the fitness computed from it."""

    chromosome: Chromosome = Field(description="One gene per catalog item")
    fitness: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def with_gene_flipped(self, position: int) -> Chromosome:
        genes = list(self.chromosome)
        genes[position] = 1 - genes[position]
        return tuple(genes)


def random_chromosome(length: int, rng: random.Random) -> Chromosome:
    """Fair coin per gene."""
    return tuple(rng.randint(0, 1) for _ in range(length))

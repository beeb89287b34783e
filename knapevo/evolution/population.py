from __future__ import annotations

from collections.abc import Sequence
import random

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from knapevo.evolution.individual import Individual, random_chromosome
from knapevo.problems.catalog import KnapsackProblem

Population = list[Individual]


class GenerationRecord(BaseModel):
    """Immutable capture of a population at one point of a run."""

    index: int = Field(ge=1, description="Monotonic generation index, initial is 1")
    population: tuple[Individual, ...]
    total_fitness: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def size(self) -> int:
        return len(self.population)


def total_fitness(population: Sequence[Individual]) -> float:
    return sum(individual.fitness for individual in population)


def snapshot(index: int, population: Sequence[Individual]) -> GenerationRecord:
    # Individuals are frozen, so sharing them between records is safe.
    return GenerationRecord(
        index=index,
        population=tuple(population),
        total_fitness=total_fitness(population),
    )


def make_initial_population(
    problem: KnapsackProblem, size: int, rng: random.Random
) -> Population:
    population = [
        problem.evaluate(random_chromosome(problem.chromosome_length, rng))
        for _ in range(size)
    ]
    logger.debug(
        "[population] Initial population | size={}, total_fitness={}",
        size,
        total_fitness(population),
    )
    return population

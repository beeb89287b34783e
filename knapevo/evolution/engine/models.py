from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from knapevo.evolution.engine.metrics import EngineMetrics
from knapevo.evolution.events import CrossoverEvent, MutationEvent
from knapevo.evolution.individual import Chromosome
from knapevo.evolution.population import GenerationRecord
from knapevo.problems.catalog import Item, KnapsackProblem


class BestSolution(BaseModel):
    """Fittest individual observed anywhere in a run's history."""

    generation: int
    index: int = Field(description="Population index within that generation")
    chromosome: Chromosome
    fitness: float
    items: tuple[int, ...] = Field(description="Catalog indices of packed items")
    total_value: float
    total_weight: float

    model_config = ConfigDict(frozen=True)


class KnapsackSolution(BaseModel):
    """Complete, serializable history of one run."""

    initial_generation: GenerationRecord
    generations: list[GenerationRecord] = Field(default_factory=list)
    items: list[Item]
    capacity: float
    mutations: list[MutationEvent] = Field(default_factory=list)
    crossovers: list[CrossoverEvent] = Field(default_factory=list)
    best: BestSolution
    metrics: EngineMetrics

    @property
    def history(self) -> list[GenerationRecord]:
        return [self.initial_generation, *self.generations]

    @property
    def final_generation(self) -> GenerationRecord:
        return self.generations[-1] if self.generations else self.initial_generation


def find_best(
    problem: KnapsackProblem, records: list[GenerationRecord]
) -> BestSolution:
    """Pick the highest fitness; earliest generation then lowest index wins ties."""
    best_record, best_index = records[0], 0
    best_fitness = records[0].population[0].fitness
    for record in records:
        for index, individual in enumerate(record.population):
            if individual.fitness > best_fitness:
                best_record, best_index, best_fitness = record, index, individual.fitness

    individual = best_record.population[best_index]
    selection = problem.describe(individual.chromosome)
    return BestSolution(
        generation=best_record.index,
        index=best_index,
        chromosome=individual.chromosome,
        fitness=individual.fitness,
        items=selection.indices,
        total_value=selection.total_value,
        total_weight=selection.total_weight,
    )

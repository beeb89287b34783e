from __future__ import annotations

from dataclasses import dataclass, field
import random

from knapevo.evolution.engine.config import RunConfig
from knapevo.evolution.engine.metrics import EngineMetrics
from knapevo.evolution.engine.state import RunState, validate_transition
from knapevo.evolution.events import CrossoverEvent, MutationEvent
from knapevo.evolution.population import (
    GenerationRecord,
    Population,
    make_initial_population,
    snapshot,
)
from knapevo.problems.catalog import KnapsackProblem


@dataclass
class RunContext:
    """Everything one run mutates. Never shared between runs."""

    config: RunConfig
    problem: KnapsackProblem
    rng: random.Random
    population: Population = field(default_factory=list)
    generation: int = 1
    state: RunState = RunState.INITIALIZING
    initial_generation: GenerationRecord | None = None
    generations: list[GenerationRecord] = field(default_factory=list)
    crossovers: list[CrossoverEvent] = field(default_factory=list)
    mutations: list[MutationEvent] = field(default_factory=list)
    metrics: EngineMetrics = field(default_factory=EngineMetrics)

    @classmethod
    def start(cls, config: RunConfig, problem: KnapsackProblem) -> RunContext:
        ctx = cls(config=config, problem=problem, rng=random.Random(config.seed))
        ctx.population = make_initial_population(problem, config.population_size, ctx.rng)
        ctx.initial_generation = snapshot(ctx.generation, ctx.population)
        ctx.metrics.generations_recorded = 1
        return ctx

    def transition(self, new: RunState) -> None:
        validate_transition(self.state, new)
        self.state = new

    def advance(self) -> int:
        self.generation += 1
        return self.generation

    def record(self) -> GenerationRecord:
        """Append a snapshot of the current population under the current index."""
        record = snapshot(self.generation, self.population)
        self.generations.append(record)
        self.metrics.generations_recorded += 1
        return record

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from knapevo.evolution.engine.config import RunConfig
from knapevo.evolution.engine.context import RunContext
from knapevo.evolution.engine.models import KnapsackSolution, find_best
from knapevo.evolution.engine.state import RunState
from knapevo.evolution.operators.base import (
    CrossoverOperator,
    MutationOperator,
    SelectionOperator,
)
from knapevo.evolution.operators.crossover import SinglePointCrossover
from knapevo.evolution.operators.mutation import BitFlipMutation
from knapevo.evolution.operators.selection import RouletteWheelSelection
from knapevo.evolution.population import total_fitness
from knapevo.exceptions import EvolutionError, KnapEvoError
from knapevo.problems.catalog import REFERENCE_PROBLEM, KnapsackProblem

__all__ = ["EvolutionEngine", "solve_knapsack"]


class EvolutionEngine:
    """
    Generational GA over a knapsack problem.

    Every generation step runs selection, then crossover, then a mutation
    trial. Selection and crossover always append their own generation record;
    the mutation trial appends a third one only when it fires. All mutable
    run state lives in a RunContext created by ``run()``, so one engine can be
    run repeatedly and independent engines never interfere.
    """

    def __init__(
        self,
        problem: KnapsackProblem = REFERENCE_PROBLEM,
        config: RunConfig | None = None,
        *,
        selection: SelectionOperator | None = None,
        crossover: CrossoverOperator | None = None,
        mutation: MutationOperator | None = None,
    ):
        self.problem = problem
        self.config = config or RunConfig()
        self.selection = selection or RouletteWheelSelection(
            degenerate_policy=self.config.degenerate_policy
        )
        self.crossover = crossover or SinglePointCrossover(problem)
        self.mutation = mutation or BitFlipMutation(problem, self.config.mutation_rate)

        logger.info(
            "[EvolutionEngine] Init | items={}, capacity={}, population_size={}, "
            "max_generations={}, mutation_rate={}",
            problem.chromosome_length,
            problem.capacity,
            self.config.population_size,
            self.config.max_generations,
            self.config.mutation_rate,
        )

    def run(self) -> KnapsackSolution:
        ctx = RunContext.start(self.config, self.problem)
        logger.info(
            "[EvolutionEngine] Start | seed={}, initial_total_fitness={}",
            self.config.seed,
            ctx.initial_generation.total_fitness,
        )

        ctx.transition(RunState.EVOLVING)
        for _ in range(self.config.max_generations - 1):
            self.evolve_step(ctx)
        ctx.transition(RunState.DONE)

        solution = self._build_solution(ctx)
        logger.info(
            "[EvolutionEngine] Done | records={}, crossovers={}, mutations={}, best_fitness={}",
            ctx.metrics.generations_recorded,
            len(ctx.crossovers),
            len(ctx.mutations),
            solution.best.fitness,
        )
        return solution

    def evolve_step(self, ctx: RunContext) -> None:
        try:
            self._step(ctx)
        except KnapEvoError:
            raise
        except Exception as exc:
            raise EvolutionError(
                f"Evolution step failed at generation {ctx.generation}: {exc}"
            ) from exc

    def _step(self, ctx: RunContext) -> None:
        # Stage 1: selection replaces the whole population
        degenerate = total_fitness(ctx.population) == 0
        ctx.population = self.selection(ctx.population, ctx.rng)
        ctx.metrics.record_selection(degenerate)
        ctx.advance()
        ctx.record()

        # Stage 2: crossover replaces two slots
        ctx.advance()
        ctx.crossovers.append(self.crossover(ctx.population, ctx.rng, ctx.generation))
        ctx.metrics.crossovers += 1
        ctx.record()

        # Stage 3: mutation trial, recorded only when it fires
        fired = self.mutation.should_mutate(ctx.rng)
        ctx.metrics.record_mutation_trial(fired)
        if fired:
            ctx.advance()
            ctx.mutations.append(self.mutation(ctx.population, ctx.rng, ctx.generation))
            ctx.record()

    def _build_solution(self, ctx: RunContext) -> KnapsackSolution:
        return KnapsackSolution(
            initial_generation=ctx.initial_generation,
            generations=list(ctx.generations),
            items=list(self.problem.items),
            capacity=self.problem.capacity,
            mutations=list(ctx.mutations),
            crossovers=list(ctx.crossovers),
            best=find_best(self.problem, [ctx.initial_generation, *ctx.generations]),
            metrics=ctx.metrics.model_copy(),
        )


def solve_knapsack(
    config: RunConfig | Mapping[str, Any] | None = None,
    problem: KnapsackProblem | None = None,
    **overrides: Any,
) -> KnapsackSolution:
    """Run the GA once and return its full history.

    Args:
        config: A RunConfig, a mapping of its fields, or None for defaults
        problem: Problem instance (defaults to the reference catalog)
        **overrides: Individual RunConfig fields taking precedence over *config*

    Raises:
        ConfigurationError: If the configuration is invalid
        DegeneratePopulationError: Under the "raise" policy, when a population
            has zero total fitness
    """
    if isinstance(config, RunConfig):
        run_config = (
            RunConfig.from_mapping(config.model_dump(), **overrides)
            if overrides
            else config
        )
    else:
        run_config = RunConfig.from_mapping(config, **overrides)
    return EvolutionEngine(problem or REFERENCE_PROBLEM, run_config).run()

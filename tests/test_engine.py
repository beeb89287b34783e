import json

import pytest

from knapevo import (
    REFERENCE_PROBLEM,
    ConfigurationError,
    DegeneratePopulationError,
    EvolutionEngine,
    EvolutionError,
    KnapsackProblem,
    RunConfig,
    RunState,
    solve_knapsack,
)
from knapevo.evolution.engine.context import RunContext
from knapevo.evolution.engine.state import validate_transition


def test_defaults():
    config = RunConfig()
    assert config.population_size == 10
    assert config.max_generations == 50
    assert config.mutation_rate == 0.3
    assert config.degenerate_policy == "uniform"


def test_history_completeness():
    solution = solve_knapsack(max_generations=30, seed=7)
    iterations = 29

    assert solution.initial_generation.index == 1
    assert len(solution.history) == 1 + 2 * iterations + len(solution.mutations)
    assert len(solution.crossovers) == iterations
    assert len(solution.mutations) <= iterations
    assert [r.index for r in solution.history] == list(range(1, len(solution.history) + 1))
    assert solution.metrics.generations_recorded == len(solution.history)
    assert solution.metrics.mutations_applied + solution.metrics.mutations_skipped == iterations


def test_population_size_is_invariant():
    solution = solve_knapsack(population_size=7, max_generations=15, seed=3)
    assert all(record.size == 7 for record in solution.history)


def test_records_are_consistent_snapshots():
    solution = solve_knapsack(max_generations=20, seed=11)
    for record in solution.history:
        assert record.total_fitness == sum(ind.fitness for ind in record.population)
        for individual in record.population:
            assert individual.fitness == REFERENCE_PROBLEM.fitness(individual.chromosome)


def test_events_point_at_their_records():
    solution = solve_knapsack(max_generations=25, mutation_rate=0.5, seed=5)
    by_index = {record.index: record for record in solution.history}

    for event in solution.crossovers:
        after = by_index[event.generation]
        before = by_index[event.generation - 1]
        i, j = event.chromosomes
        assert i != j
        changed = [k for k in range(after.size) if after.population[k] != before.population[k]]
        assert set(changed) <= {i, j}

    for event in solution.mutations:
        after = by_index[event.generation].population[event.chromosome_index]
        before = by_index[event.generation - 1].population[event.chromosome_index]
        diff = [k for k, (a, b) in enumerate(zip(after.chromosome, before.chromosome)) if a != b]
        assert diff == [event.mutation_point]


def test_mutation_rate_zero_never_mutates():
    solution = solve_knapsack(mutation_rate=0, max_generations=40, seed=1)
    assert solution.mutations == []
    assert len(solution.generations) == 2 * 39


def test_mutation_rate_one_mutates_every_step():
    solution = solve_knapsack(mutation_rate=1, max_generations=40, seed=1)
    assert len(solution.mutations) == 39
    assert len(solution.generations) == 3 * 39


def test_single_generation_only_has_initial_population():
    solution = solve_knapsack(max_generations=1, seed=2)
    assert solution.generations == []
    assert solution.crossovers == [] and solution.mutations == []
    assert solution.final_generation is solution.initial_generation


def test_population_of_two_always_crosses_both():
    solution = solve_knapsack(population_size=2, max_generations=20, seed=9)
    assert all(set(event.chromosomes) == {0, 1} for event in solution.crossovers)


def test_seeded_runs_are_reproducible():
    first = solve_knapsack(seed=1234)
    second = solve_knapsack(RunConfig(seed=1234))
    assert first.model_dump() == second.model_dump()


def test_runs_do_not_share_state():
    engine = EvolutionEngine(config=RunConfig(max_generations=10, seed=4))
    first = engine.run()
    second = engine.run()
    assert len(first.crossovers) == len(second.crossovers) == 9
    assert first.model_dump() == second.model_dump()


def test_best_solution_is_fittest_in_history():
    solution = solve_knapsack(max_generations=50, seed=21)
    fittest = max(ind.fitness for record in solution.history for ind in record.population)
    best = solution.best
    assert best.fitness == fittest
    record = next(r for r in solution.history if r.index == best.generation)
    assert record.population[best.index].chromosome == best.chromosome
    assert best.total_value == fittest
    assert best.total_weight <= solution.capacity


def test_solution_is_json_serializable():
    solution = solve_knapsack(max_generations=5, seed=8)
    payload = json.loads(solution.model_dump_json())
    assert set(payload) >= {"initial_generation", "generations", "items", "mutations", "crossovers"}
    assert payload["items"][0] == {"value": 4.0, "weight": 12.0}
    assert payload["capacity"] == 15.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"population_size": 1},
        {"population_size": 0},
        {"max_generations": 0},
        {"mutation_rate": -0.01},
        {"mutation_rate": 1.01},
        {"degenerate_policy": "nan"},
        {"unknown": 1},
    ],
)
def test_invalid_configuration_is_rejected(overrides):
    with pytest.raises(ConfigurationError):
        solve_knapsack(**overrides)


def test_mapping_configuration():
    solution = solve_knapsack({"population_size": 4, "max_generations": 3, "seed": 0})
    assert solution.initial_generation.size == 4
    assert len(solution.crossovers) == 2


def test_degenerate_policy_raise_aborts_run():
    # Every item alone already exceeds capacity, so every chromosome has zero fitness
    problem = KnapsackProblem.from_mapping(
        {"capacity": 1, "items": [{"value": 3, "weight": 2}, {"value": 5, "weight": 4}]}
    )
    with pytest.raises(DegeneratePopulationError):
        solve_knapsack(problem=problem, degenerate_policy="raise", seed=0)


def test_degenerate_policy_uniform_keeps_running():
    problem = KnapsackProblem.from_mapping(
        {"capacity": 1, "items": [{"value": 3, "weight": 2}, {"value": 5, "weight": 4}]}
    )
    solution = solve_knapsack(problem=problem, max_generations=10, seed=0)
    assert all(record.total_fitness == 0 for record in solution.history)
    assert solution.metrics.degenerate_selections == 9
    assert solution.best.fitness == 0


def test_run_state_transitions():
    ctx = RunContext.start(RunConfig(population_size=3, seed=0), REFERENCE_PROBLEM)
    assert ctx.state is RunState.INITIALIZING
    ctx.transition(RunState.EVOLVING)
    ctx.transition(RunState.DONE)
    with pytest.raises(EvolutionError):
        ctx.transition(RunState.EVOLVING)
    with pytest.raises(EvolutionError):
        validate_transition(RunState.INITIALIZING, RunState.DONE)


def test_operator_failure_is_wrapped():
    class BrokenSelection:
        def __call__(self, population, rng):
            raise RuntimeError("boom")

    engine = EvolutionEngine(config=RunConfig(max_generations=3), selection=BrokenSelection())
    with pytest.raises(EvolutionError, match="boom"):
        engine.run()

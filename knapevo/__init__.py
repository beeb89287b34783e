"""
knapevo - genetic-algorithm solver for the 0/1 knapsack problem.

Evolves bit-vector chromosomes with roulette-wheel selection, single-point
crossover and bit-flip mutation, recording every generation and operator event.
"""

__version__ = "0.1.0"

from knapevo.evolution.engine import (  # noqa: F401
    BestSolution,
    EngineMetrics,
    EvolutionEngine,
    KnapsackSolution,
    RunConfig,
    RunState,
    solve_knapsack,
)
from knapevo.evolution.events import CrossoverEvent, MutationEvent  # noqa: F401
from knapevo.evolution.individual import Individual  # noqa: F401
from knapevo.evolution.population import GenerationRecord  # noqa: F401
from knapevo.exceptions import (  # noqa: F401
    ConfigurationError,
    DegeneratePopulationError,
    EvolutionError,
    KnapEvoError,
)
from knapevo.problems import REFERENCE_PROBLEM, Item, KnapsackProblem  # noqa: F401

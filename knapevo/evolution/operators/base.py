from abc import ABC, abstractmethod
import random

from knapevo.evolution.events import CrossoverEvent, MutationEvent
from knapevo.evolution.population import Population
from knapevo.exceptions import ConfigurationError
from knapevo.problems.catalog import KnapsackProblem


class SelectionOperator(ABC):
    """Builds a new population of the same size from an existing one."""

    @abstractmethod
    def __call__(self, population: Population, rng: random.Random) -> Population:
        """Select individuals for the next generation.

        Args:
            population: Current population (left untouched)
            rng: Run-scoped random source

        Returns:
            A new list with as many individuals as *population*
        """


class CrossoverOperator(ABC):
    """Recombines individuals, replacing parents in place."""

    def __init__(self, problem: KnapsackProblem):
        self.problem = problem

    @abstractmethod
    def __call__(
        self, population: Population, rng: random.Random, generation: int
    ) -> CrossoverEvent:
        """Recombine two individuals of *population* in place.

        Args:
            population: Run-owned population, modified in place
            rng: Run-scoped random source
            generation: Index of the record that will hold the result

        Returns:
            The event describing the recombination
        """


class MutationOperator(ABC):
    """Alters individuals in place when a per-generation trial fires."""

    def __init__(self, problem: KnapsackProblem, mutation_rate: float):
        if not 0.0 <= mutation_rate <= 1.0:
            raise ConfigurationError(f"mutation_rate must be in [0, 1], got {mutation_rate}")
        self.problem = problem
        self.mutation_rate = mutation_rate

    def should_mutate(self, rng: random.Random) -> bool:
        return rng.random() < self.mutation_rate

    @abstractmethod
    def __call__(
        self, population: Population, rng: random.Random, generation: int
    ) -> MutationEvent:
        """Mutate one individual of *population* in place."""

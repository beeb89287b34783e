import random

from loguru import logger

from knapevo.evolution.events import CrossoverEvent
from knapevo.evolution.individual import Chromosome
from knapevo.evolution.operators.base import CrossoverOperator
from knapevo.evolution.population import Population
from knapevo.exceptions import ConfigurationError


def single_point(
    parent1: Chromosome, parent2: Chromosome, point: int
) -> tuple[Chromosome, Chromosome]:
    """Swap the tails of two chromosomes at *point*.

    The first offspring keeps ``parent1``'s head and takes ``parent2``'s tail,
    the second is the mirror image. A point of 0 swaps the parents whole.
    """
    return parent1[:point] + parent2[point:], parent2[:point] + parent1[point:]


class SinglePointCrossover(CrossoverOperator):
    """Recombines one distinct pair of individuals per call."""

    def __call__(
        self, population: Population, rng: random.Random, generation: int
    ) -> CrossoverEvent:
        if len(population) < 2:
            raise ConfigurationError(
                f"Crossover needs at least 2 individuals, got {len(population)}"
            )

        first, second = rng.sample(range(len(population)), 2)
        point = rng.randrange(self.problem.chromosome_length)

        offspring1, offspring2 = single_point(
            population[first].chromosome, population[second].chromosome, point
        )
        population[first] = self.problem.evaluate(offspring1)
        population[second] = self.problem.evaluate(offspring2)

        logger.debug(
            "[SinglePointCrossover] Generation {} | parents=({}, {}), point={}, fitness=({}, {})",
            generation,
            first,
            second,
            point,
            population[first].fitness,
            population[second].fitness,
        )
        return CrossoverEvent(
            generation=generation, chromosomes=(first, second), crossover_point=point
        )

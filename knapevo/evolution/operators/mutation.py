import random

from loguru import logger

from knapevo.evolution.events import MutationEvent
from knapevo.evolution.operators.base import MutationOperator
from knapevo.evolution.population import Population


class BitFlipMutation(MutationOperator):
    """Flips a single random gene of a single random individual."""

    def __call__(
        self, population: Population, rng: random.Random, generation: int
    ) -> MutationEvent:
        index = rng.randrange(len(population))
        point = rng.randrange(self.problem.chromosome_length)

        before = population[index]
        population[index] = self.problem.evaluate(before.with_gene_flipped(point))

        logger.debug(
            "[BitFlipMutation] Generation {} | index={}, point={}, fitness {} -> {}",
            generation,
            index,
            point,
            before.fitness,
            population[index].fitness,
        )
        return MutationEvent(
            generation=generation, chromosome_index=index, mutation_point=point
        )

from bisect import bisect_left
from itertools import accumulate
import random
from typing import Literal

from loguru import logger

from knapevo.evolution.operators.base import SelectionOperator
from knapevo.evolution.population import Population, total_fitness
from knapevo.exceptions import DegeneratePopulationError

DegeneratePolicy = Literal["uniform", "raise"]


class RouletteWheelSelection(SelectionOperator):
    """Fitness-proportionate sampling with replacement.

    Each of the N draws takes a uniform ``r`` in [0, 1) and picks the first
    individual whose cumulative fitness share is ``>= r``. When the population
    carries no fitness at all, ``degenerate_policy`` decides what happens:
    ``"uniform"`` gives every individual the same share, ``"raise"`` fails with
    :class:`DegeneratePopulationError`.
    """

    def __init__(self, degenerate_policy: DegeneratePolicy = "uniform"):
        if degenerate_policy not in ("uniform", "raise"):
            raise ValueError(f"Unknown degenerate policy: {degenerate_policy!r}")
        self.degenerate_policy = degenerate_policy

    def breakpoints(self, population: Population) -> list[float]:
        total = total_fitness(population)
        if total > 0:
            return [c / total for c in accumulate(ind.fitness for ind in population)]

        if self.degenerate_policy == "raise":
            raise DegeneratePopulationError(
                f"All {len(population)} individuals have zero fitness"
            )
        logger.warning(
            "[RouletteWheelSelection] Zero total fitness | size={}, falling back to uniform",
            len(population),
        )
        size = len(population)
        return [(k + 1) / size for k in range(size)]

    def __call__(self, population: Population, rng: random.Random) -> Population:
        if not population:
            return []

        wheel = self.breakpoints(population)
        last = len(population) - 1
        selected = [
            population[min(bisect_left(wheel, rng.random()), last)]
            for _ in range(len(population))
        ]

        logger.debug(
            "[RouletteWheelSelection] Selected {} individuals | total_fitness {} -> {}",
            len(selected),
            total_fitness(population),
            total_fitness(selected),
        )
        return selected

from knapevo.evolution.operators.base import (
    CrossoverOperator,
    MutationOperator,
    SelectionOperator,
)
from knapevo.evolution.operators.crossover import SinglePointCrossover, single_point
from knapevo.evolution.operators.mutation import BitFlipMutation
from knapevo.evolution.operators.selection import (
    DegeneratePolicy,
    RouletteWheelSelection,
)

__all__ = [
    "BitFlipMutation",
    "CrossoverOperator",
    "DegeneratePolicy",
    "MutationOperator",
    "RouletteWheelSelection",
    "SelectionOperator",
    "SinglePointCrossover",
    "single_point",
]

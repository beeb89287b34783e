from knapevo.problems.catalog import (
    REFERENCE_CAPACITY,
    REFERENCE_ITEMS,
    REFERENCE_PROBLEM,
    Item,
    ItemSelection,
    KnapsackProblem,
)

__all__ = [
    "Item",
    "ItemSelection",
    "KnapsackProblem",
    "REFERENCE_CAPACITY",
    "REFERENCE_ITEMS",
    "REFERENCE_PROBLEM",
]

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic import ValidationError as PydanticValidationError

from knapevo.evolution.individual import Individual
from knapevo.exceptions import ConfigurationError, ValidationError


class Item(BaseModel):
    """A catalog entry. Its position in the catalog is its identity."""

    value: float = Field(ge=0, description="Value gained when the item is packed")
    weight: float = Field(ge=0, description="Weight the item adds to the knapsack")

    model_config = ConfigDict(frozen=True)


class ItemSelection(BaseModel):
    """Decoded view of a chromosome against a catalog."""

    indices: tuple[int, ...] = Field(description="Catalog indices of packed items")
    total_value: float
    total_weight: float
    fits: bool = Field(description="Whether total_weight is within capacity")

    model_config = ConfigDict(frozen=True)


class KnapsackProblem(BaseModel):
    """A fixed item catalog and the capacity it must be packed into."""

    items: tuple[Item, ...] = Field(min_length=1)
    capacity: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def chromosome_length(self) -> int:
        return len(self.items)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> KnapsackProblem:
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid knapsack problem: {exc}") from exc

    def _check_length(self, chromosome: Sequence[int]) -> None:
        if len(chromosome) != len(self.items):
            raise ValidationError(
                f"Chromosome has {len(chromosome)} genes, catalog has {len(self.items)} items"
            )

    def describe(self, chromosome: Sequence[int]) -> ItemSelection:
        self._check_length(chromosome)
        indices = tuple(i for i, gene in enumerate(chromosome) if gene)
        total_value = sum(self.items[i].value for i in indices)
        total_weight = sum(self.items[i].weight for i in indices)
        return ItemSelection(
            indices=indices,
            total_value=total_value,
            total_weight=total_weight,
            fits=total_weight <= self.capacity,
        )

    def fitness(self, chromosome: Sequence[int]) -> float:
        """Total value of the packed items, or 0 when capacity is exceeded.

        There is no partial credit: any excess weight nullifies the whole
        selection.
        """
        self._check_length(chromosome)
        total_value = 0.0
        total_weight = 0.0
        for gene, item in zip(chromosome, self.items):
            if gene:
                total_value += item.value
                total_weight += item.weight
        return 0.0 if total_weight > self.capacity else total_value

    def evaluate(self, chromosome: Sequence[int]) -> Individual:
        genes = tuple(chromosome)
        return Individual(chromosome=genes, fitness=self.fitness(genes))


REFERENCE_ITEMS: tuple[Item, ...] = (
    Item(value=4, weight=12),
    Item(value=2, weight=2),
    Item(value=2, weight=1),
    Item(value=1, weight=1),
    Item(value=10, weight=4),
)
REFERENCE_CAPACITY = 15.0

REFERENCE_PROBLEM = KnapsackProblem(items=REFERENCE_ITEMS, capacity=REFERENCE_CAPACITY)

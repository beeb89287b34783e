from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CrossoverEvent(BaseModel):
    """A single-point crossover performed between two population slots."""

    generation: int = Field(ge=1, description="Index of the record holding the offspring")
    chromosomes: tuple[int, int] = Field(description="Population indices of both parents")
    crossover_point: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class MutationEvent(BaseModel):
    """A single bit flip applied to one population slot."""

    generation: int = Field(ge=1, description="Index of the record holding the mutant")
    chromosome_index: int = Field(ge=0)
    mutation_point: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

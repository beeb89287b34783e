from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from knapevo.evolution.operators.selection import DegeneratePolicy
from knapevo.exceptions import ConfigurationError


class RunConfig(BaseModel):
    """Configuration options for a single EvolutionEngine run."""

    population_size: int = Field(
        default=10, ge=2, description="Number of individuals in every generation"
    )
    max_generations: int = Field(
        default=50,
        ge=1,
        description="Generation budget; the initial population counts as the first",
    )
    mutation_rate: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Probability of one bit-flip mutation per generation step",
    )
    seed: int | None = Field(
        default=None, description="Seed for the run's random source (None = entropy)"
    )
    degenerate_policy: DegeneratePolicy = Field(
        default="uniform",
        description="What selection does when total fitness is zero",
    )
    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, **overrides: Any) -> RunConfig:
        values = {k: v for k, v in dict(data or {}).items() if v is not None or k == "seed"}
        values.update(overrides)
        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid run configuration: {exc}") from exc

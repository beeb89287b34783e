from __future__ import annotations

from pydantic import BaseModel, Field


class EngineMetrics(BaseModel):
    """Per-run operator counters."""

    generations_recorded: int = Field(
        default=0, description="Generation records produced, the initial one included"
    )
    selections: int = Field(default=0, description="Selection steps performed")
    crossovers: int = Field(default=0, description="Crossover steps performed")
    mutations_applied: int = Field(
        default=0, description="Mutation trials that fired"
    )
    mutations_skipped: int = Field(
        default=0, description="Mutation trials that did not fire"
    )
    degenerate_selections: int = Field(
        default=0, description="Selections run on a zero-fitness population"
    )

    def record_selection(self, degenerate: bool) -> None:
        self.selections += 1
        if degenerate:
            self.degenerate_selections += 1

    def record_mutation_trial(self, fired: bool) -> None:
        if fired:
            self.mutations_applied += 1
        else:
            self.mutations_skipped += 1

"""Tiny helper functions turning Hydra configs into engine objects."""

from typing import Any

from omegaconf import DictConfig, OmegaConf

from knapevo.evolution.engine import EvolutionEngine, RunConfig
from knapevo.exceptions import ConfigurationError
from knapevo.problems.catalog import KnapsackProblem


def _to_dict(node: Any, name: str) -> dict[str, Any]:
    if node is None:
        return {}
    if isinstance(node, DictConfig):
        return OmegaConf.to_container(node, resolve=True)  # type: ignore[return-value]
    if isinstance(node, dict):
        return dict(node)
    raise ConfigurationError(f"'{name}' must be a mapping, got {type(node).__name__}")


def build_run_config(cfg: DictConfig) -> RunConfig:
    """Build a RunConfig from the ``run`` group."""
    return RunConfig.from_mapping(_to_dict(cfg.get("run"), "run"))


def build_problem(cfg: DictConfig) -> KnapsackProblem:
    """Build a KnapsackProblem from the ``problem`` group.

    Only ``items`` and ``capacity`` are read; descriptive keys such as
    ``name`` are ignored.
    """
    data = _to_dict(cfg.get("problem"), "problem")
    return KnapsackProblem.from_mapping(
        {key: data[key] for key in ("items", "capacity") if key in data}
    )


def build_engine(cfg: DictConfig) -> EvolutionEngine:
    return EvolutionEngine(build_problem(cfg), build_run_config(cfg))

from knapevo.config.helpers import build_engine, build_problem, build_run_config

__all__ = [
    "build_engine",
    "build_problem",
    "build_run_config",
]

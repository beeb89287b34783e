from datetime import datetime, timezone
from pathlib import Path
import time

import hydra
from hydra.utils import to_absolute_path
from loguru import logger
from omegaconf import DictConfig

from knapevo.config import build_engine
from knapevo.evolution.engine import KnapsackSolution
from knapevo.utils.logger_setup import setup_logger


def log_summary(solution: KnapsackSolution) -> None:
    best = solution.best
    final = solution.final_generation
    logger.info("Best selection: items={} value={} weight={}/{}",
                list(best.items), best.total_value, best.total_weight, solution.capacity)
    logger.info("  Found in generation {} at index {}: {}",
                best.generation, best.index, "".join(map(str, best.chromosome)))
    logger.info("Final generation {}: total_fitness={}", final.index, final.total_fitness)
    logger.info("Events: crossovers={} mutations={}", len(solution.crossovers), len(solution.mutations))
    if solution.metrics.degenerate_selections:
        logger.warning("Degenerate selections: {}", solution.metrics.degenerate_selections)


def write_solution(solution: KnapsackSolution, path: str, indent: int | None) -> Path:
    target = Path(to_absolute_path(path))
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(solution.model_dump_json(indent=indent), encoding="utf-8")
    return target


def run_experiment(cfg: DictConfig) -> KnapsackSolution:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("knapevo run")
    logger.info("=" * 80)
    logger.info(f"Problem: {cfg.problem.get('name', 'custom')}")
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    try:
        engine = build_engine(cfg)
        solution = engine.run()
        log_summary(solution)

        if cfg.output.path:
            target = write_solution(solution, cfg.output.path, cfg.output.indent)
            logger.info(f"Result written to {target}")
        return solution

    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Run failed: {e}")
        raise
    finally:
        duration = time.time() - start_time
        logger.info(f"Total run duration: {duration:.3f} seconds")
        logger.info("=" * 80)


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    log_file_path = setup_logger(
        level=cfg.logging.level,
        log_dir=cfg.logging.log_dir,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    if log_file_path:
        logger.info(f"Log file: {log_file_path}")
    run_experiment(cfg)


if __name__ == "__main__":
    main()

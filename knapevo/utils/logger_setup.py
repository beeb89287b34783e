"""
Logging setup for knapevo runs.

loguru configuration with coloured console output and optional file logging.
"""

from datetime import datetime, timezone
import os
import sys

from loguru import logger


def setup_logger(
    level: str = "INFO",
    log_dir: str | None = None,
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
) -> str | None:
    """
    Configure console logging and, when *log_dir* is given, a rotating log file.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files, or None for console only
        rotation: Log rotation policy (e.g., "50 MB", "1 day")
        retention: Log retention policy (e.g., "30 days", "1 month")
        enable_colors: Whether to enable coloured console output

    Returns:
        Path to the log file, or None when logging to console only
    """
    # Remove any existing handlers to avoid duplicates
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    if colorize:
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<blue>{function}</blue>:<yellow>{line}</yellow> | "
            "<level>{message}</level>"
        )
    else:
        console_format = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        )

    logger.add(
        sys.stderr,
        level=level,
        format=console_format,
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )

    if log_dir is None:
        logger.debug("Log level: {}, colors: {}", level, colorize)
        return None

    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"knapevo_{timestamp}.log")

    # No colours in file
    logger.add(
        log_file,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )

    logger.info("Logging to console and {}", log_file)
    logger.debug("Log level: {}, colors: {}", level, colorize)
    return log_file

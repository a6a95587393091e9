"""Loguru setup for the day planner.

The engine itself only calls ``logger.debug``/``info``/``error``; sinks are
configured here once, on import, from ``settings``.
"""

import sys
from pathlib import Path

from loguru import logger

from dayplan.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
# Invariant failures carry their code, details and window in ``extra``
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Replace all loguru sinks with a stderr sink and an optional file sink.

    Args:
        level: Minimum level; defaults to ``settings.log_level``
        log_file: Path of a rotating log file; defaults to ``settings.log_file``
            (console only when both are unset)
        rotation: When to rotate the file (e.g., "10 MB", "1 day")
        retention: How long rotated files are kept (e.g., "7 days")
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

    logger.debug(f"Logger initialized with level={level}, file={log_file or '-'}")


setup_logger()

"""
Logging configuration for tilecollapse.

Usage:
    from tilecollapse.logging_config import setup_logging, get_logger
    setup_logging(logging.INFO)               # console only
    setup_logging(logging.DEBUG, "run.log")   # plus rotating file

All tilecollapse.* loggers hang off the ``tilecollapse`` root logger.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "tilecollapse"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB per file
BACKUP_COUNT = 3


def setup_logging(
    level: int = logging.WARNING,
    log_file: Path | str | None = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Configure the tilecollapse logger tree.

    Args:
        level: Level for console output on stderr
        log_file: Optional path for a rotating log file
        file_level: Level for the file handler (default: DEBUG)

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers (for re-initialization)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(fmt="%(levelname)-8s | %(name)-28s | %(message)s")
    )
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-28s | %(funcName)-20s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
        root_logger.debug(f"Log file: {log_path.absolute()}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger configured as child of the tilecollapse logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_step(
    logger: logging.Logger,
    step: int,
    action: str,
    details: str | None = None,
) -> None:
    """Log solver step activity."""
    details_str = f" | {details}" if details else ""
    logger.debug(f"STEP {step:05d} | {action}{details_str}")

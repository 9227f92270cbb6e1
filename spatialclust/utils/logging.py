# spatialclust/utils/logging.py
"""
Logging utilities for spatialclust and its scripts.

Methods:
    setup_logging: Configure the root logger, optionally mirroring to a file.
    get_logger: Get a logger instance.
"""

# Standard Library Imports
import logging
from pathlib import Path
from typing import Optional, Tuple

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third party loggers that flood DEBUG output (font scans, image plugins)
QUIET_LOGGERS: Tuple[str, ...] = ("matplotlib", "PIL")


def _resolve_level(log_level: Optional[str]) -> int:
    if not log_level:
        return logging.INFO
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_logging(
    log_level: Optional[str] = "INFO",
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for spatialclust runs.

    Clustering runs log their configuration at INFO and per-iteration
    cluster sizes at DEBUG. Plotting libraries are held at WARNING so a
    DEBUG run only shows clustering output.

    Args:
        log_level: Logging level (e.g., "INFO", "DEBUG", "WARNING", "ERROR", "CRITICAL").
        log_file: Path to the log file (optional). Missing parent
            directories are created.

    Raises:
        ValueError: If log_level is not a known level name.
    """
    level = _resolve_level(log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        )
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.
    """
    return logging.getLogger(name)

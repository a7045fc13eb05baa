"""
Logging configuration for the GLYERAL recommendation service.

Everything logs under the "glyeral" namespace. The API and the Streamlit UI
both call setup_logging() at startup; Streamlit reruns call it again.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


ROOT_LOGGER = "glyeral"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int):
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the glyeral logger.

    Args:
        level: DEBUG, INFO, WARNING or ERROR. Falls back to $LOG_LEVEL, then INFO.
        log_file: Also write to this file. Falls back to $LOG_FILE.

    Returns:
        The "glyeral" logger
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_num = logging.getLevelName(level_name)
    if not isinstance(level_num, int):
        level_num = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level_num)

    # Reruns replace handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level_num)

    log_file = log_file or os.getenv("LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_path, encoding="utf-8"), level_num)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the glyeral namespace, e.g. get_logger("api") -> "glyeral.api"."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)

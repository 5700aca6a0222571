"""Utilities for configuring application logging."""
import logging
import sys
from datetime import datetime
from typing import Optional

from config import get_log_dir, get_log_level

_LOGGER_NAME = "recipe_normalizer"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def _configure_base_logger(force: bool = False) -> logging.Logger:
    """Configure (once, unless forced) the base logger used across the project."""

    base_logger = logging.getLogger(_LOGGER_NAME)
    if base_logger.handlers and not force:
        return base_logger

    try:
        level = get_log_level()
    except RuntimeError:
        # only an explicit configure_logging() call rejects a bad LOG_LEVEL
        if force:
            raise
        level = logging.INFO

    for handler in list(base_logger.handlers):
        base_logger.removeHandler(handler)
        handler.close()

    base_logger.setLevel(level)
    base_logger.propagate = False

    formatter = logging.Formatter(_FORMAT)

    # stdout is reserved for CLI output
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    base_logger.addHandler(stream_handler)

    log_dir = get_log_dir()
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"recipe_normalizer_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        base_logger.addHandler(file_handler)

    base_logger.debug("Logger configured with %d handler(s)", len(base_logger.handlers))
    return base_logger


def configure_logging() -> logging.Logger:
    """Rebuild handlers from the current environment (call after ``load_dotenv``)."""
    return _configure_base_logger(force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger that shares the base handler configuration."""

    base_logger = _configure_base_logger()
    if not name or name == _LOGGER_NAME:
        return base_logger

    return base_logger.getChild(name)

"""Environment-driven settings. Values are read at call time so a ``.env``
loaded by the CLI is honoured."""
import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_OUT_DIR = "./out"
DEFAULT_LOG_LEVEL = "INFO"


def get_out_dir(override: Optional[str] = None) -> Path:
    return Path(override or os.getenv("RECIPE_OUT_DIR") or DEFAULT_OUT_DIR)


def get_log_level() -> int:
    name = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        message = f"Unknown LOG_LEVEL '{name}'."
        logging.getLogger(__name__).error(message)
        raise RuntimeError(message)
    return level


def get_log_dir() -> Optional[Path]:
    log_dir = os.getenv("LOG_DIR")
    return Path(log_dir) if log_dir else None

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def configure_logging(level: str = "INFO", log_path: Optional[Union[str, Path]] = None) -> None:
    """Route structlab log records to stderr (and optionally a rotating file).

    The package is silent until this is called.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <7} | {name} | {message}")
    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_path), level=level, rotation="5 MB", retention=10, backtrace=False, diagnose=False)
    logger.enable("structlab")


def disable_logging() -> None:
    logger.disable("structlab")
